import pytest

from twohand import (
    CursorData,
    CursorOccurrence,
    HitResult,
    Mod,
    MovementType,
    Position,
    ReplayData,
    ReplayObjectData,
)


@pytest.fixture
def cursor():
    return CursorData.from_arrays(
        time=[100, 110, 120, 120],
        x=[0, 10, 20, 20],
        y=[5, 5, 5, 5],
        id=[0, 1, 1, 2],
    )


def test_from_arrays(cursor):
    assert cursor.size == len(cursor) == 4
    assert cursor[0] == CursorOccurrence(
        100.0,
        Position(0, 5),
        MovementType.DOWN,
    )
    assert cursor[-1].id is MovementType.UP
    assert list(cursor.times) == [100, 110, 120, 120]


def test_from_arrays_mismatched_lengths():
    with pytest.raises(ValueError):
        CursorData.from_arrays([1, 2], [0], [0, 0], [0, 2])


def test_unsorted_occurrences():
    with pytest.raises(ValueError):
        CursorData([
            CursorOccurrence(20, Position(0, 0), MovementType.DOWN),
            CursorOccurrence(10, Position(0, 0), MovementType.UP),
        ])


def test_first_at_or_after(cursor):
    assert cursor.first_at_or_after(0) == 0
    assert cursor.first_at_or_after(110) == 1
    assert cursor.first_at_or_after(115) == 2
    # the lookup never fails, it points one past the end
    assert cursor.first_at_or_after(500) == cursor.size


def test_empty_cursor():
    cursor = CursorData([])
    assert cursor.size == 0
    assert cursor.first_at_or_after(0) == 0


def test_replay_data(cursor):
    replay_data = ReplayData(
        [cursor, CursorData([])],
        [
            ReplayObjectData(0, HitResult.great),
            ReplayObjectData(12, HitResult.good),
            ReplayObjectData(-40, HitResult.meh),
            ReplayObjectData(0, HitResult.miss),
        ],
        Mod.parse('sd'),
    )
    assert replay_data.precise
    assert replay_data.speed_multiplier == 1.5
    assert replay_data.active_cursor_count == 1
    assert (
        replay_data.count_300,
        replay_data.count_100,
        replay_data.count_50,
        replay_data.count_miss,
    ) == (1, 1, 1, 1)
    assert round(replay_data.accuracy, 4) == 0.375
