import pytest

from twohand import (
    Beatmap,
    Circle,
    CursorData,
    CursorOccurrence,
    HitResult,
    MovementType,
    Position,
    ReplayObjectData,
    Slider,
    Spinner,
    StarRating,
)
from twohand.analysis.assigner import (
    CursorIndexAssigner,
    CursorInformation,
    DragState,
    hit_window_offset,
)
from twohand.example_data import alternating_jumps, drag, left, tap
from twohand.mod import droid_hit_windows

great = ReplayObjectData(0.0, HitResult.great)
miss = ReplayObjectData(0.0, HitResult.miss)


def difficulty_objects(*hit_objects):
    beatmap = Beatmap(
        circle_size=4,
        overall_difficulty=8,
        hit_objects=list(hit_objects),
    )
    return StarRating(beatmap).objects


def assigner(*streams, offset=0):
    return CursorIndexAssigner(
        [CursorData(stream) for stream in streams],
        droid_hit_windows(8),
        offset,
    )


def test_hit_window_offset():
    cursor = CursorData([
        CursorOccurrence(0, left, MovementType.DOWN),
        CursorOccurrence(8, left, MovementType.MOVE),
        CursorOccurrence(20, left, MovementType.MOVE),
        CursorOccurrence(30, left, MovementType.UP),
    ])
    single = CursorData([CursorOccurrence(500, left, MovementType.DOWN)])

    assert hit_window_offset([cursor, single], 1000, 1000) == 8
    # the first move is before the first object can be hit
    assert hit_window_offset([cursor, single], 1000, 990) == 12


def test_hit_window_offset_without_moves():
    _, replay_data = alternating_jumps()
    assert hit_window_offset(replay_data.cursor_movement, 1000, 220) == 0
    assert hit_window_offset([], 1000, 220) == 0


def test_alternating_fingers():
    star_rating, replay_data = alternating_jumps(count=2)
    first, second = star_rating.objects
    cursor_index_assigner = CursorIndexAssigner(
        replay_data.cursor_movement,
        droid_hit_windows(8),
        0,
    )

    index, state = cursor_index_assigner.cursor_index(first, great, second)
    assert index == 0
    # a tap is not a drag
    assert state == DragState.initial

    index, state = cursor_index_assigner.cursor_index(second, great)
    assert index == 1
    assert state == DragState.initial


def test_miss_and_spinner():
    circle, spinner = difficulty_objects(
        Circle(left, 1000),
        Spinner(1100, 2000),
    )
    cursor_index_assigner = assigner(tap(1000, left), tap(1100, left))
    state = DragState(True, 1, True)

    assert cursor_index_assigner.cursor_index(circle, miss, None, state) == (
        -1,
        DragState(True, -1, False),
    )
    assert cursor_index_assigner.cursor_index(spinner, great)[0] == -1


def test_not_found():
    circle, = difficulty_objects(Circle(left, 1000))
    cursor_index_assigner = assigner(tap(1000, Position(400, 192)), [])
    assert cursor_index_assigner.candidates(circle, great) == []
    assert cursor_index_assigner.cursor_index(circle, great)[0] == -1


def test_closest_cursor_wins():
    circle, = difficulty_objects(Circle(left, 1000))
    cursor_index_assigner = assigner(
        tap(1000, Position(110, 192)),
        tap(1000, Position(105, 192)),
        tap(1000, Position(95, 192)),
    )
    assert cursor_index_assigner.candidates(circle, great) == [
        CursorInformation(0, 10),
        CursorInformation(1, 5),
        CursorInformation(2, 5),
    ]
    # ties go to the lowest index
    assert cursor_index_assigner.cursor_index(circle, great)[0] == 1


def test_slider_radius():
    near = Position(100, 252)
    slider, = difficulty_objects(Slider(left, 1000, 1300, Position(300, 192)))
    circle, = difficulty_objects(Circle(left, 1000))
    cursor_index_assigner = assigner(tap(1000, near))

    assert cursor_index_assigner.candidates(slider, great) == [
        CursorInformation(0, 60),
    ]
    assert cursor_index_assigner.candidates(circle, great) == []


def test_hit_window_by_result():
    circle, slider = difficulty_objects(
        Circle(left, 1000),
        Slider(left, 2000, 2300, Position(300, 192)),
    )
    cursor_index_assigner = assigner()
    windows = droid_hit_windows(8)

    assert cursor_index_assigner.half_width(circle, great) == windows.hit_300
    assert cursor_index_assigner.half_width(
        circle,
        ReplayObjectData(0, HitResult.good),
    ) == windows.hit_100
    assert cursor_index_assigner.half_width(
        circle,
        ReplayObjectData(0, HitResult.meh),
    ) == windows.hit_50
    assert cursor_index_assigner.half_width(slider, great) == windows.hit_50


def test_interpolation():
    circle, = difficulty_objects(Circle(Position(256, 192), 1000))
    # the recorded positions are both half the screen away but the finger
    # passed right over the circle between them
    cursor_index_assigner = assigner([
        CursorOccurrence(990, Position(0, 192), MovementType.DOWN),
        CursorOccurrence(1010, Position(512, 192), MovementType.MOVE),
    ])
    assert cursor_index_assigner.candidates(circle, great) == [
        CursorInformation(0, 0),
    ]


def test_stops_after_late_input():
    circle, = difficulty_objects(Circle(left, 1000))
    cursor_index_assigner = assigner([
        CursorOccurrence(1050, Position(400, 192), MovementType.DOWN),
        CursorOccurrence(1055, left, MovementType.DOWN),
    ])
    assert cursor_index_assigner.candidates(circle, great) == []


def test_release_before_hit_is_ignored():
    circle, = difficulty_objects(Circle(left, 1000))
    cursor_index_assigner = assigner([
        CursorOccurrence(950, Position(400, 192), MovementType.DOWN),
        CursorOccurrence(960, left, MovementType.UP),
        CursorOccurrence(1000, left, MovementType.DOWN),
    ])
    assert cursor_index_assigner.candidates(circle, great) == [
        CursorInformation(0, 0),
    ]


@pytest.fixture
def continued_drag():
    tail = Position(300, 192)
    objects = difficulty_objects(
        Slider(left, 1000, 1300, tail),
        Circle(Position(400, 192), 1400),
    )
    cursor_index_assigner = assigner(
        drag(1000, 1300, left, tail) + tap(1400, Position(412, 192)),
        tap(1400, Position(402, 192)),
    )
    return objects, cursor_index_assigner


def test_drag_continues_to_next_object(continued_drag):
    (slider, circle), cursor_index_assigner = continued_drag

    index, state = cursor_index_assigner.cursor_index(slider, great, circle)
    assert index == 0
    assert state == DragState(True, 0, True)

    # without the drag the closer cursor wins
    assert cursor_index_assigner.cursor_index(circle, great)[0] == 1
    assert cursor_index_assigner.cursor_index(
        circle,
        great,
        None,
        state,
    ) == (0, DragState(True, -1, False))


def test_drag_away_from_next_object():
    tail = Position(300, 192)
    target = Position(50, 192)
    slider, circle = difficulty_objects(
        Slider(left, 1000, 1300, tail),
        Circle(target, 1400),
    )
    cursor_index_assigner = assigner(
        drag(1000, 1300, left, tail) + tap(1400, target),
        tap(1400, Position(55, 192)),
    )

    index, state = cursor_index_assigner.cursor_index(slider, great, circle)
    assert index == 0
    assert state == DragState(True, 0, False)

    assert cursor_index_assigner.cursor_index(circle, great)[0] == 0
    # the dragging finger is moving away, the other one hit the circle
    assert cursor_index_assigner.cursor_index(
        circle,
        great,
        None,
        state,
    )[0] == 1


def test_drag_parity_toggles(continued_drag):
    (slider, circle), cursor_index_assigner = continued_drag

    _, state = cursor_index_assigner.cursor_index(
        slider,
        great,
        circle,
        DragState(True, -1, False),
    )
    assert state.parity is False
    assert state.cursor_index == 0


def test_drag_must_release_before_next_object():
    tail = Position(300, 192)
    slider, circle = difficulty_objects(
        Slider(left, 1000, 1300, tail),
        Circle(Position(400, 192), 1250),
    )
    cursor_index_assigner = assigner(drag(1000, 1300, left, tail))

    index, state = cursor_index_assigner.cursor_index(slider, great, circle)
    assert index == 0
    assert state == DragState.initial


def test_drag_state_cleared():
    state = DragState(True, 3, True)
    assert state.cleared() == DragState(True, -1, False)
    assert DragState.initial.cleared() == DragState.initial


def test_drag_parity_picks_opposite_cursor():
    circle, = difficulty_objects(Circle(left, 1000))
    cursor_index_assigner = assigner(
        tap(1000, left),
        tap(1000, Position(105, 192)),
        tap(1000, Position(103, 192)),
    )

    assert cursor_index_assigner.cursor_index(circle, great)[0] == 0
    assert cursor_index_assigner.cursor_index(
        circle,
        great,
        None,
        DragState(False, 0, False),
    )[0] == 1
    assert cursor_index_assigner.cursor_index(
        circle,
        great,
        None,
        DragState(True, 0, False),
    )[0] == 2


def test_offset_widens_window():
    circle, = difficulty_objects(Circle(left, 1000))
    late = [tap(1065, left)]

    assert assigner(*late).candidates(circle, great) == []
    assert assigner(*late, offset=10).candidates(circle, great) == [
        CursorInformation(0, 0),
    ]


def test_walk_starts_before_same_time_release():
    circle, = difficulty_objects(Circle(left, 1000))
    far = Position(400, 192)
    # the finger rests on the circle with a move and a release recorded at
    # the same time just before the window opens
    cursor_index_assigner = assigner([
        CursorOccurrence(900, far, MovementType.DOWN),
        CursorOccurrence(935, left, MovementType.MOVE),
        CursorOccurrence(935, left, MovementType.UP),
        CursorOccurrence(1200, far, MovementType.DOWN),
    ])
    assert cursor_index_assigner.candidates(circle, great) == [
        CursorInformation(0, 0),
    ]
