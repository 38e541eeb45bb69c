from collections import Counter

from hypothesis import given, settings

from twohand import analyze
from twohand.strategies import plays


@given(plays())
@settings(report_multiple_bugs=False, deadline=None, max_examples=50)
def test_analyze(play):
    star_rating, replay_data = play
    objects = star_rating.objects
    total = star_rating.total
    cursor_count = len(replay_data.cursor_movement)

    result = analyze(star_rating, replay_data)

    # nothing is lost or duplicated
    assert len(result.objects) == len(objects)
    assert sorted(o.start_time for o in result.objects) == sorted(
        o.start_time for o in objects
    )
    start_times = [o.start_time for o in result.objects]
    assert start_times == sorted(start_times)

    assert star_rating.objects is objects
    assert star_rating.total == total

    if not result.is_two_handed:
        assert replay_data.active_cursor_count <= 1
        assert result.indexed_hit_objects == []
        assert result.objects == objects
        return

    assert len(result.indexes) == len(objects)
    assert all(0 <= index < cursor_count for index in result.indexes)

    counts = Counter(result.indexes)
    assert len(counts) == 1 or all(count >= 5 for count in counts.values())

    again = analyze(star_rating, replay_data)
    assert again.indexes == result.indexes
