"""Small deterministic plays used in the tests and documentation.
"""
from twohand import (
    Beatmap,
    Circle,
    CursorData,
    CursorOccurrence,
    HitResult,
    MovementType,
    Position,
    ReplayData,
    ReplayObjectData,
    StarRating,
)
from twohand.utils import orange

left = Position(100, 192)
right = Position(412, 192)


def tap(time, position, hold=30):
    """A press at ``time`` released ``hold`` milliseconds later.

    Parameters
    ----------
    time : float
        When the finger touches the screen.
    position : Position
        Where the finger touches the screen.
    hold : float, optional
        How long the finger stays down.

    Returns
    -------
    occurrences : list[CursorOccurrence]
        The press and the release.
    """
    return [
        CursorOccurrence(time, position, MovementType.DOWN),
        CursorOccurrence(time + hold, position, MovementType.UP),
    ]


def drag(start_time, end_time, start, end, step=10):
    """A press at ``start`` that moves in a straight line to ``end`` and is
    released there.

    Parameters
    ----------
    start_time, end_time : float
        When the finger touches and leaves the screen.
    start, end : Position
        Where the finger touches and leaves the screen.
    step : float, optional
        The time between recorded moves.

    Returns
    -------
    occurrences : list[CursorOccurrence]
        The press, the moves and the release.
    """
    duration = end_time - start_time
    displacement = end - start

    out = [CursorOccurrence(start_time, start, MovementType.DOWN)]
    for t in orange(start_time + step, end_time, step):
        out.append(CursorOccurrence(
            t,
            start + displacement.scale((t - start_time) / duration),
            MovementType.MOVE,
        ))
    out.append(CursorOccurrence(end_time, end, MovementType.UP))
    return out


def perfect_hits(count):
    """Replay data for ``count`` objects all hit exactly on time.
    """
    return [ReplayObjectData(0.0, HitResult.great) for _ in range(count)]


def alternating_jumps(count=20,
                      interval=100,
                      *,
                      overall_difficulty=8,
                      circle_size=4,
                      two_handed=True):
    """A stream of jumps back and forth across the screen.

    Parameters
    ----------
    count : int, optional
        The number of circles.
    interval : float, optional
        The time between circles.
    overall_difficulty : float, optional
        The OD of the map.
    circle_size : float, optional
        The CS of the map.
    two_handed : bool, optional
        Hit the left circles with cursor 0 and the right circles with cursor
        1. Otherwise cursor 0 hits everything and cursor 1 stays empty.

    Returns
    -------
    star_rating : StarRating
        The difficulty calculation of the map.
    replay_data : ReplayData
        The replay.
    """
    start = 1000
    circles = [
        Circle(left if i % 2 == 0 else right, start + i * interval)
        for i in range(count)
    ]
    beatmap = Beatmap(
        circle_size=circle_size,
        overall_difficulty=overall_difficulty,
        hit_objects=circles,
        title='Alternating Jumps',
        version='Two Hands' if two_handed else 'One Hand',
    )

    streams = [[], []]
    for i, circle in enumerate(circles):
        finger = i % 2 if two_handed else 0
        streams[finger].extend(tap(circle.time, circle.position))

    return StarRating(beatmap), ReplayData(
        [CursorData(stream) for stream in streams],
        perfect_hits(count),
    )
