from collections import namedtuple
import math

import numpy as np

from ..position import angle_between
from ..replay import HitResult, MovementType
from ..utils import clamp

slider_radius_multiplier = 2.4

# touch input can be registered this many milliseconds after the hit time
late_input_grace = 10

drag_continuation_angle = math.radians(30)


class CursorInformation(namedtuple('CursorInformation',
                                   'cursor_index distance')):
    """A cursor that was inside an object when it was hit.

    Parameters
    ----------
    cursor_index : int
        The index of the cursor stream.
    distance : float
        The closest the cursor came to the center of the object.
    """


class DragState(namedtuple('DragState', 'parity cursor_index continued')):
    """What the previous object tells us about the next one.

    Parameters
    ----------
    parity : bool
        Toggled every time a drag is observed. When a drag leaves the next
        object and several other cursors could have hit it, cursors whose
        index parity differs from this flag are preferred.
    cursor_index : int
        The cursor that dragged through the previous object, or -1.
    continued : bool
        Whether the drag pointed at the next object, meaning the same cursor
        most likely hits it too. When ``False`` the next object most likely
        belongs to another cursor.
    """

    def cleared(self):
        """Forget the drag but keep the parity.
        """
        return type(self)(self.parity, -1, False)


DragState.initial = DragState(False, -1, False)


def hit_window_offset(cursor_movement, first_start_time, hit_window_50):
    """Compute the amount every acceptance window is widened by to make up for
    the input polling rate.

    Parameters
    ----------
    cursor_movement : list[CursorData]
        The cursor streams.
    first_start_time : float
        The start time of the first hit object.
    hit_window_50 : float
        The 50 hit window of the map.

    Returns
    -------
    offset : float
        The smallest positive time between a move and the occurrence before
        it, ignoring everything before the first object can be hit. 0 when
        no such pair exists.
    """
    lower = first_start_time - hit_window_50
    offset = math.inf

    for cursor in cursor_movement:
        times = cursor.times
        if times.size < 2:
            continue

        deltas = np.diff(times)
        mask = (
            (times[1:] >= lower) &
            (cursor.ids[1:] == MovementType.MOVE) &
            (deltas > 0)
        )
        if mask.any():
            offset = min(offset, float(deltas[mask].min()))

    if math.isinf(offset):
        return 0.0
    return offset


def _interpolated_distance(occurrence, next_occurrence, target, end_time):
    """The closest a cursor gets to ``target`` while moving between two
    occurrences, sampled every millisecond up to ``end_time``.
    """
    start = occurrence.time
    if end_time < start:
        return math.inf

    elapsed = np.arange(0, math.floor(end_time - start) + 1, dtype=np.float64)
    progress = elapsed / (next_occurrence.time - start)

    begin = occurrence.position
    end = next_occurrence.position
    xs = begin.x + (end.x - begin.x) * progress
    ys = begin.y + (end.y - begin.y) * progress
    return float(np.hypot(xs - target.x, ys - target.y).min())


class CursorIndexAssigner:
    """Find the cursor that hit an object.

    Parameters
    ----------
    cursor_movement : list[CursorData]
        The cursor streams of the replay.
    hit_windows : HitWindows
        The hit windows the replay was played with, including the precise
        mod.
    offset : float
        The hit window offset, see :func:`hit_window_offset`.

    Notes
    -----
    Instances hold no per-object state. The drag state is passed into and
    returned from :meth:`cursor_index` so the caller decides how it flows from
    one object to the next.
    """
    def __init__(self, cursor_movement, hit_windows, offset):
        self.cursor_movement = cursor_movement
        self.hit_windows = hit_windows
        self.offset = offset

    def half_width(self, difficulty_hit_object, data):
        """The hit window an object could have been hit in.

        Sliders always use the 50 window since slider heads are a lot more
        lenient in osu!droid than their judgement suggests.
        """
        hit_windows = self.hit_windows
        if difficulty_hit_object.is_slider:
            return hit_windows.hit_50
        if data.result == HitResult.great:
            return hit_windows.hit_300
        if data.result == HitResult.good:
            return hit_windows.hit_100
        return hit_windows.hit_50

    def _walk_range(self, cursor, lower, range_end):
        size = cursor.size
        # one before the first occurrence in the window is where the cursor is
        # resting when the window opens
        before = clamp(cursor.first_at_or_after(lower) - 1, 0, size - 1)
        after = cursor.first_at_or_after(range_end) - 1

        times = cursor.times
        # a release is often recorded at the same time as a move
        while before > 0 and times[before] == times[before - 1]:
            before -= 1

        return before, after

    def _closest_distance(self,
                          cursor,
                          target,
                          before,
                          after,
                          hit_time,
                          upper):
        offset = self.offset
        stop_time = hit_time + offset + late_input_grace
        interpolation_end = hit_time + offset

        distance = math.inf
        for j in range(before, after + 1):
            occurrence = cursor[j]

            if occurrence.id == MovementType.UP:
                if occurrence.time > stop_time:
                    break
                continue

            distance = min(distance, target.distance(occurrence.position))

            if occurrence.time > stop_time:
                break

            if j + 1 >= cursor.size:
                continue

            next_occurrence = cursor[j + 1]
            if (next_occurrence.id == MovementType.MOVE and
                    occurrence.time <= upper and
                    occurrence.time != next_occurrence.time):
                distance = min(
                    distance,
                    _interpolated_distance(
                        occurrence,
                        next_occurrence,
                        target,
                        min(interpolation_end, next_occurrence.time),
                    ),
                )

        return distance

    def candidates(self, difficulty_hit_object, data):
        """Every cursor that was within the object when it was hit.

        Parameters
        ----------
        difficulty_hit_object : DifficultyHitObject
            The object.
        data : ReplayObjectData
            How the object was hit.

        Returns
        -------
        candidates : list[CursorInformation]
            The cursors in index order.
        """
        hit_object = difficulty_hit_object.hit_object
        half_width = self.half_width(difficulty_hit_object, data)

        start_time = hit_object.time
        hit_time = start_time + data.accuracy
        lower = start_time - half_width - self.offset
        upper = start_time + half_width + self.offset
        range_end = max(hit_object.end_time, upper)

        acceptable_radius = difficulty_hit_object.radius
        if difficulty_hit_object.is_slider:
            # slider ball
            acceptable_radius *= slider_radius_multiplier

        target = difficulty_hit_object.stacked_position

        out = []
        for i, cursor in enumerate(self.cursor_movement):
            if not cursor.size:
                continue

            before, after = self._walk_range(cursor, lower, range_end)
            distance = self._closest_distance(
                cursor,
                target,
                before,
                after,
                hit_time,
                upper,
            )
            if distance <= acceptable_radius:
                out.append(CursorInformation(i, distance))

        return out

    def _drag(self, cursor, difficulty_hit_object, data, next_object):
        """The displacement of a press, move, release sequence starting in
        the object's hit window and released before the next object starts.
        """
        start_time = difficulty_hit_object.hit_object.time
        half_width = self.half_width(difficulty_hit_object, data)
        lower = start_time - half_width - self.offset
        upper = start_time + half_width + self.offset
        next_start_time = next_object.hit_object.time

        j = cursor.first_at_or_after(lower)
        while j < cursor.size and cursor[j].time <= upper:
            if cursor[j].id == MovementType.DOWN:
                break
            j += 1
        else:
            return None

        press = cursor[j]
        moved = False
        for occurrence in cursor.occurrences[j + 1:]:
            if occurrence.time >= next_start_time:
                return None
            if occurrence.id == MovementType.MOVE:
                moved = True
            elif occurrence.id == MovementType.UP:
                if not moved:
                    return None
                return occurrence.position - press.position
            else:
                return None

        return None

    def _pick(self, candidates, state):
        if len(candidates) > 1 and state.cursor_index != -1:
            if state.continued:
                for candidate in candidates:
                    if candidate.cursor_index == state.cursor_index:
                        return candidate.cursor_index
            else:
                others = [
                    c for c in candidates
                    if c.cursor_index != state.cursor_index
                ]
                if len(others) > 1:
                    # the drag hands the next object to the opposite parity
                    opposite = [
                        c for c in others
                        if c.cursor_index % 2 != int(state.parity)
                    ]
                    if opposite:
                        others = opposite
                if others:
                    candidates = others

        if not candidates:
            return -1

        return min(candidates, key=lambda c: (c.distance, c.cursor_index))[0]

    def cursor_index(self,
                     difficulty_hit_object,
                     data,
                     next_object=None,
                     state=DragState.initial):
        """Gets the cursor index that hits the given object.

        Parameters
        ----------
        difficulty_hit_object : DifficultyHitObject
            The object to check.
        data : ReplayObjectData
            How the object was hit.
        next_object : DifficultyHitObject, optional
            The object after this one, used to follow drags.
        state : DragState, optional
            The drag state returned for the previous object.

        Returns
        -------
        index : int
            The cursor index that hits the given object. -1 if the index is
            not found, the object is a spinner, or the object was missed.
        state : DragState
            The drag state to pass along with the next object.
        """
        if (difficulty_hit_object.is_spinner or
                data.result == HitResult.miss):
            return -1, state.cleared()

        index = self._pick(
            self.candidates(difficulty_hit_object, data),
            state,
        )

        if index == -1 or next_object is None:
            return index, state.cleared()

        displacement = self._drag(
            self.cursor_movement[index],
            difficulty_hit_object,
            data,
            next_object,
        )
        if displacement is None:
            return index, state.cleared()

        angle = angle_between(
            next_object.stacked_position -
            difficulty_hit_object.stacked_position,
            displacement,
        )
        return index, DragState(
            not state.parity,
            index,
            angle is not None and angle < drag_continuation_angle,
        )
