from collections import namedtuple
import logging

from ..mod import droid_hit_windows, od_without_speed_mods
from ..utils import is_sorted
from . import gate
from .assigner import CursorIndexAssigner, DragState, hit_window_offset
from .recombine import partition, recombine
from .resolver import IndexedHitObject, min_cursor_index_count, resolve_indexes

log = logging.getLogger(__name__)


class TwoHandResult(namedtuple('TwoHandResult',
                               'is_two_handed indexed_hit_objects objects')):
    """The outcome of :func:`analyze`.

    Parameters
    ----------
    is_two_handed : bool
        Whether more than one cursor was active in the replay.
    indexed_hit_objects : list[IndexedHitObject]
        Every original difficulty object with its resolved cursor index. Empty
        when the replay is not two-handed.
    objects : list[DifficultyHitObject]
        The merged difficulty objects when two-handed, otherwise the original
        difficulty objects.
    """

    @property
    def indexes(self):
        return [o.cursor_index for o in self.indexed_hit_objects]


def _validate(objects, replay_data):
    if not objects:
        raise ValueError('cannot analyze a beatmap without hit objects')

    if len(objects) != len(replay_data.hit_object_data):
        raise ValueError(
            f'the replay has data for {len(replay_data.hit_object_data)}'
            f' objects but the beatmap has {len(objects)}',
        )

    if not is_sorted([o.start_time for o in objects]):
        raise ValueError('difficulty objects must be sorted by start time')


def assign_cursor_indexes(objects,
                          replay_data,
                          assigner,
                          checks):
    """Run the cursor index assigner over every gated object.

    Parameters
    ----------
    objects : sequence[DifficultyHitObject]
        The difficulty objects.
    replay_data : ReplayData
        The replay.
    assigner : CursorIndexAssigner
        The assigner to use.
    checks : sequence[bool]
        Which objects to check, see :func:`twohand.analysis.gate.gated`.
        Objects that are not checked are assigned cursor 0.

    Returns
    -------
    indexes : list[int]
        The cursor index of each object, -1 where none was found.
    """
    indexes = []
    append = indexes.append
    state = DragState.initial
    last = len(objects) - 1

    for i, (current, data, check) in enumerate(zip(objects,
                                                   replay_data.hit_object_data,
                                                   checks)):
        if not check:
            append(0)
            state = state.cleared()
            continue

        next_object = objects[i + 1] if i < last else None
        index, state = assigner.cursor_index(current, data, next_object, state)
        append(index)

    return indexes


def analyze(star_rating,
            replay_data,
            *,
            min_count=min_cursor_index_count,
            spacing_threshold=gate.spacing_threshold,
            default_spacing_score=gate.default_spacing_score):
    """Determine which cursor hit each object and recalculate the difficulty
    of each cursor's objects on their own.

    Parameters
    ----------
    star_rating : StarRating
        The difficulty calculation of the played map. It is not modified.
    replay_data : ReplayData
        The replay.
    min_count : int, optional
        Cursors that hit fewer objects than this are folded into the main
        cursor.
    spacing_threshold : float, optional
        The spacing score an object needs to be checked.
    default_spacing_score : float, optional
        The starting spacing score.

    Returns
    -------
    result : TwoHandResult
        The verdict, the resolved cursor indexes, and the merged difficulty
        objects.

    Raises
    ------
    ValueError
        Raised when the map has no objects, the replay does not have data for
        exactly every object, or the objects are not sorted by start time.
    """
    objects = star_rating.objects
    _validate(objects, replay_data)

    if replay_data.active_cursor_count <= 1:
        return TwoHandResult(False, [], list(objects))

    cursor_movement = replay_data.cursor_movement

    od = od_without_speed_mods(star_rating.map, replay_data.mods)
    offset = hit_window_offset(
        cursor_movement,
        objects[0].hit_object.time,
        droid_hit_windows(od).hit_50,
    )
    assigner = CursorIndexAssigner(
        cursor_movement,
        droid_hit_windows(od, replay_data.precise),
        offset,
    )

    checks = gate.gated(
        objects,
        default=default_spacing_score,
        threshold=spacing_threshold,
    )
    indexes = assign_cursor_indexes(objects, replay_data, assigner, checks)

    log.debug('hit window offset: %gms', offset)
    log.debug('%d of %d objects checked', sum(checks), len(objects))
    log.debug('spinners: %d', star_rating.map.spinners)
    log.debug('misses: %d', replay_data.count_miss)
    log.debug(
        '%d cursors found, %d not found',
        sum(1 for index in indexes if index != -1),
        sum(1 for index in indexes if index == -1),
    )

    resolution = resolve_indexes(indexes, len(cursor_movement), min_count)
    for i, count in enumerate(resolution.counts):
        log.debug('index %d count: %d', i, count)

    indexed_hit_objects = [
        IndexedHitObject(o, index)
        for o, index in zip(objects, resolution.indexes)
    ]
    merged = recombine(star_rating, objects, partition(resolution.indexes))
    return TwoHandResult(True, indexed_hit_objects, merged)


class TwoHandChecker:
    """Utility to check whether or not a beatmap was played two-handed.

    Parameters
    ----------
    star_rating : StarRating
        The difficulty calculation of the played map.
    data : ReplayData
        The replay.

    Notes
    -----
    The thresholds are class attributes; subclass to tune them.
    """
    min_cursor_index_count = min_cursor_index_count
    spacing_threshold = gate.spacing_threshold
    default_spacing_score = gate.default_spacing_score

    def __init__(self, star_rating, data):
        self.map = star_rating
        self.data = data
        self.result = None

    def analyze(self):
        """Run the analysis without modifying the star rating.

        Returns
        -------
        result : TwoHandResult
            See :func:`analyze`.
        """
        return analyze(
            self.map,
            self.data,
            min_count=self.min_cursor_index_count,
            spacing_threshold=self.spacing_threshold,
            default_spacing_score=self.default_spacing_score,
        )

    def check(self):
        """Checks if a beatmap is two-handed.

        When it is, the star rating's objects are replaced by the merged
        per-cursor objects and its stars are recalculated.

        Returns
        -------
        two_handed : bool
            Whether more than one cursor was active.
        """
        self.result = result = self.analyze()
        if not result.is_two_handed:
            return False

        self.map.objects = result.objects
        self.map.calculate_all()
        return True
