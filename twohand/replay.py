from collections import namedtuple
from enum import IntEnum, unique

import numpy as np

from .mod import Mod, speed_multiplier
from .position import Position
from .utils import accuracy, first_at_or_after, is_sorted, lazyval


@unique
class MovementType(IntEnum):
    """The kind of a cursor occurrence, as stored in osu!droid replays.
    """
    DOWN = 0
    MOVE = 1
    UP = 2


@unique
class HitResult(IntEnum):
    """The judgement of a hit object, as stored in osu!droid replays.
    """
    miss = 1
    meh = 2
    good = 3
    great = 4


class CursorOccurrence(namedtuple('CursorOccurrence', 'time position id')):
    """A single sample of one touch point.

    Parameters
    ----------
    time : float
        The offset since the beginning of the song in milliseconds.
    position : Position
        The position of the touch point.
    id : MovementType
        Whether the finger was pressed, moved or released.
    """

    def __repr__(self):
        return (
            f'<{type(self).__qualname__}: {self.time:g}ms, {self.position},'
            f' {self.id.name}>'
        )


class CursorData:
    """The occurrences of one physical touch point across a replay.

    Parameters
    ----------
    occurrences : iterable[CursorOccurrence]
        The occurrences sorted by time.

    Raises
    ------
    ValueError
        Raised when the occurrences are not sorted by time.
    """
    def __init__(self, occurrences):
        self.occurrences = tuple(occurrences)
        self.times = np.array(
            [o.time for o in self.occurrences],
            dtype=np.float64,
        )
        self.ids = np.array(
            [o.id for o in self.occurrences],
            dtype=np.int8,
        )
        if not is_sorted(self.times):
            raise ValueError('cursor occurrences must be sorted by time')

    @classmethod
    def from_arrays(cls, time, x, y, id):
        """Build a cursor stream from the column layout used by osu!droid
        replays.

        Parameters
        ----------
        time : sequence[float]
            The time of each occurrence.
        x, y : sequence[float]
            The coordinates of each occurrence.
        id : sequence[int]
            The :class:`MovementType` of each occurrence.

        Returns
        -------
        cursor : CursorData
            The cursor stream.
        """
        if not len(time) == len(x) == len(y) == len(id):
            raise ValueError(
                'time, x, y and id must have the same length, got'
                f' {len(time)}, {len(x)}, {len(y)}, {len(id)}',
            )

        return cls(
            CursorOccurrence(float(t), Position(px, py), MovementType(i))
            for t, px, py, i in zip(time, x, y, id)
        )

    @property
    def size(self):
        return len(self.occurrences)

    def __len__(self):
        return self.size

    def __getitem__(self, ix):
        return self.occurrences[ix]

    def __iter__(self):
        return iter(self.occurrences)

    def __repr__(self):
        return f'<{type(self).__qualname__}: {self.size} occurrences>'

    def first_at_or_after(self, time):
        """The index of the first occurrence at or after ``time``, or
        ``self.size`` when every occurrence is earlier.
        """
        return first_at_or_after(self.times, time)


class ReplayObjectData(namedtuple('ReplayObjectData', 'accuracy result')):
    """How one hit object was hit in a replay.

    Parameters
    ----------
    accuracy : float
        The hit error in milliseconds; negative values are early hits.
    result : HitResult
        The judgement of the object.
    """


class ReplayData:
    """The parts of an osu!droid replay needed for analysis.

    Parameters
    ----------
    cursor_movement : list[CursorData]
        One occurrence stream per touch point.
    hit_object_data : list[ReplayObjectData]
        How each hit object was hit, in beatmap order.
    mods : Mod, optional
        The mods used in the replay.
    player_name : str, optional
        The name of the player who recorded this replay.
    """
    def __init__(self,
                 cursor_movement,
                 hit_object_data,
                 mods=Mod(0),
                 player_name=''):
        self.cursor_movement = list(cursor_movement)
        self.hit_object_data = list(hit_object_data)
        self.mods = Mod(mods)
        self.player_name = player_name

    @property
    def precise(self):
        """Was the precise mod used?
        """
        return bool(self.mods & Mod.precise)

    @property
    def speed_multiplier(self):
        return speed_multiplier(self.mods)

    @property
    def active_cursor_count(self):
        """The number of touch points that recorded anything.
        """
        return sum(1 for c in self.cursor_movement if c.size)

    def _count(self, result):
        return sum(1 for d in self.hit_object_data if d.result == result)

    @lazyval
    def count_300(self):
        return self._count(HitResult.great)

    @lazyval
    def count_100(self):
        return self._count(HitResult.good)

    @lazyval
    def count_50(self):
        return self._count(HitResult.meh)

    @lazyval
    def count_miss(self):
        return self._count(HitResult.miss)

    @lazyval
    def accuracy(self):
        """The accuracy achieved in the replay in the range [0, 1].
        """
        return accuracy(
            self.count_300,
            self.count_100,
            self.count_50,
            self.count_miss,
        )

    def __repr__(self):
        return (
            f'<{type(self).__qualname__}: {self.accuracy * 100:.2f}% ('
            f'{self.count_300}/{self.count_100}/'
            f'{self.count_50}/{self.count_miss}),'
            f' {len(self.cursor_movement)} cursors>'
        )
