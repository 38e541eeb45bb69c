import numpy as np


class lazyval:
    """Decorator to lazily compute and cache a value.
    """
    def __init__(self, fget):
        self._fget = fget
        self._name = None

    def __set_name__(self, owner, name):
        self._name = name

    def __get__(self, instance, owner):
        if instance is None:
            return self

        cache = vars(instance)
        try:
            return cache[self._name]
        except KeyError:
            value = cache[self._name] = self._fget(instance)
            return value

    def __set__(self, instance, value):
        vars(instance)[self._name] = value


def clamp(value, low, high):
    """Clamp ``value`` into the closed range ``[low, high]``.
    """
    return max(low, min(value, high))


def accuracy(count_300, count_100, count_50, count_miss):
    """Calculate osu! standard accuracy from discrete hit counts.

    Parameters
    ----------
    count_300 : int
        The number of 300's hit.
    count_100 : int
        The number of 100's hit.
    count_50 : int
        The number of 50's hit.
    count_miss : int
        The number of misses

    Returns
    -------
    accuracy : float
        The accuracy in the range [0, 1]
    """
    points_of_hits = count_300 * 300 + count_100 * 100 + count_50 * 50
    total_hits = count_300 + count_100 + count_50 + count_miss
    if not total_hits:
        return 1.0
    return points_of_hits / (total_hits * 300)


def first_at_or_after(times, value):
    """Find the first index in a sorted sequence whose time is at or after
    ``value``.

    Parameters
    ----------
    times : sequence[float]
        The times, sorted ascending.
    value : float
        The time to search for.

    Returns
    -------
    index : int
        The first index ``i`` with ``times[i] >= value``. When no such index
        exists this is ``len(times)``, one past the last element; callers rely
        on this sentinel instead of a lookup failure.
    """
    return int(np.searchsorted(times, value, side='left'))


def is_sorted(values):
    """Check that ``values`` never decreases.
    """
    return bool(np.all(np.diff(np.asarray(values, dtype=np.float64)) >= 0))


def orange(_start_or_stop, *args):
    """Range for arbitrary objects.

    Parameters
    ----------
    start, stop, step : any
        Arguments like :func:`range`.

    Yields
    ------
    value : any
        The values in the range ``[start, stop)`` with a step of ``step``.

    Notes
    -----
    ``o`` stands for object.
    """
    if not args:
        start = 0
        stop = _start_or_stop
        step = 1
    elif len(args) == 1:
        start = _start_or_stop
        stop = args[0]
        step = 1
    elif len(args) == 2:
        start = _start_or_stop
        stop, step = args
    else:
        raise TypeError(
            'orange takes from 1 to 3 positional arguments but'
            f' {len(args) + 1} were given',
        )

    while start < stop:
        yield start
        start += step
