from collections import namedtuple

import numpy as np

min_cursor_index_count = 5


class IndexedHitObject:
    """A difficulty object with the cursor that hit it.

    Parameters
    ----------
    object : DifficultyHitObject
        The difficulty object.
    cursor_index : int
        The cursor index, or -1 when unresolved.
    """
    def __init__(self, object, cursor_index):
        self.object = object
        self.cursor_index = cursor_index

    def __repr__(self):
        return (
            f'<{type(self).__qualname__}: {self.object.hit_object!r},'
            f' cursor {self.cursor_index}>'
        )


class Resolution(namedtuple('Resolution', 'indexes counts main_index')):
    """The outcome of :func:`resolve_indexes`.

    Parameters
    ----------
    indexes : list[int]
        The resolved cursor index of each object.
    counts : np.ndarray[int]
        How often each cursor index was found before resolving.
    main_index : int
        The cursor every unresolved and rarely used index was folded into.
    """


def cursor_index_counts(indexes, cursor_count):
    """Count how many objects each cursor hit.

    Parameters
    ----------
    indexes : sequence[int]
        The cursor index of each object; -1 is ignored.
    cursor_count : int
        The number of cursor streams.

    Returns
    -------
    counts : np.ndarray[int]
        An array of length ``cursor_count``.
    """
    indexes = np.asarray(indexes, dtype=np.int64)
    return np.bincount(indexes[indexes >= 0], minlength=cursor_count)


def resolve_indexes(indexes, cursor_count, min_count=min_cursor_index_count):
    """Fold unresolved and rarely used cursor indexes into the main cursor.

    Parameters
    ----------
    indexes : sequence[int]
        The cursor index of each object; -1 means unresolved.
    cursor_count : int
        The number of cursor streams.
    min_count : int, optional
        Cursors that hit fewer objects than this are treated as noise. This
        keeps a few stray matches from splitting the map into partitions
        that carry no strain.

    Returns
    -------
    resolution : Resolution
        The resolved indexes. ``indexes`` is not modified.
    """
    counts = cursor_index_counts(indexes, cursor_count)
    # argmax picks the lowest index on ties, and 0 when nothing was found
    main_index = int(np.argmax(counts)) if counts.size else 0

    ignored = {i for i, count in enumerate(counts) if count < min_count}
    ignored.discard(main_index)

    resolved = [
        main_index if index == -1 or index in ignored else index
        for index in indexes
    ]
    return Resolution(resolved, counts, main_index)
