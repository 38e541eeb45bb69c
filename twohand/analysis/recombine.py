"""Split a map by the cursor that hit each object and merge the independently
calculated parts back into one difficulty object sequence.
"""
import operator as op

min_strain_time = 25


def partition(indexes):
    """Group object positions by cursor index.

    Parameters
    ----------
    indexes : sequence[int]
        The resolved cursor index of each object.

    Returns
    -------
    partitions : dict[int, list[int]]
        A mapping from cursor index to the positions of the objects that
        cursor hit, in their original order. Cursors are ordered by index and
        cursors that hit nothing are absent.
    """
    partitions = {}
    for position, index in enumerate(indexes):
        partitions.setdefault(index, []).append(position)
    return dict(sorted(partitions.items()))


def recombine(star_rating, objects, partitions):
    """Recalculate each partition on its own and merge the results.

    Parameters
    ----------
    star_rating : StarRating
        The difficulty engine used to regenerate each partition.
    objects : sequence[DifficultyHitObject]
        The original difficulty objects; the arena ``partitions`` index into.
    partitions : dict[int, list[int]]
        The output of :func:`partition`.

    Returns
    -------
    merged : list[DifficultyHitObject]
        The regenerated difficulty objects of every partition sorted by start
        time. ``objects`` and ``star_rating.objects`` are not modified.
    """
    if not objects:
        return []

    first_start_time = objects[0].start_time

    merged = []
    for positions in partitions.values():
        if not positions:
            continue

        regenerated = star_rating.generate_difficulty_hit_objects(
            [objects[p].hit_object for p in positions],
        )

        # measure from the start of the map rather than restarting the
        # strain decay at this cursor's first object
        first = regenerated[0]
        first.delta_time = first.start_time - first_start_time
        first.strain_time = max(min_strain_time, first.delta_time)

        merged.extend(regenerated)

    merged.sort(key=op.attrgetter('start_time'))
    return merged
