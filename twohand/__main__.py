import logging

import click

from . import StarRating, TwoHandChecker
from .cli import load_play, maybe_show_progress


@click.group()
@click.option(
    '--verbose/--quiet',
    help='Log the details of each analysis?',
    default=False,
)
def main(verbose):
    """twohand utilities.
    """
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)


@main.command()
@click.argument(
    'plays',
    nargs=-1,
    type=click.Path(exists=True, dir_okay=False),
)
@click.option(
    '--progress/--no-progress',
    help='Show a progress bar?',
    default=False,
)
@click.option(
    '--min-count',
    help='The number of objects a cursor must hit to count as a hand.',
    default=TwoHandChecker.min_cursor_index_count,
    show_default=True,
)
@click.option(
    '--spacing-threshold',
    help='The spacing score an object needs before its cursor is searched.',
    default=float(TwoHandChecker.spacing_threshold),
    show_default=True,
)
def check(plays, progress, min_count, spacing_threshold):
    """Check whether plays were two-handed and recalculate their stars.

    Each PLAYS file is a JSON document describing a beatmap and a replay, see
    ``twohand.cli.load_play``.
    """
    results = []
    with maybe_show_progress(
            plays,
            progress,
            label='Analyzing plays',
            item_show_func=lambda p: p,
    ) as ps:
        for path in ps:
            try:
                beatmap, replay_data = load_play(path)
            except ValueError as e:
                raise click.ClickException(str(e))

            star_rating = StarRating(beatmap, replay_data.mods)
            before = star_rating.total

            checker = TwoHandChecker(star_rating, replay_data)
            checker.min_cursor_index_count = min_count
            checker.spacing_threshold = spacing_threshold
            try:
                two_handed = checker.check()
            except ValueError as e:
                raise click.ClickException(f'{path}: {e}')

            results.append((path, two_handed, before, star_rating.total,
                            checker.result))

    for path, two_handed, before, after, result in results:
        click.echo(
            f'{path}: {"two-handed" if two_handed else "one-handed"},'
            f' {before:.2f} -> {after:.2f} stars',
        )
        if two_handed:
            counts = {}
            for index in result.indexes:
                counts[index] = counts.get(index, 0) + 1
            for index, count in sorted(counts.items()):
                click.echo(f'  cursor {index}: {count} objects')


if __name__ == '__main__':
    main()
