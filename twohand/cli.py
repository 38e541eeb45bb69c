from contextlib import contextmanager
import json

import click

from .beatmap import Beatmap, Circle, Slider, Spinner
from .mod import Mod
from .position import Position
from .replay import CursorData, HitResult, ReplayData, ReplayObjectData


def maybe_show_progress(it, show_progress, **kwargs):
    """Optionally show a progress bar for the given iterator.

    Parameters
    ----------
    it : iterable
        The underlying iterator.
    show_progress : bool
        Should progress be shown.
    **kwargs
        Forwarded to the click progress bar.

    Returns
    -------
    itercontext : context manager
        A context manager whose enter is the actual iterator to use.

    Examples
    --------
    .. code-block:: python

       with maybe_show_progress([1, 2, 3], True) as ns:
            for n in ns:
                ...
    """
    if show_progress:
        return click.progressbar(it, **kwargs)

    @contextmanager
    def ctx():
        yield it

    return ctx()


def _hit_object(data):
    kind = data.get('type', 'circle')
    if kind == 'circle':
        return Circle(
            Position(data['x'], data['y']),
            float(data['time']),
            data.get('stack_height', 0),
        )
    if kind == 'slider':
        return Slider(
            Position(data['x'], data['y']),
            float(data['time']),
            float(data['end_time']),
            Position(*data['tail']),
            data.get('repeat', 1),
            data.get('stack_height', 0),
        )
    if kind == 'spinner':
        return Spinner(float(data['time']), float(data['end_time']))
    raise ValueError(f'unknown hit object type {kind!r}')


def load_play(path):
    """Read a beatmap and a replay of it from a JSON document.

    The document has the shape::

        {
            "beatmap": {
                "circle_size": 4,
                "overall_difficulty": 8,
                "title": "optional",
                "version": "optional",
                "hit_objects": [
                    {"type": "circle", "x": 100, "y": 192, "time": 1000},
                    {"type": "slider", "x": 100, "y": 192, "time": 1200,
                     "end_time": 1500, "tail": [300, 192], "repeat": 1},
                    {"type": "spinner", "time": 2000, "end_time": 3000}
                ]
            },
            "replay": {
                "mods": "rs",
                "cursors": [
                    {"time": [...], "x": [...], "y": [...], "id": [...]}
                ],
                "hit_object_data": [{"accuracy": -3, "result": 4}]
            }
        }

    ``id`` uses 0 for a press, 1 for a move and 2 for a release. ``result``
    uses 1 for a miss, 2 for a 50, 3 for a 100 and 4 for a 300.

    Parameters
    ----------
    path : str or pathlib.Path
        The document to read.

    Returns
    -------
    beatmap : Beatmap
        The beatmap.
    replay_data : ReplayData
        The replay.

    Raises
    ------
    ValueError
        Raised when the document is not valid.
    """
    with open(path) as f:
        document = json.load(f)

    try:
        beatmap_data = document['beatmap']
        replay = document['replay']

        beatmap = Beatmap(
            circle_size=beatmap_data['circle_size'],
            overall_difficulty=beatmap_data['overall_difficulty'],
            hit_objects=[_hit_object(o) for o in beatmap_data['hit_objects']],
            title=beatmap_data.get('title', ''),
            artist=beatmap_data.get('artist', ''),
            creator=beatmap_data.get('creator', ''),
            version=beatmap_data.get('version', ''),
        )
        replay_data = ReplayData(
            [
                CursorData.from_arrays(c['time'], c['x'], c['y'], c['id'])
                for c in replay['cursors']
            ],
            [
                ReplayObjectData(float(d['accuracy']), HitResult(d['result']))
                for d in replay['hit_object_data']
            ],
            Mod.parse(replay.get('mods', '')),
            replay.get('player_name', ''),
        )
    except (KeyError, TypeError) as e:
        raise ValueError(f'malformed play document {path}: {e!r}') from e

    return beatmap, replay_data
