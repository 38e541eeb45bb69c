import json

from click.testing import CliRunner
import pytest

from twohand.__main__ import main
from twohand.cli import load_play


def play_document(two_handed=True):
    circles = []
    cursors = [
        {'time': [], 'x': [], 'y': [], 'id': []},
        {'time': [], 'x': [], 'y': [], 'id': []},
    ]
    for i in range(20):
        x = 100 if i % 2 == 0 else 412
        time = 1000 + i * 100
        circles.append({'type': 'circle', 'x': x, 'y': 192, 'time': time})

        cursor = cursors[i % 2 if two_handed else 0]
        cursor['time'].extend([time, time + 30])
        cursor['x'].extend([x, x])
        cursor['y'].extend([192, 192])
        cursor['id'].extend([0, 2])

    return {
        'beatmap': {
            'circle_size': 4,
            'overall_difficulty': 8,
            'title': 'Alternating Jumps',
            'hit_objects': circles,
        },
        'replay': {
            'mods': '',
            'cursors': cursors,
            'hit_object_data': [
                {'accuracy': 0, 'result': 4} for _ in circles
            ],
        },
    }


@pytest.fixture
def write_play(tmp_path):
    def write(name, document):
        path = tmp_path / name
        path.write_text(json.dumps(document))
        return str(path)

    return write


def test_load_play(write_play):
    document = play_document()
    document['beatmap']['hit_objects'][1:3] = [
        {
            'type': 'slider',
            'x': 412,
            'y': 192,
            'time': 1100,
            'end_time': 1150,
            'tail': [300, 192],
        },
        {'type': 'spinner', 'time': 1200, 'end_time': 1250},
    ]
    beatmap, replay_data = load_play(write_play('play.json', document))

    assert beatmap.title == 'Alternating Jumps'
    assert len(beatmap.hit_objects()) == 20
    assert (beatmap.circles, beatmap.sliders, beatmap.spinners) == (18, 1, 1)
    assert replay_data.active_cursor_count == 2
    assert len(replay_data.hit_object_data) == 20


def test_load_play_malformed(write_play):
    document = play_document()
    del document['replay']['cursors'][0]['x']
    with pytest.raises(ValueError):
        load_play(write_play('play.json', document))


def test_load_play_unknown_object(write_play):
    document = play_document()
    document['beatmap']['hit_objects'][0]['type'] = 'hold'
    with pytest.raises(ValueError):
        load_play(write_play('play.json', document))


def test_check(write_play):
    paths = [
        write_play('two.json', play_document()),
        write_play('one.json', play_document(two_handed=False)),
    ]
    result = CliRunner().invoke(main, ['check', *paths])

    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines[0].startswith(f'{paths[0]}: two-handed,')
    assert lines[1:3] == ['  cursor 0: 11 objects', '  cursor 1: 9 objects']
    assert lines[3].startswith(f'{paths[1]}: one-handed,')


def test_check_options(write_play):
    path = write_play('two.json', play_document())
    result = CliRunner().invoke(
        main,
        ['check', '--spacing-threshold', '0', '--min-count', '11', path],
    )

    assert result.exit_code == 0, result.output
    assert result.output.splitlines()[1:] == ['  cursor 0: 20 objects']


def test_check_malformed(write_play):
    document = play_document()
    document['replay']['hit_object_data'].pop()
    path = write_play('short.json', document)

    result = CliRunner().invoke(main, ['check', path])

    assert result.exit_code != 0
    assert 'Error' in result.output
