import math

from twohand.position import Position, angle_between, playfield_center


def test_vector_arithmetic():
    assert Position(1, 2) + Position(3, 4) == Position(4, 6)
    assert Position(1, 2) - Position(3, 5) == Position(-2, -3)
    assert Position(1.5, -2).scale(2) == Position(3, -4)


def test_distance():
    assert Position(0, 0).distance(Position(3, 4)) == 5
    assert Position(3, 4).length == 5


def test_angle_between():
    assert math.isclose(angle_between(Position(1, 0), Position(0, 1)),
                        math.pi / 2)
    assert math.isclose(angle_between(Position(0, 1), Position(1, 0)),
                        math.pi / 2)
    assert math.isclose(angle_between(Position(1, 0), Position(-1, 0)),
                        math.pi)
    assert angle_between(Position(2, 0), Position(5, 0)) == 0


def test_angle_between_zero_vector():
    assert angle_between(Position(0, 0), Position(1, 0)) is None
    assert angle_between(Position(1, 0), Position(0, 0)) is None


def test_playfield_center():
    assert playfield_center == Position(256, 192)
