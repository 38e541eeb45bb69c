from collections import namedtuple
import math


class Position(namedtuple('Position', 'x y')):
    """A position on the osu! screen.

    Parameters
    ----------
    x : int or float
        The x coordinate in the range.
    y : int or float
        The y coordinate in the range.

    Notes
    -----
    The visible region of the osu! standard playfield is [0, 512] by [0, 384].
    Cursor occurrences may fall outside of this range on touch devices.

    ``Position`` doubles as a 2D vector: ``+`` and ``-`` work component-wise
    and :meth:`scale` multiplies both coordinates by a scalar. Note that ``+``
    is *not* tuple concatenation.
    """
    x_max = 512
    y_max = 384

    def __eq__(self, other):
        return self.x == other.x and self.y == other.y

    def __ne__(self, other):
        return not self == other

    __hash__ = tuple.__hash__

    def __add__(self, other):
        return Position(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Position(self.x - other.x, self.y - other.y)

    def scale(self, factor):
        """Multiply both coordinates by ``factor``.

        Parameters
        ----------
        factor : float
            The scalar.

        Returns
        -------
        scaled : Position
            The scaled vector.
        """
        return Position(self.x * factor, self.y * factor)

    def dot(self, other):
        return self.x * other.x + self.y * other.y

    @property
    def length(self):
        """The euclidean length of this position treated as a vector.
        """
        return math.hypot(self.x, self.y)

    def distance(self, other):
        """The straight line distance to another position.

        Parameters
        ----------
        other : Position
            The position to measure to.

        Returns
        -------
        distance : float
            The distance in osu!pixels.
        """
        return math.hypot(self.x - other.x, self.y - other.y)


playfield_center = Position(Position.x_max / 2, Position.y_max / 2)


def angle_between(a, b):
    """The unsigned angle between two vectors.

    Parameters
    ----------
    a, b : Position
        The vectors.

    Returns
    -------
    angle : float or None
        The angle in radians in the range [0, pi]. ``None`` when either vector
        has zero length.
    """
    if not a.length or not b.length:
        return None

    cross = a.x * b.y - a.y * b.x
    return abs(math.atan2(cross, a.dot(b)))
