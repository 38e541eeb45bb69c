import inspect

from .position import Position, playfield_center
from .utils import lazyval


class HitObject:
    """An abstract hit element for osu!droid.

    Parameters
    ----------
    position : Position
        Where this element appears on the screen.
    time : float
        When this element appears in the map in milliseconds.
    stack_height : int, optional
        How many objects this element is stacked on top of. This is resolved
        by the beatmap parser; negative values stack towards the bottom right.
    """
    def __init__(self, position, time, stack_height=0):
        self.position = position
        self.time = time
        self.stack_height = stack_height
        self.hr_enabled = False

    def __repr__(self):
        return f'<{type(self).__qualname__}: {self.position}, {self.time:g}ms>'

    @property
    def end_time(self):
        """When this element stops being active in milliseconds.
        """
        return self.time

    @property
    def end_position(self):
        """Where the cursor is when this element stops being active.
        """
        return self.position

    def stack_offset(self, radius):
        """The offset applied to this element by stacking.

        Parameters
        ----------
        radius : float
            The circle radius of the map.

        Returns
        -------
        offset : Position
            The offset to add to a position of this element.
        """
        step = -self.stack_height * radius / 10
        return Position(step, step)

    def stacked_position(self, radius):
        """The position of this element after stacking is applied.
        """
        return self.position + self.stack_offset(radius)

    def stacked_end_position(self, radius):
        """The end position of this element after stacking is applied.
        """
        return self.end_position + self.stack_offset(radius)

    def _flip(self, position):
        return Position(position.x, Position.y_max - position.y)

    @lazyval
    def hard_rock(self):
        """The ``HitObject`` as it would appear with
        :data:`~twohand.mod.Mod.hard_rock` enabled.
        """
        if self.hr_enabled:
            return self

        kwargs = {}
        for name in inspect.signature(type(self)).parameters:
            value = getattr(self, name)
            if name in ('position', 'tail'):
                value = self._flip(value)
            kwargs[name] = value

        obj = type(self)(**kwargs)
        obj.hr_enabled = True
        return obj


class Circle(HitObject):
    """A circle hit element.

    Parameters
    ----------
    position : Position
        Where this circle appears on the screen.
    time : float
        When this circle appears in the map.
    stack_height : int, optional
        The stack height of this circle.
    """


class Slider(HitObject):
    """A slider hit element.

    Parameters
    ----------
    position : Position
        Where the head of this slider appears on the screen.
    time : float
        When this slider appears in the map.
    end_time : float
        When this slider ends in the map.
    tail : Position
        Where the end of the slider path is.
    repeat : int, optional
        How many times the slider path is traversed.
    stack_height : int, optional
        The stack height of this slider.
    """
    def __init__(self,
                 position,
                 time,
                 end_time,
                 tail,
                 repeat=1,
                 stack_height=0):
        super().__init__(position, time, stack_height)
        self._end_time = end_time
        self.tail = tail
        self.repeat = repeat

    @property
    def end_time(self):
        return self._end_time

    @property
    def end_position(self):
        # an even number of traversals ends back on the head
        return self.tail if self.repeat % 2 else self.position


class Spinner(HitObject):
    """A spinner hit element

    Parameters
    ----------
    time : float
        When this spinner appears in the map.
    end_time : float
        When this spinner ends in the map.
    position : Position, optional
        Where this spinner appears on the screen. Spinners are always drawn in
        the center of the playfield.
    """
    def __init__(self, time, end_time, position=playfield_center):
        super().__init__(position, time)
        self._end_time = end_time

    @property
    def end_time(self):
        return self._end_time

    def stack_offset(self, radius):
        return Position(0, 0)


class Beatmap:
    """A beatmap for osu!droid, reduced to what difficulty calculation needs.

    Parameters
    ----------
    circle_size : float
        The ``CS`` attribute of the beatmap.
    overall_difficulty : float
        The ``OD`` attribute of the beatmap.
    hit_objects : list[HitObject]
        The hit objects in the map, sorted by time.
    title : str, optional
        The title of the song.
    artist : str, optional
        The name of the song artist.
    creator : str, optional
        The username of the mapper.
    version : str, optional
        The name of the beatmap's difficulty.
    """
    def __init__(self,
                 *,
                 circle_size,
                 overall_difficulty,
                 hit_objects,
                 title='',
                 artist='',
                 creator='',
                 version=''):
        self.circle_size = circle_size
        self.overall_difficulty = overall_difficulty
        self._hit_objects = list(hit_objects)
        self.title = title
        self.artist = artist
        self.creator = creator
        self.version = version

    @property
    def display_name(self):
        """The name of the map as it appears in game.
        """
        return f'{self.artist} - {self.title} [{self.version}]'

    def __repr__(self):
        return f'<{type(self).__qualname__}: {self.display_name}>'

    def cs(self, *, easy=False, hard_rock=False, small_circle=False):
        """Compute the Circle Size (CS) value for different mods.

        Parameters
        ----------
        easy : bool, optional
            CS with the easy mod enabled.
        hard_rock : bool, optional
            CS with the hard rock mod enabled.
        small_circle : bool, optional
            CS with the osu!droid small circle mod enabled.

        Returns
        -------
        cs : float
            The CS value.
        """
        cs = self.circle_size
        if hard_rock:
            cs = min(1.3 * cs, 10)
        elif easy:
            cs /= 2
        if small_circle:
            cs = min(cs + 4, 10)
        return cs

    def od(self, *, easy=False, hard_rock=False):
        """Compute the Overall Difficulty (OD) value for different mods.

        Parameters
        ----------
        easy : bool, optional
            OD with the easy mod enabled.
        hard_rock : bool, optional
            OD with the hard rock mod enabled.

        Returns
        -------
        od : float
            The OD value.
        """
        od = self.overall_difficulty
        if hard_rock:
            od = min(1.4 * od, 10)
        elif easy:
            od /= 2
        return od

    def hit_objects(self, *, hard_rock=False):
        """Retrieve hit_objects.

        Parameters
        ----------
        hard_rock : bool, optional
            Get the effective position of the hit objects with hard rock
            enabled.

        Returns
        -------
        hit_objects : tuple[HitObject]
            The objects with their effective positions.
        """
        hit_objects = self._hit_objects
        if hard_rock:
            hit_objects = [ob.hard_rock for ob in hit_objects]
        return tuple(hit_objects)

    def _count(self, cls):
        return sum(isinstance(ob, cls) for ob in self._hit_objects)

    @lazyval
    def circles(self):
        """The number of circles in the map.
        """
        return self._count(Circle)

    @lazyval
    def sliders(self):
        """The number of sliders in the map.
        """
        return self._count(Slider)

    @lazyval
    def spinners(self):
        """The number of spinners in the map.
        """
        return self._count(Spinner)
