from enum import unique, IntEnum
import logging

import numpy as np

from .beatmap import Circle, Slider, Spinner
from .mod import Mod, circle_radius, speed_multiplier
from .position import angle_between

log = logging.getLogger(__name__)


@unique
class Strain(IntEnum):
    """Indices for the strain specific values.
    """
    speed = 0
    aim = 1


class DifficultyHitObject:
    """A hit object with the attributes used to calculate difficulty.

    Parameters
    ----------
    hit_object : HitObject
        The hit object to wrap, already adjusted for position changing mods.
    radius : float
        The circle radius.
    speed_multiplier : float, optional
        The rate the map is played at.
    previous : DifficultyHitObject, optional
        The previous difficulty hit object.
    before_previous : DifficultyHitObject, optional
        The difficulty hit object before ``previous``.

    Notes
    -----
    ``delta_time`` and ``strain_time`` are plain attributes so that a
    difficulty object can be re-anchored to a different predecessor after it
    was created; strains are only computed by :meth:`StarRating.calculate_all`.
    """
    almost_diameter = 90

    stream_spacing = 110
    single_spacing = 125

    circle_size_buffer_threshold = 30

    min_strain_time = 25

    def __init__(self,
                 hit_object,
                 radius,
                 speed_multiplier=1.0,
                 previous=None,
                 before_previous=None):
        self.hit_object = hit_object
        self.radius = radius

        self.start_time = hit_object.time / speed_multiplier
        self.end_time = hit_object.end_time / speed_multiplier

        self.stacked_position = hit_object.stacked_position(radius)
        self.stacked_end_position = hit_object.stacked_end_position(radius)

        scaling_factor = 52 / radius
        if radius < self.circle_size_buffer_threshold:
            scaling_factor *= 1 + min(
                self.circle_size_buffer_threshold - radius,
                5,
            ) / 50

        self.normalized_start = self.stacked_position.scale(scaling_factor)
        self.normalized_end = self.stacked_end_position.scale(scaling_factor)

        self.jump_distance = 0.0
        self.travel_distance = 0.0
        self.angle = None
        self.delta_time = 0.0
        self.strain_time = self.min_strain_time
        self.strains = 0.0, 0.0

        if previous is not None:
            self._set_distances(previous, before_previous)
            self.delta_time = self.start_time - previous.start_time
            self.strain_time = max(self.min_strain_time, self.delta_time)

    def _set_distances(self, previous, before_previous):
        if self.is_spinner or previous.is_spinner:
            return

        if isinstance(previous.hit_object, Slider):
            self.travel_distance = previous.normalized_start.distance(
                previous.normalized_end,
            )

        self.jump_distance = self.normalized_start.distance(
            previous.normalized_end,
        )

        if before_previous is not None and not before_previous.is_spinner:
            self.angle = angle_between(
                before_previous.normalized_end - previous.normalized_start,
                self.normalized_start - previous.normalized_end,
            )

    @property
    def is_spinner(self):
        return isinstance(self.hit_object, Spinner)

    @property
    def is_slider(self):
        return isinstance(self.hit_object, Slider)

    @property
    def speed_strain(self):
        return self.strains[Strain.speed]

    @property
    def aim_strain(self):
        return self.strains[Strain.aim]

    def spacing_weight(self, distance, strain):
        if strain == Strain.speed:
            if distance > self.single_spacing:
                return 2.5
            elif distance > self.stream_spacing:
                return (
                    1.6 +
                    0.9 *
                    (distance - self.stream_spacing) /
                    (self.single_spacing - self.stream_spacing)
                )
            elif distance > self.almost_diameter:
                return (
                    1.2 +
                    0.4 *
                    (distance - self.almost_diameter) /
                    (self.stream_spacing - self.almost_diameter)
                )
            elif distance > self.almost_diameter / 2:
                return (
                    0.95 +
                    0.25 *
                    (distance - self.almost_diameter / 2) /
                    (self.almost_diameter / 2.0)
                )
            return 0.95

        return distance ** 0.99

    def __repr__(self):
        return (
            f'<{type(self).__qualname__}: {self.hit_object!r},'
            f' delta={self.delta_time:g}ms, jump={self.jump_distance:.2f}>'
        )


class StarRating:
    """Difficulty calculation for an osu!droid beatmap.

    Parameters
    ----------
    beatmap : Beatmap
        The beatmap to calculate.
    mods : Mod, optional
        The mods to calculate with.

    Attributes
    ----------
    objects : list[DifficultyHitObject]
        The difficulty objects :meth:`calculate_all` aggregates. Replacing
        this list and calling :meth:`calculate_all` again recomputes the star
        rating from the new sequence.
    aim, speed, total : float
        The star rating components from the last :meth:`calculate_all`.
    """
    decay_base = 0.3, 0.15
    weight_scaling = 1400, 26.25

    strain_step = 400
    decay_weight = 0.9

    star_scaling_factor = 0.0675
    extreme_scaling_factor = 0.5

    def __init__(self, beatmap, mods=Mod(0)):
        self.map = beatmap
        self.mods = Mod(mods)
        self.aim = self.speed = self.total = 0.0
        self.objects = self.generate_difficulty_hit_objects()
        self.calculate_all()

    @property
    def speed_multiplier(self):
        return speed_multiplier(self.mods)

    @property
    def radius(self):
        """The circle radius with the current mods.
        """
        return circle_radius(
            self.map.cs(
                easy=bool(self.mods & Mod.easy),
                hard_rock=bool(self.mods & Mod.hard_rock),
                small_circle=bool(self.mods & Mod.small_circle),
            ),
        )

    def generate_difficulty_hit_objects(self, hit_objects=None):
        """Create difficulty objects for a sequence of hit objects.

        Parameters
        ----------
        hit_objects : iterable[HitObject], optional
            The hit objects to wrap, sorted by time and already adjusted for
            position changing mods. Defaults to every object in the beatmap.

        Returns
        -------
        objects : list[DifficultyHitObject]
            New difficulty objects. ``self.objects`` is not modified.
        """
        if hit_objects is None:
            hit_objects = self.map.hit_objects(
                hard_rock=bool(self.mods & Mod.hard_rock),
            )

        radius = self.radius
        multiplier = self.speed_multiplier

        out = []
        append = out.append
        previous = before_previous = None
        for hit_object in hit_objects:
            new = DifficultyHitObject(
                hit_object,
                radius,
                multiplier,
                previous,
                before_previous,
            )
            append(new)
            before_previous = previous
            previous = new

        return out

    def _calculate_strain(self, current, previous, strain):
        result = 0
        if isinstance(current.hit_object, (Circle, Slider)):
            result = current.spacing_weight(
                current.jump_distance,
                strain,
            ) * self.weight_scaling[strain]

        result /= current.strain_time
        decay = self.decay_base[strain] ** (current.delta_time / 1000)
        return previous.strains[strain] * decay + result

    def _calculate_difficulty(self, strain, difficulty_hit_objects):
        highest_strains = []
        append_highest_strain = highest_strains.append

        strain_step = self.strain_step
        interval_end = strain_step
        max_strain = 0

        previous = None
        for difficulty_hit_object in difficulty_hit_objects:
            while difficulty_hit_object.start_time > interval_end:
                append_highest_strain(max_strain)

                if previous is None:
                    max_strain = 0
                else:
                    decay = self.decay_base[strain] ** (
                        (interval_end - previous.start_time) / 1000
                    )
                    max_strain = previous.strains[strain] * decay

                interval_end += strain_step

            max_strain = max(max_strain, difficulty_hit_object.strains[strain])
            previous = difficulty_hit_object

        if previous is not None:
            append_highest_strain(max_strain)

        difficulty = 0
        weight = 1

        decay_weight = self.decay_weight
        for strain in sorted(highest_strains, reverse=True):
            difficulty += weight * strain
            weight *= decay_weight

        return difficulty

    def calculate_all(self):
        """Compute the strains of ``self.objects`` in their current order and
        aggregate them into ``aim``, ``speed`` and ``total`` stars.
        """
        previous = None
        for difficulty_hit_object in self.objects:
            if previous is None:
                difficulty_hit_object.strains = 0.0, 0.0
            else:
                difficulty_hit_object.strains = (
                    self._calculate_strain(
                        difficulty_hit_object,
                        previous,
                        Strain.speed,
                    ),
                    self._calculate_strain(
                        difficulty_hit_object,
                        previous,
                        Strain.aim,
                    ),
                )
            previous = difficulty_hit_object

        aim = self._calculate_difficulty(Strain.aim, self.objects)
        speed = self._calculate_difficulty(Strain.speed, self.objects)

        self.aim = aim = float(np.sqrt(aim) * self.star_scaling_factor)
        self.speed = speed = float(np.sqrt(speed) * self.star_scaling_factor)
        self.total = (
            aim +
            speed +
            abs(speed - aim) *
            self.extreme_scaling_factor
        )
        log.debug(
            'calculated %d objects: %.2f stars (aim %.2f, speed %.2f)',
            len(self.objects),
            self.total,
            self.aim,
            self.speed,
        )
        return self.total

    def __repr__(self):
        return (
            f'<{type(self).__qualname__}: {self.map.display_name},'
            f' {self.total:.2f} stars>'
        )
