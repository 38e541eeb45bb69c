from collections import namedtuple
import enum


class Mod(enum.IntFlag):
    """The mods in osu!droid.
    """
    no_fail = 1
    easy = 1 << 1
    hidden = 1 << 3
    hard_rock = 1 << 4
    sudden_death = 1 << 5
    double_time = 1 << 6
    relax = 1 << 7
    half_time = 1 << 8
    nightcore = 1 << 9  # always used with double_time
    flashlight = 1 << 10
    autoplay = 1 << 11
    auto_pilot = 1 << 13
    perfect = 1 << 14
    scoreV2 = 1 << 29
    precise = 1 << 30  # droid only
    really_easy = 1 << 31  # droid only
    small_circle = 1 << 32  # droid only
    speed_up = 1 << 33  # droid only, legacy

    @classmethod
    def parse(cls, cs):
        """Parse a mod mask out of an osu!droid mod string.

        osu!droid stores one letter per mod, for example ``'hd'`` is
        hidden + double time.

        Parameters
        ----------
        cs : str
            The mod string.

        Returns
        -------
        mod_mask : Mod
            The mod mask.

        Raises
        ------
        ValueError
            Raised when ``cs`` contains a letter that is not a droid mod.
        """
        mapping = {
            'n': cls.no_fail,
            'e': cls.easy,
            'h': cls.hidden,
            'r': cls.hard_rock,
            'u': cls.sudden_death,
            'd': cls.double_time,
            'x': cls.relax,
            't': cls.half_time,
            'c': cls.nightcore,
            'i': cls.flashlight,
            'a': cls.autoplay,
            'p': cls.auto_pilot,
            'f': cls.perfect,
            'v': cls.scoreV2,
            's': cls.precise,
            'l': cls.really_easy,
            'm': cls.small_circle,
            'b': cls.speed_up,
        }

        mod = cls(0)
        for c in cs:
            try:
                mod |= mapping[c]
            except KeyError:
                raise ValueError(f'unknown mod: {c!r} in {cs!r}')

        return mod


speed_changing_mods = Mod.double_time | Mod.nightcore | Mod.half_time


def speed_multiplier(mods):
    """The rate the map is played at with the given mods.

    Parameters
    ----------
    mods : Mod
        The enabled mods.

    Returns
    -------
    multiplier : float
        1.5 for double time and nightcore, 0.75 for half time, 1 otherwise.
    """
    if mods & (Mod.double_time | Mod.nightcore):
        return 1.5
    if mods & Mod.half_time:
        return 0.75
    return 1.0


def circle_radius(cs):
    """Compute the ``CS`` attribute into a circle radius in osu! pixels.

    Parameters
    ----------
    cs : float
        The circle size.

    Returns
    -------
    radius : float
        The radius in osu! pixels.
    """
    return (512 / 16) * (1 - 0.7 * (cs - 5) / 5)


class HitWindows(namedtuple('HitWindows', 'hit_300, hit_100, hit_50')):
    """Times to hit an object at various accuracies

    Parameters
    ----------
    hit_300 : float
        The maxumium number of milliseconds away from exactly on time a hit
        can be to still be a 300
    hit_100 : float
        The maxumium number of milliseconds away from exactly on time a hit
        can be to still be a 100
    hit_50 : float
        The maxumium number of milliseconds away from exactly on time a hit
        can be to still be a 50

    Notes
    -----
    A hit further than the ``hit_50`` value away from the time of a hit object
    is a miss.
    """


def droid_hit_windows(od, precise=False):
    """Convert an overall difficulty value into the osu!droid hit windows.

    Parameters
    ----------
    od : float
        The overall difficulty.
    precise : bool, optional
        Use the tighter windows of the precise mod.

    Returns
    -------
    hw : HitWindows
        A namedtuple of numbers of milliseconds to hit an object at different
        accuracies.
    """
    if precise:
        return HitWindows(
            hit_300=55 + 6 * (5 - od),
            hit_100=120 + 8 * (5 - od),
            hit_50=180 + 10 * (5 - od),
        )

    return HitWindows(
        hit_300=75 + 5 * (5 - od),
        hit_100=150 + 10 * (5 - od),
        hit_50=250 + 10 * (5 - od),
    )


def od_without_speed_mods(beatmap, mods):
    """The OD of ``beatmap`` with ``mods`` applied, ignoring speed changes.

    Replay times are recorded against the unscaled map, so hit windows for
    replay analysis come from the OD before double time or half time are
    folded in.

    Parameters
    ----------
    beatmap : Beatmap
        The beatmap.
    mods : Mod
        The enabled mods.

    Returns
    -------
    od : float
        The OD value.
    """
    mods = Mod(mods) & ~speed_changing_mods
    return beatmap.od(
        easy=bool(mods & Mod.easy),
        hard_rock=bool(mods & Mod.hard_rock),
    )
