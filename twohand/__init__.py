from .analysis import TwoHandChecker, TwoHandResult, analyze
from .beatmap import Beatmap, Circle, Slider, Spinner, HitObject
from .difficulty import DifficultyHitObject, StarRating
from .mod import Mod
from .position import Position
from .replay import (
    CursorData,
    CursorOccurrence,
    HitResult,
    MovementType,
    ReplayData,
    ReplayObjectData,
)

__version__ = "0.1.0"


__all__ = [
    "Beatmap",
    "Circle",
    "CursorData",
    "CursorOccurrence",
    "DifficultyHitObject",
    "HitObject",
    "HitResult",
    "Mod",
    "MovementType",
    "Position",
    "ReplayData",
    "ReplayObjectData",
    "Slider",
    "Spinner",
    "StarRating",
    "TwoHandChecker",
    "TwoHandResult",
    "analyze",
]
