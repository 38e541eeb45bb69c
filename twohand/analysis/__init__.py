from .assigner import (
    CursorIndexAssigner,
    CursorInformation,
    DragState,
    hit_window_offset,
)
from .checker import TwoHandChecker, TwoHandResult, analyze
from .gate import gated, spacing_factor, spacing_scores
from .recombine import partition, recombine
from .resolver import IndexedHitObject, Resolution, resolve_indexes


__all__ = [
    "CursorIndexAssigner",
    "CursorInformation",
    "DragState",
    "IndexedHitObject",
    "Resolution",
    "TwoHandChecker",
    "TwoHandResult",
    "analyze",
    "gated",
    "hit_window_offset",
    "partition",
    "recombine",
    "resolve_indexes",
    "spacing_factor",
    "spacing_scores",
]
