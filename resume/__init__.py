"""Resume drop system: saturated research / competition accumulators become resume items."""

from .drops import DropResult, apply_drops, draw_item, roll_quality
from .types import ResumeItem, total_score

__all__ = [
    "ResumeItem",
    "DropResult",
    "total_score",
    "roll_quality",
    "draw_item",
    "apply_drops",
]
