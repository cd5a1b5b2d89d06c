"""Action resolution engine.

Weekly action selection (capped at three), all-or-nothing batch pricing,
per-action cost then gain, difficulty-weighted mastery distribution and the
weekly living expense / allowance schedule.
"""

from .mastery import distribute_mastery, mastery_pool, mental_multiplier
from .resolution import SHORTFALL_MESSAGES, allowance_due, batch_shortfall, resolve_week
from .selection import SELECTION_LIMIT_MESSAGE, SelectionOutcome, toggle_action
from .types import Efficiencies, WeeklyResolution

__all__ = [
    "Efficiencies",
    "WeeklyResolution",
    "SelectionOutcome",
    "SELECTION_LIMIT_MESSAGE",
    "SHORTFALL_MESSAGES",
    "toggle_action",
    "batch_shortfall",
    "resolve_week",
    "allowance_due",
    "mastery_pool",
    "mental_multiplier",
    "distribute_mastery",
]
