from __future__ import annotations

"""Action resolution tuning.

Costs and gains themselves live on each ``content.types.ActionSpec``; this
module only holds the multipliers and the weekly cash schedule.
"""

from typing import FrozenSet

# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------

MAX_ACTIONS_PER_WEEK: int = 3

# ---------------------------------------------------------------------------
# Mastery distribution
# ---------------------------------------------------------------------------

MASTERY_GAIN_SCALE: float = 1.5

# Mental multiplier: MENTAL_FLOOR + MENTAL_SPAN * mental/100 (0.6x .. 1.4x).
MENTAL_FLOOR: float = 0.6
MENTAL_SPAN: float = 0.8

# Per-course jitter, uniform in [JITTER_LOW, JITTER_LOW + JITTER_SPAN].
JITTER_LOW: float = 0.8
JITTER_SPAN: float = 0.4

MASTERY_MAX: float = 100.0

# Courses with no declared difficulty weigh like a middling course.
DEFAULT_DIFFICULTY: int = 3

# ---------------------------------------------------------------------------
# Weekly cash flow
# ---------------------------------------------------------------------------

WEEKLY_LIVING_EXPENSE: int = 300
ALLOWANCE_AMOUNT: int = 1500

# Week numbers (of the week being resolved) on which the allowance arrives.
ALLOWANCE_WEEKS: FrozenSet[int] = frozenset({1, 5, 9, 13, 17})

# ---------------------------------------------------------------------------
# Efficiency
# ---------------------------------------------------------------------------

BASE_EFFICIENCY: float = 1.0
