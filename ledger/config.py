from __future__ import annotations

"""Bounds for the player's resource ledger.

Every stat write goes through ``ledger.service.apply_delta`` which clamps the
touched field to the range below. Money is deliberately absent: it has no
upper bound and is guarded by affordability checks instead of clamping.
"""

from typing import Dict, Tuple

# ---------------------------------------------------------------------------
# Player stats
# ---------------------------------------------------------------------------

GPA_MAX: float = 4.5
STAT_MAX: float = 100.0

STAT_FIELDS: Tuple[str, ...] = ("gpa", "research", "competition", "english", "mental", "stamina")

STAT_BOUNDS: Dict[str, Tuple[float, float]] = {
    "gpa": (0.0, GPA_MAX),
    "research": (0.0, STAT_MAX),
    "competition": (0.0, STAT_MAX),
    "english": (0.0, STAT_MAX),
    "mental": (0.0, STAT_MAX),
    # Backgrounds may start above 100; the cap applies from the first change.
    "stamina": (0.0, STAT_MAX),
}

# ---------------------------------------------------------------------------
# Social scores
# ---------------------------------------------------------------------------

SOCIAL_FIELDS: Tuple[str, ...] = ("classmates", "seniors")

SOCIAL_BOUNDS: Dict[str, Tuple[float, float]] = {
    "classmates": (0.0, 100.0),
    "seniors": (0.0, 100.0),
}

# Costs are only ever charged against these three resources.
COST_FIELDS: Tuple[str, ...] = ("stamina", "mental", "money")
