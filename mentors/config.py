from __future__ import annotations

"""Mentor generation and courtship tuning."""

from typing import FrozenSet

# ---------------------------------------------------------------------------
# Generation
# ---------------------------------------------------------------------------

BATCH_SIZE: int = 3
REPUTATION_LOW: int = 40
REPUTATION_SPAN: int = 60  # reputation in [40, 99]
ID_LENGTH: int = 9

# ---------------------------------------------------------------------------
# Stamina costs
# ---------------------------------------------------------------------------

REFRESH_STAMINA_COST: float = 5.0
CONTACT_STAMINA_COST: float = 20.0
COURT_STAMINA_COST: float = 15.0
DEEPEN_STAMINA_COST: float = 10.0

# ---------------------------------------------------------------------------
# Courtship roll
# ---------------------------------------------------------------------------

GPA_WEIGHT: float = 20.0
RESUME_WEIGHT: float = 0.2

DIFFICULTY_BASE: float = 1.5
DIFFICULTY_FLOOR: float = 0.5

CHANCE_MIN: float = 5.0
CHANCE_MAX: float = 95.0

# Share of the success chance that lands as a hard offer.
HARD_OFFER_SHARE: float = 0.15
# Width (in roll points) of the fish-pond band just above the success chance.
FISH_POND_BAND: float = 25.0

COURTABLE_STATUSES: FrozenSet[str] = frozenset({"contacting", "fish_pond"})

# ---------------------------------------------------------------------------
# Relationship upkeep
# ---------------------------------------------------------------------------

FRIENDSHIP_GAIN_LOW: int = 5
FRIENDSHIP_GAIN_SPAN: int = 5  # gain in [5, 9]
FRIENDSHIP_MAX: float = 100.0
REPUTATION_PER_RESEARCH_POINT: int = 20

# Per-mentor chance a verbal offer slips back to the fish pond at rollover.
VERBAL_OFFER_DECAY_P: float = 0.2
