from __future__ import annotations

"""Admissions tuning: tiers, screening weights, interview thresholds, gaokao."""

from dataclasses import dataclass
from typing import Dict

# ---------------------------------------------------------------------------
# Tiers
# ---------------------------------------------------------------------------

TIER_VALUES: Dict[str, int] = {"T0": 6, "T1": 5, "T2": 4, "T3": 3, "T4": 2, "T5": 1}
DEFAULT_TIER_VALUE: int = 1

# Tier assumed for a university missing from the table.
FALLBACK_TIER: str = "T4"

# Background score: BACKGROUND_BASE minus BACKGROUND_STEP per tier the target sits above home.
BACKGROUND_BASE: float = 100.0
BACKGROUND_STEP: float = 15.0

# Resume totals are normalized against this many points.
RESUME_NORMALIZER: float = 200.0

# ---------------------------------------------------------------------------
# Success estimate (0..100)
# ---------------------------------------------------------------------------

ESTIMATE_REFERENCE_TIER: int = 4
ESTIMATE_DEFAULT_BAOYAN_RATE: float = 5.0
ESTIMATE_RATE_DIVISOR: float = 4.0

MENTOR_ESTIMATE_EFFECT: Dict[str, float] = {
    "hard_offer": 25.0,
    "verbal_offer": 12.0,
    "fish_pond": 3.0,
    "rejected": -8.0,
}

# ---------------------------------------------------------------------------
# Initial screening
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ScreeningWeights:
    gpa: float = 0.25
    resume: float = 0.25
    background: float = 0.20
    english: float = 0.10
    seniors: float = 0.10
    estimate: float = 0.10


@dataclass(frozen=True, slots=True)
class EstimateWeights:
    gpa: float = 30.0
    resume: float = 30.0
    background: float = 20.0
    english: float = 10.0
    seniors: float = 10.0


DEFAULT_SCREENING_WEIGHTS = ScreeningWeights()
DEFAULT_ESTIMATE_WEIGHTS = EstimateWeights()

MENTOR_SCREENING_BONUS: Dict[str, float] = {
    "hard_offer": 0.4,
    "verbal_offer": 0.2,
    "fish_pond": 0.05,
    "rejected": -0.15,
}

# Composite is scaled by RATE_FLOOR + RATE_SPAN * baoyan_rate / RATE_PIVOT.
RATE_PIVOT: float = 30.0
RATE_FLOOR: float = 0.7
RATE_SPAN: float = 0.3

# ---------------------------------------------------------------------------
# Interview
# ---------------------------------------------------------------------------

QUESTIONS_PER_INTERVIEW: int = 3
POINTS_PER_QUESTION: float = 20.0
INTERVIEW_WEIGHT: float = 40.0

# Background part of the final score, 60 points at most.
INTERVIEW_BACKGROUND_WEIGHTS: Dict[str, float] = {
    "gpa": 25.0,
    "resume": 20.0,
    "background": 10.0,
    "english": 5.0,
}

ACCEPT_BASE: float = 60.0
ACCEPT_PER_TIER: float = 4.0

# ---------------------------------------------------------------------------
# Gaokao / university selection
# ---------------------------------------------------------------------------

GAOKAO_SCORE_LOW: int = 500
GAOKAO_SCORE_SPAN: int = 230  # score in [500, 729]

REACH_CHANCE_FLOOR: float = 0.1
REACH_CHANCE_STEP: float = 0.1
REACH_FAIL_MENTAL_PENALTY: float = 20.0
