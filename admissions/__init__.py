"""Admissions pipeline.

University entry (gaokao score and reach roll), application screening,
interviews, and final ending classification. Phase sequencing lives in
``game.reducer``; this package only scores.
"""

from .gaokao import ReachAttempt, attempt_university, reach_chance, roll_gaokao_score
from .interview import InterviewStep, answer_question, final_score, interview_background_score, start_interview
from .outcome import classify_ending, failure_kind, phase_stats
from .screening import ScreeningResult, estimate_success_chance, screen_application, screening_probability
from .tiers import acceptance_threshold, background_score, tier_value, university_tier_value
from .types import (
    Applicant,
    Application,
    ApplicationPhase,
    ApplicationStatus,
    CareerStats,
    CurrentInterview,
    Ending,
    PhaseApplicationStats,
)

__all__ = [
    "Applicant",
    "Application",
    "ApplicationPhase",
    "ApplicationStatus",
    "CurrentInterview",
    "CareerStats",
    "PhaseApplicationStats",
    "Ending",
    "ReachAttempt",
    "ScreeningResult",
    "InterviewStep",
    "roll_gaokao_score",
    "reach_chance",
    "attempt_university",
    "tier_value",
    "university_tier_value",
    "background_score",
    "acceptance_threshold",
    "estimate_success_chance",
    "screening_probability",
    "screen_application",
    "interview_background_score",
    "start_interview",
    "final_score",
    "answer_question",
    "classify_ending",
    "failure_kind",
    "phase_stats",
]
