"""Mentor relationship state machine.

Mentors are generated per major type, engaged by contacting them, and then
courted with a weighted roll driven by GPA, resume score and the mentor's
reputation. Verbal offers may decay at each semester rollover.
"""

from .courtship import (
    can_court,
    courtship_odds,
    courtship_outcome,
    decay_verbal_offers,
    roll_courtship,
    success_chance,
)
from .generation import generate_batch, generate_mentor
from .service import contact_mentor, court_mentor, deepen_mentor, refresh_mentors
from .types import CourtshipOdds, Mentor, MentorOpResult, MentorStatus

__all__ = [
    "Mentor",
    "MentorStatus",
    "MentorOpResult",
    "CourtshipOdds",
    "generate_mentor",
    "generate_batch",
    "can_court",
    "success_chance",
    "courtship_outcome",
    "courtship_odds",
    "roll_courtship",
    "decay_verbal_offers",
    "refresh_mentors",
    "contact_mentor",
    "court_mentor",
    "deepen_mentor",
]
