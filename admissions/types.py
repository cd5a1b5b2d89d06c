from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Literal, Optional, Tuple

from content.types import InterviewQuestion
from ledger.types import PlayerStats, Social
from mentors.types import Mentor

ApplicationStatus = Literal["pending", "interviewing", "accepted", "rejected", "waitlist"]
ApplicationPhase = Literal["summer_camp", "pre_recommendation"]

PHASE_LABELS: Dict[str, str] = {"summer_camp": "夏令营", "pre_recommendation": "预推免"}


@dataclass(frozen=True, slots=True)
class Application:
    university: str
    major: str
    status: ApplicationStatus
    phase: ApplicationPhase

    def with_status(self, status: ApplicationStatus) -> "Application":
        return replace(self, status=status)

    def to_json_dict(self) -> Dict[str, Any]:
        return {
            "university": self.university,
            "major": self.major,
            "status": self.status,
            "phase": self.phase,
        }


@dataclass(frozen=True, slots=True)
class CurrentInterview:
    university: str
    major: str
    phase: ApplicationPhase
    questions: Tuple[InterviewQuestion, ...]
    background_score: float
    current_index: int = 0
    total_score: float = 0.0

    @property
    def current_question(self) -> InterviewQuestion:
        return self.questions[self.current_index]

    @property
    def is_last_question(self) -> bool:
        return self.current_index >= len(self.questions) - 1

    def to_json_dict(self) -> Dict[str, Any]:
        q = self.current_question
        return {
            "university": self.university,
            "major": self.major,
            "phase": self.phase,
            "current_index": int(self.current_index),
            "question_count": len(self.questions),
            "total_score": float(self.total_score),
            "background_score": float(self.background_score),
            "question": {"id": q.id, "text": q.text, "options": [o.text for o in q.options]},
        }


@dataclass(frozen=True, slots=True)
class CareerStats:
    final_gpa: float
    total_resume_score: int
    final_english: float
    final_social: float
    final_money: int

    def to_json_dict(self) -> Dict[str, Any]:
        return {
            "final_gpa": float(self.final_gpa),
            "total_resume_score": int(self.total_resume_score),
            "final_english": float(self.final_english),
            "final_social": float(self.final_social),
            "final_money": int(self.final_money),
        }


@dataclass(frozen=True, slots=True)
class PhaseApplicationStats:
    applied: int = 0
    interviews: int = 0
    offers: int = 0

    def to_json_dict(self) -> Dict[str, int]:
        return {"applied": self.applied, "interviews": self.interviews, "offers": self.offers}


@dataclass(frozen=True, slots=True)
class Ending:
    """Game-over report.

    ``kind`` is ``success`` or one of the failure keys (``study_abroad``,
    ``teach_for_baoyan``, ``grad_exam``, ``corporate``, ``gap_year``,
    ``entry_level``).
    """

    kind: str
    title: str
    detail: str
    quote: str
    career_stats: CareerStats
    summer_camp: PhaseApplicationStats = field(default_factory=PhaseApplicationStats)
    pre_recommendation: PhaseApplicationStats = field(default_factory=PhaseApplicationStats)
    university: Optional[str] = None

    @property
    def message(self) -> str:
        return f"{self.title}\n{self.detail}"

    def to_json_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "title": self.title,
            "detail": self.detail,
            "quote": self.quote,
            "university": self.university,
            "career_stats": self.career_stats.to_json_dict(),
            "application_stats": {
                "summer_camp": self.summer_camp.to_json_dict(),
                "pre_recommendation": self.pre_recommendation.to_json_dict(),
            },
        }


@dataclass(frozen=True, slots=True)
class Applicant:
    """Snapshot of everything admissions reads about the player."""

    stats: PlayerStats
    social: Social
    resume_score: float
    mentors: Tuple[Mentor, ...]
    home_university: str
    major: str
