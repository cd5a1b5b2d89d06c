from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Literal, Optional, Tuple

from ledger.types import PlayerStats

MentorStatus = Literal["none", "contacting", "fish_pond", "verbal_offer", "hard_offer", "rejected"]

# Why a mentor operation was refused.
MentorFailure = Literal["stamina", "not_found", "unavailable"]


@dataclass(frozen=True, slots=True)
class Mentor:
    """A prospective advisor. ``id`` and ``reputation`` never change once generated."""

    id: str
    name: str
    title: str
    reputation: int
    university: str
    school: str
    research_field: str
    friendship: float = 0.0
    status: MentorStatus = "none"

    def with_status(self, status: MentorStatus) -> "Mentor":
        return replace(self, status=status)

    def to_json_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "title": self.title,
            "reputation": int(self.reputation),
            "friendship": float(self.friendship),
            "university": self.university,
            "school": self.school,
            "research_field": self.research_field,
            "status": self.status,
        }


@dataclass(frozen=True, slots=True)
class CourtshipOdds:
    success_chance: float
    hard_offer: float
    verbal_offer: float
    fish_pond: float
    rejected: float

    def to_json_dict(self) -> Dict[str, float]:
        return {
            "success_chance": self.success_chance,
            "hard_offer": self.hard_offer,
            "verbal_offer": self.verbal_offer,
            "fish_pond": self.fish_pond,
            "rejected": self.rejected,
        }


@dataclass(frozen=True, slots=True)
class MentorOpResult:
    """Outcome of one stamina-priced mentor operation.

    On failure ``stats``, ``mentors`` and ``potential`` are the inputs
    unchanged and ``failure`` says why.
    """

    stats: PlayerStats
    mentors: Tuple[Mentor, ...]
    potential: Tuple[Mentor, ...]
    log: str
    failure: Optional[MentorFailure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None
