from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any, Dict, Literal, Mapping, Optional, Tuple

from ledger.effects import Effect, EffectSpec


MajorType = Literal["cs", "biology", "humanities", "general", "ee", "medicine", "law", "art"]
CourseKind = Literal["compulsory", "elective", "general"]
ResumeKind = Literal["research", "competition"]
ResumeQuality = Literal["common", "rare", "epic", "legendary"]
Tier = Literal["T0", "T1", "T2", "T3", "T4", "T5"]
ShopEffectKind = Literal["STAT", "EFFICIENCY", "RESUME"]


@dataclass(frozen=True, slots=True)
class RandomRange:
    """Inclusive integer range."""

    low: int
    high: int

    def roll(self, rng: random.Random) -> int:
        return int(self.low) + int(rng.random() * (int(self.high) - int(self.low) + 1))

    def to_json_dict(self) -> Dict[str, int]:
        return {"low": int(self.low), "high": int(self.high)}


@dataclass(frozen=True, slots=True)
class University:
    name: str
    min_score: int
    tier: Tier
    baoyan_rate: float
    tags: Tuple[str, ...] = ()
    description: str = ""

    def to_json_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "min_score": int(self.min_score),
            "tier": self.tier,
            "baoyan_rate": float(self.baoyan_rate),
            "tags": list(self.tags),
            "description": self.description,
        }


@dataclass(frozen=True, slots=True)
class CourseSpec:
    id: str
    name: str
    difficulty: int
    credit: int
    kind: CourseKind
    semester: int
    major_restriction: Optional[Tuple[str, ...]] = None
    description: str = ""

    def open_to(self, major_type: Optional[str]) -> bool:
        if self.major_restriction is None:
            return True
        return major_type in self.major_restriction


@dataclass(frozen=True, slots=True)
class ActionSpec:
    name: str
    description: str
    # Costs are declared with either sign; the ledger charges absolute values.
    cost: Mapping[str, float] = field(default_factory=dict)
    gain: Mapping[str, float] = field(default_factory=dict)
    social_gain: Mapping[str, float] = field(default_factory=dict)
    # Extra uniform money payout on top of ``gain`` (part-time work).
    bonus_payout: Optional[RandomRange] = None

    def to_json_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "cost": dict(self.cost),
            "gain": dict(self.gain),
            "social_gain": dict(self.social_gain),
            "bonus_payout": self.bonus_payout.to_json_dict() if self.bonus_payout else None,
        }


@dataclass(frozen=True, slots=True)
class ResumePoolEntry:
    name: str
    quality: ResumeQuality
    score_range: RandomRange


@dataclass(frozen=True, slots=True)
class MajorSpec:
    name: str
    major_type: MajorType
    description: str = ""
    bonus: str = ""


@dataclass(frozen=True, slots=True)
class BackgroundSpec:
    name: str
    description: str
    # Overrides on top of the initial stats.
    stats: Mapping[str, float] = field(default_factory=dict)
    money: int = 1000
    mastery_efficiency: float = 1.0

    def to_json_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "stats": dict(self.stats),
            "money": int(self.money),
            "mastery_efficiency": float(self.mastery_efficiency),
        }


@dataclass(frozen=True, slots=True)
class InterviewOption:
    text: str
    score: int
    feedback: str


@dataclass(frozen=True, slots=True)
class InterviewQuestion:
    id: str
    text: str
    options: Tuple[InterviewOption, ...]


@dataclass(frozen=True, slots=True)
class MentorPool:
    schools: Tuple[str, ...]
    fields: Tuple[str, ...]


@dataclass(frozen=True, slots=True)
class EventOption:
    text: str
    effect: Effect


@dataclass(frozen=True, slots=True)
class GameEvent:
    title: str
    description: str
    options: Tuple[EventOption, ...]
    major_restriction: Optional[Tuple[str, ...]] = None

    def open_to(self, major_type: Optional[str]) -> bool:
        if self.major_restriction is None:
            return True
        return major_type in self.major_restriction

    def to_json_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "options": [{"text": o.text, "effect": o.effect.to_json_dict()} for o in self.options],
            "major_restriction": list(self.major_restriction) if self.major_restriction else None,
        }


@dataclass(frozen=True, slots=True)
class ShopItem:
    """Shop entry. ``kind`` selects which payload field the shop applies.

    STAT       -> ``effect`` through the generic effect applier
    EFFICIENCY -> ``efficiency_bonus`` added to all weekly multipliers
    RESUME     -> a common resume item scored in ``resume_score``
    """

    name: str
    description: str
    cost: int
    kind: ShopEffectKind
    limit: Optional[int] = None
    effect: Optional[EffectSpec] = None
    efficiency_bonus: float = 0.0
    resume_score: Optional[RandomRange] = None
    resume_names: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)

    def to_json_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "cost": int(self.cost),
            "limit": self.limit,
            "kind": self.kind,
        }
