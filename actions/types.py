from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping, Tuple

from courses.types import Course
from ledger.types import PlayerStats, Social

from .config import BASE_EFFICIENCY


@dataclass(frozen=True, slots=True)
class Efficiencies:
    """Weekly gain multipliers.

    ``mastery`` starts at the background's study efficiency; research and
    competition start at 1.0. Shop boosts stack on top for one week.
    """

    mastery: float = BASE_EFFICIENCY
    research: float = BASE_EFFICIENCY
    competition: float = BASE_EFFICIENCY

    def boosted(self, bonus: float) -> "Efficiencies":
        b = float(bonus)
        return replace(
            self,
            mastery=self.mastery + b,
            research=self.research + b,
            competition=self.competition + b,
        )

    def to_dict(self) -> Dict[str, float]:
        return {
            "mastery": float(self.mastery),
            "research": float(self.research),
            "competition": float(self.competition),
        }


@dataclass(frozen=True, slots=True)
class WeeklyResolution:
    """Ledger state after one committed action batch plus the cash schedule.

    ``gains`` sums positive gains per key for the weekly summary (mastery is
    the pool size, money includes bonus payouts).
    """

    stats: PlayerStats
    social: Social
    money: int
    courses: Tuple[Course, ...]
    gains: Mapping[str, float] = field(default_factory=dict)
    logs: Tuple[str, ...] = ()

    def to_json_dict(self) -> Dict[str, Any]:
        return {
            "stats": self.stats.to_dict(),
            "social": self.social.to_dict(),
            "money": int(self.money),
            "courses": [c.to_json_dict() for c in self.courses],
            "gains": dict(self.gains),
            "logs": list(self.logs),
        }
