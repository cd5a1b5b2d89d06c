from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass(frozen=True, slots=True)
class PlayerStats:
    gpa: float = 0.0
    research: float = 0.0
    competition: float = 0.0
    english: float = 40.0
    mental: float = 80.0
    stamina: float = 100.0

    def get(self, field: str) -> float:
        return float(getattr(self, field))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class Social:
    classmates: float = 0.0
    seniors: float = 0.0

    def get(self, field: str) -> float:
        return float(getattr(self, field))

    @property
    def mean(self) -> float:
        return (self.classmates + self.seniors) / 2.0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class Cost:
    """Aggregate non-negative cost of an action batch."""

    stamina: float = 0.0
    mental: float = 0.0
    money: int = 0

    def __add__(self, other: "Cost") -> "Cost":
        return Cost(
            stamina=self.stamina + other.stamina,
            mental=self.mental + other.mental,
            money=self.money + other.money,
        )
