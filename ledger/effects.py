from __future__ import annotations

"""Serializable effect descriptors and their single generic applier.

Content tables (random events, shop items) describe what they do as data:
a set of stat deltas, social deltas, a money delta and a message. A
``ConditionalEffect`` picks one of two such descriptors by comparing a stat
against a threshold. No content entry carries executable code.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Literal, Mapping, Union

from .service import apply_delta, apply_social_delta
from .types import PlayerStats, Social

Comparison = Literal["gt", "ge", "lt", "le"]


@dataclass(frozen=True, slots=True)
class EffectSpec:
    stats: Mapping[str, float] = field(default_factory=dict)
    social: Mapping[str, float] = field(default_factory=dict)
    money: int = 0
    message: str = ""

    def to_json_dict(self) -> Dict[str, Any]:
        return {
            "kind": "effect",
            "stats": dict(self.stats),
            "social": dict(self.social),
            "money": int(self.money),
            "message": self.message,
        }


@dataclass(frozen=True, slots=True)
class ConditionalEffect:
    stat: str
    threshold: float
    then: EffectSpec
    otherwise: EffectSpec
    comparison: Comparison = "gt"

    def resolve(self, stats: PlayerStats) -> EffectSpec:
        v = stats.get(self.stat)
        t = float(self.threshold)
        hit = {
            "gt": v > t,
            "ge": v >= t,
            "lt": v < t,
            "le": v <= t,
        }[self.comparison]
        return self.then if hit else self.otherwise

    def to_json_dict(self) -> Dict[str, Any]:
        return {
            "kind": "conditional",
            "stat": self.stat,
            "comparison": self.comparison,
            "threshold": float(self.threshold),
            "then": self.then.to_json_dict(),
            "otherwise": self.otherwise.to_json_dict(),
        }


Effect = Union[EffectSpec, ConditionalEffect]


@dataclass(frozen=True, slots=True)
class EffectResult:
    stats: PlayerStats
    social: Social
    money: int
    message: str


def resolve_effect(effect: Effect, stats: PlayerStats) -> EffectSpec:
    if isinstance(effect, ConditionalEffect):
        return effect.resolve(stats)
    return effect


def apply_effect(stats: PlayerStats, social: Social, money: int, effect: Effect) -> EffectResult:
    """Apply an effect descriptor through the ledger's clamping path."""
    spec = resolve_effect(effect, stats)
    return EffectResult(
        stats=apply_delta(stats, spec.stats),
        social=apply_social_delta(social, spec.social),
        money=int(money) + int(spec.money),
        message=spec.message,
    )
