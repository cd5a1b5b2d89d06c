from __future__ import annotations

"""Resource ledger operations.

Pure functions over the frozen ledger records. Nothing here raises for
"can't afford" situations; callers check ``can_afford`` first and turn a
shortfall into a soft rejection.
"""

from dataclasses import replace
from typing import Any, Iterable, Mapping, Optional, Tuple, TypeVar

from .config import COST_FIELDS, SOCIAL_BOUNDS, STAT_BOUNDS
from .types import Cost, PlayerStats, Social

R = TypeVar("R", PlayerStats, Social)


def clamp(x: float, lo: float, hi: float) -> float:
    if x < lo:
        return float(lo)
    if x > hi:
        return float(hi)
    return float(x)


def apply_delta(
    record: R,
    changes: Mapping[str, float],
    bounds: Mapping[str, Tuple[float, float]] = STAT_BOUNDS,
) -> R:
    """Return a copy of ``record`` with additive ``changes`` applied.

    Each touched field is clamped independently to ``bounds``. Untouched
    fields keep their value even if it sits outside the bounds (a stamina
    background of 150 stays 150 until the first stamina change).
    """
    if not changes:
        return record
    updates = {}
    for field, delta in changes.items():
        if field not in bounds:
            raise KeyError(f"unknown ledger field: {field}")
        lo, hi = bounds[field]
        updates[field] = clamp(float(getattr(record, field)) + float(delta), lo, hi)
    return replace(record, **updates)


def apply_social_delta(social: Social, changes: Mapping[str, float]) -> Social:
    return apply_delta(social, changes, SOCIAL_BOUNDS)


def cost_of(raw: Mapping[str, Any]) -> Cost:
    """Normalize a declared cost mapping; signs are ignored."""
    return Cost(
        stamina=abs(float(raw.get("stamina") or 0.0)),
        mental=abs(float(raw.get("mental") or 0.0)),
        money=abs(int(raw.get("money") or 0)),
    )


def batch_cost(costs: Iterable[Mapping[str, Any]]) -> Cost:
    total = Cost()
    for raw in costs:
        total = total + cost_of(raw)
    return total


def shortfall(stats: PlayerStats, money: int, cost: Cost) -> Optional[str]:
    """First resource (stamina, mental, money) the batch cost exceeds, if any."""
    available = {"stamina": stats.stamina, "mental": stats.mental, "money": money}
    for field in COST_FIELDS:
        if float(available[field]) < float(getattr(cost, field)):
            return field
    return None


def can_afford(stats: PlayerStats, money: int, cost: Cost) -> bool:
    return shortfall(stats, money, cost) is None


def charge(stats: PlayerStats, money: int, raw_cost: Mapping[str, Any]) -> Tuple[PlayerStats, int]:
    """Subtract one declared cost (absolute values) from stats and money."""
    cost = cost_of(raw_cost)
    changes = {}
    if cost.stamina:
        changes["stamina"] = -cost.stamina
    if cost.mental:
        changes["mental"] = -cost.mental
    return apply_delta(stats, changes), int(money) - cost.money
