"""Resource ledger: player stats, social scores and money.

All stat writes are clamped per field; batch costs are checked as a whole
before anything is charged.
"""

from .effects import ConditionalEffect, EffectResult, EffectSpec, apply_effect
from .service import apply_delta, apply_social_delta, batch_cost, can_afford, charge, shortfall
from .types import Cost, PlayerStats, Social

__all__ = [
    "PlayerStats",
    "Social",
    "Cost",
    "EffectSpec",
    "ConditionalEffect",
    "EffectResult",
    "apply_delta",
    "apply_social_delta",
    "apply_effect",
    "batch_cost",
    "can_afford",
    "charge",
    "shortfall",
]
