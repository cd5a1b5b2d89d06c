from __future__ import annotations

from typing import Optional

from content.catalog import ContentCatalog

from . import config as adm_cfg


def tier_value(tier: Optional[str]) -> int:
    """T0 -> 6 ... T5 -> 1; unknown tiers count as 1."""
    return adm_cfg.TIER_VALUES.get(str(tier), adm_cfg.DEFAULT_TIER_VALUE)


def university_tier_value(catalog: ContentCatalog, name: Optional[str]) -> int:
    uni = catalog.university_by_name(name)
    return tier_value(uni.tier if uni is not None else adm_cfg.FALLBACK_TIER)


def background_score(target_tier: int, player_tier: int) -> float:
    """100 at or below the home tier, minus 15 per tier of reach, floored at 0."""
    gap = max(0, int(target_tier) - int(player_tier))
    return max(0.0, adm_cfg.BACKGROUND_BASE - gap * adm_cfg.BACKGROUND_STEP)


def acceptance_threshold(target_tier: int) -> float:
    return adm_cfg.ACCEPT_BASE + int(target_tier) * adm_cfg.ACCEPT_PER_TIER
