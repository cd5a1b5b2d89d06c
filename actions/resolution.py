from __future__ import annotations

"""Weekly action batch resolution.

The whole batch is priced first; if any resource falls short nothing is
charged. Otherwise each action pays its cost and then collects its gain, in
selection order, and the week's cash schedule (living expense, allowance)
runs last.
"""

import logging
import random
from typing import Dict, Optional, Sequence

from content.types import ActionSpec
from courses.types import Course
from ledger.service import apply_delta, apply_social_delta, batch_cost, charge, shortfall
from ledger.types import PlayerStats, Social

from . import config as a_cfg
from .mastery import distribute_mastery, mastery_pool
from .types import Efficiencies, WeeklyResolution

logger = logging.getLogger(__name__)

SHORTFALL_MESSAGES: Dict[str, str] = {
    "stamina": "总体力不足以支持本周的所有计划，请重新安排。",
    "mental": "心态过差，无法支撑本周的所有计划，请重新安排。",
    "money": "金钱不足以支持本周的所有计划，请重新安排。",
}


def batch_shortfall(stats: PlayerStats, money: int, actions: Sequence[ActionSpec]) -> Optional[str]:
    """Resource the summed batch cost exceeds (stamina, mental, money order)."""
    return shortfall(stats, money, batch_cost(a.cost for a in actions))


def allowance_due(week: int) -> bool:
    return int(week) in a_cfg.ALLOWANCE_WEEKS


def _bump(gains: Dict[str, float], key: str, value: float) -> None:
    gains[key] = gains.get(key, 0.0) + float(value)


def resolve_week(
    *,
    stats: PlayerStats,
    social: Social,
    money: int,
    courses: Sequence[Course],
    actions: Sequence[ActionSpec],
    efficiencies: Efficiencies,
    week: int,
    rng: random.Random,
) -> WeeklyResolution:
    """Apply an affordable batch plus the weekly cash flow.

    Callers must run ``batch_shortfall`` first; this function does not
    re-check affordability.
    """
    cur_stats = stats
    cur_social = social
    cur_money = int(money)
    cur_courses = tuple(courses)
    gains: Dict[str, float] = {}
    logs = []

    for action in actions:
        cur_stats, cur_money = charge(cur_stats, cur_money, action.cost)

        for key, raw in action.gain.items():
            val = float(raw or 0)
            if key == "mastery":
                pool = mastery_pool(val, efficiencies.mastery, cur_stats.mental)
                cur_courses = distribute_mastery(cur_courses, pool, rng)
                _bump(gains, "mastery", pool)
                continue
            if key == "money":
                cur_money += int(val)
                _bump(gains, "money", val)
                continue
            if key == "research":
                val *= efficiencies.research
            elif key == "competition":
                val *= efficiencies.competition
            if val > 0:
                _bump(gains, key, val)
            cur_stats = apply_delta(cur_stats, {key: val})

        if action.social_gain:
            for key, raw in action.social_gain.items():
                if float(raw or 0) > 0:
                    _bump(gains, key, float(raw))
            cur_social = apply_social_delta(cur_social, action.social_gain)

        if action.bonus_payout is not None:
            extra = action.bonus_payout.roll(rng)
            cur_money += extra
            _bump(gains, "money", extra)
            logs.append(f"{action.name}表现出色，额外赚到了 {extra} 元。")

        logs.append(f"{action.name}: {action.description}")

    cur_money -= a_cfg.WEEKLY_LIVING_EXPENSE
    logs.append(f"本周生活费支出：{a_cfg.WEEKLY_LIVING_EXPENSE}元。")

    if allowance_due(week):
        cur_money += a_cfg.ALLOWANCE_AMOUNT
        logs.append(f"月初了，家里寄来的生活费 {a_cfg.ALLOWANCE_AMOUNT} 元已到账。")

    logger.debug("week %s resolved: %d actions, money %d -> %d", week, len(actions), money, cur_money)
    return WeeklyResolution(
        stats=cur_stats,
        social=cur_social,
        money=cur_money,
        courses=cur_courses,
        gains=gains,
        logs=tuple(logs),
    )
