from __future__ import annotations

"""Stamina-priced mentor operations: refresh, contact, court, deepen."""

import logging
import random
from dataclasses import replace
from typing import Optional, Sequence, Tuple

from content.catalog import ContentCatalog
from ledger.service import apply_delta
from ledger.types import PlayerStats

from . import config as m_cfg
from .courtship import can_court, roll_courtship
from .generation import generate_batch
from .types import Mentor, MentorOpResult

logger = logging.getLogger(__name__)


def _find(mentors: Sequence[Mentor], mentor_id: str) -> Optional[Mentor]:
    for m in mentors:
        if m.id == mentor_id:
            return m
    return None


def _replace_mentor(mentors: Sequence[Mentor], updated: Mentor) -> Tuple[Mentor, ...]:
    return tuple(updated if m.id == updated.id else m for m in mentors)


def refresh_mentors(
    stats: PlayerStats,
    mentors: Sequence[Mentor],
    potential: Sequence[Mentor],
    *,
    major_type: Optional[str],
    catalog: ContentCatalog,
    rng: random.Random,
) -> MentorOpResult:
    cost = m_cfg.REFRESH_STAMINA_COST
    if stats.stamina < cost:
        return MentorOpResult(
            stats=stats,
            mentors=tuple(mentors),
            potential=tuple(potential),
            log=f"体力不足，无法刷新导师名单（需要 {int(cost)} 点体力）。",
            failure="stamina",
        )
    return MentorOpResult(
        stats=apply_delta(stats, {"stamina": -cost}),
        mentors=tuple(mentors),
        potential=generate_batch(catalog, major_type, rng),
        log=f"你花费了 {int(cost)} 点体力，四处打听，联系了一些新的导师。",
    )


def contact_mentor(
    stats: PlayerStats,
    mentors: Sequence[Mentor],
    potential: Sequence[Mentor],
    mentor_id: str,
) -> MentorOpResult:
    """Move a potential mentor onto the engaged list as ``contacting``."""
    unchanged = dict(stats=stats, mentors=tuple(mentors), potential=tuple(potential))
    target = _find(potential, mentor_id)
    if target is None:
        return MentorOpResult(log="找不到这位导师。", failure="not_found", **unchanged)

    cost = m_cfg.CONTACT_STAMINA_COST
    if stats.stamina < cost:
        return MentorOpResult(
            log=f"体力不足，无法开始套磁（需要 {int(cost)} 体力）。",
            failure="stamina",
            **unchanged,
        )
    return MentorOpResult(
        stats=apply_delta(stats, {"stamina": -cost}),
        mentors=tuple(mentors) + (target.with_status("contacting"),),
        potential=tuple(m for m in potential if m.id != mentor_id),
        log=(
            f"你开始尝试联系 {target.university} {target.school} 的 {target.name} 教授"
            f"（研究方向：{target.research_field}）。"
        ),
    )


def court_mentor(
    stats: PlayerStats,
    mentors: Sequence[Mentor],
    potential: Sequence[Mentor],
    mentor_id: str,
    *,
    resume_score: float,
    rng: random.Random,
) -> MentorOpResult:
    unchanged = dict(stats=stats, mentors=tuple(mentors), potential=tuple(potential))
    target = _find(mentors, mentor_id)
    if target is None:
        return MentorOpResult(log="找不到这位导师。", failure="not_found", **unchanged)
    if not can_court(target):
        return MentorOpResult(log=f"{target.name}目前无法继续套磁。", failure="unavailable", **unchanged)

    cost = m_cfg.COURT_STAMINA_COST
    if stats.stamina < cost:
        return MentorOpResult(
            log=f"体力不足，无法进行套磁（需要 {int(cost)} 体力）。",
            failure="stamina",
            **unchanged,
        )

    updated, message = roll_courtship(target, gpa=stats.gpa, resume_score=resume_score, rng=rng)
    if updated.status in ("hard_offer", "rejected"):
        logger.info("mentor %s courtship settled: %s", updated.id, updated.status)
    return MentorOpResult(
        stats=apply_delta(stats, {"stamina": -cost}),
        mentors=_replace_mentor(mentors, updated),
        potential=tuple(potential),
        log=f"套磁结果: {message}",
    )


def deepen_mentor(
    stats: PlayerStats,
    mentors: Sequence[Mentor],
    potential: Sequence[Mentor],
    mentor_id: str,
    *,
    rng: random.Random,
) -> MentorOpResult:
    """Non-probabilistic upkeep with any engaged mentor; never fails on stamina."""
    target = _find(mentors, mentor_id)
    if target is None:
        return MentorOpResult(
            stats=stats,
            mentors=tuple(mentors),
            potential=tuple(potential),
            log="找不到这位导师。",
            failure="not_found",
        )

    friendship_gain = m_cfg.FRIENDSHIP_GAIN_LOW + int(rng.random() * m_cfg.FRIENDSHIP_GAIN_SPAN)
    research_gain = int(target.reputation) // m_cfg.REPUTATION_PER_RESEARCH_POINT
    updated = replace(target, friendship=min(m_cfg.FRIENDSHIP_MAX, float(target.friendship) + friendship_gain))
    new_stats = apply_delta(stats, {"research": research_gain, "stamina": -m_cfg.DEEPEN_STAMINA_COST})
    return MentorOpResult(
        stats=new_stats,
        mentors=_replace_mentor(mentors, updated),
        potential=tuple(potential),
        log=f"你与{target.name}进行了深度交流。亲密度+{friendship_gain}，科研能力+{research_gain}。",
    )
