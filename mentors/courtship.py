from __future__ import annotations

"""Mentor courtship state machine.

    none -> contacting -> {fish_pond, verbal_offer, hard_offer, rejected}
    fish_pond -> {fish_pond, verbal_offer, hard_offer, rejected}
    verbal_offer -> fish_pond        (rollover decay only)

``hard_offer`` and ``rejected`` never receive another courtship roll.
"""

import logging
import random
from typing import Sequence, Tuple

from . import config as m_cfg
from .types import CourtshipOdds, Mentor, MentorStatus

logger = logging.getLogger(__name__)


def can_court(mentor: Mentor) -> bool:
    return mentor.status in m_cfg.COURTABLE_STATUSES


def success_chance(gpa: float, resume_score: float, reputation: float) -> float:
    base_power = float(gpa) * m_cfg.GPA_WEIGHT + float(resume_score) * m_cfg.RESUME_WEIGHT
    difficulty = max(m_cfg.DIFFICULTY_FLOOR, m_cfg.DIFFICULTY_BASE - float(reputation) / 100.0)
    return min(m_cfg.CHANCE_MAX, max(m_cfg.CHANCE_MIN, base_power * difficulty))


def courtship_outcome(chance: float, roll: float) -> MentorStatus:
    """Map a roll in [0, 100) onto the outcome bands for ``chance``."""
    if roll < chance * m_cfg.HARD_OFFER_SHARE:
        return "hard_offer"
    if roll < chance:
        return "verbal_offer"
    if roll < chance + m_cfg.FISH_POND_BAND:
        return "fish_pond"
    return "rejected"


def courtship_odds(gpa: float, resume_score: float, reputation: float) -> CourtshipOdds:
    """Exact outcome probabilities (in percent) for one roll."""
    c = success_chance(gpa, resume_score, reputation)
    hard = c * m_cfg.HARD_OFFER_SHARE
    fish = max(0.0, min(100.0, c + m_cfg.FISH_POND_BAND) - c)
    return CourtshipOdds(
        success_chance=c,
        hard_offer=hard,
        verbal_offer=c - hard,
        fish_pond=fish,
        rejected=max(0.0, 100.0 - c - fish),
    )


def _outcome_message(mentor: Mentor, status: MentorStatus) -> str:
    n = mentor.name
    if status == "hard_offer":
        return f"{n}教授对你的表现非常满意，明确表示：“只要你拿到推免资格，我这边的名额一定给你。”这就是传说中的铁Offer！"
    if status == "verbal_offer":
        return f"{n}教授给了你口头承诺，但提醒你：“今年优秀的学生很多，你还需要在夏令营/预推免中证明自己。”（拿到口头Offer，但有被放鸽子的风险）"
    if status == "fish_pond":
        return f"{n}教授回复了你的邮件，表示：“欢迎报考我的研究生，请关注后续的夏令营通知。”（典型的客套话，你被放入了“鱼塘”）"
    return f"{n}教授婉拒了你，理由是：“今年课题组名额已满，建议你联系其他优秀的老师。”"


def roll_courtship(
    mentor: Mentor,
    *,
    gpa: float,
    resume_score: float,
    rng: random.Random,
) -> Tuple[Mentor, str]:
    """One courtship roll. Raises ValueError for a mentor that cannot be courted."""
    if not can_court(mentor):
        raise ValueError(f"mentor {mentor.id} cannot be courted from status {mentor.status}")
    chance = success_chance(gpa, resume_score, mentor.reputation)
    roll = rng.random() * 100.0
    status = courtship_outcome(chance, roll)
    logger.debug("courtship mentor=%s chance=%.2f roll=%.2f -> %s", mentor.id, chance, roll, status)
    return mentor.with_status(status), _outcome_message(mentor, status)


def decay_verbal_offers(mentors: Sequence[Mentor], rng: random.Random) -> Tuple[Tuple[Mentor, ...], Tuple[str, ...]]:
    """Semester-rollover decay: each verbal offer slips to fish_pond with p=0.2.

    Only verbal-offer mentors consume a random draw.
    """
    out = []
    logs = []
    for m in mentors:
        if m.status == "verbal_offer" and rng.random() < m_cfg.VERBAL_OFFER_DECAY_P:
            m = m.with_status("fish_pond")
            logs.append(f"糟糕！{m.university or '本校'}的{m.name}似乎反悔了之前的口头承诺，把你放入了候补名单（养鱼）。")
        out.append(m)
    return tuple(out), tuple(logs)
