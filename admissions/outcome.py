from __future__ import annotations

"""Ending classification.

Success if any application was accepted, flavored by the target's tier.
Otherwise the first matching failure rule wins:

    study_abroad      english > 85 and money > 15000
    teach_for_baoyan  seniors > 85 and gpa > 3.2
    grad_exam         gpa > 4.0 and mental > 60
    corporate         competition > 80 and classmates > 70
    gap_year          mental < 40
    entry_level       otherwise
"""

import logging
import random
from typing import Callable, Optional, Sequence, Tuple

from content.catalog import ContentCatalog
from content.endings import FAILURE_ENDINGS, QUOTES, SUCCESS_DETAILS, SUCCESS_TITLE, T0_QUOTE
from ledger.types import PlayerStats, Social
from rng_util import pick

from .types import Application, CareerStats, Ending, PhaseApplicationStats

logger = logging.getLogger(__name__)

FailureRule = Tuple[str, Callable[[PlayerStats, Social, int], bool]]

FAILURE_RULES: Tuple[FailureRule, ...] = (
    ("study_abroad", lambda s, soc, money: s.english > 85 and money > 15000),
    ("teach_for_baoyan", lambda s, soc, money: soc.seniors > 85 and s.gpa > 3.2),
    ("grad_exam", lambda s, soc, money: s.gpa > 4.0 and s.mental > 60),
    ("corporate", lambda s, soc, money: s.competition > 80 and soc.classmates > 70),
    ("gap_year", lambda s, soc, money: s.mental < 40),
)
DEFAULT_FAILURE = "entry_level"


def failure_kind(stats: PlayerStats, social: Social, money: int) -> str:
    for key, rule in FAILURE_RULES:
        if rule(stats, social, int(money)):
            return key
    return DEFAULT_FAILURE


def phase_stats(applications: Sequence[Application], phase: str) -> PhaseApplicationStats:
    apps = [a for a in applications if a.phase == phase]
    return PhaseApplicationStats(
        applied=len(apps),
        interviews=sum(1 for a in apps if a.status not in ("rejected", "pending")),
        offers=sum(1 for a in apps if a.status == "accepted"),
    )


def classify_ending(
    *,
    stats: PlayerStats,
    social: Social,
    money: int,
    resume_score: int,
    applications: Sequence[Application],
    home_university: str,
    major: str,
    catalog: ContentCatalog,
    rng: random.Random,
    accepted: Optional[Application] = None,
) -> Ending:
    if accepted is None:
        accepted = next((a for a in applications if a.status == "accepted"), None)

    quote = pick(rng, QUOTES)

    if accepted is not None:
        target = catalog.university_by_name(accepted.university)
        tier = target.tier if target is not None else None
        if tier == "T0":
            key = "T0"
            quote = T0_QUOTE
        elif tier == "T1":
            key = "T1"
        elif accepted.university == home_university:
            key = "home"
        else:
            key = "other"
        kind = "success"
        title = SUCCESS_TITLE
        detail = SUCCESS_DETAILS[key].format(
            home=home_university,
            major=major,
            target=accepted.university,
            target_major=accepted.major,
        )
    else:
        kind = failure_kind(stats, social, money)
        title, detail, fixed_quote = FAILURE_ENDINGS[kind]
        if fixed_quote:
            quote = fixed_quote

    logger.info("ending classified: %s", kind)
    return Ending(
        kind=kind,
        title=title,
        detail=detail,
        quote=quote,
        career_stats=CareerStats(
            final_gpa=stats.gpa,
            total_resume_score=int(resume_score),
            final_english=stats.english,
            final_social=social.mean,
            final_money=int(money),
        ),
        summer_camp=phase_stats(applications, "summer_camp"),
        pre_recommendation=phase_stats(applications, "pre_recommendation"),
        university=accepted.university if accepted is not None else None,
    )
