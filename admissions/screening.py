from __future__ import annotations

"""Application submission: success estimate and initial screening.

Screening is a single Bernoulli draw: ``interviewing`` or ``rejected``.
``waitlist`` exists as a status but screening never assigns it.
"""

import logging
import math
import random
from dataclasses import dataclass
from typing import Optional

from content.catalog import ContentCatalog
from content.types import University

from . import config as adm_cfg
from .interview import start_interview
from .tiers import background_score, tier_value, university_tier_value
from .types import PHASE_LABELS, Applicant, Application, ApplicationPhase, CurrentInterview

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ScreeningResult:
    application: Application
    interview: Optional[CurrentInterview]
    probability: float
    log: str

    @property
    def invited(self) -> bool:
        return self.interview is not None


def estimate_success_chance(
    applicant: Applicant,
    catalog: ContentCatalog,
    weights: adm_cfg.EstimateWeights = adm_cfg.DEFAULT_ESTIMATE_WEIGHTS,
) -> int:
    """Overall 0-100 chance estimate against a reference T2-tier target."""
    s = applicant.stats
    player_tier = university_tier_value(catalog, applicant.home_university)
    bg = background_score(adm_cfg.ESTIMATE_REFERENCE_TIER, player_tier)

    base = (
        (s.gpa / 4.5) * weights.gpa
        + (float(applicant.resume_score) / adm_cfg.RESUME_NORMALIZER) * weights.resume
        + (bg / 100.0) * weights.background
        + (s.english / 100.0) * weights.english
        + (applicant.social.seniors / 100.0) * weights.seniors
    )

    mentor_effect = sum(adm_cfg.MENTOR_ESTIMATE_EFFECT.get(m.status, 0.0) for m in applicant.mentors)

    home = catalog.university_by_name(applicant.home_university)
    rate = float(home.baoyan_rate) if home is not None and home.baoyan_rate else adm_cfg.ESTIMATE_DEFAULT_BAOYAN_RATE

    estimate = base + rate / adm_cfg.ESTIMATE_RATE_DIVISOR + mentor_effect
    return int(min(100, max(0, math.floor(estimate))))


def screening_probability(
    applicant: Applicant,
    target: University,
    catalog: ContentCatalog,
    weights: adm_cfg.ScreeningWeights = adm_cfg.DEFAULT_SCREENING_WEIGHTS,
) -> float:
    """Invitation probability. Not clamped: values above 1 always invite."""
    s = applicant.stats
    bg = background_score(tier_value(target.tier), university_tier_value(catalog, applicant.home_university))
    estimate = estimate_success_chance(applicant, catalog)

    p = (
        (s.gpa / 4.5) * weights.gpa
        + (float(applicant.resume_score) / adm_cfg.RESUME_NORMALIZER) * weights.resume
        + (bg / 100.0) * weights.background
        + (s.english / 100.0) * weights.english
        + (applicant.social.seniors / 100.0) * weights.seniors
        + (estimate / 100.0) * weights.estimate
    )

    for m in applicant.mentors:
        if m.university == target.name:
            p += adm_cfg.MENTOR_SCREENING_BONUS.get(m.status, 0.0)

    p *= adm_cfg.RATE_FLOOR + adm_cfg.RATE_SPAN * (float(target.baoyan_rate) / adm_cfg.RATE_PIVOT)
    return p


def screen_application(
    applicant: Applicant,
    target: University,
    phase: ApplicationPhase,
    catalog: ContentCatalog,
    rng: random.Random,
) -> ScreeningResult:
    p = screening_probability(applicant, target, catalog)
    invited = rng.random() < p
    label = PHASE_LABELS[phase]
    logger.debug("screening %s phase=%s p=%.3f invited=%s", target.name, phase, p, invited)

    if not invited:
        return ScreeningResult(
            application=Application(university=target.name, major=applicant.major, status="rejected", phase=phase),
            interview=None,
            probability=p,
            log=f"{label}: 很遗憾，你被 {target.name} 拒绝了。",
        )

    bg = background_score(tier_value(target.tier), university_tier_value(catalog, applicant.home_university))
    interview = start_interview(applicant, target, phase, bg, catalog, rng)
    return ScreeningResult(
        application=Application(university=target.name, major=applicant.major, status="interviewing", phase=phase),
        interview=interview,
        probability=p,
        log=f"{label}: 你通过了 {target.name} 的初筛，进入面试环节！",
    )
