from __future__ import annotations

"""Interview: three questions sampled without replacement, then a final score.

    final = (answered points / 60) * 40 + background score (max 60)

Acceptance needs ``final >= 60 + 4 * target tier value``.
"""

import logging
import random
from dataclasses import dataclass, replace
from typing import Optional

from content.catalog import ContentCatalog
from content.types import University

from . import config as adm_cfg
from .tiers import acceptance_threshold, university_tier_value
from .types import Applicant, ApplicationPhase, CurrentInterview

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class InterviewStep:
    # Still-open interview, or None once the last question is answered.
    interview: Optional[CurrentInterview]
    log: str
    accepted: Optional[bool] = None
    final_score: Optional[float] = None

    @property
    def finished(self) -> bool:
        return self.interview is None


def interview_background_score(applicant: Applicant, background: float) -> float:
    w = adm_cfg.INTERVIEW_BACKGROUND_WEIGHTS
    s = applicant.stats
    return (
        (s.gpa / 4.5) * w["gpa"]
        + (float(applicant.resume_score) / adm_cfg.RESUME_NORMALIZER) * w["resume"]
        + (float(background) / 100.0) * w["background"]
        + (s.english / 100.0) * w["english"]
    )


def start_interview(
    applicant: Applicant,
    target: University,
    phase: ApplicationPhase,
    background: float,
    catalog: ContentCatalog,
    rng: random.Random,
) -> CurrentInterview:
    pool = list(catalog.interview_questions)
    k = min(adm_cfg.QUESTIONS_PER_INTERVIEW, len(pool))
    return CurrentInterview(
        university=target.name,
        major=applicant.major,
        phase=phase,
        questions=tuple(rng.sample(pool, k)),
        background_score=interview_background_score(applicant, background),
    )


def final_score(total_points: float, background_score: float) -> float:
    max_points = adm_cfg.POINTS_PER_QUESTION * adm_cfg.QUESTIONS_PER_INTERVIEW
    return (float(total_points) / max_points) * adm_cfg.INTERVIEW_WEIGHT + float(background_score)


def answer_question(interview: CurrentInterview, option_index: int, catalog: ContentCatalog) -> InterviewStep:
    """Score one answer. Raises IndexError for an option the question does not have."""
    question = interview.current_question
    idx = int(option_index)
    if idx < 0 or idx >= len(question.options):
        raise IndexError(f"question {question.id} has no option {option_index}")
    option = question.options[idx]
    total = float(interview.total_score) + float(option.score)

    if not interview.is_last_question:
        return InterviewStep(
            interview=replace(interview, current_index=interview.current_index + 1, total_score=total),
            log=f"面试中: {option.feedback}",
        )

    score = final_score(total, interview.background_score)
    threshold = acceptance_threshold(university_tier_value(catalog, interview.university))
    accepted = score >= threshold
    verdict = "恭喜你被拟录取！" if accepted else "很遗憾，未通过最终考核。"
    logger.debug("interview %s final=%.2f threshold=%.1f accepted=%s", interview.university, score, threshold, accepted)
    return InterviewStep(
        interview=None,
        log=f"面试反馈 ({interview.university}): {option.feedback} 最终综合评分: {score:.1f}。{verdict}",
        accepted=accepted,
        final_score=score,
    )
