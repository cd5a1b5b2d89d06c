from __future__ import annotations

"""Gaokao score roll and the reach-school attempt."""

import logging
import random
from dataclasses import dataclass
from typing import Optional

from content.types import University
from rng_util import randint_span

from . import config as adm_cfg

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ReachAttempt:
    admitted: bool
    # False when the score already clears the line and no roll is made.
    rolled: bool
    chance: float
    # Re-rolled score after a failed reach.
    new_score: Optional[int] = None


def roll_gaokao_score(rng: random.Random) -> int:
    return randint_span(rng, adm_cfg.GAOKAO_SCORE_LOW, adm_cfg.GAOKAO_SCORE_SPAN)


def reach_chance(score: int, min_score: int) -> float:
    gap = int(min_score) - int(score)
    if gap <= 0:
        return 1.0
    return max(adm_cfg.REACH_CHANCE_FLOOR, 1.0 - gap * adm_cfg.REACH_CHANCE_STEP)


def attempt_university(score: int, university: University, rng: random.Random) -> ReachAttempt:
    if int(score) >= int(university.min_score):
        return ReachAttempt(admitted=True, rolled=False, chance=1.0)

    chance = reach_chance(score, university.min_score)
    if rng.random() > chance:
        new_score = roll_gaokao_score(rng)
        logger.debug("reach for %s failed (score=%s chance=%.2f)", university.name, score, chance)
        return ReachAttempt(admitted=False, rolled=True, chance=chance, new_score=new_score)
    return ReachAttempt(admitted=True, rolled=True, chance=chance)
