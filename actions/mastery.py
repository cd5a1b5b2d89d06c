from __future__ import annotations

"""Mastery pool sizing and difficulty-weighted distribution."""

import random
from typing import Sequence, Tuple

from courses.types import Course

from . import config as a_cfg


def mental_multiplier(mental: float) -> float:
    return a_cfg.MENTAL_FLOOR + a_cfg.MENTAL_SPAN * (float(mental) / 100.0)


def mastery_pool(value: float, efficiency: float, mental: float) -> float:
    """Total mastery one action produces before it is split across courses."""
    return float(value) * float(efficiency) * a_cfg.MASTERY_GAIN_SCALE * mental_multiplier(mental)


def distribute_mastery(courses: Sequence[Course], pool: float, rng: random.Random) -> Tuple[Course, ...]:
    """Split ``pool`` over courses still below 100 mastery.

    Each eligible course gets ``pool * difficulty / sum(difficulty)`` times an
    independent jitter in [0.8, 1.2], capped at 100. Mastered courses get
    nothing and do not count toward the difficulty sum. Jitter is drawn once
    per eligible course, in list order.
    """
    current = tuple(courses)
    eligible = [c for c in current if float(c.mastery) < a_cfg.MASTERY_MAX]
    if not eligible:
        return current

    total_difficulty = sum(int(c.difficulty or a_cfg.DEFAULT_DIFFICULTY) for c in eligible)
    out = []
    for c in current:
        if float(c.mastery) >= a_cfg.MASTERY_MAX:
            out.append(c)
            continue
        weight = int(c.difficulty or a_cfg.DEFAULT_DIFFICULTY) / float(total_difficulty)
        jitter = a_cfg.JITTER_LOW + rng.random() * a_cfg.JITTER_SPAN
        gained = float(pool) * weight * jitter
        out.append(c.with_mastery(min(a_cfg.MASTERY_MAX, float(c.mastery) + gained)))
    return tuple(out)
