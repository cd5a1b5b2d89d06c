from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from admissions.outcome import classify_ending
from admissions.types import Application

from .state import GameState, StepContext

logger = logging.getLogger(__name__)


def finish_game(
    state: GameState,
    ctx: StepContext,
    *,
    message: Optional[str] = None,
    accepted: Optional[Application] = None,
) -> GameState:
    """Close the game with an ending report.

    ``message`` overrides the displayed game message (stat depletion); the
    ending report is produced either way.
    """
    ending = classify_ending(
        stats=state.stats,
        social=state.social,
        money=state.money,
        resume_score=state.resume_score,
        applications=state.applications,
        home_university=state.university,
        major=state.major,
        catalog=ctx.catalog,
        rng=ctx.rng,
        accepted=accepted,
    )
    logger.info(
        "game over: semester=%s week=%s ending=%s depleted=%s",
        state.semester,
        state.week,
        ending.kind,
        message is not None,
    )
    return replace(
        state,
        phase="game_over",
        is_game_over=True,
        ending=ending,
        game_message=message if message is not None else ending.message,
        current_event=None,
        current_interview=None,
    )
