from __future__ import annotations

"""Random events: the weekly draw and resolving the player's choice."""

import logging
from typing import Optional

from content.types import GameEvent
from ledger.effects import apply_effect
from rng_util import pick

from . import config as g_cfg
from . import errors
from .intents import ChooseEventOption
from .state import GameState, StepContext, StepResult, ok, reject

logger = logging.getLogger(__name__)


def draw_event(major_type: Optional[str], ctx: StepContext) -> Optional[GameEvent]:
    """15% chance of one event from the deck open to ``major_type``."""
    if ctx.rng.random() >= g_cfg.EVENT_PROBABILITY:
        return None
    deck = ctx.catalog.events_for(major_type)
    if not deck:
        return None
    event = pick(ctx.rng, deck)
    logger.debug("random event drawn: %s", event.title)
    return event


def choose_event_option(state: GameState, intent: ChooseEventOption, ctx: StepContext) -> StepResult:
    event = state.current_event
    if event is None:
        return reject(state, errors.NOT_FOUND, "当前没有待处理的事件。")
    idx = int(intent.index)
    if idx < 0 or idx >= len(event.options):
        return reject(state, errors.INVALID_CHOICE, "无效的事件选项。")

    result = apply_effect(state.stats, state.social, state.money, event.options[idx].effect)
    return ok(
        state,
        f"事件结果: {result.message}",
        stats=result.stats,
        social=result.social,
        money=result.money,
        current_event=None,
    )
