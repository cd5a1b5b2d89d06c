from __future__ import annotations

"""Mentor intents: map mentor service results onto step results."""

from mentors.service import contact_mentor, court_mentor, deepen_mentor, refresh_mentors
from mentors.types import MentorOpResult

from . import config as g_cfg
from . import errors
from .intents import ContactMentor, CourtMentor, DeepenMentor, RefreshMentors
from .state import GameState, StepContext, StepResult, ok, reject

_FAILURE_CODES = {
    "stamina": errors.INSUFFICIENT_RESOURCE,
    "not_found": errors.NOT_FOUND,
    "unavailable": errors.MENTOR_UNAVAILABLE,
}


def _apply(state: GameState, result: MentorOpResult) -> StepResult:
    if not result.ok:
        return reject(state, _FAILURE_CODES[result.failure], result.log)
    return ok(
        state,
        result.log,
        stats=result.stats,
        mentors=result.mentors,
        potential_mentors=result.potential,
    )


def refresh(state: GameState, intent: RefreshMentors, ctx: StepContext) -> StepResult:
    if state.phase not in g_cfg.PLAY_PHASES:
        return reject(state, errors.WRONG_PHASE)
    return _apply(
        state,
        refresh_mentors(
            state.stats,
            state.mentors,
            state.potential_mentors,
            major_type=state.major_type,
            catalog=ctx.catalog,
            rng=ctx.rng,
        ),
    )


def contact(state: GameState, intent: ContactMentor, ctx: StepContext) -> StepResult:
    if state.phase not in g_cfg.PLAY_PHASES:
        return reject(state, errors.WRONG_PHASE)
    return _apply(state, contact_mentor(state.stats, state.mentors, state.potential_mentors, intent.mentor_id))


def court(state: GameState, intent: CourtMentor, ctx: StepContext) -> StepResult:
    if state.phase not in g_cfg.PLAY_PHASES:
        return reject(state, errors.WRONG_PHASE)
    return _apply(
        state,
        court_mentor(
            state.stats,
            state.mentors,
            state.potential_mentors,
            intent.mentor_id,
            resume_score=state.resume_score,
            rng=ctx.rng,
        ),
    )


def deepen(state: GameState, intent: DeepenMentor, ctx: StepContext) -> StepResult:
    if state.phase not in g_cfg.PLAY_PHASES:
        return reject(state, errors.WRONG_PHASE)
    return _apply(
        state,
        deepen_mentor(state.stats, state.mentors, state.potential_mentors, intent.mentor_id, rng=ctx.rng),
    )
