from __future__ import annotations

"""Summer camp / pre-recommendation intents: apply, interview, move between screens."""

import logging

from admissions.interview import answer_question
from admissions.screening import screen_application
from admissions.types import PHASE_LABELS

from . import config as g_cfg
from . import errors
from .ending import finish_game
from .intents import AnswerInterview, OpenApplications, ReturnToMain, SubmitApplication
from .state import GameState, StepContext, StepResult, ok, reject

logger = logging.getLogger(__name__)

_INTERVIEW_BUSY = "面试进行中，请先完成当前面试。"


def open_applications(state: GameState, intent: OpenApplications, ctx: StepContext) -> StepResult:
    if state.phase != "main_game":
        return reject(state, errors.WRONG_PHASE)
    if state.semester == g_cfg.SUMMER_CAMP_SEMESTER:
        return ok(state, phase="summer_camp")
    if state.semester >= g_cfg.PRE_RECOMMENDATION_SEMESTER:
        return ok(state, phase="pre_recommendation")
    return reject(state, errors.WRONG_PHASE, "申请通道尚未开启。")


def return_to_main(state: GameState, intent: ReturnToMain, ctx: StepContext) -> StepResult:
    if state.phase not in g_cfg.APPLICATION_PHASES:
        return reject(state, errors.WRONG_PHASE)
    if state.current_interview is not None:
        return reject(state, errors.WRONG_PHASE, _INTERVIEW_BUSY)
    return ok(state, phase="main_game")


def submit_application(state: GameState, intent: SubmitApplication, ctx: StepContext) -> StepResult:
    if state.phase not in g_cfg.APPLICATION_PHASES:
        return reject(state, errors.WRONG_PHASE)
    if state.current_interview is not None:
        return reject(state, errors.WRONG_PHASE, _INTERVIEW_BUSY)
    target = ctx.catalog.university_by_name(intent.university)
    if target is None:
        return reject(state, errors.NOT_FOUND, f"未知的学校：{intent.university}")

    phase = state.phase
    if state.find_application(target.name, phase) is not None:
        return reject(
            state,
            errors.DUPLICATE_APPLICATION,
            f"你已经提交过{target.name}的{PHASE_LABELS[phase]}申请了。",
        )

    result = screen_application(state.applicant(), target, phase, ctx.catalog, ctx.rng)
    return ok(
        state,
        result.log,
        applications=state.applications + (result.application,),
        current_interview=result.interview,
    )


def answer_interview(state: GameState, intent: AnswerInterview, ctx: StepContext) -> StepResult:
    interview = state.current_interview
    if interview is None:
        return reject(state, errors.NOT_FOUND, "当前没有进行中的面试。")
    try:
        step = answer_question(interview, intent.option_index, ctx.catalog)
    except IndexError:
        return reject(state, errors.INVALID_CHOICE, "无效的面试选项。")

    if not step.finished:
        return ok(state, step.log, current_interview=step.interview)

    status = "accepted" if step.accepted else "rejected"
    applications = tuple(
        a.with_status(status) if a.university == interview.university and a.phase == interview.phase else a
        for a in state.applications
    )
    result = ok(state, step.log, applications=applications, current_interview=None)

    if step.accepted and interview.phase == "pre_recommendation":
        accepted = result.state.find_application(interview.university, interview.phase)
        logger.info("pre-recommendation offer from %s ends the game", interview.university)
        final = finish_game(result.state, ctx, accepted=accepted)
        return StepResult(state=final, logs=result.logs)
    return result
