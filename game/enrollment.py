from __future__ import annotations

"""Pre-term flow: background, gaokao, university, major and course selection."""

import logging
from dataclasses import replace

from actions.types import Efficiencies
from admissions.config import REACH_FAIL_MENTAL_PENALTY
from admissions.gaokao import attempt_university, roll_gaokao_score
from courses.config import MAX_COURSES_PER_SEMESTER
from courses.selection import compulsory_courses, toggle_course
from ledger.service import apply_delta
from ledger.types import PlayerStats
from mentors.generation import generate_batch

from . import errors
from .intents import ConfirmCourses, ProceedToUniversitySelection, SelectMajor, SelectUniversity, StartGame, ToggleCourse
from .state import GameState, StepContext, StepResult, ok, reject

logger = logging.getLogger(__name__)


def _wrong_phase(state: GameState) -> StepResult:
    return reject(state, errors.WRONG_PHASE)


def start_game(state: GameState, intent: StartGame, ctx: StepContext) -> StepResult:
    if state.phase != "start":
        return _wrong_phase(state)
    bg = ctx.catalog.background_by_name(intent.background)
    if bg is None:
        return reject(state, errors.NOT_FOUND, f"未知的背景：{intent.background}")

    stats = replace(PlayerStats(), **{k: float(v) for k, v in bg.stats.items()})
    score = roll_gaokao_score(ctx.rng)
    logger.info("new game: background=%s gaokao=%s", bg.name, score)
    return ok(
        state,
        f"你选择了[{bg.name}]背景。",
        f"高考成绩公布：{score}分！",
        phase="gaokao",
        stats=stats,
        background=bg.name,
        money=int(bg.money),
        base_mastery_efficiency=float(bg.mastery_efficiency),
        efficiencies=Efficiencies(mastery=float(bg.mastery_efficiency)),
        gaokao_score=score,
    )


def proceed_to_university_selection(
    state: GameState, intent: ProceedToUniversitySelection, ctx: StepContext
) -> StepResult:
    if state.phase not in ("gaokao", "university_failed"):
        return _wrong_phase(state)
    return ok(state, phase="university_selection")


def select_university(state: GameState, intent: SelectUniversity, ctx: StepContext) -> StepResult:
    if state.phase != "university_selection" or state.university:
        return _wrong_phase(state)
    uni = ctx.catalog.university_by_name(intent.name)
    if uni is None:
        return reject(state, errors.NOT_FOUND, f"未知的学校：{intent.name}")
    if uni not in ctx.catalog.universities_above(state.gaokao_score):
        return reject(state, errors.INVALID_CHOICE, f"你的分数不足以填报[{uni.name}]。")

    attempt = attempt_university(state.gaokao_score, uni, ctx.rng)
    if not attempt.admitted:
        return ok(
            state,
            f"由于高考分数不足，你尝试冲刺[{uni.name}]失败了。这对你的心态造成了打击。",
            phase="university_failed",
            gaokao_score=attempt.new_score,
            failed_university=uni.name,
            stats=apply_delta(state.stats, {"mental": -REACH_FAIL_MENTAL_PENALTY}),
            rejection_count=state.rejection_count + 1,
        )
    return ok(state, f"你选择了[{uni.name}]，即将选择专业。", university=uni.name)


def select_major(state: GameState, intent: SelectMajor, ctx: StepContext) -> StepResult:
    if state.phase != "university_selection" or not state.university:
        return _wrong_phase(state)
    major = ctx.catalog.major_by_name(intent.name)
    if major is None:
        return reject(state, errors.NOT_FOUND, f"未知的专业：{intent.name}")

    return ok(
        state,
        f"你选择了[{major.name}]专业。接下来请选择本学期的选修课与通识课。",
        phase="course_selection",
        semester=1,
        major=major.name,
        major_type=major.major_type,
        courses=compulsory_courses(ctx.catalog, major.major_type, 1),
        potential_mentors=generate_batch(ctx.catalog, major.major_type, ctx.rng),
    )


def toggle_course_selection(state: GameState, intent: ToggleCourse, ctx: StepContext) -> StepResult:
    if state.phase != "course_selection":
        return _wrong_phase(state)
    spec = ctx.catalog.course_by_id(intent.course_id)
    if spec is None or spec.semester != state.semester or not spec.open_to(state.major_type):
        return reject(state, errors.NOT_FOUND, "本学期没有这门课程。")

    outcome = toggle_course(state.courses, spec, limit=MAX_COURSES_PER_SEMESTER)
    if outcome.status == "limit":
        return reject(state, errors.COURSE_LIMIT_EXCEEDED, f"本学期课程负载已达上限（最多 {MAX_COURSES_PER_SEMESTER} 门）。")
    if outcome.status == "locked":
        return reject(state, errors.INVALID_CHOICE, f"[{spec.name}]是必修课，不能退选。")
    return ok(state, courses=outcome.courses)


def confirm_courses(state: GameState, intent: ConfirmCourses, ctx: StepContext) -> StepResult:
    if state.phase != "course_selection":
        return _wrong_phase(state)
    return ok(state, f"选课完成，第 {state.semester} 学期开始了！", phase="main_game")
