from __future__ import annotations

"""Weekly scheduler: action selection and the weekly tick.

One ``AdvanceWeek`` runs, in order: batch affordability check, action
resolution with the week's cash flow, resume drops, week advance and exams,
semester rollover (new courses, verbal-offer decay, phase change), terminal
check, random event draw, and the end-of-week reset of multipliers,
purchase counts and selection.
"""

import logging
from dataclasses import replace
from typing import List, Optional, Tuple

from actions.resolution import SHORTFALL_MESSAGES, batch_shortfall, resolve_week
from actions.selection import SELECTION_LIMIT_MESSAGE, toggle_action
from actions.types import Efficiencies
from content.endings import MENTAL_DEPLETED_MESSAGE, STAMINA_DEPLETED_MESSAGE
from courses.config import WEEKS_PER_SEMESTER
from courses.exams import exam_kind_for_week, exam_log_line, run_exam, semester_name, stored_gpa
from courses.selection import compulsory_courses
from courses.types import ExamReport
from mentors.courtship import decay_verbal_offers
from resume.drops import apply_drops

from . import config as g_cfg
from . import errors
from .ending import finish_game
from .events import draw_event
from .intents import AdvanceWeek, ToggleAction
from .state import GameState, StepContext, StepResult, WeekSummary, append_logs, ok, reject

logger = logging.getLogger(__name__)


def toggle_action_selection(state: GameState, intent: ToggleAction, ctx: StepContext) -> StepResult:
    if state.phase != "main_game":
        return reject(state, errors.WRONG_PHASE)
    if ctx.catalog.action_by_name(state.major_type, intent.name) is None:
        return reject(state, errors.NOT_FOUND, f"没有名为[{intent.name}]的行动。")

    outcome = toggle_action(state.selected_actions, intent.name)
    if outcome.status == "limit":
        return reject(state, errors.SELECTION_LIMIT_EXCEEDED, SELECTION_LIMIT_MESSAGE)
    return ok(state, selected_actions=outcome.selected)


def _rollover_phase_log(next_semester: int) -> Tuple[str, str]:
    if next_semester == g_cfg.SUMMER_CAMP_SEMESTER:
        return "summer_camp", "--- 进入大三下学期，保研夏令营申请开启！ ---"
    if next_semester == g_cfg.PRE_RECOMMENDATION_SEMESTER:
        return "pre_recommendation", "--- 预推免阶段开启，最后的冲刺！ ---"
    return "course_selection", f"--- {semester_name(next_semester - 1)} 结束，进入新学期 ---"


def advance_week(state: GameState, intent: AdvanceWeek, ctx: StepContext) -> StepResult:
    if state.phase != "main_game":
        return reject(state, errors.WRONG_PHASE)
    if state.current_event is not None:
        return reject(state, errors.EVENT_PENDING, "请先处理当前的突发事件。")

    actions = []
    for name in state.selected_actions:
        spec = ctx.catalog.action_by_name(state.major_type, name)
        if spec is not None:
            actions.append(spec)

    short = batch_shortfall(state.stats, state.money, actions)
    if short is not None:
        # Whole batch refused; selection stays for resubmission.
        return reject(state, errors.INSUFFICIENT_RESOURCE, SHORTFALL_MESSAGES[short])

    resolved = resolve_week(
        stats=state.stats,
        social=state.social,
        money=state.money,
        courses=state.courses,
        actions=actions,
        efficiencies=state.efficiencies,
        week=state.week,
        rng=ctx.rng,
    )
    drops = apply_drops(resolved.stats, state.resume, ctx.catalog, ctx.rng)

    stats = drops.stats
    weekly: List[str] = list(resolved.logs) + list(drops.logs)
    courses = resolved.courses
    mentors = state.mentors
    phase = state.phase
    semester = state.semester
    next_week = state.week + 1
    week = next_week

    report: Optional[ExamReport] = None
    kind = exam_kind_for_week(next_week)
    if kind is not None:
        report = run_exam(
            courses,
            kind=kind,
            mental=stats.mental,
            semester=semester,
            prior_gpa=stats.gpa,
            rng=ctx.rng,
        )
        if kind == "final":
            stats = replace(stats, gpa=stored_gpa(report.new_gpa))
        weekly.append(exam_log_line(report))

    if next_week > WEEKS_PER_SEMESTER:
        week = 1
        semester += 1
        courses = compulsory_courses(ctx.catalog, state.major_type, semester)
        mentors, decay_logs = decay_verbal_offers(mentors, ctx.rng)
        weekly.extend(decay_logs)
        phase, phase_log = _rollover_phase_log(semester)
        weekly.append(phase_log)
        logger.info("semester rollover -> %s (phase=%s)", semester, phase)

    depletion: Optional[str] = None
    if stats.stamina <= 0:
        depletion = STAMINA_DEPLETED_MESSAGE
    elif stats.mental <= 0:
        depletion = MENTAL_DEPLETED_MESSAGE
    game_over = depletion is not None or semester > g_cfg.FINAL_SEMESTER

    event = None
    if not game_over and report is None:
        event = draw_event(state.major_type, ctx)
        if event is not None:
            weekly.append(f"突发事件：{event.title}")

    lines = (f"第 {state.week} 周结算完成。",) + tuple(weekly)
    new_state = replace(
        state,
        week=week,
        semester=semester,
        phase=phase,
        stats=stats,
        social=resolved.social,
        money=resolved.money,
        resume=drops.resume,
        courses=courses,
        mentors=mentors,
        exam_report=report,
        current_event=event,
        efficiencies=Efficiencies(mastery=state.base_mastery_efficiency),
        selected_actions=(),
        purchase_counts={},
        week_summary=WeekSummary(gains=dict(resolved.gains), logs=tuple(weekly)),
    )
    if game_over:
        new_state = finish_game(new_state, ctx, message=depletion)
    return StepResult(state=append_logs(new_state, lines), logs=lines)
