from __future__ import annotations

"""Debug shortcuts that jump straight to the admissions phases or the ending.

Each one raises stats to fixed floors and, for the phase skips, grants two
fixed resume items (once; re-skipping does not duplicate them).
"""

import logging
from dataclasses import replace
from typing import Tuple

from courses.selection import compulsory_courses
from resume.types import ResumeItem

from . import config as g_cfg
from . import errors
from .ending import finish_game
from .intents import SkipToGameOver, SkipToPreRecommendation, SkipToSummerCamp
from .state import GameState, StepContext, StepResult, append_logs, ok, reject

logger = logging.getLogger(__name__)

SUMMER_CAMP_ITEMS: Tuple[ResumeItem, ...] = (
    ResumeItem(id="skip-1", kind="research", name="大三实验室科研项目", score=40, quality="rare"),
    ResumeItem(id="skip-2", kind="competition", name="全国大学生数学建模竞赛二等奖", score=50, quality="epic"),
)

PRE_RECOMMENDATION_ITEMS: Tuple[ResumeItem, ...] = (
    ResumeItem(id="skip-3", kind="research", name="SCI/EI 核心期刊论文发表", score=80, quality="epic"),
    ResumeItem(id="skip-4", kind="competition", name="全国大学生计算机设计大赛一等奖", score=70, quality="epic"),
)


def _enrolled(state: GameState) -> bool:
    return bool(state.university) and bool(state.major_type)


def _grant(resume: Tuple[ResumeItem, ...], items: Tuple[ResumeItem, ...]) -> Tuple[ResumeItem, ...]:
    have = {i.id for i in resume}
    return resume + tuple(i for i in items if i.id not in have)


def _jump(
    state: GameState,
    ctx: StepContext,
    *,
    semester: int,
    phase: str,
    gpa_floor: float,
    english: float,
    money: int,
    seniors: float,
    items: Tuple[ResumeItem, ...],
) -> GameState:
    stats = replace(
        state.stats,
        gpa=max(state.stats.gpa, gpa_floor),
        english=max(state.stats.english, english),
        stamina=100.0,
        mental=100.0,
    )
    return replace(
        state,
        semester=semester,
        week=1,
        phase=phase,
        courses=compulsory_courses(ctx.catalog, state.major_type, semester),
        stats=stats,
        money=max(state.money, money),
        social=replace(state.social, seniors=max(state.social.seniors, seniors)),
        resume=_grant(state.resume, items),
        current_event=None,
        current_interview=None,
    )


def skip_to_summer_camp(state: GameState, intent: SkipToSummerCamp, ctx: StepContext) -> StepResult:
    if not _enrolled(state):
        return reject(state, errors.WRONG_PHASE, "请先选定大学和专业。")
    jumped = _jump(
        state,
        ctx,
        semester=g_cfg.SUMMER_CAMP_SEMESTER,
        phase="summer_camp",
        gpa_floor=3.8 + ctx.rng.random() * 0.4,
        english=85.0,
        money=3000,
        seniors=80.0,
        items=SUMMER_CAMP_ITEMS,
    )
    logger.info("debug skip to summer camp")
    return ok(jumped, "--- 已使用调试功能跳过至夏令营阶段 ---", "你的各项属性已根据大三学霸的标准进行了同步提升。")


def skip_to_pre_recommendation(state: GameState, intent: SkipToPreRecommendation, ctx: StepContext) -> StepResult:
    if not _enrolled(state):
        return reject(state, errors.WRONG_PHASE, "请先选定大学和专业。")
    jumped = _jump(
        state,
        ctx,
        semester=g_cfg.PRE_RECOMMENDATION_SEMESTER,
        phase="pre_recommendation",
        gpa_floor=4.0 + ctx.rng.random() * 0.3,
        english=90.0,
        money=4000,
        seniors=90.0,
        items=PRE_RECOMMENDATION_ITEMS,
    )
    logger.info("debug skip to pre-recommendation")
    return ok(jumped, "--- 已使用调试功能跳过至预推免阶段 ---", "你的各项属性已根据保研大佬的标准进行了同步提升。")


def skip_to_game_over(state: GameState, intent: SkipToGameOver, ctx: StepContext) -> StepResult:
    s = state.stats
    boosted = replace(
        state,
        semester=g_cfg.FINAL_SEMESTER + 1,
        stats=replace(
            s,
            gpa=max(s.gpa, 4.1),
            research=max(s.research, 80.0),
            competition=max(s.competition, 80.0),
        ),
    )
    final = finish_game(boosted, ctx)
    line = "--- 已使用调试功能跳过至游戏结局 ---"
    return StepResult(state=append_logs(final, (line,)), logs=(line,))
