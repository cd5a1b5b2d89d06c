from __future__ import annotations

"""Immutable game state and the step result the reducer returns."""

import random
from dataclasses import dataclass, field, replace
from typing import Iterable, Mapping, Optional, Tuple

from actions.types import Efficiencies
from admissions.types import Applicant, Application, CurrentInterview, Ending
from content.catalog import DEFAULT_CATALOG, ContentCatalog
from content.types import GameEvent
from courses.types import Course, ExamReport
from ledger.types import PlayerStats, Social
from mentors.types import Mentor
from resume.types import ResumeItem, total_score

from . import config as g_cfg
from .config import GamePhase


@dataclass(frozen=True, slots=True)
class WeekSummary:
    gains: Mapping[str, float] = field(default_factory=dict)
    logs: Tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class GameState:
    phase: GamePhase = "start"
    semester: int = 0
    week: int = 1

    stats: PlayerStats = field(default_factory=PlayerStats)
    social: Social = field(default_factory=Social)
    money: int = g_cfg.STARTING_MONEY

    # Weekly multipliers; ``base_mastery_efficiency`` is the background's and
    # is what ``efficiencies.mastery`` resets to every week.
    efficiencies: Efficiencies = field(default_factory=Efficiencies)
    base_mastery_efficiency: float = 1.0

    background: str = ""
    gaokao_score: int = 0
    university: str = ""
    major: str = ""
    major_type: Optional[str] = None
    rejection_count: int = 0
    failed_university: Optional[str] = None

    courses: Tuple[Course, ...] = ()
    resume: Tuple[ResumeItem, ...] = ()
    mentors: Tuple[Mentor, ...] = ()
    potential_mentors: Tuple[Mentor, ...] = ()
    applications: Tuple[Application, ...] = ()
    current_interview: Optional[CurrentInterview] = None
    current_event: Optional[GameEvent] = None

    selected_actions: Tuple[str, ...] = ()
    purchase_counts: Mapping[str, int] = field(default_factory=dict)

    exam_report: Optional[ExamReport] = None
    week_summary: WeekSummary = field(default_factory=WeekSummary)

    is_game_over: bool = False
    game_message: str = ""
    ending: Optional[Ending] = None

    logs: Tuple[str, ...] = ()

    @property
    def resume_score(self) -> int:
        return total_score(self.resume)

    def applicant(self) -> Applicant:
        return Applicant(
            stats=self.stats,
            social=self.social,
            resume_score=self.resume_score,
            mentors=self.mentors,
            home_university=self.university,
            major=self.major,
        )

    def find_application(self, university: str, phase: str) -> Optional[Application]:
        for a in self.applications:
            if a.university == university and a.phase == phase:
                return a
        return None


@dataclass(frozen=True, slots=True)
class StepContext:
    rng: random.Random
    catalog: ContentCatalog = DEFAULT_CATALOG


@dataclass(frozen=True, slots=True)
class StepResult:
    """New state, the log lines this step produced, and a rejection code if refused."""

    state: GameState
    logs: Tuple[str, ...] = ()
    rejection: Optional[str] = None

    @property
    def accepted(self) -> bool:
        return self.rejection is None


def new_game_state() -> GameState:
    return GameState(logs=(g_cfg.WELCOME_LOG,))


def append_logs(state: GameState, lines: Iterable[str]) -> GameState:
    new = tuple(lines)
    if not new:
        return state
    history = state.logs + new
    if len(history) > g_cfg.MAX_LOG_HISTORY:
        history = history[-g_cfg.MAX_LOG_HISTORY:]
    return replace(state, logs=history)


def ok(state: GameState, *lines: str, **changes) -> StepResult:
    """Commit ``changes`` onto ``state`` and record ``lines``."""
    if changes:
        state = replace(state, **changes)
    return StepResult(state=append_logs(state, lines), logs=tuple(lines))


def reject(state: GameState, code: str, line: str = "") -> StepResult:
    lines = (line,) if line else ()
    return StepResult(state=append_logs(state, lines), logs=lines, rejection=code)
