from __future__ import annotations

"""Game-loop tuning and phase bookkeeping."""

from typing import FrozenSet, Literal

GamePhase = Literal[
    "start",
    "gaokao",
    "university_selection",
    "university_failed",
    "course_selection",
    "main_game",
    "summer_camp",
    "pre_recommendation",
    "game_over",
]

# ---------------------------------------------------------------------------
# Calendar
# ---------------------------------------------------------------------------

SUMMER_CAMP_SEMESTER: int = 6
PRE_RECOMMENDATION_SEMESTER: int = 7
# The game ends once the semester counter passes this.
FINAL_SEMESTER: int = 7

# ---------------------------------------------------------------------------
# Phases
# ---------------------------------------------------------------------------

APPLICATION_PHASES: FrozenSet[str] = frozenset({"summer_camp", "pre_recommendation"})
# Phases in which the shop and mentor actions are open.
PLAY_PHASES: FrozenSet[str] = frozenset({"main_game", "summer_camp", "pre_recommendation"})

# ---------------------------------------------------------------------------
# Random events
# ---------------------------------------------------------------------------

EVENT_PROBABILITY: float = 0.15

# ---------------------------------------------------------------------------
# New game
# ---------------------------------------------------------------------------

STARTING_MONEY: int = 1000
WELCOME_LOG: str = "欢迎来到保研模拟器。你的旅程将从高考分数公布的那一刻开始。"

# Oldest lines are dropped from the in-state history past this length.
MAX_LOG_HISTORY: int = 500
