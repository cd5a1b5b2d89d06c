"""Shared fixtures: seeded and scripted random sources, and ready-made game states."""

from __future__ import annotations

import random
from dataclasses import replace
from typing import Iterable

import pytest

from actions.types import Efficiencies
from content import DEFAULT_CATALOG
from courses.selection import compulsory_courses
from game.state import GameState, new_game_state
from ledger.types import PlayerStats


class ScriptedRandom(random.Random):
    """``random()`` replays the given values, then falls back to the seeded stream.

    ``getrandbits`` is left to the base class so ``sample``/``choice`` keep
    their normal behaviour and do not consume scripted values.
    """

    def __new__(cls, *args, **kwargs):
        return super().__new__(cls)

    def __init__(self, values: Iterable[float] = (), seed: int = 0) -> None:
        super().__init__(seed)
        self._script = list(values)

    def random(self) -> float:
        if self._script:
            return float(self._script.pop(0))
        return super().random()

    def getrandbits(self, k: int) -> int:
        return super().getrandbits(k)

    @property
    def remaining(self) -> int:
        return len(self._script)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def catalog():
    return DEFAULT_CATALOG


def make_main_game_state(**changes) -> GameState:
    """A cs student at a T0 school in week 2 of semester 1, ready to play."""
    state = replace(
        new_game_state(),
        phase="main_game",
        semester=1,
        week=2,
        stats=PlayerStats(gpa=0.0, research=0.0, competition=0.0, english=40.0, mental=80.0, stamina=100.0),
        money=1000,
        background="小镇做题家",
        base_mastery_efficiency=1.4,
        efficiencies=Efficiencies(mastery=1.4),
        gaokao_score=700,
        university="清华大学",
        major="计算机科学与技术",
        major_type="cs",
        courses=compulsory_courses(DEFAULT_CATALOG, "cs", 1),
    )
    if changes:
        state = replace(state, **changes)
    return state


@pytest.fixture
def main_state() -> GameState:
    return make_main_game_state()
