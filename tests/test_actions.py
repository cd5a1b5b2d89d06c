from __future__ import annotations

import pytest

from actions.mastery import distribute_mastery, mastery_pool, mental_multiplier
from actions.resolution import allowance_due, batch_shortfall, resolve_week
from actions.selection import toggle_action
from actions.types import Efficiencies
from courses.types import Course
from ledger.types import PlayerStats, Social

from conftest import ScriptedRandom


def _course(cid: str, difficulty: int, mastery: float = 0.0) -> Course:
    return Course(id=cid, name=cid, difficulty=difficulty, credit=3, kind="compulsory", semester=1, mastery=mastery)


def test_mental_multiplier_range():
    assert mental_multiplier(0) == pytest.approx(0.6)
    assert mental_multiplier(100) == pytest.approx(1.4)


def test_distribution_conserves_pool_with_neutral_jitter():
    courses = (_course("a", 2), _course("b", 3), _course("c", 5))
    # 0.5 -> jitter 1.0 for each course
    out = distribute_mastery(courses, 50.0, ScriptedRandom([0.5, 0.5, 0.5]))
    assert sum(c.mastery for c in out) == pytest.approx(50.0)
    assert out[0].mastery == pytest.approx(10.0)
    assert out[2].mastery == pytest.approx(25.0)


def test_mastered_courses_are_skipped_and_capped():
    rng = ScriptedRandom([0.5])
    courses = (_course("done", 4, 100.0), _course("open", 2, 95.0))
    out = distribute_mastery(courses, 50.0, rng)
    assert out[0].mastery == 100.0
    assert out[1].mastery == 100.0
    # Only one jitter draw: the mastered course does not consume one.
    assert rng.remaining == 0


def test_mastery_stays_within_bounds_for_any_draws(rng):
    courses = tuple(_course(str(i), 1 + i % 5) for i in range(6))
    for _ in range(200):
        courses = distribute_mastery(courses, 40.0, rng)
        assert all(0.0 <= c.mastery <= 100.0 for c in courses)
    assert all(c.mastery == 100.0 for c in courses)


def test_cost_is_charged_before_gain(catalog, rng):
    lecture = catalog.action_by_name("cs", "上课")
    courses = (_course("a", 3),)
    res = resolve_week(
        stats=PlayerStats(mental=80.0),
        social=Social(),
        money=1000,
        courses=courses,
        actions=[lecture],
        efficiencies=Efficiencies(),
        week=2,
        rng=ScriptedRandom([0.5]),
    )
    # mental 80 -> 75 before the pool is sized: 20 * 1.5 * (0.6 + 0.8 * 0.75)
    assert res.gains["mastery"] == pytest.approx(mastery_pool(20, 1.0, 75.0))
    assert res.gains["mastery"] == pytest.approx(36.0)
    assert res.stats.stamina == 90.0
    assert res.money == 700


def test_efficiency_scales_research(catalog):
    paper = catalog.action_by_name("cs", "论文复现")
    res = resolve_week(
        stats=PlayerStats(),
        social=Social(),
        money=1000,
        courses=(),
        actions=[paper],
        efficiencies=Efficiencies(research=1.5),
        week=3,
        rng=ScriptedRandom(),
    )
    assert res.stats.research == pytest.approx(37.5)
    assert res.gains["research"] == pytest.approx(37.5)


def test_part_time_bonus_and_allowance(catalog):
    job = catalog.action_by_name(None, "做兼职")
    res = resolve_week(
        stats=PlayerStats(),
        social=Social(),
        money=0,
        courses=(),
        actions=[job],
        efficiencies=Efficiencies(),
        week=5,
        rng=ScriptedRandom([0.0]),
    )
    # 500 wage + 0 bonus - 300 living + 1500 allowance
    assert res.money == 1700
    assert any("生活费 1500" in line for line in res.logs)
    assert allowance_due(1) and allowance_due(17)
    assert not allowance_due(2)


def test_social_gain_applies(catalog):
    social_action = catalog.action_by_name(None, "社交")
    res = resolve_week(
        stats=PlayerStats(),
        social=Social(),
        money=500,
        courses=(),
        actions=[social_action],
        efficiencies=Efficiencies(),
        week=2,
        rng=ScriptedRandom(),
    )
    assert res.social.classmates == 10.0
    assert res.money == 100


def test_batch_shortfall_uses_summed_cost(catalog):
    grind = catalog.action_by_name(None, "刷绩点神器")
    lib = catalog.action_by_name(None, "图书馆自习")
    assert batch_shortfall(PlayerStats(stamina=50.0), 1000, [grind]) is None
    assert batch_shortfall(PlayerStats(stamina=50.0), 1000, [grind, lib]) == "stamina"


def test_toggle_action_limit():
    out = toggle_action(("a", "b", "c"), "d")
    assert out.status == "limit"
    assert out.selected == ("a", "b", "c")
    assert toggle_action(("a", "b", "c"), "b").selected == ("a", "c")
    assert toggle_action((), "a").status == "added"
