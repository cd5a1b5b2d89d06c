from __future__ import annotations

import pytest

from ledger.effects import ConditionalEffect, EffectSpec, apply_effect
from ledger.service import apply_delta, batch_cost, can_afford, charge, cost_of, shortfall
from ledger.types import Cost, PlayerStats, Social


def test_apply_delta_clamps_touched_fields_only():
    stats = PlayerStats(stamina=150.0, mental=95.0)
    out = apply_delta(stats, {"mental": 20})
    assert out.mental == 100.0
    # Untouched over-cap stamina is left alone until it changes.
    assert out.stamina == 150.0
    assert apply_delta(out, {"stamina": -10}).stamina == 100.0


def test_apply_delta_floors_at_zero_and_caps_gpa():
    stats = PlayerStats(gpa=4.4, research=3.0)
    out = apply_delta(stats, {"gpa": 1.0, "research": -10})
    assert out.gpa == 4.5
    assert out.research == 0.0


def test_apply_delta_rejects_unknown_field():
    with pytest.raises(KeyError):
        apply_delta(PlayerStats(), {"charisma": 1})


def test_cost_signs_are_ignored():
    assert cost_of({"stamina": -10, "mental": 5, "money": -100}) == Cost(stamina=10.0, mental=5.0, money=100)


def test_batch_shortfall_reports_first_short_resource():
    stats = PlayerStats(stamina=30.0, mental=5.0)
    cost = batch_cost([{"stamina": -20, "mental": -10}, {"stamina": -20}])
    assert cost.stamina == 40.0
    assert shortfall(stats, 1000, cost) == "stamina"
    assert shortfall(PlayerStats(stamina=100.0, mental=5.0), 1000, cost) == "mental"
    assert shortfall(PlayerStats(), 50, Cost(money=100)) == "money"
    assert can_afford(PlayerStats(), 100, Cost(money=100))


def test_charge_leaves_inputs_untouched():
    stats = PlayerStats()
    new_stats, money = charge(stats, 500, {"stamina": -15, "money": 100})
    assert new_stats.stamina == 85.0
    assert money == 400
    assert stats.stamina == 100.0


def test_conditional_effect_picks_branch():
    effect = ConditionalEffect(
        stat="gpa",
        threshold=3.8,
        then=EffectSpec(money=2000, message="high"),
        otherwise=EffectSpec(money=1000, message="low"),
    )
    high = apply_effect(PlayerStats(gpa=3.9), Social(), 0, effect)
    low = apply_effect(PlayerStats(gpa=3.8), Social(), 0, effect)
    assert (high.money, high.message) == (2000, "high")
    assert (low.money, low.message) == (1000, "low")


def test_effect_social_delta_is_clamped():
    out = apply_effect(PlayerStats(), Social(classmates=95.0), 0, EffectSpec(social={"classmates": 20}))
    assert out.social.classmates == 100.0
