from __future__ import annotations

import random

import pytest

from ledger.types import PlayerStats
from mentors.courtship import (
    courtship_odds,
    courtship_outcome,
    decay_verbal_offers,
    roll_courtship,
    success_chance,
)
from mentors.generation import generate_batch
from mentors.service import contact_mentor, court_mentor, deepen_mentor, refresh_mentors
from mentors.types import Mentor

from conftest import ScriptedRandom


def _mentor(status: str = "none", reputation: int = 50, mid: str = "m1") -> Mentor:
    return Mentor(
        id=mid,
        name="张伟",
        title="教授",
        reputation=reputation,
        university="清华大学",
        school="计算机学院",
        research_field="机器学习",
        status=status,
    )


def test_success_chance_example():
    assert success_chance(4.0, 100, 50) == pytest.approx(95.0)
    assert success_chance(0.0, 0, 99) == 5.0


def test_courtship_odds_example():
    odds = courtship_odds(4.0, 100, 50)
    assert odds.hard_offer == pytest.approx(14.25)
    assert odds.verbal_offer == pytest.approx(80.75)
    assert odds.fish_pond == pytest.approx(5.0)
    assert odds.rejected == pytest.approx(0.0)


def test_odds_sum_to_hundred():
    for gpa, resume, rep in [(2.0, 0, 90), (3.5, 60, 70), (4.5, 300, 40)]:
        o = courtship_odds(gpa, resume, rep)
        assert o.hard_offer + o.verbal_offer + o.fish_pond + o.rejected == pytest.approx(100.0)


def test_outcome_bands():
    assert courtship_outcome(40.0, 5.0) == "hard_offer"
    assert courtship_outcome(40.0, 6.0) == "verbal_offer"
    assert courtship_outcome(40.0, 50.0) == "fish_pond"
    assert courtship_outcome(40.0, 65.0) == "rejected"


def test_settled_mentors_cannot_be_courted():
    for status in ("none", "verbal_offer", "hard_offer", "rejected"):
        with pytest.raises(ValueError):
            roll_courtship(_mentor(status), gpa=4.0, resume_score=100, rng=random.Random(1))


def test_fish_pond_can_be_courted_again():
    mentor, message = roll_courtship(_mentor("fish_pond"), gpa=4.0, resume_score=100, rng=ScriptedRandom([0.0]))
    assert mentor.status == "hard_offer"
    assert mentor.id == "m1" and mentor.reputation == 50
    assert "铁Offer" in message


def test_verbal_offer_decay_draws_only_for_verbal_offers():
    mentors = (_mentor("verbal_offer", mid="a"), _mentor("hard_offer", mid="b"), _mentor("verbal_offer", mid="c"))
    rng = ScriptedRandom([0.1, 0.9])
    out, logs = decay_verbal_offers(mentors, rng)
    assert [m.status for m in out] == ["fish_pond", "hard_offer", "verbal_offer"]
    assert len(logs) == 1
    assert rng.remaining == 0


def test_generate_batch_is_fresh(catalog, rng):
    batch = generate_batch(catalog, "cs", rng)
    assert len(batch) == 3
    assert all(m.status == "none" and m.friendship == 0 for m in batch)
    assert all(40 <= m.reputation <= 99 for m in batch)
    assert len({m.id for m in batch}) == 3


def test_refresh_requires_stamina(catalog, rng):
    tired = PlayerStats(stamina=4.0)
    out = refresh_mentors(tired, (), (), major_type="cs", catalog=catalog, rng=rng)
    assert out.failure == "stamina"
    assert out.stats == tired

    ok = refresh_mentors(PlayerStats(), (), (), major_type="cs", catalog=catalog, rng=rng)
    assert ok.ok
    assert ok.stats.stamina == 95.0
    assert len(ok.potential) == 3


def test_contact_then_court_then_deepen():
    potential = (_mentor(mid="p1"),)
    contacted = contact_mentor(PlayerStats(gpa=4.0), (), potential, "p1")
    assert contacted.ok
    assert contacted.potential == ()
    assert contacted.mentors[0].status == "contacting"
    assert contacted.stats.stamina == 80.0

    courted = court_mentor(contacted.stats, contacted.mentors, (), "p1", resume_score=100, rng=ScriptedRandom([0.5]))
    assert courted.ok
    assert courted.mentors[0].status == "verbal_offer"
    assert courted.stats.stamina == 65.0

    again = court_mentor(courted.stats, courted.mentors, (), "p1", resume_score=100, rng=ScriptedRandom())
    assert again.failure == "unavailable"

    deepened = deepen_mentor(courted.stats, courted.mentors, (), "p1", rng=ScriptedRandom([0.0]))
    assert deepened.ok
    assert deepened.mentors[0].friendship == 5.0
    assert deepened.stats.research == 2.0
    assert deepened.stats.stamina == 55.0


def test_contact_unknown_mentor():
    out = contact_mentor(PlayerStats(), (), (), "missing")
    assert out.failure == "not_found"


def test_deepen_ignores_stamina_shortage():
    out = deepen_mentor(PlayerStats(stamina=3.0), (_mentor("contacting"),), (), "m1", rng=ScriptedRandom([0.99]))
    assert out.ok
    assert out.stats.stamina == 0.0
    assert out.mentors[0].friendship == 9.0
