from __future__ import annotations

import random

import pytest

from admissions.gaokao import attempt_university, reach_chance, roll_gaokao_score
from admissions.interview import answer_question, final_score
from admissions.outcome import classify_ending, failure_kind, phase_stats
from admissions.screening import estimate_success_chance, screen_application, screening_probability
from admissions.tiers import acceptance_threshold, background_score, tier_value, university_tier_value
from admissions.types import Applicant, Application, CurrentInterview
from content.endings import QUOTES, T0_QUOTE
from ledger.types import PlayerStats, Social
from mentors.types import Mentor

from conftest import ScriptedRandom


def _applicant(**stats) -> Applicant:
    base = dict(gpa=3.5, research=0.0, competition=0.0, english=70.0, mental=80.0, stamina=100.0)
    base.update(stats)
    return Applicant(
        stats=PlayerStats(**base),
        social=Social(classmates=30.0, seniors=40.0),
        resume_score=60,
        mentors=(),
        home_university="同济大学",
        major="计算机科学与技术",
    )


# ---------------------------------------------------------------------------
# Gaokao
# ---------------------------------------------------------------------------

def test_gaokao_score_range():
    rng = random.Random(9)
    scores = [roll_gaokao_score(rng) for _ in range(2000)]
    assert min(scores) >= 500
    assert max(scores) <= 729


def test_score_above_line_never_rolls(catalog):
    tsinghua = catalog.university_by_name("清华大学")
    rng = ScriptedRandom([0.999])
    attempt = attempt_university(750, tsinghua, rng)
    assert attempt.admitted and not attempt.rolled
    assert rng.remaining == 1


def test_reach_failure_rate_converges(catalog):
    tsinghua = catalog.university_by_name("清华大学")
    assert reach_chance(690, 695) == pytest.approx(0.5)
    rng = random.Random(2024)
    trials = 10000
    failures = sum(1 for _ in range(trials) if not attempt_university(690, tsinghua, rng).admitted)
    assert abs(failures / trials - 0.5) < 0.03


def test_reach_chance_floor():
    assert reach_chance(600, 695) == pytest.approx(0.1)
    assert reach_chance(700, 695) == 1.0


def test_failed_reach_rerolls_score(catalog):
    tsinghua = catalog.university_by_name("清华大学")
    attempt = attempt_university(690, tsinghua, ScriptedRandom([0.9, 0.0]))
    assert not attempt.admitted
    assert attempt.new_score == 500


# ---------------------------------------------------------------------------
# Tiers
# ---------------------------------------------------------------------------

def test_tier_values(catalog):
    assert tier_value("T0") == 6
    assert tier_value("T5") == 1
    assert tier_value("T9") == 1
    assert university_tier_value(catalog, "nowhere") == 2
    assert background_score(6, 4) == 70.0
    assert background_score(2, 4) == 100.0
    assert background_score(6, 1) == 25.0
    assert acceptance_threshold(6) == 84.0


# ---------------------------------------------------------------------------
# Screening
# ---------------------------------------------------------------------------

def test_estimate_is_bounded_integer(catalog):
    est = estimate_success_chance(_applicant(), catalog)
    assert isinstance(est, int)
    assert 0 <= est <= 100
    strong = estimate_success_chance(_applicant(gpa=4.5, english=100.0), catalog)
    assert strong >= est


def test_mentor_offer_raises_screening_probability(catalog):
    target = catalog.university_by_name("清华大学")
    plain = _applicant()
    mentor = Mentor(
        id="m", name="李", title="教授", reputation=80, university="清华大学",
        school="x", research_field="y", status="hard_offer",
    )
    backed = Applicant(
        stats=plain.stats, social=plain.social, resume_score=plain.resume_score,
        mentors=(mentor,), home_university=plain.home_university, major=plain.major,
    )
    assert screening_probability(backed, target, catalog) > screening_probability(plain, target, catalog)


def test_screening_invite_starts_interview(catalog):
    target = catalog.university_by_name("同济大学")
    result = screen_application(_applicant(), target, "summer_camp", catalog, ScriptedRandom([0.0]))
    assert result.invited
    assert result.application.status == "interviewing"
    assert len(result.interview.questions) == 3
    assert len({q.id for q in result.interview.questions}) == 3
    assert "夏令营" in result.log


def test_screening_rejection(catalog):
    target = catalog.university_by_name("清华大学")
    weak = _applicant(gpa=0.0, english=0.0)
    result = screen_application(weak, target, "pre_recommendation", catalog, ScriptedRandom([0.999]))
    assert not result.invited
    assert result.application.status == "rejected"
    assert result.interview is None


# ---------------------------------------------------------------------------
# Interview
# ---------------------------------------------------------------------------

def _interview(catalog, background: float, university: str = "清华大学") -> CurrentInterview:
    return CurrentInterview(
        university=university,
        major="计算机科学与技术",
        phase="pre_recommendation",
        questions=tuple(catalog.interview_questions[:3]),
        background_score=background,
    )


def test_final_score_formula():
    assert final_score(60, 60) == pytest.approx(100.0)
    assert final_score(30, 10) == pytest.approx(30.0)


def test_strong_interview_is_accepted(catalog):
    interview = _interview(catalog, 60.0)
    step = answer_question(interview, 0, catalog)
    assert not step.finished
    step = answer_question(step.interview, 0, catalog)
    step = answer_question(step.interview, 0, catalog)
    assert step.finished
    assert step.accepted is True
    assert "恭喜" in step.log


def test_weak_interview_is_rejected(catalog):
    step = answer_question(_interview(catalog, 0.0), 2, catalog)
    step = answer_question(step.interview, 2, catalog)
    step = answer_question(step.interview, 2, catalog)
    assert step.accepted is False
    assert step.final_score < acceptance_threshold(6)


def test_invalid_option_raises(catalog):
    with pytest.raises(IndexError):
        answer_question(_interview(catalog, 50.0), 7, catalog)


# ---------------------------------------------------------------------------
# Endings
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "stats, social, money, expected",
    [
        (dict(english=90.0), dict(), 20000, "study_abroad"),
        (dict(gpa=3.5), dict(seniors=90.0), 0, "teach_for_baoyan"),
        (dict(gpa=4.2, mental=70.0), dict(), 0, "grad_exam"),
        (dict(competition=85.0), dict(classmates=75.0), 0, "corporate"),
        (dict(mental=30.0), dict(), 0, "gap_year"),
        (dict(), dict(), 0, "entry_level"),
    ],
)
def test_failure_rules(stats, social, money, expected):
    assert failure_kind(PlayerStats(**stats), Social(**social), money) == expected


def test_failure_rules_apply_in_order():
    # Both study_abroad and gap_year match; the first rule wins.
    assert failure_kind(PlayerStats(english=90.0, mental=10.0), Social(), 16000) == "study_abroad"


def test_t0_success_uses_fixed_quote(catalog, rng):
    apps = (
        Application(university="复旦大学", major="cs", status="rejected", phase="summer_camp"),
        Application(university="清华大学", major="cs", status="accepted", phase="pre_recommendation"),
    )
    ending = classify_ending(
        stats=PlayerStats(gpa=4.0),
        social=Social(),
        money=1000,
        resume_score=120,
        applications=apps,
        home_university="同济大学",
        major="计算机科学与技术",
        catalog=catalog,
        rng=rng,
    )
    assert ending.kind == "success"
    assert ending.quote == T0_QUOTE
    assert ending.university == "清华大学"
    assert ending.summer_camp.applied == 1 and ending.summer_camp.offers == 0
    assert ending.pre_recommendation.offers == 1
    assert ending.career_stats.total_resume_score == 120


def test_entry_level_keeps_random_quote(catalog, rng):
    ending = classify_ending(
        stats=PlayerStats(),
        social=Social(),
        money=0,
        resume_score=0,
        applications=(),
        home_university="同济大学",
        major="x",
        catalog=catalog,
        rng=rng,
    )
    assert ending.kind == "entry_level"
    assert ending.quote in QUOTES
    assert ending.university is None


def test_phase_stats_counts_interviews():
    apps = (
        Application(university="a", major="m", status="rejected", phase="summer_camp"),
        Application(university="b", major="m", status="interviewing", phase="summer_camp"),
        Application(university="c", major="m", status="accepted", phase="summer_camp"),
    )
    s = phase_stats(apps, "summer_camp")
    assert (s.applied, s.interviews, s.offers) == (3, 2, 1)
