from __future__ import annotations

import random

import pytest

from courses.exams import (
    cumulative_gpa,
    display_score,
    exam_kind_for_week,
    exam_log_line,
    grade_for,
    run_exam,
    semester_gpa,
    stored_gpa,
)
from courses.selection import compulsory_courses, selectable_courses, toggle_course
from courses.types import Course, ExamResult


def _course(mastery: float, difficulty: int = 3, credit: int = 3, name: str = "c") -> Course:
    return Course(id=name, name=name, difficulty=difficulty, credit=credit, kind="compulsory", semester=1, mastery=mastery)


@pytest.mark.parametrize(
    "score, letter",
    [(100, "A+"), (95, "A+"), (94.9, "A"), (85, "A-"), (80, "B+"), (75, "B"), (70, "B-"), (65, "C+"), (60, "C"), (50, "D"), (49.9, "F")],
)
def test_grade_breakpoints(score, letter):
    assert grade_for(score)[0] == letter


@pytest.mark.parametrize("raw, shown", [(84.5, 85), (84.49, 84), (72.5, 73), (0.0, 0), (99.5, 100)])
def test_display_score_rounds_halves_up(raw, shown):
    assert display_score(raw) == shown


def test_exam_weeks():
    assert exam_kind_for_week(9) == "midterm"
    assert exam_kind_for_week(18) == "final"
    assert exam_kind_for_week(10) is None


def test_full_mastery_saturates_at_100():
    for seed in range(20):
        report = run_exam([_course(100.0)], kind="final", mental=100.0, semester=1, prior_gpa=0.0, rng=random.Random(seed))
        assert report.results[0].score == 100
        assert report.results[0].grade == "A+"


def test_half_mastery_score_band():
    # 40 + 50 * 0.6 * 1.2 * [0.9, 1.1] -> [72.4, 79.6]
    for seed in range(50):
        report = run_exam([_course(50.0)], kind="final", mental=100.0, semester=1, prior_gpa=0.0, rng=random.Random(seed))
        r = report.results[0]
        assert 72 <= r.score <= 80
        assert r.grade in ("B-", "B")


def test_difficulty_penalty_applies():
    hard = run_exam([_course(0.0, difficulty=5)], kind="final", mental=50.0, semester=1, prior_gpa=0.0, rng=random.Random(1))
    assert hard.results[0].score == 34


def test_first_semester_gpa_equals_semester_gpa():
    courses = [_course(80.0, credit=4, name="a"), _course(30.0, credit=2, name="b")]
    report = run_exam(courses, kind="final", mental=80.0, semester=1, prior_gpa=0.0, rng=random.Random(7))
    assert report.new_gpa == pytest.approx(report.semester_gpa)
    assert report.prev_gpa == 0.0


def test_cumulative_gpa_is_running_mean():
    assert cumulative_gpa(3.0, 4.0, 2) == pytest.approx(3.5)
    assert cumulative_gpa(3.5, 2.0, 3) == pytest.approx(3.0)
    assert cumulative_gpa(0.0, 3.3, 4) == pytest.approx(3.3)
    assert stored_gpa(3.14159) == 3.14


def test_semester_gpa_is_credit_weighted():
    results = [
        ExamResult(course_name="a", score=96, grade="A+", credit=4, grade_point=4.3),
        ExamResult(course_name="b", score=55, grade="D", credit=1, grade_point=1.0),
    ]
    assert semester_gpa(results) == pytest.approx((4.3 * 4 + 1.0) / 5)
    assert semester_gpa([]) == 0.0


def test_midterm_leaves_gpa_untouched():
    report = run_exam([_course(40.0)], kind="midterm", mental=80.0, semester=2, prior_gpa=3.2, rng=random.Random(3))
    assert report.new_gpa == 3.2
    assert report.semester_name.endswith("(期中)")
    assert exam_log_line(report) == "期中考试结束，快去看看你的成绩单吧。"


def test_compulsory_courses_cannot_be_dropped(catalog):
    courses = compulsory_courses(catalog, "cs", 1)
    assert {c.id for c in courses} >= {"cs1-1", "cs1-2"}
    assert all(c.mastery == 0.0 for c in courses)

    locked = toggle_course(courses, catalog.course_by_id("cs1-1"))
    assert locked.status == "locked"

    added = toggle_course(courses, catalog.course_by_id("gen1-1"))
    assert added.status == "added"
    removed = toggle_course(added.courses, catalog.course_by_id("gen1-1"))
    assert removed.status == "removed"
    assert removed.courses == courses


def test_course_load_limit(catalog):
    current = compulsory_courses(catalog, "cs", 1)
    out = toggle_course(current, catalog.course_by_id("gen1-1"), limit=len(current))
    assert out.status == "limit"
    assert out.courses == current
    assert catalog.course_by_id("gen1-1") in selectable_courses(catalog, "cs", 1)
