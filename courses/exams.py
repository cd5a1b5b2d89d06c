from __future__ import annotations

"""Exam scoring and GPA folding.

Exams run on the advanced week number: week 9 is the midterm (feedback
only), week 18 the final (folds into cumulative GPA). One random draw per
course, in course order.
"""

import logging
import math
import random
from typing import Optional, Sequence, Tuple

from . import config as c_cfg
from .types import Course, ExamKind, ExamReport, ExamResult

logger = logging.getLogger(__name__)


def exam_kind_for_week(week: int) -> Optional[ExamKind]:
    w = int(week)
    if w == c_cfg.MIDTERM_WEEK:
        return "midterm"
    if w == c_cfg.FINAL_WEEK:
        return "final"
    return None


def semester_name(semester: int) -> str:
    names = c_cfg.SEMESTER_NAMES
    idx = int(semester) - 1
    if 0 <= idx < len(names):
        return names[idx]
    return f"第{int(semester)}学期"


def grade_for(score: float) -> Tuple[str, float]:
    s = float(score)
    for floor, letter, point in c_cfg.GRADE_BREAKPOINTS:
        if s >= floor:
            return letter, point
    return c_cfg.FAIL_GRADE


def exam_score(course: Course, mental: float, kind: ExamKind, rng: random.Random) -> float:
    """Raw (unrounded) score of one course, clamped to [0, 100]."""
    mental_factor = c_cfg.MENTAL_FACTOR_FLOOR + (float(mental) / 100.0) * c_cfg.MENTAL_FACTOR_SPAN
    random_factor = c_cfg.RANDOM_FACTOR_FLOOR + rng.random() * c_cfg.RANDOM_FACTOR_SPAN

    mastery = float(course.mastery)
    if kind == "midterm":
        mastery = min(100.0, mastery * c_cfg.MIDTERM_MASTERY_MULT)

    score = c_cfg.EXAM_BASE_SCORE + mastery * c_cfg.EXAM_MASTERY_WEIGHT * mental_factor * random_factor
    score -= (int(course.difficulty) - c_cfg.DIFFICULTY_PIVOT) * c_cfg.DIFFICULTY_PENALTY
    return min(c_cfg.SCORE_MAX, max(c_cfg.SCORE_MIN, score))


def display_score(raw: float) -> int:
    """Whole-number score shown to the player; halves round up."""
    return int(math.floor(float(raw) + 0.5))


def grade_course(course: Course, mental: float, kind: ExamKind, rng: random.Random) -> ExamResult:
    raw = exam_score(course, mental, kind, rng)
    letter, point = grade_for(raw)
    return ExamResult(
        course_name=course.name,
        score=display_score(raw),
        grade=letter,
        credit=int(course.credit),
        grade_point=point,
    )


def semester_gpa(results: Sequence[ExamResult]) -> float:
    """Credit-weighted grade point mean. An empty list weighs as one credit."""
    total_credits = sum(int(r.credit) for r in results) if results else 1
    if total_credits <= 0:
        total_credits = 1
    weighted = sum(float(r.grade_point) * int(r.credit) for r in results)
    return weighted / float(total_credits)


def cumulative_gpa(prior_gpa: float, sem_gpa: float, semester_index: int) -> float:
    s = int(semester_index)
    prior = float(prior_gpa)
    if prior == 0 or s <= 1:
        return float(sem_gpa)
    return (prior * (s - 1) + float(sem_gpa)) / s


def run_exam(
    courses: Sequence[Course],
    *,
    kind: ExamKind,
    mental: float,
    semester: int,
    prior_gpa: float,
    rng: random.Random,
) -> ExamReport:
    """Grade every active course. Finals carry the new cumulative GPA (unrounded)."""
    results = tuple(grade_course(course, mental, kind, rng) for course in courses)
    name = semester_name(semester)

    if kind == "midterm":
        return ExamReport(
            kind=kind,
            semester_name=f"{name} (期中)",
            results=results,
            prev_gpa=float(prior_gpa),
            new_gpa=float(prior_gpa),
        )

    sem = semester_gpa(results)
    new_gpa = cumulative_gpa(prior_gpa, sem, semester)
    logger.debug("final exam semester=%s sem_gpa=%.3f gpa %.2f -> %.3f", semester, sem, prior_gpa, new_gpa)
    return ExamReport(
        kind=kind,
        semester_name=name,
        results=results,
        prev_gpa=float(prior_gpa),
        new_gpa=new_gpa,
        semester_gpa=sem,
    )


def stored_gpa(value: float) -> float:
    return round(float(value), c_cfg.GPA_DECIMALS)


def exam_log_line(report: ExamReport) -> str:
    if report.kind == "midterm":
        return "期中考试结束，快去看看你的成绩单吧。"
    return f"期末考试结束！你的绩点变动为: {report.prev_gpa:.2f} -> {report.new_gpa:.2f}"
