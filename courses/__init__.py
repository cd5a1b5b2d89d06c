"""Course & exam subsystem.

Per-course mastery accumulates during the semester (see ``actions.mastery``),
exams at week 9 and week 18 turn it into scores and grades, and the final
exam folds the credit-weighted semester GPA into the cumulative one.
"""

from .exams import (
    cumulative_gpa,
    exam_kind_for_week,
    exam_log_line,
    grade_for,
    run_exam,
    semester_gpa,
    semester_name,
    stored_gpa,
)
from .selection import ToggleOutcome, compulsory_courses, selectable_courses, toggle_course
from .types import Course, ExamReport, ExamResult

__all__ = [
    "Course",
    "ExamResult",
    "ExamReport",
    "ToggleOutcome",
    "compulsory_courses",
    "selectable_courses",
    "toggle_course",
    "exam_kind_for_week",
    "grade_for",
    "run_exam",
    "semester_gpa",
    "cumulative_gpa",
    "semester_name",
    "stored_gpa",
    "exam_log_line",
]
