from __future__ import annotations

"""Course load and exam tuning."""

from typing import Tuple

# ---------------------------------------------------------------------------
# Calendar
# ---------------------------------------------------------------------------

WEEKS_PER_SEMESTER: int = 18
MIDTERM_WEEK: int = 9
FINAL_WEEK: int = 18

SEMESTER_NAMES: Tuple[str, ...] = ("大一上", "大一下", "大二上", "大二下", "大三上", "大三下", "大四上", "大四下")

# ---------------------------------------------------------------------------
# Course selection
# ---------------------------------------------------------------------------

MAX_COURSES_PER_SEMESTER: int = 6

# ---------------------------------------------------------------------------
# Exam scoring
# ---------------------------------------------------------------------------

EXAM_BASE_SCORE: float = 40.0
EXAM_MASTERY_WEIGHT: float = 0.6

# mentalFactor = MENTAL_FACTOR_FLOOR + MENTAL_FACTOR_SPAN * mental/100 (0.8 .. 1.2)
MENTAL_FACTOR_FLOOR: float = 0.8
MENTAL_FACTOR_SPAN: float = 0.4

# randomFactor = RANDOM_FACTOR_FLOOR + U * RANDOM_FACTOR_SPAN (0.9 .. 1.1)
RANDOM_FACTOR_FLOOR: float = 0.9
RANDOM_FACTOR_SPAN: float = 0.2

MIDTERM_MASTERY_MULT: float = 2.0

DIFFICULTY_PIVOT: int = 3
DIFFICULTY_PENALTY: float = 3.0

SCORE_MIN: float = 0.0
SCORE_MAX: float = 100.0

# (minimum score, letter, grade point), checked top to bottom.
GRADE_BREAKPOINTS: Tuple[Tuple[float, str, float], ...] = (
    (95.0, "A+", 4.3),
    (90.0, "A", 4.0),
    (85.0, "A-", 3.7),
    (80.0, "B+", 3.3),
    (75.0, "B", 3.0),
    (70.0, "B-", 2.7),
    (65.0, "C+", 2.3),
    (60.0, "C", 2.0),
    (50.0, "D", 1.0),
)
FAIL_GRADE: Tuple[str, float] = ("F", 0.0)

# Stored cumulative GPA precision.
GPA_DECIMALS: int = 2
