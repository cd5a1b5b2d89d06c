from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Literal, Optional, Tuple

from content.types import CourseKind, CourseSpec

ExamKind = Literal["midterm", "final"]


@dataclass(frozen=True, slots=True)
class Course:
    """A course instance on the player's active list.

    Instances are created fresh from the catalog each semester; mastery never
    carries over.
    """

    id: str
    name: str
    difficulty: int
    credit: int
    kind: CourseKind
    semester: int
    major_restriction: Optional[Tuple[str, ...]] = None
    description: str = ""
    mastery: float = 0.0

    @classmethod
    def from_spec(cls, spec: CourseSpec) -> "Course":
        return cls(
            id=spec.id,
            name=spec.name,
            difficulty=int(spec.difficulty),
            credit=int(spec.credit),
            kind=spec.kind,
            semester=int(spec.semester),
            major_restriction=spec.major_restriction,
            description=spec.description,
            mastery=0.0,
        )

    def with_mastery(self, mastery: float) -> "Course":
        return replace(self, mastery=float(mastery))

    def to_json_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "difficulty": int(self.difficulty),
            "credit": int(self.credit),
            "kind": self.kind,
            "semester": int(self.semester),
            "mastery": float(self.mastery),
        }


@dataclass(frozen=True, slots=True)
class ExamResult:
    course_name: str
    # Rounded for display; the grade is decided on the unrounded score.
    score: int
    grade: str
    credit: int
    grade_point: float

    def to_json_dict(self) -> Dict[str, Any]:
        return {
            "course_name": self.course_name,
            "score": int(self.score),
            "grade": self.grade,
            "credit": int(self.credit),
            "grade_point": float(self.grade_point),
        }


@dataclass(frozen=True, slots=True)
class ExamReport:
    kind: ExamKind
    semester_name: str
    results: Tuple[ExamResult, ...]
    prev_gpa: float
    new_gpa: float
    semester_gpa: Optional[float] = None

    def to_json_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "semester_name": self.semester_name,
            "results": [r.to_json_dict() for r in self.results],
            "prev_gpa": float(self.prev_gpa),
            "new_gpa": float(self.new_gpa),
            "semester_gpa": None if self.semester_gpa is None else float(self.semester_gpa),
        }
