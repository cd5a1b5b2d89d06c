from __future__ import annotations

"""Semester course lists and the course-selection toggle."""

from dataclasses import dataclass
from typing import Literal, Optional, Sequence, Tuple

from content.catalog import ContentCatalog
from content.types import CourseSpec

from .config import MAX_COURSES_PER_SEMESTER
from .types import Course

ToggleStatus = Literal["added", "removed", "locked", "limit"]


@dataclass(frozen=True, slots=True)
class ToggleOutcome:
    courses: Tuple[Course, ...]
    status: ToggleStatus


def compulsory_courses(catalog: ContentCatalog, major_type: Optional[str], semester: int) -> Tuple[Course, ...]:
    """Fresh course instances (mastery 0) for a semester's compulsory list."""
    return tuple(Course.from_spec(spec) for spec in catalog.compulsory_for(major_type, semester))


def selectable_courses(catalog: ContentCatalog, major_type: Optional[str], semester: int) -> Tuple[CourseSpec, ...]:
    return catalog.courses_for(major_type, semester)


def toggle_course(
    courses: Sequence[Course],
    spec: CourseSpec,
    *,
    limit: int = MAX_COURSES_PER_SEMESTER,
) -> ToggleOutcome:
    current = tuple(courses)
    if any(c.id == spec.id for c in current):
        if spec.kind == "compulsory":
            return ToggleOutcome(courses=current, status="locked")
        return ToggleOutcome(courses=tuple(c for c in current if c.id != spec.id), status="removed")

    if len(current) >= int(limit):
        return ToggleOutcome(courses=current, status="limit")
    return ToggleOutcome(courses=current + (Course.from_spec(spec),), status="added")
