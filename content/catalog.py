from __future__ import annotations

"""Query interface over the static content tables.

The engine only reads content through a ``ContentCatalog``; tests build
small catalogs of their own and pass them wherever ``DEFAULT_CATALOG`` would
otherwise be used.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from .actions import BASE_ACTIONS, MAJOR_ACTIONS
from .courses import COURSES, FALLBACK_PREFIXES
from .events import EVENTS
from .interview import INTERVIEW_QUESTIONS
from .majors import BACKGROUNDS, MAJORS
from .mentor_pool import MENTOR_POOLS
from .resume_pool import RESUME_POOLS
from .shop import SHOP_ITEMS
from .types import (
    ActionSpec,
    BackgroundSpec,
    CourseSpec,
    GameEvent,
    InterviewQuestion,
    MajorSpec,
    MentorPool,
    ResumePoolEntry,
    ShopItem,
    University,
)
from .universities import UNIVERSITIES

# Universities listed during selection: admission line at most this far
# above the player's score.
REACH_MARGIN: int = 10

DEFAULT_MENTOR_POOL_KEY = "general"


@dataclass(frozen=True)
class ContentCatalog:
    universities: Tuple[University, ...] = UNIVERSITIES
    courses: Tuple[CourseSpec, ...] = COURSES
    base_actions: Tuple[ActionSpec, ...] = BASE_ACTIONS
    major_actions: Dict[str, Tuple[ActionSpec, ...]] = field(default_factory=lambda: dict(MAJOR_ACTIONS))
    events: Tuple[GameEvent, ...] = EVENTS
    resume_pools: Dict[str, Tuple[ResumePoolEntry, ...]] = field(default_factory=lambda: dict(RESUME_POOLS))
    mentor_pools: Dict[str, MentorPool] = field(default_factory=lambda: dict(MENTOR_POOLS))
    majors: Tuple[MajorSpec, ...] = MAJORS
    backgrounds: Tuple[BackgroundSpec, ...] = BACKGROUNDS
    interview_questions: Tuple[InterviewQuestion, ...] = INTERVIEW_QUESTIONS
    shop_items: Tuple[ShopItem, ...] = SHOP_ITEMS

    # ------------------------------------------------------------------
    # Universities
    # ------------------------------------------------------------------
    def university_by_name(self, name: Optional[str]) -> Optional[University]:
        for u in self.universities:
            if u.name == name:
                return u
        return None

    def universities_above(self, score_threshold: int, *, margin: int = REACH_MARGIN) -> Tuple[University, ...]:
        """Universities whose admission line the score clears, allowing a reach margin."""
        return tuple(u for u in self.universities if int(score_threshold) >= int(u.min_score) - int(margin))

    # ------------------------------------------------------------------
    # Courses
    # ------------------------------------------------------------------
    def courses_for(self, major_type: Optional[str], semester: int) -> Tuple[CourseSpec, ...]:
        """Every course of ``semester`` open to ``major_type`` (any kind)."""
        return tuple(c for c in self.courses if c.semester == int(semester) and c.open_to(major_type))

    def compulsory_for(self, major_type: Optional[str], semester: int) -> Tuple[CourseSpec, ...]:
        found = tuple(c for c in self.courses_for(major_type, semester) if c.kind == "compulsory")
        if found:
            return found
        return tuple(
            c
            for c in self.courses
            if c.semester == int(semester) and c.kind == "compulsory" and c.id.startswith(FALLBACK_PREFIXES)
        )

    def course_by_id(self, course_id: str) -> Optional[CourseSpec]:
        for c in self.courses:
            if c.id == course_id:
                return c
        return None

    # ------------------------------------------------------------------
    # Actions / events
    # ------------------------------------------------------------------
    def actions_for(self, major_type: Optional[str]) -> Tuple[ActionSpec, ...]:
        return tuple(self.base_actions) + tuple(self.major_actions.get(str(major_type), ()))

    def action_by_name(self, major_type: Optional[str], name: str) -> Optional[ActionSpec]:
        for a in self.actions_for(major_type):
            if a.name == name:
                return a
        return None

    def events_for(self, major_type: Optional[str]) -> Tuple[GameEvent, ...]:
        return tuple(e for e in self.events if e.open_to(major_type))

    # ------------------------------------------------------------------
    # Resume / mentors / shop
    # ------------------------------------------------------------------
    def resume_pool_for(self, kind: str, quality: str) -> Tuple[ResumePoolEntry, ...]:
        return tuple(e for e in self.resume_pools.get(kind, ()) if e.quality == quality)

    def mentor_pool_for(self, major_type: Optional[str]) -> MentorPool:
        pool = self.mentor_pools.get(str(major_type))
        if pool is None:
            pool = self.mentor_pools[DEFAULT_MENTOR_POOL_KEY]
        return pool

    def shop_catalog(self) -> Tuple[ShopItem, ...]:
        return self.shop_items

    def shop_item(self, name: str) -> Optional[ShopItem]:
        for item in self.shop_items:
            if item.name == name:
                return item
        return None

    # ------------------------------------------------------------------
    # Setup tables
    # ------------------------------------------------------------------
    def major_by_name(self, name: str) -> Optional[MajorSpec]:
        for m in self.majors:
            if m.name == name:
                return m
        return None

    def background_by_name(self, name: str) -> Optional[BackgroundSpec]:
        for b in self.backgrounds:
            if b.name == name:
                return b
        return None


DEFAULT_CATALOG = ContentCatalog()
