from __future__ import annotations

"""Player intents: one small record per thing the player can do.

``intent_from_payload`` turns the ``{"type": ..., ...}`` JSON the HTTP layer
receives into an intent, raising ``GameSessionError(BAD_INTENT)`` for
anything malformed.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Type, Union

from .errors import BAD_INTENT, GameSessionError


@dataclass(frozen=True, slots=True)
class StartGame:
    background: str


@dataclass(frozen=True, slots=True)
class ProceedToUniversitySelection:
    pass


@dataclass(frozen=True, slots=True)
class SelectUniversity:
    name: str


@dataclass(frozen=True, slots=True)
class SelectMajor:
    name: str


@dataclass(frozen=True, slots=True)
class ToggleCourse:
    course_id: str


@dataclass(frozen=True, slots=True)
class ConfirmCourses:
    pass


@dataclass(frozen=True, slots=True)
class ToggleAction:
    name: str


@dataclass(frozen=True, slots=True)
class AdvanceWeek:
    pass


@dataclass(frozen=True, slots=True)
class PurchaseItem:
    name: str


@dataclass(frozen=True, slots=True)
class ChooseEventOption:
    index: int


@dataclass(frozen=True, slots=True)
class RefreshMentors:
    pass


@dataclass(frozen=True, slots=True)
class ContactMentor:
    mentor_id: str


@dataclass(frozen=True, slots=True)
class CourtMentor:
    mentor_id: str


@dataclass(frozen=True, slots=True)
class DeepenMentor:
    mentor_id: str


@dataclass(frozen=True, slots=True)
class OpenApplications:
    pass


@dataclass(frozen=True, slots=True)
class SubmitApplication:
    university: str


@dataclass(frozen=True, slots=True)
class AnswerInterview:
    option_index: int


@dataclass(frozen=True, slots=True)
class ReturnToMain:
    pass


@dataclass(frozen=True, slots=True)
class SkipToSummerCamp:
    pass


@dataclass(frozen=True, slots=True)
class SkipToPreRecommendation:
    pass


@dataclass(frozen=True, slots=True)
class SkipToGameOver:
    pass


Intent = Union[
    StartGame,
    ProceedToUniversitySelection,
    SelectUniversity,
    SelectMajor,
    ToggleCourse,
    ConfirmCourses,
    ToggleAction,
    AdvanceWeek,
    PurchaseItem,
    ChooseEventOption,
    RefreshMentors,
    ContactMentor,
    CourtMentor,
    DeepenMentor,
    OpenApplications,
    SubmitApplication,
    AnswerInterview,
    ReturnToMain,
    SkipToSummerCamp,
    SkipToPreRecommendation,
    SkipToGameOver,
]

INTENT_TYPES: Dict[str, Type[Any]] = {
    "START_GAME": StartGame,
    "PROCEED_TO_UNIVERSITY_SELECTION": ProceedToUniversitySelection,
    "SELECT_UNIVERSITY": SelectUniversity,
    "SELECT_MAJOR": SelectMajor,
    "TOGGLE_COURSE": ToggleCourse,
    "CONFIRM_COURSES": ConfirmCourses,
    "TOGGLE_ACTION": ToggleAction,
    "ADVANCE_WEEK": AdvanceWeek,
    "PURCHASE_ITEM": PurchaseItem,
    "CHOOSE_EVENT_OPTION": ChooseEventOption,
    "REFRESH_MENTORS": RefreshMentors,
    "CONTACT_MENTOR": ContactMentor,
    "COURT_MENTOR": CourtMentor,
    "DEEPEN_MENTOR": DeepenMentor,
    "OPEN_APPLICATIONS": OpenApplications,
    "SUBMIT_APPLICATION": SubmitApplication,
    "ANSWER_INTERVIEW": AnswerInterview,
    "RETURN_TO_MAIN": ReturnToMain,
    "SKIP_TO_SUMMER_CAMP": SkipToSummerCamp,
    "SKIP_TO_PRE_RECOMMENDATION": SkipToPreRecommendation,
    "SKIP_TO_GAME_OVER": SkipToGameOver,
}


def intent_type_name(intent: Any) -> str:
    for name, cls in INTENT_TYPES.items():
        if type(intent) is cls:
            return name
    return type(intent).__name__


def intent_from_payload(payload: Mapping[str, Any]) -> Intent:
    if not isinstance(payload, Mapping):
        raise GameSessionError(BAD_INTENT, "intent payload must be an object")
    raw_type = str(payload.get("type") or "").strip().upper()
    cls = INTENT_TYPES.get(raw_type)
    if cls is None:
        raise GameSessionError(BAD_INTENT, f"unknown intent type: {raw_type or '<missing>'}", {"type": raw_type})

    kwargs: Dict[str, Any] = {}
    for f in fields(cls):
        if f.name not in payload or payload[f.name] is None:
            raise GameSessionError(BAD_INTENT, f"{raw_type} requires '{f.name}'", {"field": f.name})
        value = payload[f.name]
        if f.type == "int":
            try:
                value = int(value)
            except (TypeError, ValueError) as exc:
                raise GameSessionError(BAD_INTENT, f"'{f.name}' must be an integer", {"field": f.name}) from exc
        else:
            value = str(value)
        kwargs[f.name] = value
    return cls(**kwargs)
