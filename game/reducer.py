from __future__ import annotations

"""Pure state-transition entry point: ``(GameState, Intent) -> StepResult``.

Every handler returns a fresh state; nothing is mutated in place. All
randomness comes from ``rng`` so a seeded generator replays a game exactly.
"""

import logging
import random
from typing import Any, Callable, Dict, Optional, Type

from content.catalog import DEFAULT_CATALOG, ContentCatalog

from . import applications, debug, enrollment, events, mentoring, scheduler, shop
from . import errors
from . import intents as i
from .state import GameState, StepContext, StepResult, reject

logger = logging.getLogger(__name__)

Handler = Callable[[GameState, Any, StepContext], StepResult]

HANDLERS: Dict[Type[Any], Handler] = {
    i.StartGame: enrollment.start_game,
    i.ProceedToUniversitySelection: enrollment.proceed_to_university_selection,
    i.SelectUniversity: enrollment.select_university,
    i.SelectMajor: enrollment.select_major,
    i.ToggleCourse: enrollment.toggle_course_selection,
    i.ConfirmCourses: enrollment.confirm_courses,
    i.ToggleAction: scheduler.toggle_action_selection,
    i.AdvanceWeek: scheduler.advance_week,
    i.PurchaseItem: shop.purchase_item,
    i.ChooseEventOption: events.choose_event_option,
    i.RefreshMentors: mentoring.refresh,
    i.ContactMentor: mentoring.contact,
    i.CourtMentor: mentoring.court,
    i.DeepenMentor: mentoring.deepen,
    i.OpenApplications: applications.open_applications,
    i.SubmitApplication: applications.submit_application,
    i.AnswerInterview: applications.answer_interview,
    i.ReturnToMain: applications.return_to_main,
    i.SkipToSummerCamp: debug.skip_to_summer_camp,
    i.SkipToPreRecommendation: debug.skip_to_pre_recommendation,
    i.SkipToGameOver: debug.skip_to_game_over,
}


def dispatch(
    state: GameState,
    intent: i.Intent,
    *,
    rng: random.Random,
    catalog: Optional[ContentCatalog] = None,
) -> StepResult:
    handler = HANDLERS.get(type(intent))
    if handler is None:
        raise TypeError(f"unsupported intent: {type(intent).__name__}")
    if state.is_game_over:
        return reject(state, errors.GAME_OVER, "游戏已经结束。")

    ctx = StepContext(rng=rng, catalog=catalog or DEFAULT_CATALOG)
    result = handler(state, intent, ctx)
    if result.rejection is not None:
        logger.debug("intent %s rejected: %s", i.intent_type_name(intent), result.rejection)
    return result
