from __future__ import annotations

"""JSON snapshot of a game state for display. Not a save format."""

from typing import Any, Dict

from admissions.screening import estimate_success_chance
from content.catalog import DEFAULT_CATALOG, ContentCatalog
from courses.selection import selectable_courses

from .state import GameState


def _choices(state: GameState, catalog: ContentCatalog) -> Dict[str, Any]:
    """Options that only make sense in the current phase."""
    if state.phase == "university_selection" and not state.university:
        return {"universities": [u.to_json_dict() for u in catalog.universities_above(state.gaokao_score)]}
    if state.phase == "university_selection":
        return {"majors": [{"name": m.name, "major_type": m.major_type, "description": m.description} for m in catalog.majors]}
    if state.phase == "course_selection":
        return {
            "courses": [
                {"id": c.id, "name": c.name, "credit": c.credit, "difficulty": c.difficulty, "kind": c.kind}
                for c in selectable_courses(catalog, state.major_type, state.semester)
            ]
        }
    return {}


def state_to_json(state: GameState, catalog: ContentCatalog = DEFAULT_CATALOG) -> Dict[str, Any]:
    estimate = estimate_success_chance(state.applicant(), catalog) if state.university else None
    return {
        "phase": state.phase,
        "semester": state.semester,
        "week": state.week,
        "stats": state.stats.to_dict(),
        "social": state.social.to_dict(),
        "money": int(state.money),
        "efficiencies": state.efficiencies.to_dict(),
        "background": state.background,
        "gaokao_score": state.gaokao_score,
        "university": state.university,
        "major": state.major,
        "major_type": state.major_type,
        "rejection_count": state.rejection_count,
        "failed_university": state.failed_university,
        "courses": [c.to_json_dict() for c in state.courses],
        "resume": [r.to_json_dict() for r in state.resume],
        "resume_score": state.resume_score,
        "mentors": [m.to_json_dict() for m in state.mentors],
        "potential_mentors": [m.to_json_dict() for m in state.potential_mentors],
        "applications": [a.to_json_dict() for a in state.applications],
        "current_interview": state.current_interview.to_json_dict() if state.current_interview else None,
        "current_event": state.current_event.to_json_dict() if state.current_event else None,
        "selected_actions": list(state.selected_actions),
        "available_actions": [a.to_json_dict() for a in catalog.actions_for(state.major_type)],
        "purchase_counts": dict(state.purchase_counts),
        "exam_report": state.exam_report.to_json_dict() if state.exam_report else None,
        "week_summary": {
            "gains": dict(state.week_summary.gains),
            "logs": list(state.week_summary.logs),
        },
        "estimated_success_chance": estimate,
        "choices": _choices(state, catalog),
        "is_game_over": state.is_game_over,
        "game_message": state.game_message,
        "ending": state.ending.to_json_dict() if state.ending else None,
        "logs": list(state.logs),
    }
