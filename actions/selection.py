from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Sequence, Tuple

from .config import MAX_ACTIONS_PER_WEEK

SelectionStatus = Literal["added", "removed", "limit"]

SELECTION_LIMIT_MESSAGE = "每周最多只能安排 3 项重点计划。"


@dataclass(frozen=True, slots=True)
class SelectionOutcome:
    selected: Tuple[str, ...]
    status: SelectionStatus


def toggle_action(
    selected: Sequence[str],
    name: str,
    *,
    limit: int = MAX_ACTIONS_PER_WEEK,
) -> SelectionOutcome:
    """Select or deselect an action by name; the cap applies only to adding."""
    current = tuple(selected)
    if name in current:
        return SelectionOutcome(selected=tuple(n for n in current if n != name), status="removed")
    if len(current) >= int(limit):
        return SelectionOutcome(selected=current, status="limit")
    return SelectionOutcome(selected=current + (name,), status="added")
