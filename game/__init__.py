"""Game loop: immutable state, player intents and the reducer that applies them.

    result = dispatch(state, AdvanceWeek(), rng=rng)
    state = result.state

Rejected intents leave the state unchanged apart from an explanatory log
line and carry a stable rejection code (see ``game.errors``).
"""

from .errors import GameSessionError
from .intents import INTENT_TYPES, Intent, intent_from_payload
from .reducer import dispatch
from .serialization import state_to_json
from .state import GameState, StepContext, StepResult, new_game_state

__all__ = [
    "GameState",
    "StepContext",
    "StepResult",
    "GameSessionError",
    "Intent",
    "INTENT_TYPES",
    "intent_from_payload",
    "new_game_state",
    "dispatch",
    "state_to_json",
]
