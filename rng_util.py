from __future__ import annotations

"""Random-source helpers shared by every subsystem.

All randomness flows through an explicit ``random.Random`` so a seeded
instance reproduces a whole game.
"""

import random
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")

_ID_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"


def make_rng(seed: Optional[int] = None) -> random.Random:
    if seed is None:
        return random.Random()
    return random.Random(int(seed))


def random_id(rng: random.Random, length: int = 9) -> str:
    return "".join(rng.choice(_ID_ALPHABET) for _ in range(int(length)))


def pick(rng: random.Random, items: Sequence[T]) -> T:
    """Uniform choice; raises ValueError on an empty sequence."""
    if not items:
        raise ValueError("cannot pick from an empty sequence")
    return items[int(rng.random() * len(items))]


def randint_span(rng: random.Random, low: int, span: int) -> int:
    """``low + floor(U * span)``: an integer in ``[low, low + span - 1]``."""
    return int(low) + int(rng.random() * int(span))
