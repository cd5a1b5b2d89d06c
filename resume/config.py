from __future__ import annotations

from typing import Tuple

# Accumulator value at which a research / competition drop fires.
DROP_THRESHOLD: float = 100.0

# Cumulative roll cutoffs on U*100, checked in order; anything above is common.
QUALITY_CUTOFFS: Tuple[Tuple[float, str], ...] = (
    (3.0, "legendary"),
    (15.0, "epic"),
    (50.0, "rare"),
)
DEFAULT_QUALITY: str = "common"

# Accumulators checked after every week, in this order.
ACCUMULATORS: Tuple[str, ...] = ("research", "competition")

ITEM_ID_LENGTH: int = 9
