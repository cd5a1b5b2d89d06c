from __future__ import annotations

"""Resume drop system.

When the research or competition accumulator reaches 100 it is reset to 0
and converted into one resume item: a quality tier is rolled, an item of that
tier is picked uniformly from the pool, and its score is drawn uniformly from
the item's inclusive range. Both accumulators may fire in the same week.
"""

import logging
import random
from dataclasses import dataclass, replace
from typing import Optional, Sequence, Tuple

from content.catalog import ContentCatalog
from ledger.types import PlayerStats
from rng_util import pick, random_id

from . import config as r_cfg
from .types import ResumeItem

logger = logging.getLogger(__name__)

_DROP_MESSAGES = {
    "research": "🎉 你的科研积累达到了顶峰，完成了一项【{quality}】品质的科研成果：{name}！",
    "competition": "🎉 你的竞赛积累达到了顶峰，获得了一项【{quality}】品质的竞赛荣誉：{name}！",
}


@dataclass(frozen=True, slots=True)
class DropResult:
    stats: PlayerStats
    resume: Tuple[ResumeItem, ...]
    logs: Tuple[str, ...] = ()


def roll_quality(rng: random.Random) -> str:
    roll = rng.random() * 100.0
    for cutoff, quality in r_cfg.QUALITY_CUTOFFS:
        if roll < cutoff:
            return quality
    return r_cfg.DEFAULT_QUALITY


def draw_item(kind: str, catalog: ContentCatalog, rng: random.Random) -> Optional[ResumeItem]:
    quality = roll_quality(rng)
    pool = catalog.resume_pool_for(kind, quality)
    if not pool:
        # Thin test catalogs may lack a tier; fall back to anything of the kind.
        pool = tuple(catalog.resume_pools.get(kind, ()))
        if not pool:
            logger.warning("resume pool for %s is empty; drop skipped", kind)
            return None
    entry = pick(rng, pool)
    score = entry.score_range.roll(rng)
    return ResumeItem(
        id=random_id(rng, r_cfg.ITEM_ID_LENGTH),
        kind=kind,
        name=entry.name,
        score=score,
        quality=entry.quality,
    )


def apply_drops(
    stats: PlayerStats,
    resume: Sequence[ResumeItem],
    catalog: ContentCatalog,
    rng: random.Random,
) -> DropResult:
    cur_stats = stats
    items = tuple(resume)
    logs = []
    for kind in r_cfg.ACCUMULATORS:
        if cur_stats.get(kind) < r_cfg.DROP_THRESHOLD:
            continue
        cur_stats = replace(cur_stats, **{kind: 0.0})
        item = draw_item(kind, catalog, rng)
        if item is None:
            continue
        items = items + (item,)
        logs.append(_DROP_MESSAGES[kind].format(quality=item.quality, name=item.name))
        logger.debug("resume drop kind=%s quality=%s score=%s", kind, item.quality, item.score)
    return DropResult(stats=cur_stats, resume=items, logs=tuple(logs))
