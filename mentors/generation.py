from __future__ import annotations

import random
from typing import Optional, Tuple

from content.catalog import ContentCatalog
from content.mentor_pool import GIVEN_NAMES, SURNAMES, TITLES
from rng_util import pick, random_id, randint_span

from . import config as m_cfg
from .types import Mentor


def generate_mentor(
    catalog: ContentCatalog,
    major_type: Optional[str],
    rng: random.Random,
    *,
    university: Optional[str] = None,
) -> Mentor:
    """One fresh mentor for the player's major type, status ``none``."""
    pool = catalog.mentor_pool_for(major_type)
    mentor_id = random_id(rng, m_cfg.ID_LENGTH)
    name = pick(rng, SURNAMES) + pick(rng, GIVEN_NAMES)
    title = pick(rng, TITLES)
    reputation = randint_span(rng, m_cfg.REPUTATION_LOW, m_cfg.REPUTATION_SPAN)
    if university is None:
        university = pick(rng, catalog.universities).name
    return Mentor(
        id=mentor_id,
        name=name,
        title=title,
        reputation=reputation,
        university=university,
        school=pick(rng, pool.schools),
        research_field=pick(rng, pool.fields),
    )


def generate_batch(
    catalog: ContentCatalog,
    major_type: Optional[str],
    rng: random.Random,
    count: int = m_cfg.BATCH_SIZE,
) -> Tuple[Mentor, ...]:
    return tuple(generate_mentor(catalog, major_type, rng) for _ in range(int(count)))
