from __future__ import annotations

"""Shop purchases. Item payloads are interpreted by kind (STAT, EFFICIENCY, RESUME)."""

import logging
from typing import Optional

from content.types import ShopItem
from ledger.effects import apply_effect
from resume.config import ITEM_ID_LENGTH
from resume.types import ResumeItem
from rng_util import pick, random_id

from . import config as g_cfg
from . import errors
from .intents import PurchaseItem
from .state import GameState, StepContext, StepResult, ok, reject

logger = logging.getLogger(__name__)


def _bought_resume_item(item: ShopItem, ctx: StepContext) -> Optional[ResumeItem]:
    kind = "research" if ctx.rng.random() > 0.5 else "competition"
    names = item.resume_names.get(kind) or ()
    if not names or item.resume_score is None:
        logger.warning("shop item %s has no %s resume payload", item.name, kind)
        return None
    return ResumeItem(
        id=random_id(ctx.rng, ITEM_ID_LENGTH),
        kind=kind,
        name=pick(ctx.rng, names),
        score=item.resume_score.roll(ctx.rng),
        quality="common",
    )


def purchase_item(state: GameState, intent: PurchaseItem, ctx: StepContext) -> StepResult:
    if state.phase not in g_cfg.PLAY_PHASES:
        return reject(state, errors.WRONG_PHASE)
    item = ctx.catalog.shop_item(intent.name)
    if item is None:
        return reject(state, errors.NOT_FOUND, f"商店里没有[{intent.name}]。")

    bought = int(state.purchase_counts.get(item.name, 0))
    if item.limit and bought >= int(item.limit):
        return reject(state, errors.PURCHASE_LIMIT_EXCEEDED, f"{item.name}本周限购{item.limit}次，下周再来吧。")
    if state.money < int(item.cost):
        return reject(state, errors.INSUFFICIENT_FUNDS, f"钱不够了，买不起{item.name}。")

    stats = state.stats
    social = state.social
    money = state.money
    efficiencies = state.efficiencies
    resume = state.resume

    if item.kind == "STAT" and item.effect is not None:
        result = apply_effect(stats, social, money, item.effect)
        stats, social, money = result.stats, result.social, result.money
    elif item.kind == "EFFICIENCY":
        efficiencies = efficiencies.boosted(item.efficiency_bonus)
    elif item.kind == "RESUME":
        new_item = _bought_resume_item(item, ctx)
        if new_item is None:
            return reject(state, errors.INVALID_CHOICE, f"{item.name}暂时缺货。")
        resume = resume + (new_item,)

    counts = dict(state.purchase_counts)
    counts[item.name] = bought + 1
    return ok(
        state,
        f"购买了[{item.name}]。{item.description}",
        stats=stats,
        social=social,
        money=money - int(item.cost),
        efficiencies=efficiencies,
        resume=resume,
        purchase_counts=counts,
    )
