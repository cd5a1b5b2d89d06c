from __future__ import annotations

from typing import Tuple

from ledger.effects import EffectSpec

from .types import RandomRange, ShopItem

SHOP_ITEMS: Tuple[ShopItem, ...] = (
    ShopItem(
        name="红牛",
        description="补充体力，熬夜神器。",
        cost=20,
        limit=7,
        kind="STAT",
        effect=EffectSpec(stats={"stamina": 20}),
    ),
    ShopItem(
        name="心理咨询",
        description="缓解压力，重拾信心。",
        cost=200,
        limit=2,
        kind="STAT",
        effect=EffectSpec(stats={"mental": 40}),
    ),
    ShopItem(
        name="AI助手",
        description="显著提高本周获取科研、竞赛、掌握度的效率。",
        cost=140,
        limit=1,
        kind="EFFICIENCY",
        efficiency_bonus=0.5,
    ),
    ShopItem(
        name="闲鱼卖家",
        description="花费重金获取随机一项科研或竞赛简历内容。",
        cost=3000,
        kind="RESUME",
        resume_score=RandomRange(10, 19),
        resume_names={
            "research": (
                "闲鱼淘来的科研项目", "代写的实验室课题", "购买的学术论文", "二手发明专利",
                "外包科研项目", "挂名的大创项目", "买来的校企合作",
            ),
            "competition": (
                "闲鱼代打竞赛奖项", "买来的省级荣誉", "挂名的行业赛奖", "购买的校级一等奖",
                "代办的国际奖项", "付费获得的黑客马拉松优胜", "代写的数学建模二等奖",
            ),
        },
    ),
)
