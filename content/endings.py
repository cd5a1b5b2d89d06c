from __future__ import annotations

"""Ending texts. Classification lives in ``admissions.outcome``."""

from typing import Dict, Tuple

SUCCESS_TITLE = "【最终结局：保研成功】"

# Detail templates take ``home`` (player university), ``major`` (player major),
# ``target`` and ``target_major``.
SUCCESS_DETAILS: Dict[str, str] = {
    "T0": "你在 {home} 的四年努力终于迎来了最高光的时刻。作为 {major} 专业的佼佼者，你成功保研至 {target} {target_major} 专业。这是国内最顶尖的学术殿堂，未来不可限量。",
    "T1": "你凭借出色的综合素质，成功保研至 {target} {target_major} 专业。华五名校的科研氛围将助你在学术道路上更进一步。",
    "home": "你选择留在本校 {target} 继续攻读 {target_major} 专业。在熟悉的实验室和敬爱的导师指导下，你将开启稳健的研究生涯。",
    "other": "你成功通过夏令营和预推免的层层选拔，保研至 {target} {target_major} 专业。新的环境意味着新的开始，祝你在学术之路上越走越远。",
}

T0_QUOTE = "这世上只有一种真正的英雄主义，那就是在看清学术的真相后，依然热爱它。"

# key -> (title, detail, quote or "" to keep the random quote)
FAILURE_ENDINGS: Dict[str, Tuple[str, str, str]] = {
    "study_abroad": (
        "【最终结局：出国深造】",
        "虽然国内保研之路未能如愿，但你凭借优异的英语成绩和充足的资金储备，成功申请到了海外名校的 Master 项目。换个赛道，你依然是赢家。",
        "世界的边界，就是你认知的边界。星辰大海，才是你的归宿。",
    ),
    "teach_for_baoyan": (
        "【最终结局：支教保研】",
        "你虽然没有在学术赛道上拿到满意的 Offer，但凭借极高的人脉评分和丰富的学生工作经验，成功申请到了“支教保研”名额。在西部的三尺讲台上，你将书写另一种青春。",
        "用一年不长的时间，做一件终生难忘的事。",
    ),
    "grad_exam": (
        "【最终结局：考研战神】",
        "保研名额的遗憾错失并没有击垮你。你迅速调整心态投入考研，凭借四年积累的深厚功底，在随后的全国研究生统一考试中发挥神勇，最终以初试第一的成绩考入了最初的目标院校。",
        "杀不死我的，终将使我更强大。",
    ),
    "corporate": (
        "【最终结局：职场精英】",
        "保研失败后，你凭借手里沉甸甸的竞赛奖牌和优秀的社交能力，成功拿到了某大厂的校招高薪 Offer。你发现，比起科研，你似乎更适合在快节奏的职场中发光发热。",
        "在象牙塔外，你依然可以定义自己的规则。",
    ),
    "gap_year": (
        "【最终结局：遗憾二战】",
        "保研过程中的巨大压力和最终的落榜让你感到精疲力竭。你决定给自己放一个长假，回家在父母的陪伴下修整一段时间，准备来年再战。这一次，你会更加从容。",
        "暂时的退后，是为了下一次更有力的跳跃。",
    ),
    "entry_level": (
        "【最终结局：职场新人】",
        "保研未能如愿，你略显仓促地进入了就业市场。虽然起步阶段略有坎坷，但凭借大学四年打下的专业基础，你相信只要脚踏实地，未来依然可期。",
        "",
    ),
}

QUOTES: Tuple[str, ...] = (
    "保研不是终点，而是通往更广阔世界的入场券。",
    "在无数个寂静的深夜里，你种下的每一颗汗水，都在此刻开出了花。",
    "所谓天才，不过是选择了那条最孤独、也最坚定的道路。",
    "学术的巅峰固然迷人，但攀登的过程本身就是一种意义。",
    "有些路，只能一个人走；有些光，注定要照亮前行的方向。",
    "生活从不亏待每一个清醒地努力着的人。",
    "乾坤未定，你我皆是黑马；尘埃落定，你已身在巅峰。",
)

STAMINA_DEPLETED_MESSAGE = "你因为体力过度透支，生了一场大病，遗憾错过了保研季。"
MENTAL_DEPLETED_MESSAGE = "你因为压力过大导致心态崩溃，决定放弃保研，回家修养。"
