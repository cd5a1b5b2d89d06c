from __future__ import annotations

"""Weekly action catalog: shared actions plus a per-major-type set."""

from typing import Dict, Mapping, Optional, Tuple

from .types import ActionSpec, RandomRange


def _a(
    name: str,
    description: str,
    cost: Mapping[str, float],
    gain: Mapping[str, float],
    social: Optional[Mapping[str, float]] = None,
    bonus: Optional[RandomRange] = None,
) -> ActionSpec:
    return ActionSpec(
        name=name,
        description=description,
        cost=dict(cost),
        gain=dict(gain),
        social_gain=dict(social or {}),
        bonus_payout=bonus,
    )


BASE_ACTIONS: Tuple[ActionSpec, ...] = (
    _a("上课", "认真听讲，完成作业。", {"stamina": -10, "mental": -5}, {"mastery": 20}),
    _a("英语学习", "背单词，练听力。", {"stamina": -10, "mental": -5}, {"english": 6}),
    _a("休息", "睡个好觉，恢复精神。", {}, {"stamina": 30, "mental": 10}),
    _a("社交", "和同学聚餐，参加社团。", {"stamina": -15, "money": 100}, {"mental": 20}, {"classmates": 10}),
    _a("请教直系学长", "获取保研一手信息和经验。", {"stamina": -10, "money": 50}, {"research": 1}, {"seniors": 15}),
    _a("做兼职", "勤工俭学，赚点生活费。", {"stamina": -20, "mental": -5}, {"money": 500},
       bonus=RandomRange(0, 299)),
    _a("图书馆自习", "沉浸在知识的海洋里。", {"stamina": -15, "mental": -10}, {"mastery": 30, "mental": -2}),
    _a("健身锻炼", "身体是革命的本钱。", {"stamina": -10, "mental": 5}, {"stamina": 40}),
    _a("慕课学习", "在线学习顶尖名校课程。", {"stamina": -12, "mental": -8}, {"research": 4, "mastery": 15}),
    _a("参加讲座", "听大佬分享学术前沿。", {"stamina": -8, "mental": 5}, {"research": 6, "mental": 10}),
    _a("学生会工作", "锻炼组织协调能力。", {"stamina": -10, "mental": -10}, {"mental": 20, "competition": 5}),
    _a("刷绩点神器", "疯狂刷往年题和课后作业。", {"stamina": -40, "mental": -5}, {"mastery": 50}),
)

MAJOR_ACTIONS: Dict[str, Tuple[ActionSpec, ...]] = {
    "cs": (
        _a("刷算法题", "LeetCode, Codeforces...", {"stamina": -20, "mental": -10}, {"competition": 15, "mastery": 10}),
        _a("开发个人项目", "写个有趣的开源工具。", {"stamina": -20, "mental": -5},
           {"research": 1, "competition": 20, "mastery": 12}),
        _a("参加黑客马拉松", "48小时不眠不休极限编程。", {"stamina": -40, "mental": -30},
           {"competition": 30, "research": 1, "mastery": 8}),
        _a("深度钻研OS/内核", "硬核底层技术钻研。", {"stamina": -25, "mental": -25}, {"research": 15, "mastery": 30}),
        _a("大厂实习", "提前感受996的洗礼。", {"stamina": -50, "mental": -30},
           {"research": 10, "money": 2000, "mastery": 8}),
        _a("论文复现", "复现顶会 SOTA 模型。", {"stamina": -20, "mental": -40}, {"research": 25, "mastery": 10}),
    ),
    "ee": (
        _a("焊电路板", "闻着松香的味道，连接每一个焊点。", {"stamina": -20, "mental": -5},
           {"research": 10, "competition": 5, "mastery": 8}),
        _a("电赛备赛", "为了全国大学生电子设计竞赛努力。", {"stamina": -30, "mental": -15},
           {"competition": 20, "mastery": 6}),
        _a("MATLAB 仿真", "复杂的信号处理与算法模拟。", {"stamina": -15, "mental": -15},
           {"research": 15, "mastery": 12}),
        _a("芯片流片", "参与学院的流片项目。", {"stamina": -40, "mental": -20, "money": 500},
           {"research": 35, "mastery": 15}),
        _a("参加机器人大赛", "调试你的战斗机器人。", {"stamina": -25, "mental": -10},
           {"competition": 18, "research": 8, "mastery": 8}),
        _a("智能硬件开发", "从电路设计到外壳 3D 打印。", {"stamina": -30, "mental": -10, "money": 300},
           {"research": 20, "competition": 8, "mastery": 10}),
    ),
    "medicine": (
        _a("背诵系统解剖学", "全身几百块骨头，几千个结构...", {"stamina": -30, "mental": -25}, {"mastery": 60}),
        _a("医院见习", "跟随导师巡视病房。", {"stamina": -25, "mental": -10},
           {"research": 12, "mental": 8, "mastery": 12}),
        _a("医学技能操作", "练习缝合、插管等临床技能。", {"stamina": -20, "mental": -5},
           {"competition": 15, "mastery": 18}),
        _a("生理实验", "观察兔子的心脏搏动。", {"stamina": -20, "mental": -10}, {"research": 15, "mastery": 22}),
        _a("义诊活动", "走进社区，服务大众。", {"stamina": -15, "mental": 15},
           {"mental": 25, "competition": 8, "mastery": 8}),
        _a("参加医学竞赛", "在全国大学生医学技术技能大赛中露脸。", {"stamina": -35, "mental": -20},
           {"competition": 35, "mastery": 25}),
    ),
    "law": (
        _a("模拟法庭", "披上法袍，在法庭上据理力争。", {"stamina": -20, "mental": -15},
           {"competition": 25, "mental": 15, "mastery": 30}),
        _a("法律文书写作", "严谨的措辞，缜密的逻辑。", {"stamina": -15, "mental": -10}, {"mastery": 40, "research": 12}),
        _a("律所实习", "体验法律人的真实生活。", {"stamina": -30, "mental": -10},
           {"research": 18, "english": 6, "mastery": 15}),
        _a("法考备战", "虽然还早，但基础要打牢。", {"stamina": -25, "mental": -20}, {"mastery": 50, "competition": 8}),
        _a("参加辩论赛", "唇枪舌剑，逻辑巅峰。", {"stamina": -15, "mental": -10},
           {"competition": 30, "mental": 12, "mastery": 18}),
        _a("旁听法院庭审", "现场感受法律的威严与复杂。", {"stamina": -10, "mental": 10}, {"research": 12, "mental": 22}),
    ),
    "art": (
        _a("深夜画图/建模", "灵感总是在午夜降临。", {"stamina": -35, "mental": -10}, {"research": 28, "mastery": 35}),
        _a("参加国际设计赛", "投稿 Red Dot 或 iF 设计奖。", {"stamina": -25, "mental": -20, "money": 500},
           {"competition": 38, "mastery": 22}),
        _a("参观艺术展", "寻找灵感，提升审美。", {"stamina": -10, "money": 100},
           {"mental": 45, "research": 8, "mastery": 12}),
        _a("作品集打磨", "每一个像素都要完美。", {"stamina": -20, "mental": -15}, {"research": 25, "mastery": 45}),
        _a("艺术采风", "去山川湖海寻找美。", {"stamina": -30, "mental": 20, "money": 800}, {"research": 28, "mental": 50}),
        _a("参加艺术工作坊", "与名家面对面交流技法。", {"stamina": -20, "mental": 5, "money": 200},
           {"research": 22, "mental": 35}),
    ),
    "biology": (
        _a("进实验室", "洗试管，看电泳结果。", {"stamina": -25, "mental": -10}, {"research": 22, "mastery": 30}),
        _a("读前沿论文", "紧跟 Nature/Science 动态。", {"stamina": -10, "mental": -10},
           {"research": 10, "english": 6, "mastery": 15}),
        _a("野外考察", "深入大自然采集标本。", {"stamina": -35, "mental": 5}, {"research": 28, "mastery": 18}),
        _a("培养皿接种", "小心翼翼地培养你的菌群。", {"stamina": -15, "mental": -5}, {"research": 18, "mastery": 25}),
        _a("参加生科竞赛", "展示你的实验设计才华。", {"stamina": -25, "mental": -15}, {"competition": 38, "mastery": 30}),
        _a("撰写综述论文", "对某一领域进行深度总结。", {"stamina": -40, "mental": -20}, {"research": 40, "mastery": 45}),
    ),
    "humanities": (
        _a("田野调查", "深入社会，收集一手资料。", {"stamina": -30, "mental": -5}, {"research": 25, "mastery": 35}),
        _a("学术沙龙", "和导师、同门谈笑风生。", {"stamina": -10, "mental": 10}, {"mastery": 22, "research": 8}),
        _a("撰写文学评论", "在核心期刊发表见解。", {"stamina": -20, "mental": -15}, {"research": 22, "mastery": 50}),
        _a("古籍修复", "穿越时空的对话。", {"stamina": -15, "mental": 10}, {"research": 28, "mastery": 35}),
        _a("翻译外文学术著作", "跨越语言的鸿沟。", {"stamina": -25, "mental": -15},
           {"english": 28, "research": 12, "mastery": 22}),
        _a("参加读书会", "思想的碰撞与交融。", {"stamina": -10, "mental": 15},
           {"mental": 40, "research": 12, "mastery": 18}),
    ),
    "general": (
        _a("投行实习", "穿上西装，体验精英生活。", {"stamina": -30, "mental": -15},
           {"competition": 22, "english": 12, "mastery": 15}),
        _a("考证", "CFA, CPA... 证书不嫌多。", {"stamina": -20, "mental": -20}, {"competition": 12, "mastery": 30}),
        _a("模拟炒股", "在模拟盘中练习 market sense。", {"stamina": -10, "mental": -10},
           {"research": 12, "competition": 8, "mastery": 10}),
        _a("数学建模", "把世界抽象成公式。", {"stamina": -35, "mental": -25},
           {"competition": 45, "research": 22, "mastery": 28}),
        _a("练习 Case Interview", "咨询公司的敲门砖。", {"stamina": -15, "mental": -10},
           {"competition": 25, "mental": 15, "mastery": 18}),
        _a("备战商赛", "策划、分析、汇报，全方位磨炼。", {"stamina": -25, "mental": -15},
           {"competition": 38, "research": 12, "mastery": 22}),
    ),
}
