from __future__ import annotations

"""Majors (mapped onto eight major types) and starting backgrounds."""

from typing import Tuple

from .types import BackgroundSpec, MajorSpec

MAJORS: Tuple[MajorSpec, ...] = (
    MajorSpec("计算机科学与技术", "cs", "卷王聚集地。竞赛和实习是重头戏，GPA压力极大。", "竞赛收益+25%，科研收益+10%"),
    MajorSpec("人工智能", "cs", "时代的浪尖。数学要求极高，大模型和算法是核心。", "科研收益+20%，数学基础需求高"),
    MajorSpec("生物科学", "biology", "实验室搬砖人。需要大量的科研投入和实验成果，英语要求高。", "科研收益+35%，英语需求高"),
    MajorSpec("汉语言文学", "humanities", "人文气息浓厚。注重阅读积累和论文发表，社交属性强。", "GPA收益+20%，心态恢复快"),
    MajorSpec("历史学", "humanities", "板凳甘坐十年冷。需要极强的文献阅读能力和逻辑推理。", "科研收益+20%，心态稳健"),
    MajorSpec("金融学", "general", "精英主义。注重综合素质、英语和实习，对绩点要求苛刻。", "英语收益+20%，初始金钱+2000"),
    MajorSpec("会计学", "general", "精打细算。考证狂人的首选，就业范围极广。", "GPA收益+15%，初始金钱+1000"),
    MajorSpec("电子信息工程", "ee", "硬核工科。电路、信号、芯片，动手能力和数学基础缺一不可。", "竞赛收益+20%，体力消耗+10%"),
    MajorSpec("临床医学", "medicine", "劝人学医... 课业极其繁重，需要极强的记忆力和体力。", "GPA收益+15%，体力需求极大"),
    MajorSpec("法学", "law", "背诵之王。法律条文和案例分析，逻辑思维和表达能力是关键。", "英语收益+15%，心态抗压+15%"),
    MajorSpec("视觉传达设计", "art", "熬夜画图。作品集是核心，需要审美天赋和软件熟练度。", "科研收益(作品集)+25%，经常熬夜"),
    MajorSpec("数学与应用数学", "general", "一切科学的基础。抽象思维的极致，转保CS/金融的黄金跳板。", "GPA收益+25%，心态消耗大"),
)

BACKGROUNDS: Tuple[BackgroundSpec, ...] = (
    BackgroundSpec("小镇做题家", "擅长考试，掌握度提升效率极高，但英语基础薄弱。",
                   {"english": 20}, mastery_efficiency=1.4),
    BackgroundSpec("竞赛选手", "高中时期有竞赛经验，初始竞赛水平高，学习效率稳定。",
                   {"competition": 30}, mastery_efficiency=1.1),
    BackgroundSpec("中产家庭", "资源丰富，初始英语和金钱较多，但抗压能力稍弱。",
                   {"english": 60, "mental": 70}, money=5000, mastery_efficiency=1.0),
    BackgroundSpec("社恐学霸", "专注力极强，掌握度提升快，但心态容易受外界影响。",
                   {"research": 15, "mental": 60, "stamina": 110}, mastery_efficiency=1.3),
    BackgroundSpec("文艺青年", "感性细腻，心态恢复极快，但在硬核工科上效率较低。",
                   {"mental": 95, "stamina": 80}, mastery_efficiency=0.85),
    BackgroundSpec("体育生转行", "身体素质爆表，精力充沛，但掌握度提升效率较低。",
                   {"stamina": 150, "mental": 90}, mastery_efficiency=0.8),
    BackgroundSpec("偏科怪才", "在特定领域有极高天赋，掌握度提升效率波动大。",
                   {"research": 25, "competition": 10}, mastery_efficiency=1.15),
    BackgroundSpec("斜杠青年", "兴趣广泛，社交达人，初始资源多，但难以专注。",
                   {"english": 50, "mental": 85}, money=3000, mastery_efficiency=0.9),
    BackgroundSpec("二代移民", "英语接近母语水平，视野开阔，但学习效率一般。",
                   {"english": 90, "mental": 75}, mastery_efficiency=1.0),
    BackgroundSpec("退伍士兵", "意志如钢铁般坚强，学习踏实稳健，效率有保证。",
                   {"mental": 100, "stamina": 130}, mastery_efficiency=1.2),
    BackgroundSpec("自媒体达人", "擅长运营和表达，初始金钱多，但学习时间常被挤占。",
                   {"english": 45, "mental": 80}, money=8000, mastery_efficiency=0.75),
    BackgroundSpec("大龄学生", "目标极其明确，学习极其刻苦，效率非常高。",
                   {"stamina": 70, "mental": 95, "research": 10}, mastery_efficiency=1.35),
    BackgroundSpec("寒门贵子", "极其刻苦，掌握度提升效率极高，但初始资源匮乏。",
                   {"stamina": 120, "mental": 85}, money=200, mastery_efficiency=1.5),
    BackgroundSpec("六边形战士", "各方面发展均衡，掌握度提升效率稳定。",
                   {"research": 5, "competition": 5, "english": 50}, mastery_efficiency=1.2),
)
