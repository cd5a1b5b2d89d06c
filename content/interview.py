from __future__ import annotations

from typing import Tuple

from .types import InterviewOption, InterviewQuestion

INTERVIEW_QUESTIONS: Tuple[InterviewQuestion, ...] = (
    InterviewQuestion(
        id="intro",
        text="请做一个简短的自我介绍。",
        options=(
            InterviewOption("（从容大方）介绍自己的学业成绩、科研经历及对贵校的向往。", 20,
                            "面试官微微点头，对你的综合素质留下了良好印象。"),
            InterviewOption("（略显紧张）重点强调自己的GPA和排名。", 15, "面试官认为你是一个扎实的学生，但缺乏一些亮点。"),
            InterviewOption("（过于冗长）事无巨细地讲述自己的成长经历。", 10, "面试官看了一下表，示意你抓重点。"),
        ),
    ),
    InterviewQuestion(
        id="research",
        text="谈谈你在本科期间参与最深入的一个科研项目，你承担了什么角色？",
        options=(
            InterviewOption("详细描述技术路线、解决的问题及自己的贡献，展现独立思考能力。", 25, "面试官对你的科研潜力表示认可。"),
            InterviewOption("简要介绍项目，强调获奖情况。", 18, "面试官更希望听到你的具体工作细节。"),
            InterviewOption("承认自己只是参与，对具体核心细节了解不深。", 8, "面试官皱了皱眉，对你的参与度表示怀疑。"),
        ),
    ),
    InterviewQuestion(
        id="professional",
        text="如果你被录取，你打算如何规划你的研究生生涯？",
        options=(
            InterviewOption("提出明确的研究方向，并表达了对某位导师课题组的强烈兴趣。", 20, "面试官认为你目标明确，匹配度高。"),
            InterviewOption("表示会努力学习，按时毕业。", 12, "回答比较中规中矩，缺乏吸引力。"),
            InterviewOption("还没想好，走一步看一步。", 5, "面试官对你的学术热情产生怀疑。"),
        ),
    ),
    InterviewQuestion(
        id="challenge",
        text="如果你在研究中遇到长期无法解决的困难，你会怎么办？",
        options=(
            InterviewOption("分析原因，查阅文献，并积极与导师、学长讨论寻求突破。", 20, "展现了良好的抗压能力和解决问题的素质。"),
            InterviewOption("自己死磕，相信勤能补拙。", 15, "精神可嘉，但可能效率不高。"),
            InterviewOption("可能会考虑换个简单的课题。", 5, "学术韧性似乎有待加强。"),
        ),
    ),
    InterviewQuestion(
        id="why_us",
        text="你同时申请了多所学校，如果都录取了你，你会怎么选？",
        options=(
            InterviewOption("表达对该校独特学术氛围和学科优势的极高认可，将其列为首选。", 15, "面试官感受到了你的诚意。"),
            InterviewOption("如实告知还在权衡中。", 10, "诚实但可能让对方觉得你不够坚定。"),
            InterviewOption("支支吾吾，没有明确态度。", 5, "面试官对你的意向度表示担忧。"),
        ),
    ),
)
