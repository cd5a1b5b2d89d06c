from __future__ import annotations

"""Resume reward pools, one per accumulator, tiered by quality."""

from typing import Dict, Tuple

from .types import RandomRange, ResumePoolEntry, ResumeQuality


def _r(name: str, quality: ResumeQuality, low: int, high: int) -> ResumePoolEntry:
    return ResumePoolEntry(name=name, quality=quality, score_range=RandomRange(low, high))


RESEARCH_POOL: Tuple[ResumePoolEntry, ...] = (
    # Common
    _r("实验室日常打杂证明", "common", 5, 8),
    _r("文献综述作业优秀", "common", 5, 8),
    _r("学术讲座听课证", "common", 5, 8),
    _r("基础实验技能认证", "common", 5, 8),
    _r("参与问卷调查收集", "common", 5, 8),
    _r("实验室设备维护经历", "common", 5, 8),
    _r("学术会议志愿者", "common", 6, 9),
    _r("校内学术论坛参与", "common", 6, 9),
    _r("初级数据清洗实践", "common", 6, 9),
    _r("翻译学术短文", "common", 6, 9),
    _r("整理导师历史资料", "common", 6, 9),
    _r("参与实验室组会记录", "common", 7, 10),
    _r("完成科研诚信培训", "common", 7, 10),
    _r("学术海报初步设计", "common", 7, 10),
    _r("基础编程算法实现", "common", 7, 10),
    # Rare
    _r("校级大创项目立项", "rare", 12, 16),
    _r("实验室课题助理", "rare", 12, 16),
    _r("校内期刊发表短评", "rare", 12, 16),
    _r("实用新型专利授权", "rare", 13, 17),
    _r("参与编写教材章节", "rare", 13, 17),
    _r("核心期刊二作文章", "rare", 14, 18),
    _r("省级大创项目结项", "rare", 14, 18),
    _r("独立完成学术报告", "rare", 14, 18),
    _r("掌握高级分析软件", "rare", 15, 19),
    _r("参与省部级课题", "rare", 15, 19),
    _r("发明专利公开", "rare", 15, 19),
    _r("学术会议分论坛发言", "rare", 16, 20),
    _r("参与跨校联合项目", "rare", 16, 20),
    _r("优秀毕业论文预选", "rare", 16, 20),
    _r("实验室骨干成员", "rare", 17, 21),
    _r("获得校级科研奖学金", "rare", 17, 21),
    _r("发表CSCD核心论文", "rare", 18, 22),
    _r("独立开发科研小工具", "rare", 18, 22),
    _r("软件著作权登记", "rare", 18, 22),
    _r("参与国际合作项目", "rare", 19, 23),
    # Epic
    _r("国家级大创项目立项", "epic", 25, 32),
    _r("SCI/SSCI三区论文一作", "epic", 25, 32),
    _r("SCI/SSCI二区论文二作", "epic", 26, 33),
    _r("发明专利授权", "epic", 27, 34),
    _r("主持省级科研项目", "epic", 28, 35),
    _r("EI会议论文一作", "epic", 29, 36),
    _r("参与编写学术专著", "epic", 30, 37),
    _r("核心期刊封面文章", "epic", 31, 38),
    _r("国际学术会议受邀口头报告", "epic", 32, 39),
    _r("获得省级科研优秀成果奖", "epic", 33, 40),
    _r("实验室子课题负责人", "epic", 34, 41),
    _r("SCI/SSCI二区论文一作", "epic", 35, 42),
    _r("入选“拔尖人才”科研计划", "epic", 36, 43),
    _r("参与国家重点研发计划", "epic", 37, 44),
    _r("获得国家发明奖提名", "epic", 38, 45),
    # Legendary
    _r("SCI一区Top期刊一作", "legendary", 50, 65),
    _r("获得国家级大学生科研奖特等奖", "legendary", 52, 67),
    _r("在顶尖国际会议发表长文(一作)", "legendary", 55, 70),
    _r("作为核心成员参与国家级重大课题", "legendary", 58, 73),
    _r("科研成果转化产生重大经济效益", "legendary", 60, 75),
)

COMPETITION_POOL: Tuple[ResumePoolEntry, ...] = (
    # Common
    _r("校级比赛优秀奖", "common", 5, 8),
    _r("社团风采大赛参与", "common", 5, 8),
    _r("校内运动会参与证明", "common", 5, 8),
    _r("英语演讲比赛入围", "common", 5, 8),
    _r("辩论赛初赛获胜", "common", 5, 8),
    _r("校级征文比赛二等奖", "common", 6, 9),
    _r("摄影大赛入选作品", "common", 6, 9),
    _r("基础技能测试合格", "common", 6, 9),
    _r("校内歌手大赛参与", "common", 6, 9),
    _r("心理知识竞赛参与", "common", 6, 9),
    _r("校级社团活跃分子", "common", 7, 10),
    _r("参与公益支教活动", "common", 7, 10),
    _r("校内创新创业训练营结业", "common", 7, 10),
    _r("数学竞赛校内选拔赛通过", "common", 7, 10),
    _r("获得校级“三好学生”称号", "common", 7, 10),
    # Rare
    _r("校级一等奖学金", "rare", 12, 16),
    _r("省级数学建模竞赛三等奖", "rare", 12, 16),
    _r("校级演讲比赛冠军", "rare", 12, 16),
    _r("省级英语竞赛二等奖", "rare", 13, 17),
    _r("校级创业计划大赛一等奖", "rare", 13, 17),
    _r("省级编程大赛优胜奖", "rare", 14, 18),
    _r("市级马拉松完赛证书", "rare", 14, 18),
    _r("校级优秀学生干部", "rare", 14, 18),
    _r("省级辩论赛八强", "rare", 15, 19),
    _r("区域性设计大赛二等奖", "rare", 15, 19),
    _r("省级体育赛事前六名", "rare", 15, 19),
    _r("校级“十佳大学生”", "rare", 16, 20),
    _r("获得省级社会实践优秀团队", "rare", 16, 20),
    _r("省级书法/绘画比赛一等奖", "rare", 16, 20),
    _r("校级技术创新奖", "rare", 17, 21),
    _r("获得行业协会颁发的技能证书", "rare", 17, 21),
    _r("省级大学生艺术展演奖项", "rare", 18, 22),
    _r("市级优秀志愿者称号", "rare", 18, 22),
    _r("校级“挑战杯”选拔赛一等奖", "rare", 18, 22),
    _r("省级物理/生物/化学竞赛三等奖", "rare", 19, 23),
    # Epic
    _r("“挑战杯”省级一等奖", "epic", 25, 32),
    _r("“互联网+”大赛省级金奖", "epic", 25, 32),
    _r("全国数学建模竞赛二等奖", "epic", 26, 33),
    _r("美国数学建模竞赛M奖(一等奖)", "epic", 27, 34),
    _r("全国大学生英语竞赛特等奖", "epic", 28, 35),
    _r("ACM-ICPC区域赛银牌", "epic", 29, 36),
    _r("全国大学生电子设计竞赛二等奖", "epic", 30, 37),
    _r("国家奖学金", "epic", 31, 38),
    _r("省级优秀学生标兵", "epic", 32, 39),
    _r("全国大学生机器人大赛二等奖", "epic", 33, 40),
    _r("获得知名企业颁发的专项特等奖学金", "epic", 34, 41),
    _r("全国大学生演讲比赛前三名", "epic", 35, 42),
    _r("“创青春”全国大学生创业大赛银奖", "epic", 36, 43),
    _r("全国大学生辩论赛“最佳辩手”", "epic", 37, 44),
    _r("省级大学生年度人物", "epic", 38, 45),
    # Legendary
    _r("“挑战杯”全国特等奖", "legendary", 50, 65),
    _r("“互联网+”全国金奖", "legendary", 52, 67),
    _r("ACM-ICPC区域赛金牌/总决赛奖项", "legendary", 55, 70),
    _r("全国大学生数学建模竞赛一等奖", "legendary", 58, 73),
    _r("获得“中国大学生年度人物”称号", "legendary", 60, 75),
)

RESUME_POOLS: Dict[str, Tuple[ResumePoolEntry, ...]] = {
    "research": RESEARCH_POOL,
    "competition": COMPETITION_POOL,
}
