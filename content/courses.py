from __future__ import annotations

"""Course catalog keyed by semester and major type.

Courses without a major restriction are open to everyone. The ``def*``
entries double as the fallback compulsory set for majors that have none in
a given semester.
"""

from typing import Optional, Tuple

from .types import CourseKind, CourseSpec


def _c(
    course_id: str,
    name: str,
    difficulty: int,
    credit: int,
    kind: CourseKind,
    semester: int,
    description: str,
    major: Optional[str] = None,
) -> CourseSpec:
    return CourseSpec(
        id=course_id,
        name=name,
        difficulty=difficulty,
        credit=credit,
        kind=kind,
        semester=semester,
        major_restriction=(major,) if major else None,
        description=description,
    )


# Id prefixes of courses that may stand in when a major has no compulsory
# course for a semester.
FALLBACK_PREFIXES: Tuple[str, ...] = ("gen", "def")

COURSES: Tuple[CourseSpec, ...] = (
    # General education, open to every major
    _c("gen1-1", "高等数学(上)", 5, 5, "general", 1, "理工科的基础，微积分的入门。"),
    _c("gen1-2", "大学物理(上)", 4, 4, "general", 1, "力学与热学基础。"),
    _c("gen1-3", "英语听说(一)", 2, 2, "general", 1, "提升基础英语交流能力。"),

    _c("gen2-1", "高等数学(下)", 5, 5, "general", 2, "多元微积分与无穷级数。"),
    _c("gen2-2", "大学物理(下)", 4, 4, "general", 2, "电磁学与光学。"),
    _c("gen2-3", "线性代数", 3, 3, "general", 2, "矩阵论与向量空间。"),

    _c("gen3-1", "概率论与数理统计", 4, 3, "general", 3, "掌握随机性的规律。"),
    _c("gen3-2", "思政课(中特)", 2, 3, "general", 3, "当代中国政治理论。"),
    _c("gen3-3", "英语听说(二)", 3, 2, "general", 3, "进阶英语交流。"),

    _c("gen4-1", "学术英语写作", 3, 2, "general", 4, "为发表论文打下基础。"),
    _c("gen4-2", "体育(三)", 2, 1, "general", 4, "保持强健体魄。"),
    _c("gen4-3", "马克思主义基本原理", 3, 3, "general", 4, "哲学思考的基石。"),

    _c("gen5-1", "毛概(上)", 2, 3, "general", 5, "中国化马克思主义。"),
    _c("gen5-2", "创新创业导论", 2, 2, "general", 5, "培养互联网思维与创业能力。"),

    _c("gen6-1", "毛概(下)", 2, 3, "general", 6, "新时代中国特色社会主义思想。"),
    _c("gen6-2", "职业生涯规划", 1, 1, "general", 6, "为毕业去向做最后准备。"),

    # cs
    _c("cs1-1", "程序设计基础", 3, 4, "compulsory", 1, "编程世界的起点。", major="cs"),
    _c("cs1-2", "离散数学", 4, 4, "compulsory", 1, "计算机科学的数学基石。", major="cs"),
    _c("cs1-e1", "计算机导论", 1, 2, "elective", 1, "全景了解计算机科学。", major="cs"),

    _c("cs2-1", "数据结构", 4, 4, "compulsory", 2, "算法的基石。", major="cs"),
    _c("cs2-2", "面向对象程序设计", 3, 3, "compulsory", 2, "掌握C++/Java核心。", major="cs"),
    _c("cs2-e1", "Linux环境编程", 3, 2, "elective", 2, "玩转终端与系统调用。", major="cs"),

    _c("cs3-1", "计算机组成原理", 5, 4, "compulsory", 3, "拆解计算机内部构造。", major="cs"),
    _c("cs3-2", "算法分析与设计", 5, 4, "compulsory", 3, "挑战思维极限。", major="cs"),
    _c("cs3-e1", "前端开发基础", 2, 2, "elective", 3, "构建美观的Web界面。", major="cs"),

    _c("cs4-1", "操作系统", 5, 4, "compulsory", 4, "理解底层逻辑与资源管理。", major="cs"),
    _c("cs4-2", "数据库系统", 3, 3, "compulsory", 4, "数据存储的艺术。", major="cs"),
    _c("cs4-e1", "机器学习导论", 4, 3, "elective", 4, "让机器学会思考。", major="cs"),

    _c("cs5-1", "计算机网络", 3, 3, "compulsory", 5, "连接世界的协议。", major="cs"),
    _c("cs5-2", "编译原理", 5, 4, "compulsory", 5, "从代码到机器码。", major="cs"),
    _c("cs5-e1", "深度学习", 5, 3, "elective", 5, "神经网络与AI前沿。", major="cs"),

    _c("cs6-1", "软件工程", 3, 3, "compulsory", 6, "工程化开发与团队协作。", major="cs"),
    _c("cs6-e1", "自然语言处理", 5, 3, "elective", 6, "探索语言模型的奥秘。", major="cs"),
    _c("cs6-e2", "区块链技术", 4, 2, "elective", 6, "去中心化系统设计。", major="cs"),

    # biology
    _c("bio1-1", "普通生物学", 3, 4, "compulsory", 1, "生命科学的初探。", major="biology"),
    _c("bio1-2", "基础化学", 4, 4, "compulsory", 1, "生物学的化学基础。", major="biology"),
    _c("bio1-e1", "野外实习导论", 1, 2, "elective", 1, "走进自然的实验室。", major="biology"),

    _c("bio2-1", "生物化学(一)", 5, 4, "compulsory", 2, "分子层面的生命逻辑。", major="biology"),
    _c("bio2-2", "有机化学", 4, 4, "compulsory", 2, "碳基生命的奥秘。", major="biology"),
    _c("bio2-e1", "生物摄影", 1, 2, "elective", 2, "记录生命之美。", major="biology"),

    _c("bio3-1", "细胞生物学", 4, 4, "compulsory", 3, "探秘生命的基本单位。", major="biology"),
    _c("bio3-2", "遗传学", 5, 4, "compulsory", 3, "破译生命的遗传密码。", major="biology"),
    _c("bio3-e1", "生物统计学", 3, 2, "elective", 3, "实验数据的科学分析。", major="biology"),

    _c("bio4-1", "分子生物学", 5, 4, "compulsory", 4, "从DNA到蛋白质。", major="biology"),
    _c("bio4-2", "微生物学", 3, 3, "compulsory", 4, "微观世界的生命力。", major="biology"),
    _c("bio4-e1", "生物信息学导论", 4, 3, "elective", 4, "用算法解读基因。", major="biology"),

    _c("bio5-1", "生理学", 4, 4, "compulsory", 5, "人体与生命的运作机制。", major="biology"),
    _c("bio5-2", "发育生物学", 4, 3, "compulsory", 5, "从受精卵到完整个体。", major="biology"),
    _c("bio5-e1", "基因组学", 5, 3, "elective", 5, "海量数据的生命奥秘。", major="biology"),

    _c("bio6-1", "免疫学", 5, 3, "compulsory", 6, "生命的防御盾牌。", major="biology"),
    _c("bio6-e1", "合成生物学", 5, 3, "elective", 6, "重新设计生命。", major="biology"),

    # humanities
    _c("hum1-1", "现代汉语", 3, 4, "compulsory", 1, "语言文字的规范与运用。", major="humanities"),
    _c("hum1-2", "文学概论", 4, 3, "compulsory", 1, "构建文学审美的理论框架。", major="humanities"),
    _c("hum1-e1", "中国古典名著导读", 1, 2, "elective", 1, "重读经典，感悟智慧。", major="humanities"),

    _c("hum2-1", "古代汉语(一)", 4, 4, "compulsory", 2, "破译古籍的必备工具。", major="humanities"),
    _c("hum2-2", "中国古代文学史(一)", 3, 4, "compulsory", 2, "纵览先秦两汉魏晋文学。", major="humanities"),
    _c("hum2-e1", "创意写作", 2, 2, "elective", 2, "激发文字的无限可能。", major="humanities"),

    _c("hum3-1", "中国古代文学史(二)", 3, 4, "compulsory", 3, "唐宋文学的辉煌篇章。", major="humanities"),
    _c("hum3-2", "古代汉语(二)", 4, 4, "compulsory", 3, "深度解析古籍文献。", major="humanities"),
    _c("hum3-e1", "民俗学导论", 2, 2, "elective", 3, "探索民间文化精髓。", major="humanities"),

    _c("hum4-1", "中国现代文学史", 3, 4, "compulsory", 4, "五四以来的文学变革。", major="humanities"),
    _c("hum4-2", "外国文学史(一)", 4, 3, "compulsory", 4, "西方古典与中世纪文学。", major="humanities"),
    _c("hum4-e1", "美学原理", 4, 2, "elective", 4, "美的本质与艺术哲学。", major="humanities"),

    _c("hum5-1", "中国当代文学史", 2, 4, "compulsory", 5, "当代文学的发展脉络。", major="humanities"),
    _c("hum5-2", "外国文学史(二)", 4, 3, "compulsory", 5, "文艺复兴至近现代西方文学。", major="humanities"),
    _c("hum5-e1", "文学批评方法论", 5, 2, "elective", 5, "掌握解析文本的钥匙。", major="humanities"),

    _c("hum6-1", "语言学纲要", 5, 3, "compulsory", 6, "语言的科学理论。", major="humanities"),
    _c("hum6-e1", "非虚构写作", 3, 2, "elective", 6, "记录真实的力量。", major="humanities"),

    # ee
    _c("ee1-1", "电路原理", 4, 4, "compulsory", 1, "电流与电压的舞步。", major="ee"),
    _c("ee1-e1", "电子系统导论", 2, 2, "elective", 1, "初探硬件世界。", major="ee"),

    _c("ee2-1", "模拟电子技术", 5, 4, "compulsory", 2, "晶体管的放大艺术。", major="ee"),
    _c("ee2-2", "信号与系统", 4, 4, "compulsory", 2, "频域与时域的交织。", major="ee"),
    _c("ee2-e1", "嵌入式基础", 3, 2, "elective", 2, "从单片机开始。", major="ee"),

    _c("ee3-1", "数字电子技术", 4, 4, "compulsory", 3, "逻辑门与时序电路。", major="ee"),
    _c("ee3-2", "电磁场与电磁波", 5, 4, "compulsory", 3, "麦克斯韦方程组的魅力。", major="ee"),
    _c("ee3-e1", "Python科学计算", 2, 2, "elective", 3, "硬件工程师的编程利器。", major="ee"),

    _c("ee4-1", "通信原理", 5, 4, "compulsory", 4, "信息的调制与传输。", major="ee"),
    _c("ee4-2", "微机原理", 4, 3, "compulsory", 4, "底层硬件的执行逻辑。", major="ee"),
    _c("ee4-e1", "FPGA开发实践", 4, 2, "elective", 4, "硬件描述语言Verilog应用。", major="ee"),

    _c("ee5-1", "数字信号处理", 5, 4, "compulsory", 5, "FFT与滤波器设计。", major="ee"),
    _c("ee5-2", "微波技术", 5, 3, "compulsory", 5, "高频电路的特殊规律。", major="ee"),
    _c("ee5-e1", "射频集成电路", 5, 3, "elective", 5, "芯片设计的顶峰。", major="ee"),

    _c("ee6-1", "自动控制理论", 4, 3, "compulsory", 6, "系统的稳定性与控制。", major="ee"),
    _c("ee6-e1", "物联网技术", 3, 2, "elective", 6, "万物互联的未来。", major="ee"),

    # medicine
    _c("med1-1", "人体解剖学", 5, 6, "compulsory", 1, "医学生的入门礼，记忆力大考验。", major="medicine"),
    _c("med1-2", "医用化学", 3, 3, "compulsory", 1, "医学的化学基础。", major="medicine"),
    _c("med1-e1", "医学导论", 1, 2, "elective", 1, "了解医生的职业使命。", major="medicine"),

    _c("med2-1", "组织胚胎学", 4, 4, "compulsory", 2, "微观结构与发育奥秘。", major="medicine"),
    _c("med2-2", "生理学(医)", 5, 5, "compulsory", 2, "生命机能的运作原理。", major="medicine"),
    _c("med2-e1", "医学心理学", 2, 2, "elective", 2, "医患沟通的艺术。", major="medicine"),

    _c("med3-1", "生物化学(医)", 5, 4, "compulsory", 3, "代谢与分子基础。", major="medicine"),
    _c("med3-2", "医学免疫学", 4, 3, "compulsory", 3, "身体的防御系统。", major="medicine"),
    _c("med3-e1", "医学寄生虫学", 3, 2, "elective", 3, "各种虫子的生态与致病。", major="medicine"),

    _c("med4-1", "病理学", 5, 5, "compulsory", 4, "疾病的本质与形态。", major="medicine"),
    _c("med4-2", "药理学", 5, 5, "compulsory", 4, "药物的作用与机理。", major="medicine"),
    _c("med4-e1", "医学遗传学", 3, 2, "elective", 4, "基因与遗传病。", major="medicine"),

    _c("med5-1", "诊断学", 5, 6, "compulsory", 5, "临床医生的基本功。", major="medicine"),
    _c("med5-2", "内科学(一)", 5, 4, "compulsory", 5, "内科基础与常见病。", major="medicine"),
    _c("med5-e1", "影像诊断学", 4, 3, "elective", 5, "看懂CT与MRI。", major="medicine"),

    _c("med6-1", "外科学(一)", 5, 4, "compulsory", 6, "外科手术基础与理论。", major="medicine"),
    _c("med6-e1", "急诊医学", 4, 2, "elective", 6, "抢救室里的生死时速。", major="medicine"),

    # law
    _c("law1-1", "法理学", 4, 4, "compulsory", 1, "法律的灵魂与基础。", major="law"),
    _c("law1-2", "宪法学", 3, 3, "compulsory", 1, "国家的根本大法。", major="law"),
    _c("law1-e1", "法学导论", 1, 2, "elective", 1, "法律职业全景扫描。", major="law"),

    _c("law2-1", "民法总论", 5, 4, "compulsory", 2, "私法之基，博大精深。", major="law"),
    _c("law2-2", "刑法总论", 5, 4, "compulsory", 2, "犯罪与刑罚的理论。", major="law"),
    _c("law2-e1", "法律逻辑学", 3, 2, "elective", 2, "法律人的思维训练。", major="law"),

    _c("law3-1", "民法分论(债权)", 4, 4, "compulsory", 3, "契约与侵权的法则。", major="law"),
    _c("law3-2", "刑法分论", 4, 4, "compulsory", 3, "各类犯罪的构成。", major="law"),
    _c("law3-e1", "法律职业道德", 2, 2, "elective", 3, "守住法律人的底线。", major="law"),

    _c("law4-1", "民事诉讼法", 4, 4, "compulsory", 4, "程序正义的体现。", major="law"),
    _c("law4-2", "行政法与行政诉讼法", 4, 4, "compulsory", 4, "控权法之核心。", major="law"),
    _c("law4-e1", "婚姻家庭法", 2, 2, "elective", 4, "家事纠纷的法律调节。", major="law"),

    _c("law5-1", "刑事诉讼法", 4, 4, "compulsory", 5, "人权保障的最后屏障。", major="law"),
    _c("law5-2", "商法学", 4, 4, "compulsory", 5, "公司、破产与票据。", major="law"),
    _c("law5-e1", "知识产权法", 4, 3, "elective", 5, "保护创新的法律。", major="law"),

    _c("law6-1", "国际公法", 4, 3, "compulsory", 6, "国家间的法律准则。", major="law"),
    _c("law6-e1", "法律诊所", 3, 3, "elective", 6, "真实案例的模拟与实操。", major="law"),

    # art
    _c("art1-1", "平面构成", 3, 4, "compulsory", 1, "点线面的艺术。", major="art"),
    _c("art1-2", "色彩基础", 3, 4, "compulsory", 1, "掌握色彩的情感与运用。", major="art"),
    _c("art1-e1", "设计概论", 1, 2, "elective", 1, "设计的历史与未来。", major="art"),

    _c("art2-1", "字体设计", 4, 3, "compulsory", 2, "文字的造型与排版。", major="art"),
    _c("art2-2", "图形设计", 4, 3, "compulsory", 2, "视觉符号的创作。", major="art"),
    _c("art2-e1", "摄影基础", 2, 2, "elective", 2, "记录光影的瞬间。", major="art"),

    _c("art3-1", "标志设计", 4, 4, "compulsory", 3, "品牌核心的视觉呈现。", major="art"),
    _c("art3-2", "编排设计", 4, 3, "compulsory", 3, "信息的空间组织艺术。", major="art"),
    _c("art3-e1", "UI设计基础", 3, 2, "elective", 3, "移动端界面初步。", major="art"),

    _c("art4-1", "包装设计", 5, 4, "compulsory", 4, "三维空间的视觉传达。", major="art"),
    _c("art4-2", "插画设计", 3, 3, "compulsory", 4, "故事的视觉表达。", major="art"),
    _c("art4-e1", "动态图形(MG)", 5, 2, "elective", 4, "让设计动起来。", major="art"),

    _c("art5-1", "品牌形象设计(VI)", 5, 5, "compulsory", 5, "成套系的视觉识别系统。", major="art"),
    _c("art5-2", "广告设计", 4, 3, "compulsory", 5, "创意的商业化表达。", major="art"),
    _c("art5-e1", "网页设计", 4, 2, "elective", 5, "构建数字化体验。", major="art"),

    _c("art6-1", "综合设计实践", 5, 4, "compulsory", 6, "大型真实项目的模拟实操。", major="art"),
    _c("art6-e1", "策展导论", 3, 2, "elective", 6, "如何展示艺术作品。", major="art"),

    # general (math / finance / accounting)
    _c("mth1-1", "高等代数(一)", 5, 5, "compulsory", 1, "数学系的立身之本。", major="general"),
    _c("mth1-2", "数学分析(一)", 5, 6, "compulsory", 1, "极限与连续的严谨定义。", major="general"),
    _c("mth1-e1", "初等数论", 3, 2, "elective", 1, "整数的美妙性质。", major="general"),

    _c("mth2-1", "数学分析(二)", 5, 6, "compulsory", 2, "级数与多元微积分。", major="general"),
    _c("mth2-2", "微观经济学", 3, 4, "compulsory", 2, "经济学的微观基石。", major="general"),
    _c("mth2-e1", "博弈论", 4, 2, "elective", 2, "策略博弈的艺术。", major="general"),

    _c("mth3-1", "数学分析(三)", 5, 4, "compulsory", 3, "多元积分与场论。", major="general"),
    _c("mth3-2", "宏观经济学", 3, 4, "compulsory", 3, "国家层面的经济运作。", major="general"),
    _c("mth3-e1", "Python金融计算", 3, 2, "elective", 3, "金融工程的入门利器。", major="general"),

    _c("mth4-1", "复变函数", 5, 4, "compulsory", 4, "解析函数的奥秘。", major="general"),
    _c("mth4-2", "金融学原理", 3, 3, "compulsory", 4, "资本市场的逻辑。", major="general"),
    _c("mth4-e1", "计量经济学", 5, 3, "elective", 4, "经济数据的统计分析。", major="general"),

    _c("mth5-1", "泛函分析", 5, 4, "compulsory", 5, "数学的最高峰之一。", major="general"),
    _c("mth5-2", "财务报表分析", 4, 3, "compulsory", 5, "透视企业的财务状况。", major="general"),
    _c("mth5-e1", "投资学", 4, 3, "elective", 5, "资产定价与风险管理。", major="general"),

    _c("mth6-1", "运筹学", 4, 4, "compulsory", 6, "优化决策的科学。", major="general"),
    _c("mth6-e1", "行为金融学", 3, 2, "elective", 6, "非理性的市场行为。", major="general"),

    # Unrestricted fallback courses
    _c("def1-1", "专业导论", 2, 3, "compulsory", 1, "了解你所选专业的未来。"),
    _c("def1-2", "基础实验", 3, 3, "compulsory", 1, "动手实践，掌握基础。"),
    _c("def1-e1", "学术交流技巧", 2, 2, "elective", 1, "如何优雅地展示科研成果。"),
)
