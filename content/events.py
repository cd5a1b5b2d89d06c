from __future__ import annotations

"""Random event deck.

Every option is a data-only effect; the scholarship is the one conditional
payout (gpa above 3.8 earns the national scholarship).
"""

from typing import Mapping, Tuple

from ledger.effects import ConditionalEffect, EffectSpec

from .types import EventOption, GameEvent


def _opt(text: str, stats: Mapping[str, float], money: int = 0, *, message: str) -> EventOption:
    return EventOption(text=text, effect=EffectSpec(stats=dict(stats), money=money, message=message))


SCHOLARSHIP = ConditionalEffect(
    stat="gpa",
    threshold=3.8,
    then=EffectSpec(stats={"mental": 10}, money=2000, message="恭喜！你拿到了国奖，零钱+2000！"),
    otherwise=EffectSpec(stats={"mental": 10}, money=1000, message="你拿到了二等奖学金，零钱+1000。"),
)

EVENTS: Tuple[GameEvent, ...] = (
    GameEvent(
        title="学长学姐的内部消息",
        description="一位相熟的学姐悄悄告诉你，某校的预推免面试形式发生了变化。",
        options=(
            _opt("虚心请教细节", {"mental": 10}, message="有了这份情报，你对即将到来的面试更有底气了。"),
        ),
    ),
    GameEvent(
        title="同窗的竞争与合作",
        description="你的死党在期末复习时遇到了难题，想请你帮他讲解。",
        options=(
            _opt("耐心讲解，共同进步", {"mental": 15, "stamina": -10}, message="赠人玫瑰，手有余香。你们的关系更近了一步。"),
            _opt("婉言拒绝，专注自己", {"mental": -5, "research": 5}, message="你争取到了更多的复习时间，但气氛变得有些微妙。"),
        ),
    ),
    GameEvent(
        title="校友返校分享会",
        description="校友分享会上，你遇到了一位在目标院校读研的师兄。",
        options=(
            _opt("主动交换联系方式", {"research": 5}, message="师兄非常热情，还答应帮你引荐他现在的导师！"),
        ),
    ),
    GameEvent(
        title="电脑故障",
        description="你的笔记本电脑屏幕突然黑了，里面还有没保存的代码！",
        options=(
            _opt("花钱找人加急维修", {"mental": -5}, money=-500, message="虽然修好了，但你钱包缩水了500元，心情也有点郁闷。"),
            _opt("自己查教程折腾半天", {"research": -2, "stamina": -20}, message="折腾了一整晚终于修好了，但你累瘫了，还丢了一点进度。"),
        ),
    ),
    GameEvent(
        title="奖学金评选",
        description="系里开始评选年度奖学金，你的成绩似乎很有竞争力。",
        options=(
            EventOption("申请并准备材料", SCHOLARSHIP),
        ),
    ),
    GameEvent(
        title="推研面试",
        description="你参加了一场模拟面试，面试官问了一个你完全没听过的概念。",
        options=(
            _opt("诚实回答：我还没学习到这部分", {"english": 2, "mental": -5}, message="面试官赞赏你的诚实，并给你指出了学习方向。"),
            _opt("强行解释：我认为这个概念是...", {"mental": -15}, message="你解释得一塌糊涂，面试官皱起了眉头。心态大崩。"),
        ),
    ),
    GameEvent(
        title="恋爱危机",
        description="你的另一半抱怨你整天待在实验室，不陪他/她。",
        options=(
            _opt("陪对方出去玩一天", {"mental": 25, "stamina": -15}, message="感情升温，心情大好。这比拿个高分更让你开心。"),
            _opt("冷战：保研重要还是你重要？", {"mental": -20, "research": 5}, message="你赢得了时间，但失去了心情。效率低下。"),
        ),
    ),
    GameEvent(
        title="推研名额变动",
        description="学院突然调整推免名额比例，竞争变得更加激烈。",
        options=(
            _opt("加倍努力，卷死他们", {"mental": -15, "research": 10, "stamina": -30}, message="你开启了狂暴模式，科研背景大幅提升，但身心俱疲。"),
            _opt("平常心对待，随缘吧", {"mental": 10}, message="心态稳住了，毕竟尽力就好。"),
        ),
    ),
    GameEvent(
        title="突击检查",
        description="辅导员突然查寝，发现你在寝室打游戏。",
        options=(
            _opt("认错并保证以后不打了", {"mental": -5}, message="辅导员教育了你一顿，心态略微受挫。"),
            _opt("据理力争：这是我的自由时间", {"mental": -15}, message="辅导员很生气，后果很严重。心态大崩。"),
        ),
    ),
    GameEvent(
        title="科研灵感",
        description="你在洗澡时突然想到了一个绝妙的算法方案。",
        options=(
            _opt("赶紧记录下来并写成代码", {"research": 10, "stamina": -10}, message="科研进度大涨！但你累得够呛。"),
            _opt("等明天再说", {}, message="第二天你就忘了。错失良机。"),
        ),
    ),
    GameEvent(
        title="选修课点名",
        description="你正打算翘掉那门无聊的思政课，结果群里说点名了。",
        options=(
            _opt("狂奔去教室", {"mental": 5, "stamina": -15}, message="赶上了点名，顺便复习了下功课。"),
            _opt("继续睡觉", {"mental": -10, "stamina": 20}, message="旷课被记名，辅导员在群里点名批评。但睡得很香。"),
        ),
    ),
    GameEvent(
        title="夏令营入营",
        description="你收到了梦寐以求的夏令营入营通知，但面试时间和你最重要的期末考试冲突了。",
        options=(
            _opt("去参加夏令营面试（风险大）", {"mental": -10, "research": 30}, message="面试表现优异，拿到了优秀营员！但这学期的课程你只能靠自学补回来了。"),
            _opt("稳妥起见，参加期末考试", {"mental": 10, "research": 5}, message="你保住了这学期的成绩，但错过了这次宝贵的保研机会。"),
        ),
    ),
    GameEvent(
        title="学长建议",
        description="一位保研成功的学长告诉你，英语六级分数非常重要。",
        options=(
            _opt("报个英语冲刺班", {"english": 15, "stamina": -10}, message="英语水平大幅提升，保研竞争力加强。"),
            _opt("自己佛系复习", {"english": 2, "mental": 5}, message="心态稳如老狗，但英语提升寥寥。"),
        ),
    ),
    GameEvent(
        title="编译器报错",
        description="你的项目代码在演示前突然报了一个诡异的段错误（Segmentation Fault）。",
        major_restriction=("cs",),
        options=(
            _opt("通宵Debug", {"research": 10, "stamina": -30}, message="你找到了那个该死的指针错误！科研水平提升了。"),
            _opt("求助大牛学长", {"mental": 5}, money=-200, message="学长三分钟帮你修好了，但你付出了两顿外卖的代价。"),
        ),
    ),
    GameEvent(
        title="显微镜下的发现",
        description="在观察样本时，你发现了一个不符合预期的实验现象。",
        major_restriction=("biology",),
        options=(
            _opt("深入探究原因", {"mental": -10, "research": 15}, message="这可能是一个潜在的新发现！科研产出大增。"),
            _opt("当做实验误差忽略", {"mental": 5}, message="实验继续进行，你节省了时间但错失了可能的突破。"),
        ),
    ),
    GameEvent(
        title="古籍修复机会",
        description="系里提供了一个参与国家级古籍修复项目的名额。",
        major_restriction=("humanities",),
        options=(
            _opt("积极申请加入", {"research": 20, "stamina": -15}, message="你在修补书页的过程中感受到了历史的厚重。背景大增！"),
            _opt("太累了，不想去", {"mental": 10}, message="你选择躺平，享受了一个悠闲的周末。"),
        ),
    ),
    GameEvent(
        title="投行暑期实习面试",
        description="你获得了一个顶级投行的暑期实习面试机会，但面试官非常严厉。",
        major_restriction=("general",),
        options=(
            _opt("展现专业深度：深入讨论估值模型", {"competition": 15, "mental": -10}, message="面试官对你的专业知识印象深刻！你拿到了实习 Offer。"),
            _opt("展现综合素质：谈论你的领导力经验", {"competition": 5, "mental": 5}, message="面试氛围很愉快，面试官认为你很有潜力。"),
        ),
    ),
    GameEvent(
        title="大厂系统崩溃",
        description="你正在实习，突然公司核心服务挂了，导师叫你一起排查。",
        major_restriction=("cs",),
        options=(
            _opt("冷静排查日志，定位 Bug", {"research": 12, "stamina": -15}, message="你立了大功！导师在你的实习评语里写下了极高的评价。"),
        ),
    ),
    GameEvent(
        title="实验室经费缩减",
        description="由于经费问题，你的实验项目可能要暂停。",
        major_restriction=("biology",),
        options=(
            _opt("熬夜抢在停工前完成关键数据", {"research": 15, "stamina": -25}, message="你在最后一刻拿到了数据！虽然累得半死，但保住了进度。"),
            _opt("撰写申请书，争取额外经费", {"mental": -10, "research": 5}, message="你学会了如何写申请书，虽然慢了点，但项目得以延续。"),
        ),
    ),
    GameEvent(
        title="芯片流片成功",
        description="你参与设计的芯片流片回来了，测试结果非常理想！",
        major_restriction=("ee",),
        options=(
            _opt("申请专利", {"mental": 10, "research": 20}, message="你拥有了自己的第一项专利，这在保研面试中极具分量。"),
        ),
    ),
    GameEvent(
        title="规培名额争夺",
        description="顶尖附属医院的规培名额非常有限，你需要证明自己的临床能力。",
        major_restriction=("medicine",),
        options=(
            _opt("主动请缨参加高难度手术助理", {"competition": 15, "stamina": -30}, message="虽然手术台下你腿都站软了，但你的表现得到了大外科主任的认可。"),
        ),
    ),
    GameEvent(
        title="法律援助中心志愿者",
        description="学校法律援助中心招募志愿者，处理真实的法律咨询。",
        major_restriction=("law",),
        options=(
            _opt("积极参与咨询服务", {"mental": 10, "research": 5}, message="在帮助弱势群体的过程中，你对法律的尊严有了更深的理解。"),
        ),
    ),
    GameEvent(
        title="深夜灵感迸发",
        description="你在洗手间镜子上画出了那个困扰你半个月的视觉设计方案。",
        major_restriction=("art",),
        options=(
            _opt("立刻回工作室开机开工", {"research": 25, "stamina": -20}, message="这套设计方案最终为你赢得了省级金奖。"),
        ),
    ),
    GameEvent(
        title="学术会议旁听",
        description="本市有一场顶尖的国际学术会议，但票价昂贵。",
        options=(
            _opt("自费买票去开眼界", {"mental": 5, "research": 10}, money=-800, message="你在茶歇时间鼓起勇气向领域内的大佬请教了一个问题，大佬对你印象很深。"),
            _opt("在 B 站看直播录像", {"research": 2}, message="白嫖真香，但也错失了线下 Networking 的机会。"),
        ),
    ),
    GameEvent(
        title="深夜外卖中毒",
        description="为了赶 DDl，你点了一份来路不明的小烧烤，结果凌晨上吐下泻。",
        options=(
            _opt("硬扛着继续做", {"mental": -10, "stamina": -40}, message="DDl 赶上了，但你整个人虚脱了，在医院挂了三天水。"),
            _opt("去校医院，身体第一", {"research": -5, "stamina": -15}, message="虽然进度落后了，但你保住了小命。健康才是保研的本钱。"),
        ),
    ),
    GameEvent(
        title="大语言模型热潮",
        description="LLM 火遍全球，你的导师问你是否愿意转向 AI 方向。",
        major_restriction=("cs",),
        options=(
            _opt("紧跟潮流，转向 AI", {"mental": -10, "research": 15}, message="虽然要从头学很多数学，但你站在了风口上。"),
            _opt("坚守底层，钻研架构", {"mental": 5, "research": 20}, message="底层技术永远是基石，你的坚持得到了认可，科研深度大幅增加。"),
        ),
    ),
    GameEvent(
        title="实验室炸了（物理）",
        description="由于学弟的操作失误，实验室的一个仪器轻微爆炸了。",
        major_restriction=("biology", "ee"),
        options=(
            _opt("冷静处理并灭火", {"mental": 10, "stamina": -15}, message="你的临危不乱让导师非常欣赏，虽然累但值得。"),
            _opt("吓得赶紧跑路", {"mental": -20}, message="幸好人没事，但实验室的氛围变得有些尴尬。"),
        ),
    ),
    GameEvent(
        title="深夜食堂的哲学讨论",
        description="深夜在大排档，你和几个跨专业的哥们聊起了人生。",
        options=(
            _opt("痛快畅谈", {"mental": 20, "stamina": -10}, message="思想的火花在酒杯间碰撞，你感觉自己又充满了动力。"),
        ),
    ),
    GameEvent(
        title="名企开放日",
        description="一所知名企业邀请你去总部参观，但那天正好是你的生日。",
        options=(
            _opt("去参观，职业规划重要", {"competition": 5, "research": 5, "stamina": -10}, message="虽然没过成生日，但你拿到了 HR 的直通卡联系方式。"),
            _opt("拒绝邀请，给自己放假", {"mental": 30, "stamina": 20}, message="这一天你过得非常开心，彻底放松了身心。"),
        ),
    ),
    GameEvent(
        title="考公 vs 保研",
        description="家里人一直劝你放弃保研去准备考公，理由是稳当。",
        options=(
            _opt("坚持自己的科研梦", {"mental": -15, "research": 10}, message="顶着压力前进，你的信念更加坚定了。"),
            _opt("两手都要抓", {"competition": 5, "mental": -25, "research": 5, "stamina": -35}, message="太累了，你几乎没有睡眠时间，但你的履历变得异常丰富。"),
        ),
    ),
    GameEvent(
        title="跨学科项目邀请",
        description="一个设计专业的学妹邀请 you 加入她们的跨学科项目组，开发一个艺术 AI。",
        major_restriction=("cs", "art"),
        options=(
            _opt("欣然接受，跨界融合", {"mental": 10, "research": 15}, message="跨学科的视角让你对专业有了全新的理解，还收获了一段友谊。"),
        ),
    ),
    GameEvent(
        title="开源项目贡献",
        description="你发现一个知名开源项目有个明显的 Bug，打算提交一个 PR。",
        major_restriction=("cs",),
        options=(
            _opt("仔细分析，提交修复", {"mental": 5, "research": 12}, message="你的 PR 被合并了！简历上的开源贡献亮眼了不少。"),
            _opt("太复杂了，放弃", {}, message="你决定还是先专注自己的项目。"),
        ),
    ),
    GameEvent(
        title="社团招新季",
        description="作为社团骨干，你需要负责招新宣传工作，这非常占用时间。",
        options=(
            _opt("全力投入，锻炼能力", {"competition": 5, "mental": 15, "stamina": -20}, message="招新很成功，你提升了组织能力，但也感到精疲力竭。"),
            _opt("划水应付，专注学习", {"mental": -5, "stamina": 5}, message="你保住了体力，但社团同伴对你的评价变差了。"),
        ),
    ),
    GameEvent(
        title="食堂偶遇导师",
        description="在食堂排队时，你刚好排在导师后面。",
        options=(
            _opt("上前打招呼并聊聊进度", {"mental": 5, "research": 8}, message="导师对你的主动和进度非常满意，给了你一些关键建议。"),
            _opt("假装没看见，换个窗口", {"stamina": -5}, message="你避开了尴尬，但错失了一个非正式交流的机会。"),
        ),
    ),
    GameEvent(
        title="期刊审稿邀请",
        description="你之前发表的论文引起了关注，某二区期刊邀请你担任审稿人。",
        major_restriction=("cs", "biology", "ee"),
        options=(
            _opt("认真审稿，提升眼界", {"research": 15, "stamina": -15}, message="通过审视别人的工作，你对科研严谨性有了更深的理解。"),
        ),
    ),
    GameEvent(
        title="校内黑客松",
        description="学校举办 24 小时黑客松比赛，主题是‘科技改变校园’。",
        options=(
            _opt("组队参加，通宵奋战", {"competition": 20, "mental": 10, "stamina": -35}, message="你们的作品获得了二等奖！虽然累坏了，但成就感满满。"),
            _opt("作为观众去看看", {"mental": 5}, message="你看到很多有趣的想法，拓宽了思路。"),
        ),
    ),
    GameEvent(
        title="英语演讲比赛",
        description="‘外研社杯’英语演讲比赛开始报名了，这对提升英语背景很有利。",
        options=(
            _opt("报名参加并认真准备", {"english": 15, "mental": -10, "stamina": -10}, message="你进入了决赛，英语水平和自信心都得到了极大提升。"),
        ),
    ),
    GameEvent(
        title="突然的停电",
        description="宿舍突然停电了，你的台式机强制关机，且不知道什么时候恢复。",
        options=(
            _opt("去图书馆抢带插座的位置", {"research": 2, "stamina": -10}, message="虽然折腾，但你保住了学习节奏。"),
            _opt("直接上床睡觉", {"mental": 5, "stamina": 20}, message="这波是天意，你难得享受了一个早睡的夜晚。"),
        ),
    ),
    GameEvent(
        title="健身房偶遇",
        description="你在健身房遇到了系里的学霸，他正在卧推。",
        options=(
            _opt("一起锻炼并交流心得", {"mental": 10, "research": 2, "stamina": 10}, message="健康的体魄是保研的本钱，你们还聊了一些专业话题。"),
        ),
    ),
    GameEvent(
        title="论文被拒",
        description="你满怀期待提交的论文被顶会拒了，审稿意见非常刻薄。",
        options=(
            _opt("痛定思痛，认真修改", {"mental": -15, "research": 10}, message="科研之路从来不是一帆风顺的，你学会了从失败中吸取教训。"),
            _opt("借酒消愁，怀疑人生", {"mental": -30, "stamina": -10}, message="你沉沦了几天，感觉保研之路变得迷茫了。"),
        ),
    ),
    GameEvent(
        title="实验室开放日志愿者",
        description="学院举办实验室开放日，导师希望你能去做志愿者讲解员。",
        options=(
            _opt("热情讲解", {"mental": 10, "research": 5, "stamina": -10}, message="你的表现得到了导师和参观者的共同称赞，人际关系提升。"),
        ),
    ),
    GameEvent(
        title="参与编写教材",
        description="你的专业课老师正在编写一本新教材，邀请你负责其中一个章节的资料整理。",
        options=(
            _opt("协助编写，严谨治学", {"mental": 5, "research": 10, "stamina": -15}, message="虽然工作量很大，但你的名字出现在了教材的致谢名单里。"),
        ),
    ),
    GameEvent(
        title="专业课补考传闻",
        description="听说某门极难的专业课有一半人没及格，大家都在人心惶惶。",
        options=(
            _opt("帮同学复习，缓解焦虑", {"mental": 15, "stamina": -10}, message="你不仅巩固了知识，还成了班里的‘救世主’。"),
            _opt("庆幸自己考得还不错", {"mental": 5}, message="你松了一口气，继续投入到下一步计划中。"),
        ),
    ),
    GameEvent(
        title="目标院校宣讲会",
        description="你心仪的院校来校开宣讲会，现场座无虚席。",
        options=(
            _opt("挤进前排提问", {"mental": 10, "research": 3}, message="招生老师记住了你的名字，并给了你一份详细的申请指南。"),
        ),
    ),
    GameEvent(
        title="收到导师的回信",
        description="你之前试探性发出的联系邮件，竟然收到了大牛导师的亲笔回信！",
        options=(
            _opt("激动地反复研读", {"mental": 20}, message="导师表示对你的简历很感兴趣，这让你信心倍增。"),
        ),
    ),
    GameEvent(
        title="学术圈的大瓜",
        description="领域内某位‘大牛’被曝论文造假，引起了学术界的震动。",
        options=(
            _opt("引以为戒，端正态度", {"mental": 5, "research": 2}, message="你深刻认识到学术诚信的重要性，研究态度更加严谨了。"),
        ),
    ),
    GameEvent(
        title="实验室年终聚餐",
        description="实验室组织大家吃火锅，氛围非常轻松。",
        options=(
            _opt("与师兄师姐交流心得", {"mental": 15, "research": 5}, message="在酒足饭饱之余，你学到了很多实验室的‘生存法则’。"),
        ),
    ),
    GameEvent(
        title="发现论文被引用",
        description="你在刷 Google Scholar 时，惊讶地发现自己的论文被一篇顶刊引用了！",
        options=(
            _opt("发个朋友圈庆祝一下", {"mental": 10, "research": 10}, message="你的学术影响力正在慢慢扩大，这种感觉太棒了。"),
        ),
    ),
    GameEvent(
        title="暑期社会实践",
        description="你带队前往偏远地区进行教育调研。",
        options=(
            _opt("深入基层，撰写报告", {"competition": 10, "mental": 15, "stamina": -20}, message="这段经历丰富了你的社会阅历，调研报告还获得了校级表彰。"),
        ),
    ),
    GameEvent(
        title="校园网炸了",
        description="正要在截止日期前提交申请材料，校园网突然崩溃了。",
        options=(
            _opt("用手机热点强行上传", {"mental": -10}, money=-50, message="虽然多花了几十块流量费，但总算在最后一刻交上了。"),
        ),
    ),
)
