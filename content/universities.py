from __future__ import annotations

"""University table: admission line, tier and recommendation (baoyan) rate."""

from typing import Tuple

from .types import Tier, University


def _u(name: str, min_score: int, tier: Tier, baoyan_rate: float, tags: Tuple[str, ...], description: str) -> University:
    return University(
        name=name,
        min_score=min_score,
        tier=tier,
        baoyan_rate=baoyan_rate,
        tags=tags,
        description=description,
    )


UNIVERSITIES: Tuple[University, ...] = (
    # T0 - 顶尖学府
    _u("清华大学", 695, "T0", 58, ("C9", "顶尖"), "国内最高学府，保研率极高，但竞争也是地狱级。"),
    _u("北京大学", 693, "T0", 55, ("C9", "顶尖"), "人文与理学巅峰，氛围自由但学术要求极高。"),

    # T1 - 华五/C9
    _u("复旦大学", 683, "T1", 33, ("C9", "华五"), "文理医并重，保研名额充足，出国氛围浓厚。"),
    _u("上海交通大学", 685, "T1", 35, ("C9", "华五"), "工科强校，科研资源丰富，保研去向极佳。"),
    _u("浙江大学", 680, "T1", 30, ("C9", "华五"), "规模宏大，学科齐全，校友资源极其广泛。"),
    _u("南京大学", 678, "T1", 28, ("C9", "华五"), "低调务实，基础学科极强，学术风气纯正。"),
    _u("中国科学技术大学", 682, "T1", 45, ("C9", "华五"), "科研神校，全员科研氛围，保研率极高。"),
    _u("哈尔滨工业大学", 670, "T1", 27, ("C9", "国防"), "规格严格，功夫到家，航天强校，保研率稳健。"),
    _u("西安交通大学", 665, "T1", 25, ("C9", "西北"), "西北工科之光，作风硬朗，保研政策稳定。"),

    # T2 - 强势985
    _u("同济大学", 675, "T2", 28, ("985", "建筑"), "建筑与土木的殿堂，对德语区交流机会极多。"),
    _u("北京航空航天大学", 672, "T2", 26, ("985", "国防"), "航空航天领军，计算机实力极强。"),
    _u("北京理工大学", 668, "T2", 24, ("985", "国防"), "国防七子，工科实力雄厚。"),
    _u("南开大学", 662, "T2", 22, ("985", "综合"), "允公允能，日新月异。基础学科底蕴深厚。"),
    _u("天津大学", 660, "T2", 21, ("985", "工科"), "实事求是，工科实力雄厚，作风稳健。"),
    _u("武汉大学", 665, "T2", 23, ("985", "名校"), "樱花大道下的学术殿堂，综合实力极其稳健。"),
    _u("华中科技大学", 663, "T2", 22, ("985", "名校"), "森林大学，工科实力位居国内前列。"),
    _u("东南大学", 662, "T2", 23, ("985", "建筑"), "止于至善。建筑、土木、交通、通信均为国内顶尖。"),
    _u("中山大学", 658, "T2", 22, ("985", "强省"), "华南第一学府，医科å理科非常强劲。"),
    _u("四川大学", 652, "T2", 20, ("985", "综合"), "海纳百川，有容乃大。医学å文科极具优势。"),
    _u("华南理工大学", 650, "T2", 19, ("985", "大湾区"), "大湾区工科领头羊，就业极佳。"),
    _u("山东大学", 648, "T2", 18, ("985", "综合"), "历史悠久，医学与文史哲见长。"),
    _u("厦门大学", 655, "T2", 20, ("985", "最美"), "南方之强，经管与化学顶尖。"),
    _u("吉林大学", 635, "T2", 17, ("985", "巨无霸"), "规模极大，学科极其齐全。"),
    _u("中南大学", 645, "T2", 20, ("985", "矿冶"), "有色金属之都，医学同样强劲。"),
    _u("湖南大学", 642, "T2", 18, ("985", "千年学府"), "千年学府，土木与金融底蕴深厚。"),
    _u("电子科技大学", 660, "T2", 21, ("985", "成电"), "电子信息领域的排头兵。"),
    _u("重庆大学", 638, "T2", 16, ("985", "西南"), "山城之光，建筑与电气实力雄厚。"),
    _u("西北工业大学", 655, "T2", 22, ("985", "国防"), "三航特色鲜明，国防科技顶尖。"),
    _u("大连理工大学", 645, "T2", 18, ("985", "化工"), "东北工科重镇，化工与机械极强。"),
    _u("华东师范大学", 668, "T2", 25, ("985", "教育"), "教育与文理并重，保研去向多为名牌中学或名校深造。"),
    _u("中国农业大学", 630, "T2", 24, ("985", "农业"), "农学界的最高学府。"),
    _u("兰州大学", 615, "T2", 18, ("985", "西北"), "独树一帜，基础学科实力惊人。"),
    _u("东北大学", 625, "T2", 16, ("985", "冶金"), "白山黑水，自强不息，控制与冶金领先。"),

    # T3 - 强势211 / 特色名校
    _u("中国人民大学", 680, "T3", 30, ("985", "人文"), "人文社科顶尖，保研去向极佳。"),
    _u("北京师范大学", 675, "T3", 28, ("985", "教育"), "师范教育领军，心理学全国第一。"),
    _u("中央财经大学", 665, "T3", 18, ("211", "财经"), "金融街的入场券，保研去向多为顶级金融机构。"),
    _u("上海财经大学", 668, "T3", 19, ("211", "财经"), "魔都财经巅峰，保研竞争异常激烈。"),
    _u("对外经济贸易大学", 662, "T3", 17, ("211", "财经"), "外向型名校，经贸与小语种强势。"),
    _u("中国政法大学", 660, "T3", 18, ("211", "法学"), "法学界的最高殿堂，法学专业保研率可观。"),
    _u("北京邮电大学", 658, "T3", 20, ("211", "行业强校"), "信息黄埔，互联网行业的保研敲门砖。"),
    _u("北京交通大学", 635, "T3", 16, ("211", "交通"), "轨道交通领域领军。"),
    _u("北京科技大学", 638, "T3", 17, ("211", "冶金"), "钢铁摇篮，材料科学顶尖。"),
    _u("南京航空航天大学", 645, "T3", 18, ("211", "国防"), "三航名校，直升机技术国内唯一。"),
    _u("南京理工大学", 642, "T3", 17, ("211", "国防"), "兵器科学之冠。"),
    _u("河海大学", 625, "T3", 15, ("211", "水利"), "水利工程世界顶尖。"),
    _u("苏州大学", 640, "T3", 14, ("211", "最强地级市"), "江苏省属211领头羊，科研产出惊人。"),
    _u("上海大学", 632, "T3", 12, ("211", "综合"), "魔都亲儿子，资源极其丰富。"),
    _u("暨南大学", 625, "T3", 13, ("211", "华侨"), "华侨最高学府，国际化程度高，经管类专业热门。"),
    _u("西南财经大学", 630, "T3", 15, ("211", "财经"), "财经名校，保研竞争主要集中在金融å会计。"),
    _u("中南财经政法大学", 635, "T3", 16, ("211", "财经"), "经法双强，保研去向稳健。"),
    _u("华中师范大学", 630, "T3", 15, ("211", "教育"), "中部教育重镇。"),
    _u("南京师范大学", 632, "T3", 14, ("211", "教育"), "江南名校，人文社科极强。"),
    _u("西南大学", 615, "T3", 13, ("211", "综合"), "规模巨大，教育与农学见长。"),
    _u("西北大学", 610, "T3", 12, ("211", "古都"), "关中名校，考古与地质顶尖。"),
    _u("中国海洋大学", 620, "T3", 18, ("985", "海洋"), "海洋科学的最高学府。"),
    _u("哈尔滨工程大学", 630, "T3", 16, ("211", "国防"), "三海一核特色鲜明。"),
    _u("武汉理工大学", 625, "T3", 14, ("211", "工科"), "材料、交通、汽车三大支柱。"),
    _u("合肥工业大学", 615, "T3", 13, ("211", "工科"), "汽车行业的黄埔军校。"),
    _u("华北电力大学", 635, "T3", 15, ("211", "电力"), "电力系统的国家队。"),
    _u("中国地质大学（北京）", 610, "T3", 14, ("211", "地质"), "地质科学的领军者。"),
    _u("中国地质大学（武汉）", 608, "T3", 14, ("211", "地质"), "地球科学领域世界闻名。"),
    _u("中国石油大学（北京）", 612, "T3", 15, ("211", "石油"), "石油工业的摇篮。"),
    _u("中国石油大学（华东）", 605, "T3", 14, ("211", "石油"), "能源领域的骨干院校。"),
    _u("中国矿业大学", 600, "T3", 13, ("211", "矿业"), "煤炭工业的领头羊。"),
    _u("长安大学", 605, "T3", 12, ("211", "交通"), "公路交通领域的黄埔军校。"),
    _u("江南大学", 618, "T3", 14, ("211", "轻工"), "食品科学全国第一。"),
    _u("东华大学", 622, "T3", 14, ("211", "纺织"), "纺织服装领域的最高学府。"),
    _u("陕西师范大学", 612, "T3", 13, ("211", "教育"), "西北教育之光。"),
    _u("湖南师范大学", 608, "T3", 12, ("211", "教育"), "潇湘名校，文理并重。"),
    _u("福州大学", 615, "T3", 12, ("211", "工科"), "福建省属工科领头羊。"),
    _u("郑州大学", 610, "T3", 10, ("211", "巨无霸"), "中原大地第一学府。"),
    _u("南昌大学", 605, "T3", 10, ("211", "综合"), "江西高等教育的旗帜。"),

    # T4 - 区域中心高校 / 强势地方院校
    _u("深圳大学", 620, "T4", 8, ("特区", "双非"), "特区大学，资源极其丰富，虽然保研率不高但机会多。"),
    _u("南方科技大学", 650, "T4", 25, ("特区", "创新"), "新型研究型大学，科研资源极佳。"),
    _u("上海科技大学", 645, "T4", 30, ("魔都", "精英"), "小而精的研究型大学。"),
    _u("安徽大学", 595, "T4", 11, ("211", "综合"), "江淮名校，学科齐全。"),
    _u("云南大学", 590, "T4", 12, ("211", "边疆"), "边疆民族地区的学术重镇。"),
    _u("广西大学", 580, "T4", 10, ("211", "综合"), "八桂大地最高学府。"),
    _u("贵州大学", 575, "T4", 9, ("211", "综合"), "黔中名校。"),
    _u("海南大学", 578, "T4", 9, ("211", "热带"), "自由贸易港建设的主力军。"),
    _u("内蒙古大学", 570, "T4", 10, ("211", "民族"), "塞外名校。"),
    _u("辽宁大学", 585, "T4", 10, ("211", "经管"), "辽沈名校，经管法见长。"),
    _u("延边大学", 560, "T4", 9, ("211", "特色"), "长白山下的多元文化殿堂。"),
    _u("石河子大学", 550, "T4", 10, ("211", "兵团"), "屯垦戍边，奉献西部。"),
    _u("宁夏大学", 555, "T4", 9, ("211", "综合"), "塞上名校。"),
    _u("青海大学", 545, "T4", 9, ("211", "高原"), "高原医学与盐湖化工领先。"),
    _u("西藏大学", 530, "T4", 10, ("211", "世界屋脊"), "雪域高原最高学府。"),
    _u("新疆大学", 565, "T4", 10, ("211", "边疆"), "丝绸之路经济带的核心学府。"),
    _u("宁波大学", 600, "T4", 8, ("双一流", "浙东"), "侨资创办，发展迅猛。"),
    _u("河南大学", 590, "T4", 9, ("双一流", "古都"), "百年名校，底蕴深厚。"),
    _u("湘潭大学", 585, "T4", 10, ("双一流", "数学"), "伟人故里，数学学科极强。"),
    _u("扬州大学", 582, "T4", 7, ("综合", "强势双非"), "江苏老牌名校，学科极其齐全。"),
    _u("江苏大学", 588, "T4", 8, ("工科", "强势双非"), "农机特色鲜明，工科实力雄厚。"),
    _u("浙江工业大学", 610, "T4", 8, ("工科", "强势双非"), "浙江省属工科第一。"),
    _u("杭州电子科技大学", 615, "T4", 7, ("IT", "强势双非"), "IT名校，华为等大厂青睐。"),
    _u("南京邮电大学", 612, "T4", 9, ("双一流", "通信"), "通信行业名校。"),
    _u("南京信息工程大学", 605, "T4", 9, ("双一流", "气象"), "大气科学世界顶尖。"),
    _u("浙江理工大学", 585, "T4", 6, ("特色", "杭州"), "丝绸文化特色，设计与工科见长。"),
    _u("福建师范大学", 575, "T4", 7, ("师范", "老牌"), "百年师范，文史见长。"),
    _u("山东师范大学", 578, "T4", 8, ("师范", "老牌"), "齐鲁名校，底蕴深厚。"),
    _u("华侨大学", 572, "T4", 6, ("华侨", "特色"), "面向海外，多元文化。"),
    _u("江西师范大学", 568, "T4", 7, ("师范", "老牌"), "赣鄱名校。"),
    _u("河南师范大学", 565, "T4", 7, ("师范", "老牌"), "中原教育骨干。"),
    _u("河北大学", 570, "T4", 7, ("综合", "老牌"), "燕赵名校，底蕴尚存。"),
    _u("山西大学", 585, "T4", 10, ("双一流", "老牌"), "百年名校，重现辉煌。"),
    _u("西北师范大学", 555, "T4", 8, ("师范", "西北"), "西迁精神传承者。"),
    _u("哈尔滨师范大学", 550, "T4", 7, ("师范", "东北"), "龙江教育摇篮。"),
    _u("四川师范大学", 562, "T4", 7, ("师范", "西南"), "蜀中名校。"),
    _u("辽宁师范大学", 558, "T4", 7, ("师范", "东北"), "大连名校。"),
    _u("广西师范大学", 545, "T4", 7, ("师范", "边疆"), "桂林名校。"),
    _u("贵州师范大学", 540, "T4", 6, ("师范", "特色"), "黔中教育重镇。"),

    # T5 - 地方骨干高校 / 行业特色院校
    _u("广东工业大学", 580, "T5", 5, ("大湾区", "工科"), "大湾区工科强校，就业极其出色。"),
    _u("重庆邮电大学", 585, "T5", 5, ("通信", "IT"), "邮电名校，计算机实力强劲。"),
    _u("西安邮电大学", 575, "T5", 4, ("通信", "IT"), "西北IT人才培养基地。"),
    _u("青岛大学", 578, "T5", 5, ("综合", "青岛"), "城市名片，医学与纺织见长。"),
    _u("济南大学", 565, "T5", 4, ("综合", "山东"), "山东省属名校。"),
    _u("燕山大学", 582, "T5", 6, ("工科", "重机"), "重型机械行业翘楚。"),
    _u("黑龙江大学", 550, "T5", 6, ("综合", "俄语"), "俄语全国第一。"),
    _u("湖北大学", 560, "T5", 5, ("综合", "武汉"), "武汉省属第一。"),
    _u("湖南科技大学", 545, "T5", 4, ("工科", "特色"), "矿业与机械特色。"),
    _u("江西理工大学", 535, "T5", 4, ("工科", "有色"), "有色冶金人才摇篮。"),
    _u("桂林电子科技大学", 568, "T5", 4, ("IT", "特色"), "华南IT人才基地。"),
    _u("昆明理工大学", 562, "T5", 5, ("工科", "特色"), "云南工科领头羊。"),
    _u("西安理工大学", 570, "T5", 5, ("工科", "特色"), "西北工科劲旅。"),
    _u("西安建筑科技大学", 565, "T5", 6, ("建筑", "老八校"), "建筑老八校之一。"),
    _u("山东科技大学", 555, "T5", 4, ("工科", "矿业"), "矿业特色名校。"),
    _u("安徽工业大学", 540, "T5", 4, ("工科", "冶金"), "冶金特色名校。"),
    _u("安徽理工大学", 530, "T5", 4, ("工科", "矿业"), "煤炭工业骨干。"),
    _u("华东交通大学", 545, "T5", 4, ("交通", "特色"), "轨道交通特色。"),
    _u("华南农业大学", 575, "T5", 8, ("双一流", "农业"), "大湾区农林名校。"),
    _u("东北林业大学", 565, "T5", 10, ("211", "林业"), "林业特色名校。"),
    _u("南京林业大学", 570, "T5", 7, ("双一流", "林业"), "林业与木工强校。"),
    _u("西南林业大学", 510, "T5", 3, ("林业", "西南"), "西南地区林业人才培养重要基地，林业特色鲜明。"),
    _u("北京林业大学", 615, "T5", 15, ("211", "园林"), "园林建筑全国第一。"),
    _u("福建农林大学", 555, "T5", 5, ("农业", "特色"), "海峡两岸农林合作名校。"),
    _u("山东农业大学", 545, "T5", 6, ("农业", "老牌"), "底蕴深厚的农林名校。"),
)
