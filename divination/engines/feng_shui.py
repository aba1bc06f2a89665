"""風水（八宅派・玄空飛星）エンジン"""
import logging
from typing import Dict, List

from pydantic import BaseModel

from ..base import BaseDivinationEngine, sum_digits
from .nine_star_ki import NINE_STARS, adjusted_year, star_for_year

logger = logging.getLogger(__name__)

# 本命卦ごとの八方位（生気・天医・延年・伏位 / 禍害・五鬼・六殺・絶命）
KUA_DIRECTIONS = {
    1: (['東南', '東', '南', '北'], ['西', '北東', '北西', '南西']),
    2: (['北東', '西', '北西', '南西'], ['東', '東南', '南', '北']),
    3: (['南', '北', '東南', '東'], ['南西', '北西', '北東', '西']),
    4: (['北', '南', '東', '東南'], ['北西', '南西', '西', '北東']),
    6: (['西', '北東', '南西', '北西'], ['東南', '東', '北', '南']),
    7: (['北西', '南西', '北東', '西'], ['北', '南', '東南', '東']),
    8: (['南西', '北西', '西', '北東'], ['南', '北', '東', '東南']),
    9: (['東', '東南', '北', '南'], ['北東', '西', '南西', '北西']),
}

FAVORABLE_NAMES = ['生気', '天医', '延年', '伏位']
UNFAVORABLE_NAMES = ['禍害', '五鬼', '六殺', '絶命']

FAVORABLE_EFFECTS = {
    '生気': '成功と繁栄をもたらす最良の方位',
    '天医': '健康と癒しをもたらす方位',
    '延年': '人間関係と長寿をもたらす方位',
    '伏位': '安定と自己成長をもたらす方位',
}

UNFAVORABLE_EFFECTS = {
    '禍害': '小さなトラブルや口論を招く方位',
    '五鬼': '火災や盗難、対立を招く方位',
    '六殺': '人間関係や法的な問題を招く方位',
    '絶命': '最も避けるべき、重大な損失を招く方位',
}

KUA_ELEMENTS = {1: '水', 2: '土', 3: '木', 4: '木', 6: '金', 7: '金', 8: '土', 9: '火'}
EAST_GROUP = (1, 3, 4, 9)

# 十干（西暦の下一桁）による五行
STEM_ELEMENTS = {0: '金', 1: '金', 2: '水', 3: '水', 4: '木', 5: '木', 6: '火', 7: '火', 8: '土', 9: '土'}

# 自分の五行と、それを生む五行
SUPPORTING_ELEMENTS = {
    '水': ['水', '金'],
    '木': ['木', '水'],
    '火': ['火', '木'],
    '土': ['土', '火'],
    '金': ['金', '土'],
}

ELEMENT_COLORS = {
    '水': ['黒', '青', '紺'],
    '木': ['緑', '茶', '青緑'],
    '火': ['赤', 'オレンジ', 'ピンク'],
    '土': ['黄', 'ベージュ', '茶'],
    '金': ['白', '金', '銀'],
}

LUCKY_NUMBERS = {1: [1, 6], 2: [2, 5, 8], 3: [3, 4], 4: [3, 4], 6: [6, 7], 7: [6, 7], 8: [2, 5, 8], 9: [9]}

FLYING_STARS = {
    1: {'name': '一白', 'nature': '吉', 'meaning': '仕事運と新しい機会', 'remedy': '水槽や鏡で活性化する'},
    2: {'name': '二黒', 'nature': '凶', 'meaning': '病気と停滞', 'remedy': '金属の置物や風鈴で抑える'},
    3: {'name': '三碧', 'nature': '凶', 'meaning': '争いと口論', 'remedy': '赤い小物で火の気を加える'},
    4: {'name': '四緑', 'nature': '吉', 'meaning': '学業と恋愛', 'remedy': '観葉植物や竹で活性化する'},
    5: {'name': '五黄', 'nature': '大凶', 'meaning': '災難と不運', 'remedy': '金属製の六連の鈴で鎮める'},
    6: {'name': '六白', 'nature': '吉', 'meaning': '権威と援助', 'remedy': '金属や白い置物で活性化する'},
    7: {'name': '七赤', 'nature': '凶', 'meaning': '盗難と出費', 'remedy': '水のモチーフで気を流す'},
    8: {'name': '八白', 'nature': '吉', 'meaning': '財運と不動産', 'remedy': '陶器や天然石で活性化する'},
    9: {'name': '九紫', 'nature': '吉', 'meaning': '名誉と祝い事', 'remedy': '照明や赤い物で活性化する'},
}

# 洛書の飛泊順（中宮からの増分）
FLIGHT_OFFSETS = [
    ('中央', 0), ('北西', 1), ('西', 2), ('北東', 3), ('南', 4),
    ('北', 5), ('南西', 6), ('東', 7), ('東南', 8),
]

ROOM_ADVICE = {
    '恋愛・結婚': ('寝室', '延年の方位にベッドの頭を向け、ペアの置物を飾りましょう'),
    '仕事・転職': ('書斎', '生気の方位を向いて机を置き、背後に壁がある配置にしましょう'),
    '金運・財運': ('リビング', '玄関から対角の財位を清潔に保ち、観葉植物を置きましょう'),
    '健康': ('寝室', '天医の方位に頭を向けて眠り、寝室に鏡を置かないようにしましょう'),
    '人間関係': ('リビング', '延年の方位に団らんの場をつくり、丸いテーブルを選びましょう'),
    '総合運': ('玄関', '玄関を明るく清潔に保ち、良い気を招き入れましょう'),
}


class Direction(BaseModel):
    direction: str
    name: str
    effect: str


class FlyingStar(BaseModel):
    palace: str
    star: int
    name: str
    nature: str
    meaning: str
    remedy: str


class FengShuiReading(BaseModel):
    """風水の結果"""
    kua_number: int
    group: str
    kua_element: str
    personal_element: str
    favorable_directions: List[Direction]
    unfavorable_directions: List[Direction]
    career_direction: str
    health_direction: str
    relationship_direction: str
    stability_direction: str
    lucky_elements: List[str]
    lucky_colors: List[str]
    lucky_numbers: List[int]
    period: int
    annual_center_star: int
    annual_stars: List[FlyingStar]
    room_focus: str
    room_advice: str
    warnings: List[str]
    guidance: str
    core_meaning: str


def kua_number(year: int, gender: str) -> int:
    """本命卦（男性は11から、女性は4に年の数を足して求める）"""
    reduced = sum_digits(year)
    if reduced > 9:
        reduced = sum_digits(reduced)
    if gender == 'female':
        kua = 4 + reduced
        if kua > 9:
            kua -= 9
        return 8 if kua == 5 else kua
    kua = 11 - reduced
    if kua > 9:
        kua -= 9
    return 2 if kua == 5 else kua


def annual_stars(year: int) -> List[FlyingStar]:
    center = star_for_year(year)
    stars = []
    for palace, offset in FLIGHT_OFFSETS:
        number = (center - 1 + offset) % 9 + 1
        stars.append(FlyingStar(palace=palace, star=number, **FLYING_STARS[number]))
    return stars


def period_for(year: int) -> int:
    """三元九運の運（20年ごと、1864年が一運の始まり）"""
    return (year - 1864) // 20 % 9 + 1


class FengShuiEngine(BaseDivinationEngine[FengShuiReading]):
    """本命卦と年盤の飛星による風水エンジン"""

    divination_type = 'feng-shui'

    def calculate(self) -> FengShuiReading:
        birth = self.input.birth_datetime()
        birth_year = adjusted_year(birth) if birth else self.now().year
        kua = kua_number(birth_year, self.input.gender or '')
        favorable, unfavorable = KUA_DIRECTIONS[kua]
        kua_element = KUA_ELEMENTS[kua]
        lucky_elements = SUPPORTING_ELEMENTS[kua_element]
        now_year = self.now().year
        stars = annual_stars(now_year)
        logger.debug(f"feng-shui kua={kua} annual_center={stars[0].star}")

        room, advice = ROOM_ADVICE.get(self.category, ROOM_ADVICE['総合運'])
        group = '東四命' if kua in EAST_GROUP else '西四命'
        warnings = [
            f"{star.palace}に{star.name}が巡っています。{star.remedy}"
            for star in stars if star.nature in ('凶', '大凶') and star.palace != '中央'
        ]
        guidance = (
            f"あなたの本命卦は{kua}（{group}）です。{favorable[0]}の方位が{FAVORABLE_EFFECTS['生気']}で、"
            f"{unfavorable[3]}は{UNFAVORABLE_EFFECTS['絶命']}です。{room}では{advice}。"
        )
        return FengShuiReading(
            kua_number=kua,
            group=group,
            kua_element=kua_element,
            personal_element=STEM_ELEMENTS[birth_year % 10],
            favorable_directions=[
                Direction(direction=direction, name=name, effect=FAVORABLE_EFFECTS[name])
                for direction, name in zip(favorable, FAVORABLE_NAMES)
            ],
            unfavorable_directions=[
                Direction(direction=direction, name=name, effect=UNFAVORABLE_EFFECTS[name])
                for direction, name in zip(unfavorable, UNFAVORABLE_NAMES)
            ],
            career_direction=favorable[0],
            health_direction=favorable[1],
            relationship_direction=favorable[2],
            stability_direction=favorable[3],
            lucky_elements=lucky_elements,
            lucky_colors=[color for element in lucky_elements for color in ELEMENT_COLORS[element]],
            lucky_numbers=LUCKY_NUMBERS[kua],
            period=period_for(now_year),
            annual_center_star=stars[0].star,
            annual_stars=stars,
            room_focus=room,
            room_advice=advice,
            warnings=warnings,
            guidance=self.generate_personalized_message(guidance),
            core_meaning=(
                f"{group}の本命卦{kua}（{kua_element}）。今年は{NINE_STARS[stars[0].star]['name']}が中宮に入り、"
                f"{favorable[0]}の生気方位があなたの追い風となります。"
            ),
        )
