"""四柱推命エンジン

年柱・月柱は立春と節入りを基準にし、日柱はユリウス通日から六十干支を求める。
時柱は出生時刻があるときだけ立てる。通変星と十二運は日干から見たもの。
"""
import logging
import math
from datetime import date, datetime
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel

from ..base import BaseDivinationEngine
from ..data.shichu_suimei import (
    CONTROLS,
    EARTHLY_BRANCHES,
    ELEMENT_CAREERS,
    ELEMENT_HEALTH,
    ELEMENT_TRAITS,
    FIVE_ELEMENTS,
    GENERATES,
    HEAVENLY_STEMS,
    MONTH_SETSU,
    NAYIN,
    SEASON_ELEMENTS,
    STAGE_START_BRANCH,
    TEN_GODS,
    TWELVE_STAGES,
    sexagenary_index,
    sexagenary_name,
    stem_index,
)
from ..seed import lcg_random
from .nine_star_ki import adjusted_year, spring_beginning

logger = logging.getLogger(__name__)

# date.toordinal() + 1721425 がユリウス通日。通日 + 49 を60で割った余りが日の干支（0 = 甲子）
DAY_CYCLE_OFFSET = 1721425 + 49

LUCK_PILLAR_COUNT = 8

ELEMENT_ACTIONS = {
    '木': ['観葉植物を育てる', '朝の散歩で緑に触れる', '新しい学びを始める'],
    '火': ['日光を浴びる', '赤い小物を身につける', '人前で意見を伝える'],
    '土': ['部屋を整える', '陶器の器を使う', '計画を紙に書き出す'],
    '金': ['不要な物を手放す', '白や金色を取り入れる', '約束の時間を守る'],
    '水': ['水辺を訪れる', '黒や紺の服を選ぶ', '静かに内省する時間を取る'],
}


class Pillar(BaseModel):
    name: str
    stem: str
    branch: str
    element: str
    branch_element: str
    yin_yang: str
    hidden_stems: List[str]
    nayin: str
    # 日柱の天干は日主なのでNone
    ten_god: Optional[str] = None
    # 地支の本気（蔵干の先頭）の通変星
    branch_ten_god: str
    twelve_stage: str


class ElementBalance(BaseModel):
    distribution: Dict[str, int]
    dominant: str
    weakest: str
    missing: List[str]


class DayMaster(BaseModel):
    stem: str
    element: str
    yin_yang: str
    strength: str  # 強い / 普通 / 弱い
    favorable: List[str]  # 喜神
    unfavorable: List[str]  # 忌神


class LuckPillar(BaseModel):
    name: str
    start_age: int
    end_age: int
    ten_god: str


class ShichuSuimeiReading(BaseModel):
    """四柱推命の結果"""
    year_pillar: Pillar
    month_pillar: Pillar
    day_pillar: Pillar
    hour_pillar: Optional[Pillar] = None
    elements: ElementBalance
    day_master: DayMaster
    ten_gods: Dict[str, int]
    kong_wang: List[str]
    luck_forward: bool
    luck_pillars: List[LuckPillar]
    current_luck: Optional[LuckPillar] = None
    yearly_fortune: str
    interpretation: Dict[str, str]
    seasonal_balance: str
    lucky_action: str
    guidance: str
    core_meaning: str


def year_cycle_index(year: int) -> int:
    """年の六十干支（1984年 = 甲子）"""
    return (year - 4) % 60


def day_cycle_index(day: date) -> int:
    return (day.toordinal() + DAY_CYCLE_OFFSET) % 60


def setsu_boundaries(year: int) -> List[Tuple[datetime, int]]:
    """その年の節入りと月の位置（0 = 寅月 … 11 = 丑月）"""
    boundaries = []
    for offset, (_, month, day) in enumerate(MONTH_SETSU):
        start = spring_beginning(year) if offset == 0 else datetime(year, month, day)
        boundaries.append((start, offset))
    return sorted(boundaries)


def month_offset(moment: datetime) -> int:
    # 小寒より前は前年の子月
    offset = 10
    for start, position in setsu_boundaries(moment.year):
        if moment >= start:
            offset = position
    return offset


def month_cycle_index(year_stem: int, offset: int) -> int:
    """年干から月干を求める（五虎遁）"""
    stem = ((year_stem % 5) * 2 + 2 + offset) % 10
    branch = (2 + offset) % 12
    return sexagenary_index(stem, branch)


def hour_cycle_index(day_stem: int, hour: int) -> int:
    """日干から時干を求める（五鼠遁）"""
    branch = ((hour + 1) // 2) % 12
    stem = ((day_stem % 5) * 2 + branch) % 10
    return sexagenary_index(stem, branch)


def ten_god(day_stem: int, other_stem: int) -> str:
    """日干から見た通変星"""
    own = HEAVENLY_STEMS[day_stem]['element']
    other = HEAVENLY_STEMS[other_stem]['element']
    same_polarity = day_stem % 2 == other_stem % 2
    if own == other:
        return '比肩' if same_polarity else '劫財'
    if GENERATES[own] == other:
        return '食神' if same_polarity else '傷官'
    if CONTROLS[own] == other:
        return '偏財' if same_polarity else '正財'
    if CONTROLS[other] == own:
        return '偏官' if same_polarity else '正官'
    return '偏印' if same_polarity else '印綬'


def twelve_stage(day_stem: int, branch: int) -> Dict:
    start = STAGE_START_BRANCH[day_stem]
    if day_stem % 2 == 0:
        return TWELVE_STAGES[(branch - start) % 12]
    return TWELVE_STAGES[(start - branch) % 12]


def kong_wang(day_index: int) -> List[str]:
    """日柱の旬に含まれない2つの支（空亡）"""
    start = day_index - day_index % 10
    return [EARTHLY_BRANCHES[(start + 10) % 12]['name'], EARTHLY_BRANCHES[(start + 11) % 12]['name']]


def producing_element(element: str) -> str:
    return next(source for source, target in GENERATES.items() if target == element)


def controlling_element(element: str) -> str:
    return next(source for source, target in CONTROLS.items() if target == element)


def build_pillar(index: int, day_stem: int, is_day: bool = False) -> Pillar:
    stem = HEAVENLY_STEMS[index % 10]
    branch = EARTHLY_BRANCHES[index % 12]
    return Pillar(
        name=sexagenary_name(index),
        stem=stem['name'],
        branch=branch['name'],
        element=stem['element'],
        branch_element=branch['element'],
        yin_yang=stem['yin_yang'],
        hidden_stems=branch['hidden_stems'],
        nayin=NAYIN[index // 2],
        ten_god=None if is_day else ten_god(day_stem, index % 10),
        branch_ten_god=ten_god(day_stem, stem_index(branch['hidden_stems'][0])),
        twelve_stage=twelve_stage(day_stem, index % 12)['name'],
    )


def element_balance(pillars: List[Pillar]) -> ElementBalance:
    distribution = {element: 0 for element in FIVE_ELEMENTS}
    for pillar in pillars:
        distribution[pillar.element] += 1
        distribution[pillar.branch_element] += 1
    return ElementBalance(
        distribution=distribution,
        dominant=max(FIVE_ELEMENTS, key=lambda element: distribution[element]),
        weakest=min(FIVE_ELEMENTS, key=lambda element: distribution[element]),
        missing=[element for element in FIVE_ELEMENTS if distribution[element] == 0],
    )


def analyze_day_master(day: Pillar, balance: ElementBalance) -> DayMaster:
    """日主の強弱と喜神・忌神"""
    element = day.element
    total = sum(balance.distribution.values())
    ratio = balance.distribution[element] / total
    if ratio > 0.35:
        strength = '強い'
    elif ratio < 0.2:
        strength = '弱い'
    else:
        strength = '普通'

    if strength == '強い':
        # 剋す五行と洩らす五行で抑える
        favorable = [controlling_element(element), GENERATES[element]]
        unfavorable = [producing_element(element), element]
    else:
        favorable = [producing_element(element), element]
        unfavorable = [controlling_element(element), GENERATES[element]]
    return DayMaster(stem=day.stem, element=element, yin_yang=day.yin_yang, strength=strength,
                     favorable=favorable, unfavorable=unfavorable)


def luck_start_age(birth: datetime, forward: bool) -> int:
    """節入りまでの日数を3日で1年に換算する"""
    boundaries = setsu_boundaries(birth.year - 1) + setsu_boundaries(birth.year) + setsu_boundaries(birth.year + 1)
    starts = [start for start, _ in boundaries]
    if forward:
        target = min(start for start in starts if start > birth)
        days = (target - birth).days
    else:
        target = max(start for start in starts if start <= birth)
        days = (birth - target).days
    return max(1, round(days / 3))


def luck_pillars(month_index: int, day_stem: int, start_age: int, forward: bool) -> List[LuckPillar]:
    """大運（月柱から順行または逆行）"""
    step = 1 if forward else -1
    pillars = []
    for i in range(LUCK_PILLAR_COUNT):
        index = (month_index + step * (i + 1)) % 60
        age = start_age + i * 10
        pillars.append(LuckPillar(name=sexagenary_name(index), start_age=age, end_age=age + 9,
                                  ten_god=ten_god(day_stem, index % 10)))
    return pillars


def _is_harmonious(first: str, second: str) -> bool:
    return first == second or GENERATES[first] == second or GENERATES[second] == first


class ShichuSuimeiEngine(BaseDivinationEngine[ShichuSuimeiReading]):
    """四柱（年月日時）の干支と五行による命式のエンジン"""

    divination_type = 'shichu-suimei'

    def calculate(self) -> ShichuSuimeiReading:
        birth = self.input.birth_datetime()
        birth_known = birth is not None
        if not birth_known:
            logger.debug('shichu-suimei: invalid birth date, reading today\'s pillars')
            birth = self.now().replace(tzinfo=None)

        year = adjusted_year(birth)
        year_index = year_cycle_index(year)
        day_index = day_cycle_index(birth.date())
        day_stem = day_index % 10
        month_index = month_cycle_index(year_index % 10, month_offset(birth))

        year_pillar = build_pillar(year_index, day_stem)
        month_pillar = build_pillar(month_index, day_stem)
        day_pillar = build_pillar(day_index, day_stem, is_day=True)
        hour = self.input.birth_hour() if birth_known else None
        hour_pillar = build_pillar(hour_cycle_index(day_stem, hour), day_stem) if hour is not None else None
        pillars = [p for p in (year_pillar, month_pillar, day_pillar, hour_pillar) if p is not None]

        balance = element_balance(pillars)
        day_master = analyze_day_master(day_pillar, balance)
        gods = self._ten_god_counts(pillars)
        logger.debug(f"shichu-suimei pillars={[p.name for p in pillars]} day_master={day_master.stem}")

        forward = self._luck_forward(year_index % 10)
        lucks: List[LuckPillar] = []
        current = None
        if birth_known:
            lucks = luck_pillars(month_index, day_stem, luck_start_age(birth, forward), forward)
            current = self._current_luck(birth, lucks)

        seed = self.generate_seed(self.get_environmental_modifier() * 100)
        _, r = lcg_random(seed)
        actions = ELEMENT_ACTIONS[day_master.favorable[0]]
        lucky_action = actions[math.floor(r * len(actions))]

        interpretation = {
            'personality': self._personality(day_master),
            'career': self._career(month_pillar, day_master, balance),
            'relationships': self._relationships(day_pillar, year_pillar, balance),
            'health': self._health(balance, day_master),
            'wealth': self._wealth(pillars, day_master),
            'overall': self._overall(pillars, balance, day_master),
        }

        if birth_known:
            core = (
                f"日主{day_master.stem}（{day_master.element}・{day_master.yin_yang}）の命式。"
                f"{ELEMENT_TRAITS[day_master.element][day_master.yin_yang]}人です。"
            )
        else:
            core = f"生年月日が不明のため、今日の日柱{day_pillar.name}から{day_master.element}の気を読み解きます。"

        return ShichuSuimeiReading(
            year_pillar=year_pillar,
            month_pillar=month_pillar,
            day_pillar=day_pillar,
            hour_pillar=hour_pillar,
            elements=balance,
            day_master=day_master,
            ten_gods=gods,
            kong_wang=kong_wang(day_index),
            luck_forward=forward,
            luck_pillars=lucks,
            current_luck=current,
            yearly_fortune=self._yearly_fortune(day_stem, day_master),
            interpretation=interpretation,
            seasonal_balance=self._seasonal_balance(balance),
            lucky_action=lucky_action,
            guidance=self._guidance(interpretation, day_master, gods, lucky_action),
            core_meaning=core,
        )

    def _luck_forward(self, year_stem: int) -> bool:
        # 陽年の男性と陰年の女性は順行。性別が不明なら男性として扱う
        is_yang_year = year_stem % 2 == 0
        is_female = (self.input.gender or '').lower() == 'female'
        return is_yang_year != is_female

    def _current_luck(self, birth: datetime, lucks: List[LuckPillar]) -> Optional[LuckPillar]:
        today = self.now()
        age = today.year - birth.year - ((today.month, today.day) < (birth.month, birth.day))
        for luck in lucks:
            if luck.start_age <= age <= luck.end_age:
                return luck
        return None

    @staticmethod
    def _ten_god_counts(pillars: List[Pillar]) -> Dict[str, int]:
        counts = {name: 0 for name in TEN_GODS}
        for pillar in pillars:
            if pillar.ten_god:
                counts[pillar.ten_god] += 1
            counts[pillar.branch_ten_god] += 1
        return counts

    def _personality(self, day_master: DayMaster) -> str:
        text = f"日主{day_master.element}（{day_master.yin_yang}）の特性から、{ELEMENT_TRAITS[day_master.element][day_master.yin_yang]}性格です。"
        if day_master.strength == '強い':
            text += '日主が強いため、自信に満ちリーダーシップを発揮しやすいですが、時に頑固になることも。'
        elif day_master.strength == '弱い':
            text += '日主が弱いため、協調性があり柔軟ですが、自信を持つことが課題かもしれません。'
        return text

    def _career(self, month: Pillar, day_master: DayMaster, balance: ElementBalance) -> str:
        text = f"月柱の{month.element}は仕事運を表し、{ELEMENT_CAREERS[month.element]}での活躍が期待できます。"
        wealth = CONTROLS[day_master.element]
        count = balance.distribution[wealth]
        if count >= 2:
            text += f"財を表す{wealth}が豊富なため、経済的な成功を収めやすいでしょう。"
        elif count == 0:
            text += f"財を表す{wealth}が不足しているため、金銭管理には注意が必要です。"
        return text

    def _relationships(self, day: Pillar, year: Pillar, balance: ElementBalance) -> str:
        text = f"配偶者宮である日支の{day.branch}（{day.branch_ten_god}）から、{TEN_GODS[day.branch_ten_god]['relationship']}傾向があります。"
        spread = max(balance.distribution.values()) - min(balance.distribution.values())
        if spread <= 2:
            text += '五行のバランスが良く、円満な人間関係を築きやすいでしょう。'
        else:
            text += '五行のバランスに偏りがあるため、相手を理解する努力が大切です。'
        if _is_harmonious(year.element, day.element):
            text += '家族との関係も良好で、支え合える関係を築けるでしょう。'
        return text

    def _health(self, balance: ElementBalance, day_master: DayMaster) -> str:
        text = f"健康面では、{balance.weakest}が不足しているため、{ELEMENT_HEALTH[balance.weakest]}に注意が必要です。"
        if day_master.strength == '弱い':
            text += '日主が弱いため、無理をせず休養を十分に取ることが大切です。'
        return text

    def _wealth(self, pillars: List[Pillar], day_master: DayMaster) -> str:
        wealth = CONTROLS[day_master.element]
        labels = ['年柱', '月柱', '日柱', '時柱']
        periods = [labels[i] for i, pillar in enumerate(pillars) if pillar.element == wealth]
        text = f"財を表す{wealth}の状態から、"
        if periods:
            text += f"{'、'.join(periods)}の時期に財運が巡ってきます。"
        else:
            text += '着実な努力により財を築いていくタイプです。'
        if wealth in day_master.favorable:
            text += f"{wealth}は喜神なので、財運に恵まれやすいでしょう。"
        return text

    def _overall(self, pillars: List[Pillar], balance: ElementBalance, day_master: DayMaster) -> str:
        text = '総合的に見て、'
        spread = max(balance.distribution.values()) - min(balance.distribution.values())
        if len({pillar.element for pillar in pillars}) <= 2:
            text += '特殊な格局を持ち、特定の分野で大きな成功を収める可能性があります。'
        elif spread <= 2:
            text += '五行のバランスが取れた命式で、安定した人生を送りやすいでしょう。'
        else:
            text += '個性的な命式で、自分の強みを活かすことで成功への道が開けます。'
        if self.get_environmental_modifier() > 1.1:
            text += '現在の環境エネルギーがあなたの運気を後押ししています。'
        text += f"運気を高めるには、{'、'.join(day_master.favorable)}の要素を生活に取り入れることが大切です。"
        return text

    def _yearly_fortune(self, day_stem: int, day_master: DayMaster) -> str:
        now = self.now().replace(tzinfo=None)
        index = year_cycle_index(adjusted_year(now))
        god = ten_god(day_stem, index % 10)
        element = HEAVENLY_STEMS[index % 10]['element']
        text = f"今年の{sexagenary_name(index)}年はあなたにとって{god}（{TEN_GODS[god]['meaning']}）の年です。"
        if element in day_master.favorable:
            text += '喜神の巡る追い風の年。新しいことにチャレンジする好機です。'
        elif element == day_master.element:
            text += '自分自身を見つめ直し、基盤を固める年です。'
        else:
            text += '変化と調整の年。柔軟な対応が成功の鍵となります。'
        return text

    def _season(self) -> str:
        if self.environment and self.environment.seasonal and self.environment.seasonal.season in SEASON_ELEMENTS:
            return self.environment.seasonal.season
        month = self.now().month
        if 3 <= month <= 5:
            return '春'
        if 6 <= month <= 8:
            return '夏'
        if 9 <= month <= 11:
            return '秋'
        return '冬'

    def _seasonal_balance(self, balance: ElementBalance) -> str:
        season = self._season()
        element = SEASON_ELEMENTS[season]
        count = balance.distribution[element]
        text = f"現在の季節（{season}）は{element}の気が強く、"
        if count >= 3:
            text += 'あなたの命式と共鳴し、運気が高まっています。'
        elif count == 0:
            text += 'あなたの命式に不足している要素を補ってくれています。'
        else:
            text += 'あなたの命式とバランスよく調和しています。'
        return text

    def _guidance(self, interpretation: Dict[str, str], day_master: DayMaster,
                  gods: Dict[str, int], lucky_action: str) -> str:
        main_god = max(TEN_GODS, key=lambda name: gods[name])
        advice = {
            '恋愛・結婚': interpretation['relationships'],
            '仕事・転職': (
                f"{interpretation['career']}命式に多い{main_god}は"
                f"{'、'.join(TEN_GODS[main_god]['career'][:2])}などの道を示します。"
            ),
            '金運・財運': interpretation['wealth'],
            '健康': interpretation['health'],
            '人間関係': f"{main_god}の気質（{'、'.join(TEN_GODS[main_god]['personality'][:2])}）を意識して人と接しましょう。",
            '総合運': interpretation['overall'],
        }
        text = advice.get(self.category, advice['総合運'])
        if self.input.question:
            text = f"「{self.input.question}」について、{text}"
        return self.generate_personalized_message(f"{text}開運の鍵は「{lucky_action}」です。")
