"""ケルト・オガム占いエンジン"""
import logging
from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel

from ..base import BaseDivinationEngine
from ..data.ogham import CELTIC_FESTIVALS, CELTIC_TREE_CALENDAR, OGHAM_FEWS, get_few, get_ogham_spread
from ..exceptions import InvalidOptionError
from ..seed import LCG_MODULUS, draw_without_replacement, lcg_random

logger = logging.getLogger(__name__)

# 約1/5の確率で逆位置
REVERSAL_THRESHOLD = 0.2

# 名もなき日（樹木暦のどの月にも属さない）
NAMELESS_DAY = (12, 23)

ELEMENTS = ('fire', 'water', 'air', 'earth', 'spirit')

ELEMENT_QUALITIES = {
    'fire': '変容と情熱の力',
    'water': '感情と直感の流れ',
    'air': '知性と伝達の風',
    'earth': '安定と実りの恵み',
    'spirit': '統合と霊性の光',
}

LACKING_ADVICE = {
    'fire': '創造的な活動や情熱的な取り組みで火の要素を取り入れましょう',
    'water': '感情的な浄化や直感的な瞑想で水の要素を強化しましょう',
    'air': '新しい学習やコミュニケーションで風の要素を活性化しましょう',
    'earth': '自然との触れ合いや実践的な活動で地の要素を安定させましょう',
    'spirit': '霊的な実践や瞑想で精神的要素を統合しましょう',
}

ELEMENTAL_TRAITS = {
    'fire': ['情熱的', '創造的', '行動的'],
    'water': ['感受性豊か', '直感的', '共感力が高い'],
    'air': ['知的', 'コミュニケーション能力が高い', '適応力がある'],
    'earth': ['安定志向', '実践的', '忍耐強い'],
    'spirit': ['霊的', '統合的', '智慧深い'],
}

ELEMENTAL_CHALLENGES = {
    'fire': ['衝動性の制御', '持続力の向上', 'バランスの維持'],
    'water': ['感情の境界線設定', '現実的判断', '行動力の向上'],
    'air': ['集中力の向上', '感情の統合', '一貫性の維持'],
    'earth': ['柔軟性の向上', '変化への適応', '創造性の発揮'],
    'spirit': ['現実との統合', '実践性の向上', '他者との調和'],
}

ELEMENTAL_GIFTS = {
    'fire': ['リーダーシップ', 'インスピレーション', '変革力'],
    'water': ['癒しの力', '共感能力', '直感力'],
    'air': ['伝達能力', '分析力', '適応性'],
    'earth': ['建設的能力', '育成力', '安定化力'],
    'spirit': ['統合力', '智慧', '霊的洞察'],
}

DRUID_WISDOM = [
    '自然のリズムに従って生活する',
    '月の満ち欠けを観察する',
    '樹木や植物との対話を試みる',
]


class DrawnFew(BaseModel):
    position: str
    position_meaning: str
    symbol: str
    name: str
    tree: str
    element: str
    is_reversed: bool
    keywords: List[str]
    general: str
    contextual: str
    elemental: str
    advice: str


class BirthTree(BaseModel):
    name: str
    tree: str
    symbol: str
    months: str
    character_traits: List[str]
    life_pattern: str
    challenges: List[str]
    gifts: List[str]
    destiny: str


class ElementalAnalysis(BaseModel):
    counts: Dict[str, int]
    dominant_element: str
    lacking_elements: List[str]
    balance: str
    recommendation: str


class SeasonalResonance(BaseModel):
    current_festival: str
    festival_meaning: str
    next_festival: str
    next_festival_date: str
    guidance: str


class TreeWisdom(BaseModel):
    grove_message: str
    seasonal_guidance: str
    tree_spirit: str


class CelticReading(BaseModel):
    """オガム占いの結果"""
    spread_id: str
    spread_name: str
    drawn: List[DrawnFew]
    birth_tree: Optional[BirthTree] = None
    elemental_analysis: ElementalAnalysis
    tree_wisdom: TreeWisdom
    seasonal_resonance: SeasonalResonance
    druid_class: str
    overall: str
    advice: str
    warning: str
    timing: str
    core_meaning: str


class CelticEngine(BaseDivinationEngine[CelticReading]):
    """オガム文字20字とケルト樹木暦によるエンジン"""

    divination_type = 'celtic'

    def calculate(self) -> CelticReading:
        spread = get_ogham_spread(self.options.ogham_spread)
        if spread is None:
            raise InvalidOptionError(f"Unknown ogham spread: {self.options.ogham_spread}")

        seed = self.generate_seed(int(self.lunar_phase() * 1000))
        fews = draw_without_replacement(OGHAM_FEWS, len(spread['positions']), seed)
        state = LCG_MODULUS - 1 - seed % LCG_MODULUS

        drawn = []
        for position, few in zip(spread['positions'], fews):
            state, r = lcg_random(state)
            drawn.append(self._interpret(few, position, r < REVERSAL_THRESHOLD))
        logger.debug(f"celtic spread={spread['id']} fews={[d.name for d in drawn]}")

        elemental = _elemental_analysis(drawn)
        seasonal = self._seasonal_resonance()
        primary = get_few(drawn[0].name)
        core = (
            f"{ELEMENT_QUALITIES[elemental.dominant_element]}を通じて、"
            f"{drawn[0].tree}の樹木霊が語りかけています。{primary['meanings']['spiritual']}"
        )

        return CelticReading(
            spread_id=spread['id'],
            spread_name=spread['name'],
            drawn=drawn,
            birth_tree=self.birth_tree(),
            elemental_analysis=elemental,
            tree_wisdom=TreeWisdom(
                grove_message=(
                    f"聖なる森の中で、{'、'.join(d.tree for d in drawn)}の木々が古代の智慧を囁いています。"
                    'これらの樹木霊が織りなす調和が、あなたの人生に深い洞察をもたらします。'
                ),
                seasonal_guidance=(
                    f"{drawn[0].tree}の時期（{primary['timing']['months']}）のエネルギーが、"
                    f"{primary['timing']['season']}の智慧を伝えています。自然のリズムに合わせて行動することで、最大の恩恵を受けられます。"
                ),
                tree_spirit=(
                    f"{drawn[0].tree}の樹木霊からのメッセージ：「{primary['meanings']['spiritual']}」 "
                    'この古代の存在があなたの魂の成長を見守っています。'
                ),
            ),
            seasonal_resonance=seasonal,
            druid_class=_druid_class(drawn),
            overall=self.generate_personalized_message(_narrative(drawn)),
            advice='。また、'.join([drawn[0].advice.rstrip('。'), elemental.recommendation.rstrip('。')] + DRUID_WISDOM) + '。',
            warning=_warning(drawn, elemental),
            timing='、'.join([f"{d.tree}の時期（{get_few(d.name)['timing']['months']}）" for d in drawn]
                            + [f"{seasonal.current_festival}の影響下"]),
            core_meaning=core,
        )

    def _interpret(self, few: Dict, position: Dict, is_reversed: bool) -> DrawnFew:
        meanings = few['meanings']
        general = meanings['divinatory']['reversed' if is_reversed else 'upright']
        orientation = '逆位置' if is_reversed else '正位置'
        tree = few['tree'] or few['name']

        contextual = f"{position['name']}における{tree}の{orientation}は、"
        question = self.input.question or ''
        if '愛' in question or '恋' in question:
            if few['element'] == 'water':
                contextual += '感情的な深い結びつきと愛の流れを示しています。'
            else:
                contextual += '愛における新しい成長と発展を表しています。'
        elif '仕事' in question or 'キャリア' in question:
            if few['element'] == 'earth':
                contextual += '着実な成果と安定した成功を約束しています。'
            else:
                contextual += '創造的な発展と新しい機会の到来を示しています。'
        else:
            contextual += general

        position_element = position.get('element')
        if position_element and position_element == few['element']:
            elemental = f"{few['element']}のエネルギーが強化され、調和的な影響を与えています。"
        elif position_element:
            elemental = f"{few['element']}のエネルギーが{position_element}の位置で独特の相互作用を生み出しています。"
        else:
            elemental = f"{few['element']}のエネルギーがこの状況に{ELEMENT_QUALITIES[few['element']]}をもたらしています。"

        keyword = meanings['keywords'][0]
        if is_reversed:
            advice = f"{position['name']}での{tree}逆位置は、{keyword}に関して内省と調整が必要であることを示しています。"
        else:
            advice = f"{position['name']}での{tree}は、{keyword}の力を積極的に活用することを促しています。"

        return DrawnFew(
            position=position['name'],
            position_meaning=position['meaning'],
            symbol=few['symbol'],
            name=few['name'],
            tree=tree,
            element=few['element'],
            is_reversed=is_reversed,
            keywords=meanings['keywords'],
            general=general,
            contextual=contextual,
            elemental=elemental,
            advice=advice,
        )

    def birth_tree(self) -> Optional[BirthTree]:
        """ケルト樹木暦による誕生樹（名もなき日や無効な日付はNone）"""
        birth = self.input.birth_datetime()
        if birth is None or (birth.month, birth.day) == NAMELESS_DAY:
            return None
        few = get_few(tree_month_for(birth.month, birth.day))
        element = few['element']
        keywords = few['meanings']['keywords']
        return BirthTree(
            name=few['name'],
            tree=few['tree'],
            symbol=few['symbol'],
            months=few['timing']['months'],
            character_traits=keywords[:3] + ELEMENTAL_TRAITS[element],
            life_pattern=(
                f"{few['timing']['season']}のエネルギーを持つあなたの人生パターンは、"
                f"{few['meanings']['psychological']}を通じて展開されます。"
            ),
            challenges=ELEMENTAL_CHALLENGES[element],
            gifts=keywords[:2] + ELEMENTAL_GIFTS[element],
            destiny=(
                f"{few['tree']}の子として、あなたの運命は{few['meanings']['spiritual']}の中で完成されます。"
                '古代の智慧を現代に橋渡しする役割を担っています。'
            ),
        )

    def _seasonal_resonance(self) -> SeasonalResonance:
        current, upcoming = festivals_around(self.now())
        return SeasonalResonance(
            current_festival=current,
            festival_meaning=CELTIC_FESTIVALS[current]['meaning'],
            next_festival=upcoming,
            next_festival_date=CELTIC_FESTIVALS[upcoming]['date'],
            guidance=f"{current}の時期にふさわしい行動と意識を保ちましょう。",
        )


def tree_month_for(month: int, day: int) -> str:
    """誕生日が属する樹木暦の月のオガム名"""
    starts = sorted(CELTIC_TREE_CALENDAR)
    # 1月21日より前は前年12月24日からの月に属する
    result = starts[-1][2]
    for start_month, start_day, name in starts:
        if (month, day) >= (start_month, start_day):
            result = name
    return result


def _festival_start(date_text: str):
    month, day = date_text.split('-')[0].split('/')
    return int(month), int(day)


def festivals_around(now: datetime):
    """直近に始まった祝祭と次の祝祭の名前"""
    ordered = sorted(CELTIC_FESTIVALS, key=lambda name: _festival_start(CELTIC_FESTIVALS[name]['date']))
    today = (now.month, now.day)
    current = ordered[-1]
    upcoming = ordered[0]
    for index, name in enumerate(ordered):
        if _festival_start(CELTIC_FESTIVALS[name]['date']) <= today:
            current = name
            upcoming = ordered[(index + 1) % len(ordered)]
    return current, upcoming


def _elemental_analysis(drawn: List[DrawnFew]) -> ElementalAnalysis:
    counts = {element: 0 for element in ELEMENTS}
    for few in drawn:
        counts[few.element] += 1
    dominant = max(ELEMENTS, key=lambda element: counts[element])
    lacking = [element for element in ELEMENTS if counts[element] == 0]

    spread = max(counts.values()) - min(counts.values())
    if spread <= 1:
        balance = '完璧なエレメンタルバランス'
    elif spread <= 2:
        balance = '良好なエレメンタルバランス'
    else:
        balance = 'エレメンタルバランスの調整が必要'

    recommendation = f"{ELEMENT_QUALITIES[dominant]}が強く働いています。"
    if lacking:
        recommendation += ' ' + '。また、'.join(LACKING_ADVICE[element] for element in lacking) + '。'
    return ElementalAnalysis(
        counts=counts,
        dominant_element=dominant,
        lacking_elements=lacking,
        balance=balance,
        recommendation=recommendation,
    )


def _druid_class(drawn: List[DrawnFew]) -> str:
    elements = {few.element for few in drawn}
    if {'fire', 'air'} <= elements:
        return 'ドルイド（賢者）'
    if {'earth', 'water'} <= elements:
        return 'オヴェート（占い師）'
    return 'バード（詩人）'


def _narrative(drawn: List[DrawnFew]) -> str:
    narrative = f"聖なる森の中で、{drawn[0].tree}の古木があなたに語りかけています。"
    if len(drawn) == 1:
        narrative += f" {drawn[0].general}"
    else:
        narrative += f" {'、'.join(few.tree for few in drawn[1:])}の木々も加わり、古代ケルトの智慧を伝えています。"
        for few in drawn[1:]:
            narrative += f" {few.tree}は{few.contextual}"
    return narrative + ' オガム文字の神聖な力があなたの人生に深い洞察と導きをもたらします。'


def _warning(drawn: List[DrawnFew], elemental: ElementalAnalysis) -> str:
    warnings = []
    reversed_fews = [few for few in drawn if few.is_reversed]
    if reversed_fews:
        warnings.append(f"{reversed_fews[0].tree}の逆位置が示す注意点：自然のリズムとの不調和に気をつけてください")
    if '調整が必要' in elemental.balance:
        warnings.append('エレメンタルバランスの乱れに注意。自然との調和を取り戻すことが急務です')
    if warnings:
        return '。'.join(warnings) + '。'
    return '古代の森は平和で、特に大きな警告はありません。ただし、自然のリズムを尊重し、樹木の智慧に耳を傾け続けることが大切です。'
