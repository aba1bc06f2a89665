"""易経エンジン（筮竹法・三枚硬貨法・梅花易数・時間共鳴法）"""
import logging
from datetime import datetime, timedelta
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel

from ..base import BaseDivinationEngine
from ..data.iching_hexagrams import (
    HEXAGRAMS, TRIGRAM_ORDER, TRIGRAMS, get_hexagram_by_binary, trigram_binary,
)
from ..exceptions import InvalidOptionError
from ..seed import cast_line, lcg_random

logger = logging.getLogger(__name__)

DEFAULT_TEMPERATURE = 20

CASTING_METHODS = {
    'yarrow': {
        'description': '筮竹法（49本の筮竹を用いた伝統的手法）',
        'authenticity': 1.0,
        'factors': ['正確な確率分布', '三変による導出', '陰陽の自然な流れ'],
        'probabilities': [(6, 1 / 16, '老陰 - 極まりて変ず'), (7, 5 / 16, '少陽 - 成長する陽'),
                          (8, 7 / 16, '少陰 - 安定する陰'), (9, 3 / 16, '老陽 - 極まりて変ず')],
    },
    'coins': {
        'description': '三枚硬貨法（簡便法）',
        'authenticity': 0.7,
        'factors': ['均等確率', '簡便性', '広く普及'],
        'probabilities': [(6, 1 / 8, '老陰'), (7, 3 / 8, '少陽'), (8, 3 / 8, '少陰'), (9, 1 / 8, '老陽')],
    },
    'plum': {
        'description': '梅花易数（時間と数による導出）',
        'authenticity': 0.9,
        'factors': ['年月日時の数理', '先天数', '自然の摂理'],
        'probabilities': [],
    },
    'time': {
        'description': '時間共鳴法（瞬間の宇宙的配置）',
        'authenticity': 0.8,
        'factors': ['宇宙的タイミング', '共時性', '量子的確率'],
        'probabilities': [],
    },
}

LINE_TYPES = {
    6: '老陰（×）',
    7: '少陽（━）',
    8: '少陰（- -）',
    9: '老陽（○）',
}

LINE_TIMELINES = [
    '始まりの段階（1-2週間）',
    '発展の段階（2-4週間）',
    '転換の段階（1-2ヶ月）',
    '成熟の段階（2-3ヶ月）',
    '完成の段階（3-4ヶ月）',
    '新たな始まり（4-6ヶ月）',
]

TRIGRAM_FAMILY = {'☰': '父', '☷': '母', '☳': '長男', '☵': '次男', '☶': '少男', '☴': '長女', '☲': '次女', '☱': '少女'}
TRIGRAM_BODY = {'☰': '頭', '☷': '腹', '☳': '足', '☵': '耳', '☶': '手', '☴': '股', '☲': '目', '☱': '口'}
TRIGRAM_FIVE_ELEMENTS = {'☰': '金', '☷': '土', '☳': '木', '☵': '水', '☶': '土', '☴': '木', '☲': '火', '☱': '金'}

# 五行の相生・相剋
GENERATES = {'木': '火', '火': '土', '土': '金', '金': '水', '水': '木'}
CONTROLS = {'木': '土', '土': '水', '水': '火', '火': '金', '金': '木'}

CATEGORY_ADVICE = {
    '恋愛・結婚': ({31: '感応し合う自然な関係を大切に', 32: '恒久的な関係を築く好機',
                   54: '立場の違いを理解し慎重に', 53: '段階を踏んで着実に関係を深める'},
                  '誠実さと思いやりを持って向き合いましょう。'),
    '仕事・転職': ({1: '主導権を持って新プロジェクトを', 14: '大きな成功と富が期待できる',
                   46: '着実な昇進が見込める', 64: '完成まであと少し、最後まで油断せずに'},
                  '現在の道を信じて進みましょう。'),
    '金運・財運': ({14: '大いなる富を得る暗示', 55: '豊かさの頂点、賢明な管理を',
                   42: '利益と成長の好機', 5: '待つことで良い機会が訪れる'},
                  '堅実な姿勢で臨みましょう。'),
    '健康': ({1: '活力に満ち健康状態良好', 16: '楽観的な心が健康を支える',
             29: '注意が必要、無理は禁物', 58: '喜びと笑いが最良の薬'},
            'バランスの取れた生活を心がけましょう。'),
}

DANGEROUS_HEXAGRAMS = (23, 29, 39, 47, 63)
CHALLENGING_HEXAGRAMS = (29, 39, 47, 63)
AUSPICIOUS_HEXAGRAMS = (1, 14, 19, 35, 55)
FAST_HEXAGRAMS = (1, 51, 57)
SLOW_HEXAGRAMS = (2, 52, 39)
KEY_DATE_OFFSETS = (7, 21, 49)


class CastingLine(BaseModel):
    position: int
    value: int
    changing: bool
    type: str


class HexagramInfo(BaseModel):
    number: int
    name: str
    chinese_name: str
    upper_trigram: str
    lower_trigram: str
    binary: str  # 初爻から上へ
    judgment: str
    image: str
    interpretation: str
    keywords: List[str]


class TrigramAnalysis(BaseModel):
    symbol: str
    name: str
    element: str
    five_element: str
    family: str
    body: str
    nature: str


class HexagramComposition(BaseModel):
    upper_trigram: TrigramAnalysis
    lower_trigram: TrigramAnalysis
    trigram_relationship: str
    nuclear_hexagram: int
    opposite_hexagram: int
    inverse_hexagram: int


class ChangingLine(BaseModel):
    position: int
    value: int
    text: str
    meaning: str
    warning: str
    opportunity: str
    transformation: str
    timeline: str


class CastingInfo(BaseModel):
    method: str
    description: str
    steps: List[str]
    seed: int
    authenticity: float
    authentic_factors: List[str]
    probabilities: List[Dict]


class YinYangBalance(BaseModel):
    yin_count: int
    yang_count: int
    balance: float
    tendency: str
    advice: str


class IChingInterpretation(BaseModel):
    situation: str
    advice: str
    warning: str
    outcome: str
    timing: str
    core_message: str
    hidden_message: str
    yin_yang_balance: YinYangBalance


class TemporalResonance(BaseModel):
    daily_hexagram: HexagramInfo
    monthly_hexagram: HexagramInfo
    yearly_hexagram: HexagramInfo
    seasonal_alignment: str
    cosmic_timing: str


class PracticalGuidance(BaseModel):
    action_steps: List[str]
    avoidances: List[str]
    opportunities: List[str]
    challenges: List[str]
    key_dates: List[datetime]


class IChingResult(BaseModel):
    """易経の占断結果"""
    lines: List[CastingLine]
    primary_hexagram: HexagramInfo
    changing_hexagram: Optional[HexagramInfo] = None
    changing_lines: List[ChangingLine]
    composition: HexagramComposition
    casting: CastingInfo
    interpretation: IChingInterpretation
    temporal_resonance: TemporalResonance
    practical_guidance: PracticalGuidance
    five_elements: Dict[str, int]
    personalized_guidance: str
    core_meaning: str


# 卦の変換

def lines_to_binary(values: List[int]) -> str:
    return ''.join('1' if value in (7, 9) else '0' for value in values)


def transform_lines(values: List[int]) -> List[int]:
    """変爻を反転させる（9→8、6→7）"""
    flips = {9: 8, 6: 7}
    return [flips.get(value, value) for value in values]


def hexagram_binary(hexagram: Dict) -> str:
    return trigram_binary(hexagram['lower_trigram']) + trigram_binary(hexagram['upper_trigram'])


def nuclear_hexagram(hexagram: Dict) -> Dict:
    """互卦: 2〜4爻を下卦、3〜5爻を上卦とする"""
    binary = hexagram_binary(hexagram)
    return get_hexagram_by_binary(binary[1:4] + binary[2:5])


def opposite_hexagram(hexagram: Dict) -> Dict:
    """錯卦: すべての爻の陰陽を反転"""
    binary = hexagram_binary(hexagram)
    return get_hexagram_by_binary(''.join('0' if bit == '1' else '1' for bit in binary))


def inverse_hexagram(hexagram: Dict) -> Dict:
    """綜卦: 卦を上下逆さにする"""
    return get_hexagram_by_binary(hexagram_binary(hexagram)[::-1])


class IChingEngine(BaseDivinationEngine[IChingResult]):
    """易経エンジン"""

    divination_type = 'iching'

    def calculate(self) -> IChingResult:
        method = self.select_casting_method()
        values, steps, seed = self._cast(method)
        lines = [
            CastingLine(position=i + 1, value=value, changing=value in (6, 9), type=LINE_TYPES[value])
            for i, value in enumerate(values)
        ]

        primary = get_hexagram_by_binary(lines_to_binary(values))
        changing_positions = [line.position for line in lines if line.changing]
        changing = get_hexagram_by_binary(lines_to_binary(transform_lines(values))) if changing_positions else None
        logger.debug(
            f"iching method={method} primary={primary['number']} "
            f"changing={changing['number'] if changing else None}"
        )

        changing_lines = [self._changing_line(primary, changing, line) for line in lines if line.changing]
        info = CASTING_METHODS[method]
        interpretation = self._interpretation(primary, changing, changing_lines)

        return IChingResult(
            lines=lines,
            primary_hexagram=_hexagram_info(primary),
            changing_hexagram=_hexagram_info(changing) if changing else None,
            changing_lines=changing_lines,
            composition=self._composition(primary),
            casting=CastingInfo(
                method=method,
                description=info['description'],
                steps=steps,
                seed=seed,
                authenticity=info['authenticity'],
                authentic_factors=info['factors'],
                probabilities=[
                    {'value': value, 'probability': probability, 'meaning': meaning}
                    for value, probability, meaning in info['probabilities']
                ],
            ),
            interpretation=interpretation,
            temporal_resonance=self._temporal_resonance(),
            practical_guidance=self._practical_guidance(primary, changing, changing_lines),
            five_elements=_five_elements(primary),
            personalized_guidance=self.generate_personalized_message(interpretation.advice),
            core_meaning=interpretation.core_message,
        )

    def select_casting_method(self) -> str:
        """質問の性質に応じて占法を選ぶ（明示指定があればそれを使う）"""
        method = self.options.casting_method
        if method is not None:
            if method not in CASTING_METHODS:
                raise InvalidOptionError(f"Unknown casting method: {method}")
            return method

        question = self.input.question
        if not question:
            return 'yarrow'
        if 'タイミング' in question or 'いつ' in question:
            return 'plum'
        if self.input.question_category == '総合運':
            return 'yarrow'
        if len(question) < 20:
            return 'coins'
        return 'yarrow'

    def environment_factor(self) -> float:
        if not self.environment:
            return 0
        temperature = DEFAULT_TEMPERATURE
        if self.environment.weather and self.environment.weather.temperature is not None:
            temperature = self.environment.weather.temperature
        return temperature * 100 + self.lunar_phase() * 1000

    # 占法

    def _cast(self, method: str) -> Tuple[List[int], List[str], int]:
        if method == 'plum':
            return self._cast_plum()
        if method == 'time':
            return self._cast_time()
        seed = self.generate_seed(self.environment_factor())
        if method == 'coins':
            values, steps = _cast_coins(seed)
        else:
            values, steps = _cast_yarrow(seed)
        return values, steps, seed

    def _cast_plum(self) -> Tuple[List[int], List[str], int]:
        now = self.now()
        base = now.year + now.month + now.day
        upper_number = base % 8 or 8
        lower_number = (base + now.hour) % 8 or 8
        moving_line = (base + now.hour) % 6 or 6

        upper = TRIGRAM_ORDER[upper_number - 1]
        lower = TRIGRAM_ORDER[lower_number - 1]
        steps = [
            f"上卦数: {upper_number}（{upper}）",
            f"下卦数: {lower_number}（{lower}）",
            f"動爻: 第{moving_line}爻",
        ]

        values = []
        for i, bit in enumerate(trigram_binary(lower) + trigram_binary(upper)):
            moving = i == moving_line - 1
            if bit == '1':
                values.append(9 if moving else 7)
            else:
                values.append(6 if moving else 8)
        return values, steps, 0

    def _cast_time(self) -> Tuple[List[int], List[str], int]:
        now = self.now()
        seed = now.microsecond // 1000 + now.second * 1000 + now.minute * 60000
        state = seed
        values = []
        for _ in range(6):
            state = (state * 9301 + 49297) % 233280
            values.append(6 + state % 4)
        steps = [f"第{i + 1}爻: {LINE_TYPES[value]}" for i, value in enumerate(values)]
        return values, steps, seed

    # 解釈

    def _changing_line(self, primary: Dict, changing: Optional[Dict], line: CastingLine) -> ChangingLine:
        position = line.position
        return ChangingLine(
            position=position,
            value=line.value,
            text=primary['lines'][position - 1],
            meaning=f"第{position}爻が示す重要な転換点",
            warning=f"第{position}爻の変化に注意",
            opportunity=f"第{position}爻の変化がもたらす新しい可能性",
            transformation='陽極まりて陰に転ず' if line.value == 9 else '陰極まりて陽に転ず',
            timeline=LINE_TIMELINES[position - 1],
        )

    def _composition(self, hexagram: Dict) -> HexagramComposition:
        upper = _trigram_analysis(hexagram['upper_trigram'])
        lower = _trigram_analysis(hexagram['lower_trigram'])
        return HexagramComposition(
            upper_trigram=upper,
            lower_trigram=lower,
            trigram_relationship=_trigram_relationship(upper.five_element, lower.five_element),
            nuclear_hexagram=nuclear_hexagram(hexagram)['number'],
            opposite_hexagram=opposite_hexagram(hexagram)['number'],
            inverse_hexagram=inverse_hexagram(hexagram)['number'],
        )

    def _interpretation(self, primary: Dict, changing: Optional[Dict],
                        changing_lines: List[ChangingLine]) -> IChingInterpretation:
        situation = primary['interpretation']
        if changing_lines:
            situation += f" 現在、{len(changing_lines)}つの要素が変化の過程にあります。"
            if len(changing_lines) == 1:
                situation += f"特に第{changing_lines[0].position}爻が重要な転換点を示しています。"
            elif len(changing_lines) >= 4:
                situation += '大きな変革期にあり、根本的な変化が起こりつつあります。'

        advice = primary['image'] + ' ' + self._category_advice(primary)
        if changing_lines:
            advice += ' 変化に対しては、' + changing_lines[0].opportunity
        advice = advice.strip()

        warning = ''
        if primary['number'] in DANGEROUS_HEXAGRAMS:
            warning = '困難や試練が予想されます。慎重な対処が必要です。'
        if len(changing_lines) >= 4:
            warning += ' 大きな変化の時期です。急激な変化に備えてください。'
        warning = warning.strip() or '順調ですが、油断は禁物です。'

        if changing:
            outcome = f"現在の{primary['name']}の状況から、{changing['name']}へと移行していきます。{changing['interpretation']}"
            core_message = f"{primary['judgment']}から{changing['judgment']}への変化の中に真理があります。"
        else:
            outcome = f"{primary['name']}の状態が継続します。{primary['judgment']}の姿勢を保つことが大切です。"
            core_message = primary['judgment']

        if primary['number'] in FAST_HEXAGRAMS:
            timing = '数日から数週間で結果が現れるでしょう。'
        elif primary['number'] in SLOW_HEXAGRAMS:
            timing = '数ヶ月から半年程度の時間が必要です。'
        else:
            timing = '1〜3ヶ月程度で状況が明確になるでしょう。'

        if not changing_lines:
            hidden = '安定の中に成長の種が隠されています。'
        elif len(changing_lines) == 6:
            hidden = '完全な変化は新たな始まりを意味します。'
        else:
            hidden = f"{len(changing_lines)}つの変化が示す深い意味を見つめてください。"

        return IChingInterpretation(
            situation=situation,
            advice=advice,
            warning=warning,
            outcome=outcome,
            timing=timing,
            core_message=core_message,
            hidden_message=hidden,
            yin_yang_balance=_yin_yang_balance(primary),
        )

    def _category_advice(self, primary: Dict) -> str:
        category = self.input.question_category
        if not category:
            return ''
        if category == '総合運':
            return f"{primary['judgment']}の精神で臨むことが成功への鍵となります。"
        if category not in CATEGORY_ADVICE:
            return ''
        table, default = CATEGORY_ADVICE[category]
        return table.get(primary['number'], default)

    def _temporal_resonance(self) -> TemporalResonance:
        now = self.now()
        if self.moon_phase_bucket() == '新月':
            cosmic = '新月の神秘的なエネルギーが高まる時'
        elif self.moon_phase_bucket() == '満月':
            cosmic = '満月の充実したエネルギーが満ちる時'
        else:
            cosmic = '宇宙のリズムと調和する時'
        season = ['冬', '春', '夏', '秋'][now.month % 12 // 3]
        return TemporalResonance(
            daily_hexagram=_hexagram_info(HEXAGRAMS[(now.day % 64 or 64) - 1]),
            monthly_hexagram=_hexagram_info(HEXAGRAMS[(now.month * 5 % 64 or 64) - 1]),
            yearly_hexagram=_hexagram_info(HEXAGRAMS[(now.year % 64 or 64) - 1]),
            seasonal_alignment=f"{season}の気と調和しています。",
            cosmic_timing=cosmic,
        )

    def _practical_guidance(self, primary: Dict, changing: Optional[Dict],
                            changing_lines: List[ChangingLine]) -> PracticalGuidance:
        steps = [f"{primary['image']}を日々実践する"]
        if '乾' in primary['name']:
            steps += ['リーダーシップを発揮する', '主体的に行動を起こす']
        elif '坤' in primary['name']:
            steps += ['周囲と協調する', '受容的な姿勢を保つ']
        if changing:
            steps.append(f"{changing['name']}への変化に備える")

        avoidances = []
        if primary['number'] == 29:
            avoidances += ['リスクの高い行動', '準備不足での挑戦']
        if changing_lines:
            avoidances.append('急激な変化への抵抗')

        opportunities = []
        if primary['number'] in AUSPICIOUS_HEXAGRAMS:
            opportunities += ['大きな成功のチャンス', '新しい始まりの好機']
        if changing:
            opportunities.append('変化による成長の機会')

        challenges = []
        if primary['number'] in CHALLENGING_HEXAGRAMS:
            challenges += ['忍耐が必要な状況', '慎重な判断が求められる']

        now = self.now()
        return PracticalGuidance(
            action_steps=steps,
            avoidances=avoidances,
            opportunities=opportunities,
            challenges=challenges,
            key_dates=[now + timedelta(days=days) for days in KEY_DATE_OFFSETS],
        )


def _cast_yarrow(seed: int) -> Tuple[List[int], List[str]]:
    values = []
    for _ in range(6):
        value, seed = cast_line(seed)
        values.append(value)
    steps = [f"第{i + 1}爻: {LINE_TYPES[value]}" for i, value in enumerate(values)]
    return values, steps


def _cast_coins(seed: int) -> Tuple[List[int], List[str]]:
    """三枚の硬貨を投げる。表（上位半分）が3、裏が2"""
    values = []
    steps = []
    for i in range(6):
        coins = []
        for _ in range(3):
            seed, r = lcg_random(seed)
            coins.append(3 if r >= 0.5 else 2)
        value = sum(coins)
        values.append(value)
        steps.append(f"第{i + 1}爻: {'+'.join(str(c) for c in coins)}={value} {LINE_TYPES[value]}")
    return values, steps


def _hexagram_info(hexagram: Dict) -> HexagramInfo:
    return HexagramInfo(
        number=hexagram['number'],
        name=hexagram['name'],
        chinese_name=hexagram['chinese_name'],
        upper_trigram=hexagram['upper_trigram'],
        lower_trigram=hexagram['lower_trigram'],
        binary=hexagram_binary(hexagram),
        judgment=hexagram['judgment'],
        image=hexagram['image'],
        interpretation=hexagram['interpretation'],
        keywords=hexagram['keywords'],
    )


def _trigram_analysis(symbol: str) -> TrigramAnalysis:
    trigram = TRIGRAMS[symbol]
    return TrigramAnalysis(
        symbol=symbol,
        name=trigram['name'],
        element=trigram['element'],
        five_element=TRIGRAM_FIVE_ELEMENTS[symbol],
        family=TRIGRAM_FAMILY[symbol],
        body=TRIGRAM_BODY[symbol],
        nature=trigram['nature'],
    )


def _trigram_relationship(upper: str, lower: str) -> str:
    if upper == lower:
        return f"上卦と下卦はともに{upper}の気で、比和の関係にあります。"
    if GENERATES[lower] == upper:
        return f"下卦の{lower}が上卦の{upper}を生む相生の関係。内なる力が外へ伸びていきます。"
    if GENERATES[upper] == lower:
        return f"上卦の{upper}が下卦の{lower}を生む相生の関係。周囲の支えが内面を育てます。"
    if CONTROLS[upper] == lower:
        return f"上卦の{upper}が下卦の{lower}を剋する相剋の関係。外圧に対する忍耐が求められます。"
    return f"下卦の{lower}が上卦の{upper}を剋する相剋の関係。内なる意志が状況を動かします。"


def _yin_yang_balance(hexagram: Dict) -> YinYangBalance:
    yang = hexagram_binary(hexagram).count('1')
    yin = 6 - yang
    if yang > yin:
        tendency, advice = '陽性優位', '積極的な行動が吉。ただし独断は避けて。'
    elif yin > yang:
        tendency, advice = '陰性優位', '受容的な姿勢が吉。流れに身を任せて。'
    else:
        tendency, advice = '陰陽均衡', '理想的なバランス。この調和を保って。'
    return YinYangBalance(yin_count=yin, yang_count=yang, balance=abs(yang - yin) / 6,
                          tendency=tendency, advice=advice)


def _five_elements(hexagram: Dict) -> Dict[str, int]:
    elements = {'木': 0, '火': 0, '土': 0, '金': 0, '水': 0}
    elements[TRIGRAM_FIVE_ELEMENTS[hexagram['upper_trigram']]] += 50
    elements[TRIGRAM_FIVE_ELEMENTS[hexagram['lower_trigram']]] += 50
    return elements
