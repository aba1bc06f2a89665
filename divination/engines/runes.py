"""ルーン占いエンジン"""
import logging
from typing import Dict, List, Optional

from pydantic import BaseModel

from ..base import BaseDivinationEngine
from ..data.runes import RUNE_SYSTEM_INFO, get_rune_system
from ..exceptions import InvalidOptionError
from ..interpretation import CATEGORY_KEYS, MEANING_KEYS
from ..seed import LCG_MODULUS, draw_without_replacement, lcg_random

logger = logging.getLogger(__name__)

REVERSAL_THRESHOLD = 0.3
DEFAULT_TEMPERATURE = 10

SPREADS = {
    'single': {
        'name': '単一ルーン',
        'positions': ['現在のメッセージ'],
        'present': 0,
    },
    'three-rune': {
        'name': 'ノルンの三姉妹（過去・現在・未来）',
        'positions': ['過去（ウルズ）', '現在（ヴェルザンディ）', '未来（スクルド）'],
        'present': 1,
    },
    'five-rune': {
        'name': '五ルーンの十字',
        'positions': ['現在', '過去', '未来', '根本', '可能性'],
        'present': 0,
    },
    'nine-rune': {
        'name': '九ルーン（ノルンの織物）',
        'positions': [
            '過去の表層', '過去の深層', '過去の根源',
            '現在の表層', '現在の深層', '現在の根源',
            '未来の表層', '未来の深層', '未来の根源',
        ],
        'present': 4,
    },
}

AETT_NAMES = {1: 'フレイヤのアエット', 2: 'ハガルのアエット', 3: 'ティールのアエット'}

ELEMENT_KEYS = {'火': 'fire', '水': 'water', '地': 'earth', '風': 'wind'}

RUNE_GUIDANCE = {
    'Fehu': '物質的な基盤を大切にしながら、精神的な豊かさも追求しましょう',
    'Uruz': '内なる力を信じて、勇気を持って前進してください',
    'Thurisaz': '慎重さと大胆さのバランスを保ちながら行動しましょう',
    'Ansuz': 'コミュニケーションを大切にし、知恵を求めてください',
    'Raidho': '人生の旅を楽しみ、正しいリズムを見つけましょう',
    'Kenaz': '創造的なエネルギーを活用し、内なる光を輝かせてください',
    'Gebo': '与えることと受け取ることのバランスを保ちましょう',
    'Wunjo': '喜びを見つけ、それを他者と分かち合ってください',
    'Hagalaz': '変化を受け入れ、破壊から新しい創造が生まれることを信じましょう',
    'Nauthiz': '制限の中に学びがあることを理解し、忍耐強く進みましょう',
    'Isa': '一時的な停滞を内省の機会として活用してください',
    'Jera': '適切なタイミングを待ち、努力の実りを信じましょう',
    'Eihwaz': '信頼できる基盤を築き、着実に前進してください',
    'Perthro': '運命の流れを信頼し、直感に従って行動しましょう',
    'Algiz': '高次の自己とつながり、スピリチュアルな保護を求めてください',
    'Sowilo': '内なる太陽を輝かせ、成功への道を照らしましょう',
    'Tiwaz': '正義と勇気を持って、必要な犠牲を恐れずに進んでください',
    'Berkano': '新しい成長を育み、母なる地球とのつながりを大切にしましょう',
    'Ehwaz': 'パートナーシップを大切にし、信頼関係を築いてください',
    'Mannaz': '人間性を大切にし、他者との協力を求めましょう',
    'Laguz': '感情の流れに身を任せ、直感を信じてください',
    'Ingwaz': '内なる種を育て、適切な時期の開花を待ちましょう',
    'Dagaz': '新しい夜明けを迎える準備をし、変容を歓迎してください',
    'Othala': '自分のルーツを大切にし、受け継いだ遺産を活用しましょう',
}

TIMING_INDICATORS = {
    'Fehu': '1〜2ヶ月以内に動きがあるでしょう',
    'Uruz': '力強い変化は3ヶ月以内に現れます',
    'Thurisaz': '突然の展開に備えてください（数週間以内）',
    'Ansuz': 'メッセージは近日中に届きます',
    'Raidho': '旅や移動は2〜3ヶ月後が最適',
    'Kenaz': '創造的な成果は6週間後に現れます',
    'Gebo': 'パートナーシップは1ヶ月以内に形成されます',
    'Wunjo': '喜びは間もなく訪れます（2〜3週間）',
    'Hagalaz': '変化は予測不能ですが、確実に訪れます',
    'Nauthiz': '忍耐が必要な期間は3〜6ヶ月',
    'Isa': '停滞期間は1〜2ヶ月続きます',
    'Jera': '収穫の時期は半年〜1年後',
    'Eihwaz': '着実な進展には4〜5ヶ月かかります',
    'Perthro': '運命的な出来事は予測不能な時期に',
    'Algiz': '保護期間は向こう3ヶ月間',
    'Sowilo': '成功は1〜2ヶ月以内に明らかに',
    'Tiwaz': '正義の実現には2〜4ヶ月',
    'Berkano': '新しい始まりは春（または3ヶ月後）',
    'Ehwaz': '進展は着実に、2ヶ月ごとに確認を',
    'Mannaz': '人間関係の変化は6週間以内',
    'Laguz': '感情的な解決には2〜3ヶ月',
    'Ingwaz': '内的成長の完成には半年',
    'Dagaz': '突破口は夜明けと共に（または1ヶ月以内）',
    'Othala': '遺産や伝統に関する事柄は長期的視点で',
}

CATEGORY_RUNES = {
    '恋愛・結婚': {
        'Gebo': 'パートナーシップの本質を理解することが鍵です',
        'Wunjo': '喜びと調和に満ちた関係が築けるでしょう',
        'Berkano': '新しい関係の始まりや成長の時期です',
        'Mannaz': '相手を一人の人間として理解することが大切',
        'Laguz': '感情の流れに身を任せ、直感を信じてください',
    },
    '仕事・転職': {
        'Fehu': '経済的成功と新しいプロジェクトの始まり',
        'Raidho': 'キャリアの旅路において正しい方向に進んでいます',
        'Kenaz': '創造的な才能を仕事に活かす時',
        'Jera': 'これまでの努力が実を結ぶ収穫の時期',
        'Tiwaz': 'リーダーシップと正義を持って進む時',
    },
    '金運・財運': {
        'Fehu': '物質的豊かさが訪れる兆し',
        'Jera': '投資や努力の成果が現れる時期',
        'Othala': '遺産や不動産に関する幸運',
        'Ingwaz': '将来の豊かさのための種まきの時',
    },
    '健康': {
        'Uruz': '強い生命力と健康に恵まれています',
        'Kenaz': '病気からの回復、健康の改善',
        'Sowilo': '活力とエネルギーに満ちた状態',
        'Berkano': '癒しと再生のエネルギー',
    },
}

CATEGORY_FALLBACKS = {
    '恋愛・結婚': '{meaning}のエネルギーが恋愛に影響しています。',
    '仕事・転職': '{meaning}の質が仕事に反映されています。',
    '金運・財運': '{meaning}が財運に影響しています。',
    '健康': '{meaning}の状態が健康に反映されています。',
}

AUSPICIOUS_RUNES = ('Fehu', 'Wunjo', 'Jera', 'Sowilo', 'Dagaz', 'Ingwaz')

SEASONAL_RUNES = {
    '春': ('Berkano', 'Ingwaz', 'Jera'),
    '夏': ('Sowilo', 'Dagaz', 'Fehu'),
    '秋': ('Jera', 'Othala', 'Hagalaz'),
    '冬': ('Isa', 'Nauthiz', 'Eihwaz'),
}


class DrawnRune(BaseModel):
    name: str
    symbol: str
    meaning: str
    element: str
    keywords: List[str]
    aett: Optional[int] = None
    # ヤンガー・アングロサクソンのルーンはエルダー側の名前でテーブルを引く
    elder_name: str


class RunePosition(BaseModel):
    position: str
    rune: DrawnRune
    is_reversed: bool
    interpretation: str


class RuneOverall(BaseModel):
    message: str
    guidance: str
    challenges: str
    opportunities: str


class RuneReading(BaseModel):
    """ルーンキャストの結果"""
    system: str
    system_name: str
    spread_type: str
    spread_name: str
    positions: List[RunePosition]
    elements: Dict[str, float]
    aett_balance: Optional[Dict[str, int]] = None
    overall: RuneOverall
    timing: str
    personal_message: str
    environmental_influence: str
    core_meaning: str


class RunesEngine(BaseDivinationEngine[RuneReading]):
    """エルダー・ヤンガー・アングロサクソンの3体系に対応したルーンエンジン"""

    divination_type = 'runes'

    def calculate(self) -> RuneReading:
        system = self.options.rune_system
        runes = get_rune_system(system)
        if runes is None:
            raise InvalidOptionError(f"Unknown rune system: {system}")
        spread_type = self.options.rune_spread
        if spread_type not in SPREADS:
            raise InvalidOptionError(f"Unknown rune spread: {spread_type}")
        spread = SPREADS[spread_type]

        seed = self.generate_seed(self.environment_factor())
        drawn = draw_without_replacement(runes, len(spread['positions']), seed)
        reversals = _reversals(seed, len(drawn))

        positions = [
            RunePosition(
                position=label,
                rune=_drawn_rune(rune),
                is_reversed=is_reversed and rune.get('can_reverse', True),
                interpretation=self._interpret(rune, label, is_reversed and rune.get('can_reverse', True)),
            )
            for label, rune, is_reversed in zip(spread['positions'], drawn, reversals)
        ]
        logger.debug(f"runes system={system} spread={spread_type} runes={[p.rune.name for p in positions]}")

        present = positions[spread['present']]
        return RuneReading(
            system=system,
            system_name=RUNE_SYSTEM_INFO[system]['name'],
            spread_type=spread_type,
            spread_name=spread['name'],
            positions=positions,
            elements=_element_balance(positions),
            aett_balance=_aett_balance(positions) if system == 'elder' else None,
            overall=RuneOverall(
                message=_flow_message(positions),
                guidance=self._guidance(positions, present),
                challenges=_challenges(positions),
                opportunities=_opportunities(positions),
            ),
            timing=_timing(positions[-1]),
            personal_message=self._personal_message(positions, present),
            environmental_influence=self._environmental_influence(positions),
            core_meaning=present.rune.meaning,
        )

    def environment_factor(self) -> float:
        if not self.environment:
            return 0
        temperature = DEFAULT_TEMPERATURE
        if self.environment.weather and self.environment.weather.temperature:
            temperature = self.environment.weather.temperature
        return temperature * 50 + self.lunar_phase() * 500

    def _interpret(self, rune: Dict, position: str, is_reversed: bool) -> str:
        category_key = MEANING_KEYS[CATEGORY_KEYS.get(self.input.question_category, 'general')]
        texts = rune['interpretations']['reversed' if is_reversed else 'upright']
        base = texts.get(category_key) or texts.get('general') or '、'.join(rune['keywords'])

        if position.startswith('過去'):
            return f"過去において、{base}"
        if position.startswith('現在'):
            return f"現在、{base}"
        if position.startswith('未来'):
            return f"未来に向けて、{base}"
        return f"{position}：{base}"

    def _guidance(self, positions: List[RunePosition], present: RunePosition) -> str:
        future = positions[-1]
        guidance = RUNE_GUIDANCE.get(_elder_name(present.rune), '現在の状況を受け入れ、内なる知恵に従ってください')
        guidance += '。'
        if present.is_reversed:
            guidance += 'また、現在は挑戦的な時期ですが、これは成長の機会でもあります。'
        if len(positions) > 1:
            if future.is_reversed:
                guidance += '未来の課題に備えて、今から対策を講じることが大切です。'
            else:
                guidance += f"未来の{future.rune.name}が示す{future.rune.meaning}に向けて準備を整えましょう。"
        return guidance

    def _personal_message(self, positions: List[RunePosition], present: RunePosition) -> str:
        if not self.input.question:
            return 'ルーンの古代の知恵があなたの道を照らしています。'

        message = f"「{self.input.question}」について、{present.rune.name}（{present.rune.meaning}）のルーンは"
        category = self.category
        if category in CATEGORY_RUNES:
            text = CATEGORY_RUNES[category].get(_elder_name(present.rune))
            message += text or CATEGORY_FALLBACKS[category].format(meaning=present.rune.meaning)
            if category == '金運・財運' and any(p.is_reversed for p in positions):
                message += 'ただし、慎重な金銭管理が必要です。'
            return message

        names = '、'.join(p.rune.name for p in positions)
        return message + f"{names}の組み合わせが、あなたの人生の現在の章を物語っています。古代の知恵に耳を傾けてください。"

    def _environmental_influence(self, positions: List[RunePosition]) -> str:
        if not self.environment:
            return ''
        influence = '自然環境との共鳴：'
        season = _season(self.now().month)
        names = {_elder_name(p.rune) for p in positions}
        if names & set(SEASONAL_RUNES[season]):
            influence += f"現在の{season}と調和するルーンが現れており、自然の流れに乗っています。"

        weather = self.environment.weather
        if weather:
            if weather.condition in ('晴れ', 'clear') and 'Sowilo' in names:
                influence += '晴天とソウェイロ（太陽）のルーンが共鳴し、成功のエネルギーが高まっています。'
            elif weather.condition in ('雨', 'rain') and 'Laguz' in names:
                influence += '雨とラグズ（水）のルーンが調和し、感情的な浄化が促されています。'
        return influence


def _reversals(seed: int, count: int) -> List[bool]:
    state = LCG_MODULUS - 1 - seed % LCG_MODULUS
    result = []
    for _ in range(count):
        state, r = lcg_random(state)
        result.append(r < REVERSAL_THRESHOLD)
    return result


def _drawn_rune(rune: Dict) -> DrawnRune:
    return DrawnRune(
        name=rune['name'],
        symbol=rune['symbol'],
        meaning=rune['meaning'],
        element=rune['element'],
        keywords=rune['keywords'],
        aett=rune.get('aett'),
        elder_name=rune.get('elder_counterpart', rune['name']),
    )


def _elder_name(rune: DrawnRune) -> str:
    return rune.elder_name


def _element_balance(positions: List[RunePosition]) -> Dict[str, float]:
    elements = {'fire': 0, 'water': 0, 'earth': 0, 'wind': 0}
    for position in positions:
        key = ELEMENT_KEYS.get(position.rune.element)
        if key:
            elements[key] += 1
        else:
            for key in elements:
                elements[key] += 0.25
    return elements


def _aett_balance(positions: List[RunePosition]) -> Dict[str, int]:
    balance = {name: 0 for name in AETT_NAMES.values()}
    for position in positions:
        if position.rune.aett in AETT_NAMES:
            balance[AETT_NAMES[position.rune.aett]] += 1
    return balance


def _flow_message(positions: List[RunePosition]) -> str:
    first, last = positions[0].rune, positions[-1].rune
    if len(positions) == 1:
        return f"{first.name}（{first.meaning}）があなたへの答えを示しています。"
    middle = positions[len(positions) // 2].rune
    return (
        f"{first.name}（{first.meaning}）から{middle.name}（{middle.meaning}）を経て、"
        f"{last.name}（{last.meaning}）へと向かう流れが示されています。"
    )


def _challenges(positions: List[RunePosition]) -> str:
    reversed_runes = [p for p in positions if p.is_reversed]
    if not reversed_runes:
        return '大きな障害は見当たりませんが、油断は禁物です。'
    return '注意すべき課題：' + '、'.join(
        f"{p.position}における{p.rune.meaning}の逆の影響" for p in reversed_runes
    )


def _opportunities(positions: List[RunePosition]) -> str:
    upright = [p for p in positions if not p.is_reversed]
    if not upright:
        return '困難な時期ですが、それが大きな学びと成長の機会となります。'
    text = '活用すべき機会：'
    if any(_elder_name(p.rune) in AUSPICIOUS_RUNES for p in upright):
        text += '特に幸運なルーンが現れています。'
    meanings = [p.rune.meaning for p in upright]
    text += f"{meanings[0]}のエネルギーを最大限に活用し"
    for meaning in meanings[1:]:
        text += f"、{meaning}"
    return text + 'を通じて成長してください。'


def _timing(future: RunePosition) -> str:
    timing = TIMING_INDICATORS.get(_elder_name(future.rune), '時期は流動的ですが、3ヶ月以内に明確になるでしょう。')
    if future.is_reversed:
        timing += ' ただし、逆位置のため遅延や障害が予想されます。'
    return timing


def _season(month: int) -> str:
    if 3 <= month <= 5:
        return '春'
    if 6 <= month <= 8:
        return '夏'
    if 9 <= month <= 11:
        return '秋'
    return '冬'
