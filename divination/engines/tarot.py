"""タロット占いエンジン"""
import logging
from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel

from config import settings

from ..base import BaseDivinationEngine
from ..data.tarot_cards import ALL_TAROT_CARDS
from ..exceptions import InvalidOptionError
from ..interpretation import interpret
from ..seed import LCG_MODULUS, lcg_random, shuffle

logger = logging.getLogger(__name__)

REVERSAL_THRESHOLD = 0.3

SPREADS = {
    'one-card': {
        'name': '一枚引き（今日のカード）',
        'description': '今日一日や現在の状況に対する簡潔なメッセージ',
        'positions': ['現在の状況'],
    },
    'three-card': {
        'name': '三枚引き（時系列）',
        'description': '過去・現在・未来の流れを読み解く基本的な展開',
        'positions': ['過去', '現在', '未来'],
    },
    'celtic-cross': {
        'name': 'ケルト十字展開',
        'description': '最も詳細で包括的な10枚のカード展開',
        'positions': [
            '現在の状況', '直面する課題', '遠い過去/根本原因', '近い過去', '可能な未来',
            '近い未来', 'あなたの立場', '外部からの影響', '希望と恐れ', '最終結果',
        ],
    },
    'relationship': {
        'name': '関係性スプレッド',
        'description': '二人の関係性を詳しく読み解く7枚展開',
        'positions': ['あなたの気持ち', '相手の気持ち', '関係の現状', '課題', '外部要因', 'アドバイス', '関係の未来'],
    },
    'decision': {
        'name': '決断のスプレッド',
        'description': '重要な決断を下す際の5枚展開',
        'positions': ['現在の状況', '選択肢A', '選択肢B', '見落としている要素', '最善の道'],
    },
}

# 位置名とスプレッドごとの意味のテンプレート
POSITION_MEANINGS = {
    '現在の状況': {
        'one-card': '今日のあなたに{name}が伝えるメッセージ',
        'three-card': '現在のあなたの状況を{name}が表しています',
        'celtic-cross': '今まさに直面している状況を{name}が象徴しています',
        'relationship': '二人の関係の現状を{name}が示しています',
        'decision': '決断を迫られている現状を{name}が表しています',
    },
    '過去': {
        'three-card': '過去の出来事や影響を{name}が物語っています',
    },
    '現在': {
        'three-card': '現在のあなたの状況を{name}が表しています',
    },
    '未来': {
        'three-card': 'これから起こりうる可能性を{name}が暗示しています',
    },
    '直面する課題': {
        'celtic-cross': '乗り越えるべき課題を{name}が明確にしています',
    },
    '最終結果': {
        'celtic-cross': '向かうべき未来の方向性を{name}が示しています',
    },
    'あなたの気持ち': {
        'relationship': 'あなたの本当の気持ちを{name}が映し出しています',
    },
    '相手の気持ち': {
        'relationship': '相手の心の内を{name}が代弁しています',
    },
    '選択肢A': {
        'decision': '第一の選択肢の結果を{name}が予示しています',
    },
    '選択肢B': {
        'decision': '第二の選択肢の結果を{name}が示唆しています',
    },
}

# 質問があるときに中心として読むカードの位置
KEY_CARD_INDEX = {
    'one-card': 0,
    'three-card': 1,
    'celtic-cross': 0,
    'relationship': 5,
    'decision': 4,
}

DEFAULT_GUIDANCE = {
    'one-card': '今日一日、このカードのメッセージを心に留めて過ごしてください。',
    'three-card': '過去・現在・未来の流れを意識しながら、今を大切に生きてください。',
    'celtic-cross': '示された道筋を参考に、あなたの直感を信じて進んでください。',
    'relationship': '相手との関係性において、カードが示す洞察を活かしてください。',
    'decision': '決断の時が来ています。カードの導きに従って、勇気を持って選択してください。',
}

CATEGORY_GUIDANCE = {
    '恋愛・結婚': '{name}のエネルギーは、愛において{keywords}を大切にすることを示しています。',
    '仕事・転職': '{name}は、キャリアにおいて{keywords}が鍵となることを教えています。',
    '金運・財運': '{name}のメッセージは、豊かさを得るために{keywords}が必要だということです。',
    '健康': '{name}は、心身の健康のために{keywords}を意識することを勧めています。',
    '総合運': '{name}があなたに伝えたいのは、{keywords}の大切さです。',
}

MOON_INFLUENCE = {
    '新月': '新月の影響：新しい始まりに最適な時期。直感が冴えています。',
    '満月': '満月の影響：感情が高まりやすい時期。大きな決断は慎重に。',
    '上弦': '上弦の月の影響：行動を起こすのに良い時期。積極的に。',
    '下弦': '下弦の月の影響：手放しと浄化の時期。不要なものを整理しましょう。',
}


class DrawnCard(BaseModel):
    id: str
    name: str
    number: int
    arcana: str
    suit: Optional[str] = None
    element: Optional[str] = None
    keywords: List[str]


class TarotSpreadPosition(BaseModel):
    position: str
    card: DrawnCard
    is_reversed: bool
    meaning: str
    interpretation: str


class SpreadInfo(BaseModel):
    name: str
    type: str
    description: str


class TarotInterpretation(BaseModel):
    summary: str
    details: List[str]
    synthesis: str


class EnvironmentalInfluence(BaseModel):
    moon_phase: str
    modifier: float


class InteractiveElements(BaseModel):
    selected_by_user: bool
    selection_method: str  # 'random' または 'intuitive'
    can_reshuffle: bool = True
    timestamp: datetime


class TarotReading(BaseModel):
    """タロットリーディングの結果"""
    spread: SpreadInfo
    positions: List[TarotSpreadPosition]
    overall_message: str
    interpretation: TarotInterpretation
    environmental_influence: EnvironmentalInfluence
    personalized_guidance: str
    interactive_elements: InteractiveElements
    core_meaning: str


class TarotEngine(BaseDivinationEngine[TarotReading]):
    """78枚のデッキを使うタロットエンジン"""

    divination_type = 'tarot'

    def __init__(self, data, environment=None, options=None):
        super().__init__(data, environment, options)
        self.deck = ALL_TAROT_CARDS

    def calculate(self) -> TarotReading:
        spread_type = self._spread_type()
        spread = SPREADS[spread_type]

        seed = self.generate_seed(int(self.lunar_phase() * 1000))
        cards = self.draw_cards(seed, len(spread['positions']))
        reversals = self._reversals(seed, len(cards))

        category = self.input.question_category
        time_of_day = self.time_of_day()
        positions = []
        for index, (label, card, is_reversed) in enumerate(zip(spread['positions'], cards, reversals)):
            positions.append(TarotSpreadPosition(
                position=label,
                card=_drawn_card(card),
                is_reversed=is_reversed,
                meaning=self._position_meaning(label, card, spread_type),
                interpretation=interpret(card, label, category, time_of_day, seed + index, is_reversed),
            ))
        logger.debug(f"tarot spread={spread_type} cards={[p.card.id for p in positions]}")

        key_card = positions[KEY_CARD_INDEX[spread_type]].card
        return TarotReading(
            spread=SpreadInfo(name=spread['name'], type=spread_type, description=spread['description']),
            positions=positions,
            overall_message=self.generate_personalized_message(self._overall_message(positions)),
            interpretation=TarotInterpretation(
                summary=self._summary(positions, spread_type),
                details=[f"{p.position}：{p.meaning}。{p.interpretation}" for p in positions],
                synthesis=self._synthesis(positions, spread_type),
            ),
            environmental_influence=EnvironmentalInfluence(
                moon_phase=MOON_INFLUENCE[self.moon_phase_bucket()],
                modifier=self.get_environmental_modifier() * self.get_time_modifier(),
            ),
            personalized_guidance=self._guidance(positions, spread_type),
            interactive_elements=InteractiveElements(
                selected_by_user=self._uses_selection(len(positions)),
                selection_method='intuitive' if self._uses_selection(len(positions)) else 'random',
                timestamp=self.now(),
            ),
            core_meaning='、'.join(key_card.keywords),
        )

    def _spread_type(self) -> str:
        spread_type = self.options.spread_type
        if spread_type is None:
            spread_type = settings.default_tarot_spread if settings.default_tarot_spread in SPREADS else 'three-card'
        if spread_type not in SPREADS:
            raise InvalidOptionError(f"Unknown tarot spread: {spread_type}")
        return spread_type

    def _uses_selection(self, count: int) -> bool:
        indices = self.options.selected_card_indices
        return bool(indices) and len(indices) >= count

    def draw_cards(self, seed: int, count: int) -> List[Dict]:
        """シャッフルした山から引く。ユーザーが選んだ番号があればそれを使う"""
        if not self._uses_selection(count):
            return shuffle(self.deck, seed)[:count]

        used = set()
        cards = []
        for index in self.options.selected_card_indices[:count]:
            position = index % len(self.deck)
            # 同じカードは二度引かない
            while position in used:
                position = (position + 1) % len(self.deck)
            used.add(position)
            cards.append(self.deck[position])
        return cards

    def _reversals(self, seed: int, count: int) -> List[bool]:
        # シャッフルとは別の乱数列を使う
        state = LCG_MODULUS - 1 - seed % LCG_MODULUS
        result = []
        for _ in range(count):
            state, r = lcg_random(state)
            result.append(r < REVERSAL_THRESHOLD)
        return result

    def _position_meaning(self, position: str, card: Dict, spread_type: str) -> str:
        template = POSITION_MEANINGS.get(position, {}).get(spread_type)
        if template:
            return template.format(name=card['name'])
        return f"{position}における{card['name']}の意味"

    def _overall_message(self, positions: List[TarotSpreadPosition]) -> str:
        major_ratio = sum(1 for p in positions if p.card.arcana == 'major') / len(positions)
        if major_ratio >= 0.6:
            return '運命的な転機が訪れています。宇宙からの強いメッセージに耳を傾けてください。'
        if major_ratio >= 0.3:
            return '重要な変化の時期にあります。内なる声と外からのサインの両方に注意を向けてください。'
        return '日常の中に隠された大切なメッセージがあります。小さなサインを見逃さないでください。'

    def _summary(self, positions: List[TarotSpreadPosition], spread_type: str) -> str:
        names = [p.card.name for p in positions]
        if spread_type == 'one-card':
            return f"今日のカード{names[0]}は、{'、'.join(positions[0].card.keywords)}を象徴しています。"
        if spread_type == 'three-card':
            return f"過去の{names[0]}から現在の{names[1]}を経て、未来の{names[2]}へと続く流れが示されています。"
        if spread_type == 'celtic-cross':
            return f"ケルト十字が示す全体像：{names[0]}の現状から始まり、{names[9]}の最終結果へと向かいます。"
        if spread_type == 'relationship':
            return f"{names[0]}と{names[1]}が示す二人の関係性の真実。"
        return f"{names[0]}が示す現状から、最善の道{names[4]}へ。"

    def _synthesis(self, positions: List[TarotSpreadPosition], spread_type: str) -> str:
        modifier = self.get_time_modifier() * self.get_environmental_modifier()
        cards = [p.card for p in positions]

        if spread_type == 'one-card':
            card = cards[0]
            strength = 'このメッセージは今特に重要です。' if modifier > 1.1 else 'じっくりとこのメッセージを受け取ってください。'
            return f"{card.name}があなたに伝えたいことは明確です。{'と'.join(card.keywords)}がキーワードとなります。{strength}"

        if spread_type == 'three-card':
            past, present, future = cards
            if past.number < present.number < future.number:
                flow = '上昇の流れにあります。'
            elif past.number > present.number > future.number:
                flow = '内省と見直しの時期です。'
            else:
                flow = '変化と転換の時期にあります。'
            strength = '今は特に強いエネルギーが働いています。' if modifier > 1.1 else '穏やかなエネルギーの中にいます。'
            return (
                f"{flow}{past.name}から{present.name}を経て{future.name}へと向かう流れは、"
                f"あなたの{self.input.question_category or '人生'}において重要な意味を持ちます。{strength}"
            )

        if spread_type == 'celtic-cross':
            major_count = sum(1 for card in cards if card.arcana == 'major')
            if major_count >= 5:
                core = '運命的な転換期にあります。宇宙からの強いメッセージを受け取ってください。'
            else:
                core = '日常の中で着実な変化が起きています。小さなサインを大切にしてください。'
            return f"{core} {cards[0].name}の現状から始まり、{cards[9].name}の結果へと向かう道筋が示されています。"

        if spread_type == 'relationship':
            return (
                f"{cards[0].name}と{cards[1].name}が示す二人の心の状態から、"
                f"{cards[2].name}という現在の関係性が生まれています。"
                f"{cards[5].name}のアドバイスに従うことで、{cards[6].name}の未来が待っています。"
            )

        current, option_a, option_b, hidden, best = cards
        return (
            f"{current.name}の現状において、{option_a.name}と{option_b.name}という二つの道があります。"
            f"しかし、{hidden.name}が示す見落としている要素を考慮すると、"
            f"{best.name}が最善の道として浮かび上がります。"
        )

    def _guidance(self, positions: List[TarotSpreadPosition], spread_type: str) -> str:
        if not self.input.question:
            return DEFAULT_GUIDANCE[spread_type]

        key_card = positions[KEY_CARD_INDEX[spread_type]].card
        template = CATEGORY_GUIDANCE.get(self.category, CATEGORY_GUIDANCE['総合運'])
        guidance = template.format(name=key_card.name, keywords='、'.join(key_card.keywords))

        additional = ''
        if spread_type == 'celtic-cross':
            additional = f"最終的に{positions[9].card.name}が示す結果へと向かいます。"
        elif spread_type == 'relationship':
            additional = f"二人の未来は{positions[6].card.name}が暗示しています。"
        elif spread_type == 'decision':
            additional = f"{positions[4].card.name}が最善の選択を示しています。"
        return f"「{self.input.question}」という問いに対して、{guidance} {additional}".rstrip()

    # UIから使う公開メソッド

    def get_deck_size(self) -> int:
        return len(self.deck)

    def get_card_preview(self, index: int) -> Optional[Dict]:
        if index < 0 or index >= len(self.deck):
            return None
        return self.deck[index]

    def get_available_spreads(self) -> List[Dict]:
        return [
            {
                'type': spread_type,
                'name': spread['name'],
                'description': spread['description'],
                'card_count': len(spread['positions']),
            }
            for spread_type, spread in SPREADS.items()
        ]


def _drawn_card(card: Dict) -> DrawnCard:
    return DrawnCard(
        id=card['id'],
        name=card['name'],
        number=card['number'],
        arcana=card['arcana'],
        suit=card.get('suit'),
        element=card.get('element'),
        keywords=card['keywords'],
    )
