"""オーラソーマ（イクイリブリアムボトル）エンジン"""
import hashlib
import logging
from collections import Counter
from typing import List

from pydantic import BaseModel

from ..base import BaseDivinationEngine
from ..data.aura_soma import BOTTLES, COLORS, COMBINATIONS, POMANDERS, POSITIONS, TONE_PREFIXES
from ..seed import draw_without_replacement

logger = logging.getLogger(__name__)

AURA_LAYERS = [
    ('etheric', 'エーテル体', '活力に満ちた状態', 'エネルギー補充が必要'),
    ('emotional', '感情体', '感情的に安定', '感情の浄化が必要'),
    ('mental', 'メンタル体', '明晰な思考', 'メンタルクリアリングが必要'),
    ('spiritual', 'スピリチュアル体', '高次と繋がった状態', '霊的な調整が必要'),
]


class ColorMeaning(BaseModel):
    color: str
    base_color: str
    chakra: str
    meaning: str
    emotional_state: str


class BottleReading(BaseModel):
    position: str
    position_name: str
    number: int
    name: str
    upper_color: ColorMeaning
    lower_color: ColorMeaning
    combination: str
    message: str
    affirmation: str
    interpretation: str


class AuraLayer(BaseModel):
    name: str
    colors: List[str]
    intensity: float
    clarity: float
    health: str


class ColorBalance(BaseModel):
    warm: int
    cool: int
    neutral: int
    tendency: str
    advice: str


class Pomander(BaseModel):
    name: str
    color: str
    purpose: str


class AuraSomaReading(BaseModel):
    """オーラソーマの結果"""
    soul_signature: str
    bottles: List[BottleReading]
    soul_color: str
    dominant_colors: List[str]
    missing_colors: List[str]
    aura_layers: List[AuraLayer]
    color_balance: ColorBalance
    pomanders: List[Pomander]
    daily_color: str
    guidance: str
    core_meaning: str


def base_color(color: str) -> str:
    """ペール・ミッドトーンなどの濃淡を外した基本色"""
    for prefix in TONE_PREFIXES:
        if color.startswith(prefix):
            color = color[len(prefix):]
    if color in COLORS:
        return color
    return 'クリア'


def color_meaning(color: str, position: str) -> ColorMeaning:
    base = base_color(color)
    energy = COLORS[base]
    aspect = '意識的な側面・表現される質' if position == 'upper' else '無意識的な側面・内なる資質'
    return ColorMeaning(
        color=color,
        base_color=base,
        chakra=energy['chakra'],
        meaning=f"{'、'.join(energy['keywords'])}を表す{aspect}",
        emotional_state='、'.join(energy['balanced']),
    )


def combination_for(upper: str, lower: str) -> str:
    return COMBINATIONS.get((upper, lower), f"{upper}と{lower}のエネルギーが創り出す独自の調和")


def color_balance(colors: List[str]) -> ColorBalance:
    warm = cool = neutral = 0
    for color in colors:
        nature = COLORS[base_color(color)]['warm']
        if nature is None:
            neutral += 1
        elif nature:
            warm += 1
        else:
            cool += 1
    if warm > cool:
        tendency = '暖色優位'
        advice = '情熱と行動力が高まっています。寒色で心を静める時間を持ちましょう。'
    elif cool > warm:
        tendency = '寒色優位'
        advice = '静けさと内省の時期です。暖色を取り入れて活力を補いましょう。'
    else:
        tendency = '調和'
        advice = '暖色と寒色が調和しています。今のバランスを大切にしましょう。'
    return ColorBalance(warm=warm, cool=cool, neutral=neutral, tendency=tendency, advice=advice)


class AuraSomaEngine(BaseDivinationEngine[AuraSomaReading]):
    """4本のボトル選択によるオーラソーマ・リーディング"""

    divination_type = 'aura-soma'

    def soul_digest(self) -> bytes:
        birth = self.input.birth_datetime()
        source = self.input.full_name + (birth.date().isoformat() if birth else '')
        return hashlib.sha256(source.encode('utf-8')).digest()

    def calculate(self) -> AuraSomaReading:
        digest = self.soul_digest()
        soul = BOTTLES[digest[0] % len(BOTTLES)]
        others = [bottle for bottle in BOTTLES if bottle['number'] != soul['number']]
        seed = self.generate_seed(self.get_environmental_modifier() * 100)
        selected = [soul] + draw_without_replacement(others, 3, seed)
        logger.debug(f"aura-soma bottles={[bottle['number'] for bottle in selected]}")

        readings = [self._read_bottle(bottle, position) for bottle, position in zip(selected, POSITIONS)]
        colors = [color for bottle in selected for color in (bottle['upper'], bottle['lower'])]
        base_colors = [base_color(color) for color in colors]
        counts = Counter(base_colors)
        dominant = [color for color, _ in counts.most_common(3)]
        missing = [color for color in COLORS if color not in counts][:3]
        balance = color_balance(colors)
        layers = self._aura_layers(digest, selected)

        pomander_colors = [base_color(soul['upper'])]
        complementary = COLORS[dominant[0]]['complementary']
        if complementary not in pomander_colors:
            pomander_colors.append(complementary)
        pomanders = [
            Pomander(name=POMANDERS[color][0], color=color, purpose=POMANDERS[color][1])
            for color in pomander_colors
        ]

        daily_color = missing[0] if missing else base_color(selected[2]['upper'])
        guidance = (
            f"魂のボトルは{soul['number']}番「{soul['name']}」です。{soul['message']}"
            f"今は{selected[2]['name']}のテーマに取り組んでいます。{balance.advice}"
        )
        return AuraSomaReading(
            soul_signature=digest.hex()[:16],
            bottles=readings,
            soul_color=soul['upper'],
            dominant_colors=dominant,
            missing_colors=missing,
            aura_layers=layers,
            color_balance=balance,
            pomanders=pomanders,
            daily_color=daily_color,
            guidance=self.generate_personalized_message(guidance),
            core_meaning=(
                f"{soul['name']}（{soul['upper']}／{soul['lower']}）があなたの魂の色です。"
                f"{'、'.join(soul['keywords'][:2])}があなたの本質を表します。"
            ),
        )

    @staticmethod
    def _read_bottle(bottle, position) -> BottleReading:
        key, name, meaning = position
        return BottleReading(
            position=key,
            position_name=name,
            number=bottle['number'],
            name=bottle['name'],
            upper_color=color_meaning(bottle['upper'], 'upper'),
            lower_color=color_meaning(bottle['lower'], 'lower'),
            combination=combination_for(base_color(bottle['upper']), base_color(bottle['lower'])),
            message=bottle['message'],
            affirmation=bottle['affirmation'],
            interpretation=f"{meaning}。{'、'.join(bottle['keywords'])}がテーマです。",
        )

    @staticmethod
    def _aura_layers(digest: bytes, bottles: List[dict]) -> List[AuraLayer]:
        soul, gift, present, future = bottles
        layer_colors = {
            'etheric': [soul['upper'], 'シルバー'],
            'emotional': [gift['lower'], present['upper']],
            'mental': [future['upper'], 'イエロー'],
            'spiritual': [soul['upper'], 'バイオレット', 'ゴールド'],
        }
        layers = []
        for index, (key, name, healthy, unhealthy) in enumerate(AURA_LAYERS):
            intensity = 0.6 + digest[index] % 40 / 100
            clarity = 0.5 + digest[index + 4] % 50 / 100
            layers.append(AuraLayer(
                name=name,
                colors=layer_colors[key],
                intensity=round(intensity, 2),
                clarity=round(clarity, 2),
                health=healthy if clarity > 0.8 else unhealthy,
            ))
        return layers
