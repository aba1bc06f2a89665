"""西洋占星術エンジン（太陽・月・アセンダント）"""
import logging
from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel

from ..base import BaseDivinationEngine

logger = logging.getLogger(__name__)

SIGNS = [
    {'name': '牡羊座', 'symbol': '♈', 'element': '火', 'modality': '活動', 'ruler': '火星',
     'traits': '積極的で開拓精神に富み、リーダーシップを発揮する',
     'emotion': '感情表現が直接的で、すぐに行動に移す'},
    {'name': '牡牛座', 'symbol': '♉', 'element': '地', 'modality': '不動', 'ruler': '金星',
     'traits': '堅実で忍耐強く、美的センスに優れている',
     'emotion': '感情が安定しており、変化を好まない'},
    {'name': '双子座', 'symbol': '♊', 'element': '風', 'modality': '柔軟', 'ruler': '水星',
     'traits': '知的好奇心が強く、コミュニケーション能力が高い',
     'emotion': '感情が変わりやすく、理性的に処理する'},
    {'name': '蟹座', 'symbol': '♋', 'element': '水', 'modality': '活動', 'ruler': '月',
     'traits': '感受性豊かで、家族や仲間を大切にする',
     'emotion': '感情豊かで、親しい人を大切にする'},
    {'name': '獅子座', 'symbol': '♌', 'element': '火', 'modality': '不動', 'ruler': '太陽',
     'traits': '創造的で自信に満ち、人を惹きつける魅力がある',
     'emotion': '感情表現が豊かで、注目を求める'},
    {'name': '乙女座', 'symbol': '♍', 'element': '地', 'modality': '柔軟', 'ruler': '水星',
     'traits': '分析的で完璧主義、細部にこだわる',
     'emotion': '感情を分析し、実用的に対処する'},
    {'name': '天秤座', 'symbol': '♎', 'element': '風', 'modality': '活動', 'ruler': '金星',
     'traits': '調和を重んじ、美的センスと社交性に優れる',
     'emotion': '感情のバランスを保ち、調和を求める'},
    {'name': '蠍座', 'symbol': '♏', 'element': '水', 'modality': '不動', 'ruler': '冥王星',
     'traits': '情熱的で洞察力があり、深い絆を求める',
     'emotion': '感情が深く激しく、変容を経験する'},
    {'name': '射手座', 'symbol': '♐', 'element': '火', 'modality': '柔軟', 'ruler': '木星',
     'traits': '楽観的で冒険心があり、自由を愛する',
     'emotion': '楽観的で、感情を哲学的に捉える'},
    {'name': '山羊座', 'symbol': '♑', 'element': '地', 'modality': '活動', 'ruler': '土星',
     'traits': '責任感が強く、着実に目標を達成する',
     'emotion': '感情を抑制し、責任感を持って対処する'},
    {'name': '水瓶座', 'symbol': '♒', 'element': '風', 'modality': '不動', 'ruler': '天王星',
     'traits': '独創的で人道主義的、既成概念にとらわれない',
     'emotion': '感情から距離を置き、客観的に見る'},
    {'name': '魚座', 'symbol': '♓', 'element': '水', 'modality': '柔軟', 'ruler': '海王星',
     'traits': '直感的で共感力が高く、芸術的センスがある',
     'emotion': '共感力が高く、他者の感情を吸収する'},
]

# 各星座の始まり（月, 日）。牡羊座から順
SIGN_STARTS = [(3, 21), (4, 20), (5, 21), (6, 22), (7, 23), (8, 23),
               (9, 23), (10, 24), (11, 23), (12, 22), (1, 20), (2, 19)]

# 2000年1月6日18:14（UTC）の新月。月と太陽は山羊座15度付近で重なっていた
REFERENCE_NEW_MOON = datetime(2000, 1, 6, 18, 14)
REFERENCE_MOON_LONGITUDE = 285.6
SIDEREAL_MONTH = 27.321661

COMPATIBLE_ELEMENTS = {
    '火': ['火', '風'],
    '風': ['風', '火'],
    '地': ['地', '水'],
    '水': ['水', '地'],
}

ELEMENT_MEANINGS = {
    '火': '情熱と行動力',
    '地': '現実感覚と安定',
    '風': '知性と社交性',
    '水': '感受性と共感力',
}

MODALITY_MEANINGS = {
    '活動': '物事を始める力',
    '不動': '維持し深める力',
    '柔軟': '変化に適応する力',
}

PLANET_NAMES = {
    'mercury': '水星', 'venus': '金星', 'mars': '火星', 'jupiter': '木星',
    'saturn': '土星', 'uranus': '天王星', 'neptune': '海王星', 'pluto': '冥王星',
}

RETROGRADE_MESSAGES = {
    '水星': '水星逆行中は、連絡ミスや機器のトラブルに注意し、見直しに時間を使いましょう。',
    '金星': '金星逆行中は、過去の人間関係や価値観を見つめ直す時です。',
    '火星': '火星逆行中は、無理に押し進めず、エネルギーを温存しましょう。',
    '木星': '木星逆行中は、内面的な成長と学びの深まりに目を向けましょう。',
    '土星': '土星逆行中は、責任や約束を見直し、土台を固め直す時です。',
}

MOON_PHASE_MESSAGES = {
    '新月': '新月の今は、新しい意図を定めるのに適しています。',
    '上弦': '上弦の月へ向かう今は、行動を積み重ねる時です。',
    '満月': '満月の今は、成果を受け取り、感謝を表す時です。',
    '下弦': '下弦の月の今は、不要なものを手放し、次に備えましょう。',
}

WEATHER_SYNCHRONICITY = {
    '晴れ': '晴れやかな天気があなたの太陽的な側面を活性化しています。',
    'clear': '晴れやかな天気があなたの太陽的な側面を活性化しています。',
    '雨': '雨が感情の浄化と新たな成長をもたらしています。',
    'rain': '雨が感情の浄化と新たな成長をもたらしています。',
    '曇り': '曇り空が内省と熟考を促しています。',
    'cloudy': '曇り空が内省と熟考を促しています。',
}


class SignPlacement(BaseModel):
    name: str
    symbol: str
    element: str
    modality: str
    ruler: str


class SignCompatibility(BaseModel):
    best_signs: List[str]
    challenging_signs: List[str]
    advice: str


class AstrologyReading(BaseModel):
    """西洋占星術の結果"""
    sun_sign: SignPlacement
    moon_sign: SignPlacement
    rising_sign: Optional[SignPlacement]
    element_balance: Dict[str, int]
    modality_balance: Dict[str, int]
    dominant_element: str
    personality: str
    emotions: str
    compatibility: SignCompatibility
    retrograde_planets: List[str]
    transit_message: str
    environmental_synchronicity: str
    guidance: str
    core_meaning: str


def sign_index_for_date(month: int, day: int) -> int:
    """月日から太陽星座の番号（牡羊座=0）を求める"""
    result = 9  # 1月19日までは山羊座
    for index, start in sorted(enumerate(SIGN_STARTS), key=lambda item: item[1]):
        if (month, day) >= start:
            result = index
    return result


def moon_sign_index(moment: datetime) -> int:
    """基準の新月からの経過日数で月の黄経を近似する"""
    days = (moment - REFERENCE_NEW_MOON).total_seconds() / 86400
    longitude = (REFERENCE_MOON_LONGITUDE + days * 360 / SIDEREAL_MONTH) % 360
    return int(longitude // 30)


def rising_sign_index(sun_index: int, hour: int) -> int:
    """日の出（6時）の上昇宮を太陽星座とし、2時間ごとに1星座進める"""
    return (sun_index + (hour - 6) // 2) % 12


def sign_index_by_name(name: str) -> Optional[int]:
    for index, sign in enumerate(SIGNS):
        if sign['name'] == name:
            return index
    return None


def placement(index: int) -> SignPlacement:
    sign = SIGNS[index]
    return SignPlacement(
        name=sign['name'],
        symbol=sign['symbol'],
        element=sign['element'],
        modality=sign['modality'],
        ruler=sign['ruler'],
    )


def compatibility_for(sign: SignPlacement) -> SignCompatibility:
    compatible = COMPATIBLE_ELEMENTS[sign.element]
    best = [other['name'] for other in SIGNS if other['element'] in compatible and other['name'] != sign.name]
    challenging = [other['name'] for other in SIGNS
                   if other['modality'] == sign.modality and other['element'] not in compatible]
    return SignCompatibility(
        best_signs=best,
        challenging_signs=challenging,
        advice=f"{'・'.join(compatible)}のエレメントを持つ人とは、自然に理解し合える関係を築けます。",
    )


class AstrologyEngine(BaseDivinationEngine[AstrologyReading]):
    """太陽・月・上昇宮による西洋占星術エンジン"""

    divination_type = 'astrology'

    def calculate(self) -> AstrologyReading:
        birth = self.input.birth_datetime() or self.now()
        sun_index = sign_index_for_date(birth.month, birth.day)
        moon_index = self._moon_index(birth)
        hour = self.input.birth_hour()
        rising_index = rising_sign_index(sun_index, hour) if hour is not None else None
        logger.debug(f"astrology sun={sun_index} moon={moon_index} rising={rising_index}")

        sun, moon = placement(sun_index), placement(moon_index)
        rising = placement(rising_index) if rising_index is not None else None
        placements = [p for p in (sun, moon, rising) if p is not None]
        elements = {element: 0 for element in ELEMENT_MEANINGS}
        modalities = {modality: 0 for modality in MODALITY_MEANINGS}
        for p in placements:
            elements[p.element] += 1
            modalities[p.modality] += 1
        dominant = max(elements, key=lambda element: (elements[element], element == sun.element))

        personality = f"太陽が{sun.name}にあるあなたは、{SIGNS[sun_index]['traits']}性質があります。"
        if rising:
            personality += f"アセンダントの{rising.name}が、第一印象に{rising.element}の彩りを加えています。"
        emotions = f"月が{moon.name}にあるあなたは、{SIGNS[moon_index]['emotion']}傾向があります。"

        retrogrades = self._retrogrades()
        transit = MOON_PHASE_MESSAGES[self.moon_phase_bucket()]
        for planet in retrogrades:
            transit += RETROGRADE_MESSAGES.get(planet, f"{planet}逆行中は、その天体が司るテーマを見直しましょう。")

        guidance = f"{personality}{ELEMENT_MEANINGS[dominant]}があなたの支えです。{transit}"
        return AstrologyReading(
            sun_sign=sun,
            moon_sign=moon,
            rising_sign=rising,
            element_balance=elements,
            modality_balance=modalities,
            dominant_element=dominant,
            personality=personality,
            emotions=emotions,
            compatibility=compatibility_for(sun),
            retrograde_planets=retrogrades,
            transit_message=transit,
            environmental_synchronicity=self._synchronicity(),
            guidance=self.generate_personalized_message(guidance),
            core_meaning=(
                f"{sun.symbol}{sun.name}の太陽と{moon.name}の月。"
                f"{ELEMENT_MEANINGS[dominant]}を軸に、{MODALITY_MEANINGS[sun.modality]}が輝きます。"
            ),
        )

    def _moon_index(self, birth: datetime) -> int:
        if self.environment:
            for source in (self.environment.lunar, self.environment.planetary):
                name = source.moon_sign if source else None
                index = sign_index_by_name(name) if name else None
                if index is not None:
                    return index
        return moon_sign_index(birth)

    def _retrogrades(self) -> List[str]:
        if not self.environment or not self.environment.planetary:
            return []
        return [PLANET_NAMES.get(planet.lower(), planet) for planet in self.environment.planetary.retrograde_planets]

    def _synchronicity(self) -> str:
        if not self.environment:
            return ''
        messages = []
        if self.environment.weather:
            messages.append(WEATHER_SYNCHRONICITY.get(self.environment.weather.condition, ''))
        bucket = self.moon_phase_bucket()
        if self.environment.lunar and bucket in ('新月', '満月'):
            messages.append(f"{bucket}のエネルギーが{'新しいサイクルの始まり' if bucket == '新月' else '完成と解放'}を告げています。")
        return ''.join(messages)
