"""マヤ暦エンジン（ツォルキン・ハアブ・長期暦）"""
import logging
import math
from datetime import date, datetime
from typing import Dict, List, Optional

from pydantic import BaseModel

from ..base import BaseDivinationEngine
from ..data.mayan import BIORHYTHM_CYCLES, DAY_SIGNS, GALACTIC_TONES, HAAB_MONTHS, WAVESPELL_GUIDANCE

logger = logging.getLogger(__name__)

# GMT相関定数（長期暦0.0.0.0.0のユリウス日）
GMT_CORRELATION = 584283
# date.toordinal() からユリウス通日への差
ORDINAL_TO_JDN = 1721425

TZOLKIN_CYCLE = 260
HAAB_CYCLE = 365
CALENDAR_ROUND = 18980

LONG_COUNT_UNITS = (
    ('baktun', 144000),
    ('katun', 7200),
    ('tun', 360),
    ('uinal', 20),
    ('kin', 1),
)

# 音の番号 % 5 ごとのガイドの紋章のずれ
GUIDE_OFFSETS = {1: 0, 2: 12, 3: 4, 4: 16, 0: 8}

PLASMA_TYPES = ['ダリ', 'セリ', 'ガンマ', 'カリ', 'アルファ', 'リミ', 'シリオ']
PLASMA_CHAKRAS = ['王冠', '根', '第三の目', '仙骨', '喉', '太陽神経叢', '心臓']

WAVE_PHASES = [
    '始動：音と意図を定める段階',
    '展開：対極と課題を探る段階',
    '拡大：行動し勢いを生む段階',
    '成熟：形と構造を磨く段階',
    '完成：統合し超越する段階',
]

CATEGORY_GUIDANCE = {
    '恋愛・結婚': '愛については{power}の力を通じて、{tone}の質を表現することで調和が生まれます。',
    '仕事・転職': 'キャリアでは{meaning}のエネルギーを{action}ことで、あなたの真の目的が実現されます。',
    '金運・財運': '豊かさは{direction}の方角からやってきて、{color}の波動と同調することで増大します。',
    '健康': '健康管理では{animal}の生命力を意識し、{shadow}に偏らないよう心身のバランスを整えてください。',
    '総合運': '全体的に{wave}のウェーブスペルの中にあり、今日は「{guidance}」という流れにあります。',
}


class Kin(BaseModel):
    kin: int
    tone: Dict
    day_sign: Dict
    signature: str


class HaabDate(BaseModel):
    day: int
    month: Dict
    label: str


class LongCount(BaseModel):
    baktun: int
    katun: int
    tun: int
    uinal: int
    kin: int
    notation: str


class MayanDate(BaseModel):
    gregorian: str
    days_since_epoch: int
    tzolkin: Kin
    haab: HaabDate
    long_count: LongCount
    calendar_round_position: int


class Oracle(BaseModel):
    """運命の五角形"""
    destiny: Dict
    analog: Dict
    antipode: Dict
    occult: Dict
    occult_tone: int
    guide: Dict


class Wavespell(BaseModel):
    start_sign: Dict
    day_in_wave: int
    progress: str
    guidance: str


class ThirteenMoon(BaseModel):
    moon: Optional[int] = None
    day: Optional[int] = None
    plasma: Optional[str] = None
    chakra: Optional[str] = None
    # 7月25日は「時間をはずした日」
    day_out_of_time: bool = False


class MayanReading(BaseModel):
    """マヤ暦占いの結果"""
    birth: Optional[MayanDate] = None
    oracle: Optional[Oracle] = None
    birth_wavespell: Optional[Wavespell] = None
    today: MayanDate
    today_wavespell: Wavespell
    thirteen_moon: ThirteenMoon
    biorhythm: Dict[str, int]
    life_purpose: str
    challenges: List[str]
    gifts: List[str]
    guidance: str
    core_meaning: str


def days_since_epoch(day: date) -> int:
    """長期暦の起点（紀元前3114年8月11日）からの日数"""
    return day.toordinal() + ORDINAL_TO_JDN - GMT_CORRELATION


def tone_number(days: int) -> int:
    return (days + 3) % 13 + 1


def sign_index(days: int) -> int:
    return (days + 19) % 20


def kin_number(days: int) -> int:
    # 音と紋章の組み合わせ（中国剰余定理で1..260に対応）
    return (days + 159) % TZOLKIN_CYCLE + 1


def tzolkin(days: int) -> Kin:
    tone = GALACTIC_TONES[tone_number(days) - 1]
    sign = DAY_SIGNS[sign_index(days)]
    return Kin(
        kin=kin_number(days),
        tone=tone,
        day_sign=sign,
        signature=f"{tone['japanese']}・{sign['japanese']}（{tone['number']} {sign['name']}）",
    )


def haab(days: int) -> HaabDate:
    day_of_year = (days + 348) % HAAB_CYCLE
    month = HAAB_MONTHS[day_of_year // 20]
    return HaabDate(day=day_of_year % 20, month=month, label=f"{day_of_year % 20} {month['name']}")


def long_count(days: int) -> LongCount:
    values = {}
    remainder = days
    for name, unit in LONG_COUNT_UNITS:
        values[name], remainder = divmod(remainder, unit)
    notation = '.'.join(str(values[name]) for name, _ in LONG_COUNT_UNITS)
    return LongCount(notation=notation, **values)


def mayan_date(day: date) -> MayanDate:
    days = days_since_epoch(day)
    return MayanDate(
        gregorian=day.isoformat(),
        days_since_epoch=days,
        tzolkin=tzolkin(days),
        haab=haab(days),
        long_count=long_count(days),
        calendar_round_position=days % CALENDAR_ROUND,
    )


def oracle(sign: int, tone: int) -> Oracle:
    """紋章のindex（0 = Imix）と音から五つの紋章を導く"""
    return Oracle(
        destiny=DAY_SIGNS[sign],
        analog=DAY_SIGNS[(17 - sign) % 20],
        antipode=DAY_SIGNS[(sign + 10) % 20],
        occult=DAY_SIGNS[19 - sign],
        occult_tone=14 - tone,
        guide=DAY_SIGNS[(sign + GUIDE_OFFSETS[tone % 5]) % 20],
    )


def wavespell(days: int) -> Wavespell:
    tone = tone_number(days)
    return Wavespell(
        start_sign=DAY_SIGNS[(sign_index(days) - (tone - 1)) % 20],
        day_in_wave=tone,
        progress=WAVE_PHASES[min((tone - 1) // 3, len(WAVE_PHASES) - 1)],
        guidance=WAVESPELL_GUIDANCE[tone - 1],
    )


def biorhythm(days_alive: int) -> Dict[str, int]:
    return {
        name: round(math.sin(2 * math.pi * days_alive / cycle) * 100)
        for name, cycle in BIORHYTHM_CYCLES.items()
    }


def thirteen_moon(day: date) -> ThirteenMoon:
    """7月26日に始まる13の月の暦"""
    if (day.month, day.day) == (7, 25):
        return ThirteenMoon(day_out_of_time=True)
    start_year = day.year if (day.month, day.day) >= (7, 26) else day.year - 1
    elapsed = (day - date(start_year, 7, 26)).days
    # 2月29日は前日と同じ日として数える
    if _is_leap(start_year + 1) and day >= date(start_year + 1, 2, 29):
        elapsed -= 1
    moon_day = elapsed % 28 + 1
    return ThirteenMoon(
        moon=min(elapsed // 28 + 1, 13),
        day=moon_day,
        plasma=PLASMA_TYPES[(moon_day - 1) % 7],
        chakra=PLASMA_CHAKRAS[(moon_day - 1) % 7],
    )


def _is_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


class MayanCalendarEngine(BaseDivinationEngine[MayanReading]):
    """ツォルキン260日周期とハアブ暦によるエンジン"""

    divination_type = 'mayan'

    def calculate(self) -> MayanReading:
        today = self.now().date()
        today_date = mayan_date(today)
        birth = self.input.birth_datetime()

        if birth is None:
            logger.debug('mayan: invalid birth date, reading today only')
            sign = today_date.tzolkin.day_sign
            return MayanReading(
                today=today_date,
                today_wavespell=wavespell(today_date.days_since_epoch),
                thirteen_moon=thirteen_moon(today),
                biorhythm={name: 0 for name in BIORHYTHM_CYCLES},
                life_purpose='',
                challenges=[],
                gifts=[],
                guidance=f"今日は{today_date.tzolkin.signature}の日です。{WAVESPELL_GUIDANCE[today_date.tzolkin.tone['number'] - 1]}。",
                core_meaning=f"{sign['japanese']}の日：{sign['meaning']}",
            )

        birth_date = mayan_date(birth.date())
        days = birth_date.days_since_epoch
        birth_oracle = oracle(sign_index(days), tone_number(days))
        sign = birth_date.tzolkin.day_sign
        tone = birth_date.tzolkin.tone
        logger.debug(f"mayan kin={birth_date.tzolkin.kin} today={today_date.tzolkin.kin}")

        return MayanReading(
            birth=birth_date,
            oracle=birth_oracle,
            birth_wavespell=wavespell(days),
            today=today_date,
            today_wavespell=wavespell(today_date.days_since_epoch),
            thirteen_moon=thirteen_moon(today),
            biorhythm=biorhythm((today - birth.date()).days),
            life_purpose=f"{sign['meaning']}。{sign['nawal']['power']}の力を世界に表現すること",
            challenges=[sign['nawal']['shadow'], tone['question'], '古い時間の概念からの解放'],
            gifts=sign['keywords'][:2] + [tone['power'], '銀河時間との同調能力'],
            guidance=self._guidance(birth_date, birth_oracle, today_date),
            core_meaning=(
                f"あなたの銀河の署名は{birth_date.tzolkin.signature}。"
                f"{sign['meaning']}を{tone['action']}ことが魂の目的です。"
            ),
        )

    def _guidance(self, birth: MayanDate, birth_oracle: Oracle, today: MayanDate) -> str:
        sign = birth.tzolkin.day_sign
        tone = birth.tzolkin.tone
        text = f"あなたの銀河の署名は{birth.tzolkin.signature}です。"
        text += f"ガイドの{birth_oracle.guide['japanese']}があなたを導き、類似の{birth_oracle.analog['japanese']}が支えます。"
        if self.input.question:
            template = CATEGORY_GUIDANCE.get(self.category, CATEGORY_GUIDANCE['総合運'])
            text += template.format(
                power=sign['nawal']['power'],
                tone=tone['power'],
                meaning=sign['meaning'],
                action=tone['action'],
                direction=sign['direction'],
                color=sign['color'],
                animal=sign['nawal']['animal'],
                shadow=sign['nawal']['shadow'],
                wave=wavespell(today.days_since_epoch).start_sign['japanese'],
                guidance=WAVESPELL_GUIDANCE[today.tzolkin.tone['number'] - 1],
            )
        return self.generate_personalized_message(text)
