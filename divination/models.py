"""占術の入力データと環境データのモデル"""
import math
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

_EPOCH = datetime(1970, 1, 1)


class Location(BaseModel):
    latitude: float
    longitude: float


class DivinationInput(BaseModel):
    """占術の入力データ"""
    full_name: str = ''
    # 解釈できない文字列もそのまま受け付け、計算時に無効な日付として扱う
    birth_date: Optional[Union[datetime, date, str]] = None
    birth_time: Optional[str] = None  # 'HH:MM'
    birth_place: Optional[str] = None
    gender: Optional[str] = None  # 'male' または 'female'
    current_location: Optional[Location] = None
    question: Optional[str] = None
    question_category: Optional[str] = None

    def birth_datetime(self) -> Optional[datetime]:
        """生年月日をdatetimeとして返す。無効な場合はNone"""
        value = self.birth_date
        if isinstance(value, datetime):
            if value.tzinfo is not None:
                value = value.astimezone(timezone.utc).replace(tzinfo=None)
            return value
        if isinstance(value, date):
            return datetime(value.year, value.month, value.day)
        if isinstance(value, str) and value.strip():
            try:
                parsed = datetime.fromisoformat(value.strip())
            except ValueError:
                return None
            if parsed.tzinfo is not None:
                parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
            return parsed
        return None

    def birth_timestamp_ms(self) -> float:
        """生年月日のエポックミリ秒（UTC扱い）。無効な日付はNaN"""
        birth = self.birth_datetime()
        if birth is None:
            return math.nan
        return (birth - _EPOCH).total_seconds() * 1000

    def birth_hour(self) -> Optional[int]:
        """出生時刻の時。未入力や不正な形式はNone"""
        if not self.birth_time:
            return None
        try:
            hour = int(self.birth_time.split(':')[0])
        except ValueError:
            return None
        if 0 <= hour < 24:
            return hour
        return None


class LunarData(BaseModel):
    phase: float = 0.5  # 0..1（0=新月、0.5=満月）
    phase_name: str = ''
    illumination: float = 0.5
    moon_sign: Optional[str] = None
    next_new_moon: Optional[datetime] = None
    next_full_moon: Optional[datetime] = None
    is_void_of_course: bool = False


class SolarData(BaseModel):
    solar_activity: Optional[str] = None
    sunspot_number: Optional[int] = None
    solar_wind_speed: Optional[float] = None
    geomagnetic_activity: Optional[float] = None  # Kp指数


class PlanetaryData(BaseModel):
    sun_sign: Optional[str] = None
    moon_sign: Optional[str] = None
    rising_sign: Optional[str] = None
    retrograde_planets: List[str] = Field(default_factory=list)
    day_ruler: Optional[str] = None
    hour_ruler: Optional[str] = None


class WeatherData(BaseModel):
    condition: str = ''
    temperature: float = 20
    humidity: Optional[float] = None
    pressure: Optional[float] = None
    wind_speed: Optional[float] = None


class SeasonalData(BaseModel):
    season: Optional[str] = None
    solar_term: Optional[str] = None
    day_length: Optional[float] = None


class EnvironmentData(BaseModel):
    """外部から供給される環境データ（すべて省略可能）"""
    lunar: Optional[LunarData] = None
    solar: Optional[SolarData] = None
    planetary: Optional[PlanetaryData] = None
    weather: Optional[WeatherData] = None
    seasonal: Optional[SeasonalData] = None
    social: Optional[Dict[str, Any]] = None
    timestamp: Optional[datetime] = None


class EngineOptions(BaseModel):
    """エンジンごとのオプション"""
    # タロット
    spread_type: Optional[str] = None
    selected_card_indices: Optional[List[int]] = None
    # 易経: 'yarrow' / 'coins' / 'plum' / 'time'。Noneなら質問から自動選択
    casting_method: Optional[str] = None
    # ルーン
    rune_system: str = 'elder'
    rune_spread: str = 'three-rune'
    # オガム
    ogham_spread: str = 'three-realms'
    # 「現在時刻」。Noneなら実際の時計を使う
    now: Optional[datetime] = None
    # シードに現在時刻を加えるか。Noneなら設定値に従う
    include_wall_clock: Optional[bool] = None
