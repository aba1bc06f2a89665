"""占術エンジンの基底クラス"""
import logging
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Generic, Optional, TypeVar

from config import settings

from .models import DivinationInput, EngineOptions, EnvironmentData
from .seed import generate_seed

logger = logging.getLogger(__name__)

TResult = TypeVar('TResult')

MASTER_NUMBERS = (11, 22, 33)

CATEGORY_PREFIXES = {
    '恋愛・結婚': '愛と調和のエネルギーが',
    '仕事・転職': 'キャリアと成長の可能性が',
    '金運・財運': '豊かさと繁栄のエネルギーが',
    '健康': '生命力と活力が',
    '人間関係': '人との繋がりと共感力が',
    '総合運': 'あなたの全体的な運気が',
}

DEFAULT_CATEGORY = '総合運'
DEFAULT_LUNAR_PHASE = 0.5


def sum_digits(number: int) -> int:
    return sum(int(digit) for digit in str(abs(number)))


def reduce_number(number: int, masters=MASTER_NUMBERS) -> int:
    """一桁になるまで各桁を足す（マスターナンバーは残す）"""
    while number > 9 and number not in masters:
        number = sum_digits(number)
    return number


class BaseDivinationEngine(ABC, Generic[TResult]):
    """すべての占術エンジンが継承する基底クラス"""

    divination_type = ''

    def __init__(self, data: DivinationInput, environment: Optional[EnvironmentData] = None,
                 options: Optional[EngineOptions] = None):
        self.input = data
        self.environment = environment
        self.options = options or EngineOptions()

    @abstractmethod
    def calculate(self) -> TResult:
        """占術計算のメインメソッド"""

    # 時刻

    def now(self) -> datetime:
        return self.options.now or datetime.now()

    def now_ms(self) -> float:
        """シードに加える現在時刻。無効化されていれば0"""
        include = self.options.include_wall_clock
        if include is None:
            include = settings.seed_include_wall_clock
        if not include:
            return 0
        return self.now().timestamp() * 1000

    def generate_seed(self, environment_factor: float = 0) -> int:
        seed = generate_seed(self.input, environment_factor, self.now_ms(), settings.seed_modulus)
        logger.debug(f"{self.divination_type} seed={seed}")
        return seed

    def time_of_day(self) -> str:
        hour = self.now().hour
        if hour < 12:
            return 'morning'
        if hour < 18:
            return 'afternoon'
        return 'evening'

    # 環境

    def lunar_phase(self) -> float:
        if self.environment and self.environment.lunar:
            return self.environment.lunar.phase
        return DEFAULT_LUNAR_PHASE

    def moon_phase_bucket(self) -> str:
        phase = self.lunar_phase()
        if phase < 0.1 or phase > 0.9:
            return '新月'
        if abs(phase - 0.5) < 0.1:
            return '満月'
        if phase < 0.5:
            return '上弦'
        return '下弦'

    def get_environmental_modifier(self) -> float:
        """環境データによる補正（データがなければ1.0）"""
        if not self.environment:
            return 1.0

        modifier = 1.0

        # 新月・満月で強まる
        if self.environment.lunar:
            phase = self.environment.lunar.phase
            if phase < 0.1 or phase > 0.9:
                modifier *= 1.15
            elif abs(phase - 0.5) < 0.1:
                modifier *= 1.10

        if self.environment.weather:
            if self.environment.weather.condition == '晴れ':
                modifier *= 1.05
            elif self.environment.weather.condition == '雨':
                modifier *= 0.95

        return modifier

    def get_time_modifier(self) -> float:
        """時間帯による運勢変動"""
        hour = self.now().hour
        if 5 <= hour < 8:
            return 1.1
        if 11 <= hour < 14:
            return 1.05
        if 17 <= hour < 19:
            return 1.08
        if hour >= 23 or hour < 2:
            return 0.95
        return 1.0

    # 数値

    def get_birth_number(self) -> int:
        """生年月日の各桁の合計（無効な日付は0）"""
        birth = self.input.birth_datetime()
        if birth is None:
            return 0
        total = sum_digits(birth.year) + sum_digits(birth.month) + sum_digits(birth.day)
        return reduce_number(total)

    def get_name_number(self) -> int:
        name = ''.join(char for char in self.input.full_name if _is_name_char(char))
        total = sum(ord(char) % 9 + 1 for char in name)
        return reduce_number(total)

    # メッセージ

    @property
    def category(self) -> str:
        return self.input.question_category or DEFAULT_CATEGORY

    def generate_personalized_message(self, base_message: str) -> str:
        """質問カテゴリに応じた前置きを付ける"""
        if not self.input.question:
            return base_message
        prefix = CATEGORY_PREFIXES.get(self.category, CATEGORY_PREFIXES[DEFAULT_CATEGORY])
        return f"{prefix}高まっています。{base_message}"


def _is_name_char(char: str) -> bool:
    # ひらがな・カタカナ・漢字・英字
    return (
        'ぁ' <= char <= 'ん'
        or 'ァ' <= char <= 'ン'
        or char == 'ー'
        or '一' <= char <= '龯'
        or ('a' <= char <= 'z')
        or ('A' <= char <= 'Z')
    )
