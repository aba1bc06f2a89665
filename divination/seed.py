"""シード生成と線形合同法による決定論的な選択"""
import math
from typing import List, Optional, Sequence, Tuple, TypeVar

from .models import DivinationInput

T = TypeVar('T')

LCG_MULTIPLIER = 1103515245
LCG_INCREMENT = 12345
LCG_MODULUS = 2147483648  # 2^31

DEFAULT_SEED_MODULUS = 1000000

# 筮竹法の確率（6: 1/16, 7: 5/16, 8: 7/16, 9: 3/16）の累積境界
YARROW_BANDS = ((1 / 16, 6), (6 / 16, 7), (13 / 16, 8))


def char_code_sum(text: Optional[str]) -> int:
    """文字コードの合計（UTF-16のコード単位で数える）"""
    if not text:
        return 0
    total = 0
    for char in text:
        code = ord(char)
        if code > 0xFFFF:
            code -= 0x10000
            total += 0xD800 + (code >> 10) + 0xDC00 + (code & 0x3FF)
        else:
            total += code
    return total


def _finite(value: float) -> float:
    if value is None or math.isnan(value) or math.isinf(value):
        return 0
    return value


def generate_seed(data: DivinationInput, environment_factor: float = 0,
                  now_ms: float = 0, modulus: int = DEFAULT_SEED_MODULUS) -> int:
    """生年月日・氏名・質問・現在時刻・環境要因から整数シードを作る"""
    total = (
        _finite(data.birth_timestamp_ms())
        + char_code_sum(data.full_name)
        + char_code_sum(data.question)
        + _finite(now_ms)
        + _finite(environment_factor)
    )
    return int(math.floor(total)) % modulus


def lcg_next(seed: int) -> int:
    return (seed * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS


def lcg_random(seed: int) -> Tuple[int, float]:
    """次の状態と[0, 1)の一様乱数を返す"""
    seed = lcg_next(seed)
    return seed, seed / LCG_MODULUS


def shuffle(deck: Sequence[T], seed: int) -> List[T]:
    """Fisher-Yatesシャッフル。入力は変更せず新しいリストを返す"""
    result = list(deck)
    for i in range(len(result) - 1, 0, -1):
        seed, r = lcg_random(seed)
        j = math.floor(r * (i + 1))
        result[i], result[j] = result[j], result[i]
    return result


def draw_without_replacement(items: Sequence[T], count: int, seed: int) -> List[T]:
    return shuffle(items, seed)[:max(count, 0)]


def cast_line(seed: int) -> Tuple[int, int]:
    """筮竹法の確率で一爻を立てる。(爻の値, 次のシード)を返す"""
    seed, r = lcg_random(seed)
    for bound, value in YARROW_BANDS:
        if r < bound:
            return value, seed
    return 9, seed
