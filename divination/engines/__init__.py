"""占術エンジン"""
from .akashic import AkashicRecordsEngine
from .astrology import AstrologyEngine
from .aura_soma import AuraSomaEngine
from .celtic import CelticEngine
from .chakra import ChakraEngine
from .feng_shui import FengShuiEngine
from .iching import IChingEngine
from .kabbalah import KabbalahEngine
from .mayan import MayanCalendarEngine
from .nine_star_ki import NineStarKiEngine
from .numerology import NumerologyEngine
from .runes import RunesEngine
from .shichu_suimei import ShichuSuimeiEngine
from .tarot import TarotEngine

__all__ = [
    'AkashicRecordsEngine',
    'AstrologyEngine',
    'AuraSomaEngine',
    'CelticEngine',
    'ChakraEngine',
    'FengShuiEngine',
    'IChingEngine',
    'KabbalahEngine',
    'MayanCalendarEngine',
    'NineStarKiEngine',
    'NumerologyEngine',
    'RunesEngine',
    'ShichuSuimeiEngine',
    'TarotEngine',
]
