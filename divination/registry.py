"""占術エンジンの登録と統合鑑定"""
import logging
from typing import Dict, List, Optional, Type

from .base import BaseDivinationEngine
from .engines import (
    AkashicRecordsEngine,
    AstrologyEngine,
    AuraSomaEngine,
    CelticEngine,
    ChakraEngine,
    FengShuiEngine,
    IChingEngine,
    KabbalahEngine,
    MayanCalendarEngine,
    NineStarKiEngine,
    NumerologyEngine,
    RunesEngine,
    ShichuSuimeiEngine,
    TarotEngine,
)
from .exceptions import UnknownDivinationTypeError
from .models import DivinationInput, EngineOptions, EnvironmentData
from .three_layer import generate_three_layer_interpretation

logger = logging.getLogger(__name__)

ENGINE_REGISTRY: Dict[str, Type[BaseDivinationEngine]] = {
    engine.divination_type: engine
    for engine in (
        TarotEngine,
        IChingEngine,
        RunesEngine,
        CelticEngine,
        KabbalahEngine,
        MayanCalendarEngine,
        NumerologyEngine,
        NineStarKiEngine,
        ShichuSuimeiEngine,
        ChakraEngine,
        FengShuiEngine,
        AuraSomaEngine,
        AkashicRecordsEngine,
        AstrologyEngine,
    )
}

# 環境補正の取りうる最大値（新月1.15 × 晴れ1.05）
MAX_ENVIRONMENTAL_MODIFIER = 1.15 * 1.05


def get_engine(divination_type: str, data: DivinationInput,
               environment: Optional[EnvironmentData] = None,
               options: Optional[EngineOptions] = None) -> BaseDivinationEngine:
    engine_class = ENGINE_REGISTRY.get(divination_type)
    if engine_class is None:
        raise UnknownDivinationTypeError(divination_type)
    return engine_class(data, environment, options)


def run_divination(divination_type: str, data: DivinationInput,
                   environment: Optional[EnvironmentData] = None,
                   options: Optional[EngineOptions] = None) -> Dict:
    """1つの占術を実行し、結果と3層解釈を返す"""
    engine = get_engine(divination_type, data, environment, options)
    result = engine.calculate()
    three_layer = generate_three_layer_interpretation(divination_type, result, environment)
    return {
        'type': divination_type,
        'result': result.model_dump(),
        'three_layer': three_layer.model_dump(),
    }


def harmony_score(modifiers: List[float]) -> int:
    """各エンジンの環境補正の平均を0〜100に正規化する"""
    if not modifiers:
        return 0
    mean = sum(modifiers) / len(modifiers)
    return max(0, min(100, round(mean / MAX_ENVIRONMENTAL_MODIFIER * 100)))


def run_integrated(data: DivinationInput, environment: Optional[EnvironmentData] = None,
                   types: Optional[List[str]] = None,
                   options: Optional[EngineOptions] = None) -> Dict:
    """複数の占術をまとめて実行する。1つが失敗しても残りは続ける"""
    selected = types or list(ENGINE_REGISTRY)
    results = {}
    errors = {}
    modifiers = []
    for divination_type in selected:
        try:
            engine = get_engine(divination_type, data, environment, options)
            results[divination_type] = engine.calculate().model_dump()
            modifiers.append(engine.get_environmental_modifier())
        except Exception as e:
            logger.exception(f"Integrated reading failed for {divination_type}")
            errors[divination_type] = str(e)

    meanings = [result['core_meaning'] for result in results.values() if result.get('core_meaning')]
    score = harmony_score(modifiers)
    if meanings:
        message = f"{len(results)}つの占術が示す調和度は{score}です。" + ''.join(meanings[:3])
    else:
        message = '鑑定結果を得られませんでした。入力内容を確認してください。'
    logger.info(f"Integrated reading: {len(results)} succeeded, {len(errors)} failed")
    return {
        'results': results,
        'errors': errors,
        'harmony_score': score,
        'combined_message': message,
    }
