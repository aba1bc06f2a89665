"""日本語の占術エンジン群"""
from .exceptions import DivinationError, InvalidOptionError, UnknownDivinationTypeError
from .models import DivinationInput, EngineOptions, EnvironmentData
from .registry import ENGINE_REGISTRY, get_engine, run_divination, run_integrated
from .three_layer import ThreeLayerInterpretation, generate_three_layer_interpretation

__all__ = [
    'DivinationError',
    'InvalidOptionError',
    'UnknownDivinationTypeError',
    'DivinationInput',
    'EngineOptions',
    'EnvironmentData',
    'ENGINE_REGISTRY',
    'get_engine',
    'run_divination',
    'run_integrated',
    'ThreeLayerInterpretation',
    'generate_three_layer_interpretation',
]
