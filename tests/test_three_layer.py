from datetime import datetime

from divination.engines.tarot import TarotEngine
from divination.models import EnvironmentData, SolarData, WeatherData
from divination.three_layer import (
    TRADITIONS,
    calculate_confidence,
    calculate_environmental_influence,
    generate_three_layer_interpretation,
    get_tradition,
)


def test_environmental_influence():
    assert calculate_environmental_influence(None) == 0.5
    assert calculate_environmental_influence(EnvironmentData()) == 0.5
    assert calculate_environmental_influence(EnvironmentData(social={})) == 0.6
    assert calculate_environmental_influence(EnvironmentData(weather=WeatherData())) == 0.7
    assert calculate_environmental_influence(
        EnvironmentData(weather=WeatherData(), solar=SolarData())) == 0.9
    full = EnvironmentData(weather=WeatherData(), solar=SolarData(), social={'trend': '転職'})
    assert calculate_environmental_influence(full) == 1.0


def test_confidence():
    assert calculate_confidence([]) == 0.70
    assert calculate_confidence([{'pattern': '春の芽吹き'}]) == 0.85


def test_unknown_tradition_falls_back():
    assert get_tradition('palmistry') == TRADITIONS['numerology']


def test_interpretation_from_model(sample_input, options):
    result = TarotEngine(sample_input, options=options).calculate()
    generated_at = datetime(2024, 6, 15, 12, 0)
    interpretation = generate_three_layer_interpretation('tarot', result, generated_at=generated_at)
    assert result.core_meaning in interpretation.classical.traditional_meaning
    assert interpretation.meta.divination_type == 'tarot'
    assert interpretation.meta.configuration == 'standard'
    assert interpretation.meta.confidence == 0.70
    assert interpretation.meta.environmental_influence == 0.5
    assert interpretation.meta.generated_at == generated_at
    assert interpretation.practical.actionable_advice


def test_interpretation_from_plain_values():
    interpretation = generate_three_layer_interpretation('iching', None, historical_patterns=[{'era': '周'}])
    assert interpretation.classical.traditional_meaning
    assert interpretation.meta.confidence == 0.85
    assert interpretation.meta.historical_resonance == 0.8


def test_interpretation_with_environment(environment):
    interpretation = generate_three_layer_interpretation(
        'runes', {'core_meaning': '変容'}, environment, configuration='detailed')
    assert interpretation.meta.configuration == 'detailed'
    assert interpretation.meta.environmental_influence == 0.9
