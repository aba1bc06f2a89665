import pytest

from divination import DivinationInput, UnknownDivinationTypeError
from divination.models import EngineOptions
from divination.registry import (
    ENGINE_REGISTRY,
    MAX_ENVIRONMENTAL_MODIFIER,
    get_engine,
    harmony_score,
    run_divination,
    run_integrated,
)

ALL_TYPES = [
    'tarot', 'iching', 'runes', 'celtic', 'kabbalah', 'mayan', 'numerology',
    'nine-star-ki', 'chakra', 'feng-shui', 'aura-soma', 'akashic', 'astrology',
    'shichu-suimei',
]


def test_registry_has_every_engine():
    assert sorted(ENGINE_REGISTRY) == sorted(ALL_TYPES)


def test_unknown_type():
    with pytest.raises(UnknownDivinationTypeError):
        get_engine('palmistry', DivinationInput())


@pytest.mark.parametrize('divination_type', ALL_TYPES)
def test_engine_with_full_input(divination_type, sample_input, environment, options):
    result = run_divination(divination_type, sample_input, environment, options)
    assert result['type'] == divination_type
    assert result['result']['core_meaning']
    assert result['three_layer']['meta']['divination_type'] == divination_type


@pytest.mark.parametrize('divination_type', ALL_TYPES)
def test_engine_with_malformed_input(divination_type, malformed_input, options):
    result = get_engine(divination_type, malformed_input, options=options).calculate()
    assert result.core_meaning


@pytest.mark.parametrize('divination_type', ALL_TYPES)
def test_engine_is_deterministic(divination_type, sample_input, environment, options):
    first = get_engine(divination_type, sample_input, environment, options).calculate()
    second = get_engine(divination_type, sample_input, environment, options).calculate()
    assert first.model_dump() == second.model_dump()


def test_harmony_score():
    assert harmony_score([]) == 0
    assert harmony_score([MAX_ENVIRONMENTAL_MODIFIER]) == 100
    assert harmony_score([1.0]) == round(100 / MAX_ENVIRONMENTAL_MODIFIER)


def test_run_integrated(sample_input, environment, options):
    data = run_integrated(sample_input, environment, ['tarot', 'mayan'], options)
    assert set(data['results']) == {'tarot', 'mayan'}
    assert data['errors'] == {}
    assert data['harmony_score'] == 100
    assert data['combined_message']


def test_run_integrated_collects_errors(sample_input, options):
    bad_options = options.model_copy(update={'spread_type': 'pentagram'})
    data = run_integrated(sample_input, types=['tarot', 'palmistry', 'numerology'], options=bad_options)
    assert set(data['results']) == {'numerology'}
    assert set(data['errors']) == {'tarot', 'palmistry'}


def test_run_integrated_all_engines(sample_input):
    data = run_integrated(sample_input, options=EngineOptions(include_wall_clock=False))
    assert len(data['results']) == len(ENGINE_REGISTRY)
