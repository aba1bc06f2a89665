from divination.base import reduce_number, sum_digits
from divination.engines.kabbalah import KabbalahEngine, life_path_number, path_between, pillar_of, soul_value
from divination.engines.numerology import NumerologyEngine
from divination.models import DivinationInput


def test_reduce_number_keeps_masters():
    assert reduce_number(39) == 3
    assert reduce_number(29) == 11
    assert reduce_number(22) == 22
    assert reduce_number(22, masters=()) == 4
    assert sum_digits(1990) == 19


def test_numerology_reading(sample_input, options):
    result = NumerologyEngine(sample_input, options=options).calculate()
    assert result.life_path_number == 3
    assert result.matrix['top_left'] == 6
    assert result.matrix['top_center'] == 5
    assert result.matrix['top_right'] == 1
    assert result.matrix['middle_left'] == 2
    assert result.matrix['center'] == 3
    assert len(result.matrix) == 9
    assert 0 <= result.todays_number <= 9
    assert result.core_meaning.startswith('ライフパスナンバー3')


def test_karmic_numbers(options):
    data = DivinationInput(full_name='山田', birth_date='1990-05-13')
    result = NumerologyEngine(data, options=options).calculate()
    assert 13 in result.karmic_numbers
    assert 13 in result.karmic_lessons


def test_numerology_with_invalid_birth(malformed_input, options):
    result = NumerologyEngine(malformed_input, options=options).calculate()
    assert result.life_path_number == 0
    assert result.matrix['top_left'] == 0
    assert result.core_meaning


def test_life_path_number():
    assert life_path_number(1990, 5, 15) == 3
    assert life_path_number(2000, 1, 7) == 10
    assert life_path_number(2000, 3, 4) == 9


def test_pillars_and_paths():
    assert pillar_of(4) == '慈悲の柱'
    assert pillar_of(5) == '峻厳の柱'
    assert pillar_of(10) == '均衡の柱'
    assert path_between(2, 1) == '1-2'


def test_soul_value():
    assert soul_value('') == (0, [])
    value, letters = soul_value('山田花子')
    assert 0 < value <= 999
    assert letters


def test_kabbalah_reading(sample_input, options):
    reading = KabbalahEngine(sample_input, options=options).calculate()
    assert reading.life_path_sephira.sephira['number'] == 3
    assert reading.life_path_sephira.pillar == '峻厳の柱'
    assert reading.core_meaning


def test_kabbalah_with_invalid_birth(malformed_input, options):
    reading = KabbalahEngine(malformed_input, options=options).calculate()
    assert reading.life_path_sephira.sephira['number'] == 10
