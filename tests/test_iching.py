import pytest

from divination.data.iching_hexagrams import get_hexagram_by_number
from divination.engines.iching import (
    CASTING_METHODS,
    IChingEngine,
    inverse_hexagram,
    lines_to_binary,
    nuclear_hexagram,
    opposite_hexagram,
    transform_lines,
)
from divination.exceptions import InvalidOptionError
from divination.models import DivinationInput, EngineOptions


def test_lines_to_binary():
    assert lines_to_binary([7, 9, 7, 9, 7, 9]) == '111111'
    assert lines_to_binary([6, 8, 7, 8, 9, 6]) == '001010'


def test_transform_lines():
    assert transform_lines([6, 7, 8, 9, 7, 8]) == [7, 7, 8, 8, 7, 8]


def test_related_hexagrams():
    qian = get_hexagram_by_number(1)
    tai = get_hexagram_by_number(11)
    assert nuclear_hexagram(qian)['number'] == 1
    assert opposite_hexagram(qian)['number'] == 2
    assert opposite_hexagram(tai)['number'] == 12
    assert inverse_hexagram(tai)['number'] == 12
    assert nuclear_hexagram(get_hexagram_by_number(63))['number'] == 64


def test_reading_structure(sample_input, environment, options):
    result = IChingEngine(sample_input, environment, options).calculate()
    assert len(result.lines) == 6
    assert [line.position for line in result.lines] == [1, 2, 3, 4, 5, 6]
    for line in result.lines:
        assert line.value in (6, 7, 8, 9)
        assert line.changing == (line.value in (6, 9))
    assert result.primary_hexagram.binary == lines_to_binary([line.value for line in result.lines])
    assert result.core_meaning


def test_changing_hexagram(sample_input, environment, options):
    result = IChingEngine(sample_input, environment, options).calculate()
    values = [line.value for line in result.lines]
    if any(line.changing for line in result.lines):
        assert result.changing_hexagram.binary == lines_to_binary(transform_lines(values))
        assert len(result.changing_lines) == sum(1 for line in result.lines if line.changing)
    else:
        assert result.changing_hexagram is None
        assert result.changing_lines == []


@pytest.mark.parametrize('method', list(CASTING_METHODS))
def test_every_casting_method(sample_input, options, method):
    engine = IChingEngine(sample_input, options=options.model_copy(update={'casting_method': method}))
    result = engine.calculate()
    assert result.casting.method == method
    assert 1 <= result.primary_hexagram.number <= 64


def test_method_selection_from_question():
    def method_for(question):
        data = DivinationInput(full_name='山田', birth_date='1990-05-15', question=question)
        return IChingEngine(data).select_casting_method()

    assert method_for(None) == 'yarrow'
    assert method_for('いつ転職すべきですか') == 'plum'
    assert method_for('恋愛運は？') == 'coins'
    assert method_for('これから先の人生で大切にすべきことと、避けるべきことを詳しく知りたいです') == 'yarrow'


def test_unknown_casting_method(sample_input):
    with pytest.raises(InvalidOptionError):
        IChingEngine(sample_input, options=EngineOptions(casting_method='dice')).calculate()
