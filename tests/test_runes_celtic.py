import pytest

from divination.data.ogham import OGHAM_SPREADS
from divination.engines.celtic import CelticEngine, tree_month_for
from divination.engines.runes import SPREADS, RunesEngine
from divination.exceptions import InvalidOptionError
from divination.models import DivinationInput, EngineOptions


@pytest.mark.parametrize('system', ['elder', 'younger', 'anglo_saxon'])
@pytest.mark.parametrize('spread', list(SPREADS))
def test_rune_spreads(sample_input, system, spread):
    options = EngineOptions(rune_system=system, rune_spread=spread, include_wall_clock=False)
    reading = RunesEngine(sample_input, options=options).calculate()
    assert reading.system == system
    assert reading.spread_type == spread
    assert len(reading.positions) == len(SPREADS[spread]['positions'])
    assert len({p.rune.name for p in reading.positions}) == len(reading.positions)
    assert reading.core_meaning == reading.positions[SPREADS[spread]['present']].rune.meaning


def test_rune_positions_use_is_reversed(sample_input, options):
    reading = RunesEngine(sample_input, options=options.model_copy(update={'rune_spread': 'nine-rune'})).calculate()
    for position in reading.model_dump()['positions']:
        assert isinstance(position['is_reversed'], bool)
        assert 'reversed' not in position


def test_aett_balance_only_for_elder(sample_input):
    elder = RunesEngine(sample_input, options=EngineOptions(include_wall_clock=False)).calculate()
    younger = RunesEngine(sample_input, options=EngineOptions(rune_system='younger')).calculate()
    assert elder.aett_balance is not None
    assert younger.aett_balance is None


def test_unknown_rune_system(sample_input):
    with pytest.raises(InvalidOptionError):
        RunesEngine(sample_input, options=EngineOptions(rune_system='ogham')).calculate()
    with pytest.raises(InvalidOptionError):
        RunesEngine(sample_input, options=EngineOptions(rune_spread='seven')).calculate()


@pytest.mark.parametrize('spread', OGHAM_SPREADS, ids=lambda spread: spread['id'])
def test_ogham_spreads(sample_input, spread):
    options = EngineOptions(ogham_spread=spread['id'], include_wall_clock=False)
    reading = CelticEngine(sample_input, options=options).calculate()
    assert reading.spread_id == spread['id']
    assert len(reading.drawn) == len(spread['positions'])
    assert len({few.name for few in reading.drawn}) == len(reading.drawn)


def test_birth_tree(sample_input, options):
    reading = CelticEngine(sample_input, options=options).calculate()
    assert reading.birth_tree.name == 'Huathe'


def test_birth_tree_nameless_day(options):
    data = DivinationInput(full_name='山田', birth_date='1985-12-23')
    assert CelticEngine(data, options=options).calculate().birth_tree is None


def test_tree_month_for():
    assert tree_month_for(1, 1) == 'Beith'
    assert tree_month_for(12, 24) == 'Beith'
    assert tree_month_for(1, 21) == 'Luis'
    assert tree_month_for(11, 30) == 'Ruis'


def test_unknown_ogham_spread(sample_input):
    with pytest.raises(InvalidOptionError):
        CelticEngine(sample_input, options=EngineOptions(ogham_spread='stonehenge')).calculate()
