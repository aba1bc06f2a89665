from datetime import datetime

import pytest

from divination.engines.tarot import SPREADS, TarotEngine
from divination.exceptions import InvalidOptionError
from divination.models import EngineOptions


def test_three_card_reading(sample_input, environment, options):
    reading = TarotEngine(sample_input, environment, options).calculate()
    assert reading.spread.type == 'three-card'
    assert len(reading.positions) == 3
    assert len({p.card.id for p in reading.positions}) == 3
    assert reading.core_meaning
    assert reading.interactive_elements.selection_method == 'random'


def test_reading_is_reproducible(sample_input, environment, options):
    first = TarotEngine(sample_input, environment, options).calculate()
    second = TarotEngine(sample_input, environment, options).calculate()
    assert [p.card.id for p in first.positions] == [p.card.id for p in second.positions]
    assert [p.is_reversed for p in first.positions] == [p.is_reversed for p in second.positions]


@pytest.mark.parametrize('spread_type', list(SPREADS))
def test_every_spread(sample_input, spread_type):
    options = EngineOptions(spread_type=spread_type, include_wall_clock=False)
    reading = TarotEngine(sample_input, options=options).calculate()
    assert reading.spread.type == spread_type
    assert len({p.card.id for p in reading.positions}) == len(reading.positions)


def test_celtic_cross_has_ten_cards(sample_input):
    options = EngineOptions(spread_type='celtic-cross', include_wall_clock=False)
    reading = TarotEngine(sample_input, options=options).calculate()
    assert len(reading.positions) == 10


def test_selected_cards_are_used(sample_input):
    options = EngineOptions(spread_type='three-card', selected_card_indices=[0, 0, 100],
                            include_wall_clock=False)
    engine = TarotEngine(sample_input, options=options)
    reading = engine.calculate()
    ids = [p.card.id for p in reading.positions]
    assert ids[0] == engine.deck[0]['id']
    assert ids[1] == engine.deck[1]['id']
    assert ids[2] == engine.deck[100 % 78]['id']
    assert reading.interactive_elements.selected_by_user


def test_unknown_spread(sample_input):
    options = EngineOptions(spread_type='pentagram')
    with pytest.raises(InvalidOptionError):
        TarotEngine(sample_input, options=options).calculate()


def test_card_preview(sample_input):
    engine = TarotEngine(sample_input)
    assert engine.get_deck_size() == 78
    assert engine.get_card_preview(0) is not None
    assert engine.get_card_preview(78) is None
    assert engine.get_card_preview(-1) is None


def test_available_spreads(sample_input):
    spreads = TarotEngine(sample_input).get_available_spreads()
    assert len(spreads) == len(SPREADS)


def test_celtic_cross_position_labels(sample_input):
    options = EngineOptions(spread_type='celtic-cross', include_wall_clock=False)
    reading = TarotEngine(sample_input, options=options).calculate()
    assert [p.position for p in reading.positions] == [
        '現在の状況', '直面する課題', '遠い過去/根本原因', '近い過去', '可能な未来',
        '近い未来', 'あなたの立場', '外部からの影響', '希望と恐れ', '最終結果',
    ]


def test_spread_card_counts(sample_input):
    spreads = TarotEngine(sample_input).get_available_spreads()
    assert {s['type']: s['card_count'] for s in spreads} == {
        'one-card': 1,
        'three-card': 3,
        'celtic-cross': 10,
        'relationship': 7,
        'decision': 5,
    }


def test_different_name_gives_different_cards(sample_input, options):
    options = options.model_copy(update={'spread_type': 'celtic-cross'})
    other = sample_input.model_copy(update={'full_name': '佐藤太郎'})
    first = TarotEngine(sample_input, options=options).calculate()
    second = TarotEngine(other, options=options).calculate()
    assert [p.card.id for p in first.positions] != [p.card.id for p in second.positions]


def test_wall_clock_changes_cards(sample_input):
    def draw(now):
        options = EngineOptions(spread_type='celtic-cross', include_wall_clock=True, now=now)
        return [p.card.id for p in TarotEngine(sample_input, options=options).calculate().positions]

    assert draw(datetime(2024, 6, 15, 10, 30, 0)) != draw(datetime(2024, 6, 15, 10, 30, 1))


@pytest.mark.parametrize('category, marker', [
    ('恋愛・結婚', '愛において'),
    ('仕事・転職', 'キャリアにおいて'),
    ('金運・財運', '豊かさを得るために'),
    ('健康', '心身の健康のために'),
    ('総合運', 'の大切さです'),
    ('人間関係', 'の大切さです'),
])
def test_guidance_by_category(sample_input, options, category, marker):
    data = sample_input.model_copy(update={'question_category': category})
    reading = TarotEngine(data, options=options).calculate()
    assert reading.personalized_guidance.startswith(f"「{data.question}」という問いに対して、")
    assert marker in reading.personalized_guidance


def test_guidance_without_question(sample_input, options):
    data = sample_input.model_copy(update={'question': None})
    options = options.model_copy(update={'spread_type': 'three-card'})
    reading = TarotEngine(data, options=options).calculate()
    assert reading.personalized_guidance == '過去・現在・未来の流れを意識しながら、今を大切に生きてください。'
