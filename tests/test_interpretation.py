from datetime import datetime

import pytest

from divination.data.tarot_cards import get_tarot_card
from divination.engines.tarot import TarotEngine
from divination.interpretation import interpret
from divination.models import DivinationInput, EngineOptions

FOOL = get_tarot_card('fool')
MAGICIAN = get_tarot_card('magician')


def test_all_parts_are_joined():
    text = interpret(FOOL, '現在', '仕事・転職', 'morning', seed=0)
    assert text == ' '.join([
        '新しい冒険が始まる予感。純粋な心で一歩を踏み出す時が来ました',
        '今まさに新しいスタートラインに立っています',
        '転職や新しいプロジェクトに挑戦する絶好のタイミング',
        '朝の新鮮なエネルギーと共に、新しい一日を始めましょう',
    ])


def test_seed_selects_message():
    assert interpret(FOOL, '現在', seed=1).startswith('既成概念にとらわれない')
    assert interpret(FOOL, '現在', seed=1, is_reversed=True).startswith('現実を見つめ直し')


@pytest.mark.parametrize('category, expected', [
    ('恋愛・結婚', '新しい恋愛の始まり。純粋な気持ちで相手と向き合って'),
    ('金運・財運', '新しい投資や収入源の開拓に向いています'),
    ('健康', '新しい健康習慣を始めるのに最適な時期'),
    ('人間関係', '人生の新しいサイクルが始まる重要な時期'),
    ('占星術', '人生の新しいサイクルが始まる重要な時期'),
    (None, '人生の新しいサイクルが始まる重要な時期'),
])
def test_category_messages(category, expected):
    assert expected in interpret(FOOL, '現在', category)


@pytest.mark.parametrize('time_of_day, expected', [
    ('morning', '朝の新鮮なエネルギー'),
    ('afternoon', '午後の活動的な時間'),
    ('evening', '夜の静けさの中で'),
])
def test_time_of_day_messages(time_of_day, expected):
    assert expected in interpret(FOOL, '未来', time_of_day=time_of_day)


def test_unknown_time_of_day_adds_nothing():
    assert interpret(FOOL, '未来', time_of_day='night') == interpret(FOOL, '未来')


def test_card_without_messages_uses_meanings():
    text = interpret(MAGICIAN, '現在', '仕事・転職')
    assert text.startswith(MAGICIAN['upright_meaning'])
    assert MAGICIAN['meanings']['upright']['career'] in text
    reversed_text = interpret(MAGICIAN, '現在', '恋愛・結婚', is_reversed=True)
    assert reversed_text.startswith(MAGICIAN['reversed_meaning'])
    assert MAGICIAN['meanings']['reversed']['love'] in reversed_text


def test_fallback_text():
    assert interpret({'name': '謎のカード'}, '現在') == '現在における謎のカードの意味'


@pytest.mark.parametrize('hour, expected', [
    (0, 'morning'),
    (11, 'morning'),
    (12, 'afternoon'),
    (17, 'afternoon'),
    (18, 'evening'),
    (23, 'evening'),
])
def test_engine_time_of_day_buckets(hour, expected):
    options = EngineOptions(now=datetime(2024, 6, 15, hour, 0))
    assert TarotEngine(DivinationInput(), options=options).time_of_day() == expected
