from divination.data.aura_soma import BOTTLES
from divination.engines.akashic import AkashicRecordsEngine, missing_numbers, past_life_indices
from divination.engines.aura_soma import AuraSomaEngine, base_color, color_balance
from divination.engines.chakra import ChakraEngine, balance_for, rotation_for


def test_balance_for():
    assert balance_for(10, 50) == 'blocked'
    assert balance_for(30, 50) == 'underactive'
    assert balance_for(90, 50) == 'overactive'
    assert balance_for(45, 20) == 'underactive'
    assert balance_for(65, 80) == 'overactive'
    assert balance_for(55, 50) == 'balanced'
    assert rotation_for('blocked') == '停滞'
    assert rotation_for('balanced') == '時計回り'


def test_chakra_reading(sample_input, environment, options):
    reading = ChakraEngine(sample_input, environment, options).calculate()
    assert len(reading.chakras) == 7
    for state in reading.chakras:
        assert 0 <= state.openness <= 100
    assert reading.dominant_chakra == max(reading.chakras, key=lambda s: s.openness).name
    assert len(reading.healing_practices) == len(reading.blocked_chakras)
    assert len(reading.weekly_schedule) == 7


def test_base_color():
    assert base_color('ペールブルー') == 'ブルー'
    assert base_color('ミッドトーンバイオレット') == 'バイオレット'
    assert base_color('ゴールド') == 'ゴールド'
    assert base_color('虹色') == 'クリア'


def test_color_balance():
    balance = color_balance(['レッド', 'オレンジ', 'ブルー', 'クリア'])
    assert (balance.warm, balance.cool, balance.neutral) == (2, 1, 1)
    assert balance.tendency == '暖色優位'


def test_aura_soma_reading(sample_input, environment, options):
    engine = AuraSomaEngine(sample_input, environment, options)
    reading = engine.calculate()
    assert len(reading.bottles) == 4
    assert len({bottle.number for bottle in reading.bottles}) == 4
    assert reading.bottles[0].number == BOTTLES[engine.soul_digest()[0] % len(BOTTLES)]['number']
    assert reading.pomanders
    assert reading.core_meaning


def test_soul_bottle_depends_only_on_name_and_birth(sample_input, options):
    first = AuraSomaEngine(sample_input, options=options).calculate()
    other = sample_input.model_copy(update={'question': '別の質問'})
    second = AuraSomaEngine(other, options=options).calculate()
    assert first.bottles[0].number == second.bottles[0].number
    assert first.soul_signature == second.soul_signature


def test_missing_numbers():
    assert missing_numbers('19900515') == [2, 3, 4, 6, 7, 8]
    assert missing_numbers('123456789') == []


def test_past_life_indices_are_distinct():
    assert len(set(past_life_indices(bytes(32)))) == 3
    assert len(set(past_life_indices(bytes(range(32))))) == 3


def test_akashic_reading(sample_input, options):
    reading = AkashicRecordsEngine(sample_input, options=options).calculate()
    assert reading.life_path_number == 3
    assert reading.missing_numbers == [2, 3, 4, 6, 7, 8]
    assert len(reading.karmic_lessons) == 6
    assert len(reading.past_lives) == 3
    assert 1 <= reading.soul_age.level <= 7
    assert 50 <= reading.soul_type.frequency <= 100
    assert reading.record_access.level == 7


def test_akashic_signature_is_stable(sample_input, options):
    first = AkashicRecordsEngine(sample_input, options=options).calculate()
    second = AkashicRecordsEngine(sample_input, options=options).calculate()
    assert first.soul_signature == second.soul_signature


def test_akashic_with_invalid_birth(malformed_input, options):
    reading = AkashicRecordsEngine(malformed_input, options=options).calculate()
    assert reading.life_path_number == 9
    assert reading.missing_numbers == []
