from datetime import date

from divination.engines.mayan import (
    MayanCalendarEngine,
    days_since_epoch,
    haab,
    kin_number,
    mayan_date,
    oracle,
    sign_index,
    thirteen_moon,
    tone_number,
    wavespell,
)


def test_end_of_thirteenth_baktun():
    result = mayan_date(date(2012, 12, 21))
    assert result.days_since_epoch == 1872000
    assert result.long_count.notation == '13.0.0.0.0'
    assert result.tzolkin.tone['number'] == 4
    assert result.tzolkin.day_sign['name'] == 'Ajaw'
    assert result.tzolkin.kin == 160
    assert result.haab.label == "3 K'ank'in"


def test_epoch_day():
    # 0.0.0.0.0 = 4 Ajaw 8 Kumk'u
    assert tone_number(0) == 4
    assert sign_index(0) == 19
    assert haab(0).label == "8 Kumk'u"


def test_kin_matches_tone_and_sign():
    for days in range(0, 520, 7):
        kin = kin_number(days)
        assert (kin - 1) % 13 + 1 == tone_number(days)
        assert (kin - 1) % 20 == sign_index(days)


def test_oracle_destiny_and_occult():
    result = oracle(19, 4)
    assert result.destiny['name'] == 'Ajaw'
    assert result.occult['name'] == 'Imix'
    assert result.occult_tone == 10


def test_wavespell():
    days = days_since_epoch(date(2012, 12, 21))
    result = wavespell(days)
    assert result.day_in_wave == 4
    assert result.guidance


def test_thirteen_moon():
    assert thirteen_moon(date(2024, 7, 25)).day_out_of_time
    first = thirteen_moon(date(2024, 7, 26))
    assert (first.moon, first.day) == (1, 1)
    assert (thirteen_moon(date(2024, 8, 22)).moon, thirteen_moon(date(2024, 8, 22)).day) == (1, 28)
    assert (thirteen_moon(date(2024, 8, 23)).moon, thirteen_moon(date(2024, 8, 23)).day) == (2, 1)


def test_engine_reading(sample_input, options):
    reading = MayanCalendarEngine(sample_input, options=options).calculate()
    assert reading.birth is not None
    assert 1 <= reading.birth.tzolkin.kin <= 260
    assert reading.today.gregorian == '2024-06-15'
    assert set(reading.biorhythm) and all(-100 <= v <= 100 for v in reading.biorhythm.values())
    assert reading.core_meaning


def test_engine_with_invalid_birth(malformed_input, options):
    reading = MayanCalendarEngine(malformed_input, options=options).calculate()
    assert reading.birth is None
    assert reading.oracle is None
    assert reading.today.gregorian == '2024-06-15'
