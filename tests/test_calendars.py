from datetime import datetime

import pytest

from divination.engines.astrology import (
    AstrologyEngine,
    rising_sign_index,
    sign_index_by_name,
    sign_index_for_date,
)
from divination.engines.feng_shui import FengShuiEngine, annual_stars, kua_number, period_for
from divination.engines.nine_star_ki import (
    NineStarKiEngine,
    adjusted_year,
    compatibility_for,
    daily_star_number,
    monthly_star_number,
    star_for_year,
)
from divination.models import DivinationInput


@pytest.mark.parametrize('year, star', [(1990, 1), (1999, 1), (2000, 9), (2007, 2), (2024, 3)])
def test_star_for_year(year, star):
    assert star_for_year(year) == star


def test_adjusted_year_uses_spring_beginning():
    assert adjusted_year(datetime(2023, 2, 3, 12)) == 2022
    assert adjusted_year(datetime(2023, 2, 4, 12)) == 2023
    assert adjusted_year(datetime(2023, 5, 1)) == 2023


def test_cycle_star_ranges():
    for month in range(1, 13):
        assert 1 <= monthly_star_number(2024, month) <= 9
    for day in range(1, 367):
        assert 1 <= daily_star_number(day) <= 9


def test_star_compatibility_excludes_self():
    compatibility = compatibility_for(5)
    numbers = compatibility.excellent_with + compatibility.good_with + compatibility.challenging_with
    assert sorted(numbers) == [1, 2, 3, 4, 6, 7, 8, 9]


def test_nine_star_reading(sample_input, options):
    reading = NineStarKiEngine(sample_input, options=options).calculate()
    assert reading.main_star.number == 1
    assert reading.main_star.adjusted_year == 1990
    assert reading.direction_fortune.best_direction == reading.direction_fortune.auspicious[0]


@pytest.mark.parametrize('year, gender, kua', [
    (1990, 'male', 1), (1990, 'female', 8),
    (2000, 'male', 9), (2000, 'female', 6),
    (1986, 'male', 2),
])
def test_kua_number(year, gender, kua):
    assert kua_number(year, gender) == kua


def test_kua_is_never_five():
    for year in range(1900, 2100):
        assert kua_number(year, 'male') != 5
        assert kua_number(year, 'female') != 5


def test_annual_stars():
    stars = annual_stars(2024)
    assert len(stars) == 9
    assert stars[0].palace == '中央'
    assert stars[0].star == star_for_year(2024)
    assert sorted(star.star for star in stars) == list(range(1, 10))


def test_period_for():
    assert period_for(2023) == 8
    assert period_for(2024) == 9


def test_feng_shui_reading(sample_input, options):
    reading = FengShuiEngine(sample_input, options=options).calculate()
    assert reading.kua_number == 8
    assert reading.group == '西四命'
    assert len(reading.favorable_directions) == 4
    assert len(reading.unfavorable_directions) == 4
    assert reading.period == 9


@pytest.mark.parametrize('month, day, sign', [
    (3, 21, '牡羊座'), (3, 20, '魚座'), (1, 19, '山羊座'), (1, 20, '水瓶座'),
    (12, 22, '山羊座'), (12, 21, '射手座'), (5, 15, '牡牛座'),
])
def test_sun_sign_boundaries(month, day, sign):
    assert sign_index_for_date(month, day) == sign_index_by_name(sign)


def test_rising_sign_index():
    assert rising_sign_index(0, 6) == 0
    assert rising_sign_index(0, 8) == 1
    assert rising_sign_index(0, 4) == 11


def test_astrology_reading(sample_input, environment, options):
    reading = AstrologyEngine(sample_input, environment, options).calculate()
    assert reading.sun_sign.name == '牡牛座'
    assert reading.moon_sign.name == '蟹座'
    assert reading.rising_sign is not None
    assert sum(reading.element_balance.values()) == 3
    assert reading.retrograde_planets == ['水星']


def test_astrology_without_birth_time(options):
    data = DivinationInput(full_name='山田', birth_date='1990-05-15')
    reading = AstrologyEngine(data, options=options).calculate()
    assert reading.rising_sign is None
    assert sum(reading.element_balance.values()) == 2
