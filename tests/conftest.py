import os
import sys
from datetime import datetime

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from divination.models import (  # noqa: E402
    DivinationInput,
    EngineOptions,
    EnvironmentData,
    LunarData,
    PlanetaryData,
    SolarData,
    WeatherData,
)

FIXED_NOW = datetime(2024, 6, 15, 10, 30)


@pytest.fixture
def sample_input():
    return DivinationInput(
        full_name='山田花子',
        birth_date='1990-05-15',
        birth_time='08:30',
        gender='female',
        question='今年の仕事運はどうなりますか',
        question_category='仕事・転職',
    )


@pytest.fixture
def malformed_input():
    return DivinationInput(
        full_name='',
        birth_date='invalid',
        birth_time='',
        birth_place='',
        gender='',
    )


@pytest.fixture
def environment():
    return EnvironmentData(
        lunar=LunarData(phase=0.02, phase_name='新月', moon_sign='蟹座'),
        solar=SolarData(solar_activity='moderate', geomagnetic_activity=3),
        planetary=PlanetaryData(retrograde_planets=['Mercury']),
        weather=WeatherData(condition='晴れ', temperature=24, humidity=55),
    )


@pytest.fixture
def options():
    return EngineOptions(now=FIXED_NOW, include_wall_clock=False)
