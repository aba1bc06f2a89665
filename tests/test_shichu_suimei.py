from datetime import date, datetime

import pytest

from divination.engines.shichu_suimei import (
    ELEMENT_ACTIONS,
    ShichuSuimeiEngine,
    day_cycle_index,
    hour_cycle_index,
    kong_wang,
    month_cycle_index,
    month_offset,
    ten_god,
    twelve_stage,
    year_cycle_index,
)
from divination.models import DivinationInput


@pytest.mark.parametrize('day, expected', [
    (date(2000, 1, 7), 0),   # 甲子
    (date(1949, 10, 1), 0),  # 甲子
    (date(1900, 1, 1), 10),  # 甲戌
    (date(1990, 5, 15), 16),  # 庚辰
])
def test_day_cycle_anchors(day, expected):
    assert day_cycle_index(day) == expected


def test_year_and_month_cycles():
    assert year_cycle_index(1984) == 0
    assert year_cycle_index(1990) == 6
    # 庚年の巳月は辛巳
    assert month_offset(datetime(1990, 5, 15)) == 3
    assert month_cycle_index(6, 3) == 17
    # 小寒から立春までは丑月
    assert month_offset(datetime(1990, 2, 1)) == 11
    assert month_offset(datetime(1990, 1, 2)) == 10


def test_hour_cycle():
    # 庚日の辰の刻は庚辰、甲日の子の刻は甲子
    assert hour_cycle_index(6, 8) == 16
    assert hour_cycle_index(0, 23) == 0
    assert hour_cycle_index(0, 0) == 0


@pytest.mark.parametrize('other, expected', [
    (6, '比肩'), (7, '劫財'), (8, '食神'), (9, '傷官'), (0, '偏財'),
    (1, '正財'), (2, '偏官'), (3, '正官'), (4, '偏印'), (5, '印綬'),
])
def test_ten_gods_for_metal_day(other, expected):
    assert ten_god(6, other) == expected


def test_twelve_stages():
    assert twelve_stage(6, 5)['name'] == '長生'
    assert twelve_stage(6, 6)['name'] == '沐浴'
    assert twelve_stage(6, 4)['name'] == '養'
    # 陰干は逆回り
    assert twelve_stage(1, 6)['name'] == '長生'
    assert twelve_stage(1, 5)['name'] == '沐浴'


def test_kong_wang():
    assert kong_wang(0) == ['戌', '亥']
    assert kong_wang(16) == ['申', '酉']


def test_full_chart(sample_input, environment, options):
    reading = ShichuSuimeiEngine(sample_input, environment, options).calculate()
    assert [reading.year_pillar.name, reading.month_pillar.name,
            reading.day_pillar.name, reading.hour_pillar.name] == ['庚午', '辛巳', '庚辰', '庚辰']
    assert reading.day_pillar.ten_god is None
    assert reading.year_pillar.ten_god == '比肩'
    assert reading.year_pillar.branch_ten_god == '正官'
    assert reading.month_pillar.ten_god == '劫財'
    assert reading.month_pillar.twelve_stage == '長生'
    assert reading.day_pillar.nayin == '白蝋金'
    assert reading.year_pillar.nayin == '路傍土'
    assert reading.kong_wang == ['申', '酉']


def test_element_balance_and_day_master(sample_input, options):
    reading = ShichuSuimeiEngine(sample_input, options=options).calculate()
    assert reading.elements.distribution == {'木': 0, '火': 2, '土': 2, '金': 4, '水': 0}
    assert reading.elements.dominant == '金'
    assert reading.elements.missing == ['木', '水']
    assert reading.day_master.stem == '庚'
    assert reading.day_master.strength == '強い'
    assert reading.day_master.favorable == ['火', '水']
    assert reading.day_master.unfavorable == ['土', '金']
    assert reading.lucky_action in ELEMENT_ACTIONS['火']


def test_ten_god_counts(sample_input, options):
    gods = ShichuSuimeiEngine(sample_input, options=options).calculate().ten_gods
    assert sum(gods.values()) == 7
    assert gods['比肩'] == 2
    assert gods['偏印'] == 2
    assert gods['劫財'] == 1
    assert gods['正官'] == 1
    assert gods['偏官'] == 1


def test_luck_pillars_run_backward_for_yang_year_female(sample_input, options):
    reading = ShichuSuimeiEngine(sample_input, options=options).calculate()
    assert reading.luck_forward is False
    assert [luck.name for luck in reading.luck_pillars[:4]] == ['庚辰', '己卯', '戊寅', '丁丑']
    assert reading.luck_pillars[0].start_age == 3
    assert reading.luck_pillars[0].end_age == 12
    assert reading.current_luck.name == '丁丑'
    assert reading.current_luck.ten_god == '正官'


def test_without_birth_time(options):
    data = DivinationInput(full_name='山田太郎', birth_date='1990-05-15')
    reading = ShichuSuimeiEngine(data, options=options).calculate()
    assert reading.hour_pillar is None
    assert sum(reading.elements.distribution.values()) == 6
    # 性別不明は男性として順行
    assert reading.luck_forward is True
    assert reading.luck_pillars[0].name == '壬午'
    assert reading.luck_pillars[0].start_age == 7


def test_invalid_birth_reads_today(malformed_input, options):
    reading = ShichuSuimeiEngine(malformed_input, options=options).calculate()
    assert reading.year_pillar.name == '甲辰'
    assert reading.month_pillar.name == '庚午'
    assert reading.hour_pillar is None
    assert reading.luck_pillars == []
    assert reading.current_luck is None
    assert reading.core_meaning.startswith('生年月日が不明のため')


def test_yearly_fortune(sample_input, options):
    reading = ShichuSuimeiEngine(sample_input, options=options).calculate()
    assert reading.yearly_fortune.startswith('今年の甲辰年はあなたにとって偏財')
    assert '変化と調整の年' in reading.yearly_fortune


def test_guidance_follows_category(sample_input, options):
    reading = ShichuSuimeiEngine(sample_input, options=options).calculate()
    assert reading.guidance.startswith('キャリアと成長の可能性が高まっています。「今年の仕事運はどうなりますか」について、')
    assert '月柱の金は仕事運を表し' in reading.guidance
    assert '財を表す木が不足している' in reading.interpretation['career']


def test_different_birth_gives_different_chart(sample_input, options):
    other = sample_input.model_copy(update={'birth_date': '1985-11-03'})
    first = ShichuSuimeiEngine(sample_input, options=options).calculate()
    second = ShichuSuimeiEngine(other, options=options).calculate()
    assert first.day_pillar.name != second.day_pillar.name
    assert first.year_pillar.name != second.year_pillar.name
