from divination.data.aura_soma import BOTTLES, COLORS
from divination.data.chakras import CHAKRAS
from divination.data.iching_hexagrams import (
    HEXAGRAMS,
    get_hexagram_by_binary,
    get_hexagram_by_number,
    get_hexagram_by_trigrams,
)
from divination.data.mayan import DAY_SIGNS, GALACTIC_TONES, HAAB_MONTHS
from divination.data.ogham import OGHAM_FEWS, OGHAM_SPREADS, get_ogham_spread
from divination.data.runes import RUNE_SYSTEMS, get_rune_system
from divination.data.tarot_cards import ALL_TAROT_CARDS, get_cards_by_arcana, get_tarot_card


def test_tarot_deck():
    assert len(ALL_TAROT_CARDS) == 78
    assert len(get_cards_by_arcana('major')) == 22
    assert len({card['id'] for card in ALL_TAROT_CARDS}) == 78


def test_get_tarot_card_unknown():
    assert get_tarot_card(None) is None
    assert get_tarot_card('no-such-card') is None


def test_hexagrams():
    assert len(HEXAGRAMS) == 64
    assert sorted(h['number'] for h in HEXAGRAMS) == list(range(1, 65))
    numbers = {get_hexagram_by_trigrams(h['upper_trigram'], h['lower_trigram'])['number'] for h in HEXAGRAMS}
    assert len(numbers) == 64


def test_hexagram_lookup_by_binary():
    assert get_hexagram_by_binary('111111')['number'] == 1
    assert get_hexagram_by_binary('000000')['number'] == 2
    assert get_hexagram_by_binary('111000')['number'] == 11
    assert get_hexagram_by_binary('11') is None
    assert get_hexagram_by_binary(None) is None
    assert get_hexagram_by_binary(111111) is None
    assert get_hexagram_by_number(65) is None


def test_rune_systems():
    assert len(get_rune_system('elder')) == 24
    assert len(get_rune_system('younger')) == 16
    assert len(get_rune_system('anglo_saxon')) == 29
    assert get_rune_system('unknown') is None
    assert set(RUNE_SYSTEMS) == {'elder', 'younger', 'anglo_saxon'}


def test_ogham():
    assert len(OGHAM_FEWS) == 20
    assert get_ogham_spread('three-realms') is not None
    assert get_ogham_spread('nothing') is None
    assert {spread['id'] for spread in OGHAM_SPREADS} >= {
        'single-ogham', 'three-realms', 'four-elements', 'sacred-grove', 'druid-wheel'}


def test_mayan_tables():
    assert len(DAY_SIGNS) == 20
    assert len(GALACTIC_TONES) == 13
    assert len(HAAB_MONTHS) == 19
    assert DAY_SIGNS[19]['name'] == 'Ajaw'


def test_chakras():
    assert [chakra['number'] for chakra in CHAKRAS] == list(range(1, 8))


def test_aura_soma_bottles():
    assert len(BOTTLES) == 19
    assert len({bottle['number'] for bottle in BOTTLES}) == 19
    for bottle in BOTTLES:
        for color in (bottle['upper'], bottle['lower']):
            assert color.replace('ペール', '').replace('ミッドトーン', '') in COLORS
