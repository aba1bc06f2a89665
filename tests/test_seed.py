from collections import Counter

from divination.models import DivinationInput
from divination.seed import (
    LCG_MODULUS,
    cast_line,
    char_code_sum,
    draw_without_replacement,
    generate_seed,
    lcg_next,
    lcg_random,
    shuffle,
)


def test_char_code_sum():
    assert char_code_sum('ab') == 97 + 98
    assert char_code_sum('') == 0
    assert char_code_sum(None) == 0


def test_char_code_sum_counts_surrogate_pairs():
    # U+1F600 は UTF-16 で 0xD83D 0xDE00
    assert char_code_sum('\U0001F600') == 0xD83D + 0xDE00


def test_seed_is_deterministic(sample_input):
    assert generate_seed(sample_input) == generate_seed(sample_input)
    assert 0 <= generate_seed(sample_input) < 1000000


def test_seed_changes_with_question(sample_input):
    other = sample_input.model_copy(update={'question': '恋愛運を教えてください'})
    assert generate_seed(sample_input) != generate_seed(other)


def test_seed_with_invalid_birth_date():
    data = DivinationInput(full_name='ab', birth_date='invalid')
    assert generate_seed(data) == 97 + 98


def test_seed_ignores_non_finite_factor(sample_input):
    assert generate_seed(sample_input, float('nan')) == generate_seed(sample_input)


def test_lcg_next():
    assert lcg_next(0) == 12345
    assert lcg_next(1) == (1103515245 + 12345) % LCG_MODULUS


def test_lcg_random_range():
    seed = 42
    for _ in range(1000):
        seed, r = lcg_random(seed)
        assert 0 <= r < 1


def test_shuffle_is_permutation():
    deck = list(range(78))
    shuffled = shuffle(deck, 12345)
    assert sorted(shuffled) == deck
    assert shuffled != deck
    assert deck == list(range(78))


def test_shuffle_is_deterministic():
    assert shuffle(range(22), 7) == shuffle(range(22), 7)
    assert shuffle(range(22), 7) != shuffle(range(22), 8)


def test_draw_without_replacement():
    drawn = draw_without_replacement(range(24), 9, 999)
    assert len(drawn) == 9
    assert len(set(drawn)) == 9
    assert draw_without_replacement(range(5), -1, 1) == []


def test_cast_line_distribution():
    seed = 1
    counts = Counter()
    for _ in range(16000):
        value, seed = cast_line(seed)
        counts[value] += 1
    expected = {6: 1000, 7: 5000, 8: 7000, 9: 3000}
    for value, count in expected.items():
        assert abs(counts[value] - count) < count * 0.15
