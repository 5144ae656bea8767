from collections import Counter

import pytest

from passgen.errors import InvalidArgument
from passgen.pool import build_pool
from passgen.random_source import SeededRandomSource
from passgen.sampler import sample


class FixedSource:
    def __init__(self, value):
        self.value = value

    def randbelow(self, upper):
        return self.value


def test_length_and_membership():
    pool = build_pool(True, True)
    for length in range(6, 33):
        pw = sample(pool, length)
        assert len(pw) == length
        assert all(c in pool for c in pw)


@pytest.mark.parametrize("length", [6, 32])
def test_letters_only_pool(length):
    pool = build_pool()
    for _ in range(50):
        assert sample(pool, length).isalpha()


@pytest.mark.parametrize("length", [5, 33, 0, -1])
def test_out_of_range_length_raises(length):
    with pytest.raises(InvalidArgument):
        sample(build_pool(), length)


@pytest.mark.parametrize("length", ["12", 12.0, None, True])
def test_non_integer_length_raises(length):
    with pytest.raises(InvalidArgument):
        sample(build_pool(), length)


def test_empty_pool_raises():
    with pytest.raises(InvalidArgument):
        sample("", 10)


def test_invalid_argument_is_value_error():
    with pytest.raises(ValueError):
        sample("", 10)


def test_last_index_is_reachable():
    pool = build_pool()
    assert sample(pool, 6, FixedSource(len(pool) - 1)) == "z" * 6


def test_index_past_end_is_rejected():
    pool = build_pool()
    with pytest.raises(InvalidArgument):
        sample(pool, 6, FixedSource(len(pool)))


def test_not_always_the_same():
    pool = build_pool(True, True)
    passwords = {sample(pool, 12) for _ in range(20)}
    assert len(passwords) > 1


def test_seeded_source_is_reproducible():
    pool = build_pool(True, True)
    first = sample(pool, 16, SeededRandomSource(42))
    second = sample(pool, 16, SeededRandomSource(42))
    assert first == second


def test_every_character_roughly_equally_likely():
    pool = build_pool()
    rng = SeededRandomSource(1234)
    counts = Counter()
    for _ in range(3250):
        counts.update(sample(pool, 32, rng))

    expected = 3250 * 32 / len(pool)
    assert set(counts) == set(pool)
    for char in pool:
        assert abs(counts[char] - expected) < expected * 0.25
