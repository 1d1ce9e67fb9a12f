"""
Tests for bit array sizing and hash count derivation
"""

import math
import pytest

from bloombloom import InvalidArgument
from bloombloom.filter.sizing import compute_bit_array_size, compute_hash_count


@pytest.mark.parametrize("capacity,error_rate,expected", [
    (100, 0.01, 959),
    (1000, 0.01, 9586),
    (10, 0.1, 48),
    (1, 0.5, 2),
    (1, 0.99, 1),
    (100, 0.9, 22),
])
def test_bit_array_size_known_values(capacity, error_rate, expected):
    assert compute_bit_array_size(capacity, error_rate) == expected


@pytest.mark.parametrize("error_rate", [0.0, 1.0, -0.5, 1.5, float('nan'), float('inf')])
def test_bit_array_size_rejects_error_rate_outside_open_interval(error_rate):
    with pytest.raises(InvalidArgument):
        compute_bit_array_size(100, error_rate)


@pytest.mark.parametrize("capacity", [0, -1, -100, 1.5, True, "100", None])
def test_bit_array_size_rejects_non_positive_capacity(capacity):
    with pytest.raises(InvalidArgument):
        compute_bit_array_size(capacity, 0.01)


def test_invalid_argument_is_value_error():
    with pytest.raises(ValueError) as excinfo:
        compute_bit_array_size(100, 1.0)
    assert excinfo.value.argument == 'error_rate'
    assert excinfo.value.value == 1.0


def test_bit_array_size_never_decreases_with_capacity():
    sizes = [compute_bit_array_size(capacity, 0.01) for capacity in range(1, 2000, 7)]
    assert sizes == sorted(sizes)
    assert all(size >= 1 for size in sizes)


def test_bit_array_size_grows_as_error_rate_shrinks():
    assert compute_bit_array_size(100, 0.001) > compute_bit_array_size(100, 0.01) > compute_bit_array_size(100, 0.1)


def test_hash_count_uses_floor_division_by_default():
    # 959 // 100 = 9, 9 * ln 2 = 6.24
    assert compute_hash_count(100, 959) == 6


def test_hash_count_exact_division():
    # 9.59 * ln 2 = 6.65
    assert compute_hash_count(100, 959, exact=True) == 7


def test_hash_count_floors_at_one():
    # 22 // 100 = 0
    assert compute_hash_count(100, 22) == 1
    assert compute_hash_count(100, 22, exact=True) == 1
    assert compute_hash_count(1, 1) == 1


def test_hash_count_matches_rounded_optimum():
    for bits_per_item in range(1, 40):
        expected = max(1, round(bits_per_item * math.log(2)))
        assert compute_hash_count(50, 50 * bits_per_item) == expected


@pytest.mark.parametrize("capacity", [0, -5])
def test_hash_count_rejects_non_positive_capacity(capacity):
    with pytest.raises(InvalidArgument):
        compute_hash_count(capacity, 100)
