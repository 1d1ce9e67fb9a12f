"""
Tests for index derivation from a single MD5 digest
"""

import pytest

from bloombloom.filter import hashing
from bloombloom.filter.hashing import derive_indices


def test_known_indices_for_hello():
    # md5("hello") = 5d41402a bc4b2a76 b9719d91 1017c592, read as little-endian int32
    assert derive_indices("hello", 4, 959) == [628, 228, 0, 189]


def test_offsets_wrap_after_four_hashes():
    assert derive_indices("hello", 6, 959) == [628, 228, 0, 189, 628, 228]

    indices = derive_indices("some value", 12, 10007)
    assert indices[:4] == indices[4:8] == indices[8:]


def test_indices_are_deterministic():
    assert derive_indices("Test42", 7, 959) == derive_indices("Test42", 7, 959)


def test_indices_fall_in_range():
    for i in range(500):
        for index in derive_indices(f"value-{i}", 8, 97):
            assert 0 <= index < 97


def test_single_bit_array():
    assert derive_indices("anything", 3, 1) == [0, 0, 0]


def test_unicode_values_hash_their_utf8_encoding():
    assert derive_indices("café", 4, 1000) != derive_indices("cafe", 4, 1000)
    assert len(derive_indices("🌸", 5, 1000)) == 5


def test_most_negative_chunk_stays_non_negative(monkeypatch):
    # every chunk reads as -2**31
    monkeypatch.setattr(hashing, 'digest', lambda value: b'\x00\x00\x00\x80' * 4)
    assert derive_indices("x", 4, 1000) == [648, 648, 648, 648]
    assert derive_indices("x", 1, 959) == [702]


def test_non_string_values_rejected():
    with pytest.raises(TypeError):
        derive_indices(b"bytes", 3, 100)
    with pytest.raises(TypeError):
        derive_indices(None, 3, 100)
