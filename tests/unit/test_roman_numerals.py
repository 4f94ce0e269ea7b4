"""Tests for Roman numeral conversion."""

import pytest

from roman_cipher.common.roman_numerals import from_roman, to_roman


@pytest.mark.parametrize(
    "num, expected",
    [
        (1, "I"),
        (4, "IV"),
        (9, "IX"),
        (14, "XIV"),
        (19, "XIX"),
        (26, "XXVI"),
        (40, "XL"),
        (90, "XC"),
        (400, "CD"),
        (1994, "MCMXCIV"),
        (3999, "MMMCMXCIX"),
    ],
)
def test_to_roman(num, expected):
    """Test minimal numerals, including subtractive pairs."""
    assert to_roman(num) == expected


def test_to_roman_never_repeats_four_symbols():
    """Test that I, X and C are never repeated four times in a row."""
    for num in range(1, 4000):
        roman = to_roman(num)
        assert "IIII" not in roman
        assert "XXXX" not in roman
        assert "CCCC" not in roman


@pytest.mark.parametrize("num", [0, -1, 4000, 2.5, "5", True])
def test_to_roman_rejects_out_of_range(num):
    """Test that values outside 1..3999 raise ValueError."""
    with pytest.raises(ValueError):
        to_roman(num)


def test_round_trip_letter_range():
    """Test that every letter position survives conversion both ways."""
    for num in range(1, 27):
        assert from_roman(to_roman(num)) == num


def test_round_trip_full_range():
    """Test the full classical range."""
    for num in (1, 49, 444, 999, 2024, 3888, 3999):
        assert from_roman(to_roman(num)) == num


def test_from_roman_lenient():
    """Test that non-minimal numerals still parse."""
    assert from_roman("IIII") == 4
    assert from_roman("VIIII") == 9
    assert from_roman("XXXXII") == 42


def test_from_roman_malformed():
    """Test that malformed input yields some integer instead of failing."""
    assert from_roman("") == 0
    assert from_roman("IIV") == 5  # +1 -1 +5
    assert from_roman("IM") == 999
    assert from_roman("IVX") == 4  # -1 -5 +10


def test_from_roman_ignores_unknown_characters():
    """Test that unknown characters contribute nothing."""
    assert from_roman("X?V") == 15
    assert from_roman("ABE") == 0
