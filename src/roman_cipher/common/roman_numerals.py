"""Roman numeral conversion utilities for the roman cipher package.

This module converts between integers and Roman numerals. Encoding is strict
and always produces the minimal (subtractive) form, while decoding is lenient
so that non-minimal or noisy numerals read from a scan still yield a value.
"""


# Value of each single Roman symbol; anything else counts as 0 when decoding
ROMAN_SYMBOL_VALUES = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}

# Greedy table in descending order, including the subtractive pairs
ROMAN_GREEDY_TABLE = [
    (1000, "M"),
    (900, "CM"),   # 1000 - 100
    (500, "D"),
    (400, "CD"),   # 500 - 100
    (100, "C"),
    (90, "XC"),    # 100 - 10
    (50, "L"),
    (40, "XL"),    # 50 - 10
    (10, "X"),
    (9, "IX"),     # 10 - 1
    (5, "V"),
    (4, "IV"),     # 5 - 1
    (1, "I"),
]

MIN_ROMAN_VALUE = 1
MAX_ROMAN_VALUE = 3999


def to_roman(num: int) -> str:
    """Convert an integer to its minimal uppercase Roman numeral.

    Repeatedly takes the largest table value that still fits into the
    remaining number and appends its symbol, which always yields the unique
    shortest representation (e.g. 4 is "IV", never "IIII").

    Args:
        num: Integer between 1 and 3999 inclusive

    Returns:
        Uppercase Roman numeral string

    Raises:
        ValueError: If num is not an integer in the range 1..3999

    Examples:
        >>> to_roman(14)
        'XIV'
        >>> to_roman(26)
        'XXVI'
        >>> to_roman(1994)
        'MCMXCIV'
    """
    # bool is a subclass of int but is never a meaningful numeral
    if not isinstance(num, int) or isinstance(num, bool):
        raise ValueError(f"Input must be an integer, got {num!r}")
    if not MIN_ROMAN_VALUE <= num <= MAX_ROMAN_VALUE:
        raise ValueError(
            f"Input must be between {MIN_ROMAN_VALUE} and {MAX_ROMAN_VALUE}, got {num}"
        )

    result = []
    for value, symbol in ROMAN_GREEDY_TABLE:
        while num >= value:
            result.append(symbol)
            num -= value

    return "".join(result)


def from_roman(roman: str) -> int:
    """Convert a Roman numeral string to an integer, leniently.

    Each symbol is compared with the one that follows it: a smaller value in
    front of a larger one is subtracted, otherwise it is added. This running
    sum accepts non-minimal numerals such as "IIII" and never rejects input;
    characters outside I, V, X, L, C, D, M contribute nothing.

    Args:
        roman: Roman numeral string (expected uppercase)

    Returns:
        The integer produced by the scan. This can be 0, negative, or far
        outside the letter range for malformed input, so callers must
        range-check the result.

    Examples:
        >>> from_roman("XIV")
        14
        >>> from_roman("IIII")
        4
        >>> from_roman("")
        0
    """
    total = 0

    for i, symbol in enumerate(roman):
        current = ROMAN_SYMBOL_VALUES.get(symbol, 0)
        following = ROMAN_SYMBOL_VALUES.get(roman[i + 1], 0) if i + 1 < len(roman) else 0

        # Subtractive notation: I before V means subtract 1
        if current < following:
            total -= current
        else:
            total += current

    return total
