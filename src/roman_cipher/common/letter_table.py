"""Fixed mapping between Latin letters, their positions and Roman numerals.

The table is built once when the module is imported and never changes
afterwards. Every letter A-Z maps to its 1-based position in the alphabet
and to the Roman numeral of that position, and each Roman numeral maps back
to its letter.
"""
import string
from types import MappingProxyType
from typing import Mapping, NamedTuple, Optional, Tuple

from .roman_numerals import to_roman


ALPHABET = string.ascii_uppercase


class LetterEntry(NamedTuple):
    """One row of the letter table, e.g. ("H", 8, "VIII")."""

    letter: str
    ordinal: int
    roman: str


def _build_entries() -> Tuple[LetterEntry, ...]:
    return tuple(
        LetterEntry(letter, ordinal, to_roman(ordinal))
        for ordinal, letter in enumerate(ALPHABET, start=1)
    )


LETTER_ENTRIES: Tuple[LetterEntry, ...] = _build_entries()

# Read-only lookups derived from the entries above
LETTER_TO_ENTRY: Mapping[str, LetterEntry] = MappingProxyType(
    {entry.letter: entry for entry in LETTER_ENTRIES}
)
ROMAN_TO_LETTER: Mapping[str, str] = MappingProxyType(
    {entry.roman: entry.letter for entry in LETTER_ENTRIES}
)


def lookup_letter(letter: str) -> Optional[LetterEntry]:
    """Return the entry for a letter (case-insensitive), or None if unknown."""
    return LETTER_TO_ENTRY.get(letter.upper())


def lookup_roman(roman: str) -> Optional[str]:
    """Return the letter whose canonical numeral is `roman`, or None.

    Only the minimal numerals produced by `to_roman` are keys here; lenient
    decoding of arbitrary numerals goes through `letter_for_ordinal` instead.
    """
    return ROMAN_TO_LETTER.get(roman.upper())


def letter_for_ordinal(ordinal: int) -> Optional[str]:
    """Return the letter at a 1-based alphabet position, or None outside 1..26."""
    if 1 <= ordinal <= len(ALPHABET):
        return ALPHABET[ordinal - 1]
    return None
