"""Encode text into the Roman numeral cipher and decode it back.

Cipher format:
    Letters become tokens joined by "." and words are joined by " - ".
    For example "LOVE STAMP" encodes to

        XII.XV.XXII.V - XIX.XX.I.XIII.XVI

The cipher has two flavors. The Roman flavor uses Roman numerals as tokens
and can be decoded again. The numeric flavor uses the plain alphabet
position (1-26) of every letter and is only produced for display; it has
no decoder.
"""
import re
from enum import Enum
from typing import List, NamedTuple

from .common.letter_table import letter_for_ordinal, lookup_letter
from .common.roman_numerals import from_roman


WORD_SEPARATOR = " - "
TOKEN_SEPARATOR = "."
UNKNOWN_LETTER = "?"

# Only these characters take part in encoding; everything else inside a word is dropped
_NON_LETTER_PATTERN = re.compile(r"[^A-Z]")


class Flavor(str, Enum):
    """Token alphabet used by a cipher string."""

    ROMAN = "roman"
    NUMERIC = "numeric"


class EncodedCipher(NamedTuple):
    """Both renderings of the same text."""

    roman: str
    numeric: str


def _encode_word(word: str, flavor: Flavor) -> List[str]:
    """Turn one upper-cased word into its list of tokens."""
    tokens = []
    for char in _NON_LETTER_PATTERN.sub("", word):
        entry = lookup_letter(char)
        if entry is None:
            continue
        tokens.append(entry.roman if flavor is Flavor.ROMAN else str(entry.ordinal))
    return tokens


def encode(text: str, flavor: Flavor = Flavor.ROMAN) -> str:
    """Encode free text into a cipher string.

    The text is upper-cased and split into words on runs of whitespace.
    Inside a word only the letters A-Z are kept; digits and punctuation are
    dropped without splitting the word. Words left without any letter are
    omitted entirely rather than producing an empty segment.

    Args:
        text: Any user text
        flavor: Flavor.ROMAN for numeral tokens, Flavor.NUMERIC for 1-26 tokens

    Returns:
        The cipher string, or "" if the text contains no letters

    Examples:
        >>> encode("Hello")
        'VIII.V.XII.XII.XV'
        >>> encode("Hi, 007!", Flavor.NUMERIC)
        '8.9'
    """
    flavor = Flavor(flavor)
    encoded_words = []

    for word in text.upper().split():
        tokens = _encode_word(word, flavor)
        if tokens:
            encoded_words.append(TOKEN_SEPARATOR.join(tokens))

    return WORD_SEPARATOR.join(encoded_words)


def encode_both(text: str) -> EncodedCipher:
    """Encode text in both flavors at once, as shown side by side to users."""
    return EncodedCipher(
        roman=encode(text, Flavor.ROMAN),
        numeric=encode(text, Flavor.NUMERIC),
    )


def decode_token(token: str) -> str:
    """Decode a single Roman numeral token into a letter, or "?" if out of range."""
    letter = letter_for_ordinal(from_roman(token.strip().upper()))
    return letter if letter is not None else UNKNOWN_LETTER


def decode(cipher: str) -> str:
    """Decode a Roman flavor cipher string back into text.

    Words are split on the exact separator " - " and tokens on ".". Each
    token is read as a Roman numeral; values 1-26 become letters and
    anything else becomes "?". Decoding never fails, it only degrades.

    Note:
        Splitting is literal. A stray extra space around the dash will merge
        or break words, because only the canonical format is accepted.

    Args:
        cipher: Roman flavor cipher string

    Returns:
        Upper-case text with words separated by single spaces

    Example:
        >>> decode("VIII.V.XII.XII.XV - XXIII.XV.XVIII.XII.IV")
        'HELLO WORLD'
    """
    words = []
    for word in cipher.split(WORD_SEPARATOR):
        words.append("".join(decode_token(token) for token in word.split(TOKEN_SEPARATOR)))
    return " ".join(words)
