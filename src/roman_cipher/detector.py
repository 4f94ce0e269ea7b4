"""Recover a canonical cipher string from noisy recognized text.

OCR output of a photographed cipher rarely comes back in the exact
" - " / "." format: dots go missing, spaces multiply and stray characters
creep in. This module runs the recognized text through an ordered pipeline:

1. Normalize whitespace, case and the allowed character set
2. Extract candidate tokens (runs of Roman numeral symbols, or digit runs)
3. Filter the candidates down to plausible letter tokens
4. Reconstruct a canonical cipher string from the survivors

Roman numeral detection is always attempted first; the numeric flavor is
only tried when no Roman candidate survives.
"""
import re
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from .cipher import TOKEN_SEPARATOR, WORD_SEPARATOR, Flavor


# Everything outside this set is removed before candidates are extracted
DISALLOWED_CHARS_PATTERN = re.compile(r"[^A-Z0-9.\- ]")
WHITESPACE_PATTERN = re.compile(r"\s+")

# Maximal runs of Roman numeral symbols
ROMAN_RUN_PATTERN = re.compile(r"[IVXLCDM]+")

# Canonical Roman numeral grammar for 1-3999
STRICT_ROMAN_PATTERN = re.compile(r"M{0,3}(CM|CD|D?C{0,3})(XC|XL|L?X{0,3})(IX|IV|V?I{0,3})")

# Fallback for scan noise that breaks the strict grammar (e.g. "IIII", "VX")
LOOSE_ROMAN_PATTERN = re.compile(r"[IVXLCDM]{1,6}")

# Runs of one or two digits not touching other digits
DIGIT_RUN_PATTERN = re.compile(r"(?<!\d)\d{1,2}(?!\d)")

MIN_LETTER_INDEX = 1
MAX_LETTER_INDEX = 26


class ClassificationResult(BaseModel):
    """Outcome of classifying recognized text.

    Attributes:
        valid: Whether a cipher could be reconstructed
        text: Canonical cipher string ("" when invalid)
        flavor: Detected flavor, None when invalid
    """

    model_config = ConfigDict(frozen=True)

    valid: bool
    text: str = ""
    flavor: Optional[Flavor] = None

    @classmethod
    def invalid(cls) -> "ClassificationResult":
        return cls(valid=False)


def normalize_recognized_text(raw_text: str) -> str:
    """Collapse whitespace, upper-case and strip characters outside [A-Z0-9.- ]."""
    collapsed = WHITESPACE_PATTERN.sub(" ", raw_text).upper()
    return DISALLOWED_CHARS_PATTERN.sub("", collapsed)


def extract_roman_candidates(text: str) -> List[str]:
    return ROMAN_RUN_PATTERN.findall(text)


def is_plausible_roman(candidate: str) -> bool:
    """Accept canonical numerals, or any short run of numeral symbols."""
    if not candidate:
        return False
    return bool(
        STRICT_ROMAN_PATTERN.fullmatch(candidate) or LOOSE_ROMAN_PATTERN.fullmatch(candidate)
    )


def extract_numeric_candidates(text: str) -> List[str]:
    return DIGIT_RUN_PATTERN.findall(text)


def is_letter_index(candidate: str) -> bool:
    return MIN_LETTER_INDEX <= int(candidate) <= MAX_LETTER_INDEX


def _reconstruct_roman(segment: str) -> List[str]:
    return [c for c in extract_roman_candidates(segment) if is_plausible_roman(c)]


def _reconstruct_numeric(segment: str) -> List[str]:
    # int() drops a leading zero, so "05" is emitted as "5"
    return [str(int(c)) for c in extract_numeric_candidates(segment) if is_letter_index(c)]


def _reconstruct(segments: List[str], flavor: Flavor) -> Optional[str]:
    """Rebuild a cipher string from text segments, or None if nothing survives.

    Each segment becomes one word; segments without surviving tokens are
    skipped, matching how encoding drops empty words.
    """
    extract = _reconstruct_roman if flavor is Flavor.ROMAN else _reconstruct_numeric

    words = []
    for segment in segments:
        tokens = extract(segment)
        if tokens:
            words.append(TOKEN_SEPARATOR.join(tokens))

    if not words:
        return None
    return WORD_SEPARATOR.join(words)


def classify(raw_text: str, keep_word_breaks: bool = False) -> ClassificationResult:
    """Classify recognized text and rebuild a canonical cipher string.

    By default all surviving tokens are joined into one flat word, so the
    " - " word structure of the original cipher is lost. Passing
    keep_word_breaks=True instead splits the normalized text on dashes and
    rebuilds one word per dash-separated segment.

    Numeric tokens are written the way encoding writes them, without a
    leading zero, so a recognized "05" becomes "5". Digit runs longer than
    two characters are skipped rather than split.

    Args:
        raw_text: Text returned by a recognizer, possibly noisy
        keep_word_breaks: Rebuild words from the dashes found in the text

    Returns:
        ClassificationResult with the canonical text and detected flavor,
        or an invalid result if no plausible token was found

    Examples:
        >>> classify("VIII V XII XII XV").text
        'VIII.V.XII.XII.XV'
        >>> classify("8 5 12 12 15").flavor
        <Flavor.NUMERIC: 'numeric'>
        >>> classify("@@@###").valid
        False
    """
    normalized = normalize_recognized_text(raw_text).strip()
    if not normalized:
        return ClassificationResult.invalid()

    segments = normalized.split("-") if keep_word_breaks else [normalized]

    # Roman numerals take priority over plain numbers
    for flavor in (Flavor.ROMAN, Flavor.NUMERIC):
        text = _reconstruct(segments, flavor)
        if text is not None:
            return ClassificationResult(valid=True, text=text, flavor=flavor)

    return ClassificationResult.invalid()
