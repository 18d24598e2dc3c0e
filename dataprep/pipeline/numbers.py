from __future__ import annotations

import math
import re
from typing import Any

from text_to_num import text2num

"""Numeric literal parsing and English number-word resolution.

Used by type inference (is this a number?) and by value cleaning (turn
"1,200" or "twelve" into a number). Neither function raises; unparseable input
yields None. A number is only accepted when it is representable as a finite
float, so later statistics never overflow.

Word parsing is delegated to ``text2num``; this module adds the sign word
("minus"/"negative"), a decimal "point" part and the filler words "and"/"a".
"""

__all__ = [
    "NUMBER_PATTERN",
    "is_finite_number",
    "parse_number",
    "words_to_number",
    "resolve_number",
]

# Plain decimal literal with optional sign and exponent. Underscores, hex and
# "inf"/"nan" are deliberately not numbers here.
NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

WORDS_LANG = "en"
_NEGATIVE = {"minus", "negative"}


def is_finite_number(value: Any) -> bool:
    """True for an int or float that converts to a finite float."""
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def parse_number(text: str) -> int | float | None:
    """Parse a decimal literal, ignoring thousands-separator commas.

    Integral literals (no point, no exponent) come back as int, everything else
    as float. Literals beyond the float range are rejected.
    """
    literal = text.strip().replace(",", "")
    if not NUMBER_PATTERN.fullmatch(literal):
        return None
    if not math.isfinite(float(literal)):
        return None
    if "." in literal or "e" in literal.lower():
        return float(literal)
    try:
        return int(literal)
    except ValueError:
        # int() refuses very long digit strings, e.g. heavy zero padding
        return None


def _words_to_int(tokens: list[str]) -> int | None:
    try:
        return text2num(" ".join(tokens), WORDS_LANG)
    except ValueError:
        return None


def words_to_number(text: str) -> int | float | None:
    """Resolve English number words, e.g. "one hundred and five" -> 105.

    Words that do not form a single number ("one two") resolve to None.
    """
    tokens = [t for t in text.strip().lower().split() if t != "and"]
    if tokens and tokens[0] in _NEGATIVE:
        sign, tokens = -1, tokens[1:]
    else:
        sign = 1
    if tokens and tokens[0] == "a":
        tokens[0] = "one"
    if not tokens:
        return None

    if "point" not in tokens:
        whole = _words_to_int(tokens)
        return None if whole is None else sign * whole

    idx = tokens.index("point")
    head, tail = tokens[:idx], tokens[idx + 1:]
    whole = _words_to_int(head) if head else 0
    if whole is None or not tail:
        return None
    digits = []
    for tok in tail:
        digit = _words_to_int([tok])
        if digit is None or not 0 <= digit <= 9:
            return None
        digits.append(str(digit))
    return sign * float(f"{whole}.{''.join(digits)}")


def resolve_number(text: str) -> int | float | None:
    """Parse ``text`` as a literal first, then as number words."""
    value = parse_number(text)
    if value is not None:
        return value
    return words_to_number(text.replace(",", ""))
