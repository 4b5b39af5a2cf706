"""Character classification for token boundaries.

A token body is a run of "letter or digit" characters: Unicode letters
(category L*) and decimal digits (Nd). Underscore, marks and other
numerics (superscripts, fractions) end a token.

Usage:
    from socialspan.charsets import is_letter_or_digit

    if not is_letter_or_digit(ch):  # token boundary
        ...
"""

import unicodedata

# Fast path for the common case
ASCII_ALNUM: frozenset[str] = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
)


def is_letter_or_digit(char: str) -> bool:
    """Check if a single character continues a hashtag or mention."""
    if char in ASCII_ALNUM:
        return True
    if not char or char.isascii():
        return False
    cat = unicodedata.category(char)
    return cat.startswith("L") or cat == "Nd"


def token_start(text: str, lower: int, upper: int) -> int:
    """Find the boundary before an open token.

    Scans from ``upper`` down to ``lower + 1`` and returns the greatest index
    whose character is not a letter or digit, or ``lower`` when the whole
    range is letters and digits. Index ``lower`` itself is never inspected.

    Complexity: O(upper - lower)
    """
    for i in range(upper, lower, -1):
        if not is_letter_or_digit(text[i]):
            return i
    return lower


__all__ = ["ASCII_ALNUM", "is_letter_or_digit", "token_start"]
