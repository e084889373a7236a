"""
pwtoolkit.classifier

Single-pass ASCII character classification:
- classify(text): per-class counts plus adjacent same-class repeat counts
- count_interior_digits_and_symbols(text): digits/symbols excluding both ends
"""

from dataclasses import dataclass
from typing import Optional

LOWER = "lower"
UPPER = "upper"
DIGIT = "digit"
OTHER = "other"


@dataclass(frozen=True)
class CharCounts:
    lowercase: int = 0
    uppercase: int = 0
    digits: int = 0
    special_characters: int = 0
    consecutive_uppercase: int = 0
    consecutive_lowercase: int = 0
    consecutive_digits: int = 0

    @property
    def letters(self) -> int:
        return self.lowercase + self.uppercase


def char_class(c: str) -> str:
    # str.islower()/isdigit() accept non-ASCII, so compare ranges directly
    if "a" <= c <= "z":
        return LOWER
    if "A" <= c <= "Z":
        return UPPER
    if "0" <= c <= "9":
        return DIGIT
    return OTHER


def classify(text: str) -> CharCounts:
    """
    Count lowercase, uppercase, digit and other characters in one pass.
    A run of k same-class letters or digits adds k-1 to that class's
    consecutive counter; "other" characters never do.
    """
    counts = {LOWER: 0, UPPER: 0, DIGIT: 0, OTHER: 0}
    repeats = {LOWER: 0, UPPER: 0, DIGIT: 0}
    prev: Optional[str] = None
    for c in text:
        cls = char_class(c)
        counts[cls] += 1
        if cls == prev and cls in repeats:
            repeats[cls] += 1
        prev = cls
    return CharCounts(
        lowercase=counts[LOWER],
        uppercase=counts[UPPER],
        digits=counts[DIGIT],
        special_characters=counts[OTHER],
        consecutive_uppercase=repeats[UPPER],
        consecutive_lowercase=repeats[LOWER],
        consecutive_digits=repeats[DIGIT],
    )


def count_interior_digits_and_symbols(text: str) -> int:
    """Digits and non-alphanumerics in text[1:-1]; 0 for length <= 2."""
    return sum(1 for c in text[1:-1] if char_class(c) in (DIGIT, OTHER))
