from __future__ import annotations

from .errors import InvalidReference

"""Column letter conversion (bijective base-26).

Column indexes are 1-based and have no zero digit: 1 -> "A", 26 -> "Z",
27 -> "AA", 702 -> "ZZ", 703 -> "AAA".
"""

__all__ = [
    "ALPHABET",
    "number_to_letters",
    "letters_to_number",
]

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def number_to_letters(n: int) -> str:
    """Convert a 1-based column index to its letter representation.

    A cursor value of 0 (never initialized) is mapped to "A". Rows start their
    cursor at 1, so that branch is not reached in normal use.

    Args:
        n: Column index (>= 1)

    Returns:
        Column letters, e.g. "A", "AA"

    Raises:
        ValueError: If n is negative
    """
    if n < 0:
        raise ValueError(f"column index must be positive: {n}")
    if n == 0:
        return "A"
    letters: list[str] = []
    while n > 0:
        digit = (n - 1) % 26
        letters.append(ALPHABET[digit])
        n = (n - 1) // 26
    return "".join(reversed(letters))


def letters_to_number(s: str) -> int:
    """Convert column letters back to a 1-based column index.

    Raises:
        InvalidReference: If s is empty or holds anything but A-Z
    """
    if not s:
        raise InvalidReference("empty column letters")
    index = 0
    for ch in s:
        value = ALPHABET.find(ch) + 1
        if value == 0:
            raise InvalidReference(f"invalid column letter {ch!r} in {s!r}")
        index = index * 26 + value
    return index
