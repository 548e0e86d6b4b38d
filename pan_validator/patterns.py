"""
Character-pattern predicates used by the classifier.

Both work on strings of any length and never raise.
"""

from __future__ import annotations


def has_adjacent_repetition(value: str) -> bool:
    """True if any two consecutive characters are identical ("AA", "11").

    Strings shorter than two characters have no adjacent pair, so they are
    never repetitive.
    """
    return any(a == b for a, b in zip(value, value[1:]))


def is_strict_ascending_sequence(value: str) -> bool:
    """True if each character's code point is exactly one above the previous.

    "ABCDE" and "1234" are sequences; "ABCE", "4321" and "1123" are not.
    Strings shorter than two characters are vacuously sequential.
    """
    return all(ord(b) - ord(a) == 1 for a, b in zip(value, value[1:]))
