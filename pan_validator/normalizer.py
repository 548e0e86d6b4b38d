"""
Raw row normalization: trim, upper-case, deduplicate.

Null and blank rows are dropped here. They still count toward the batch's
``total_processed``, which the caller tracks from the raw row count.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional


def normalize(raw_values: Iterable[Optional[str]]) -> set[str]:
    """Reduce raw rows to the set of distinct candidate PANs.

    Args:
        raw_values: Raw input rows. ``None``, empty and whitespace-only rows
            are legal and are excluded from the result.

    Returns:
        Distinct, stripped, non-empty strings. ASCII values are upper-cased;
        non-ASCII values are kept as-is so the classifier rejects them.
    """
    candidates: set[str] = set()
    for raw in raw_values:
        if raw is None:
            continue
        value = raw.strip()
        if not value:
            continue
        # Unicode upper() maps some non-ASCII chars to ASCII ("ı" -> "I", "ﬆ" -> "ST").
        candidates.add(value.upper() if value.isascii() else value)
    return candidates
