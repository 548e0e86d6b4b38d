"""
Deterministic PAN classifier.

A candidate is VALID only if every rule below passes:

  1. FORMAT_MISMATCH      exactly AAAAA9999A (ASCII letters and digits only)
  2. ADJACENT_REPETITION  no two consecutive identical characters anywhere
  3. SEQUENTIAL_LETTERS   the 5-letter segment is not a run like "ABCDE"
  4. SEQUENTIAL_DIGITS    the 4-digit segment is not a run like "1234"

Rule 1 gates the others: segment checks assume fixed positions, so a string
that fails the format is INVALID without ever being sliced.

The classifier does not trust its caller to have normalized anything. A
lower-case or padded string simply fails rule 1.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable

from .models import ClassificationResult, PanStatus, RuleCode
from .patterns import has_adjacent_repetition, is_strict_ascending_sequence


# ─── Constants ───────────────────────────────────────────────────────

# Explicit ASCII classes: \d and str.isalpha() would admit non-ASCII digits/letters.
PAN_PATTERN = re.compile(r"[A-Z]{5}[0-9]{4}[A-Z]")

LETTER_SEGMENT = slice(0, 5)
DIGIT_SEGMENT = slice(5, 9)

# Rules 2-4, in evaluation order. Each predicate returns True on violation.
_PATTERN_RULES: tuple[tuple[RuleCode, Callable[[str], bool]], ...] = (
    (RuleCode.ADJACENT_REPETITION, has_adjacent_repetition),
    (
        RuleCode.SEQUENTIAL_LETTERS,
        lambda pan: is_strict_ascending_sequence(pan[LETTER_SEGMENT]),
    ),
    (
        RuleCode.SEQUENTIAL_DIGITS,
        lambda pan: is_strict_ascending_sequence(pan[DIGIT_SEGMENT]),
    ),
)


# ─── Single Candidate ────────────────────────────────────────────────


def matches_format(candidate: str) -> bool:
    """Rule 1. ``fullmatch`` so a trailing newline cannot slip past ``$``."""
    return PAN_PATTERN.fullmatch(candidate) is not None


def explain(candidate: str) -> ClassificationResult:
    """Classify one candidate and report every rule it fails.

    A format mismatch is reported alone; otherwise all pattern rules are
    evaluated so the result lists each violation, not just the first.
    """
    if not matches_format(candidate):
        return ClassificationResult(
            pan=candidate,
            status=PanStatus.INVALID,
            violations=[RuleCode.FORMAT_MISMATCH],
        )

    violations = [code for code, violated in _PATTERN_RULES if violated(candidate)]
    return ClassificationResult(
        pan=candidate,
        status=PanStatus.INVALID if violations else PanStatus.VALID,
        violations=violations,
    )


def classify(candidate: str) -> PanStatus:
    """Return VALID or INVALID for one candidate. Never raises for a str."""
    if not matches_format(candidate):
        return PanStatus.INVALID
    if any(violated(candidate) for _, violated in _PATTERN_RULES):
        return PanStatus.INVALID
    return PanStatus.VALID


# ─── Batches ─────────────────────────────────────────────────────────


def classify_all(candidates: Iterable[str]) -> dict[str, PanStatus]:
    """Map each distinct candidate to its status."""
    return {candidate: classify(candidate) for candidate in candidates}


def explain_all(candidates: Iterable[str]) -> list[ClassificationResult]:
    """Detailed results for each distinct candidate, sorted by PAN."""
    return [explain(candidate) for candidate in sorted(set(candidates))]
