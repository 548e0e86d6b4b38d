"""
Pydantic models for PAN classification — strict typing at every stage boundary.

Raw rows come in as ``Optional[str]`` and never get a model of their own: they
are consumed once by the normalizer. Everything downstream of normalization is
typed here, and a report that breaks its own invariants fails loudly at
construction time instead of silently downstream.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


# ─── Status ─────────────────────────────────────────────────────────


class PanStatus(str, Enum):
    """Verdict for a single candidate PAN."""

    VALID = "VALID"
    INVALID = "INVALID"


# ─── Rule Codes ─────────────────────────────────────────────────────


class RuleCode(str, Enum):
    """Machine-readable code for each classification rule, in evaluation order."""

    FORMAT_MISMATCH = "FORMAT_MISMATCH"  # Not AAAAA9999A
    ADJACENT_REPETITION = "ADJACENT_REPETITION"  # e.g. "AA" anywhere
    SEQUENTIAL_LETTERS = "SEQUENTIAL_LETTERS"  # e.g. "ABCDE"
    SEQUENTIAL_DIGITS = "SEQUENTIAL_DIGITS"  # e.g. "1234"


# ─── Classification Result ──────────────────────────────────────────


class ClassificationResult(BaseModel):
    """A candidate PAN paired with its verdict and the rules it failed."""

    pan: str
    status: PanStatus
    violations: list[RuleCode] = Field(default_factory=list)


# ─── Summary Report ─────────────────────────────────────────────────


class SummaryReport(BaseModel):
    """Aggregate counts for one batch.

    ``missing_incomplete`` holds raw rows that were null/blank AND raw rows that
    duplicated another candidate. Classification runs over distinct PANs, so
    duplicates are absorbed here rather than counted twice.
    """

    total_processed: int = Field(ge=0)
    total_valid: int = Field(ge=0)
    total_invalid: int = Field(ge=0)
    missing_incomplete: int = Field(ge=0)


# ─── Validation Report ──────────────────────────────────────────────


class ValidationReport(BaseModel):
    """The final output of the validation pipeline."""

    summary: SummaryReport
    results: list[ClassificationResult] = Field(default_factory=list)
    input_hash: str = ""  # SHA-256 of the raw rows for audit trail

    @property
    def all_valid(self) -> bool:
        """No candidate was INVALID. Also true for a batch with no candidates."""
        return self.summary.total_invalid == 0

    @property
    def has_candidates(self) -> bool:
        return bool(self.results)
