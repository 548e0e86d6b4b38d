"""
Main validation pipeline — orchestrates the full workflow.

Flow:
  ┌──────────┐
  │ Raw rows │   ← Optional[str], possibly null / padded / duplicated
  └────┬─────┘
       │
  ┌────▼───────┐
  │ Normalizer │   ← trim, upper-case, deduplicate
  └────┬───────┘
       │
  ┌────▼───────┐
  │ Classifier │   ← format + adjacent-repeat + sequence checks
  └────┬───────┘
       │
  ┌────▼───────┐
  │  Reporter  │   ← processed / valid / invalid / missing-incomplete
  └────────────┘

Every stage is a pure function over the previous stage's output. The raw rows
are SHA-256 hashed so a report can be tied back to the exact batch it came from.
"""

from __future__ import annotations

import hashlib
import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Optional

from .classifier import explain_all
from .exceptions import PanInputError
from .models import PanStatus, ValidationReport
from .normalizer import normalize
from .reporter import summarize

logger = logging.getLogger(__name__)


class PanValidationPipeline:
    """Orchestrates normalization, classification and reporting for one batch.

    Usage:
        pipeline = PanValidationPipeline()
        report = pipeline.run([" abcde1234f ", None, "AXBCD1243F"])
        print(report.summary.total_valid)
    """

    def run(self, raw_values: Iterable[Optional[str]]) -> ValidationReport:
        """Execute the full pipeline on a batch of raw rows.

        Args:
            raw_values: Raw PAN rows; consumed exactly once.

        Returns:
            ValidationReport with the summary and one result per distinct PAN.
        """
        rows = list(raw_values)
        input_hash = _hash_rows(rows)

        # ── Step 1: Normalize ───────────────────────────────────────
        candidates = normalize(rows)
        logger.info(
            "Normalized %d raw row(s) into %d distinct candidate(s)",
            len(rows),
            len(candidates),
        )

        # ── Step 2: Classify ────────────────────────────────────────
        results = explain_all(candidates)
        for result in results:
            if result.status == PanStatus.INVALID:
                logger.debug(
                    "Rejected %s: %s",
                    result.pan,
                    ", ".join(code.value for code in result.violations),
                )

        # ── Step 3: Summarize ───────────────────────────────────────
        summary = summarize(len(rows), {r.pan: r.status for r in results})
        logger.info(
            "Batch summary: processed=%d valid=%d invalid=%d missing_incomplete=%d",
            summary.total_processed,
            summary.total_valid,
            summary.total_invalid,
            summary.missing_incomplete,
        )

        return ValidationReport(summary=summary, results=results, input_hash=input_hash)

    def run_text(self, text: str) -> ValidationReport:
        """Run on newline-separated text. Blank lines count as missing rows."""
        return self.run(split_rows(text))

    def run_file(self, path: str | Path) -> ValidationReport:
        """Run on a UTF-8 text file with one raw PAN per line."""
        return self.run_text(read_text(path))


# ─── Input Helpers ───────────────────────────────────────────────────


def read_text(path: str | Path) -> str:
    """Read a batch file, turning I/O and decoding failures into PanInputError."""
    resolved = Path(path)
    try:
        return resolved.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise PanInputError(
            f"Input file '{resolved}' does not exist.",
            details={"path": str(resolved)},
        ) from exc
    except UnicodeDecodeError as exc:
        raise PanInputError(
            f"Input file '{resolved}' is not valid UTF-8 text.",
            details={"path": str(resolved), "position": exc.start},
        ) from exc


def split_rows(text: str) -> list[str]:
    r"""Split on "\n" only (tolerating "\r\n"); one trailing newline adds no row.

    ``str.splitlines`` would also break on form feeds, "\x85", U+2028 and
    friends, turning one raw row into several.
    """
    if not text:
        return []
    rows = text.split("\n")
    if rows[-1] == "":
        rows.pop()
    return [row[:-1] if row.endswith("\r") else row for row in rows]


def _hash_rows(rows: list[Optional[str]]) -> str:
    # JSON keeps row boundaries and null vs "" distinct.
    encoded = json.dumps(rows)
    return hashlib.sha256(encoded.encode("ascii")).hexdigest()
