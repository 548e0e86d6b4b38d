"""
Batch summary: raw row volume against distinct-PAN outcomes.

``total_processed`` counts raw rows before normalization; ``total_valid`` and
``total_invalid`` count distinct candidates. The difference lands in
``missing_incomplete``, which therefore mixes two things:

  - rows that were null, empty or whitespace-only
  - rows that normalized to a PAN already seen in the batch

The two are reported together on purpose. Callers that need them apart must
count duplicates themselves before normalizing.
"""

from __future__ import annotations

from collections.abc import Mapping

from .models import PanStatus, SummaryReport


def summarize(
    total_raw_count: int, classifications: Mapping[str, PanStatus]
) -> SummaryReport:
    """Build the summary for one batch.

    Args:
        total_raw_count: Number of raw rows, including nulls, blanks and duplicates.
        classifications: Status per distinct candidate PAN.

    Returns:
        SummaryReport. Raises pydantic's ``ValidationError`` if
        ``total_raw_count`` is smaller than the number of classifications,
        since that can only come from a caller mixing up two batches.
    """
    total_valid = sum(1 for s in classifications.values() if s == PanStatus.VALID)
    total_invalid = sum(1 for s in classifications.values() if s == PanStatus.INVALID)

    return SummaryReport(
        total_processed=total_raw_count,
        total_valid=total_valid,
        total_invalid=total_invalid,
        missing_incomplete=total_raw_count - (total_valid + total_invalid),
    )
