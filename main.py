#!/usr/bin/env python3
"""
PAN Validator — Entry Point
============================

Classifies a batch of raw PAN rows and prints a summary report.

Usage:
    python main.py                  # Built-in sample batch
    python main.py pans.txt         # One raw PAN per line
    LOG_LEVEL=INFO python main.py   # Show pipeline stage logging

Exit codes: 0 = no invalid PANs (also when every row is blank),
            1 = at least one invalid PAN, 2 = unreadable input.
"""

from __future__ import annotations

import logging
import os
import sys

from dotenv import load_dotenv

from pan_validator.exceptions import PanInputError
from pan_validator.models import PanStatus, ValidationReport
from pan_validator.pipeline import PanValidationPipeline

load_dotenv()


# ─── Sample Batch — Messy on Purpose ────────────────────────────────

SAMPLE_ROWS: list[str | None] = [
    "ABCDE1234F",  # sequential letters AND digits
    "AABCD1243F",  # adjacent repetition
    " axbcd1243f ",  # valid once trimmed and upper-cased
    "AXBCD1243F",  # duplicate of the row above
    "AXBCD123",  # too short
    None,
    "   ",
    "PQRTZ5081K",
]


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_YELLOW = "\033[93m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Pretty Printer ─────────────────────────────────────────────────


def _print_results(report: ValidationReport) -> None:
    for result in report.results:
        if result.status == PanStatus.VALID:
            print(f"  {_GREEN}VALID  {_RESET} {result.pan}")
        else:
            codes = ", ".join(code.value for code in result.violations)
            print(f"  {_RED}INVALID{_RESET} {result.pan}  {_DIM}[{codes}]{_RESET}")


def print_report(report: ValidationReport) -> int:
    """Pretty-print the batch report with ANSI color codes.

    Returns:
        0 if no candidate was invalid (including a batch with no candidates),
        1 otherwise.
    """
    summary = report.summary

    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  PAN VALIDATION REPORT{_RESET}")
    print(f"{'=' * _WIDTH}")
    print(f"  Audit Hash:  {_DIM}{report.input_hash[:16]}...{_RESET}")
    print(f"{'─' * _WIDTH}")

    _print_results(report)

    print(f"{'─' * _WIDTH}")
    print(f"  Processed:           {summary.total_processed}")
    print(f"  Valid:               {_GREEN}{summary.total_valid}{_RESET}")
    print(f"  Invalid:             {_RED}{summary.total_invalid}{_RESET}")
    print(f"  Missing/Incomplete:  {_YELLOW}{summary.missing_incomplete}{_RESET}")
    print(f"  {_DIM}(missing/incomplete includes blank rows and duplicate rows){_RESET}")

    print(f"{'=' * _WIDTH}")
    if not report.has_candidates:
        print(f"  {_YELLOW}{_BOLD}NO PANS FOUND  --  every row was blank{_RESET}")
    elif report.all_valid:
        print(f"  {_GREEN}{_BOLD}ALL PANS PASSED{_RESET}")
    else:
        print(f"  {_RED}{_BOLD}{summary.total_invalid} INVALID PAN(S) FOUND{_RESET}")
    print(f"{'=' * _WIDTH}\n")

    return 0 if report.all_valid else 1


# ─── Main ────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Run the pipeline on a file (or the sample batch) and print the report."""
    args = sys.argv[1:] if argv is None else argv
    level = os.getenv("LOG_LEVEL", "WARNING").upper()
    if not isinstance(logging.getLevelName(level), int):
        print(f"{_YELLOW}Unknown LOG_LEVEL '{level}', using WARNING{_RESET}", file=sys.stderr)
        level = "WARNING"
    logging.basicConfig(
        level=level,
        format="%(levelname)s | %(name)s | %(message)s",
    )

    pipeline = PanValidationPipeline()
    try:
        report = pipeline.run_file(args[0]) if args else pipeline.run(SAMPLE_ROWS)
    except PanInputError as exc:
        print(f"{_RED}[{exc.code}]{_RESET} {exc}", file=sys.stderr)
        return 2

    return print_report(report)


if __name__ == "__main__":
    sys.exit(main())
