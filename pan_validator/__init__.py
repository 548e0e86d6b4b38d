"""
PAN Validator — Pattern validation for Indian Permanent Account Numbers.

Architecture: Normalize → Classify (format + pattern rules) → Summarize
Philosophy:  Purely syntactic. No registry lookups, no guessing.
"""

from .classifier import classify, classify_all, explain, explain_all
from .models import (
    ClassificationResult,
    PanStatus,
    RuleCode,
    SummaryReport,
    ValidationReport,
)
from .normalizer import normalize
from .patterns import has_adjacent_repetition, is_strict_ascending_sequence
from .pipeline import PanValidationPipeline
from .reporter import summarize

__version__ = "1.0.0"

__all__ = [
    "ClassificationResult",
    "PanStatus",
    "PanValidationPipeline",
    "RuleCode",
    "SummaryReport",
    "ValidationReport",
    "classify",
    "classify_all",
    "explain",
    "explain_all",
    "has_adjacent_repetition",
    "is_strict_ascending_sequence",
    "normalize",
    "summarize",
]
