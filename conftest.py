"""Pytest configuration — ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))

from pan_validator.pipeline import PanValidationPipeline  # noqa: E402


@pytest.fixture
def pipeline() -> PanValidationPipeline:
    """A fresh pipeline per test; it holds no state, but tests shouldn't share one."""
    return PanValidationPipeline()
