"""
Exception hierarchy for the PAN validator.

The classification core never raises for string input; every value ends up
excluded or classified. These exceptions belong to the edges of the system,
where input has to be read before it can be classified.
"""

from __future__ import annotations


class PanValidatorError(Exception):
    """Base exception for all PAN validator failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class PanInputError(PanValidatorError):
    """A batch of raw PAN rows could not be read."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INPUT_UNREADABLE", message, details)
