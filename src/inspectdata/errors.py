"""Exceptions raised while inspecting a value.

Every failure carries ``result``: the partially filled InspectionResult
for the value, so callers can still look at what was determined.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .types import InspectionResult


class InspectError(Exception):
    """Base class for inspection failures."""

    def __init__(self, message: str, result: InspectionResult | None = None) -> None:
        super().__init__(message)
        self.result = result


class UnrecognizedScalarType(InspectError):
    """The value is not a supported scalar (None, bytes, containers, objects)."""


class NonStringScalar(InspectError):
    """The value is a supported scalar but not a string, and coercion is off."""


class NoCanonicalMatch(InspectError):
    """No pattern matched and the value did not qualify as a secret."""
