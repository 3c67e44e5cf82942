"""Entropy estimation for arbitrary strings.

Shannon entropy is computed over characters (code points), not bytes, and
rounded half-up to a fixed precision so that scores compare equal across
runs and platforms.  Metric entropy divides it by the string length,
giving a score in roughly [0, 1]: the closer to 1, the closer the string
is to uniformly random.
"""

from __future__ import annotations
import math
from collections import Counter

# Rounding granularity: 1000 -> 3 decimal places
ENTROPY_PRECISION = 1000


def _round(value: float, precision: int) -> float:
    # half away from zero; entropy is never negative
    return math.floor(value * precision + 0.5) / precision


class EntropyEstimator:
    """Shannon / metric entropy at a fixed rounding precision."""

    __slots__ = ("_precision",)

    def __init__(self, precision: int = ENTROPY_PRECISION) -> None:
        if precision <= 0:
            raise ValueError(f"entropy precision must be positive, got {precision}")
        self._precision = precision

    @property
    def precision(self) -> int:
        return self._precision

    def shannon_entropy(self, text: str) -> float:
        """Bits per character of ``text``; 0 for the empty string."""
        if not text:
            return 0.0
        length = len(text)
        entropy = 0.0
        for count in Counter(text).values():
            p = count / length
            if p > 0:
                entropy -= p * math.log2(p)
        return _round(entropy, self._precision)

    def metric_entropy(self, text: str) -> float:
        """Shannon entropy divided by length; 0 for the empty string."""
        if not text:
            return 0.0
        return _round(self.shannon_entropy(text) / len(text), self._precision)


_default = EntropyEstimator()


def shannon_entropy(text: str) -> float:
    return _default.shannon_entropy(text)


def metric_entropy(text: str) -> float:
    return _default.metric_entropy(text)
