"""Classifier: ordered pattern cascade with an entropy fallback.

Usage:
    from inspectdata.classifier import Classifier

    classifier = Classifier()            # reusable, thread-safe
    classifier.classify("bob@mail.com")  # CanonicalType.EMAIL
    classifier.classify("My string")     # raises NoCanonicalMatch
"""

from __future__ import annotations
import logging

from .entropy import EntropyEstimator
from .errors import NoCanonicalMatch
from .patterns import PATTERNS, PatternRule, match_pattern
from .types import CanonicalType

logger = logging.getLogger(__name__)

# Metric entropy at or above this marks an unmatched string as a secret
HIGH_ENTROPY_THRESHOLD = 0.20
# Shorter strings are never considered secrets
MIN_SECRET_LENGTH = 20


class Classifier:
    """Assigns exactly one CanonicalType to a string.

    Holds no mutable state after construction; one instance may be shared
    freely across threads.
    """

    __slots__ = ("estimator", "high_entropy_threshold", "min_secret_length", "patterns")

    def __init__(
        self,
        estimator: EntropyEstimator | None = None,
        *,
        high_entropy_threshold: float = HIGH_ENTROPY_THRESHOLD,
        min_secret_length: int = MIN_SECRET_LENGTH,
        patterns: tuple[PatternRule, ...] = PATTERNS,
    ) -> None:
        if not 0.0 <= high_entropy_threshold <= 1.0:
            raise ValueError(
                f"high_entropy_threshold must be within [0, 1], got {high_entropy_threshold}"
            )
        if min_secret_length < 0:
            raise ValueError(f"min_secret_length must not be negative, got {min_secret_length}")
        self.estimator = estimator or EntropyEstimator()
        self.high_entropy_threshold = high_entropy_threshold
        self.min_secret_length = min_secret_length
        self.patterns = patterns

    def classify(self, value: str) -> CanonicalType:
        """Return the canonical type of ``value``.

        The first matching pattern wins.  An unmatched value long and random
        enough is a SECRET; anything else raises NoCanonicalMatch.
        """
        canonical = match_pattern(value, self.patterns)
        if canonical is not None:
            logger.debug("pattern match: %s (len=%d)", canonical.label, len(value))
            return canonical

        if self.is_secret(value):
            logger.debug("high entropy fallback: Secret (len=%d)", len(value))
            return CanonicalType.SECRET

        logger.debug("no canonical type (len=%d)", len(value))
        raise NoCanonicalMatch("unable to determine canonical type - unknown")

    def is_secret(self, value: str) -> bool:
        """True when ``value`` clears both the length and entropy bars."""
        if len(value) < self.min_secret_length:
            return False
        return self.estimator.metric_entropy(value) >= self.high_entropy_threshold
