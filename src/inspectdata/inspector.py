"""Inspector: the main API.

Usage:
    from inspectdata import inspect

    result = inspect("4444444444444448")
    result.canonical         # CanonicalType.PAN_VISA
    result.is_pci            # True

    inspect("My string")     # raises NoCanonicalMatch; err.result.canonical is UNKNOWN

Only strings are classified.  Other scalars (bool, int, float) are
recognized and reported, then rejected with NonStringScalar unless
``coerce_scalars`` is enabled, in which case ``str(value)`` is classified.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any

from .classifier import HIGH_ENTROPY_THRESHOLD, MIN_SECRET_LENGTH, Classifier
from .entropy import ENTROPY_PRECISION, EntropyEstimator
from .errors import NoCanonicalMatch, NonStringScalar, UnrecognizedScalarType
from .types import CanonicalType, InspectionResult, is_pci, is_pii

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InspectorConfig:
    """Configuration for the Inspector."""
    entropy_precision: int = ENTROPY_PRECISION          # 1000 = 3 decimal places
    high_entropy_threshold: float = HIGH_ENTROPY_THRESHOLD
    min_secret_length: int = MIN_SECRET_LENGTH
    # Classify str(value) for bool/int/float instead of raising NonStringScalar
    coerce_scalars: bool = False


def scalar_type_name(value: Any) -> str:
    """Name the scalar type of ``value`` for reporting."""
    # bool first: it is a subclass of int
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, str):
        return "string"
    if isinstance(value, int):
        return "int"
    if isinstance(value, float):
        return "float64"
    raise UnrecognizedScalarType(
        f"unable to determine data type for {type(value).__name__} - unknown",
        InspectionResult(data=value, data_type="unknown"),
    )


class Inspector:
    """Classifies a scalar and derives its sensitivity flags."""

    def __init__(self, config: InspectorConfig | None = None) -> None:
        self.config = config or InspectorConfig()
        self.estimator = EntropyEstimator(self.config.entropy_precision)
        self.classifier = Classifier(
            self.estimator,
            high_entropy_threshold=self.config.high_entropy_threshold,
            min_secret_length=self.config.min_secret_length,
        )

    def inspect(self, value: Any) -> InspectionResult:
        """Inspect ``value`` and return its InspectionResult.

        Raises UnrecognizedScalarType, NonStringScalar or NoCanonicalMatch;
        each carries the partial result on ``.result``.
        """
        data_type = scalar_type_name(value)

        if isinstance(value, str):
            text = value
        elif self.config.coerce_scalars:
            text = str(value)
        else:
            raise NonStringScalar(
                f"cannot classify non-string {data_type} value",
                InspectionResult(data=value, data_type=data_type),
            )

        try:
            canonical = self.classifier.classify(text)
        except NoCanonicalMatch as exc:
            exc.result = InspectionResult(data=value, data_type=data_type)
            raise

        entropy = 0.0
        if canonical is CanonicalType.SECRET:
            entropy = self.estimator.metric_entropy(text)

        logger.debug("inspected %s value as %s", data_type, canonical.label)
        return InspectionResult(
            data=value,
            data_type=data_type,
            canonical=canonical,
            is_pii=is_pii(canonical),
            is_pci=is_pci(canonical),
            entropy=entropy,
        )


_default: Inspector | None = None


def _get_default() -> Inspector:
    """Lazy-init the module-level inspector."""
    global _default
    if _default is None:
        _default = Inspector()
    return _default


def inspect(value: Any) -> InspectionResult:
    """Inspect ``value`` with the default configuration."""
    return _get_default().inspect(value)
