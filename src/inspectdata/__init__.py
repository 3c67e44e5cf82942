"""inspectdata: canonical type, PII/PCI and secret detection for scalar data."""

from .types import CanonicalType, InspectionResult, PII_TYPES, PCI_TYPES
from .errors import InspectError, UnrecognizedScalarType, NonStringScalar, NoCanonicalMatch
from .entropy import EntropyEstimator, shannon_entropy, metric_entropy, ENTROPY_PRECISION
from .classifier import Classifier, HIGH_ENTROPY_THRESHOLD, MIN_SECRET_LENGTH
from .inspector import Inspector, InspectorConfig, inspect
from .config import create_inspector, load_config, load_from_yaml
from .version import VERSION, BUILD

__all__ = [
    "CanonicalType", "InspectionResult", "PII_TYPES", "PCI_TYPES",
    "InspectError", "UnrecognizedScalarType", "NonStringScalar", "NoCanonicalMatch",
    "EntropyEstimator", "shannon_entropy", "metric_entropy", "ENTROPY_PRECISION",
    "Classifier", "HIGH_ENTROPY_THRESHOLD", "MIN_SECRET_LENGTH",
    "Inspector", "InspectorConfig", "inspect",
    "create_inspector", "load_config", "load_from_yaml",
]
__version__ = VERSION
__build__ = BUILD
