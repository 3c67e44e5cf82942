"""YAML/dict config loader for inspectdata.

Supports loading from a YAML file or a plain dict (for embedding
in a larger application config).

Example YAML:

    inspectdata:
      entropy_precision: 1000      # 3 decimal places
      high_entropy_threshold: 0.20
      min_secret_length: 20
      coerce_scalars: false
"""

from __future__ import annotations
from pathlib import Path
from typing import Any

import yaml

from .classifier import HIGH_ENTROPY_THRESHOLD, MIN_SECRET_LENGTH
from .entropy import ENTROPY_PRECISION
from .inspector import Inspector, InspectorConfig


def _mapping(data: Any, where: str) -> dict[str, Any]:
    data = data or {}
    if not isinstance(data, dict):
        raise ValueError(f"{where} must be a mapping, got {type(data).__name__}")
    return data


def load_config(
    data: dict[str, Any] | None,
    defaults: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Normalize a config dict (from YAML or inline).

    Keys missing from ``data`` come from ``defaults``, then from the
    built-in values.
    """
    base = {
        "entropy_precision": ENTROPY_PRECISION,
        "high_entropy_threshold": HIGH_ENTROPY_THRESHOLD,
        "min_secret_length": MIN_SECRET_LENGTH,
        "coerce_scalars": False,
        **(defaults or {}),
    }
    data = _mapping(data, "config")
    # Support nested under "inspectdata" key or flat
    if "inspectdata" in data:
        data = _mapping(data["inspectdata"], "inspectdata")

    return {
        "entropy_precision": int(data.get("entropy_precision", base["entropy_precision"])),
        "high_entropy_threshold": float(data.get("high_entropy_threshold", base["high_entropy_threshold"])),
        "min_secret_length": int(data.get("min_secret_length", base["min_secret_length"])),
        "coerce_scalars": bool(data.get("coerce_scalars", base["coerce_scalars"])),
    }


def load_from_yaml(
    path: str | Path,
    defaults: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Load config from a YAML file."""
    with open(path) as f:
        return load_config(yaml.safe_load(f), defaults)


def create_inspector(config: dict[str, Any] | None = None) -> Inspector:
    """Create a configured Inspector from a config dict."""
    cfg = load_config(config)
    return Inspector(InspectorConfig(**cfg))
