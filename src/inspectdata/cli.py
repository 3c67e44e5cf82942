"""CLI interface for inspectdata.

Usage:
    # Classify one value (stdout: JSON result)
    python -m inspectdata.cli inspect "867-53-0999"

    # Entropy scores
    python -m inspectdata.cli entropy "aZ3$kQ9!mP1@xR5&vT8#"

    # Every pattern a value matches, in precedence order
    python -m inspectdata.cli patterns "20180914"

    # Release identification
    python -m inspectdata.cli version

Exit status is 1 when the value could not be classified, 2 on bad options
or configuration.  The high entropy threshold may also come from
INSPECTDATA_HIGH_ENTROPY; a config file or flag overrides it.
"""

from __future__ import annotations
import argparse
import json
import logging
import os
import sys
from typing import Any

import yaml

from .config import load_config, load_from_yaml
from .errors import InspectError
from .inspector import Inspector, InspectorConfig
from .patterns import scan_patterns
from .version import BUILD, VERSION


THRESHOLD_ENV = "INSPECTDATA_HIGH_ENTROPY"


def _env_defaults() -> dict[str, Any]:
    defaults: dict[str, Any] = {}
    threshold = os.environ.get(THRESHOLD_ENV)
    if threshold:
        try:
            defaults["high_entropy_threshold"] = float(threshold)
        except ValueError:
            raise ValueError(f"{THRESHOLD_ENV} must be a number, got {threshold!r}") from None
    return defaults


def _build_inspector(args: argparse.Namespace) -> Inspector:
    # built-in < environment < config file < command-line flags
    defaults = _env_defaults()
    cfg = load_from_yaml(args.config, defaults) if args.config else load_config({}, defaults)
    if args.threshold is not None:
        cfg["high_entropy_threshold"] = args.threshold
    if args.precision is not None:
        cfg["entropy_precision"] = args.precision
    if args.min_secret_length is not None:
        cfg["min_secret_length"] = args.min_secret_length
    return Inspector(InspectorConfig(**cfg))


def _emit(data: Any) -> None:
    json.dump(data, sys.stdout, ensure_ascii=False)
    sys.stdout.write("\n")


def cmd_inspect(args: argparse.Namespace) -> int:
    """Classify a single value."""
    inspector = _build_inspector(args)
    try:
        result = inspector.inspect(args.value)
    except InspectError as e:
        output = e.result.to_dict() if e.result is not None else {"data": args.value}
        output["error"] = str(e)
        _emit(output)
        return 1
    _emit(result.to_dict())
    return 0


def cmd_entropy(args: argparse.Namespace) -> int:
    """Print Shannon and metric entropy of a value."""
    estimator = _build_inspector(args).estimator
    _emit({
        "length": len(args.value),
        "shannon": estimator.shannon_entropy(args.value),
        "metric": estimator.metric_entropy(args.value),
    })
    return 0


def cmd_patterns(args: argparse.Namespace) -> int:
    """List every pattern matching a value."""
    _emit([c.label for c in scan_patterns(args.value)])
    return 0


def cmd_version(args: argparse.Namespace) -> int:
    _emit({"version": VERSION, "build": BUILD})
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="inspectdata",
        description="Canonical type, PII/PCI and secret detection for scalar data",
    )
    parser.add_argument("--config", default=None, help="YAML config path")
    parser.add_argument("--threshold", type=float, default=None,
                        help="High entropy threshold (default 0.20)")
    parser.add_argument("--precision", type=int, default=None,
                        help="Entropy rounding precision (default 1000)")
    parser.add_argument("--min-secret-length", type=int, default=None,
                        help="Minimum length for a secret (default 20)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command", required=True)
    p = sub.add_parser("inspect", help="Classify a value")
    p.add_argument("value")
    p = sub.add_parser("entropy", help="Entropy scores of a value")
    p.add_argument("value")
    p = sub.add_parser("patterns", help="Patterns matching a value")
    p.add_argument("value")
    sub.add_parser("version", help="Print version and build")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    cmds = {
        "inspect": cmd_inspect,
        "entropy": cmd_entropy,
        "patterns": cmd_patterns,
        "version": cmd_version,
    }
    try:
        return cmds[args.command](args)
    except (ValueError, OSError, yaml.YAMLError) as e:
        parser.error(str(e))


if __name__ == "__main__":
    sys.exit(main())
