"""
Command line front end.

Reads a serialized stylesheet (YAML or JSON), converts its lengths and
writes the result, serialized again or rendered as CSS text:

    python -m riconv styles.yaml --base-size 16 -o converted.yaml
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from riconv.config import Options, load_options
from riconv.engine import create
from riconv.render import render_stylesheet
from riconv.serialization import (
    stylesheet_from_json,
    stylesheet_from_yaml,
    stylesheet_to_json,
    stylesheet_to_yaml,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="riconv",
        description="Convert fixed-size lengths of a serialized stylesheet to resolution-independent units",
    )
    parser.add_argument("input", help="Stylesheet file (.json, otherwise YAML)")
    parser.add_argument("-o", "--output", help="Output file (default: stdout)")
    parser.add_argument("-c", "--config", help="Option file (.json, otherwise YAML)")
    parser.add_argument("--format", choices=["yaml", "json", "css"],
                        help="Output format (default: input format; css renders plain stylesheet text)")
    parser.add_argument("--base-size", type=float)
    parser.add_argument("--ri-unit")
    parser.add_argument("--unit")
    parser.add_argument("--absolute-unit")
    parser.add_argument("--min-unit-size", type=float)
    parser.add_argument("--min-size", type=float)
    parser.add_argument("--precision", type=int)
    parser.add_argument("-v", "--verbose", action="store_true", help="Log each converted declaration")
    return parser


def _is_json(path: str) -> bool:
    return Path(path).suffix.lower() == ".json"


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        options = load_options(args.config) if args.config else Options()
        options = options.configure(
            base_size=args.base_size,
            ri_unit=args.ri_unit,
            unit=args.unit,
            absolute_unit=args.absolute_unit,
            min_unit_size=args.min_unit_size,
            min_size=args.min_size,
            precision=args.precision,
        )
        text = Path(args.input).read_text(encoding="utf-8")
        stylesheet = stylesheet_from_json(text) if _is_json(args.input) else stylesheet_from_yaml(text)
        create(options).run(stylesheet)
    except (ValueError, TypeError, KeyError, OSError, yaml.YAMLError) as e:
        print(f"riconv: {e}", file=sys.stderr)
        return 1

    output_format = args.format or ("json" if _is_json(args.input) else "yaml")
    if output_format == "json":
        result = stylesheet_to_json(stylesheet)
    elif output_format == "css":
        result = render_stylesheet(stylesheet)
    else:
        result = stylesheet_to_yaml(stylesheet)

    if args.output:
        Path(args.output).write_text(result, encoding="utf-8")
        logger.info("Wrote %s", args.output)
    else:
        sys.stdout.write(result)
        if not result.endswith("\n"):
            sys.stdout.write("\n")
    return 0
