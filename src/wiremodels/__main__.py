"""Command-line interface."""
from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
import typing
from typing import Any, Optional, Sequence

from wiremodels.logging_config import setup_logging
from wiremodels.model.errors import InvalidParameterError
from wiremodels.models import get_model_class, list_keys

logger = logging.getLogger("wiremodels.cli")

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _parse_bool(text: str) -> bool:
    value = text.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"not a boolean: '{text}'")


def parse_params(key: str, assignments: Sequence[str]) -> dict[str, Any]:
    """
    Turn NAME=VALUE strings into keyword arguments for the generator
    registered under `key`, coerced to the type of each dataclass field.
    """
    cls = get_model_class(key)
    hints = typing.get_type_hints(cls)
    known = {f.name for f in dataclasses.fields(cls)}

    params: dict[str, Any] = {}
    for assignment in assignments:
        name, sep, text = assignment.partition("=")
        name = name.strip()
        if not sep:
            raise ValueError(f"Expected NAME=VALUE, got '{assignment}'")
        if name not in known:
            raise ValueError(f"Unknown parameter '{name}' for {key} (expected one of {sorted(known)})")

        field_type = hints[name]
        if field_type is bool:
            params[name] = _parse_bool(text)
        else:
            params[name] = field_type(text)
    return params


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wiremodels",
        description="Build a parametric wireframe model and print its vertices and line segments."
    )
    parser.add_argument("kind", choices=list_keys(), help="model to build")
    parser.add_argument(
        "-p", "--param", action="append", default=[], metavar="NAME=VALUE",
        help="generator parameter, may be repeated (e.g. -p n=3)"
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    parser.add_argument("--log-file", default=None, help="also write the log to this file")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(level=getattr(logging, args.log_level), log_file=args.log_file)

    try:
        params = parse_params(args.kind, args.param)
        generator = get_model_class(args.kind)(**params)
    except InvalidParameterError as e:
        parser.exit(2, f"{parser.prog}: invalid parameter: {e}\n")
    except ValueError as e:
        parser.exit(2, f"{parser.prog}: {e}\n")

    model = generator.build()
    model.check()
    logger.info("%s: %d vertices, %d line segments", model.name, model.vertex_count, model.segment_count)
    print(model)
    return 0


if __name__ == "__main__":
    sys.exit(main())
