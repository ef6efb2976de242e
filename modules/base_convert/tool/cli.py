#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys
from typing import Sequence

from pydantic import ValidationError

from modules.base_convert.core.base import convert_value
from modules.base_convert.core.decode import max_magnitude
from modules.base_convert.core.errors import ConversionError, UsageError
from modules.base_convert.core.validate import USAGE, validate_arguments
from universe.logger import setup_logger
from universe.settings import Settings, get_settings


def build_parser() -> argparse.ArgumentParser:
    # Positionals are collected from the unknown arguments and every option
    # is long-only, so values such as "-ff" or "-h" stay positionals.
    parser = argparse.ArgumentParser(
        prog="convert",
        usage="convert [--upper] [--bits N] [--log-level LEVEL] "
        "<from_base> <to_base> <value>",
        description="Convert a whole number between bases 2 to 36.",
        exit_on_error=False,
        add_help=False,
    )
    parser.add_argument("--help", action="help", help="Show this message and exit")
    parser.add_argument(
        "--upper", action="store_true", help="Print letter digits in upper case"
    )
    parser.add_argument("--bits", type=int, help="Integer width (default 64)")
    parser.add_argument("--log-level", help="Log level (default WARNING)")
    return parser


def _resolve_settings(options: argparse.Namespace) -> Settings:
    base = get_settings()
    overrides = base.model_dump()
    if options.bits is not None:
        overrides["int_bits"] = options.bits
    if options.log_level:
        overrides["log_level"] = options.log_level
    return Settings(**overrides)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    try:
        options, positionals = parser.parse_known_args(argv)
        settings = _resolve_settings(options)
    except argparse.ArgumentError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        )
        print(f"error: {problems}", file=sys.stderr)
        return 1

    log = setup_logger(settings.log_level, json_logs=settings.log_json)

    try:
        base_from, base_to, value = validate_arguments(positionals)
        result = convert_value(
            base_from,
            base_to,
            value,
            max_value=max_magnitude(settings.int_bits),
            uppercase=options.upper,
        )
    except UsageError:
        print(USAGE, file=sys.stderr)
        return 1
    except ConversionError as exc:
        log.info("convert.failed", code=exc.code, detail=exc.detail)
        print(f"error: {exc.detail}", file=sys.stderr)
        return 1

    print(result)
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
