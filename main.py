#!/usr/bin/env python3
"""Thin entrypoint for datepick."""

from __future__ import annotations

import json
import os
import sys
from dataclasses import replace
from typing import Sequence

from config import load_config
from log_setup import configure_logging
from models import ValidationError, normalize_mode, parse_value, value_to_jsonable
from orchestrator import Orchestrator

try:
    from _version import __version__
except Exception:  # pragma: no cover - fallback for source runs
    __version__ = "0.0.0"


def _print_help() -> None:
    print(
        "datepick - terminal date and date-range picker\n\n"
        "Usage:\n"
        "  datepick                       Launch the picker (mode from config, default duo)\n"
        "  datepick -m single|range|duo   Choose the picker mode\n"
        '  datepick -d "<YYYY-MM-DD>"     Start with a selected date\n'
        '  datepick -d "<FROM>..<TO>"     Start with a selected range (either side may be blank)\n'
        '  datepick -p "<text>"           Placeholder shown while nothing is picked\n'
        "  datepick --no-reset            Hide the clear action\n"
        "  datepick -h                    Show this help\n"
        "  datepick -v                    Show installed version\n\n"
        "On exit the picked value is printed as JSON.\n"
    )


def parse_args(argv: Sequence[str]) -> tuple[dict[str, str | None], bool, bool]:
    flags: dict[str, str | None] = {}
    show_version = False
    show_help = False

    idx = 0
    while idx < len(argv):
        arg = argv[idx]
        if arg == "-h":
            show_help = True
            idx += 1
            continue
        if arg == "-v":
            show_version = True
            idx += 1
            continue
        if arg == "--no-reset":
            flags["no_reset"] = "1"
            idx += 1
            continue
        if arg == "-m":
            idx += 1
            if idx >= len(argv):
                raise ValidationError("-m requires a mode argument")
            flags["m"] = argv[idx]
            idx += 1
            continue
        if arg == "-d":
            idx += 1
            if idx >= len(argv):
                raise ValidationError("-d requires a date or range argument")
            flags["d"] = argv[idx]
            idx += 1
            continue
        if arg == "-p":
            idx += 1
            if idx >= len(argv):
                raise ValidationError("-p requires a placeholder argument")
            flags["p"] = argv[idx]
            idx += 1
            continue
        raise ValidationError(f"Unknown flag '{arg}'")
    return flags, show_version, show_help


def main(argv: list[str] | None = None) -> int:
    # Make ESC detection snappy inside curses.
    os.environ.setdefault("ESCDELAY", "25")

    if argv is None:
        argv = sys.argv[1:]

    try:
        flag_values, show_version, show_help = parse_args(argv)
        config = load_config()
        if flag_values.get("m") is not None:
            config = replace(config, mode=normalize_mode(flag_values["m"]))
        initial = parse_value(flag_values.get("d") or "")
    except ValidationError as exc:
        print(str(exc))
        return 1

    if show_version:
        print(__version__)
        return 0

    if show_help:
        _print_help()
        return 0

    if flag_values.get("p"):
        config = replace(config, placeholder=flag_values["p"])
    if "no_reset" in flag_values:
        config = replace(config, reset_enabled=False)

    try:
        configure_logging(log_level=config.log_level, log_file=config.log_file)
    except ValueError as exc:
        print(str(exc))
        return 1

    orchestrator = Orchestrator(config, value=initial, version=__version__)
    rc = orchestrator.run()
    if rc == 0:
        print(json.dumps(value_to_jsonable(orchestrator.result)))
    return rc


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(130)
