"""CLI entrypoint for the exception-handling demonstrations."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from exception_demos.common.config_loader import enabled_demos, load_config
from exception_demos.common.constants import (
    DEMO_NAMES,
    EXIT_HARD_FAIL,
    EXIT_PARTIAL,
    EXIT_SUCCESS,
)
from exception_demos.common.errors import DemoError
from exception_demos.common.logging import build_logger, generate_run_id, log_event
from exception_demos.demos.runner import run_demo
from exception_demos.faults.handler import report_unhandled


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("command", choices=[*DEMO_NAMES, "all", "list"])
    parser.add_argument("demo_args", nargs="*", help="extra arguments handed to the demonstration")
    parser.add_argument("--config", default=None)
    parser.add_argument("--overlay-config", default=None)
    parser.add_argument("--run-id", default=None)
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARN", "ERROR"])
    parser.add_argument("--strict", action="store_true")
    return parser.parse_args(argv)


def run_command(args: argparse.Namespace) -> int:
    run_id = args.run_id or generate_run_id()
    config_path = Path(args.config) if args.config else None
    overlay_path = Path(args.overlay_config) if args.overlay_config else None

    logger = build_logger(run_id, level=args.log_level)
    bundle = load_config(config_path, overlay_path=overlay_path)

    if args.command == "list":
        enabled = set(enabled_demos(bundle))
        for name in DEMO_NAMES:
            print(name if name in enabled else f"{name} (disabled)")
        return EXIT_SUCCESS

    if args.command != "all":
        return run_demo(args.command, bundle, logger, args.demo_args)

    had_unhandled = False
    for name in enabled_demos(bundle):
        exit_code = run_demo(name, bundle, logger, args.demo_args)
        if exit_code == EXIT_SUCCESS:
            continue
        had_unhandled = True
        log_event(
            logger,
            f"demonstration {name} ended with an unhandled fault",
            demo=name,
            event="DEMO_FAIL",
            status="error",
            error_code="UNHANDLED_FAULT",
        )
        if args.strict:
            return EXIT_HARD_FAIL

    if had_unhandled:
        return EXIT_PARTIAL
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    try:
        return run_command(args)
    except DemoError as exc:
        print(f"{exc.error_code}: {exc}", file=sys.stderr)
        return EXIT_HARD_FAIL
    except Exception as exc:
        report_unhandled(exc)
        return EXIT_HARD_FAIL


if __name__ == "__main__":
    raise SystemExit(main())
