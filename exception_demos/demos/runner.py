"""Run demonstrations under the default handler with structured logging."""

from __future__ import annotations

import logging
import time

from exception_demos.common.config_loader import ConfigBundle, demo_params
from exception_demos.common.constants import EXIT_SUCCESS
from exception_demos.common.errors import ConfigError
from exception_demos.common.logging import log_event
from exception_demos.demos.context import DemoContext
from exception_demos.demos.registry import DEMOS
from exception_demos.faults.handler import run_with_default_handler


def run_demo(
    name: str,
    bundle: ConfigBundle,
    logger: logging.Logger,
    argv: tuple[str, ...] | list[str] = (),
) -> int:
    """Run one demonstration; returns its exit status (non-zero when a fault went unhandled)."""
    run = DEMOS.get(name)
    if run is None:
        raise ConfigError(f"Unknown demonstration: {name}")

    ctx = DemoContext(name=name, params=demo_params(bundle, name), argv=tuple(argv))
    log_event(logger, "demo start", demo=name, event="DEMO_START", status="ok")
    started = time.monotonic()
    exit_code = run_with_default_handler(run, ctx)
    duration_ms = int((time.monotonic() - started) * 1000)
    log_event(
        logger,
        "demo end",
        demo=name,
        event="DEMO_END",
        status="ok" if exit_code == EXIT_SUCCESS else "error",
        duration_ms=duration_ms,
    )
    return exit_code
