"""Shared plumbing for running a single demonstration."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Any, Callable

from exception_demos.common.config_loader import demo_params, load_config
from exception_demos.common.constants import HEADING_RULE
from exception_demos.common.logging import build_logger, generate_run_id
from exception_demos.faults.handler import run_with_default_handler


@dataclass(frozen=True)
class DemoContext:
    name: str
    params: dict[str, Any] = field(default_factory=dict)
    argv: tuple[str, ...] = ()


DemoFn = Callable[[DemoContext], None]


def print_heading(title: str) -> None:
    print(title)
    print(HEADING_RULE)


def run_standalone(name: str, run: DemoFn, argv: list[str] | None = None) -> int:
    """Entry point used by each demonstration module's ``main``."""
    args = sys.argv[1:] if argv is None else argv
    build_logger(generate_run_id(), level="WARN")
    ctx = DemoContext(
        name=name,
        params=demo_params(load_config(), name),
        argv=tuple(args),
    )
    return run_with_default_handler(run, ctx)
