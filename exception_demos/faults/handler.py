"""Default top-level handler for faults nobody intercepted."""

from __future__ import annotations

import logging
import sys
import traceback
from pathlib import Path
from typing import Any, Callable, TextIO

from exception_demos.common.constants import EXIT_SUCCESS, EXIT_UNHANDLED_FAULT, LOGGER_NAME
from exception_demos.common.logging import log_event
from exception_demos.faults.fault import as_fault

LOGGER = logging.getLogger(f"{LOGGER_NAME}.faults")

RESIGNAL_MARKER = "    -- re-signaled --"


def format_unhandled(exc: BaseException) -> list[str]:
    """Describe the fault and its invocation chain, deepest call first.

    Frames of the original signaling chain come first. Each re-signal is
    marked, followed by the frames the fault travelled through afterwards.
    """
    fault = as_fault(exc)
    lines = [f"Unhandled fault: {fault}"]
    frames = traceback.extract_tb(exc.__traceback__)
    breaks = {depth for depth in fault.resignal_depths if 0 < depth < len(frames)}
    for printed, frame in enumerate(reversed(frames)):
        if printed in breaks:
            lines.append(RESIGNAL_MARKER)
        lines.append(f"    at {frame.name} ({Path(frame.filename).name}:{frame.lineno})")
    return lines


def report_unhandled(exc: BaseException, stream: TextIO | None = None) -> int:
    out = stream if stream is not None else sys.stderr
    for line in format_unhandled(exc):
        print(line, file=out)
    log_event(
        LOGGER,
        "fault reached the top-level handler",
        level=logging.ERROR,
        event="FAULT_UNHANDLED",
        status="error",
        fault_kind=as_fault(exc).kind.name,
    )
    return EXIT_UNHANDLED_FAULT


def run_with_default_handler(entry: Callable[..., Any], *args: Any, **kwargs: Any) -> int:
    """Run an entry point; a fault escaping it is reported and turned into a non-zero status."""
    try:
        result = entry(*args, **kwargs)
    except Exception as exc:
        return report_unhandled(exc)
    return EXIT_SUCCESS if result is None else int(result)
