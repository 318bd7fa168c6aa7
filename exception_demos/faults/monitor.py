"""Monitored regions, interception clauses and signaling."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import TracebackType
from typing import Any, Callable, NoReturn

from exception_demos.common.constants import LOGGER_NAME
from exception_demos.common.errors import MonitorError, UnreachableClauseError
from exception_demos.common.logging import log_event
from exception_demos.faults.fault import Fault, as_fault, original_error
from exception_demos.faults.kinds import FaultKind, generalizes

LOGGER = logging.getLogger(f"{LOGGER_NAME}.faults")


@dataclass(frozen=True)
class Clause:
    kind: FaultKind
    recover: Callable[[Fault], Any]

    def matches(self, fault: Fault) -> bool:
        return generalizes(self.kind, fault.kind)


def check_clause_order(clauses: tuple[Clause, ...]) -> None:
    for later_idx, later in enumerate(clauses):
        for earlier in clauses[:later_idx]:
            if generalizes(earlier.kind, later.kind):
                raise UnreachableClauseError(
                    f"Clause {later_idx} for {later.kind.label} is unreachable: "
                    f"an earlier clause for {earlier.kind.label} already intercepts it"
                )


def signal(fault: Fault) -> NoReturn:
    if not isinstance(fault, Fault):
        raise TypeError(f"Only faults can be signaled, got {type(fault).__name__}")
    log_event(
        LOGGER,
        "fault signaled",
        level=logging.DEBUG,
        event="FAULT_SIGNALED",
        status="error",
        fault_kind=fault.kind.name,
    )
    raise fault


def _traceback_depth(tb: TracebackType | None) -> int:
    depth = 0
    while tb is not None:
        depth += 1
        tb = tb.tb_next
    return depth


def resignal(fault: Fault) -> NoReturn:
    """Re-raise a handled fault so it keeps propagating outward.

    A fault translated from a native Python error resurfaces as that native
    error, so callers catching the native type still see it.
    """
    if not isinstance(fault, Fault):
        raise TypeError(f"Only faults can be re-signaled, got {type(fault).__name__}")
    log_event(
        LOGGER,
        "fault re-signaled",
        level=logging.DEBUG,
        event="FAULT_RESIGNALED",
        status="error",
        fault_kind=fault.kind.name,
    )
    error = original_error(fault)
    fault.resignal_depths.append(_traceback_depth(error.__traceback__))
    raise error


class Monitor:
    """A monitored region used as a context manager.

    Clauses are tried in declaration order and the first whose kind matches,
    exactly or by generalization, recovers the fault; execution then resumes
    after the ``with`` block. Unmatched errors propagate unchanged. The cleanup
    action runs exactly once on every way out of the block, after recovery.
    """

    def __init__(self, *clauses: Clause, cleanup: Callable[[], Any] | None = None) -> None:
        if not clauses and cleanup is None:
            raise MonitorError("A monitored region needs at least one clause or a cleanup action")
        check_clause_order(clauses)
        self.clauses = clauses
        self.cleanup = cleanup
        self.handled: Fault | None = None

    def select(self, fault: Fault) -> Clause | None:
        for clause in self.clauses:
            if clause.matches(fault):
                return clause
        return None

    def __enter__(self) -> "Monitor":
        self.handled = None
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        try:
            if exc is None or not isinstance(exc, Exception):
                return False
            fault = as_fault(exc)
            clause = self.select(fault)
            if clause is None:
                log_event(
                    LOGGER,
                    "no clause matched",
                    level=logging.DEBUG,
                    event="FAULT_UNMATCHED",
                    status="error",
                    fault_kind=fault.kind.name,
                )
                return False
            log_event(
                LOGGER,
                "fault intercepted",
                level=logging.DEBUG,
                event="FAULT_INTERCEPTED",
                status="ok",
                fault_kind=fault.kind.name,
                clause_kind=clause.kind.name,
            )
            self.handled = fault
            clause.recover(fault)
            return True
        finally:
            if self.cleanup is not None:
                log_event(LOGGER, "cleanup run", level=logging.DEBUG, event="CLEANUP_RUN", status="ok")
                self.cleanup()


def monitor(
    region: Callable[[], Any],
    clauses: tuple[Clause, ...] | list[Clause] = (),
    cleanup: Callable[[], Any] | None = None,
) -> Any:
    """Run ``region`` as a monitored region; returns its value, or None once a clause recovered."""
    with Monitor(*clauses, cleanup=cleanup):
        return region()
    return None
