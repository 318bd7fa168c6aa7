"""Declared-fault contracts."""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable, TypeVar

from exception_demos.common.constants import LOGGER_NAME
from exception_demos.common.errors import ContractError
from exception_demos.common.logging import log_event
from exception_demos.faults.fault import as_fault
from exception_demos.faults.kinds import FaultKind, generalizes, is_checked

LOGGER = logging.getLogger(f"{LOGGER_NAME}.faults")
DECLARED_ATTR = "__declared_faults__"

F = TypeVar("F", bound=Callable[..., Any])


def declares(*kinds: FaultKind) -> Callable[[F], F]:
    """Declare the fault kinds a function may signal without intercepting them.

    Only checked kinds are enforced: a checked fault that no declared kind
    generalizes is turned into a ContractError at the call boundary. Unchecked
    faults pass through untouched whether declared or not.
    """

    def decorator(fn: F) -> F:
        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return fn(*args, **kwargs)
            except Exception as exc:
                fault = as_fault(exc)
                if is_checked(fault.kind) and not any(generalizes(kind, fault.kind) for kind in kinds):
                    log_event(
                        LOGGER,
                        f"{fn.__qualname__} signaled undeclared fault",
                        level=logging.WARNING,
                        event="CONTRACT_VIOLATION",
                        status="error",
                        fault_kind=fault.kind.name,
                        error_code=ContractError.error_code,
                    )
                    raise ContractError(
                        f"{fn.__qualname__}() signaled {fault.kind.label}, which it does not declare"
                    ) from exc
                raise

        setattr(wrapper, DECLARED_ATTR, tuple(kinds))
        return wrapper  # type: ignore[return-value]

    return decorator


def declared_faults(fn: Callable[..., Any]) -> tuple[FaultKind, ...]:
    return getattr(fn, DECLARED_ATTR, ())
