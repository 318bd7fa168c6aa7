"""The fault value and translation of runtime-detected Python errors."""

from __future__ import annotations

from exception_demos.faults.kinds import FaultKind

_TRANSLATED_ATTR = "_translated_fault"

# Checked in order; subclasses must come before their bases.
NATIVE_KINDS: tuple[tuple[type[BaseException], FaultKind], ...] = (
    (ArithmeticError, FaultKind.ARITHMETIC),
    (IndexError, FaultKind.INDEX_OUT_OF_RANGE),
    (PermissionError, FaultKind.ILLEGAL_ACCESS),
    (OSError, FaultKind.IO),
)


class Fault(Exception):
    """A typed failure signal: a kind plus optional message and integer payload."""

    def __init__(self, kind: FaultKind, message: str | None = None, *, code: int | None = None) -> None:
        super().__init__(*(arg for arg in (message, code) if arg is not None))
        self.kind = kind
        self.message = message
        self.code = code
        # Traceback length at each re-signal, so the handler can tell the signaling
        # chain apart from the re-signal path.
        self.resignal_depths: list[int] = []

    def __str__(self) -> str:
        text = self.kind.label
        if self.code is not None:
            text = f"{text}[{self.code}]"
        if self.message:
            text = f"{text}: {self.message}"
        return text

    def __repr__(self) -> str:
        return f"Fault({self.kind.name}, message={self.message!r}, code={self.code!r})"


def _is_null_access(exc: BaseException) -> bool:
    # AttributeError.obj is None on hand-raised errors too; match the message instead.
    return isinstance(exc, (AttributeError, TypeError)) and "'NoneType' object" in str(exc)


def native_kind(exc: BaseException) -> FaultKind:
    if _is_null_access(exc):
        return FaultKind.NULL_ACCESS
    for native_type, kind in NATIVE_KINDS:
        if isinstance(exc, native_type):
            return kind
    return FaultKind.RUNTIME


def as_fault(exc: BaseException) -> Fault:
    """Return ``exc`` as a Fault, translating native Python errors once.

    The translation is cached on the native exception, so every clause that
    inspects the same error sees the same Fault. The Fault keeps the native
    traceback and records the native error as its cause.
    """
    if isinstance(exc, Fault):
        return exc
    cached = getattr(exc, _TRANSLATED_ATTR, None)
    if cached is not None:
        return cached

    fault = Fault(native_kind(exc), str(exc) or None)
    fault.__cause__ = exc
    fault.__traceback__ = exc.__traceback__
    setattr(exc, _TRANSLATED_ATTR, fault)
    return fault


def original_error(fault: Fault) -> BaseException:
    """Return the native error ``fault`` was translated from, or ``fault`` itself."""
    cause = fault.__cause__
    if cause is not None and getattr(cause, _TRANSLATED_ATTR, None) is fault:
        return cause
    return fault
