"""Fault kinds and the generalization relation between them."""

from __future__ import annotations

from enum import Enum
from typing import Iterator

from exception_demos.common.errors import ConfigError


class FaultKind(Enum):
    ANY = "Fault"
    RUNTIME = "RuntimeFault"
    ARITHMETIC = "ArithmeticFault"
    INDEX_OUT_OF_RANGE = "IndexOutOfRangeFault"
    NULL_ACCESS = "NullAccessFault"
    ILLEGAL_ACCESS = "IllegalAccessFault"
    IO = "IOFault"
    APPLICATION = "ApplicationFault"

    @property
    def label(self) -> str:
        return self.value


# Each kind maps to its immediate general ancestor; ANY is the root.
GENERAL_KIND: dict[FaultKind, FaultKind] = {
    FaultKind.RUNTIME: FaultKind.ANY,
    FaultKind.ARITHMETIC: FaultKind.RUNTIME,
    FaultKind.INDEX_OUT_OF_RANGE: FaultKind.RUNTIME,
    FaultKind.NULL_ACCESS: FaultKind.RUNTIME,
    FaultKind.ILLEGAL_ACCESS: FaultKind.ANY,
    FaultKind.IO: FaultKind.ANY,
    FaultKind.APPLICATION: FaultKind.ANY,
}


def lineage(kind: FaultKind) -> Iterator[FaultKind]:
    """Yield ``kind`` and then each ancestor up to ``FaultKind.ANY``."""
    current: FaultKind | None = kind
    while current is not None:
        yield current
        current = GENERAL_KIND.get(current)


def generalizes(general: FaultKind, specific: FaultKind) -> bool:
    return general in lineage(specific)


def is_checked(kind: FaultKind) -> bool:
    # Everything under RUNTIME is exempt from declared-fault contracts.
    return FaultKind.RUNTIME not in lineage(kind)


def parse_kind(text: str) -> FaultKind:
    normalised = str(text).strip().upper().replace("-", "_").replace(" ", "_")
    try:
        return FaultKind[normalised]
    except KeyError:
        pass
    for kind in FaultKind:
        if kind.label.upper() == normalised:
            return kind
    known = ", ".join(kind.name.lower().replace("_", "-") for kind in FaultKind)
    raise ConfigError(f"Unknown fault kind: {text!r} (expected one of: {known})")
