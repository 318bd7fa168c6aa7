"""Declared-fault contracts: list what a function may signal but not handle."""

from __future__ import annotations

from exception_demos.common.errors import ContractError
from exception_demos.demos.context import DemoContext, print_heading, run_standalone
from exception_demos.faults.contract import declared_faults, declares
from exception_demos.faults.fault import Fault
from exception_demos.faults.kinds import FaultKind
from exception_demos.faults.monitor import Clause, Monitor, signal

NAME = "declared-faults"


@declares(FaultKind.ILLEGAL_ACCESS)
def throws_fault(message: str) -> None:
    print("Inside throws_fault()")
    signal(Fault(FaultKind.ILLEGAL_ACCESS, message))


@declares(FaultKind.ILLEGAL_ACCESS)
def breaks_contract(message: str) -> None:
    signal(Fault(FaultKind.IO, message))


def run(ctx: DemoContext) -> None:
    message = str(ctx.params.get("message", "demonstration"))

    print_heading("Throws example")
    declared = ", ".join(kind.label for kind in declared_faults(throws_fault))
    print(f"throws_fault() declares: {declared}")
    with Monitor(Clause(FaultKind.ILLEGAL_ACCESS, lambda fault: print(f"Caught: {fault}"))):
        throws_fault(message)

    try:
        breaks_contract(message)
    except ContractError as exc:
        print(f"Contract rejected: {exc}")
    print()


def main(argv: list[str] | None = None) -> int:
    return run_standalone(NAME, run, argv)


if __name__ == "__main__":
    raise SystemExit(main())
