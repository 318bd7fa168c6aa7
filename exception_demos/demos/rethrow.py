"""Signal a fault explicitly, intercept it, and re-signal it to the caller."""

from __future__ import annotations

from exception_demos.demos.context import DemoContext, print_heading, run_standalone
from exception_demos.faults.fault import Fault
from exception_demos.faults.kinds import FaultKind
from exception_demos.faults.monitor import Clause, Monitor, resignal, signal

NAME = "rethrow"


def throw_test(message: str) -> None:
    def recover(fault: Fault) -> None:
        print("fault caught inside throw_test()")
        resignal(fault)

    with Monitor(Clause(FaultKind.NULL_ACCESS, recover)):
        signal(Fault(FaultKind.NULL_ACCESS, message))


def run(ctx: DemoContext) -> None:
    message = str(ctx.params.get("message", "throw test"))

    print_heading("Throw example")
    with Monitor(Clause(FaultKind.NULL_ACCESS, lambda fault: print(f"throw fault caught again: {fault}"))):
        throw_test(message)
    print()


def main(argv: list[str] | None = None) -> int:
    return run_standalone(NAME, run, argv)


if __name__ == "__main__":
    raise SystemExit(main())
