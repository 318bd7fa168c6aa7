"""A checked fault declared through every function it passes."""

from __future__ import annotations

from exception_demos.demos.context import DemoContext, print_heading, run_standalone
from exception_demos.faults.contract import declares
from exception_demos.faults.fault import Fault
from exception_demos.faults.kinds import FaultKind
from exception_demos.faults.monitor import Clause, Monitor, signal

NAME = "checked-throws"


@declares(FaultKind.IO)
def a(message: str) -> None:
    signal(Fault(FaultKind.IO, message))


@declares(FaultKind.IO)
def b(message: str) -> None:
    a(message)


def c(message: str) -> None:
    with Monitor(Clause(FaultKind.ANY, lambda fault: print(f"Exception caught: {fault}"))):
        b(message)


def run(ctx: DemoContext) -> None:
    print_heading("Checked faults and declared contracts")
    c(str(ctx.params.get("message", "Error")))
    print("Program continues")
    print()


def main(argv: list[str] | None = None) -> int:
    return run_standalone(NAME, run, argv)


if __name__ == "__main__":
    raise SystemExit(main())
