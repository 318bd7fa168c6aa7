"""An application fault carrying an integer payload."""

from __future__ import annotations

from exception_demos.demos.context import DemoContext, print_heading, run_standalone
from exception_demos.faults.contract import declares
from exception_demos.faults.fault import Fault
from exception_demos.faults.kinds import FaultKind
from exception_demos.faults.monitor import Clause, Monitor, signal

NAME = "custom-fault"


@declares(FaultKind.APPLICATION)
def compute(a: int, threshold: int = 10) -> None:
    print(f"Called compute with a value of: {a}")
    if a > threshold:
        signal(Fault(FaultKind.APPLICATION, code=a))
    print("Normal exit")


def run(ctx: DemoContext) -> None:
    threshold = int(ctx.params.get("threshold", 10))
    inputs = [int(value) for value in ctx.params.get("inputs", [1, 20])]

    print_heading("Custom application fault")
    with Monitor(Clause(FaultKind.APPLICATION, lambda fault: print(f"Caught: {fault}"))):
        for value in inputs:
            compute(value, threshold)
    print()


def main(argv: list[str] | None = None) -> int:
    return run_standalone(NAME, run, argv)


if __name__ == "__main__":
    raise SystemExit(main())
