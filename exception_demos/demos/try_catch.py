"""Division by zero intercepted by an arithmetic clause.

Once a fault is signaled, control leaves the monitored region for the
matching clause and never returns to the signaling point.
"""

from __future__ import annotations

from exception_demos.demos.context import DemoContext, print_heading, run_standalone
from exception_demos.faults.fault import Fault
from exception_demos.faults.kinds import FaultKind
from exception_demos.faults.monitor import Clause, Monitor

NAME = "try-catch"


def _on_arithmetic(fault: Fault) -> None:
    print(f"Exception: {fault}")
    print("Division by zero.")


def run(ctx: DemoContext) -> None:
    numerator = int(ctx.params.get("numerator", 10))
    denominator = int(ctx.params.get("denominator", 0))

    print_heading("Division by zero error, with try and catch")
    with Monitor(Clause(FaultKind.ARITHMETIC, _on_arithmetic)):
        result = numerator / denominator
        print("This line will not be executed.")
        print(f"Result: {result}")
    print("After try/catch")
    print()


def main(argv: list[str] | None = None) -> int:
    return run_standalone(NAME, run, argv)


if __name__ == "__main__":
    raise SystemExit(main())
