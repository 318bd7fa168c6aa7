"""A monitored region inside a called function nests inside the caller's region."""

from __future__ import annotations

from exception_demos.demos.context import DemoContext, print_heading, run_standalone
from exception_demos.faults.kinds import FaultKind
from exception_demos.faults.monitor import Clause, Monitor

NAME = "nested-try-call"


def nest_try(a: int) -> None:
    # Only bad indexes are intercepted here; arithmetic faults reach the caller.
    with Monitor(Clause(FaultKind.INDEX_OUT_OF_RANGE, lambda fault: print(f"Array index out-of-bounds: {fault}"))):
        print("try in nest_try() called")
        if a == 1:
            a = a // (a - a)
        if a == 2:
            c = [1]
            c[10] = 11


def run(ctx: DemoContext) -> None:
    a = int(ctx.params.get("a", 0))

    print_heading("Nested try statement, with method call")
    with Monitor(Clause(FaultKind.ARITHMETIC, lambda fault: print(f"Divide by 0: {fault}"))):
        if a == 0:
            print(1 / a)
        nest_try(a)
    print()


def main(argv: list[str] | None = None) -> int:
    return run_standalone(NAME, run, argv)


if __name__ == "__main__":
    raise SystemExit(main())
