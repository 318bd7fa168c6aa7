"""A monitored region inside another one.

Faults the inner region does not intercept fall through to the outer region.
Set ``a`` to 0, 1 or 2 to fault in the outer region, in the inner region with
an arithmetic fault, or in the inner region with a bad index.
"""

from __future__ import annotations

from exception_demos.demos.context import DemoContext, print_heading, run_standalone
from exception_demos.faults.kinds import FaultKind
from exception_demos.faults.monitor import Clause, Monitor

NAME = "nested-try"


def run(ctx: DemoContext) -> None:
    a = int(ctx.params.get("a", 0))

    print_heading("Nested try statement")
    with Monitor(Clause(FaultKind.ARITHMETIC, lambda fault: print(f"Outer divide by 0: {fault}"))):
        if a == 0:
            print(1 / a)
        with Monitor(
            Clause(FaultKind.INDEX_OUT_OF_RANGE, lambda fault: print(f"Array index out-of-bounds: {fault}")),
            Clause(FaultKind.ARITHMETIC, lambda fault: print(f"Inner divide by 0: {fault}")),
        ):
            if a == 1:
                a = a // (a - a)
            if a == 2:
                c = [1]
                c[10] = 11
    print()


def main(argv: list[str] | None = None) -> int:
    return run_standalone(NAME, run, argv)


if __name__ == "__main__":
    raise SystemExit(main())
