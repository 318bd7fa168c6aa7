"""Several clauses on one region: the first matching one wins."""

from __future__ import annotations

from exception_demos.demos.context import DemoContext, print_heading, run_standalone
from exception_demos.faults.kinds import FaultKind
from exception_demos.faults.monitor import Clause, Monitor

NAME = "multi-catch"


def run(ctx: DemoContext) -> None:
    values = list(ctx.params.get("values", [1, 2, 3]))
    index = int(ctx.params.get("index", 10))

    print_heading("Multiple catch clauses")
    with Monitor(
        Clause(FaultKind.ARITHMETIC, lambda fault: print(f"Divide by 0: {fault}")),
        Clause(FaultKind.INDEX_OUT_OF_RANGE, lambda fault: print(f"Array index oob: {fault}")),
    ):
        # No extra arguments means dividing by zero; any argument moves on to the bad index.
        divisor = len(ctx.argv)
        print(f"10 / {divisor} = {10 / divisor}")
        values[index] = 11
    print("After try/catch blocks")
    print()


def main(argv: list[str] | None = None) -> int:
    return run_standalone(NAME, run, argv)


if __name__ == "__main__":
    raise SystemExit(main())
