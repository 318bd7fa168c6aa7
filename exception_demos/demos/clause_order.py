"""A clause for a general kind must not precede one for a more specific kind."""

from __future__ import annotations

from exception_demos.common.errors import UnreachableClauseError
from exception_demos.demos.context import DemoContext, print_heading, run_standalone
from exception_demos.faults.kinds import FaultKind
from exception_demos.faults.monitor import Clause, Monitor

NAME = "clause-order"


def _divide() -> float:
    return 1 / 0


def run(ctx: DemoContext) -> None:
    print_heading("Multiple catch clauses: subclass must come before its superclass")

    try:
        Monitor(
            Clause(FaultKind.ANY, lambda fault: print("Generic fault clause")),
            Clause(FaultKind.ARITHMETIC, lambda fault: print("This line will never be reached.")),
        )
    except UnreachableClauseError as exc:
        print(f"Rejected: {exc}")

    with Monitor(
        Clause(FaultKind.ARITHMETIC, lambda fault: print(f"Specific clause first: {fault}")),
        Clause(FaultKind.ANY, lambda fault: print(f"Generic fault clause: {fault}")),
    ):
        _divide()
    print()


def main(argv: list[str] | None = None) -> int:
    return run_standalone(NAME, run, argv)


if __name__ == "__main__":
    raise SystemExit(main())
