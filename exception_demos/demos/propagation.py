"""Faults unwind the call chain until some caller intercepts them.

With ``clause_kind`` set to a kind that does not match (for example
``null-access``), the fault reaches the default handler instead.
"""

from __future__ import annotations

from exception_demos.demos.context import DemoContext, print_heading, run_standalone
from exception_demos.faults.kinds import FaultKind, parse_kind
from exception_demos.faults.monitor import Clause, Monitor

NAME = "propagation"


def a() -> float:
    return 1 / 0


def b() -> float:
    return a()


def c(clause_kind: FaultKind) -> None:
    with Monitor(Clause(clause_kind, lambda fault: print(f"Exception caught: {fault}"))):
        b()


def run(ctx: DemoContext) -> None:
    clause_kind = parse_kind(ctx.params.get("clause_kind", "any"))

    print_heading("Exception propagation")
    c(clause_kind)
    print("Continue program")
    print()


def main(argv: list[str] | None = None) -> int:
    return run_standalone(NAME, run, argv)


if __name__ == "__main__":
    raise SystemExit(main())
