"""Cleanup actions run on every way out of a monitored region."""

from __future__ import annotations

from exception_demos.demos.context import DemoContext, print_heading, run_standalone
from exception_demos.faults.fault import Fault
from exception_demos.faults.kinds import FaultKind
from exception_demos.faults.monitor import Clause, Monitor, signal

NAME = "cleanup"


def method_a() -> None:
    # Leaves the region by signaling.
    with Monitor(cleanup=lambda: print("A's finally")):
        print("inside method_a()")
        signal(Fault(FaultKind.RUNTIME, "demo"))


def method_b() -> None:
    # Leaves the region by returning early.
    with Monitor(cleanup=lambda: print("B's finally")):
        print("inside method_b()")
        return


def method_c() -> None:
    with Monitor(cleanup=lambda: print("C's finally")):
        print("inside method_c()")


def run(ctx: DemoContext) -> None:
    print_heading("Finally example")
    with Monitor(Clause(FaultKind.ANY, lambda fault: print(f"Exception caught: {fault}"))):
        method_a()
    method_b()
    method_c()
    print()


def main(argv: list[str] | None = None) -> int:
    return run_standalone(NAME, run, argv)


if __name__ == "__main__":
    raise SystemExit(main())
