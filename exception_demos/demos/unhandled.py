"""A fault nobody intercepts reaches the default handler and ends the program."""

from __future__ import annotations

from exception_demos.demos.context import DemoContext, print_heading, run_standalone

NAME = "unhandled"


def a() -> float:
    return 10 / 0


def b() -> float:
    return a()


def c() -> float:
    return b()


def run(ctx: DemoContext) -> None:
    print_heading("Division by zero error, without own exception handling")
    c()
    print("This line will not be executed.")


def main(argv: list[str] | None = None) -> int:
    return run_standalone(NAME, run, argv)


if __name__ == "__main__":
    raise SystemExit(main())
