from exception_demos.common.constants import EXIT_SUCCESS, EXIT_UNHANDLED_FAULT
from exception_demos.faults.fault import Fault
from exception_demos.faults.handler import RESIGNAL_MARKER, format_unhandled, run_with_default_handler
from exception_demos.faults.kinds import FaultKind
from exception_demos.faults.monitor import Clause, Monitor, resignal, signal


def a():
    return 10 / 0


def b():
    return a()


def c():
    return b()


def recover(fault):
    resignal(fault)


def inner():
    with Monitor(Clause(FaultKind.NULL_ACCESS, recover)):
        signal(Fault(FaultKind.NULL_ACCESS, "throw test"))


def outer():
    inner()


def _frame_names(lines):
    return [line if line == RESIGNAL_MARKER else line.split()[1] for line in lines[1:]]


def test_unhandled_fault_reports_frames_deepest_first(capsys):
    exit_code = run_with_default_handler(c)

    assert exit_code == EXIT_UNHANDLED_FAULT
    lines = capsys.readouterr().err.splitlines()
    assert lines[0].startswith("Unhandled fault: ArithmeticFault")
    frame_names = [line.split()[1] for line in lines if line.startswith("    at ")]
    assert frame_names[:3] == ["a", "b", "c"]


def test_format_unhandled_lists_test_module_frames():
    try:
        c()
    except ZeroDivisionError as exc:
        lines = format_unhandled(exc)
    assert all("test_handler.py" in line for line in lines[1:])
    assert len(lines) == 5
    assert RESIGNAL_MARKER not in lines


def test_resignaled_fault_separates_signal_chain_from_resignal_path():
    try:
        outer()
    except Fault as exc:
        lines = format_unhandled(exc)

    assert lines[0] == "Unhandled fault: NullAccessFault: throw test"
    assert _frame_names(lines) == [
        "signal",
        "inner",
        RESIGNAL_MARKER,
        "resignal",
        "recover",
        "__exit__",
        "inner",
        "outer",
        "test_resignaled_fault_separates_signal_chain_from_resignal_path",
    ]


def test_run_with_default_handler_passes_results_through():
    assert run_with_default_handler(lambda: None) == EXIT_SUCCESS
    assert run_with_default_handler(lambda value: value, 7) == 7
