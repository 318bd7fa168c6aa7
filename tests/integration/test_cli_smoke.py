from pathlib import Path

import pytest

from exception_demos.cli import main, parse_args, run_command
from exception_demos.common.constants import EXIT_HARD_FAIL, EXIT_PARTIAL, EXIT_SUCCESS, EXIT_UNHANDLED_FAULT


def _enable_unhandled(tmp_path: Path) -> Path:
    overlay = tmp_path / "overlay.yml"
    overlay.write_text("demos:\n  unhandled:\n    enabled: true\n", encoding="utf-8")
    return overlay


@pytest.mark.integration
def test_cli_all_runs_every_enabled_demo(capsys):
    exit_code = run_command(parse_args(["all", "--config", "config/demos.yml", "--log-level", "ERROR"]))

    assert exit_code == EXIT_SUCCESS
    out = capsys.readouterr().out
    assert "After try/catch" in out
    assert "Caught: ApplicationFault[20]" in out
    assert "Division by zero error, without own exception handling" not in out


@pytest.mark.integration
def test_cli_single_unhandled_demo_exits_non_zero(capsys):
    assert main(["unhandled", "--log-level", "ERROR"]) == EXIT_UNHANDLED_FAULT
    assert "Unhandled fault: ArithmeticFault" in capsys.readouterr().err


@pytest.mark.integration
def test_cli_all_with_unhandled_demo_is_partial(tmp_path: Path, capsys):
    overlay = _enable_unhandled(tmp_path)
    assert main(["all", "--overlay-config", str(overlay), "--log-level", "ERROR"]) == EXIT_PARTIAL


@pytest.mark.integration
def test_cli_strict_stops_on_unhandled_fault(tmp_path: Path, capsys):
    overlay = tmp_path / "overlay.yml"
    overlay.write_text(
        "demos:\n  unhandled:\n    enabled: true\n  try-catch:\n    enabled: false\n",
        encoding="utf-8",
    )
    assert main(["all", "--overlay-config", str(overlay), "--strict", "--log-level", "ERROR"]) == EXIT_HARD_FAIL


@pytest.mark.integration
def test_cli_invalid_settings_is_hard_failure(tmp_path: Path, capsys):
    bad = tmp_path / "bad.yml"
    bad.write_text("demos:\n  stack-overflow:\n    enabled: true\n    params: {}\n", encoding="utf-8")

    assert main(["try-catch", "--config", str(bad)]) == EXIT_HARD_FAIL
    assert "CONFIG_ERROR" in capsys.readouterr().err


@pytest.mark.integration
def test_cli_passes_demo_arguments(capsys):
    assert main(["multi-catch", "extra", "--log-level", "ERROR"]) == EXIT_SUCCESS
    assert "Array index oob" in capsys.readouterr().out
