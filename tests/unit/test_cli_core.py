from exception_demos.cli import parse_args, run_command


def test_parse_args_defaults():
    args = parse_args(["try-catch"])
    assert args.command == "try-catch"
    assert args.demo_args == []
    assert args.config is None
    assert args.overlay_config is None
    assert args.log_level == "INFO"
    assert args.strict is False


def test_parse_args_collects_demo_arguments():
    args = parse_args(["multi-catch", "one", "two", "--log-level", "ERROR"])
    assert args.demo_args == ["one", "two"]
    assert args.log_level == "ERROR"


def test_list_command_marks_disabled_demos(capsys):
    assert run_command(parse_args(["list", "--log-level", "ERROR"])) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "try-catch"
    assert "unhandled (disabled)" in lines
