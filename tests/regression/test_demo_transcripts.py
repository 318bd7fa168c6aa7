from __future__ import annotations

import pytest

from exception_demos.demos import checked_throws, cleanup, custom_fault, rethrow

RULE = "-" * 43


@pytest.mark.regression
def test_cleanup_transcript_is_stable(capsys):
    assert cleanup.main([]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "Finally example",
        RULE,
        "inside method_a()",
        "A's finally",
        "Exception caught: RuntimeFault: demo",
        "inside method_b()",
        "B's finally",
        "inside method_c()",
        "C's finally",
        "",
    ]


@pytest.mark.regression
def test_custom_fault_transcript_is_stable(capsys):
    assert custom_fault.main([]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "Custom application fault",
        RULE,
        "Called compute with a value of: 1",
        "Normal exit",
        "Called compute with a value of: 20",
        "Caught: ApplicationFault[20]",
        "",
    ]


@pytest.mark.regression
def test_rethrow_transcript_is_stable(capsys):
    assert rethrow.main([]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "Throw example",
        RULE,
        "fault caught inside throw_test()",
        "throw fault caught again: NullAccessFault: throw test",
        "",
    ]


@pytest.mark.regression
def test_checked_throws_transcript_is_stable(capsys):
    assert checked_throws.main([]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "Checked faults and declared contracts",
        RULE,
        "Exception caught: IOFault: Error",
        "Program continues",
        "",
    ]
