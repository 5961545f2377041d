"""Smoke test for the demo entry point."""

from ecpoly import demo


def test_main_runs(capsys):
    assert demo.main() == 0
    out = capsys.readouterr().out
    assert "DEMOS COMPLETE" in out
    assert "- 24 x^4 y^3" in out
    assert "DivisionByZero" in out
    assert "InvalidModulus" in out
