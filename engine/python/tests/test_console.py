"""Tests for the text menu front-end."""

import pytest
from tetris_stack.console import main, parse_option, render_state, run_console
from tetris_stack.env import StackEnv


def scripted(inputs):
    """Build a read() that replays inputs, then signals end of input."""
    remaining = list(inputs)

    def read(prompt):
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return read


def make_env():
    env = StackEnv()
    env.reset(seed=0, kinds="IOTLSZJ")
    return env


def test_render_state():
    env = make_env()
    env.reserve()

    text = render_state(env.observe())

    assert "Piece queue: [O1] [T2] [L3] [S4] [Z5]" in text
    assert "Reserve stack (top -> bottom): [I0]" in text


def test_render_empty_stack():
    text = render_state(make_env().observe())
    assert "Reserve stack (top -> bottom): (empty)" in text


def test_parse_option():
    assert parse_option("3") == 3
    assert parse_option(" 0 ") == 0
    assert parse_option("9") is None
    assert parse_option("abc") is None


def test_run_console_commands_and_exit():
    """Test a short scripted session."""
    env = make_env()
    output = []

    commands_run = run_console(env, read=scripted(["2", "1", "x", "3", "0"]), write=output.append)

    assert commands_run == 3
    text = "\n".join(output)
    assert "Piece [I0] moved to the reserve." in text
    assert "Piece [O1] played." in text
    assert "Invalid option" in text
    assert "Reserved piece [I0] used." in text
    assert "See you next time" in text


def test_run_console_reports_rejection():
    env = make_env()
    output = []

    run_console(env, read=scripted(["5", "0"]), write=output.append)

    assert any("Need 3 pieces" in line for line in output)


def test_run_console_eof_exits():
    env = make_env()
    output = []

    assert run_console(env, read=scripted([]), write=output.append) == 0
    assert "See you next time" in output[-1]


def test_main_rejects_non_integer_seed(capsys):
    """Test a bad seed argument prints usage and exits non-zero."""
    with pytest.raises(SystemExit) as exc_info:
        main(["abc"])

    assert exc_info.value.code == 2
    assert "Usage" in capsys.readouterr().out
