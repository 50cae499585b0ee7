import argparse
import io

from okadjust.core.models import OKHSL, OKLCH
from okadjust.logic.adjust.engine import run
from okadjust.logic.adjust.renderer import render_adjust_line, should_use_color


def _args(component="l", operation="increase", value=0.0, no_clamp=False, color="never"):
    return argparse.Namespace(
        component=component, operation=operation, value=value, no_clamp=no_clamp, color=color
    )


def test_run_lines_in_order():
    stdin = io.StringIO("#336699\n336699\n#abc\n")
    stdout = io.StringIO()
    assert run(_args(), OKHSL, stdin, stdout) == 0
    assert stdout.getvalue() == "#336699\n336699\n#aabbcc\n"


def test_run_without_trailing_newline():
    stdout = io.StringIO()
    assert run(_args(), OKLCH, io.StringIO("#336699"), stdout) == 0
    assert stdout.getvalue() == "#336699\n"


def test_run_strips_crlf():
    stdout = io.StringIO()
    assert run(_args(), OKHSL, io.StringIO("#336699\r\n"), stdout) == 0
    assert stdout.getvalue() == "#336699\n"


def test_run_stops_at_first_parse_error(capsys):
    stdin = io.StringIO("#336699\nzzz\n#ffffff\n")
    stdout = io.StringIO()
    assert run(_args(), OKHSL, stdin, stdout) == 1
    assert stdout.getvalue() == "#336699\n"
    err = capsys.readouterr().err
    assert "line 2" in err
    assert "zzz" in err


def test_run_empty_line_fails():
    stdout = io.StringIO()
    assert run(_args(), OKHSL, io.StringIO("\n#336699\n"), stdout) == 1
    assert stdout.getvalue() == ""


def test_run_out_of_bounds(capsys):
    stdout = io.StringIO()
    args = _args(operation="set", value=1.0001, no_clamp=True)
    assert run(args, OKHSL, io.StringIO("#336699\n"), stdout) == 1
    assert stdout.getvalue() == ""
    assert "out of bounds" in capsys.readouterr().err

    stdout = io.StringIO()
    args = _args(operation="set", value=1.0, no_clamp=True)
    assert run(args, OKHSL, io.StringIO("#336699\n"), stdout) == 0
    assert stdout.getvalue() == "#ffffff\n"


def test_run_line_independence():
    args = _args(component="h", operation="increase", value=30.0)
    alone = io.StringIO()
    run(args, OKLCH, io.StringIO("#6b7a8f\n"), alone)
    together = io.StringIO()
    run(args, OKLCH, io.StringIO("#ff0000\n#6b7a8f\n#00ff00\n"), together)
    assert together.getvalue().splitlines()[1] == alone.getvalue().strip()


def test_run_invalid_utf8(capsys):
    stdin = io.TextIOWrapper(io.BytesIO(b"#336699\n\xff\xfe\n"), encoding="utf-8")
    stdout = io.StringIO()
    assert run(_args(), OKHSL, stdin, stdout) == 1
    assert "UTF-8" in capsys.readouterr().err


def test_run_color_swatch():
    stdout = io.StringIO()
    assert run(_args(color="always"), OKHSL, io.StringIO("#336699\n"), stdout) == 0
    line = stdout.getvalue()
    assert line.startswith("#336699  ")
    assert "\033[48;2;51;102;153m" in line


def test_should_use_color():
    assert should_use_color("always", io.StringIO())
    assert not should_use_color("never", io.StringIO())
    assert not should_use_color("auto", io.StringIO())


def test_render_adjust_line():
    assert render_adjust_line("ff0000") == "ff0000"
    assert render_adjust_line("ff0000", color=True).startswith("ff0000  \033[48;2;255;0;0m")


def test_run_tiny_lightness():
    stdout = io.StringIO()
    assert run(_args(operation="set", value=1e-80), OKHSL, io.StringIO("#336699\nabc\n"), stdout) == 0
    assert stdout.getvalue() == "#000000\n000000\n"
