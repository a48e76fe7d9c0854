import pytest

from termseq import colors, control
from termseq.codes import sgr, osc


def test_sgr_and_osc():
    assert sgr(1) == "\x1b[1m"
    assert sgr(38, 5, 200) == "\x1b[38;5;200m"
    assert osc(0, "hi") == "\x1b]0;hi\x1b\\"
    assert osc(8, "", "") == "\x1b]8;;\x1b\\"


def test_rgb():
    assert colors.rgb("x", 255, 0, 0) == "\x1b[38;2;255;0;0mx\x1b[0m"
    assert colors.bg_rgb("x", 1, 2, 3) == "\x1b[48;2;1;2;3mx\x1b[0m"


def test_256_colors():
    assert colors.color256("x", 196) == "\x1b[38;5;196mx\x1b[0m"
    assert colors.bg256("x", 0) == "\x1b[48;5;0mx\x1b[0m"


def test_fg_bg():
    assert colors.fg("x", colors.RED) == "\x1b[31mx\x1b[0m"
    assert colors.bg("x", colors.BG_BLUE) == "\x1b[44mx\x1b[0m"
    assert colors.fg_bg("x", colors.WHITE, colors.BG_BLACK) == "\x1b[37;40mx\x1b[0m"


def test_named_colors():
    assert colors.red("hi") == "\x1b[31mhi\x1b[0m"
    assert colors.black("hi") == "\x1b[30mhi\x1b[0m"
    assert colors.white("hi") == "\x1b[37mhi\x1b[0m"
    assert colors.bright_red("hi") == "\x1b[91mhi\x1b[0m"
    assert colors.bright_white("hi") == "\x1b[97mhi\x1b[0m"


def test_styles():
    assert colors.bold("hi") == "\x1b[1mhi\x1b[0m"
    assert colors.dim("hi") == "\x1b[2mhi\x1b[0m"
    assert colors.italic("hi") == "\x1b[3mhi\x1b[0m"
    assert colors.underline("hi") == "\x1b[4mhi\x1b[0m"
    assert colors.blink("hi") == "\x1b[5mhi\x1b[0m"
    assert colors.inverse("hi") == "\x1b[7mhi\x1b[0m"
    assert colors.hidden("hi") == "\x1b[8mhi\x1b[0m"
    assert colors.strikethrough("hi") == "\x1b[9mhi\x1b[0m"
    assert colors.double_underline("hi") == "\x1b[21mhi\x1b[0m"
    assert colors.proportional_spacing("hi") == "\x1b[26mhi\x1b[0m"
    assert colors.framed("hi") == "\x1b[51mhi\x1b[0m"
    assert colors.encircled("hi") == "\x1b[52mhi\x1b[0m"
    assert colors.overline("hi") == "\x1b[53mhi\x1b[0m"
    assert colors.style("hi", colors.BOLD, colors.RED) == "\x1b[1;31mhi\x1b[0m"


def test_every_helper_appends_reset():
    for name in ["red", "bright_cyan", "bold", "overline", "encircled"]:
        func = getattr(colors, name)
        assert func("text").endswith("text\x1b[0m")


def test_resets():
    assert colors.reset() == "\x1b[0m"
    assert colors.reset_double_underline() == "\x1b[24m"
    assert colors.reset_framed_encircled() == "\x1b[54m"
    assert colors.reset_overline() == "\x1b[55m"


def test_hyperlink():
    link = colors.hyperlink("click", "https://example.com")
    assert link == "\x1b]8;;https://example.com\x1b\\click\x1b]8;;\x1b\\"

    with pytest.raises(ValueError):
        colors.hyperlink("", "https://example.com")
    with pytest.raises(ValueError):
        colors.hyperlink("click", "")


def test_pure():
    assert colors.rgb("a", 1, 2, 3) == colors.rgb("a", 1, 2, 3)
    assert colors.hyperlink("a", "b") == colors.hyperlink("a", "b")


def test_control_chars():
    assert control.bell() == "\x07"
    assert control.backspace() == "\x08"
    assert control.tab() == "\t"
    assert control.line_feed() == "\n"
    assert control.form_feed() == "\x0c"
    assert control.carriage_return() == "\r"
