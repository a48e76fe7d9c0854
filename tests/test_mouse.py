from termseq import mouse
from termseq.records import MouseEvent, SGRMouseEvent, MOUSE_EVENT_TYPES


def test_modes():
    assert mouse.enable_tracking() == "\x1b[?1000h"
    assert mouse.disable_tracking() == "\x1b[?1000l"
    assert mouse.enable_drag_tracking() == "\x1b[?1002h"
    assert mouse.disable_drag_tracking() == "\x1b[?1002l"
    assert mouse.enable_move_tracking() == "\x1b[?1003h"
    assert mouse.disable_move_tracking() == "\x1b[?1003l"
    assert mouse.enable_sgr_mode() == "\x1b[?1006h"
    assert mouse.disable_sgr_mode() == "\x1b[?1006l"


def test_combined_modes():
    assert mouse.enable_all_tracking() == "\x1b[?1000h\x1b[?1002h\x1b[?1003h"
    assert mouse.disable_all_tracking() == "\x1b[?1000l\x1b[?1002l\x1b[?1003l"
    assert mouse.enable_sgr_tracking() == "\x1b[?1006h\x1b[?1000h"
    assert mouse.enable_sgr_drag_tracking() == "\x1b[?1006h\x1b[?1002h"
    assert mouse.enable_sgr_move_tracking() == "\x1b[?1006h\x1b[?1003h"


def x10(button, x, y):
    return "\x1b[M" + chr(32 + button) + chr(32 + x) + chr(32 + y)


def test_parse_mouse_event():
    event = mouse.parse_mouse_event(x10(0, 10, 5))
    assert event == MouseEvent("click", 0, 10, 5)

    event = mouse.parse_mouse_event(x10(64, 10, 5))
    assert event.type == "drag"
    assert event.button == 0

    event = mouse.parse_mouse_event(x10(2, 1, 1))
    assert event == MouseEvent("click", 2, 1, 1)

    # Button is masked to the low two bits
    event = mouse.parse_mouse_event(x10(64 + 1 + 4, 3, 4))
    assert event == MouseEvent("drag", 1, 3, 4)

    assert event.type in MOUSE_EVENT_TYPES


def test_parse_mouse_event_invalid():
    assert mouse.parse_mouse_event("") is None
    assert mouse.parse_mouse_event("\x1b[M") is None
    assert mouse.parse_mouse_event("\x1b[M !") is None
    assert mouse.parse_mouse_event("\x1b[A") is None
    assert mouse.parse_mouse_event("abc") is None


def test_parse_sgr_event():
    event = mouse.parse_sgr_event("\x1b[<0;10;20M")
    assert event == SGRMouseEvent("press", 0, 10, 20, 0)

    event = mouse.parse_sgr_event("\x1b[<0;10;20m")
    assert event.type == "release"

    event = mouse.parse_sgr_event("\x1b[<2;1;1M")
    assert event.button == 2

    # Shift (4) + ctrl (16) with the middle button
    event = mouse.parse_sgr_event("\x1b[<21;300;200M")
    assert event == SGRMouseEvent("press", 1, 300, 200, 20)


def test_parse_sgr_event_invalid():
    assert mouse.parse_sgr_event("") is None
    assert mouse.parse_sgr_event("\x1b[<0;10M") is None
    assert mouse.parse_sgr_event("\x1b[<a;b;cM") is None
    assert mouse.parse_sgr_event("\x1b[M !!") is None
    assert mouse.parse_sgr_event("[<0;10;20M") is None
