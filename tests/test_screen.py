import pytest

from termseq import screen
from termseq.records import CursorPosition, DeviceAttributes, DEC_PRIVATE_MODES


def test_clear():
    assert screen.clear_screen() == "\x1b[2J"
    assert screen.clear_to_end() == "\x1b[0J"
    assert screen.clear_to_beginning() == "\x1b[1J"
    assert screen.clear_saved_lines() == "\x1b[3J"
    assert screen.clear_all() == "\x1b[2J\x1b[3J"
    assert screen.clear_line() == "\x1b[2K"
    assert screen.clear_line_to_end() == "\x1b[0K"
    assert screen.clear_line_to_beginning() == "\x1b[1K"


def test_tab_stops():
    assert screen.set_tab_stop() == "\x1bH"
    assert screen.clear_tab_stop() == "\x1b[g"
    assert screen.clear_all_tab_stops() == "\x1b[3g"


def test_enable_disable_pairs():
    names = [
        "application_cursor_keys",
        "ansi_vt52_mode",
        "132_column_mode",
        "smooth_scrolling",
        "origin_mode",
        "auto_repeat_mode",
        "insert_mode",
        "mouse_highlight",
        "focus_events",
        "alt_buffer",
        "bracketed_paste",
        "line_wrapping",
    ]
    for name in names:
        on = getattr(screen, "enable_" + name)()
        off = getattr(screen, "disable_" + name)()
        assert on.endswith("h"), name
        assert off.endswith("l"), name
        assert on[:-1] == off[:-1], name


def test_modes():
    assert screen.enable_bracketed_paste() == "\x1b[?2004h"
    assert screen.disable_bracketed_paste() == "\x1b[?2004l"
    assert screen.enable_alt_buffer() == "\x1b[?1049h"
    assert screen.enable_focus_events() == "\x1b[?1004h"
    assert screen.enable_mouse_highlight() == "\x1b[?1001h"
    assert screen.enable_application_cursor_keys() == "\x1b[?1h"
    assert screen.disable_application_cursor_keys() == "\x1b[?1l"
    assert screen.enable_132_column_mode() == "\x1b[?3h"
    assert screen.enable_insert_mode() == "\x1b[4h"
    assert screen.disable_insert_mode() == "\x1b[4l"
    assert screen.save_screen() == "\x1b[?47h"
    assert screen.restore_screen() == "\x1b[?47l"
    assert screen.show_cursor() == "\x1b[?25h"
    assert screen.hide_cursor() == "\x1b[?25l"


def test_dec_modes_by_name():
    assert screen.enable_dec_mode("DECAWM") == "\x1b[?7h"
    assert screen.disable_dec_mode("DECAWM") == "\x1b[?7l"
    assert screen.enable_dec_mode("DECCKM") == "\x1b[?1h"
    assert screen.enable_dec_mode("DECIM") == "\x1b[4h"
    assert screen.disable_dec_mode("DECKAM") == "\x1b[2l"

    for name in DEC_PRIVATE_MODES:
        on = screen.enable_dec_mode(name)
        off = screen.disable_dec_mode(name)
        assert on[:-1] == off[:-1]

    with pytest.raises(ValueError):
        screen.enable_dec_mode("DECXYZ")
    with pytest.raises(ValueError):
        screen.disable_dec_mode("")


def test_video_modes():
    assert screen.set_mode(3) == "\x1b[=3h"
    assert screen.reset_mode(3) == "\x1b[=3l"
    assert screen.set_video_mode("80x25-color") == "\x1b[=3h"
    assert screen.reset_video_mode("320x200-256color") == "\x1b[=19l"
    assert screen.set_mode_640x480_16color() == "\x1b[=18h"
    assert screen.reset_mode_40x25_mono() == "\x1b[=0l"
    assert screen.enable_line_wrapping() == "\x1b[=7h"
    assert screen.disable_line_wrapping() == "\x1b[=7l"

    for name, mode in screen.VIDEO_MODES.items():
        func_name = "set_mode_" + name.replace("-", "_")
        assert getattr(screen, func_name)() == screen.set_video_mode(name)
        func_name = "reset_mode_" + name.replace("-", "_")
        assert getattr(screen, func_name)() == screen.reset_video_mode(name)

    with pytest.raises(ValueError):
        screen.set_video_mode("1920x1080")


def test_titles():
    assert screen.set_window_title("hello") == "\x1b]0;hello\x1b\\"
    assert screen.reset_window_title() == "\x1b]0;\x1b\\"
    assert screen.set_icon_name("ico") == "\x1b]1;ico\x1b\\"
    assert screen.reset_icon_name() == "\x1b]1;\x1b\\"


def test_reset_and_requests():
    assert screen.reset() == "\x1b[0m"
    assert screen.request_device_attributes() == "\x1b[c"


def test_parse_cursor_position():
    assert screen.parse_cursor_position("\x1b[12;34R") == CursorPosition(12, 34)
    pos = screen.parse_cursor_position("junk\x1b[1;2R")
    assert pos.row == 1 and pos.col == 2

    assert screen.parse_cursor_position("\x1b[12R") is None
    assert screen.parse_cursor_position("") is None
    assert screen.parse_cursor_position("\x1b[a;bR") is None


def test_parse_device_attributes():
    da = screen.parse_device_attributes("\x1b[?62;1;6c")
    assert da == DeviceAttributes("62", "1")
    da = screen.parse_device_attributes("\x1b[?1;2c")
    assert da == DeviceAttributes("1", "2")
    da = screen.parse_device_attributes("\x1b[?65;1;2;6;9;15;22c")
    assert da.type == "65" and da.version == "1"

    assert screen.parse_device_attributes("\x1b[?62c") is None
    assert screen.parse_device_attributes("hello") is None
