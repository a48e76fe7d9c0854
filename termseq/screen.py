"""
Screen clearing, terminal modes, titles, and parsing of the terminal's
replies to cursor-position and device-attribute requests.
"""

import re

from .codes import ESC, CSI, RESET, decset, decrst, sm, rm, osc
from .records import CursorPosition, DeviceAttributes, DEC_PRIVATE_MODES


# %% Clearing


def clear_screen():
    return f"{CSI}2J"


def clear_to_end():
    """Clear from the cursor to the end of the screen."""
    return f"{CSI}0J"


def clear_to_beginning():
    """Clear from the cursor to the beginning of the screen."""
    return f"{CSI}1J"


def clear_saved_lines():
    """Clear the scrollback buffer."""
    return f"{CSI}3J"


def clear_all():
    return clear_screen() + clear_saved_lines()


def clear_line():
    return f"{CSI}2K"


def clear_line_to_end():
    return f"{CSI}0K"


def clear_line_to_beginning():
    return f"{CSI}1K"


# %% Tab stops


def set_tab_stop():
    """Set a tab stop at the cursor column (HTS)."""
    return f"{ESC}H"


def clear_tab_stop():
    return f"{CSI}g"


def clear_all_tab_stops():
    return f"{CSI}3g"


# %% DEC private modes

# Modes addressed by their DEC mnemonic. DECKAM and DECIM are ANSI modes,
# so they are set without the "?".
DEC_MODES = {
    "DECCKM": 1,
    "DECANM": 2,
    "DECCOLM": 3,
    "DECSCLM": 4,
    "DECOM": 6,
    "DECAWM": 7,
    "DECARM": 8,
}
ANSI_MODES = {
    "DECKAM": 2,
    "DECIM": 4,
}


def enable_dec_mode(name):
    """Set a mode by its mnemonic, e.g. "DECAWM"."""
    if name not in DEC_PRIVATE_MODES:
        raise ValueError(f"Invalid DEC mode: {name!r}")
    if name in DEC_MODES:
        return decset(DEC_MODES[name])
    return sm(ANSI_MODES[name])


def disable_dec_mode(name):
    """Reset a mode by its mnemonic, e.g. "DECAWM"."""
    if name not in DEC_PRIVATE_MODES:
        raise ValueError(f"Invalid DEC mode: {name!r}")
    if name in DEC_MODES:
        return decrst(DEC_MODES[name])
    return rm(ANSI_MODES[name])


def enable_application_cursor_keys():
    return decset(1)


def disable_application_cursor_keys():
    return decrst(1)


def enable_ansi_vt52_mode():
    return decset(2)


def disable_ansi_vt52_mode():
    return decrst(2)


def enable_132_column_mode():
    return decset(3)


def disable_132_column_mode():
    return decrst(3)


def enable_smooth_scrolling():
    return decset(4)


def disable_smooth_scrolling():
    return decrst(4)


def enable_origin_mode():
    return decset(6)


def disable_origin_mode():
    return decrst(6)


def enable_auto_repeat_mode():
    return decset(8)


def disable_auto_repeat_mode():
    return decrst(8)


def enable_insert_mode():
    return sm(4)


def disable_insert_mode():
    return rm(4)


def save_screen():
    return decset(47)


def restore_screen():
    return decrst(47)


def enable_mouse_highlight():
    return decset(1001)


def disable_mouse_highlight():
    return decrst(1001)


def enable_focus_events():
    """Have the terminal report ``CSI I`` / ``CSI O`` on focus in/out."""
    return decset(1004)


def disable_focus_events():
    return decrst(1004)


def enable_alt_buffer():
    return decset(1049)


def disable_alt_buffer():
    return decrst(1049)


def enable_bracketed_paste():
    return decset(2004)


def disable_bracketed_paste():
    return decrst(2004)


def show_cursor():
    return decset(25)


def hide_cursor():
    return decrst(25)


def reset():
    """Reset all character attributes."""
    return RESET


def request_device_attributes():
    """Ask for the primary device attributes (see ``parse_device_attributes``)."""
    return f"{CSI}c"


# %% Screen modes (``CSI = n h``)

VIDEO_MODES = {
    "40x25-mono": 0,
    "40x25-color": 1,
    "80x25-mono": 2,
    "80x25-color": 3,
    "320x200-4color": 4,
    "320x200-mono": 5,
    "640x200-mono": 6,
    "320x200-color": 13,
    "640x200-16color": 14,
    "640x350-mono": 15,
    "640x350-16color": 16,
    "640x480-mono": 17,
    "640x480-16color": 18,
    "320x200-256color": 19,
}

LINE_WRAPPING_MODE = 7


def set_mode(mode):
    return f"{CSI}={mode}h"


def reset_mode(mode):
    return f"{CSI}={mode}l"


def set_video_mode(name):
    """Set a screen mode by name, e.g. "80x25-color"."""
    if name not in VIDEO_MODES:
        raise ValueError(f"Invalid video mode: {name!r}")
    return set_mode(VIDEO_MODES[name])


def reset_video_mode(name):
    if name not in VIDEO_MODES:
        raise ValueError(f"Invalid video mode: {name!r}")
    return reset_mode(VIDEO_MODES[name])


def enable_line_wrapping():
    return set_mode(LINE_WRAPPING_MODE)


def disable_line_wrapping():
    return reset_mode(LINE_WRAPPING_MODE)


def set_mode_40x25_mono():
    return set_mode(0)


def set_mode_40x25_color():
    return set_mode(1)


def set_mode_80x25_mono():
    return set_mode(2)


def set_mode_80x25_color():
    return set_mode(3)


def set_mode_320x200_4color():
    return set_mode(4)


def set_mode_320x200_mono():
    return set_mode(5)


def set_mode_640x200_mono():
    return set_mode(6)


def set_mode_320x200_color():
    return set_mode(13)


def set_mode_640x200_16color():
    return set_mode(14)


def set_mode_640x350_mono():
    return set_mode(15)


def set_mode_640x350_16color():
    return set_mode(16)


def set_mode_640x480_mono():
    return set_mode(17)


def set_mode_640x480_16color():
    return set_mode(18)


def set_mode_320x200_256color():
    return set_mode(19)


def reset_mode_40x25_mono():
    return reset_mode(0)


def reset_mode_40x25_color():
    return reset_mode(1)


def reset_mode_80x25_mono():
    return reset_mode(2)


def reset_mode_80x25_color():
    return reset_mode(3)


def reset_mode_320x200_4color():
    return reset_mode(4)


def reset_mode_320x200_mono():
    return reset_mode(5)


def reset_mode_640x200_mono():
    return reset_mode(6)


def reset_mode_320x200_color():
    return reset_mode(13)


def reset_mode_640x200_16color():
    return reset_mode(14)


def reset_mode_640x350_mono():
    return reset_mode(15)


def reset_mode_640x350_16color():
    return reset_mode(16)


def reset_mode_640x480_mono():
    return reset_mode(17)


def reset_mode_640x480_16color():
    return reset_mode(18)


def reset_mode_320x200_256color():
    return reset_mode(19)


# %% Titles


def set_window_title(title):
    return osc(0, title)


def reset_window_title():
    return osc(0, "")


def set_icon_name(name):
    return osc(1, name)


def reset_icon_name():
    return osc(1, "")


# %% Replies

CURSOR_POSITION_RE = re.compile(r"\x1b\[(\d+);(\d+)R")

# The primary DA reply is usually ``CSI ? 62 ; 1 ; 6 c``, but some terminals
# omit the "?". We need at least the type and the version.
DEVICE_ATTRIBUTES_RE = re.compile(r"\x1b\[\??(\d+);(\d+)(?:;\d+)*c")


def parse_cursor_position(raw):
    """Parse a cursor position report (``CSI row ; col R``).

    Returns a ``CursorPosition`` or None if the input does not contain one.
    """
    m = CURSOR_POSITION_RE.search(raw)
    if not m:
        return None
    return CursorPosition(int(m.group(1)), int(m.group(2)))


def parse_device_attributes(raw):
    """Parse a device attributes reply (``CSI ? type ; version ; ... c``).

    Returns a ``DeviceAttributes`` or None if the input does not contain one.
    """
    m = DEVICE_ATTRIBUTES_RE.search(raw)
    if not m:
        return None
    return DeviceAttributes(m.group(1), m.group(2))
