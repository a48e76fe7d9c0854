"""
Mouse tracking modes and parsing of mouse reports.
"""

import re

from .codes import ESC, decset, decrst
from .records import MouseEvent, SGRMouseEvent


TRACKING = 1000  # SET_VT200_MOUSE, report press and release
DRAG_TRACKING = 1002  # SET_BTN_EVENT_MOUSE, also motion with a button down
MOVE_TRACKING = 1003  # SET_ANY_EVENT_MOUSE, all motion
SGR_MODE = 1006  # SET_SGR_EXT_MODE_MOUSE


# %% Modes


def enable_tracking():
    return decset(TRACKING)


def disable_tracking():
    return decrst(TRACKING)


def enable_drag_tracking():
    return decset(DRAG_TRACKING)


def disable_drag_tracking():
    return decrst(DRAG_TRACKING)


def enable_move_tracking():
    return decset(MOVE_TRACKING)


def disable_move_tracking():
    return decrst(MOVE_TRACKING)


def enable_sgr_mode():
    return decset(SGR_MODE)


def disable_sgr_mode():
    return decrst(SGR_MODE)


def enable_all_tracking():
    return enable_tracking() + enable_drag_tracking() + enable_move_tracking()


def disable_all_tracking():
    return disable_tracking() + disable_drag_tracking() + disable_move_tracking()


def enable_sgr_tracking():
    return enable_sgr_mode() + enable_tracking()


def enable_sgr_drag_tracking():
    return enable_sgr_mode() + enable_drag_tracking()


def enable_sgr_move_tracking():
    return enable_sgr_mode() + enable_move_tracking()


# %% Reports

X10_PREFIX = ESC + "[M"
SGR_PREFIX = ESC + "[<"

SGR_RE = re.compile(r"\[<(\d+);(\d+);(\d+)([mM])")


def parse_mouse_event(raw):
    """Parse a report in the default encoding: ``CSI M Cb Cx Cy``.

    Each of button, x and y is sent as a character with code value + 32.
    Returns a ``MouseEvent`` or None.
    """
    if not raw.startswith(X10_PREFIX):
        return None
    data = raw[len(X10_PREFIX) :]
    if len(data) < 3:
        return None
    button = ord(data[0]) - 32
    x = ord(data[1]) - 32
    y = ord(data[2]) - 32
    kind = "drag" if button >= 64 else "click"
    return MouseEvent(kind, button & 0x03, x, y)


def parse_sgr_event(raw):
    """Parse a report in the SGR encoding: ``CSI < b ; x ; y M`` (or ``m``).

    An uppercase M is a press, a lowercase m a release.
    Returns an ``SGRMouseEvent`` or None.
    """
    if not raw.startswith(SGR_PREFIX):
        return None
    m = SGR_RE.search(raw)
    if not m:
        return None
    button, x, y = int(m.group(1)), int(m.group(2)), int(m.group(3))
    kind = "press" if m.group(4) == "M" else "release"
    return SGRMouseEvent(kind, button & 0x03, x, y, button & 0x1C)
