"""
The records produced by the decoders, and the names accepted by the encoders.
"""

from typing import NamedTuple


class MouseEvent(NamedTuple):
    """A mouse report in the X10 / normal tracking encoding."""

    type: str  # "click" or "drag"
    button: int
    x: int
    y: int


class SGRMouseEvent(NamedTuple):
    """A mouse report in the SGR (1006) encoding."""

    type: str  # "press" or "release"
    button: int
    x: int
    y: int
    modifiers: int


class CursorPosition(NamedTuple):
    row: int
    col: int


class DeviceAttributes(NamedTuple):
    type: str
    version: str


class TerminalSize(NamedTuple):
    width: int
    height: int


# %% Allowed names

MOUSE_EVENT_TYPES = ("click", "drag", "press", "release")

CURSOR_SHAPES = (
    "block",
    "underline",
    "bar",
    "blinking-block",
    "blinking-underline",
    "blinking-bar",
)

CHARSET_NAMES = ("G0", "G1", "G2", "G3")
CHARSET_TYPES = ("USASCII", "UK", "DECSpecial", "DECSupplemental")
# The 96-character registers G2 and G3 only get these two
CHARSET_TYPES_G2G3 = ("USASCII", "DECSpecial")

DEC_PRIVATE_MODES = (
    "DECCOLM",
    "DECSCLM",
    "DECOM",
    "DECAWM",
    "DECARM",
    "DECIM",
    "DECKAM",
    "DECCKM",
    "DECANM",
)

PRINTER_MODES = ("enable", "disable", "print-screen")

TERMINAL_EXTENSIONS = ("iTerm2", "Konsole", "VTE", "xterm")

VT100_FEATURES = ("double-width", "double-height", "double-width-height", "soft-fonts")
