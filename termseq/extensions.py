"""
Sequences specific to iTerm2, Konsole, VTE and xterm, and detection of
which of these we're running in.
"""

import os
import logging

from .codes import osc
from .records import TERMINAL_EXTENSIONS


logger = logging.getLogger("termseq")

ITERM2 = "iTerm2"
KONSOLE = "Konsole"
VTE = "VTE"
XTERM = "xterm"


def detect_terminal_extension(environ=None):
    """Detect the terminal from the environment.

    Returns one of ``ITERM2``, ``KONSOLE``, ``VTE``, ``XTERM``, or None.
    The first match wins, in that order.
    """
    environ = os.environ if environ is None else environ
    term = environ.get("TERM_PROGRAM") or ""

    if term == "iTerm.app":
        result = ITERM2
    elif environ.get("KONSOLE_VERSION"):
        result = KONSOLE
    elif environ.get("VTE_VERSION"):
        result = VTE
    elif "xterm" in term:
        result = XTERM
    else:
        result = None

    logger.debug(f"detected terminal extension: {result}")
    return result


# %% iTerm2 (OSC 1337)


def iterm2_display_image(path, name=None):
    name_param = f"name={name};" if name else ""
    return osc(1337, f"File={name_param}{path}")


def iterm2_set_background_color(color):
    return osc(1337, f"BackgroundColor={color}")


def iterm2_set_badge(format):
    return osc(1337, f"SetBadgeFormat={format}")


def iterm2_set_cursor_color(color):
    return osc(1337, f"CursorColor={color}")


def iterm2_set_profile(profile):
    return osc(1337, f"SetProfile={profile}")


def iterm2_set_tab_title(title):
    return osc(1337, f"SetTabTitle={title}")


def iterm2_set_window_title(title):
    return osc(1337, f"SetWindowTitle={title}")


# %% Konsole


def konsole_set_title(title):
    return osc(30, title)


def konsole_set_icon_name(name):
    return osc(31, name)


def konsole_set_profile(profile):
    return osc(50, f"Profile={profile}")


# %% VTE


def vte_set_title(title):
    return osc(0, title)


def vte_set_icon_name(name):
    return osc(1, name)


def vte_set_hyperlink(uri, text):
    return osc(8, "", uri) + text + osc(8, "", "")


# %% xterm


def xterm_set_title(title):
    return osc(0, title)


def xterm_set_icon_name(name):
    return osc(1, name)


def xterm_set_foreground_color(color):
    return osc(10, color)


def xterm_set_background_color(color):
    return osc(11, color)


def xterm_set_font(font):
    return osc(50, font)


# %% Dispatch

_SET_TITLE = {
    ITERM2: iterm2_set_window_title,
    KONSOLE: konsole_set_title,
    VTE: vte_set_title,
    XTERM: xterm_set_title,
}

_SET_ICON_NAME = {
    ITERM2: lambda name: "",  # iTerm2 has no icon name
    KONSOLE: konsole_set_icon_name,
    VTE: vte_set_icon_name,
    XTERM: xterm_set_icon_name,
}


def set_title(extension, title):
    """Get the title sequence for the given terminal extension."""
    if extension not in TERMINAL_EXTENSIONS:
        raise ValueError(f"Invalid terminal extension: {extension!r}")
    return _SET_TITLE[extension](title)


def set_icon_name(extension, name):
    """Get the icon name sequence for the given terminal extension."""
    if extension not in TERMINAL_EXTENSIONS:
        raise ValueError(f"Invalid terminal extension: {extension!r}")
    return _SET_ICON_NAME[extension](name)
