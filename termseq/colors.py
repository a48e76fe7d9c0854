"""
Colors and text styles (SGR).

Every helper that takes text wraps it in the sequence that turns the color
or style on, and appends the full reset ``CSI 0 m``.
"""

from .codes import RESET, osc, sgr


# %% Codes

BLACK = 30
RED = 31
GREEN = 32
YELLOW = 33
BLUE = 34
MAGENTA = 35
CYAN = 36
WHITE = 37
DEFAULT = 39

BG_BLACK = 40
BG_RED = 41
BG_GREEN = 42
BG_YELLOW = 43
BG_BLUE = 44
BG_MAGENTA = 45
BG_CYAN = 46
BG_WHITE = 47
BG_DEFAULT = 49

BRIGHT_BLACK = 90
BRIGHT_RED = 91
BRIGHT_GREEN = 92
BRIGHT_YELLOW = 93
BRIGHT_BLUE = 94
BRIGHT_MAGENTA = 95
BRIGHT_CYAN = 96
BRIGHT_WHITE = 97

BG_BRIGHT_BLACK = 100
BG_BRIGHT_RED = 101
BG_BRIGHT_GREEN = 102
BG_BRIGHT_YELLOW = 103
BG_BRIGHT_BLUE = 104
BG_BRIGHT_MAGENTA = 105
BG_BRIGHT_CYAN = 106
BG_BRIGHT_WHITE = 107

BOLD = 1
DIM = 2
ITALIC = 3
UNDERLINE = 4
BLINK = 5
INVERSE = 7
HIDDEN = 8
STRIKETHROUGH = 9

# Less common attributes, not supported by every terminal
DOUBLE_UNDERLINE = 21
PROPORTIONAL_SPACING = 26
FRAMED = 51
ENCIRCLED = 52
OVERLINE = 53


# %% Generic


def style(text, *styles):
    """Apply one or more SGR codes to the text."""
    return sgr(*styles) + text + RESET


def fg(text, color):
    """Apply a foreground color code to the text."""
    return style(text, color)


def bg(text, color):
    """Apply a background color code to the text."""
    return style(text, color)


def fg_bg(text, fg_color, bg_color):
    return style(text, fg_color, bg_color)


def color256(text, color_id):
    """Apply a color from the 256-color palette to the foreground."""
    return style(text, 38, 5, color_id)


def bg256(text, color_id):
    """Apply a color from the 256-color palette to the background."""
    return style(text, 48, 5, color_id)


def rgb(text, r, g, b):
    """Apply a 24-bit color to the foreground."""
    return style(text, 38, 2, r, g, b)


def bg_rgb(text, r, g, b):
    """Apply a 24-bit color to the background."""
    return style(text, 48, 2, r, g, b)


def hyperlink(text, url):
    """Make the text a clickable link (OSC 8)."""
    if not text or not url:
        raise ValueError("Text and URL are required for hyperlinks")
    return osc(8, "", url) + text + osc(8, "", "")


def reset():
    return RESET


def reset_double_underline():
    return sgr(24)


def reset_framed_encircled():
    return sgr(54)


def reset_overline():
    return sgr(55)


# %% Named colors


def black(text):
    return fg(text, BLACK)


def red(text):
    return fg(text, RED)


def green(text):
    return fg(text, GREEN)


def yellow(text):
    return fg(text, YELLOW)


def blue(text):
    return fg(text, BLUE)


def magenta(text):
    return fg(text, MAGENTA)


def cyan(text):
    return fg(text, CYAN)


def white(text):
    return fg(text, WHITE)


def bright_black(text):
    return fg(text, BRIGHT_BLACK)


def bright_red(text):
    return fg(text, BRIGHT_RED)


def bright_green(text):
    return fg(text, BRIGHT_GREEN)


def bright_yellow(text):
    return fg(text, BRIGHT_YELLOW)


def bright_blue(text):
    return fg(text, BRIGHT_BLUE)


def bright_magenta(text):
    return fg(text, BRIGHT_MAGENTA)


def bright_cyan(text):
    return fg(text, BRIGHT_CYAN)


def bright_white(text):
    return fg(text, BRIGHT_WHITE)


# %% Named styles


def bold(text):
    return style(text, BOLD)


def dim(text):
    return style(text, DIM)


def italic(text):
    return style(text, ITALIC)


def underline(text):
    return style(text, UNDERLINE)


def blink(text):
    return style(text, BLINK)


def inverse(text):
    return style(text, INVERSE)


def hidden(text):
    return style(text, HIDDEN)


def strikethrough(text):
    return style(text, STRIKETHROUGH)


def double_underline(text):
    return style(text, DOUBLE_UNDERLINE)


def proportional_spacing(text):
    return style(text, PROPORTIONAL_SPACING)


def framed(text):
    return style(text, FRAMED)


def encircled(text):
    return style(text, ENCIRCLED)


def overline(text):
    return style(text, OVERLINE)
