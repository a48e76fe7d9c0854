"""
Single-byte C0 control characters.
"""

BELL = "\x07"
BACKSPACE = "\x08"
TAB = "\x09"
LINE_FEED = "\x0a"
FORM_FEED = "\x0c"
CARRIAGE_RETURN = "\x0d"


def bell():
    return BELL


def backspace():
    return BACKSPACE


def tab():
    return TAB


def line_feed():
    return LINE_FEED


def form_feed():
    return FORM_FEED


def carriage_return():
    return CARRIAGE_RETURN
