"""
Cursor movement, visibility and shape.

Coordinates are 1-based, as the terminal expects them.
"""

from .codes import ESC, CSI, decset, decrst
from .records import CURSOR_SHAPES as SHAPE_NAMES


# DECSCUSR parameter per shape
CURSOR_SHAPES = {
    "block": 0,
    "blinking-block": 1,
    "underline": 3,
    "blinking-underline": 4,
    "bar": 5,
    "blinking-bar": 6,
}


def home():
    return f"{CSI}H"


def move_up(n=1):
    return f"{CSI}{n}A"


def move_down(n=1):
    return f"{CSI}{n}B"


def move_right(n=1):
    return f"{CSI}{n}C"


def move_left(n=1):
    return f"{CSI}{n}D"


def move_to(x, y):
    """Move to column x and row y."""
    return f"{CSI}{y};{x}H"


def move_to_column(n):
    return f"{CSI}{n}G"


def move_to_next_line(n=1):
    """Move to the start of the line n lines down."""
    return f"{CSI}{n}E"


def move_to_prev_line(n=1):
    """Move to the start of the line n lines up."""
    return f"{CSI}{n}F"


def request_position():
    """Ask the terminal for a cursor position report (see ``screen.parse_cursor_position``)."""
    return f"{CSI}6n"


def save():
    """Save position and attributes (DECSC)."""
    return f"{ESC}7"


def restore():
    """Restore what was saved with ``save()`` (DECRC)."""
    return f"{ESC}8"


def save_sco():
    return f"{CSI}s"


def restore_sco():
    return f"{CSI}u"


def scroll_up():
    """Reverse index: move up one line, scrolling down at the top margin."""
    return f"{ESC}M"


def set_blinking(blinking):
    return decset(12) if blinking else decrst(12)


def set_visible(visible):
    return decset(25) if visible else decrst(25)


def set_shape(shape):
    """Set the cursor shape, one of the names in ``CURSOR_SHAPES``."""
    if shape not in SHAPE_NAMES:
        raise ValueError(f"Invalid cursor shape: {shape!r}")
    return f"{CSI}{CURSOR_SHAPES[shape]} q"
