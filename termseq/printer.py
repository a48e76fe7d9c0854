"""
Media copy (printer port) control.
"""

from .codes import CSI
from .records import PRINTER_MODES


def enable_printer():
    """Start passing output through to the printer (auto print on)."""
    return f"{CSI}?5i"


def disable_printer():
    return f"{CSI}?4i"


def print_line():
    return f"{CSI}1i"


def print_screen():
    return f"{CSI}i"


_PRINTER_MODES = {
    "enable": enable_printer,
    "disable": disable_printer,
    "print-screen": print_screen,
}


def set_printer_mode(mode):
    """Get the sequence for "enable", "disable" or "print-screen"."""
    if mode not in PRINTER_MODES:
        raise ValueError(f"Invalid printer mode: {mode!r}")
    return _PRINTER_MODES[mode]()
