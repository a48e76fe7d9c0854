"""
The introducers and small builders that all sequence modules share.
"""

ESC = "\x1b"
CSI = ESC + "["  # Control Sequence Introducer
OSC = ESC + "]"  # Operating System Command
DCS = ESC + "P"  # Device Control String
ST = ESC + "\\"  # String Terminator

RESET = CSI + "0m"


def sgr(*params):
    """Select Graphic Rendition: ``CSI p1;p2;... m``."""
    return f"{CSI}{';'.join(str(p) for p in params)}m"


def decset(mode):
    """Set a DEC private mode."""
    return f"{CSI}?{mode}h"


def decrst(mode):
    """Reset a DEC private mode."""
    return f"{CSI}?{mode}l"


def sm(mode):
    """Set an ANSI mode."""
    return f"{CSI}{mode}h"


def rm(mode):
    """Reset an ANSI mode."""
    return f"{CSI}{mode}l"


def osc(*parts):
    """An OSC string, terminated with ST (not BEL)."""
    return f"{OSC}{';'.join(str(p) for p in parts)}{ST}"
