"""
termseq - build and parse ANSI / VT100 / xterm escape sequences.

Each function in the submodules returns the string for one effect (e.g.
``cursor.move_to(3, 4)``), or parses a reply that the terminal sends
back (e.g. ``mouse.parse_sgr_event()``). The ``Terminal`` class writes these
sequences to stdout, and reads keys in raw mode.
"""

import os

from . import (  # noqa
    charsets,
    codes,
    colors,
    control,
    cursor,
    extensions,
    keys,
    mouse,
    printer,
    screen,
    vt100,
)
from .records import (  # noqa
    MouseEvent,
    SGRMouseEvent,
    CursorPosition,
    DeviceAttributes,
    TerminalSize,
)
from .keys import decode_key, KeyDecoder  # noqa
from .extensions import detect_terminal_extension  # noqa
from .io import write, writeln, get_size  # noqa
from .terminal import Terminal  # noqa
from .utils import enable_udp_logging  # noqa
from ._main import main  # noqa
from ._cli import cli  # noqa

__version__ = "0.1.0"
version_info = tuple(map(int, __version__.split(".")))


if os.environ.get("TERMSEQ_LOG_UDP", "0") not in ("", "0"):
    enable_udp_logging()
