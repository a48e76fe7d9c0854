"""
Writing to stdout and querying the terminal size.
"""

import sys
import shutil

from .records import TerminalSize


DEFAULT_SIZE = (80, 24)


def write(text, file=None):
    """Write the text to the given file (default stdout), and flush.

    Errors, like a ``BrokenPipeError``, are not caught.
    """
    file = sys.stdout if file is None else file
    file.write(text)
    file.flush()


def writeln(text, file=None):
    write(text + "\n", file)


def get_size():
    """Get the (estimate) terminal size as a ``TerminalSize``.

    Falls back to 80x24 if the size cannot be determined.
    """
    size = shutil.get_terminal_size(DEFAULT_SIZE)
    # Some hosts (e.g. a pty without a window) report zero
    if size.columns <= 0 or size.lines <= 0:
        return TerminalSize(*DEFAULT_SIZE)
    return TerminalSize(size.columns, size.lines)
