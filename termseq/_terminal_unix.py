import tty  # Unix
import termios  # Unix

from .terminal import Terminal


def patch_lflag(attrs: int) -> int:
    return attrs & ~(termios.ECHO | termios.ICANON | termios.IEXTEN | termios.ISIG)


def patch_iflag(attrs: int) -> int:
    return attrs & ~(
        # Disable XON/XOFF flow control on output and input.
        # (Don't capture Ctrl-S and Ctrl-Q.)
        termios.IXON
        | termios.IXOFF
        |
        # Don't translate carriage return into newline on input.
        termios.ICRNL
        | termios.INLCR
        | termios.IGNCR
    )


class UnixTerminal(Terminal):

    # A redirected stdin gives termios.error, a StringIO gives
    # io.UnsupportedOperation (an OSError).
    _mode_errors = (termios.error, OSError, ValueError)

    def __init__(self, *args, **kwargs):
        self._ori_term_attr = None
        super().__init__(*args, **kwargs)

    def _store_terminal_mode(self):
        self._ori_term_attr = termios.tcgetattr(self.fd_in)

    def _set_terminal_mode(self):
        newattr = termios.tcgetattr(self.fd_in)
        newattr[tty.LFLAG] = patch_lflag(newattr[tty.LFLAG])
        newattr[tty.IFLAG] = patch_iflag(newattr[tty.IFLAG])

        # VMIN defines the number of characters read at a time in
        # non-canonical mode. It seems to default to 1 on Linux, but on
        # Solaris and derived operating systems it defaults to 4. (This is
        # because the VMIN slot is the same as the VEOF slot, which
        # defaults to ASCII EOT = Ctrl-D = 4.)
        newattr[tty.CC][termios.VMIN] = 1

        termios.tcsetattr(self.fd_in, termios.TCSANOW, newattr)

    def _reset_terminal_mode(self):
        if self._ori_term_attr is not None:
            try:
                termios.tcsetattr(self.fd_in, termios.TCSANOW, self._ori_term_attr)
            finally:
                self._ori_term_attr = None
