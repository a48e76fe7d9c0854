from .terminal import Terminal


QUIT_KEYS = ("q", "\x03")


def main(terminal=None):
    """Show the name of each key that is pressed, until q or Ctrl-C."""

    terminal = Terminal() if terminal is None else terminal
    terminal.writeln("Press keys to see their names. Press q or Ctrl-C to quit.")

    # The terminal is restored also if reading or writing fails
    with terminal:
        while True:
            key = terminal.wait_for_any_key()
            if not key or key in QUIT_KEYS:
                break
            terminal.writeln(repr(key))
