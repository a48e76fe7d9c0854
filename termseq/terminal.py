"""
The Terminal object: raw mode, reading keys, and writing sequences.

All sequence building happens in the other modules of this package. The
methods here encode the same way and then write the result to the output
stream. Write and read errors propagate to the caller. Failing to switch
raw mode on or off does not, because many hosts have no tty at all (e.g.
when input is redirected).

There are a few parts where the code for Unix and Windows needs to differ.
This is why we have a base class, with implementations for Unix and Windows.
"""

import os
import sys
import logging

from . import io
from . import (
    charsets,
    colors,
    control,
    cursor,
    extensions,
    mouse,
    printer,
    screen,
    vt100,
)
from .keys import decode_key


logger = logging.getLogger("termseq")

# Enough for the longest key sequence, but not for a paste
READ_SIZE = 20


class Terminal:
    """Base class for a simple terminal.

    Instantiating this class produces a class corresponding with the
    current platform. Creating the object does not change the terminal.
    Use it as a context manager to be in raw mode inside the block:

        with Terminal() as term:
            key = term.read_key()

    """

    def __new__(cls, *args, **kwargs):
        # Select terminal class
        if cls is Terminal:
            if sys.platform.startswith("win"):
                from ._terminal_windows import WindowsTerminal as cls
            else:
                from ._terminal_unix import UnixTerminal as cls
        return super().__new__(cls)

    def __init__(self, stdin=None, stdout=None):
        self._stdin = stdin
        self._stdout = stdout
        self._entered = False
        self._raw = False

    @property
    def stdin(self):
        return sys.__stdin__ if self._stdin is None else self._stdin

    @property
    def stdout(self):
        # Resolved on each write, so that redirecting sys.stdout works
        return sys.stdout if self._stdout is None else self._stdout

    @property
    def fd_in(self):
        # sys.__stdin__ is None e.g. under pythonw
        if self.stdin is None:
            raise ValueError("There is no stdin")
        return self.stdin.fileno()

    @property
    def fd_out(self):
        stdout = sys.__stdout__ if self._stdout is None else self._stdout
        if stdout is None:
            raise ValueError("There is no stdout")
        return stdout.fileno()

    # %% Raw mode

    def __enter__(self):
        if self._entered:
            raise RuntimeError("Can only enter the context state once.")
        self._entered = True
        self.enable_raw_mode()
        return self

    def __exit__(self, *args):
        self._entered = False
        self.disable_raw_mode()

    @property
    def is_raw(self):
        return self._raw

    def enable_raw_mode(self):
        """Put stdin in raw mode. Does nothing (but log) if that fails."""
        if self._raw:
            return
        try:
            self._store_terminal_mode()
        except self._mode_errors as err:
            logger.warning(f"Could not enable raw mode: {err}")
            return
        try:
            self._set_terminal_mode()
        except self._mode_errors as err:
            logger.warning(f"Could not enable raw mode: {err}")
            # Part of the mode may have been set already
            try:
                self._reset_terminal_mode()
            except self._mode_errors as err:
                logger.warning(f"Could not restore terminal mode: {err}")
        else:
            self._raw = True
            logger.info("raw mode enabled")

    def disable_raw_mode(self):
        """Restore the mode from before ``enable_raw_mode()``."""
        if not self._raw:
            return
        try:
            self._reset_terminal_mode()
        except self._mode_errors as err:
            logger.warning(f"Could not disable raw mode: {err}")
        else:
            logger.info("raw mode disabled")
        finally:
            self._raw = False

    # For subclasses to implement

    _mode_errors = (OSError, ValueError)

    def _store_terminal_mode(self):
        raise NotImplementedError()

    def _set_terminal_mode(self):
        raise NotImplementedError()

    def _reset_terminal_mode(self):
        raise NotImplementedError()

    # %% Input

    def read_char(self):
        """Read a single byte, returned as a char. Returns "" at EOF."""
        bb = os.read(self.fd_in, 1)
        if not bb:
            return ""
        return chr(bb[0])

    def read_key(self):
        """Read a key press, and decode escape sequences into key names.

        Assumes that a whole sequence arrives in one read, which is what
        terminals do for a single key press. Returns "" at EOF.
        """
        bb = os.read(self.fd_in, READ_SIZE)
        if not bb:
            return ""
        return decode_key(bb.decode("utf-8", errors="replace"))

    def wait_for_key(self, expected_key):
        """Read keys until the given key is pressed."""
        while True:
            key = self.read_key()
            if key == expected_key:
                return
            elif not key:
                raise EOFError(f"Input closed while waiting for {expected_key!r}")

    def wait_for_any_key(self):
        """Wait for a key press and return it."""
        try:
            return self.read_key()
        except OSError as err:
            logger.warning(f"Reading a key failed, reading a char instead: {err}")
            return self.read_char()

    # %% Output

    def write(self, text):
        io.write(text, self.stdout)

    def writeln(self, text):
        io.writeln(text, self.stdout)

    def flush(self):
        self.stdout.flush()

    def get_size(self):
        """Get the (estimate) terminal size."""
        return io.get_size()

    # %% Control characters

    def ring_bell(self):
        self.write(control.bell())

    def write_backspace(self):
        self.write(control.backspace())

    def write_tab(self):
        self.write(control.tab())

    def write_line_feed(self):
        self.write(control.line_feed())

    def write_form_feed(self):
        self.write(control.form_feed())

    def write_carriage_return(self):
        self.write(control.carriage_return())

    # %% Cursor

    def home(self):
        self.write(cursor.home())

    def move_up(self, n=1):
        self.write(cursor.move_up(n))

    def move_down(self, n=1):
        self.write(cursor.move_down(n))

    def move_right(self, n=1):
        self.write(cursor.move_right(n))

    def move_left(self, n=1):
        self.write(cursor.move_left(n))

    def move_to(self, x, y):
        self.write(cursor.move_to(x, y))

    def move_to_column(self, n):
        self.write(cursor.move_to_column(n))

    def move_to_next_line(self, n=1):
        self.write(cursor.move_to_next_line(n))

    def move_to_prev_line(self, n=1):
        self.write(cursor.move_to_prev_line(n))

    def request_position(self):
        """Ask for the cursor position. The reply arrives on stdin."""
        self.write(cursor.request_position())

    def save_cursor(self):
        self.write(cursor.save())

    def restore_cursor(self):
        self.write(cursor.restore())

    def save_cursor_sco(self):
        self.write(cursor.save_sco())

    def restore_cursor_sco(self):
        self.write(cursor.restore_sco())

    def scroll_up(self):
        self.write(cursor.scroll_up())

    def set_cursor_blinking(self, blinking):
        self.write(cursor.set_blinking(blinking))

    def set_cursor_visible(self, visible):
        self.write(cursor.set_visible(visible))

    def set_cursor_shape(self, shape):
        self.write(cursor.set_shape(shape))

    def show_cursor(self):
        self.write(screen.show_cursor())

    def hide_cursor(self):
        self.write(screen.hide_cursor())

    # %% Screen

    def clear_screen(self):
        self.write(screen.clear_screen())

    def clear_to_end(self):
        self.write(screen.clear_to_end())

    def clear_to_beginning(self):
        self.write(screen.clear_to_beginning())

    def clear_saved_lines(self):
        self.write(screen.clear_saved_lines())

    def clear_all(self):
        self.write(screen.clear_all())

    def clear_line(self):
        self.write(screen.clear_line())

    def clear_line_to_end(self):
        self.write(screen.clear_line_to_end())

    def clear_line_to_beginning(self):
        self.write(screen.clear_line_to_beginning())

    def set_tab_stop(self):
        self.write(screen.set_tab_stop())

    def clear_tab_stop(self):
        self.write(screen.clear_tab_stop())

    def clear_all_tab_stops(self):
        self.write(screen.clear_all_tab_stops())

    def reset(self):
        """Reset all character attributes."""
        self.write(screen.reset())

    def request_device_attributes(self):
        """Ask for the device attributes. The reply arrives on stdin."""
        self.write(screen.request_device_attributes())

    def save_screen(self):
        self.write(screen.save_screen())

    def restore_screen(self):
        self.write(screen.restore_screen())

    def set_window_title(self, title):
        self.write(screen.set_window_title(title))

    def reset_window_title(self):
        self.write(screen.reset_window_title())

    def reset_icon_name(self):
        self.write(screen.reset_icon_name())

    # %% Modes

    def enable_dec_mode(self, name):
        self.write(screen.enable_dec_mode(name))

    def disable_dec_mode(self, name):
        self.write(screen.disable_dec_mode(name))

    def set_mode(self, mode):
        self.write(screen.set_mode(mode))

    def reset_mode(self, mode):
        self.write(screen.reset_mode(mode))

    def set_video_mode(self, name):
        self.write(screen.set_video_mode(name))

    def reset_video_mode(self, name):
        self.write(screen.reset_video_mode(name))

    def enable_line_wrapping(self):
        self.write(screen.enable_line_wrapping())

    def disable_line_wrapping(self):
        self.write(screen.disable_line_wrapping())

    def enable_application_cursor_keys(self):
        self.write(screen.enable_application_cursor_keys())

    def disable_application_cursor_keys(self):
        self.write(screen.disable_application_cursor_keys())

    def enable_ansi_vt52_mode(self):
        self.write(screen.enable_ansi_vt52_mode())

    def disable_ansi_vt52_mode(self):
        self.write(screen.disable_ansi_vt52_mode())

    def enable_132_column_mode(self):
        self.write(screen.enable_132_column_mode())

    def disable_132_column_mode(self):
        self.write(screen.disable_132_column_mode())

    def enable_smooth_scrolling(self):
        self.write(screen.enable_smooth_scrolling())

    def disable_smooth_scrolling(self):
        self.write(screen.disable_smooth_scrolling())

    def enable_origin_mode(self):
        self.write(screen.enable_origin_mode())

    def disable_origin_mode(self):
        self.write(screen.disable_origin_mode())

    def enable_auto_repeat_mode(self):
        self.write(screen.enable_auto_repeat_mode())

    def disable_auto_repeat_mode(self):
        self.write(screen.disable_auto_repeat_mode())

    def enable_insert_mode(self):
        self.write(screen.enable_insert_mode())

    def disable_insert_mode(self):
        self.write(screen.disable_insert_mode())

    def enable_mouse_highlight(self):
        self.write(screen.enable_mouse_highlight())

    def disable_mouse_highlight(self):
        self.write(screen.disable_mouse_highlight())

    def enable_focus_events(self):
        self.write(screen.enable_focus_events())

    def disable_focus_events(self):
        self.write(screen.disable_focus_events())

    def enable_alt_buffer(self):
        self.write(screen.enable_alt_buffer())

    def disable_alt_buffer(self):
        self.write(screen.disable_alt_buffer())

    def enable_bracketed_paste(self):
        self.write(screen.enable_bracketed_paste())

    def disable_bracketed_paste(self):
        self.write(screen.disable_bracketed_paste())

    # %% VT100

    def enable_vt100_feature(self, feature):
        self.write(vt100.enable_feature(feature))

    def disable_vt100_feature(self, feature):
        self.write(vt100.disable_feature(feature))

    # %% Printer

    def enable_printer(self):
        self.write(printer.enable_printer())

    def disable_printer(self):
        self.write(printer.disable_printer())

    def print_line(self):
        self.write(printer.print_line())

    def print_screen(self):
        self.write(printer.print_screen())

    def set_printer_mode(self, mode):
        self.write(printer.set_printer_mode(mode))

    # %% Charsets

    def select_character_set(self, name):
        self.write(charsets.select_character_set(name))

    def write_g0(self, charset):
        self.write(charsets.designate("G0", charset))

    def write_g1(self, charset):
        self.write(charsets.designate("G1", charset))

    def write_g2(self, charset):
        self.write(charsets.designate("G2", charset))

    def write_g3(self, charset):
        self.write(charsets.designate("G3", charset))

    # %% Mouse

    def enable_mouse_tracking(self):
        self.write(mouse.enable_tracking())

    def disable_mouse_tracking(self):
        self.write(mouse.disable_tracking())

    def enable_mouse_drag_tracking(self):
        self.write(mouse.enable_drag_tracking())

    def disable_mouse_drag_tracking(self):
        self.write(mouse.disable_drag_tracking())

    def enable_mouse_move_tracking(self):
        self.write(mouse.enable_move_tracking())

    def disable_mouse_move_tracking(self):
        self.write(mouse.disable_move_tracking())

    def enable_mouse_sgr_mode(self):
        self.write(mouse.enable_sgr_mode())

    def disable_mouse_sgr_mode(self):
        self.write(mouse.disable_sgr_mode())

    def enable_all_mouse_tracking(self):
        self.write(mouse.enable_all_tracking())

    def disable_all_mouse_tracking(self):
        self.write(mouse.disable_all_tracking())

    def enable_mouse_sgr_tracking(self):
        self.write(mouse.enable_sgr_tracking())

    def enable_mouse_sgr_drag_tracking(self):
        self.write(mouse.enable_sgr_drag_tracking())

    def enable_mouse_sgr_move_tracking(self):
        self.write(mouse.enable_sgr_move_tracking())

    # %% Text

    def write_styled(self, text, *styles):
        """Write text with the given SGR codes, followed by a reset."""
        self.write(colors.style(text, *styles))

    def write_hyperlink(self, text, url):
        self.write(colors.hyperlink(text, url))

    # %% Terminal extensions

    def detect_extension(self):
        return extensions.detect_terminal_extension()

    def set_title(self, title, extension=None):
        """Set the title the way the (detected) terminal prefers.

        Without a known extension this is the plain OSC 0 title.
        """
        extension = extension or self.detect_extension()
        if extension is None:
            self.write(screen.set_window_title(title))
        else:
            self.write(extensions.set_title(extension, title))

    def set_icon_name(self, name, extension=None):
        """Set the icon name the way the (detected) terminal prefers.

        Without a known extension this is the plain OSC 1 icon name.
        """
        extension = extension or self.detect_extension()
        if extension is None:
            self.write(screen.set_icon_name(name))
        else:
            self.write(extensions.set_icon_name(extension, name))

    def iterm2_display_image(self, path, name=None):
        self.write(extensions.iterm2_display_image(path, name))

    def iterm2_set_background_color(self, color):
        self.write(extensions.iterm2_set_background_color(color))

    def iterm2_set_badge(self, format):
        self.write(extensions.iterm2_set_badge(format))

    def iterm2_set_cursor_color(self, color):
        self.write(extensions.iterm2_set_cursor_color(color))

    def iterm2_set_profile(self, profile):
        self.write(extensions.iterm2_set_profile(profile))

    def iterm2_set_tab_title(self, title):
        self.write(extensions.iterm2_set_tab_title(title))

    def iterm2_set_window_title(self, title):
        self.write(extensions.iterm2_set_window_title(title))

    def konsole_set_title(self, title):
        self.write(extensions.konsole_set_title(title))

    def konsole_set_icon_name(self, name):
        self.write(extensions.konsole_set_icon_name(name))

    def konsole_set_profile(self, profile):
        self.write(extensions.konsole_set_profile(profile))

    def vte_set_title(self, title):
        self.write(extensions.vte_set_title(title))

    def vte_set_icon_name(self, name):
        self.write(extensions.vte_set_icon_name(name))

    def vte_set_hyperlink(self, uri, text):
        self.write(extensions.vte_set_hyperlink(uri, text))

    def xterm_set_title(self, title):
        self.write(extensions.xterm_set_title(title))

    def xterm_set_icon_name(self, name):
        self.write(extensions.xterm_set_icon_name(name))

    def xterm_set_foreground_color(self, color):
        self.write(extensions.xterm_set_foreground_color(color))

    def xterm_set_background_color(self, color):
        self.write(extensions.xterm_set_background_color(color))

    def xterm_set_font(self, font):
        self.write(extensions.xterm_set_font(font))
