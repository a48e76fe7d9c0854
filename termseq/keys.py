"""
Decoding of raw key input into key names.

``decode_key()`` looks up one complete read in the tables below. The
``KeyDecoder`` class does the same for a stream of input, where an escape
sequence may be split over multiple reads.
"""

from collections import deque
from types import MappingProxyType

from .codes import ESC


# %% Tables

# These are the sequences of the DOS / ANSI.SYS keyboard encoding (ESC [ 0 ; n
# for function and keypad keys, ESC [ 224 ; n for the gray navigation keys),
# plus the common CSI sequences for arrows and the tilde keys. The tables are
# disjoint, but lookups go through them in the order of KEY_TABLES.

FUNCTION_KEYS = MappingProxyType(
    {
        "\x1b[0;59": "F1",
        "\x1b[0;60": "F2",
        "\x1b[0;61": "F3",
        "\x1b[0;62": "F4",
        "\x1b[0;63": "F5",
        "\x1b[0;64": "F6",
        "\x1b[0;65": "F7",
        "\x1b[0;66": "F8",
        "\x1b[0;67": "F9",
        "\x1b[0;68": "F10",
        "\x1b[0;133": "F11",
        "\x1b[0;134": "F12",
        # Shift
        "\x1b[0;84": "SHIFT+F1",
        "\x1b[0;85": "SHIFT+F2",
        "\x1b[0;86": "SHIFT+F3",
        "\x1b[0;87": "SHIFT+F4",
        "\x1b[0;88": "SHIFT+F5",
        "\x1b[0;89": "SHIFT+F6",
        "\x1b[0;90": "SHIFT+F7",
        "\x1b[0;91": "SHIFT+F8",
        "\x1b[0;92": "SHIFT+F9",
        "\x1b[0;93": "SHIFT+F10",
        "\x1b[0;135": "SHIFT+F11",
        "\x1b[0;136": "SHIFT+F12",
        # Control
        "\x1b[0;94": "CTRL+F1",
        "\x1b[0;95": "CTRL+F2",
        "\x1b[0;96": "CTRL+F3",
        "\x1b[0;97": "CTRL+F4",
        "\x1b[0;98": "CTRL+F5",
        "\x1b[0;99": "CTRL+F6",
        "\x1b[0;100": "CTRL+F7",
        "\x1b[0;101": "CTRL+F8",
        "\x1b[0;102": "CTRL+F9",
        "\x1b[0;103": "CTRL+F10",
        "\x1b[0;137": "CTRL+F11",
        "\x1b[0;138": "CTRL+F12",
        # Alt
        "\x1b[0;104": "ALT+F1",
        "\x1b[0;105": "ALT+F2",
        "\x1b[0;106": "ALT+F3",
        "\x1b[0;107": "ALT+F4",
        "\x1b[0;108": "ALT+F5",
        "\x1b[0;109": "ALT+F6",
        "\x1b[0;110": "ALT+F7",
        "\x1b[0;111": "ALT+F8",
        "\x1b[0;112": "ALT+F9",
        "\x1b[0;113": "ALT+F10",
        "\x1b[0;139": "ALT+F11",
        "\x1b[0;140": "ALT+F12",
    }
)

NAVIGATION_KEYS = MappingProxyType(
    {
        # CSI (xterm, vt220)
        "\x1b[A": "UP",
        "\x1b[B": "DOWN",
        "\x1b[C": "RIGHT",
        "\x1b[D": "LEFT",
        "\x1b[H": "HOME",
        "\x1b[F": "END",
        "\x1b[5~": "PAGE_UP",
        "\x1b[6~": "PAGE_DOWN",
        "\x1b[3~": "DELETE",
        "\x1b[2~": "INSERT",
        # Gray keys
        "\x1b[224;72": "UP",
        "\x1b[224;80": "DOWN",
        "\x1b[224;75": "LEFT",
        "\x1b[224;77": "RIGHT",
        "\x1b[224;71": "HOME",
        "\x1b[224;79": "END",
        "\x1b[224;73": "PAGE_UP",
        "\x1b[224;81": "PAGE_DOWN",
        "\x1b[224;82": "INSERT",
        "\x1b[224;83": "DELETE",
        # Gray keys with control
        "\x1b[224;119": "CTRL+HOME",
        "\x1b[224;117": "CTRL+END",
        "\x1b[224;132": "CTRL+PAGE_UP",
        "\x1b[224;118": "CTRL+PAGE_DOWN",
        "\x1b[224;115": "CTRL+LEFT",
        "\x1b[224;116": "CTRL+RIGHT",
        "\x1b[224;141": "CTRL+UP",
        "\x1b[224;145": "CTRL+DOWN",
        "\x1b[224;146": "CTRL+INSERT",
        "\x1b[224;147": "CTRL+DELETE",
        # Gray keys with alt
        "\x1b[224;151": "ALT+HOME",
        "\x1b[224;159": "ALT+END",
        "\x1b[224;153": "ALT+PAGE_UP",
        "\x1b[224;161": "ALT+PAGE_DOWN",
        "\x1b[224;155": "ALT+LEFT",
        "\x1b[224;157": "ALT+RIGHT",
        "\x1b[224;152": "ALT+UP",
        "\x1b[224;154": "ALT+DOWN",
        "\x1b[224;162": "ALT+INSERT",
        "\x1b[224;163": "ALT+DELETE",
    }
)

KEYPAD_KEYS = MappingProxyType(
    {
        "\x1b[0;71": "KP_HOME",
        "\x1b[0;72": "KP_UP",
        "\x1b[0;73": "KP_PAGE_UP",
        "\x1b[0;75": "KP_LEFT",
        "\x1b[0;77": "KP_RIGHT",
        "\x1b[0;79": "KP_END",
        "\x1b[0;80": "KP_DOWN",
        "\x1b[0;81": "KP_PAGE_DOWN",
        "\x1b[0;82": "KP_INSERT",
        "\x1b[0;83": "KP_DELETE",
        "\x1b[0;119": "CTRL+KP_HOME",
        "\x1b[0;132": "CTRL+KP_PAGE_UP",
        "\x1b[0;115": "CTRL+KP_LEFT",
        "\x1b[0;116": "CTRL+KP_RIGHT",
        "\x1b[0;117": "CTRL+KP_END",
        "\x1b[0;118": "CTRL+KP_PAGE_DOWN",
        "\x1b[0;146": "CTRL+KP_INSERT",
        "\x1b[0;147": "CTRL+KP_DELETE",
        "\x1b[0;142": "KP_DIVIDE",
        "\x1b[0;144": "KP_MULTIPLY",
        "\x1b[0;149": "KP_SUBTRACT",
        "\x1b[0;150": "KP_ADD",
        "\x1b[0;166": "KP_ENTER",
        "\x1b[0;78": "CTRL+KP_MULTIPLY",
        "\x1b[0;55": "CTRL+KP_ADD",
    }
)

SPECIAL_KEYS = MappingProxyType(
    {
        "\x1b[0;114": "CTRL+PRINT_SCREEN",
        "\x1b[0;0": "CTRL+PAUSE",
        "\x1b[0;15": "SHIFT+TAB",  # Note: a prefix of KP_ADD
        "\x1b[0;148": "CTRL+TAB",
        "\x1b[0;165": "ALT+TAB",
        "\x1b[127": "CTRL+BACKSPACE",
        "\x1b[10": "CTRL+ENTER",
    }
)

KEY_TABLES = (FUNCTION_KEYS, NAVIGATION_KEYS, KEYPAD_KEYS, SPECIAL_KEYS)


def _merge_tables(tables):
    merged = {}
    for table in tables:
        for text, key in table.items():
            merged.setdefault(text, key)  # the first table wins
    return MappingProxyType(merged)


KEY_MAP = _merge_tables(KEY_TABLES)


# %% Single-read decoding


def decode_key(raw):
    """Decode the text of one read into a key name.

    Text that does not start with an escape is returned as-is. So is an
    escape sequence that is not in any of the tables.
    """
    if not raw.startswith(ESC):
        return raw
    for table in KEY_TABLES:
        key = table.get(raw)
        if key is not None:
            return key
    return raw


# %% Streaming decoding


class KeyDecoder:
    """A streaming key decoder.

    The tables have no common terminator, so a sequence is complete when
    the next char does not extend it, or on a flush.
    """

    def __init__(self, key_map=None):
        self._key_tree = build_tree(KEY_MAP if key_map is None else key_map)
        self._branch = self._key_tree
        self._prefix = ""
        self._chars = deque()

    def _reset_branch(self):
        self._branch = self._key_tree
        self._prefix = ""

    def decode(self, text, flush=False):
        """Decode the given string into a list of key names and chars.

        Escape codes can be split between multiple calls to decode.
        Without a flush, a pending escape sequence is held until more
        chars arrive. With a flush it is emitted: as its key if it is one,
        or else as the literal text.
        """

        self._chars.extend(text)
        result = []

        while True:

            # Get a char
            try:
                c = self._chars.popleft()
            except IndexError:
                break  # empty

            if c in self._branch:
                # Walk the tree, can be result or new branch
                tree_result = self._branch[c]
                if isinstance(tree_result, dict):
                    self._branch = tree_result
                    self._prefix += c
                else:
                    self._reset_branch()
                    result.append(tree_result)
            elif self._branch is self._key_tree:
                # A normal character
                result.append(c)
            elif "" in self._branch:
                # The chars so far form a key, that a longer key starts with
                result.append(self._branch[""])
                self._reset_branch()
                self._chars.appendleft(c)
            elif c == ESC:
                # An unknown sequence, interrupted by the next one
                result.append(self._prefix)
                self._reset_branch()
                self._chars.appendleft(c)
            else:
                # An unknown sequence, pass it through
                result.append(self._prefix + c)
                self._reset_branch()

        # Flush the tree
        if flush and self._branch is not self._key_tree:
            result.append(self._branch.get("", self._prefix))
            self._reset_branch()

        return result


def build_tree(map):
    """Build a tree from a flat map, so it can be traversed while decoding incoming chars."""
    trunk = {}
    for text, key in map.items():
        branch = trunk
        while len(text) > 1:
            char, text = text[0], text[1:]
            new_branch = branch.setdefault(char, {})
            if not isinstance(new_branch, dict):
                branch[char] = new_branch = {"": new_branch}
            branch = new_branch
        existing = branch.get(text)
        if isinstance(existing, dict):
            existing[""] = key
        else:
            branch[text] = key
    assert "" not in trunk  # Sanity check
    return trunk
