import logging

import pytest

from termseq import extensions
from termseq.extensions import detect_terminal_extension
from termseq.records import TERMINAL_EXTENSIONS


def test_detect():
    assert detect_terminal_extension({}) is None
    assert detect_terminal_extension({"TERM_PROGRAM": "iTerm.app"}) == "iTerm2"
    assert detect_terminal_extension({"KONSOLE_VERSION": "230802"}) == "Konsole"
    assert detect_terminal_extension({"VTE_VERSION": "7200"}) == "VTE"
    assert detect_terminal_extension({"TERM_PROGRAM": "xterm-256color"}) == "xterm"
    assert detect_terminal_extension({"TERM_PROGRAM": "vscode"}) is None
    # Empty values do not count
    assert detect_terminal_extension({"VTE_VERSION": ""}) is None


def test_detect_priority():
    env = {"TERM_PROGRAM": "iTerm.app", "VTE_VERSION": "7200"}
    assert detect_terminal_extension(env) == "iTerm2"
    env = {"KONSOLE_VERSION": "1", "VTE_VERSION": "7200"}
    assert detect_terminal_extension(env) == "Konsole"
    env = {"TERM_PROGRAM": "xterm", "VTE_VERSION": "7200"}
    assert detect_terminal_extension(env) == "VTE"


def test_detect_uses_os_environ(monkeypatch):
    monkeypatch.delenv("TERM_PROGRAM", raising=False)
    monkeypatch.delenv("KONSOLE_VERSION", raising=False)
    monkeypatch.setenv("VTE_VERSION", "6003")
    assert detect_terminal_extension() == "VTE"


def test_detect_logs(caplog):
    with caplog.at_level(logging.DEBUG, logger="termseq"):
        detect_terminal_extension({"KONSOLE_VERSION": "1"})
    assert "Konsole" in caplog.text


def test_iterm2():
    assert extensions.iterm2_display_image("/a.png") == "\x1b]1337;File=/a.png\x1b\\"
    assert (
        extensions.iterm2_display_image("/a.png", "pic")
        == "\x1b]1337;File=name=pic;/a.png\x1b\\"
    )
    assert (
        extensions.iterm2_set_background_color("ff0000")
        == "\x1b]1337;BackgroundColor=ff0000\x1b\\"
    )
    assert extensions.iterm2_set_badge("hi") == "\x1b]1337;SetBadgeFormat=hi\x1b\\"
    assert extensions.iterm2_set_cursor_color("red") == "\x1b]1337;CursorColor=red\x1b\\"
    assert extensions.iterm2_set_profile("Dark") == "\x1b]1337;SetProfile=Dark\x1b\\"
    assert extensions.iterm2_set_tab_title("t") == "\x1b]1337;SetTabTitle=t\x1b\\"
    assert extensions.iterm2_set_window_title("w") == "\x1b]1337;SetWindowTitle=w\x1b\\"


def test_konsole():
    assert extensions.konsole_set_title("t") == "\x1b]30;t\x1b\\"
    assert extensions.konsole_set_icon_name("i") == "\x1b]31;i\x1b\\"
    assert extensions.konsole_set_profile("P") == "\x1b]50;Profile=P\x1b\\"


def test_vte():
    assert extensions.vte_set_title("t") == "\x1b]0;t\x1b\\"
    assert extensions.vte_set_icon_name("i") == "\x1b]1;i\x1b\\"
    assert (
        extensions.vte_set_hyperlink("http://x", "x")
        == "\x1b]8;;http://x\x1b\\x\x1b]8;;\x1b\\"
    )


def test_xterm():
    assert extensions.xterm_set_title("t") == "\x1b]0;t\x1b\\"
    assert extensions.xterm_set_icon_name("i") == "\x1b]1;i\x1b\\"
    assert extensions.xterm_set_foreground_color("#fff") == "\x1b]10;#fff\x1b\\"
    assert extensions.xterm_set_background_color("#000") == "\x1b]11;#000\x1b\\"
    assert extensions.xterm_set_font("fixed") == "\x1b]50;fixed\x1b\\"


def test_set_title_dispatch():
    assert extensions.set_title("iTerm2", "t") == "\x1b]1337;SetWindowTitle=t\x1b\\"
    assert extensions.set_title("Konsole", "t") == "\x1b]30;t\x1b\\"
    assert extensions.set_title("VTE", "t") == "\x1b]0;t\x1b\\"
    assert extensions.set_title("xterm", "t") == "\x1b]0;t\x1b\\"
    for extension in TERMINAL_EXTENSIONS:
        assert extensions.set_title(extension, "t")
    with pytest.raises(ValueError):
        extensions.set_title("kitty", "t")


def test_set_icon_name_dispatch():
    assert extensions.set_icon_name("iTerm2", "i") == ""
    assert extensions.set_icon_name("Konsole", "i") == "\x1b]31;i\x1b\\"
    assert extensions.set_icon_name("VTE", "i") == "\x1b]1;i\x1b\\"
    assert extensions.set_icon_name("xterm", "i") == "\x1b]1;i\x1b\\"
    with pytest.raises(ValueError):
        extensions.set_icon_name(None, "i")
