import subprocess

import pyperclip

from lazypost_tui import clipboard_utils
from lazypost_tui.clipboard_utils import copy_to_clipboard


def test_osc52_short_circuits(monkeypatch) -> None:
    calls = []
    monkeypatch.setattr(clipboard_utils, "_try_osc52", lambda text: True)
    monkeypatch.setattr(pyperclip, "copy", calls.append)

    assert copy_to_clipboard("hello") == (True, "")
    assert calls == []


def test_falls_back_to_pyperclip(monkeypatch) -> None:
    calls = []
    monkeypatch.setattr(clipboard_utils, "_try_osc52", lambda text: False)
    monkeypatch.setattr(pyperclip, "copy", calls.append)

    assert copy_to_clipboard("hello") == (True, "")
    assert calls == ["hello"]


def test_falls_back_to_system_command(monkeypatch) -> None:
    commands = []

    def fail(text):
        raise pyperclip.PyperclipException("no backend")

    def run(command, **kwargs):
        commands.append((command, kwargs["input"]))

    monkeypatch.setattr(clipboard_utils, "_try_osc52", lambda text: False)
    monkeypatch.setattr(pyperclip, "copy", fail)
    monkeypatch.setattr(clipboard_utils.platform, "system", lambda: "Darwin")
    monkeypatch.setattr(subprocess, "run", run)

    assert copy_to_clipboard("hello") == (True, "")
    assert commands == [(["pbcopy"], b"hello")]


def test_reports_failure_when_nothing_works(monkeypatch) -> None:
    def fail(text):
        raise pyperclip.PyperclipException("no backend")

    def run(command, **kwargs):
        raise FileNotFoundError(command[0])

    monkeypatch.setattr(clipboard_utils, "_try_osc52", lambda text: False)
    monkeypatch.setattr(pyperclip, "copy", fail)
    monkeypatch.setattr(clipboard_utils.platform, "system", lambda: "Linux")
    monkeypatch.setattr(subprocess, "run", run)

    success, error = copy_to_clipboard("hello")

    assert not success
    assert "No clipboard method available" in error
