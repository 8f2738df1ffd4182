import subprocess
import tkinter
from unittest import mock

import pytest

from nativedialog.errors import ImplementationError
from nativedialog.message_dialog import MessageDialog
from nativedialog.model import MessageType


class FakeZenity:
    def __init__(self):
        self.calls = []
        self.responses = []

    def __call__(self, args, **kwargs):
        args = [str(a) for a in args]
        if args[1:] == ["--version"]:
            return subprocess.CompletedProcess(args, 0, b"4.0.1\n", b"")
        self.calls.append(args[1:])
        code = self.responses.pop(0)
        return subprocess.CompletedProcess(args, code, b"", b"")


def _which(name):
    return "/usr/bin/zenity" if name == "zenity" else None


@pytest.fixture
def zenity(monkeypatch):
    monkeypatch.delenv("XDG_CURRENT_DESKTOP", raising=False)
    fake = FakeZenity()
    with mock.patch("shutil.which", side_effect=_which), mock.patch(
        "subprocess.run", side_effect=fake
    ):
        yield fake


def test_confirm_yes(zenity):
    zenity.responses.append(0)
    dialog = MessageDialog(title="Q", text="Go?", typ=MessageType.WARNING)
    assert dialog.show_confirm() is True
    args = zenity.calls[0]
    assert "--question" in args
    assert args[args.index("--title") + 1] == "Q"
    assert args[args.index("--text") + 1] == "Go?"


def test_confirm_no(zenity):
    zenity.responses.append(1)
    assert MessageDialog(title="Q", text="Go?").show_confirm() is False


def test_alert_uses_message_type(zenity):
    zenity.responses.append(0)
    result = MessageDialog(title="A", text="x", typ=MessageType.WARNING).show_alert()
    assert result is None
    assert "--warning" in zenity.calls[0]


def test_alert_defaults(zenity):
    zenity.responses.append(1)
    assert MessageDialog().show_alert() is None
    args = zenity.calls[0]
    assert "--info" in args
    assert args[args.index("--title") + 1] == ""


@mock.patch("tkinter.messagebox.askyesno", return_value=True)
@mock.patch("tkinter.Tk")
def test_confirm_falls_back_without_tools(tk, askyesno):
    with mock.patch("shutil.which", return_value=None):
        assert MessageDialog(title="T", text="x").show_confirm() is True
    assert askyesno.call_args.args == ("T", "x")


@mock.patch("tkinter.messagebox.showinfo")
@mock.patch("tkinter.Tk")
def test_alert_falls_back_when_tool_is_killed(tk, showinfo, zenity):
    zenity.responses.append(-9)
    assert MessageDialog(title="T", text="x").show_alert() is None
    assert showinfo.call_args.args == ("T", "x")


@mock.patch("tkinter.Tk", side_effect=tkinter.TclError("no display"))
def test_fallback_failure_propagates(tk):
    with mock.patch("shutil.which", return_value=None):
        with pytest.raises(ImplementationError) as info:
            MessageDialog(title="T", text="x").show_confirm()
    assert info.value.detail == "no display"