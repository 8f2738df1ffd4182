"""A short walk through every kind of dialog."""

from __future__ import annotations

import pprint
import sys
from typing import Sequence

from .errors import DialogError
from .file_dialog import FileDialog
from .message_dialog import MessageDialog
from .model import MessageType


def _echo(name: str, value: object) -> None:
    MessageDialog(title="Result", text=f"{name}:\n{pprint.pformat(value)}").show_alert()


def _with_filters() -> FileDialog:
    return (
        FileDialog()
        .add_filter("Rust Source", ["rs"])
        .add_filter("Image", ["png", "jpg", "gif"])
    )


def _tour() -> None:
    confirmed = MessageDialog(
        title="Tour",
        text="Do you want to begin the tour?",
        typ=MessageType.WARNING,
    ).show_confirm()
    if not confirmed:
        return
    _echo("show_confirm", confirmed)

    _echo("show_open_single_file", FileDialog(location="~").show_open_single_file())
    _echo("show_open_multiple_file", _with_filters().show_open_multiple_file())
    _echo("show_open_single_dir", FileDialog().show_open_single_dir())
    _echo("show_save_single_file", _with_filters().show_save_single_file())

    MessageDialog(title="End", text="That's the end!").show_alert()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the tour; returns the process exit status."""
    try:
        _tour()
    except DialogError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())