"""Message boxes drawn with Tk, used when no dialog program is available."""

from __future__ import annotations

import contextlib
from types import ModuleType
from typing import Iterator

from .errors import ImplementationError
from .model import MessageType

_ALERT_FUNCTIONS = {
    MessageType.INFO: "showinfo",
    MessageType.WARNING: "showwarning",
    MessageType.ERROR: "showerror",
}


@contextlib.contextmanager
def _hidden_root() -> Iterator[tuple[ModuleType, object]]:
    """Yield the messagebox module and a hidden root window that owns the box."""
    try:
        import tkinter
        from tkinter import messagebox
    except ImportError as exc:
        raise ImplementationError(f"tkinter is unavailable: {exc}") from exc

    try:
        root = tkinter.Tk()
    except tkinter.TclError as exc:
        raise ImplementationError(str(exc)) from exc

    try:
        # Hiding the root keeps the box free of an extra empty window.
        root.withdraw()
        yield messagebox, root
    except tkinter.TclError as exc:
        raise ImplementationError(str(exc)) from exc
    finally:
        with contextlib.suppress(tkinter.TclError):
            root.destroy()


def fallback_alert(title: str, text: str, typ: MessageType = MessageType.INFO) -> None:
    """Show a message with a single OK button."""
    with _hidden_root() as (messagebox, root):
        show = getattr(messagebox, _ALERT_FUNCTIONS[typ])
        show(title, text, parent=root)


def fallback_confirm(title: str, text: str, typ: MessageType = MessageType.INFO) -> bool:
    """Ask a Yes/No question; closing the box counts as No."""
    with _hidden_root() as (messagebox, root):
        answer = messagebox.askyesno(title, text, icon=typ.value, parent=root)
    return bool(answer)