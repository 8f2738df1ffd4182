"""Builder for message boxes."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import DialogError
from .fallback import fallback_alert, fallback_confirm
from .gnu_message import message_alert, message_confirm
from .model import MessageType


@dataclass
class MessageDialog:
    """Settings for a message box, shown by ``show_alert`` or ``show_confirm``.

    When no dialog program can show the box, a Tk box is used instead.
    """

    title: str = ""
    text: str = ""
    typ: MessageType = MessageType.INFO

    def show_alert(self) -> None:
        """Tell the user something."""
        try:
            message_alert(self.title, self.text, self.typ)
        except DialogError:
            fallback_alert(self.title, self.text, self.typ)

    def show_confirm(self) -> bool:
        """Ask the user to choose Yes or No; True means Yes."""
        try:
            return message_confirm(self.title, self.text, self.typ)
        except DialogError:
            return fallback_confirm(self.title, self.text, self.typ)