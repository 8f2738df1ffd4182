"""Values shared by the dialog builders and the dialog implementations."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class Filter:
    """A set of file extensions together with a description."""

    description: str
    extensions: tuple[str, ...]

    def __init__(self, description: str, extensions: Iterable[str]) -> None:
        exts = tuple(extensions)
        if not exts:
            raise ValueError("The file extensions of a filter must be specified.")
        object.__setattr__(self, "description", description)
        object.__setattr__(self, "extensions", exts)

    @property
    def patterns(self) -> tuple[str, ...]:
        """Glob patterns matching the extensions, such as ``*.png``."""
        return tuple(f"*.{ext}" for ext in self.extensions)


class MessageType(enum.Enum):
    """The kind of message shown; it usually decides the dialog's icon."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def icon_name(self) -> str:
        """The freedesktop icon name used for this kind of message."""
        return {
            MessageType.INFO: "dialog-information",
            MessageType.WARNING: "dialog-warning",
            MessageType.ERROR: "dialog-error",
        }[self]