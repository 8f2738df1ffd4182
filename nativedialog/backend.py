"""Discovery of the dialog program (kdialog or zenity) to use."""

from __future__ import annotations

import enum
import os
import shutil
import subprocess
from dataclasses import dataclass
from typing import Iterable

from .errors import IoFailure
from .version import Version


class Tool(enum.Enum):
    """A supported dialog program."""

    KDIALOG = "kdialog"
    ZENITY = "zenity"


@dataclass(frozen=True)
class Backend:
    """A dialog program found on the system."""

    tool: Tool
    path: str

    def run(self, args: Iterable[str | os.PathLike[str]]) -> subprocess.CompletedProcess:
        """Run the program with the arguments, capturing its output."""
        try:
            return subprocess.run(
                [self.path, *(os.fspath(a) for a in args)],
                capture_output=True,
                check=False,
            )
        except OSError as exc:
            raise IoFailure() from exc


def _find(tool: Tool) -> Backend | None:
    path = shutil.which(tool.value)
    return Backend(tool, path) if path else None


def should_use() -> Backend | None:
    """Pick kdialog or zenity, preferring kdialog on a KDE desktop with a display."""
    has_display = bool(os.environ.get("DISPLAY"))
    if os.environ.get("XDG_CURRENT_DESKTOP") == "KDE" and has_display:
        candidates = (Tool.KDIALOG, Tool.ZENITY)
    else:
        candidates = (Tool.ZENITY, Tool.KDIALOG)
    for tool in candidates:
        backend = _find(tool)
        if backend is not None:
            return backend
    return None


def get_version_output(program: str) -> str | None:
    """Return what ``program --version`` prints, or None if it cannot be read as ASCII."""
    try:
        output = subprocess.run([program, "--version"], capture_output=True, check=False)
    except OSError:
        return None
    try:
        return output.stdout.decode("ascii")
    except UnicodeDecodeError:
        return None


def get_kdialog_version() -> Version | None:
    """The installed kdialog's version, taken from the last word it prints."""
    output = get_version_output("kdialog")
    if not output:
        return None
    words = output.split()
    return Version.parse(words[-1]) if words else None


def get_zenity_version() -> Version | None:
    """The installed zenity's version."""
    output = get_version_output("zenity")
    if output is None:
        return None
    return Version.parse(output.strip())