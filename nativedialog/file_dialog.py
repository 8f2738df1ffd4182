"""Builder for dialogs that open or save files and directories."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from . import gnu_file
from .model import Filter


@dataclass
class FileDialog:
    """Settings for a file dialog, shown by one of the ``show_*`` methods.

    ``filename`` is the initial content of the file name field; ``location``
    is the directory the dialog starts in, where a leading ``~`` means the
    home directory. ``title`` falls back to a title suited to each dialog.
    """

    title: str | None = None
    filename: str | None = None
    location: str | os.PathLike[str] | None = None
    filters: list[Filter] = field(default_factory=list)

    def add_filter(self, description: str, extensions: Iterable[str]) -> "FileDialog":
        """Add a file type filter; it must name at least one extension.

        Dialogs that open directories ignore filters.
        """
        self.filters.append(Filter(description, extensions))
        return self

    def remove_all_filters(self) -> "FileDialog":
        """Drop every file type filter."""
        self.filters.clear()
        return self

    def _title(self, default: str) -> str:
        return self.title if self.title is not None else default

    def show_open_single_file(self) -> Path | None:
        """Let the user open one file; None if cancelled."""
        return gnu_file.open_single_file(
            self._title("Open File"), self.filename, self.location, self.filters
        )

    def show_open_multiple_file(self) -> list[Path]:
        """Let the user open several files; empty if cancelled."""
        return gnu_file.open_multiple_file(
            self._title("Open File"), self.filename, self.location, self.filters
        )

    def show_open_single_dir(self) -> Path | None:
        """Let the user open one directory; None if cancelled."""
        return gnu_file.open_single_dir(
            self._title("Open Folder"), self.filename, self.location
        )

    def show_save_single_file(self) -> Path | None:
        """Let the user choose where to save one file; None if cancelled."""
        return gnu_file.save_single_file(
            self._title("Save As"), self.filename, self.location, self.filters
        )