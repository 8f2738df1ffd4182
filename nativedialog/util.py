"""Path helpers."""

from __future__ import annotations

import os
from pathlib import Path


def _home_dir() -> Path | None:
    home = os.path.expanduser("~")
    if home == "~":
        return None
    return Path(home)


def resolve_tilde(path: str | os.PathLike[str]) -> Path | None:
    """Replace a leading ``~`` component with the home directory.

    Returns None when the path starts with ``~`` but no home directory is known.
    """
    parts = Path(path).parts
    if not parts:
        return Path()
    first, rest = parts[0], parts[1:]
    if first == "~":
        home = _home_dir()
        if home is None:
            return None
        return home.joinpath(*rest)
    return Path(first).joinpath(*rest)