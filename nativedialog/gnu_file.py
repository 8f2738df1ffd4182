"""File dialogs shown through kdialog or zenity."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from .backend import Backend, Tool, get_zenity_version, should_use
from .errors import NoImplementation, UnexpectedOutput
from .model import Filter
from .util import resolve_tilde
from .version import Version

_WARN_TITLE = "Incorrect file extension"


@dataclass(frozen=True)
class FileParams:
    """What a file dialog is asked to show."""

    title: str
    path: Path | None = None
    filters: tuple[Filter, ...] = ()
    multiple: bool = False
    directory: bool = False
    save: bool = False

    def __post_init__(self) -> None:
        if self.directory and self.save:
            raise ValueError("a dialog cannot both pick a directory and save a file")
        object.__setattr__(self, "filters", tuple(self.filters))


def trim_newlines(data: bytes) -> bytes:
    """Strip leading and trailing line feeds."""
    return data.strip(b"\n")


def _to_path(data: bytes) -> Path:
    return Path(os.fsdecode(data))


def _extension(path: str | os.PathLike[str]) -> str | None:
    name = Path(path).name
    if name in ("", ".."):
        return None
    stem, dot, ext = name.rpartition(".")
    if not dot or not stem:
        return None
    return ext


def get_target_path(
    location: str | os.PathLike[str] | None, filename: str | None
) -> Path | None:
    """The path the dialog starts at, combined from a location and a file name."""
    resolved = resolve_tilde(location) if location is not None else None
    if resolved is not None:
        return resolved / (filename if filename is not None else "Untitled")
    if filename is not None:
        return Path(filename)
    return None


def allowed_extensions(filters: Iterable[Filter]) -> list[str]:
    """Every extension named by the filters, in order."""
    return [ext for f in filters for ext in f.extensions]


def kdialog_arguments(params: FileParams) -> list[str]:
    """Command-line arguments for kdialog."""
    if params.directory:
        mode = "--getexistingdirectory"
    elif params.save:
        mode = "--getsavefilename"
    else:
        mode = "--getopenfilename"
    args = [
        mode,
        "--title",
        params.title,
        os.fspath(params.path) if params.path is not None else "",
    ]
    if params.multiple:
        args += ["--multiple", "--separate-output"]
    if params.filters:
        args.append(
            "\n".join(f"{f.description} ({' '.join(f.patterns)})" for f in params.filters)
        )
    return args


def zenity_arguments(params: FileParams, zenity_version: Version | None) -> list[str]:
    """Command-line arguments for zenity of the given version."""
    args = ["--file-selection", "--title", params.title]
    if params.directory:
        args.append("--directory")
    if params.save:
        args.append("--save")
        # The option was dropped in zenity 3.91.0.
        if zenity_version is not None and zenity_version < (3, 91, 0):
            args.append("--confirm-overwrite")
    if params.multiple:
        args += ["--multiple", "--separator", "\n"]
    if params.path is not None:
        args += ["--filename", os.fspath(params.path)]
    for f in params.filters:
        patterns = " ".join(f.patterns)
        args += ["--file-filter", f"{f.description} ({patterns}) | {patterns}"]
    return args


def warn_extension_message(path: str | os.PathLike[str]) -> str:
    """The message shown when a saved file name has a missing or unknown extension."""
    ext = _extension(path)
    if ext is None:
        return "You haven't specified a file extension in the filename. Please try again."
    return f'We could not recognize the file extension ".{ext}". Please try again.'


def kdialog_warn_extension_arguments(message: str) -> list[str]:
    """kdialog arguments for the wrong-extension warning."""
    return ["--msgbox", message, "--title", _WARN_TITLE, "--icon=dialog-warning"]


def zenity_warn_extension_arguments(message: str) -> list[str]:
    """zenity arguments for the wrong-extension warning."""
    return ["--width=400", "--warning", "--title", _WARN_TITLE, "--text", message]


def _backend() -> Backend:
    backend = should_use()
    if backend is None:
        raise NoImplementation()
    return backend


def _run(params: FileParams) -> bytes | None:
    backend = _backend()
    if backend.tool is Tool.KDIALOG:
        args = kdialog_arguments(params)
    else:
        args = zenity_arguments(params, get_zenity_version() if params.save else None)
    result = backend.run(args)
    if result.returncode == 0:
        return result.stdout
    if result.returncode == 1:
        return None
    raise UnexpectedOutput(backend.tool.value)


def _warn_extension(message: str) -> None:
    backend = _backend()
    if backend.tool is Tool.KDIALOG:
        backend.run(kdialog_warn_extension_arguments(message))
    else:
        backend.run(zenity_warn_extension_arguments(message))


def open_single_file(
    title: str,
    filename: str | None = None,
    location: str | os.PathLike[str] | None = None,
    filters: Iterable[Filter] = (),
) -> Path | None:
    """Let the user pick one file; None if the dialog was cancelled."""
    params = FileParams(
        title=title,
        path=get_target_path(location, filename),
        filters=tuple(filters),
    )
    output = _run(params)
    return None if output is None else _to_path(trim_newlines(output))


def open_multiple_file(
    title: str,
    filename: str | None = None,
    location: str | os.PathLike[str] | None = None,
    filters: Iterable[Filter] = (),
) -> list[Path]:
    """Let the user pick several files; an empty list if the dialog was cancelled."""
    params = FileParams(
        title=title,
        path=get_target_path(location, filename),
        filters=tuple(filters),
        multiple=True,
    )
    output = _run(params)
    if output is None:
        return []
    return [_to_path(line) for line in output.split(b"\n") if line]


def open_single_dir(
    title: str,
    filename: str | None = None,
    location: str | os.PathLike[str] | None = None,
) -> Path | None:
    """Let the user pick one directory; None if the dialog was cancelled."""
    params = FileParams(
        title=title,
        path=get_target_path(location, filename),
        directory=True,
    )
    output = _run(params)
    return None if output is None else _to_path(trim_newlines(output))


def save_single_file(
    title: str,
    filename: str | None = None,
    location: str | os.PathLike[str] | None = None,
    filters: Iterable[Filter] = (),
) -> Path | None:
    """Ask where to save a file, insisting on an extension the filters allow."""
    filters = tuple(filters)
    allowed = allowed_extensions(filters)
    target = get_target_path(location, filename)
    while True:
        params = FileParams(title=title, path=target, filters=filters, save=True)
        output = _run(params)
        if output is None:
            return None
        path = _to_path(trim_newlines(output))
        if not allowed:
            return path
        ext = _extension(path)
        if ext is not None and ext in allowed:
            return path
        _warn_extension(warn_extension_message(path))
        target = path