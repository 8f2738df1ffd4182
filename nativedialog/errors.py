"""Exceptions raised when a dialog cannot be shown or its result cannot be read."""

from __future__ import annotations


class DialogError(Exception):
    """Base class of every error raised by this package."""

    default_message = "dialog failure"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class IoFailure(DialogError):
    """A system call or an I/O operation failed."""

    default_message = "system error or I/O failure"


class InvalidString(DialogError):
    """The dialog implementation returned text that could not be decoded."""

    default_message = "the implementation returns malformed strings"


class UnexpectedOutput(DialogError):
    """The dialog implementation produced output that could not be understood."""

    default_message = "failed to parse the string returned from implementation"

    def __init__(self, implementation: str) -> None:
        super().__init__()
        self.implementation = implementation


class NoImplementation(DialogError):
    """No dialog program could be found on this system."""

    default_message = "cannot find any dialog implementation (kdialog/zenity)"


class ImplementationError(DialogError):
    """The dialog implementation reported an error of its own."""

    default_message = "the implementation reports error"

    def __init__(self, detail: str) -> None:
        super().__init__()
        self.detail = detail