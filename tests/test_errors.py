import pytest

from nativedialog.errors import (
    DialogError,
    ImplementationError,
    InvalidString,
    IoFailure,
    NoImplementation,
    UnexpectedOutput,
)


@pytest.mark.parametrize(
    "error, message",
    [
        (IoFailure(), "system error or I/O failure"),
        (InvalidString(), "the implementation returns malformed strings"),
        (UnexpectedOutput("zenity"), "failed to parse the string returned from implementation"),
        (NoImplementation(), "cannot find any dialog implementation (kdialog/zenity)"),
        (ImplementationError("boom"), "the implementation reports error"),
    ],
)
def test_messages(error, message):
    assert str(error) == message
    assert isinstance(error, DialogError)


def test_unexpected_output_keeps_implementation():
    assert UnexpectedOutput("kdialog").implementation == "kdialog"


def test_implementation_error_keeps_detail():
    error = ImplementationError("could not open display")
    assert error.detail == "could not open display"
    assert str(error) == "the implementation reports error"