# nativedialog

Show file pickers and message boxes from Python on Unix desktops. Dialogs
are displayed by running `kdialog` or `zenity`, whichever is found on
`PATH`. When `XDG_CURRENT_DESKTOP` is `KDE` and `DISPLAY` is set, `kdialog`
is tried first; otherwise `zenity` is tried first. Message boxes fall back
to a Tk message box (from the standard library's `tkinter`) when neither
tool can show them.

## Installation

```
pip install .
```

The package has no third-party dependencies. At least one of `kdialog` or
`zenity` should be installed; the Tk fallback for message boxes needs a
Python built with `tkinter`.

## Message dialogs

```python
from nativedialog.message_dialog import MessageDialog
from nativedialog.model import MessageType

dialog = MessageDialog(
    title="Tour",
    text="Do you want to begin the tour?",
    typ=MessageType.WARNING,
)
if dialog.show_confirm():
    MessageDialog(title="Result", text="Let's go!").show_alert()
```

`MessageDialog` has the fields `title`, `text` (both empty by default) and
`typ`, a `MessageType` (`INFO`, `WARNING` or `ERROR`, default `INFO`) that
chooses the icon. `show_alert()` returns `None` once the box is dismissed;
`show_confirm()` returns `True` for Yes and `False` otherwise. If showing
the box through `kdialog` or `zenity` raises any `DialogError`, the same box
is shown with Tk instead; there, closing the box counts as No.

Text is escaped for each tool: for `zenity` the five markup entities are
escaped, for `kdialog` newlines become `<br>`, tabs become spaces and angle
brackets are escaped (kdialog older than 19.0.0 also has `&` and `"`
escaped).

## File dialogs

```python
from nativedialog.file_dialog import FileDialog

path = FileDialog(location="~").show_open_single_file()

paths = (
    FileDialog()
    .add_filter("Python Source", ["py"])
    .add_filter("Image", ["png", "jpg", "gif"])
    .show_open_multiple_file()
)

folder = FileDialog().show_open_single_dir()

target = (
    FileDialog(filename="notes.txt")
    .add_filter("Text", ["txt"])
    .show_save_single_file()
)
```

`FileDialog` has the fields `title`, `filename`, `location` and `filters`.
Without a title, the dialogs are titled "Open File", "Open Folder" or
"Save As". A leading `~` in `location` is expanded to the home directory;
with a location but no file name, the dialog starts at `location/Untitled`.

- `add_filter(description, extensions)` appends a `Filter` and returns the
  dialog, so calls can be chained. A filter with no extensions raises
  `ValueError`. Directory dialogs ignore filters.
- `remove_all_filters()` drops every filter.
- `show_open_single_file()` and `show_open_single_dir()` return a
  `pathlib.Path`, or `None` when cancelled.
- `show_open_multiple_file()` returns a list of paths, empty when cancelled.
- `show_save_single_file()` returns a path or `None`. When filters are set
  and the chosen name has no extension, or one the filters do not list, a
  warning box explains the problem and the dialog opens again at the chosen
  path.

The functions behind these methods, and the ones that build each tool's
command line, are in `nativedialog.gnu_file` and
`nativedialog.gnu_message`. Tool discovery (`should_use`,
`get_kdialog_version`, `get_zenity_version`) is in `nativedialog.backend`,
and `nativedialog.version.Version` parses and compares tool versions.

## Errors

Errors are subclasses of `nativedialog.errors.DialogError`:

- `NoImplementation` — neither `kdialog` nor `zenity` was found.
- `UnexpectedOutput` — a file dialog tool exited with a status other than
  0 or 1, or a message box tool was ended by a signal.
- `IoFailure` — a tool could not be started.
- `ImplementationError` — the Tk fallback could not be used or failed.

`InvalidString` is also defined there.

## Tour

To step through every kind of dialog:

```
nativedialog-tour
```

It asks whether to begin, then opens each file dialog in turn and shows
what each returned. On a `DialogError` it prints the error and exits with
status 1.

## What it does not do

Dialogs are shown only by running `kdialog` or `zenity` (and Tk for message
boxes); there are no macOS or Windows dialogs. A dialog cannot be attached
to a parent window, and there is no text-mode dialog when no display is
available.