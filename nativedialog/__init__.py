"""File and message dialogs shown through kdialog or zenity, with a Tk fallback for message boxes."""

__version__ = "0.1.0"