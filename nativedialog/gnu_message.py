"""Message boxes shown through kdialog or zenity."""

from __future__ import annotations

from .backend import Backend, Tool, get_kdialog_version, get_zenity_version, should_use
from .errors import NoImplementation, UnexpectedOutput
from .model import MessageType
from .version import Version


def escape_pango_entities(text: str) -> str:
    """Escape the five entities that GMarkup understands."""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&apos;")
    )


def convert_qt_text_document(text: str, kdialog_version: Version | None) -> str:
    """Prepare text for kdialog, which renders it as a Qt rich-text document."""
    converted = (
        text.replace("\n", "<br>")
        .replace("\t", " ")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
    )
    if kdialog_version is not None and kdialog_version < (19, 0, 0):
        converted = converted.replace("&", "&amp;").replace('"', "&quot;")
    return converted


def kdialog_message_arguments(
    title: str,
    text: str,
    typ: MessageType,
    ask: bool,
    kdialog_version: Version | None,
) -> list[str]:
    """Command-line arguments for a kdialog message box."""
    return [
        "--yesno" if ask else "--msgbox",
        convert_qt_text_document(text, kdialog_version),
        "--title",
        title,
        f"--icon={typ.icon_name}",
    ]


def zenity_message_arguments(
    title: str,
    text: str,
    typ: MessageType,
    ask: bool,
    zenity_version: Version | None,
) -> list[str]:
    """Command-line arguments for a zenity message box."""
    args = ["--width=400"]
    if ask:
        # The option was renamed in zenity 3.90.0.
        old = zenity_version is not None and zenity_version < (3, 90, 0)
        args += ["--question", "--icon-name" if old else "--icon", typ.icon_name]
    else:
        args.append(f"--{typ.value}")
    args += ["--title", title, "--text", escape_pango_entities(text)]
    return args


def _show(title: str, text: str, typ: MessageType, ask: bool) -> bool:
    backend: Backend | None = should_use()
    if backend is None:
        raise NoImplementation()
    if backend.tool is Tool.KDIALOG:
        args = kdialog_message_arguments(title, text, typ, ask, get_kdialog_version())
    else:
        version = get_zenity_version() if ask else None
        args = zenity_message_arguments(title, text, typ, ask, version)
    result = backend.run(args)
    if result.returncode < 0:
        raise UnexpectedOutput(backend.tool.value)
    return result.returncode == 0


def message_alert(title: str, text: str, typ: MessageType = MessageType.INFO) -> None:
    """Show a message with a single button."""
    _show(title, text, typ, ask=False)


def message_confirm(title: str, text: str, typ: MessageType = MessageType.INFO) -> bool:
    """Ask a yes/no question; True means yes."""
    return _show(title, text, typ, ask=True)