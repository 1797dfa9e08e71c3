"""Terminal output for podsmith commands.

Status lines share one shape: a bracketed label followed by the message,
styled through ``custom_theme``. Messages are escaped, so paths and
remote error text print literally. Every status line is also mirrored to
the log file. Spec text read from disk goes through print_raw() so that
Ruby hashes such as ``{ :git => '[bold]' }`` are never parsed as markup.
"""

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

from podsmith import __version__

custom_theme = Theme(
    {
        "error": "bold red",
        "success": "bold green",
        "warning": "bold yellow",
        "info": "bold blue",
        "header": "bold magenta",
        "step": "bold cyan",
        "path": "underline",
    }
)

console = Console(theme=custom_theme)
console_err = Console(theme=custom_theme, stderr=True)

# label style -> body colour
_BODY_COLOURS = {
    "error": "red",
    "success": "green",
    "warning": "yellow",
    "info": "cyan",
}


def _status(kind: str, message: str, *, target: Console | None = None) -> None:
    from podsmith.utils.logging import log_message

    colour = _BODY_COLOURS[kind]
    label = kind.upper()
    body = f"[{colour}]{escape(message)}[/{colour}]"
    (target or console).print(f"[{kind}][[{label}]][/{kind}] {body}")
    log_message(f"{label}: {message}")


def print_error(message: str) -> None:
    """Report a failure on stderr."""
    _status("error", message, target=console_err)


def print_success(message: str) -> None:
    _status("success", message)


def print_warning(message: str) -> None:
    _status("warning", message)


def print_info(message: str) -> None:
    _status("info", message)


def print_header(title: str) -> None:
    """Print a section title surrounded by blank lines."""
    console.print()
    console.print(f"[header]=== {title} ===[/header]")
    console.print()


def print_step(message: str) -> None:
    """Announce one unit of work, e.g. validating a single podspec."""
    console.print(f"[step]->[/step] {escape(message)}")


def print_raw(text: str) -> None:
    """Write text exactly as given."""
    console.out(text, highlight=False)


def show_version() -> None:
    console.print(f"[bold]PODSMITH[/bold] v{__version__}")


__all__ = [
    "console",
    "console_err",
    "custom_theme",
    "print_error",
    "print_success",
    "print_warning",
    "print_info",
    "print_header",
    "print_step",
    "print_raw",
    "show_version",
]
