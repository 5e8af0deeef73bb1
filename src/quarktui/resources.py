"""
UI resources for quarktui.

Icons, the demo banner and the message formatting helpers used by the
command-line entry point.
"""


class Icons:
    """Icons shared by the dialogs, pickers and the demo."""
    CHECK = "✓"
    CROSS = "✗"
    WARNING = "!"
    INFO = "●"
    ERROR = "❌"
    POINTER = "❯"
    BULLET = "•"
    FOLDER = "📁"
    PARENT = "📂"
    FILE = "📄"
    HELP = "?"
    BYE = "👋"


BANNER = r"""
  __ _ _   _  __ _ _ __| | _| |_ _   _(_)
 / _` | | | |/ _` | '__| |/ / __| | | | |
| (_| | |_| | (_| | |  |   <| |_| |_| | |
 \__, |\__,_|\__,_|_|  |_|\_\\__|\__,_|_|
    |_|
"""

DEMO_DESCRIPTION = "Showcase of the quarktui widgets and dialogs"

DEMO_CHOICES = ["widgets", "select", "confirm", "input", "multiselect", "spinner", "file", "folder"]


def format_error_message(message: str) -> str:
    """Format an error message for the terminal.

    Args:
        message: The error message content

    Returns:
        Formatted error message string
    """
    return f"\n{Icons.ERROR} {message}"


def format_warning_message(message: str) -> str:
    """Format a warning message for the terminal.

    Args:
        message: The warning message content

    Returns:
        Formatted warning message string
    """
    return f"\n{Icons.WARNING} {message}"


def format_info_message(message: str) -> str:
    return f"\n{Icons.INFO} {message}"
