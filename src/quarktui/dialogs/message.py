"""
Message dialogs.

Informational frames (info, success, warning, error) that are drawn once.
The waiting variants block until a key is pressed.
"""
from typing import Dict, List, Optional, Sequence, TextIO, Tuple

from quarktui.core.keyboard import wait_for_keypress
from quarktui.core.style import style
from quarktui.core.terminal import RenderBuffer, TerminalSize, get_terminal_size
from quarktui.dialogs.shared import PAD, DialogFrame

# type -> (icon, theme role)
MESSAGE_TYPES: Dict[str, Tuple[str, str]] = {
    "info": ("●", "info"),
    "success": ("✓", "success"),
    "warning": ("!", "warning"),
    "error": ("✗", "error"),
}


def build_message(
    title: str,
    lines: Sequence[str],
    message_type: str = "info",
    wait_for_key: bool = True,
    center_lines: bool = False,
    size: Optional[TerminalSize] = None,
) -> List[str]:
    """Lay out a message frame, centred vertically on the terminal."""
    size = size or get_terminal_size()
    icon, role = MESSAGE_TYPES.get(message_type, MESSAGE_TYPES["info"])
    icon = style(icon, role)

    frame = DialogFrame(size)
    frame.top()
    frame.header(f"{icon} {style(title, 'bold')}" if title else icon)
    frame.divider()
    for line in lines:
        if center_lines:
            frame.centered(line)
        else:
            frame.line(PAD + line)
    frame.empty()
    frame.divider()
    frame.empty()
    if wait_for_key:
        frame.line(PAD + style("Press any key to continue...", "dim"))
    frame.empty()
    frame.bottom()
    return frame.finish(center=True)


def _draw(lines: List[str], stream: Optional[TextIO] = None) -> None:
    buffer = RenderBuffer()
    buffer.clear_screen().hide_cursor()
    buffer.write("\n".join(lines))
    buffer.flush(stream)


def show_message(title: str, lines: Sequence[str], message_type: str = "info", stream: Optional[TextIO] = None) -> None:
    """Draw a message and return immediately."""
    _draw(build_message(title, lines, message_type, wait_for_key=False), stream)


def show_message_and_wait(title: str, lines: Sequence[str], message_type: str = "info") -> None:
    """Draw a message and block until a key is pressed."""
    _draw(build_message(title, lines, message_type, wait_for_key=True))
    try:
        wait_for_keypress()
    finally:
        RenderBuffer().show_cursor().flush()


def message(
    title: str,
    lines: Sequence[str],
    message_type: str = "info",
    wait_for_key: bool = True,
    center_lines: bool = False,
) -> None:
    """Draw a message with full control over the layout."""
    _draw(build_message(title, lines, message_type, wait_for_key, center_lines))
    if wait_for_key:
        try:
            wait_for_keypress()
        finally:
            RenderBuffer().show_cursor().flush()


def info(title: str, *lines: str) -> None:
    show_message_and_wait(title, lines, "info")


def success(title: str, *lines: str) -> None:
    show_message_and_wait(title, lines, "success")


def warning(title: str, *lines: str) -> None:
    show_message_and_wait(title, lines, "warning")


def error(title: str, *lines: str) -> None:
    show_message_and_wait(title, lines, "error")
