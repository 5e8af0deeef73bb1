"""
Low-level terminal operations.

Escape sequences for screen and cursor control, terminal size detection and a
render buffer. The buffer is a plain value owned by whoever is drawing: it
collects output and is flushed in one write to avoid flicker.
"""
import shutil
import sys
from typing import List, NamedTuple, TextIO

from quarktui.config import TERMINAL_FALLBACK_HEIGHT, TERMINAL_FALLBACK_WIDTH
from quarktui.core.exceptions import TerminalError

# Screen control
CLEAR_SCREEN = "\x1b[2J\x1b[H"
CLEAR_TO_END = "\x1b[J"
CLEAR_LINE = "\x1b[2K"

# Cursor control
HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
SAVE_CURSOR = "\x1b[s"
RESTORE_CURSOR = "\x1b[u"

# Alternate screen buffer
ENTER_ALTERNATE_SCREEN = "\x1b[?1049h"
LEAVE_ALTERNATE_SCREEN = "\x1b[?1049l"

BELL = "\x07"


class TerminalSize(NamedTuple):
    """Terminal dimensions in character cells."""
    width: int
    height: int


def get_terminal_size() -> TerminalSize:
    """Get the current terminal size, falling back to 80x24."""
    size = shutil.get_terminal_size((TERMINAL_FALLBACK_WIDTH, TERMINAL_FALLBACK_HEIGHT))
    return TerminalSize(size.columns or TERMINAL_FALLBACK_WIDTH, size.lines or TERMINAL_FALLBACK_HEIGHT)


def is_tty() -> bool:
    """Check if stdout is an interactive terminal."""
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


def is_input_tty() -> bool:
    """Check if stdin is an interactive terminal."""
    return hasattr(sys.stdin, "isatty") and sys.stdin.isatty()


def require_tty() -> None:
    """Raise TerminalError unless both stdin and stdout are terminals."""
    if not is_input_tty():
        raise TerminalError("An interactive terminal is required", stream="stdin")
    if not is_tty():
        raise TerminalError("An interactive terminal is required", stream="stdout")


class RenderBuffer:
    """Collects terminal output so a whole frame is written at once.

    Example:
        buffer = RenderBuffer()
        buffer.clear_screen()
        buffer.hide_cursor()
        for line in lines:
            buffer.write_line(line)
        buffer.flush()
    """

    def __init__(self):
        self._parts: List[str] = []

    def write(self, text: str) -> "RenderBuffer":
        self._parts.append(text)
        return self

    def write_line(self, text: str = "") -> "RenderBuffer":
        self._parts.append(text + "\n")
        return self

    def write_lines(self, lines: List[str]) -> "RenderBuffer":
        for line in lines:
            self.write_line(line)
        return self

    def clear_screen(self) -> "RenderBuffer":
        return self.write(CLEAR_SCREEN)

    def clear_to_end(self) -> "RenderBuffer":
        return self.write(CLEAR_TO_END)

    def clear_line(self) -> "RenderBuffer":
        return self.write(CLEAR_LINE)

    def hide_cursor(self) -> "RenderBuffer":
        return self.write(HIDE_CURSOR)

    def show_cursor(self) -> "RenderBuffer":
        return self.write(SHOW_CURSOR)

    def move_cursor(self, row: int, col: int) -> "RenderBuffer":
        """Move to a 1-based row/column."""
        return self.write(f"\x1b[{row};{col}H")

    def move_cursor_up(self, n: int = 1) -> "RenderBuffer":
        return self.write(f"\x1b[{n}A")

    def move_cursor_down(self, n: int = 1) -> "RenderBuffer":
        return self.write(f"\x1b[{n}B")

    def save_cursor(self) -> "RenderBuffer":
        return self.write(SAVE_CURSOR)

    def restore_cursor(self) -> "RenderBuffer":
        return self.write(RESTORE_CURSOR)

    def enter_alternate_screen(self) -> "RenderBuffer":
        return self.write(ENTER_ALTERNATE_SCREEN)

    def leave_alternate_screen(self) -> "RenderBuffer":
        return self.write(LEAVE_ALTERNATE_SCREEN)

    def bell(self) -> "RenderBuffer":
        return self.write(BELL)

    def getvalue(self) -> str:
        return "".join(self._parts)

    def cancel(self) -> None:
        """Discard everything collected so far."""
        self._parts = []

    def flush(self, stream: TextIO = None) -> None:
        """Write the collected output in a single call and empty the buffer."""
        stream = stream or sys.stdout
        if self._parts:
            stream.write(self.getvalue())
            stream.flush()
        self._parts = []

    def __len__(self):
        return len(self._parts)
