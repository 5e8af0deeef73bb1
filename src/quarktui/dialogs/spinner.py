"""
Spinner dialog.

An animated frame shown while work happens elsewhere. The animation runs
in a background thread and redraws the frame through a render buffer; the
controller returned by ``show_spinner`` updates the message and stops it.
"""
import threading
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, TextIO, TypeVar

from quarktui.config import (SPINNER_FRAME_MAX_WIDTH,
                             SPINNER_FRAME_WIDTH_PERCENT, SPINNER_INTERVAL,
                             THREAD_SHUTDOWN_TIMEOUT)
from quarktui.core.drawing import calculate_frame_width
from quarktui.core.style import style
from quarktui.core.terminal import RenderBuffer, TerminalSize, get_terminal_size
from quarktui.dialogs.shared import DialogFrame
from quarktui.utils.logging_config import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

SPINNER_DOTS = ["⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏"]
SPINNER_LINE = ["-", "\\", "|", "/"]
SPINNER_ARC = ["◜", "◠", "◝", "◞", "◡", "◟"]
SPINNER_CIRCLE = ["◐", "◓", "◑", "◒"]
SPINNER_BOX = ["▖", "▘", "▝", "▗"]
SPINNER_BOUNCE = ["⠁", "⠂", "⠄", "⠂"]
SPINNER_BAR = ["▏", "▎", "▍", "▌", "▋", "▊", "▉", "█", "▉", "▊", "▋", "▌", "▍", "▎", "▏"]

SPINNER_FRAME_SETS: Sequence[List[str]] = (
    SPINNER_DOTS, SPINNER_LINE, SPINNER_ARC, SPINNER_CIRCLE, SPINNER_BOX, SPINNER_BOUNCE, SPINNER_BAR,
)


@dataclass
class SpinnerOptions:
    message: str
    title: Optional[str] = None
    frames: List[str] = field(default_factory=lambda: list(SPINNER_DOTS))
    interval: float = SPINNER_INTERVAL


def build_spinner(
    options: SpinnerOptions,
    status_line: str,
    size: Optional[TerminalSize] = None,
) -> List[str]:
    """Lay out the spinner frame around one status line."""
    size = size or get_terminal_size()
    frame = DialogFrame(size, frame_width=calculate_frame_width(
        SPINNER_FRAME_MAX_WIDTH, SPINNER_FRAME_WIDTH_PERCENT, size
    ))
    frame.top()
    frame.empty()
    if options.title:
        frame.centered(style(options.title, "bold", "accent"))
        frame.empty()
        frame.divider()
    frame.centered(status_line)
    if options.title:
        frame.divider()
    frame.empty()
    frame.bottom()
    return frame.finish()


class SpinnerController:
    """Handle on a running spinner."""

    def __init__(self, options: SpinnerOptions, stream: Optional[TextIO] = None):
        self.options = options
        self.message = options.message
        self.stream = stream
        self.frame_index = 0
        self._lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def stopped(self) -> bool:
        return self._stop_event.is_set()

    def current_frame(self) -> str:
        frames = self.options.frames or ["●"]
        return frames[self.frame_index % len(frames)]

    def lines(self, size: Optional[TerminalSize] = None) -> List[str]:
        status = f"{style(self.current_frame(), 'highlight')} {self.message}"
        return build_spinner(self.options, status, size)

    def _draw(self, lines: List[str], show_cursor: bool = False) -> None:
        buffer = RenderBuffer().clear_screen().hide_cursor()
        buffer.write("\n".join(lines))
        if show_cursor:
            buffer.show_cursor()
        with self._lock:
            buffer.flush(self.stream)

    def _animate(self) -> None:
        while not self._stop_event.wait(self.options.interval):
            self.frame_index += 1
            self._draw(self.lines())

    def start(self) -> "SpinnerController":
        logger.debug(f"Starting spinner: {self.message}")
        self._draw(self.lines())
        self._thread = threading.Thread(target=self._animate, daemon=True)
        self._thread.start()
        return self

    def update(self, message: str) -> None:
        if self.stopped:
            return
        self.message = message
        self._draw(self.lines())

    def stop(self, final_message: Optional[str] = None) -> None:
        """Stop the animation, optionally showing a final success line."""
        if self.stopped:
            return
        self._stop_event.set()
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join(THREAD_SHUTDOWN_TIMEOUT)
        logger.debug(f"Spinner stopped: {final_message or self.message}")

        if final_message:
            status = f"{style('✓', 'success')} {final_message}"
            self._draw(build_spinner(self.options, status), show_cursor=True)
        else:
            with self._lock:
                RenderBuffer().show_cursor().flush(self.stream)


def show_spinner(options, stream: Optional[TextIO] = None) -> SpinnerController:
    """Start a spinner.

    Args:
        options: A message string or SpinnerOptions
        stream: Output stream (defaults to stdout)

    Returns:
        The running spinner's controller
    """
    if isinstance(options, str):
        options = SpinnerOptions(message=options)
    return SpinnerController(options, stream).start()


def with_spinner(message: str, operation: Callable[[], T], success_message: Optional[str] = None) -> T:
    """Run an operation while a spinner is shown.

    The spinner stops whether the operation succeeds or raises; errors are
    re-raised.
    """
    spinner = show_spinner(message)
    try:
        result = operation()
    except Exception:
        spinner.stop()
        raise
    spinner.stop(success_message)
    return result

