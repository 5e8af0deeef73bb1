"""
Full-screen shell.

A ``Screen`` is a small state machine: it turns key events into state
changes and composes its current state into lines for a terminal size. It
never touches the terminal itself, which keeps dialogs testable without a
TTY. ``run_screen`` hosts a screen inside a prompt_toolkit application.
"""
from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional

from prompt_toolkit import Application
from prompt_toolkit.formatted_text import ANSI
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import FormattedTextControl, Layout, Window

from quarktui.config import ESCAPE_KEY_TIMEOUT, RESIZE_POLL_INTERVAL
from quarktui.core.keyboard import IGNORED_KEYS, KeypressEvent, from_key_press
from quarktui.core.terminal import TerminalSize, require_tty
from quarktui.utils.logging_config import get_logger

logger = get_logger(__name__)

ModalCallback = Callable[[Any], None]


class Screen(ABC):
    """Base class for everything that runs full-screen.

    Subclasses implement ``compose`` and ``on_key``. A screen may open
    another screen modally: while the modal is open it receives the keys and
    is drawn instead of its parent.
    """

    def __init__(self):
        self.result: Any = None
        self.closed = False
        self._modal: Optional["Screen"] = None
        self._modal_callback: Optional[ModalCallback] = None
        self._parent: Optional["Screen"] = None
        self._on_invalidate: Optional[Callable[[], None]] = None
        self._on_exit: Optional[Callable[[Any], None]] = None

    @abstractmethod
    def compose(self, size: TerminalSize) -> List[str]:
        """Lines to display for the given terminal size."""

    @abstractmethod
    def on_key(self, key: KeypressEvent) -> None:
        """React to one key press."""

    def on_mount(self) -> None:
        """Called once before the first frame is drawn."""

    def on_unmount(self) -> None:
        """Called once after the screen closed."""

    @property
    def modal(self) -> Optional["Screen"]:
        return self._modal

    def active(self) -> "Screen":
        """The innermost open modal, or this screen."""
        screen = self
        while screen._modal is not None:
            screen = screen._modal
        return screen

    def dispatch(self, key: KeypressEvent) -> None:
        """Route a key to the active screen."""
        target = self.active()
        if not target.closed:
            target.on_key(key)

    def render_active(self, size: TerminalSize) -> List[str]:
        return self.active().compose(size)

    def open_modal(self, screen: "Screen", on_close: Optional[ModalCallback] = None) -> None:
        """Show another screen on top of this one until it closes."""
        logger.debug(f"Opening modal {type(screen).__name__} over {type(self).__name__}")
        screen._parent = self
        self._modal = screen
        self._modal_callback = on_close
        screen.on_mount()
        self.invalidate()

    def _modal_closed(self, screen: "Screen") -> None:
        if self._modal is not screen:
            return
        callback = self._modal_callback
        self._modal = None
        self._modal_callback = None
        screen.on_unmount()
        logger.debug(f"Modal {type(screen).__name__} closed")
        if callback is not None:
            callback(screen.result)
        self.invalidate()

    def close(self, result: Any = None) -> None:
        """Finish this screen with a result; later calls are ignored."""
        if self.closed:
            return
        self.closed = True
        self.result = result
        if self._parent is not None:
            self._parent._modal_closed(self)
        elif self._on_exit is not None:
            self._on_exit(result)

    def invalidate(self) -> None:
        """Ask the host to redraw."""
        if self._parent is not None:
            self._parent.invalidate()
        elif self._on_invalidate is not None:
            self._on_invalidate()

    def attach(self, on_invalidate: Callable[[], None], on_exit: Callable[[Any], None]) -> None:
        """Connect the screen to whatever is hosting it."""
        self._on_invalidate = on_invalidate
        self._on_exit = on_exit


def _terminal_size(app: Application) -> TerminalSize:
    size = app.output.get_size()
    return TerminalSize(size.columns, size.rows)


def run_screen(screen: Screen) -> Any:
    """Run a screen full-screen until it closes.

    Args:
        screen: The screen to host

    Returns:
        The value the screen was closed with

    Raises:
        TerminalError: If stdin/stdout are not terminals
    """
    require_tty()

    def get_text():
        lines = screen.render_active(_terminal_size(app))
        return ANSI("\n".join(lines))

    kb = KeyBindings()

    @kb.add(Keys.Any)
    def _(event):
        """Hand every key press to the screen."""
        for key_press in event.key_sequence:
            if key_press.key in IGNORED_KEYS:
                continue
            screen.dispatch(from_key_press(key_press))
            if screen.closed:
                break

    app = Application(
        layout=Layout(Window(FormattedTextControl(get_text, show_cursor=False), wrap_lines=False)),
        key_bindings=kb,
        full_screen=True,
        refresh_interval=RESIZE_POLL_INTERVAL,
    )
    app.ttimeoutlen = ESCAPE_KEY_TIMEOUT

    def exit_app(result: Any) -> None:
        if not app.is_running or app.future is None or app.future.done():
            return
        if app.loop is not None:
            app.loop.call_soon_threadsafe(lambda: app.future.done() or app.exit(result=result))
        else:
            app.exit(result=result)

    screen.attach(app.invalidate, exit_app)
    logger.debug(f"Starting screen {type(screen).__name__}")
    screen.on_mount()
    try:
        if screen.closed:
            return screen.result
        app.run()
    finally:
        screen.on_unmount()
        logger.debug(f"Screen {type(screen).__name__} finished")
    return screen.result
