"""
Window shell.

A window is the standard full-screen frame: a header with title and
description, a content area filled by a render callback, and a footer of
key hints. Back keys close it, the help key opens its help page.
"""
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

from quarktui.config import (WINDOW_BORDER_LINES, WINDOW_FOOTER_LINES,
                             WINDOW_HEADER_LINES)
from quarktui.core.drawing import FrameBuilder, get_frame_dimensions, get_padding
from quarktui.core.keyboard import KeypressEvent, is_back_key, is_help_key
from quarktui.core.style import style
from quarktui.core.terminal import TerminalSize
from quarktui.dialogs.help import HelpContent, HelpScreen
from quarktui.dialogs.shared import PAD, fit_body, format_hints
from quarktui.screen import ModalCallback, Screen, run_screen
from quarktui.utils.logging_config import get_logger
from quarktui.widgets.base import RenderContext

logger = get_logger(__name__)

# Header, divider under it, footer with its divider, top and bottom border
WINDOW_CHROME_LINES = WINDOW_HEADER_LINES + 1 + WINDOW_FOOTER_LINES + WINDOW_BORDER_LINES


class WindowActions:
    """What a window's callbacks may do to the window."""

    def __init__(self, window: "Window"):
        self._window = window

    def redraw(self) -> None:
        self._window.invalidate()

    def close(self) -> None:
        self._window.close()

    def open_modal(self, screen: Screen, on_close: Optional[ModalCallback] = None) -> None:
        self._window.open_modal(screen, on_close)


@dataclass
class WindowConfig:
    """Configuration of a window.

    ``on_render`` returns the content lines for a render context.
    ``on_keypress`` runs before the built-in keys and returns True when it
    consumed the key.
    """
    title: str
    hints: List[str] = field(default_factory=lambda: ["q/⌫ Back"])
    subtitle: Optional[str] = None
    description: Optional[str] = None
    help_content: Optional[HelpContent] = None
    center_content: bool = True
    on_render: Optional[Callable[[RenderContext], List[str]]] = None
    on_keypress: Optional[Callable[[KeypressEvent, WindowActions], bool]] = None
    on_mount: Optional[Callable[[WindowActions], Any]] = None
    on_unmount: Optional[Callable[[], Any]] = None


def window_context(size: TerminalSize) -> RenderContext:
    """Render context for the content area of a window."""
    dims = get_frame_dimensions(size)
    return RenderContext(dims.inner_width, max(1, dims.height - WINDOW_CHROME_LINES))


class Window(Screen):
    """Standard full-screen window driven by a WindowConfig."""

    def __init__(self, config: WindowConfig):
        super().__init__()
        self.config = config
        self.actions = WindowActions(self)

    def _call(self, name: str, callback: Callable, *args):
        try:
            return callback(*args)
        except Exception:
            logger.error(f"{name} callback of window '{self.config.title}' failed", exc_info=True)
            raise

    def compose(self, size: TerminalSize) -> List[str]:
        config = self.config
        ctx = window_context(size)
        frame = FrameBuilder(ctx.inner_width, margin=get_padding().x)

        title = style(config.title, "bold", "accent")
        if config.subtitle:
            title += "  " + style(config.subtitle, "dim")

        lines = [frame.top_border(), frame.empty(), frame.centered(title)]
        if config.description:
            lines.append(frame.centered(style(config.description, "muted")))
        else:
            lines.append(frame.empty())
        lines.extend([frame.empty(), frame.divider()])

        content = self._call("render", config.on_render, ctx) if config.on_render else []
        for line in fit_body(list(content), ctx.content_height):
            if config.center_content and line:
                lines.append(frame.centered(line))
            else:
                lines.append(frame.line(line))

        lines.extend([
            frame.divider(),
            frame.empty(),
            frame.line(PAD + format_hints(config.hints)),
            frame.empty(),
            frame.bottom_border(),
        ])
        return [""] * get_padding().y + lines

    def on_key(self, key: KeypressEvent) -> None:
        if self.config.on_keypress and self._call("keypress", self.config.on_keypress, key, self.actions):
            return
        if self.config.help_content and is_help_key(key):
            self.open_modal(HelpScreen(self.config.help_content))
            return
        if is_back_key(key):
            self.close()

    def on_mount(self) -> None:
        if self.config.on_mount:
            self._call("mount", self.config.on_mount, self.actions)

    def on_unmount(self) -> None:
        if self.config.on_unmount:
            self._call("unmount", self.config.on_unmount)

    def run(self) -> Any:
        """Show the window until it is closed."""
        return run_screen(self)


def create_window(config: WindowConfig) -> Window:
    return Window(config)
