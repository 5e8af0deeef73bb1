"""
Component base class.

A component is a window described as a class: it renders widgets instead
of raw lines, handles keys in a method and gets a service object (whatever
the application wants to share with its screens) through the constructor.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Generic, List, Optional, TypeVar

from quarktui.core.keyboard import KeypressEvent
from quarktui.dialogs.help import HelpContent
from quarktui.renderer import render
from quarktui.screen import ModalCallback, Screen
from quarktui.widgets.base import RenderContext, Widget
from quarktui.window import Window, WindowActions, WindowConfig

ServiceT = TypeVar("ServiceT")


@dataclass
class ComponentConfig:
    title: str
    hints: List[str] = field(default_factory=lambda: ["q/⌫ Back"])
    subtitle: Optional[str] = None
    description: Optional[str] = None
    help_content: Optional[HelpContent] = None
    center_content: bool = True


class Component(ABC, Generic[ServiceT]):
    """Base class for class-based screens.

    Example:
        class CounterScreen(Component[Counter]):
            config = ComponentConfig(title="Counter", hints=["+ Increment", "q Back"])

            def render(self, ctx):
                return [Text(str(self.service.value), align="center")]

            def on_keypress(self, key):
                if key.char == "+":
                    self.service.value += 1
                    self.redraw()
                    return True
                return False

        CounterScreen(Counter()).run()
    """

    config: ComponentConfig

    def __init__(self, service: ServiceT = None):
        self.service = service
        self._actions: Optional[WindowActions] = None

    @abstractmethod
    def render(self, ctx: RenderContext) -> List[Widget]:
        """Widgets making up the content area."""

    def on_mount(self) -> None:
        pass

    def on_unmount(self) -> None:
        pass

    def on_keypress(self, key: KeypressEvent) -> bool:
        """Handle a key; return True to stop the window's default handling."""
        return False

    def redraw(self) -> None:
        if self._actions:
            self._actions.redraw()

    def close(self) -> None:
        if self._actions:
            self._actions.close()

    def open_modal(self, screen: Screen, on_close: Optional[ModalCallback] = None) -> None:
        if self._actions:
            self._actions.open_modal(screen, on_close)

    def _mount(self, actions: WindowActions) -> None:
        self._actions = actions
        self.on_mount()

    def _unmount(self) -> None:
        self.on_unmount()
        self._actions = None

    def build_window(self) -> Window:
        """The window hosting this component."""
        config = self.config
        return Window(WindowConfig(
            title=config.title,
            hints=config.hints,
            subtitle=config.subtitle,
            description=config.description,
            help_content=config.help_content,
            center_content=config.center_content,
            on_render=lambda ctx: render(self.render(ctx), ctx),
            on_keypress=lambda key, actions: self.on_keypress(key),
            on_mount=self._mount,
            on_unmount=self._unmount,
        ))

    def run(self) -> Any:
        return self.build_window().run()
