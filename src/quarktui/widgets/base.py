"""
Widget contract.

Every widget turns itself into display lines for a given size budget. The
budget travels in a ``RenderContext``; widgets keep only the configuration
they were constructed with and never mutate it while rendering.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import List, Optional

from quarktui.core.style import StyleSpec, style_spec
from quarktui.core.theme import Theme


@dataclass(frozen=True)
class RenderContext:
    """Size budget (and optionally the theme) for one render pass."""
    inner_width: int
    content_height: int = 0
    theme: Optional[Theme] = None

    def __post_init__(self):
        # Negative space collapses to zero-width output instead of failing
        if self.inner_width < 0:
            object.__setattr__(self, "inner_width", 0)
        if self.content_height < 0:
            object.__setattr__(self, "content_height", 0)

    def with_width(self, inner_width: int) -> "RenderContext":
        """Child context with a different width and the same theme."""
        return replace(self, inner_width=max(0, inner_width))

    def styled(self, text: str, spec: StyleSpec) -> str:
        """Apply a style spec against this context's theme."""
        return style_spec(text, spec, theme=self.theme)


class Widget(ABC):
    """Base class for everything that can be rendered into lines."""

    kind: str = "widget"

    @abstractmethod
    def render(self, ctx: RenderContext) -> List[str]:
        """Render to an ordered list of display lines."""

    def __repr__(self):
        return f"<{type(self).__name__} kind={self.kind!r}>"


def is_widget(obj) -> bool:
    return isinstance(obj, Widget)
