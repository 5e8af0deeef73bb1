"""
Text widget.

The fundamental text display widget: a styled string aligned inside the
available width, wrapped when it does not fit.
"""
from typing import List

from quarktui.core.style import StyleSpec
from quarktui.widgets.base import RenderContext, Widget
from quarktui.widgets.layout import align_text, wrap_lines


class Text(Widget):
    """A styled, aligned line (or paragraph) of text.

    Example:
        Text("Title", align="center", style=("bold", "accent"))
    """

    kind = "text"

    def __init__(self, content: str, align: str = "left", style: StyleSpec = None, wrap: bool = True):
        self.content = content
        self.align = align
        self.style = style
        self.wrap = wrap

    def render(self, ctx: RenderContext) -> List[str]:
        if self.wrap:
            lines = wrap_lines(self.content, ctx.inner_width)
        else:
            lines = self.content.split("\n")
        return [align_text(ctx.styled(line, self.style), ctx.inner_width, self.align) for line in lines]
