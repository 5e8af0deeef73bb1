"""
Row widget.

Arranges other widgets side by side. Each child is rendered at its natural
width and only its first line is used.
"""
from typing import List, Sequence

from quarktui.core.exceptions import WidgetDefinitionError
from quarktui.widgets.base import RenderContext, Widget, is_widget
from quarktui.widgets.layout import align_text, fit_line


class Row(Widget):
    """Horizontal layout of single-line widgets.

    Example:
        Row([Text("BPM:", style="dim"), Text("120", style="bold")], gap=1)
    """

    kind = "row"

    def __init__(self, items: Sequence[Widget], gap: int = 1, align: str = "left"):
        for index, item in enumerate(items):
            if not is_widget(item):
                raise WidgetDefinitionError(
                    f"Row items must be widgets, got {type(item).__name__}", widget=self.kind, index=index
                )
        self.items = list(items)
        self.gap = max(0, gap)
        self.align = align

    def render(self, ctx: RenderContext) -> List[str]:
        natural = ctx.with_width(0)
        parts = []
        for item in self.items:
            lines = item.render(natural)
            parts.append(lines[0] if lines else "")
        line = align_text((" " * self.gap).join(parts), ctx.inner_width, self.align)
        return [fit_line(line, ctx.inner_width)]
