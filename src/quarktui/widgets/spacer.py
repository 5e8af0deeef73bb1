"""
Spacer widget: blank lines.
"""
from typing import List

from quarktui.widgets.base import RenderContext, Widget


class Spacer(Widget):
    kind = "spacer"

    def __init__(self, lines: int = 1):
        self.lines = max(0, lines)

    def render(self, ctx: RenderContext) -> List[str]:
        return [""] * self.lines
