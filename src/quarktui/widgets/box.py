"""
Box widget.

Wraps strings and widgets in a bordered panel. A title and a footer can be
embedded in the top and bottom border lines.
"""
from typing import Dict, List, Optional, Sequence, Union

from quarktui.core.exceptions import WidgetDefinitionError
from quarktui.core.style import StyleSpec, repeat, visible_length
from quarktui.widgets.base import RenderContext, Widget, is_widget
from quarktui.widgets.layout import align_text, fit_line, wrap_text

BOX_STYLES: Dict[str, Dict[str, str]] = {
    "rounded": {"top_left": "╭", "top_right": "╮", "bottom_left": "╰", "bottom_right": "╯",
                "horizontal": "─", "vertical": "│"},
    "sharp": {"top_left": "┌", "top_right": "┐", "bottom_left": "└", "bottom_right": "┘",
              "horizontal": "─", "vertical": "│"},
    "double": {"top_left": "╔", "top_right": "╗", "bottom_left": "╚", "bottom_right": "╝",
               "horizontal": "═", "vertical": "║"},
    "thick": {"top_left": "┏", "top_right": "┓", "bottom_left": "┗", "bottom_right": "┛",
              "horizontal": "━", "vertical": "┃"},
    "dashed": {"top_left": "┌", "top_right": "┐", "bottom_left": "└", "bottom_right": "┘",
               "horizontal": "╌", "vertical": "╎"},
    "ascii": {"top_left": "+", "top_right": "+", "bottom_left": "+", "bottom_right": "+",
              "horizontal": "-", "vertical": "|"},
    "none": {"top_left": " ", "top_right": " ", "bottom_left": " ", "bottom_right": " ",
             "horizontal": " ", "vertical": " "},
}

BoxContent = Union[str, Widget, Sequence[Union[str, Widget]]]


class Box(Widget):
    """Bordered panel around strings and widgets.

    Without an explicit ``width`` the box sizes itself to its content (plus
    padding, and wide enough for title and footer), capped by ``max_width``
    and the available width. Lines that do not fit are word-wrapped.

    Example:
        Box(["Line one", Text("Line two", style="dim")], title="Details", style="double")
    """

    kind = "box"

    def __init__(
        self,
        content: BoxContent,
        style: str = "rounded",
        title: Optional[str] = None,
        title_align: str = "left",
        title_style: StyleSpec = "bold",
        footer: Optional[str] = None,
        footer_align: str = "left",
        footer_style: StyleSpec = "dim",
        padding_x: int = 1,
        padding_y: int = 0,
        border_style: StyleSpec = "border",
        width: Optional[int] = None,
        min_width: int = 1,
        max_width: Optional[int] = None,
        content_align: str = "left",
        align: str = "left",
    ):
        items = list(content) if isinstance(content, (list, tuple)) else [content]
        for index, item in enumerate(items):
            if not (isinstance(item, str) or is_widget(item)):
                raise WidgetDefinitionError(
                    f"Box content must be strings or widgets, got {type(item).__name__}",
                    widget=self.kind,
                    index=index,
                )
        self.items = items
        self.chars = BOX_STYLES.get(style, BOX_STYLES["rounded"])
        self.title = title
        self.title_align = title_align
        self.title_style = title_style
        self.footer = footer
        self.footer_align = footer_align
        self.footer_style = footer_style
        self.padding_x = max(0, padding_x)
        self.padding_y = max(0, padding_y)
        self.border_style = border_style
        self.width = width
        self.min_width = max(0, min_width)
        self.max_width = max_width
        self.content_align = content_align
        self.align = align

    @classmethod
    def of(cls, text: str, **options) -> "Box":
        """Shorthand for a box around a single string."""
        return cls(text, **options)

    def _content_lines(self, ctx: RenderContext) -> List[str]:
        lines: List[str] = []
        for item in self.items:
            if isinstance(item, str):
                lines.extend(item.split("\n"))
            else:
                # Alignment padding is re-applied inside the box
                lines.extend(line.rstrip(" ") for line in item.render(ctx))
        return lines

    def _border_line(self, ctx: RenderContext, inner_width: int, left: str, right: str,
                     label: Optional[str], label_align: str, label_style: StyleSpec) -> str:
        border = self.border_style
        horizontal = self.chars["horizontal"]
        if not label:
            return ctx.styled(left + repeat(horizontal, inner_width) + right, border)

        label_text = f" {label} "
        remaining = max(0, inner_width - visible_length(label_text))
        if label_align == "left":
            left_len = min(1, remaining)
        elif label_align == "right":
            left_len = max(0, remaining - 1)
        else:
            left_len = remaining // 2
        right_len = remaining - left_len
        return (
            ctx.styled(left + repeat(horizontal, left_len), border)
            + ctx.styled(label_text, label_style)
            + ctx.styled(repeat(horizontal, right_len) + right, border)
        )

    def render(self, ctx: RenderContext) -> List[str]:
        chars = self.chars
        padding = self.padding_x * 2
        max_width = min(self.max_width, ctx.inner_width) if self.max_width else ctx.inner_width
        max_content = max(0, max_width - 2 - padding)

        content_lines: List[str] = []
        for line in self._content_lines(ctx.with_width(max_content)):
            if visible_length(line) > max_content:
                content_lines.extend(wrap_text(line, max_content))
            else:
                content_lines.append(line)

        if self.width is not None:
            inner_width = max(self.min_width, self.width - 2)
        else:
            inner_width = max([visible_length(line) for line in content_lines] + [0]) + padding
            if self.title:
                inner_width = max(inner_width, visible_length(self.title) + 4)
            if self.footer:
                inner_width = max(inner_width, visible_length(self.footer) + 4)
            inner_width = max(self.min_width, inner_width)
        if max_width:
            inner_width = min(inner_width, max_width - 2)
        inner_width = max(0, inner_width)

        area = max(0, inner_width - padding)
        pad = " " * min(self.padding_x, inner_width // 2)
        vertical = ctx.styled(chars["vertical"], self.border_style)
        blank = vertical + " " * inner_width + vertical

        lines = [self._border_line(ctx, inner_width, chars["top_left"], chars["top_right"],
                                   self.title, self.title_align, self.title_style)]
        lines.extend([blank] * self.padding_y)
        for line in content_lines:
            for piece in wrap_text(line, area) if visible_length(line) > area else [line]:
                body = pad + fit_line(align_text(piece, area, self.content_align), area) + pad
                lines.append(vertical + align_text(body, inner_width) + vertical)
        lines.extend([blank] * self.padding_y)
        lines.append(self._border_line(ctx, inner_width, chars["bottom_left"], chars["bottom_right"],
                                       self.footer, self.footer_align, self.footer_style))

        return [fit_line(align_text(line, ctx.inner_width, self.align), ctx.inner_width) for line in lines]


def Panel(title: str, content: BoxContent, **options) -> Box:
    options.setdefault("style", "rounded")
    return Box(content, title=title, **options)


def _tinted_box(content: BoxContent, title: str, role: str) -> Box:
    return Box(content, title=title, title_style=role, border_style=role, style="rounded", padding_x=1)


def InfoBox(content: BoxContent, title: str = "Info") -> Box:
    return _tinted_box(content, title, "info")


def WarningBox(content: BoxContent, title: str = "Warning") -> Box:
    return _tinted_box(content, title, "warning")


def ErrorBox(content: BoxContent, title: str = "Error") -> Box:
    return _tinted_box(content, title, "error")


def SuccessBox(content: BoxContent, title: str = "Success") -> Box:
    return _tinted_box(content, title, "success")
