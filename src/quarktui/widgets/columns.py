"""
Columns widget.

Lays out several cells side by side. Column widths are resolved together
for the whole row (fixed, auto, percentage and flex columns) and every cell
is then cut or padded to exactly its column width.
"""
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

from quarktui.core.exceptions import WidgetDefinitionError
from quarktui.core.style import StyleSpec
from quarktui.widgets.base import RenderContext, Widget, is_widget
from quarktui.widgets.layout import (ColumnWidth, align_text, fit_line,
                                     fit_text, parse_column_width,
                                     resolve_column_widths)


@dataclass
class ColumnDef:
    """A column with explicit sizing.

    ``width`` is a fixed int, "auto" (fit content), "flex" (share of the
    remaining space) or a percentage string such as "30%". ``style`` only
    applies to string content.
    """
    content: Union[str, Widget]
    width: Optional[ColumnWidth] = None
    align: str = "left"
    style: StyleSpec = None


ColumnInput = Union[str, Widget, ColumnDef]


class Columns(Widget):
    """Side-by-side layout with resolved column widths.

    Example:
        Columns([ColumnDef("Name", width=12), ColumnDef("Value", width="flex")], gap=1)
    """

    kind = "columns"

    def __init__(
        self,
        columns: Sequence[ColumnInput],
        gap: int = 2,
        align: str = "left",
        default_width: ColumnWidth = "flex",
        min_width: int = 1,
    ):
        default_width = parse_column_width(default_width)
        self.columns: List[ColumnDef] = [
            self._normalize(column, default_width, index) for index, column in enumerate(columns)
        ]
        self.gap = max(0, gap)
        self.align = align
        self.min_width = max(0, min_width)

    @classmethod
    def of(cls, *cells: ColumnInput, **options) -> "Columns":
        """Shorthand: ``Columns.of("a", "b", gap=1)``."""
        return cls(list(cells), **options)

    def _normalize(self, column: ColumnInput, default_width: ColumnWidth, index: int) -> ColumnDef:
        if isinstance(column, str) or is_widget(column):
            return ColumnDef(content=column, width=default_width)
        if isinstance(column, ColumnDef):
            if not (isinstance(column.content, str) or is_widget(column.content)):
                raise WidgetDefinitionError(
                    f"Column content must be a string or a widget, got {type(column.content).__name__}",
                    widget=self.kind,
                    index=index,
                )
            width = default_width if column.width is None else parse_column_width(column.width, index)
            return ColumnDef(column.content, width, column.align, column.style)
        raise WidgetDefinitionError(
            f"Column must be a string, a widget or a ColumnDef, got {type(column).__name__}",
            widget=self.kind,
            index=index,
        )

    def _natural_lines(self, column: ColumnDef, ctx: RenderContext) -> List[str]:
        if isinstance(column.content, str):
            return column.content.split("\n")
        return column.content.render(ctx.with_width(0))

    def render(self, ctx: RenderContext) -> List[str]:
        if not self.columns:
            return []

        natural = [
            self._natural_lines(column, ctx) if column.width == "auto" else []
            for column in self.columns
        ]
        widths = resolve_column_widths(
            [column.width for column in self.columns], natural, ctx.inner_width, self.gap, self.min_width
        )

        contents = []
        for column, width, lines in zip(self.columns, widths, natural):
            if isinstance(column.content, str):
                contents.append(column.content.split("\n"))
            elif column.width == "auto":
                contents.append(lines)
            else:
                contents.append(column.content.render(ctx.with_width(width)))

        row_count = max([len(lines) for lines in contents] + [1])
        gap = " " * self.gap
        output = []
        for row in range(row_count):
            cells = []
            for column, width, lines in zip(self.columns, widths, contents):
                text = lines[row] if row < len(lines) else ""
                if isinstance(column.content, str) and text:
                    text = ctx.styled(text, column.style)
                cells.append(fit_text(text, width, column.align))
            line = align_text(gap.join(cells), ctx.inner_width, self.align)
            output.append(fit_line(line, ctx.inner_width))
        return output


def KeyValue(label: str, value: Union[str, Widget], label_width: ColumnWidth = "auto") -> Columns:
    """Dim, right-aligned label next to a flexible value."""
    return Columns(
        [
            ColumnDef(label, width=label_width, align="right", style="dim"),
            ColumnDef(value, width="flex"),
        ],
        gap=2,
    )
