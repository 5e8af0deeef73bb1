"""
Table widget.

Fixed-width columns with an optional header and separator. Cells are cut or
padded to their column width; the whole table is positioned inside the
available width.
"""
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

from quarktui.core.exceptions import WidgetDefinitionError
from quarktui.core.style import StyleSpec
from quarktui.widgets.base import RenderContext, Widget
from quarktui.widgets.layout import fit_line, fit_text, left_offset


@dataclass
class TableColumn:
    header: str
    width: int
    align: str = "left"


@dataclass
class TableCell:
    text: str
    style: StyleSpec = None


CellInput = Union[str, TableCell]


class Table(Widget):
    """Tabular data with headers.

    Example:
        Table(
            columns=[TableColumn("Name", 20), TableColumn("Value", 10, align="right")],
            rows=[["Item 1", "100"], [TableCell("Item 2", style="info"), "200"]],
        )
    """

    kind = "table"

    def __init__(
        self,
        columns: Sequence[TableColumn],
        rows: Sequence[Sequence[CellInput]],
        align: str = "left",
        show_header: bool = True,
        show_separator: bool = True,
        header_style: StyleSpec = "bold",
    ):
        for index, column in enumerate(columns):
            if not isinstance(column, TableColumn) or column.width < 0:
                raise WidgetDefinitionError(
                    "Table columns must be TableColumn values with a non-negative width",
                    widget=self.kind,
                    index=index,
                )
        self.columns = list(columns)
        self.rows = [list(row) for row in rows]
        self.align = align
        self.show_header = show_header
        self.show_separator = show_separator
        self.header_style = header_style

    @property
    def table_width(self) -> int:
        return sum(column.width for column in self.columns)

    def _cell(self, ctx: RenderContext, cell: Optional[CellInput], column: TableColumn) -> str:
        if cell is None:
            return " " * column.width
        if isinstance(cell, TableCell):
            text, spec = cell.text, cell.style
        else:
            text, spec = str(cell), None
        return ctx.styled(fit_text(text, column.width, column.align), spec)

    def render(self, ctx: RenderContext) -> List[str]:
        indent = " " * left_offset(self.table_width, ctx.inner_width, self.align)
        lines = []

        if self.show_header:
            lines.append(indent + "".join(
                ctx.styled(fit_text(column.header, column.width, column.align), self.header_style)
                for column in self.columns
            ))
            if self.show_separator:
                lines.append(indent + "".join(
                    ctx.styled("─" * column.width, "dim") for column in self.columns
                ))

        for row in self.rows:
            cells = [
                self._cell(ctx, row[i] if i < len(row) else None, column)
                for i, column in enumerate(self.columns)
            ]
            lines.append(indent + "".join(cells))

        return [fit_line(line, ctx.inner_width) for line in lines]
