"""
Widgets for quarktui.

This package contains the widget contract, the layout algorithms and the
built-in widgets (text, rows, columns, boxes, lists, tables, dividers and
progress bars).
"""
from quarktui.widgets.base import RenderContext, Widget, is_widget
from quarktui.widgets.box import (BOX_STYLES, Box, ErrorBox, InfoBox, Panel,
                                  SuccessBox, WarningBox)
from quarktui.widgets.columns import ColumnDef, Columns, KeyValue
from quarktui.widgets.divider import DIVIDER_CHARS, HR, Divider
from quarktui.widgets.layout import (ScrollWindow, align_text,
                                     compute_scroll_window, fit_text,
                                     parse_column_width,
                                     resolve_column_widths, wrap_lines,
                                     wrap_text)
from quarktui.widgets.list import (BulletList, CheckboxList, List, ListItem,
                                   NumberedList)
from quarktui.widgets.progress import CHAR_SETS, Progress, ProgressBar
from quarktui.widgets.row import Row
from quarktui.widgets.spacer import Spacer
from quarktui.widgets.table import Table, TableCell, TableColumn
from quarktui.widgets.text import Text

__all__ = [
    # Contract
    'RenderContext',
    'Widget',
    'is_widget',

    # Widgets
    'Text',
    'Spacer',
    'Row',
    'Columns',
    'ColumnDef',
    'KeyValue',
    'Box',
    'Panel',
    'InfoBox',
    'WarningBox',
    'ErrorBox',
    'SuccessBox',
    'BOX_STYLES',
    'List',
    'ListItem',
    'BulletList',
    'NumberedList',
    'CheckboxList',
    'Table',
    'TableColumn',
    'TableCell',
    'Divider',
    'HR',
    'DIVIDER_CHARS',
    'ProgressBar',
    'Progress',
    'CHAR_SETS',

    # Layout
    'align_text',
    'wrap_text',
    'wrap_lines',
    'fit_text',
    'parse_column_width',
    'resolve_column_widths',
    'compute_scroll_window',
    'ScrollWindow',
]
