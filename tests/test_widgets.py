import pytest

from quarktui.core.exceptions import WidgetDefinitionError
from quarktui.core.style import strip_ansi, visible_length
from quarktui.widgets import (HR, Box, ColumnDef, Columns, Divider, InfoBox,
                              KeyValue, List, ListItem, NumberedList, Panel,
                              ProgressBar, RenderContext, Row, Spacer, Table,
                              TableCell, TableColumn, Text, is_widget)


def plain(lines):
    return [strip_ansi(line).rstrip() for line in lines]


def test_render_context_clamps_negative_sizes() -> None:
    ctx = RenderContext(-3, -1)
    assert (ctx.inner_width, ctx.content_height) == (0, 0)
    assert ctx.with_width(-5).inner_width == 0


def test_text_wraps_and_aligns() -> None:
    lines = Text("the quick brown fox", align="right").render(RenderContext(10))
    assert lines == [" the quick", " brown fox"]


def test_text_without_wrap_keeps_lines() -> None:
    assert Text("a b c d", wrap=False).render(RenderContext(3)) == ["a b c d"]


def test_spacer() -> None:
    assert Spacer(2).render(RenderContext(10)) == ["", ""]
    assert Spacer(-1).render(RenderContext(10)) == []


def test_row_joins_first_lines() -> None:
    row = Row([Text("BPM:"), Text("120")], gap=1)
    assert row.render(RenderContext(12)) == ["BPM: 120    "]


def test_row_rejects_non_widgets() -> None:
    with pytest.raises(WidgetDefinitionError) as excinfo:
        Row([Text("ok"), "nope"])
    assert excinfo.value.index == 1
    assert excinfo.value.widget == "row"


def test_columns_fixed_and_flex() -> None:
    columns = Columns([ColumnDef("A", 3), ColumnDef("B", "flex")], gap=1)
    assert columns.render(RenderContext(10)) == ["A   B     "]


def test_columns_cut_long_cells() -> None:
    columns = Columns.of(ColumnDef("abcdefgh", 4), "x", gap=1)
    assert columns.render(RenderContext(10))[0].startswith("abc… x")


def test_columns_multiline_widget_content() -> None:
    columns = Columns.of(Text("one\ntwo"), "x", gap=1)
    lines = columns.render(RenderContext(9))
    assert len(lines) == 2
    assert lines[1].startswith("two")
    assert all(visible_length(line) == 9 for line in lines)


def test_columns_reject_bad_input() -> None:
    with pytest.raises(WidgetDefinitionError):
        Columns([42])
    with pytest.raises(WidgetDefinitionError):
        Columns([ColumnDef(42)])
    with pytest.raises(WidgetDefinitionError):
        Columns([ColumnDef("a", width="huge")])


def test_key_value() -> None:
    lines = plain(KeyValue("Name", "quark").render(RenderContext(20)))
    assert lines == ["Name  quark"]


def test_box_sizes_to_content() -> None:
    box = Box("hi", style="ascii", border_style=None)
    assert plain(box.render(RenderContext(20))) == ["+----+", "| hi |", "+----+"]


def test_box_title_in_border() -> None:
    box = Box("hi", style="ascii", border_style=None, title="T", title_style=None)
    assert plain(box.render(RenderContext(20))) == ["+- T -+", "| hi  |", "+-----+"]


def test_box_wraps_instead_of_truncating() -> None:
    box = Box.of("aaa bbb ccc", style="ascii", border_style=None, max_width=9)
    lines = plain(box.render(RenderContext(40)))
    assert lines == ["+-----+", "| aaa |", "| bbb |", "| ccc |", "+-----+"]


def test_box_explicit_width_and_padding() -> None:
    box = Box("x", style="ascii", border_style=None, width=8, padding_y=1)
    lines = plain(box.render(RenderContext(20)))
    assert lines[0] == "+------+"
    assert lines[1] == "|      |"
    assert lines[2] == "| x    |"
    assert len(lines) == 5


def test_box_rejects_bad_content() -> None:
    with pytest.raises(WidgetDefinitionError):
        Box(123)
    with pytest.raises(WidgetDefinitionError) as excinfo:
        Box(["ok", 5])
    assert excinfo.value.index == 1


def test_box_helpers() -> None:
    assert Panel("Title", "body").title == "Title"
    lines = plain(InfoBox("note").render(RenderContext(30)))
    assert lines[0].startswith("╭─ Info ")


def test_bullet_list() -> None:
    assert plain(List(["a", "b"]).render(RenderContext(10))) == ["• a", "• b"]


def test_list_selection_and_custom_markers() -> None:
    items = ["a", ListItem("b", marker="→"), "c"]
    lines = plain(List(items, selected_index=2).render(RenderContext(10)))
    assert lines == ["• a", "→ b", "❯ c"]


def test_checkbox_list() -> None:
    items = [ListItem("done", checked=True), "todo"]
    assert plain(List(items, style="checkbox").render(RenderContext(10))) == ["☑ done", "☐ todo"]


def test_plain_list_style() -> None:
    assert plain(List(["a"], style="none").render(RenderContext(5))) == ["a"]


def test_numbered_list_aligns_markers() -> None:
    lines = plain(NumberedList([str(i) for i in range(10)]).render(RenderContext(20)))
    assert lines[0] == " 1. 0"
    assert lines[9] == "10. 9"


def test_scrolled_list_uses_absolute_numbers() -> None:
    items = [f"item {i}" for i in range(20)]
    lines = plain(List(items, style="numbered", max_visible=10, scroll_offset=5).render(RenderContext(30)))
    assert len(lines) == 10
    assert "↑ more..." in lines[0]
    assert lines[1].strip() == "6. item 5"
    assert "↓ more..." in lines[-1]


def test_empty_list() -> None:
    assert List([]).render(RenderContext(10)) == []


def test_table() -> None:
    table = Table(
        [TableColumn("Name", 6), TableColumn("Qty", 4, align="right")],
        [["apple", "3"], [TableCell("kiwi", style="info"), "12"], ["only"]],
        header_style=None,
    )
    lines = plain(table.render(RenderContext(20)))
    assert lines == ["Name   Qty", "──────────", "apple    3", "kiwi    12", "only"]


def test_table_alignment_and_header_toggle() -> None:
    table = Table([TableColumn("A", 4)], [["x"]], align="center", show_header=False)
    assert table.render(RenderContext(10)) == ["   x   "]


def test_table_rejects_bad_columns() -> None:
    with pytest.raises(WidgetDefinitionError):
        Table([("Name", 3)], [])
    with pytest.raises(WidgetDefinitionError):
        Table([TableColumn("Name", -1)], [])


def test_divider() -> None:
    assert Divider(line_style=None).render(RenderContext(5)) == ["─────"]
    assert HR("double").render(RenderContext(3))[0].count("═") == 3


@pytest.mark.parametrize("label_align, expected", [
    ("center", "─── Hi ───"),
    ("left", "── Hi ────"),
    ("right", "──── Hi ──"),
])
def test_divider_label(label_align: str, expected: str) -> None:
    divider = Divider("Hi", label_align=label_align, line_style=None)
    assert divider.render(RenderContext(10)) == [expected]


def test_divider_margin() -> None:
    assert Divider(line_style=None, margin=1).render(RenderContext(10)) == [" ──────── "]


def test_progress_bar() -> None:
    bar = ProgressBar(0.5, width=10)
    assert plain(bar.render(RenderContext(20))) == ["█████░░░░░ 50%"]


def test_progress_bar_ascii_caps() -> None:
    bar = ProgressBar(0.25, width=10, style="ascii")
    assert plain(bar.render(RenderContext(20))) == ["[==------] 25%"]


def test_progress_bar_fills_available_width() -> None:
    lines = ProgressBar(0.5).render(RenderContext(20))
    assert visible_length(lines[0]) == 20


def test_progress_label_inside() -> None:
    bar = ProgressBar(1.0, width=10, label="ok", label_position="inside")
    assert plain(bar.render(RenderContext(10))) == ["████ok████"]


def test_progress_labels() -> None:
    assert ProgressBar(3, max=4, show_value=True).format_label() == "3/4"
    assert ProgressBar(3, max=4, show_value=True, label="x").format_label() == "x"
    assert ProgressBar(5, max=1).format_label() == "100%"
    assert ProgressBar(0.5, show_percentage=False).format_label() == ""
    assert ProgressBar(2, max=0).percentage == 0.0


def test_progress_rounds_halves_up() -> None:
    bar = ProgressBar(0.5, width=5, label_position="none")
    assert plain(bar.render(RenderContext(5))) == ["███░░"]
    assert ProgressBar(0.125).format_label() == "13%"
    assert ProgressBar(2.5, max=4.5, show_value=True).format_label() == "3/5"


def test_widget_helpers() -> None:
    assert is_widget(Text("x"))
    assert not is_widget("x")
    assert "kind='text'" in repr(Text("x"))
