import pytest

from quarktui.renderer import render, render_fitted
from quarktui.widgets import Divider, RenderContext, Spacer, Text


def test_render_concatenates_in_order() -> None:
    ctx = RenderContext(3)
    assert render([Text("a"), Spacer(), Text("b")], ctx) == ["a  ", "", "b  "]


def test_render_fitted_centres_with_extra_line_below() -> None:
    lines = render_fitted([Text("a")], RenderContext(5, 4))
    assert lines == ["", "a    ", "", ""]


def test_render_fitted_top_and_bottom() -> None:
    ctx = RenderContext(2, 3)
    assert render_fitted([Text("a")], ctx, vertical_align="top") == ["a ", "", ""]
    assert render_fitted([Text("a")], ctx, vertical_align="bottom") == ["", "", "a "]


def test_render_fitted_pad_char() -> None:
    assert render_fitted([], RenderContext(5, 2), pad_char="·") == ["·····", "·····"]


def test_render_fitted_cuts_from_the_end() -> None:
    lines = render_fitted([Text("first"), Spacer(10), Text("last")], RenderContext(5, 3))
    assert lines == ["first", "", ""]


@pytest.mark.parametrize("height", [0, 1, 4, 25])
@pytest.mark.parametrize("count", [0, 1, 4, 30])
def test_render_fitted_exact_height(height: int, count: int) -> None:
    widgets = [Divider() for _ in range(count)]
    assert len(render_fitted(widgets, RenderContext(10, height))) == height
