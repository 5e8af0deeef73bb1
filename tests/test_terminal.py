import io

import pytest

from quarktui.core.drawing import (FrameBuilder, calculate_centering_padding,
                                   calculate_content_height,
                                   calculate_frame_width,
                                   get_frame_dimensions, get_layout,
                                   get_padding, set_layout)
from quarktui.core.exceptions import TerminalError
from quarktui.core.style import strip_ansi
from quarktui.core.terminal import (RenderBuffer, TerminalSize,
                                    get_terminal_size, require_tty)
from quarktui.core.theme import MONO_THEME


def test_render_buffer_chains_and_flushes_once() -> None:
    stream = io.StringIO()
    buffer = RenderBuffer().clear_screen().hide_cursor().move_cursor(3, 4).write("hi")
    assert len(buffer) == 4
    buffer.flush(stream)
    assert stream.getvalue() == "\x1b[2J\x1b[H\x1b[?25l\x1b[3;4Hhi"
    assert len(buffer) == 0

    buffer.flush(stream)
    assert stream.getvalue().endswith("hi")


def test_render_buffer_lines_and_cancel() -> None:
    buffer = RenderBuffer().write_lines(["a", "b"])
    assert strip_ansi(buffer.getvalue()).count("a") == 1
    buffer.cancel()
    assert buffer.getvalue() == ""


def test_terminal_size_fallback() -> None:
    size = get_terminal_size()
    assert size.width > 0 and size.height > 0


def test_require_tty_without_terminal(monkeypatch) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO())
    with pytest.raises(TerminalError) as excinfo:
        require_tty()
    assert excinfo.value.stream == "stdin"


def test_layout_padding_is_clamped() -> None:
    set_layout(-1, 3)
    assert get_padding() == (0, 3)
    set_layout(padding_x=4)
    assert get_padding() == (4, 3)


def test_get_layout_returns_copy() -> None:
    layout = get_layout()
    layout.padding_x = 40
    assert get_padding().x == 2


def test_frame_dimensions() -> None:
    assert get_frame_dimensions(TerminalSize(80, 24)) == (76, 22, 74, 20)
    assert get_frame_dimensions(TerminalSize(2, 1)) == (0, 0, 0, 0)


def test_frame_width() -> None:
    assert calculate_frame_width(size=TerminalSize(80, 24)) == 64
    assert calculate_frame_width(50, 0.6, TerminalSize(200, 50)) == 50
    # Never below the minimum, never wider than the padded terminal
    assert calculate_frame_width(size=TerminalSize(30, 24)) == 24
    assert calculate_frame_width(size=TerminalSize(10, 5)) == 6


def test_centering_and_content_height() -> None:
    assert calculate_centering_padding(10, TerminalSize(80, 24)) == 7
    assert calculate_centering_padding(30, TerminalSize(80, 24)) == 0
    assert calculate_content_height(4, 4, size=TerminalSize(80, 24)) == 10


def test_frame_builder() -> None:
    frame = FrameBuilder(5, theme=MONO_THEME)
    lines = [strip_ansi(line) for line in frame.build(["abc", "much too long"])]
    assert lines == ["╭─────╮", "│abc  │", "│much │", "╰─────╯"]
    assert strip_ansi(frame.centered("ab")) == "│ ab  │"
    assert strip_ansi(frame.right("ab")) == "│   ab│"
    assert strip_ansi(frame.divider()) == "├─────┤"


def test_frame_builder_margin_and_border_colour() -> None:
    frame = FrameBuilder(2, margin=3)
    top = frame.top_border()
    assert top.startswith("   \x1b[36m")
    assert strip_ansi(top) == "   ╭──╮"
