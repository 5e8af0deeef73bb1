from quarktui.core.style import (pad_center, pad_left, pad_right, raw, repeat,
                                 slice_visible, strip_ansi, style, style_spec,
                                 truncate, visible_length)
from quarktui.core.theme import BOLD, DIM, MONO_THEME, RESET, create_theme


def test_strip_ansi_removes_sgr_sequences() -> None:
    text = f"{BOLD}bold{RESET} and \x1b[38;5;42mcolour{RESET}"
    assert strip_ansi(text) == "bold and colour"
    assert visible_length(text) == len("bold and colour")


def test_strip_ansi_removes_unterminated_sequence() -> None:
    assert strip_ansi("ab\x1b[3") == "ab"


def test_stripped_text_contains_no_escape() -> None:
    samples = [style("x", "bold", "error"), raw("y", "\x1b[4m"), "plain", "\x1b[1m\x1b[0m"]
    for sample in samples:
        assert "\x1b" not in strip_ansi(sample)


def test_style_without_tags_returns_text() -> None:
    assert style("hello") == "hello"
    assert style_spec("hello", None) == "hello"


def test_style_closes_with_single_reset() -> None:
    assert style("x", "bold") == f"{BOLD}x{RESET}"
    assert style("x", "dim", "bold") == f"{DIM}{BOLD}x{RESET}"


def test_unknown_tags_are_ignored() -> None:
    assert style("x", "sparkly") == f"x{RESET}"


def test_style_resolves_roles_against_given_theme() -> None:
    theme = create_theme("custom", "Custom", error="\x1b[91m")
    assert style("oops", "error", theme=theme) == f"\x1b[91moops{RESET}"
    assert style("edge", "border", theme=MONO_THEME) == f"edge{RESET}"


def test_style_spec_accepts_sequence() -> None:
    assert style_spec("x", ("bold", "dim")) == style("x", "bold", "dim")
    assert style_spec("x", "bold") == style("x", "bold")


def test_padding_uses_visible_length() -> None:
    styled = style("ab", "bold")
    assert visible_length(pad_right(styled, 5)) == 5
    assert pad_right("ab", 5) == "ab   "
    assert pad_left("ab", 5, ".") == "...ab"
    assert pad_center("ab", 5) == " ab  "
    assert pad_center("abcdef", 3) == "abcdef"


def test_repeat_negative_count() -> None:
    assert repeat("-", -3) == ""


def test_truncate() -> None:
    assert truncate("hello world", 8) == "hello..."
    assert truncate("short", 10) == "short"
    # The ellipsis itself is cut when nothing else fits
    assert truncate("hello", 2) == ".."
    assert truncate("hello", 0) == ""


def test_truncate_keeps_styling_only_when_text_fits() -> None:
    styled = style("hello world", "bold")
    assert truncate(styled, 20) == styled
    assert truncate(styled, 6) == "hel..."


def test_slice_visible_plain() -> None:
    assert slice_visible("abcdef", 3) == "abc"
    assert slice_visible("abc", 10) == "abc"
    assert slice_visible("abc", 0) == ""


def test_slice_visible_closes_open_style() -> None:
    text = f"{BOLD}abcdef{RESET}"
    result = slice_visible(text, 2)
    assert result == f"{BOLD}ab{RESET}"
    assert visible_length(result) == 2
    assert slice_visible(text, 10) == text
