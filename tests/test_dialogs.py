import io

import pytest

import quarktui.dialogs.spinner as spinner_module
from quarktui.core.exceptions import DialogError
from quarktui.core.style import strip_ansi, visible_length
from quarktui.core.terminal import TerminalSize
from quarktui.core.theme import get_builtin_theme, get_current_theme, set_theme
from quarktui.dialogs import (SPINNER_DOTS, ConfirmDialog, DialogFrame,
                              HelpContent, HelpScreen, HelpSection,
                              KeyBinding, MenuOption, MultiSelectDialog,
                              MultiSelectOption, MultiSelectResult,
                              SelectMenu, SelectResult, SpinnerController,
                              SpinnerOptions, TextInputDialog,
                              TextInputResult, build_help_lines,
                              build_message, build_spinner, fit_body,
                              format_hints, merge_help_content, show_message,
                              with_spinner)

from conftest import key, press


def plain(lines):
    return [strip_ansi(line) for line in lines]


def contains(lines, text: str) -> bool:
    return any(text in line for line in plain(lines))


def fruit_menu(**options) -> SelectMenu:
    return SelectMenu("Fruit", [
        MenuOption("Apple", "apple"),
        MenuOption("Durian", "durian", disabled=True),
        MenuOption("Cherry", "cherry", hint="sour"),
    ], **options)


class TestFrame:
    def test_fit_body_centres(self) -> None:
        assert fit_body(["x"], 4) == ["", "x", "", ""]
        assert fit_body(["a", "b", "c"], 2) == ["a", "b"]

    def test_format_hints_dims_key(self) -> None:
        assert strip_ansi(format_hints(["q Back", "⏎ Select"])) == "q Back  ⏎ Select"

    def test_full_height_frame(self, size: TerminalSize) -> None:
        frame = DialogFrame(size)
        assert frame.body_height == 12
        lines = frame.top().header("Title").divider().body(["x"], height=3).bottom().finish()
        assert lines[0] == ""
        assert all(visible_length(line) == 78 for line in lines[1:])

    def test_compact_frame_is_centred(self, size: TerminalSize) -> None:
        frame = DialogFrame(size, frame_width=40)
        lines = frame.top().bottom().finish()
        assert lines[:11] == [""] * 11
        assert plain(lines)[11].startswith(" " * 20 + "╭")


class TestSelectMenu:
    def test_requires_options(self) -> None:
        with pytest.raises(DialogError):
            SelectMenu("Empty", [])

    def test_navigation_skips_disabled(self) -> None:
        menu = fruit_menu()
        menu.on_key(key("down"))
        assert menu.selected_index == 2
        menu.on_key(key("down"))
        assert menu.selected_index == 0
        menu.on_key(press("k"))
        assert menu.selected_index == 2

    def test_initial_selection_moves_off_disabled(self) -> None:
        assert fruit_menu(selected_index=1).selected_index == 2

    def test_enter_selects(self) -> None:
        menu = fruit_menu()
        menu.on_key(key("return"))
        assert menu.result == SelectResult("selected", "apple")
        assert menu.result.selected

    def test_number_keys(self) -> None:
        menu = fruit_menu()
        menu.on_key(press("2"))
        assert not menu.closed
        menu.on_key(press("3"))
        assert menu.result.value == "cherry"

    def test_number_keys_can_be_disabled(self) -> None:
        menu = fruit_menu(allow_number_keys=False)
        menu.on_key(press("3"))
        assert not menu.closed

    def test_back_cancels(self) -> None:
        menu = fruit_menu()
        menu.on_key(key("escape"))
        assert menu.result.type == "cancelled"
        assert not menu.result.selected

    def test_long_menu_keeps_selection_visible(self) -> None:
        options = [MenuOption(f"Option {i}", i) for i in range(20)]
        menu = SelectMenu("Long", options, selected_index=15)
        assert menu.visible_range() == range(4, 16)
        assert menu.allow_number_keys is False

    def test_compose(self, size: TerminalSize) -> None:
        lines = fruit_menu(info_lines=["Pick one"]).compose(size)
        assert contains(lines, "❯ 1 Apple")
        assert contains(lines, "Cherry (sour)")
        assert contains(lines, "Pick one")
        assert len(lines) <= size.height


class TestConfirmDialog:
    def test_defaults_to_cancel(self) -> None:
        dialog = ConfirmDialog("Delete?")
        dialog.on_key(key("return"))
        assert dialog.result is False

    def test_switch_and_confirm(self) -> None:
        dialog = ConfirmDialog("Delete?")
        dialog.on_key(key("right"))
        dialog.on_key(key("return"))
        assert dialog.result is True

    @pytest.mark.parametrize("char, expected", [("y", True), ("Y", True), ("n", False), ("q", False)])
    def test_shortcuts(self, char: str, expected: bool) -> None:
        dialog = ConfirmDialog("Delete?", default_confirm=not expected)
        dialog.on_key(press(char))
        assert dialog.result is expected

    def test_compose_highlights_choice(self, size: TerminalSize) -> None:
        dialog = ConfirmDialog("Delete?", "This cannot be undone", confirm_label="Delete", cancel_label="Keep")
        assert contains(dialog.compose(size), "[ Keep ]")
        dialog.on_key(key("tab"))
        lines = dialog.compose(size)
        assert contains(lines, "[ Delete ]")
        assert contains(lines, "This cannot be undone")


class TestTextInput:
    def type_text(self, dialog: TextInputDialog, text: str) -> None:
        for char in text:
            dialog.on_key(press(char))

    def test_typing_and_submit(self) -> None:
        dialog = TextInputDialog("Name")
        self.type_text(dialog, "quark")
        dialog.on_key(key("backspace"))
        dialog.on_key(key("return"))
        assert dialog.result == TextInputResult("submitted", "quar")
        assert dialog.result.submitted

    def test_q_is_ordinary_input(self) -> None:
        dialog = TextInputDialog("Name")
        dialog.on_key(press("q"))
        assert dialog.value == "q"
        assert not dialog.closed

    def test_backspace_on_empty_cancels(self) -> None:
        dialog = TextInputDialog("Name")
        dialog.on_key(key("backspace"))
        assert dialog.result == TextInputResult("cancelled")

    def test_ctrl_c_and_escape_cancel(self) -> None:
        for cancel in (key("c", ctrl=True), key("escape")):
            dialog = TextInputDialog("Name", initial_value="x")
            dialog.on_key(cancel)
            assert not dialog.result.submitted

    def test_validation_blocks_submit(self, size: TerminalSize) -> None:
        dialog = TextInputDialog("Age", validate=lambda value: None if value.isdigit() else "Digits only")
        self.type_text(dialog, "abc")
        dialog.on_key(key("return"))
        assert not dialog.closed
        assert dialog.error == "Digits only"
        assert contains(dialog.compose(size), "! Digits only")

        dialog.on_key(key("backspace"))
        assert dialog.error is None

    def test_max_length(self) -> None:
        dialog = TextInputDialog("Code", max_length=3)
        self.type_text(dialog, "abcdef")
        assert dialog.value == "abc"

    def test_masked_input(self) -> None:
        dialog = TextInputDialog("Password", initial_value="secret", mask_input=True)
        line = strip_ansi(dialog.input_line())
        assert "secret" not in line
        assert "••••••" in line

    def test_placeholder(self) -> None:
        dialog = TextInputDialog("Name", placeholder="type here")
        assert "type here" in strip_ansi(dialog.input_line())

    def test_cursor_uses_theme_colour(self) -> None:
        cursor = get_current_theme().colors.cursor
        assert f"{cursor}▋" in TextInputDialog("Name").input_line()
        assert f"{cursor}▋" in TextInputDialog("Name", initial_value="ab").input_line()
        set_theme(get_builtin_theme("ocean"))
        assert "\x1b[96m▋" in TextInputDialog("Name").input_line()


class TestMultiSelect:
    def options(self):
        return [
            MultiSelectOption("Cheese", "cheese", checked=True),
            MultiSelectOption("Pineapple", "pineapple", disabled=True, checked=True),
            MultiSelectOption("Olives", "olives"),
            MultiSelectOption("Mushrooms", "mushrooms"),
        ]

    def test_disabled_options_start_unchecked(self) -> None:
        dialog = MultiSelectDialog("Toppings", self.options())
        assert dialog.values() == ["cheese"]

    def test_invalid_configuration(self) -> None:
        with pytest.raises(DialogError):
            MultiSelectDialog("Toppings", [])
        with pytest.raises(DialogError):
            MultiSelectDialog("Toppings", self.options(), min_selections=3, max_selections=2)

    def test_space_toggles_focused_option(self) -> None:
        dialog = MultiSelectDialog("Toppings", self.options())
        dialog.on_key(key("down"))
        assert dialog.focused_index == 2
        dialog.on_key(key("space"))
        dialog.on_key(key("return"))
        assert dialog.result == MultiSelectResult("selected", ["cheese", "olives"])

    def test_max_selections(self) -> None:
        dialog = MultiSelectDialog("Toppings", self.options(), max_selections=2)
        dialog.on_key(press("a"))
        assert dialog.values() == ["cheese", "olives"]
        assert dialog.toggle(3) is False
        assert dialog.toggle(1) is False

    def test_min_selections_block_confirm(self) -> None:
        dialog = MultiSelectDialog("Toppings", self.options(), min_selections=1)
        dialog.on_key(press("n"))
        dialog.on_key(key("return"))
        assert not dialog.closed
        dialog.on_key(press("4"))
        dialog.on_key(key("return"))
        assert dialog.result.values == ["mushrooms"]

    def test_cancel(self) -> None:
        dialog = MultiSelectDialog("Toppings", self.options())
        dialog.on_key(press("q"))
        assert dialog.result == MultiSelectResult("cancelled")
        assert dialog.result.values == []

    def test_selection_hint(self) -> None:
        dialog = MultiSelectDialog("Toppings", self.options(), min_selections=1, max_selections=2)
        assert dialog.selection_hint() == "1 selected (min: 1) (max: 2)"

    def test_compose(self, size: TerminalSize) -> None:
        lines = MultiSelectDialog("Toppings", self.options(), description="Pick two").compose(size)
        assert contains(lines, "☑ 1 Cheese")
        assert contains(lines, "☒ 2 Pineapple")
        assert contains(lines, "☐ 3 Olives")
        assert contains(lines, "1 selected")
        assert len(lines) <= size.height

    def test_long_list_scrolls_to_focus(self, size: TerminalSize) -> None:
        options = [MultiSelectOption(f"Item {i}", i) for i in range(30)]
        dialog = MultiSelectDialog("Many", options, focused_index=25)
        lines = dialog.compose(size)
        assert contains(lines, "Item 25")
        assert contains(lines, "↑ more...")
        assert len(lines) <= size.height


class TestHelp:
    def content(self, bindings: int = 3) -> HelpContent:
        return HelpContent(
            screen_name="Editor",
            description="Edit things",
            sections=[HelpSection("Keys", [KeyBinding(f"k{i}", f"Action {i}") for i in range(bindings)])],
            tips=["Be nice"],
        )

    def test_build_help_lines(self) -> None:
        lines = plain(build_help_lines(self.content()))
        assert lines[0] == "Edit things"
        assert "Keys" in lines
        assert "  k0  Action 0" in lines
        assert "  • Be nice" in lines

    def test_scrolling(self, size: TerminalSize) -> None:
        screen = HelpScreen(self.content(bindings=40))
        screen.compose(size)
        assert screen.max_scroll > 0

        screen.on_key(key("up"))
        assert screen.scroll_offset == 0
        screen.on_key(key("down"))
        screen.on_key(press("j"))
        assert screen.scroll_offset == 2
        screen.on_key(key("pagedown"))
        assert screen.scroll_offset == min(screen.max_scroll, 12)
        assert not screen.closed

        screen.on_key(press("x"))
        assert screen.closed

    def test_merge(self) -> None:
        merged = merge_help_content(self.content(), HelpContent("Other", tips=["More"]))
        assert merged.screen_name == "Editor"
        assert merged.tips == ["Be nice", "More"]
        assert merge_help_content().screen_name == "Help"


class TestMessage:
    def test_build_message(self, size: TerminalSize) -> None:
        lines = build_message("Saved", ["File written"], "success", size=size)
        assert contains(lines, "✓ Saved")
        assert contains(lines, "File written")
        assert contains(lines, "Press any key to continue...")

    def test_no_wait_and_unknown_type(self, size: TerminalSize) -> None:
        lines = build_message("Note", ["x"], "sparkly", wait_for_key=False, size=size)
        assert contains(lines, "● Note")
        assert not contains(lines, "Press any key")

    def test_show_message_writes_one_frame(self) -> None:
        stream = io.StringIO()
        show_message("Done", ["ok"], "info", stream=stream)
        output = stream.getvalue()
        assert output.startswith("\x1b[2J\x1b[H\x1b[?25l")
        assert "Done" in strip_ansi(output)


class TestSpinner:
    def test_build_spinner(self, size: TerminalSize) -> None:
        lines = build_spinner(SpinnerOptions("Loading", title="Work"), "⠋ Loading", size=size)
        assert contains(lines, "Work")
        assert contains(lines, "⠋ Loading")
        assert plain(lines)[-1].strip().startswith("╰")

    def test_frames_cycle(self) -> None:
        controller = SpinnerController(SpinnerOptions("x"))
        controller.frame_index = len(SPINNER_DOTS) + 1
        assert controller.current_frame() == SPINNER_DOTS[1]

    def test_start_update_stop(self) -> None:
        stream = io.StringIO()
        controller = SpinnerController(SpinnerOptions("Loading", interval=10), stream=stream)
        controller.start()
        controller.update("Almost")
        controller.stop("Finished")

        output = strip_ansi(stream.getvalue())
        assert "Loading" in output and "Almost" in output
        assert "✓ Finished" in output
        assert stream.getvalue().endswith("\x1b[?25h")
        assert controller.stopped

        size_before = len(stream.getvalue())
        controller.update("ignored")
        controller.stop()
        assert len(stream.getvalue()) == size_before

    def test_stop_without_message_restores_cursor(self) -> None:
        stream = io.StringIO()
        controller = SpinnerController(SpinnerOptions("Loading", interval=10), stream=stream).start()
        controller.stop()
        assert stream.getvalue().endswith("\x1b[?25h")

    def test_with_spinner(self, monkeypatch) -> None:
        stream = io.StringIO()

        def quiet_spinner(message):
            return SpinnerController(SpinnerOptions(message, interval=10), stream=stream).start()

        monkeypatch.setattr(spinner_module, "show_spinner", quiet_spinner)
        assert with_spinner("Working", lambda: 42, "Done") == 42
        assert "✓ Done" in strip_ansi(stream.getvalue())

        def fail():
            raise ValueError("boom")

        with pytest.raises(ValueError):
            with_spinner("Working", fail)
