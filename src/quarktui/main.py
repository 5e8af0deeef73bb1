"""
quarktui - Demo entry point.

Runs one of the bundled dialogs or the widget gallery so the toolkit can
be tried from a terminal: ``python -m quarktui select --theme ocean``.
"""
import argparse
import sys
import time
from typing import List

from quarktui.component import Component, ComponentConfig
from quarktui.config import DEFAULT_THEME_ID
from quarktui.core.exceptions import QuarkTUIError
from quarktui.core.keyboard import KeypressEvent
from quarktui.core.theme import available_themes, get_builtin_theme, set_theme
from quarktui.dialogs import (KeyBinding, MenuOption, MultiSelectOption,
                              confirm, create_simple_help, multi_select,
                              select_menu, show_spinner, text_input)
from quarktui.pickers import pick_file, pick_folder
from quarktui.resources import (BANNER, DEMO_CHOICES, DEMO_DESCRIPTION, Icons,
                                format_error_message, format_info_message)
from quarktui.utils.logging_config import get_logger, setup_logging
from quarktui.widgets import (Box, Columns, Divider, KeyValue, List as ListWidget,
                              ProgressBar, RenderContext, Row, Spacer, Table,
                              TableColumn, Text, Widget)
from quarktui.widgets.progress import round_half_up

logger = get_logger(__name__)


class WidgetGallery(Component[dict]):
    """A window showing one of each widget; left/right change the progress."""

    config = ComponentConfig(
        title="quarktui",
        subtitle="widgets",
        description=DEMO_DESCRIPTION,
        hints=["←→ Progress", "? Help", "q/⌫ Back"],
        help_content=create_simple_help("Widget gallery", [
            KeyBinding("← / →", "Change the progress value"),
            KeyBinding("?", "Show this help"),
            KeyBinding("q / ⌫", "Close the gallery"),
        ]),
    )

    def render(self, ctx: RenderContext) -> List[Widget]:
        progress = self.service["progress"]
        return [
            Columns.of(Box.of("rounded"), Box("double", style="double"), Box("ascii", style="ascii"), gap=2),
            Row([Text("Theme:", style="dim"), Text(self.service["theme"], style="bold")], gap=1, align="center"),
            Spacer(),
            Columns.of("Name", "Kind", "Notes", gap=3),
            Divider("details", style="dashed"),
            KeyValue("Progress", f"{round_half_up(progress * 100)}%"),
            KeyValue("Width", str(ctx.inner_width)),
            Spacer(),
            ListWidget(["Text and rows", "Columns and tables", "Boxes and dividers"], style="check"),
            Spacer(),
            Table(
                [TableColumn("Widget", width=12), TableColumn("Lines", width=6, align="right")],
                [["Text", "1"], ["Box", "3"], ["Table", "4"]],
                align="center",
            ),
            Spacer(),
            ProgressBar(progress, width=30, label="progress", align="center"),
            Text("Press ? for help", align="center", style="dim"),
        ]

    def on_keypress(self, key: KeypressEvent) -> bool:
        step = {"left": -0.1, "right": 0.1}.get(key.name)
        if step is None:
            return False
        self.service["progress"] = min(1.0, max(0.0, self.service["progress"] + step))
        self.redraw()
        return True


def run_demo(demo: str, theme_id: str) -> str:
    """Run one demo and describe its outcome."""
    match demo:
        case "widgets":
            WidgetGallery({"theme": theme_id, "progress": 0.4}).run()
            return "Gallery closed"
        case "select":
            result = select_menu("Pick a fruit", [
                MenuOption("Apple", "apple", hint="crunchy"),
                MenuOption("Banana", "banana"),
                MenuOption("Durian", "durian", disabled=True),
                MenuOption("Cherry", "cherry"),
            ], info_lines=["Arrow keys or numbers choose"])
            return f"Selected: {result.value}" if result.selected else "Cancelled"
        case "confirm":
            return f"Confirmed: {confirm('Delete all files?', 'This cannot be undone')}"
        case "input":
            result = text_input(
                "Your name",
                placeholder="type here",
                validate=lambda value: None if value.strip() else "Name must not be empty",
                max_length=40,
            )
            return f"Hello, {result.value}" if result.submitted else "Cancelled"
        case "multiselect":
            result = multi_select("Toppings", [
                MultiSelectOption("Cheese", "cheese", checked=True),
                MultiSelectOption("Mushrooms", "mushrooms"),
                MultiSelectOption("Olives", "olives"),
                MultiSelectOption("Pineapple", "pineapple", disabled=True),
            ], min_selections=1, max_selections=2)
            return f"Selected: {', '.join(result.values)}" if result.selected else "Cancelled"
        case "spinner":
            spinner = show_spinner("Warming up")
            for step in ("Loading themes", "Measuring text", "Drawing boxes"):
                time.sleep(0.6)
                spinner.update(step)
            spinner.stop("All done")
            return "Spinner finished"
        case "file":
            path = pick_file(title="Select a file")
            return f"File: {path}" if path else "Cancelled"
        case "folder":
            path = pick_folder(title="Select a folder")
            return f"Folder: {path}" if path else "Cancelled"
    raise QuarkTUIError(f"Unknown demo: {demo}")


def main():
    """Main entry point for the demo."""
    parser = argparse.ArgumentParser(description=DEMO_DESCRIPTION)
    parser.add_argument("demo", nargs='?', default="widgets", choices=DEMO_CHOICES,
                        help="Demo to run (default: widgets)")
    parser.add_argument("-t", "--theme", default=DEFAULT_THEME_ID, choices=available_themes(),
                        help="Theme to use (default: $QUARKTUI_THEME or default)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable verbose logging for debugging")

    args = parser.parse_args()
    setup_logging(args.verbose)

    try:
        set_theme(get_builtin_theme(args.theme))
        logger.info(f"Running demo '{args.demo}' with theme '{args.theme}'")
        outcome = run_demo(args.demo, args.theme)
        print(BANNER)
        print(format_info_message(outcome))
    except QuarkTUIError as e:
        logger.error(f"Demo '{args.demo}' failed: {e}", exc_info=True)
        print(format_error_message(str(e)))
        sys.exit(1)
    except KeyboardInterrupt:
        print(f"\n\nInterrupted. Goodbye! {Icons.BYE}")
        sys.exit(0)


if __name__ == "__main__":
    main()
