"""
Help screen.

Scrollable overview of the key bindings of a screen. Windows open it
modally when the help key is pressed; ``show_help`` runs it on its own.
"""
from dataclasses import dataclass, field
from typing import List

from quarktui.config import HELP_PAGE_SCROLL
from quarktui.core.keyboard import KeypressEvent, is_down_key, is_up_key
from quarktui.core.style import style
from quarktui.core.terminal import TerminalSize
from quarktui.dialogs.shared import PAD, DialogFrame
from quarktui.screen import Screen, run_screen


@dataclass
class KeyBinding:
    key: str
    description: str


@dataclass
class HelpSection:
    title: str
    bindings: List[KeyBinding] = field(default_factory=list)


@dataclass
class HelpContent:
    screen_name: str
    description: str = ""
    sections: List[HelpSection] = field(default_factory=list)
    tips: List[str] = field(default_factory=list)


def build_help_lines(content: HelpContent) -> List[str]:
    """Format help content into display lines (without frame)."""
    key_width = max(
        (len(binding.key) for section in content.sections for binding in section.bindings),
        default=0,
    )

    lines = [style(content.description, "dim"), ""]
    for section in content.sections:
        lines.append(style(section.title, "bold", "warning"))
        for binding in section.bindings:
            lines.append(f"  {style(binding.key.ljust(key_width), 'accent')}  {binding.description}")
        lines.append("")

    if content.tips:
        lines.append(style("Tips", "bold", "success"))
        for tip in content.tips:
            lines.append(f"  {style('• ' + tip, 'dim')}")
        lines.append("")
    return lines


class HelpScreen(Screen):
    """Scrollable help page; any key other than a scroll key closes it.

    Arrow keys at the top or bottom of the page do nothing.
    """

    def __init__(self, content: HelpContent):
        super().__init__()
        self.content = content
        self.lines = build_help_lines(content)
        self.scroll_offset = 0
        self.max_scroll = 0

    def _body_height(self, frame: DialogFrame) -> int:
        # The help header carries a description line
        return max(1, frame.body_height - 1)

    def compose(self, size: TerminalSize) -> List[str]:
        frame = DialogFrame(size)
        height = self._body_height(frame)
        self.max_scroll = max(0, len(self.lines) - height)
        offset = min(self.scroll_offset, self.max_scroll)
        more_above = offset > 0
        more_below = offset < self.max_scroll

        body = []
        if more_above:
            body.append(PAD + style("↑ scroll up", "dim"))
        room = height - len(body) - (1 if more_below else 0)
        body.extend(PAD + line for line in self.lines[offset:offset + max(0, room)])
        if more_below:
            body.append(PAD + style("↓ scroll down", "dim"))
        body.extend([""] * (height - len(body)))

        icon = style("?", "bold", "accent")
        frame.top()
        frame.header(f"{icon} {style('HELP', 'bold')}", description=self.content.screen_name, tall=True)
        frame.divider()
        frame.body(body[:height])
        frame.divider()
        frame.footer(["Press any key to close"])
        frame.bottom()
        return frame.finish()

    def on_key(self, key: KeypressEvent) -> None:
        if is_up_key(key):
            if self.scroll_offset > 0:
                self.scroll_offset -= 1
                self.invalidate()
            return
        if is_down_key(key):
            if self.scroll_offset < self.max_scroll:
                self.scroll_offset += 1
                self.invalidate()
            return
        if key.name == "pageup":
            self.scroll_offset = max(0, self.scroll_offset - HELP_PAGE_SCROLL)
            self.invalidate()
            return
        if key.name == "pagedown":
            self.scroll_offset = min(self.max_scroll, self.scroll_offset + HELP_PAGE_SCROLL)
            self.invalidate()
            return
        self.close()


def show_help(content: HelpContent) -> None:
    """Show a help page until a key other than a scroll key is pressed."""
    run_screen(HelpScreen(content))


def merge_help_content(*contents: HelpContent) -> HelpContent:
    """Combine the sections and tips of several help pages.

    The screen name and description come from the first page.
    """
    if not contents:
        return HelpContent(screen_name="Help")
    first = contents[0]
    return HelpContent(
        screen_name=first.screen_name,
        description=first.description,
        sections=[section for content in contents for section in content.sections],
        tips=[tip for content in contents for tip in content.tips],
    )


def create_simple_help(screen_name: str, bindings: List[KeyBinding]) -> HelpContent:
    return HelpContent(
        screen_name=screen_name,
        sections=[HelpSection(title="Keyboard Shortcuts", bindings=list(bindings))],
    )
