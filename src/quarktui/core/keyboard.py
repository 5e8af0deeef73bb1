"""
Keyboard input handling.

prompt_toolkit does the raw-mode handling and escape-sequence parsing; this
module turns its key presses into small ``KeypressEvent`` values and offers
predicates for the keys every screen understands (navigation, confirm, back).
"""
import asyncio
from dataclasses import dataclass
from typing import Optional

from prompt_toolkit.input import create_input
from prompt_toolkit.key_binding.key_processor import KeyPress
from prompt_toolkit.keys import Keys

from quarktui.config import ESCAPE_KEY_TIMEOUT
from quarktui.core.terminal import require_tty


@dataclass(frozen=True)
class KeypressEvent:
    """A single key press.

    ``name`` identifies the key ("up", "return", "a" ...), ``char`` is the
    character it produced, if any.
    """
    name: Optional[str] = None
    ctrl: bool = False
    meta: bool = False
    shift: bool = False
    char: Optional[str] = None

    @classmethod
    def from_char(cls, char: str) -> "KeypressEvent":
        """Event for a typed character."""
        if char == " ":
            return cls(name="space", char=char)
        if char.isalpha():
            return cls(name=char.lower(), shift=char.isupper(), char=char)
        return cls(name=char, char=char)


_NAMED_KEYS = {
    Keys.Up: "up",
    Keys.Down: "down",
    Keys.Left: "left",
    Keys.Right: "right",
    Keys.Enter: "return",
    Keys.ControlJ: "return",
    Keys.Escape: "escape",
    Keys.Backspace: "backspace",
    Keys.Tab: "tab",
    Keys.Delete: "delete",
    Keys.Insert: "insert",
    Keys.Home: "home",
    Keys.End: "end",
    Keys.PageUp: "pageup",
    Keys.PageDown: "pagedown",
}

# Events produced by the terminal itself rather than by the user
IGNORED_KEYS = frozenset({Keys.CPRResponse, Keys.Vt100MouseEvent, Keys.WindowsMouseEvent, Keys.Ignore})


def from_key_press(key_press: KeyPress) -> KeypressEvent:
    """Convert a prompt_toolkit key press into a KeypressEvent."""
    key = key_press.key
    data = key_press.data or None

    if key in _NAMED_KEYS:
        return KeypressEvent(name=_NAMED_KEYS[key], char=data)
    if key == Keys.BackTab:
        return KeypressEvent(name="tab", shift=True, char=data)

    value = key.value if isinstance(key, Keys) else key
    if len(value) == 1:
        return KeypressEvent.from_char(value)

    ctrl = shift = False
    if value.startswith("c-s-"):
        ctrl = shift = True
        value = value[4:]
    elif value.startswith("c-"):
        ctrl = True
        value = value[2:]
    elif value.startswith("s-"):
        shift = True
        value = value[2:]
    return KeypressEvent(name=value, ctrl=ctrl, shift=shift, char=data)


def is_back_key(key: KeypressEvent) -> bool:
    """Backspace, escape, 'q' or Ctrl+C."""
    return (
        key.name == "backspace"
        or key.name == "escape"
        or key.char == "q"
        or (key.ctrl and key.name == "c")
    )


def is_confirm_key(key: KeypressEvent) -> bool:
    """Return/enter."""
    return key.name == "return"


def is_up_key(key: KeypressEvent) -> bool:
    return key.name == "up" or key.char == "k"


def is_down_key(key: KeypressEvent) -> bool:
    return key.name == "down" or key.char == "j"


def is_left_key(key: KeypressEvent) -> bool:
    return key.name == "left" or key.char == "h"


def is_right_key(key: KeypressEvent) -> bool:
    return key.name == "right" or key.char == "l"


def is_help_key(key: KeypressEvent) -> bool:
    return key.char == "?" or key.name == "?"


def is_cancel_key(key: KeypressEvent) -> bool:
    """Ctrl+C only; used where 'q' and backspace are ordinary input."""
    return key.ctrl and key.name == "c"


def get_number_key(key: KeypressEvent) -> Optional[int]:
    """The digit of a number key (0-9), or None."""
    if key.char and len(key.char) == 1 and key.char in "0123456789":
        return int(key.char)
    return None


def is_printable(key: KeypressEvent) -> bool:
    """A single typed character without ctrl/meta modifiers."""
    return bool(key.char and len(key.char) == 1 and key.char.isprintable() and not key.ctrl and not key.meta)


async def _read_one_key() -> KeypressEvent:
    loop = asyncio.get_running_loop()
    done = loop.create_future()
    terminal_input = create_input()

    def deliver(key_presses) -> None:
        for key_press in key_presses:
            if key_press.key in IGNORED_KEYS or done.done():
                continue
            done.set_result(from_key_press(key_press))

    def flush_pending() -> None:
        # A lone ESC stays in the parser until the next byte arrives
        deliver(terminal_input.flush_keys())

    def keys_ready() -> None:
        deliver(terminal_input.read_keys())
        if not done.done():
            loop.call_later(ESCAPE_KEY_TIMEOUT, flush_pending)

    with terminal_input.raw_mode():
        with terminal_input.attach(keys_ready):
            return await done


def wait_for_keypress() -> KeypressEvent:
    """Block until one key is pressed and return it.

    Raises:
        TerminalError: If stdin/stdout are not terminals
    """
    require_tty()
    return asyncio.run(_read_one_key())
