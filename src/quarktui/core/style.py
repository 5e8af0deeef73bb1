"""
Style engine and ANSI-aware string primitives.

Styles are semantic tags (``"bold"``, ``"error"``, ``"muted"`` ...) resolved
against a theme when the string is produced. The helpers below measure and
manipulate strings by their *visible* length, i.e. ignoring embedded
``ESC [ ... m`` sequences.
"""
import re
from typing import Optional, Sequence, Union

from quarktui.config import DEFAULT_ELLIPSIS
from quarktui.core.theme import BOLD, DIM, RESET, Theme, get_current_theme

# ESC [ up to and including the first "m" (or the end of the string)
ANSI_PATTERN = re.compile(r"\x1b\[[^m]*(?:m|$)")

StyleSpec = Optional[Union[str, Sequence[str]]]

STYLE_TAGS = (
    "dim", "bold", "success", "warning", "error", "info",
    "accent", "highlight", "muted", "text", "border",
)

# Tag -> attribute of ThemeColors
_THEME_ROLES = {
    "success": "success",
    "warning": "warning",
    "error": "error",
    "info": "info",
    "accent": "accent",
    "highlight": "highlight",
    "muted": "text_muted",
    "text": "text",
    "border": "border",
    "cursor": "cursor",
}


def style(text: str, *tags: str, theme: Theme = None) -> str:
    """Wrap text in the ANSI codes for the given style tags.

    Unknown tags are ignored so styling never fails. The result is always
    closed with a single reset code.

    Args:
        text: The text to style
        *tags: Style tags, applied in order
        theme: Theme to resolve colours against (defaults to the current theme)

    Returns:
        Styled text, or the text unchanged when no tags are given
    """
    if not tags:
        return text

    colors = (theme or get_current_theme()).colors
    prefix = ""
    for tag in tags:
        if tag == "dim":
            prefix += DIM
        elif tag == "bold":
            prefix += BOLD
        elif tag in _THEME_ROLES:
            prefix += getattr(colors, _THEME_ROLES[tag])
    return f"{prefix}{text}{RESET}"


def style_spec(text: str, spec: StyleSpec, theme: Theme = None) -> str:
    """Apply a style given as ``None``, a single tag or a sequence of tags."""
    if not spec:
        return text
    if isinstance(spec, str):
        return style(text, spec, theme=theme)
    return style(text, *spec, theme=theme)


def raw(text: str, *codes: str) -> str:
    """Wrap text in raw ANSI codes, closed with a reset."""
    if not codes:
        return text
    return f"{''.join(codes)}{text}{RESET}"


def strip_ansi(text: str) -> str:
    """Remove all ``ESC [ ... m`` sequences from text."""
    return ANSI_PATTERN.sub("", text)


def visible_length(text: str) -> int:
    """Number of characters that will be displayed (escape codes excluded)."""
    return len(strip_ansi(text))


def repeat(char: str, count: int) -> str:
    """Repeat a string; negative counts give an empty string."""
    return char * max(0, count)


def pad_right(text: str, width: int, pad_char: str = " ") -> str:
    """Pad on the right until the visible length reaches width."""
    length = visible_length(text)
    if length >= width:
        return text
    return text + repeat(pad_char, width - length)


def pad_left(text: str, width: int, pad_char: str = " ") -> str:
    """Pad on the left until the visible length reaches width."""
    length = visible_length(text)
    if length >= width:
        return text
    return repeat(pad_char, width - length) + text


def pad_center(text: str, width: int, pad_char: str = " ") -> str:
    """Pad both sides; the right side gets the odd extra character."""
    length = visible_length(text)
    if length >= width:
        return text
    total = width - length
    left = total // 2
    return repeat(pad_char, left) + text + repeat(pad_char, total - left)


def truncate(text: str, max_length: int, ellipsis: str = DEFAULT_ELLIPSIS) -> str:
    """Shorten text to at most max_length visible characters.

    Styling is dropped when the text has to be cut. The result never exceeds
    max_length, even when the ellipsis itself does not fit.

    Args:
        text: The text to shorten
        max_length: Maximum visible length of the result
        ellipsis: Marker appended to cut text

    Returns:
        The original text if it fits, otherwise the cut plain text
    """
    max_length = max(0, max_length)
    stripped = strip_ansi(text)
    if len(stripped) <= max_length:
        return text
    if max_length <= len(ellipsis):
        return ellipsis[:max_length]
    return stripped[:max_length - len(ellipsis)] + ellipsis


def slice_visible(text: str, width: int) -> str:
    """Keep the first ``width`` visible characters, preserving escape codes.

    When any escape code was kept the result is closed with a reset so the
    style cannot bleed into whatever follows.
    """
    if width <= 0:
        return ""
    parts = []
    count = 0
    saw_escape = False
    pos = 0
    for match in ANSI_PATTERN.finditer(text):
        chunk = text[pos:match.start()]
        if count + len(chunk) >= width:
            parts.append(chunk[:width - count])
            count = width
            break
        parts.append(chunk)
        count += len(chunk)
        parts.append(match.group())
        saw_escape = True
        pos = match.end()
    else:
        chunk = text[pos:]
        parts.append(chunk[:width - count])

    result = "".join(parts)
    if saw_escape and not result.endswith(RESET):
        result += RESET
    return result


def format_dim(text: str) -> str:
    return style(text, "dim")


def format_bold(text: str) -> str:
    return style(text, "bold")


def format_success(text: str) -> str:
    return style(text, "success")


def format_error(text: str) -> str:
    return style(text, "error")


def format_warning(text: str) -> str:
    return style(text, "warning")


def format_info(text: str) -> str:
    return style(text, "info")
