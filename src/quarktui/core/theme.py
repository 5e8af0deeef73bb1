"""
Theme registry for quarktui.

This module owns the ANSI escape constants, the colour palette of a theme and
the process-wide "current theme". Widgets never capture colours at
construction time: they look them up while rendering, either from the theme
carried by their render context or from the registry defined here.
"""
from dataclasses import dataclass, field, fields, replace
from typing import Callable, Dict, List

from quarktui.config import DEFAULT_THEME_ID
from quarktui.core.exceptions import ThemeError
from quarktui.utils.logging_config import get_logger

logger = get_logger(__name__)

# Text attributes
RESET = "\x1b[0m"
BOLD = "\x1b[1m"
DIM = "\x1b[2m"
ITALIC = "\x1b[3m"
UNDERLINE = "\x1b[4m"
INVERSE = "\x1b[7m"
HIDDEN = "\x1b[8m"
STRIKETHROUGH = "\x1b[9m"


def fg(n: int) -> str:
    """256-colour foreground sequence."""
    return f"\x1b[38;5;{n}m"


def bg(n: int) -> str:
    """256-colour background sequence."""
    return f"\x1b[48;5;{n}m"


def fg_rgb(r: int, g: int, b: int) -> str:
    """24-bit foreground sequence."""
    return f"\x1b[38;2;{r};{g};{b}m"


def bg_rgb(r: int, g: int, b: int) -> str:
    """24-bit background sequence."""
    return f"\x1b[48;2;{r};{g};{b}m"


ANSI = {
    "black": "\x1b[30m",
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "magenta": "\x1b[35m",
    "cyan": "\x1b[36m",
    "white": "\x1b[37m",
    "gray": "\x1b[90m",
    "bright_red": "\x1b[91m",
    "bright_green": "\x1b[92m",
    "bright_yellow": "\x1b[93m",
    "bright_blue": "\x1b[94m",
    "bright_magenta": "\x1b[95m",
    "bright_cyan": "\x1b[96m",
    "bright_white": "\x1b[97m",
}

ANSI_BG = {
    "black": "\x1b[40m",
    "red": "\x1b[41m",
    "green": "\x1b[42m",
    "yellow": "\x1b[43m",
    "blue": "\x1b[44m",
    "magenta": "\x1b[45m",
    "cyan": "\x1b[46m",
    "white": "\x1b[47m",
    "gray": "\x1b[100m",
    "bright_red": "\x1b[101m",
    "bright_green": "\x1b[102m",
    "bright_yellow": "\x1b[103m",
    "bright_blue": "\x1b[104m",
    "bright_magenta": "\x1b[105m",
    "bright_cyan": "\x1b[106m",
    "bright_white": "\x1b[107m",
}


@dataclass(frozen=True)
class ThemeColors:
    """ANSI prefix for every semantic colour role."""
    border: str = ANSI["cyan"]
    accent: str = ANSI["magenta"]
    highlight: str = ANSI["cyan"]
    text: str = ANSI["white"]
    text_bold: str = BOLD + ANSI["white"]
    text_dim: str = DIM
    text_muted: str = ANSI["gray"]
    success: str = ANSI["green"]
    error: str = ANSI["red"]
    warning: str = ANSI["yellow"]
    info: str = ANSI["blue"]
    cursor: str = ANSI["cyan"]
    selection: str = ANSI["cyan"]


COLOR_ROLES = tuple(f.name for f in fields(ThemeColors))


@dataclass(frozen=True)
class Theme:
    """A named colour palette."""
    id: str
    name: str
    colors: ThemeColors = field(default_factory=ThemeColors)


DEFAULT_THEME = Theme(id="default", name="Default")

MONO_THEME = Theme(
    id="mono",
    name="Monochrome",
    colors=ThemeColors(
        border="", accent=BOLD, highlight=BOLD, text="", text_bold=BOLD,
        text_dim=DIM, text_muted=DIM, success=BOLD, error=BOLD, warning=BOLD,
        info="", cursor=INVERSE, selection=INVERSE,
    ),
)

OCEAN_THEME = Theme(
    id="ocean",
    name="Ocean",
    colors=ThemeColors(
        border=ANSI["blue"], accent=ANSI["bright_cyan"], highlight=ANSI["bright_blue"],
        text=ANSI["bright_white"], text_bold=BOLD + ANSI["bright_white"],
        success=ANSI["bright_green"], warning=ANSI["bright_yellow"],
        error=ANSI["bright_red"], info=ANSI["cyan"],
        cursor=ANSI["bright_cyan"], selection=ANSI["bright_blue"],
    ),
)

BUILTIN_THEMES: Dict[str, Theme] = {
    theme.id: theme for theme in (DEFAULT_THEME, MONO_THEME, OCEAN_THEME)
}

ThemeChangeListener = Callable[[Theme], None]


def create_theme(theme_id: str, name: str, **colors: str) -> Theme:
    """Create a theme from the default palette with some roles replaced.

    Args:
        theme_id: Unique identifier of the theme
        name: Human readable name
        **colors: Colour roles to override (e.g. ``accent=ANSI["green"]``)

    Returns:
        The new theme

    Raises:
        ThemeError: If a keyword is not a known colour role
    """
    unknown = sorted(set(colors) - set(COLOR_ROLES))
    if unknown:
        raise ThemeError(f"Unknown colour role(s): {', '.join(unknown)}", theme_id=theme_id)
    return Theme(id=theme_id, name=name, colors=replace(DEFAULT_THEME.colors, **colors))


def get_builtin_theme(theme_id: str) -> Theme:
    """Look up one of the bundled themes by id."""
    try:
        return BUILTIN_THEMES[theme_id]
    except KeyError:
        raise ThemeError("No built-in theme with this id", theme_id=theme_id) from None


def available_themes() -> List[str]:
    """Ids of the bundled themes."""
    return list(BUILTIN_THEMES)


class ThemeRegistry:
    """Holds the current theme and notifies subscribers when it changes."""

    def __init__(self, theme: Theme = DEFAULT_THEME):
        self._theme = theme
        self._listeners: List[ThemeChangeListener] = []

    @property
    def current(self) -> Theme:
        return self._theme

    def set(self, theme: Theme) -> None:
        if not isinstance(theme, Theme):
            raise ThemeError(f"Expected a Theme, got {type(theme).__name__}")
        logger.debug(f"Switching theme from '{self._theme.id}' to '{theme.id}'")
        self._theme = theme
        for listener in list(self._listeners):
            listener(theme)

    def subscribe(self, listener: ThemeChangeListener) -> Callable[[], None]:
        self._listeners.append(listener)
        logger.debug(f"Registered theme listener ({len(self._listeners)} total)")

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe


_registry = ThemeRegistry(BUILTIN_THEMES.get(DEFAULT_THEME_ID, DEFAULT_THEME))


def get_current_theme() -> Theme:
    """Return the active theme (the default theme unless one was set)."""
    return _registry.current


def set_theme(theme: Theme) -> None:
    """Replace the active theme and notify listeners."""
    _registry.set(theme)


def on_theme_change(listener: ThemeChangeListener) -> Callable[[], None]:
    """Subscribe to theme changes.

    Returns:
        A function that removes the listener again
    """
    return _registry.subscribe(listener)


def get_colors() -> ThemeColors:
    """Colours of the active theme."""
    return _registry.current.colors


def reset_theme() -> None:
    """Go back to the default theme."""
    _registry.set(DEFAULT_THEME)
