"""
quarktui - themeable terminal UI components.

Widgets render to lists of ANSI-styled strings, screens turn key presses
into state changes, and the dialogs and pickers are ready-made screens.
"""
from quarktui.component import Component, ComponentConfig
from quarktui.core import (DialogError, KeypressEvent, QuarkTUIError,
                           TerminalError, TerminalSize, Theme, ThemeError,
                           WidgetDefinitionError, create_theme,
                           get_current_theme, get_terminal_size,
                           on_theme_change, set_layout, set_theme, style)
from quarktui.dialogs import (MenuOption, MultiSelectOption, confirm, error,
                              info, multi_select, password_input,
                              quick_multi_select, select_menu, show_help,
                              show_spinner, success, text_input, warning,
                              with_spinner)
from quarktui.pickers import pick_file, pick_folder
from quarktui.renderer import render, render_fitted
from quarktui.screen import Screen, run_screen
from quarktui.widgets import RenderContext, Widget
from quarktui.window import Window, WindowConfig, create_window

__version__ = "0.1.0"

__all__ = [
    # Errors
    'QuarkTUIError',
    'WidgetDefinitionError',
    'ThemeError',
    'DialogError',
    'TerminalError',

    # Core
    'KeypressEvent',
    'TerminalSize',
    'Theme',
    'create_theme',
    'get_current_theme',
    'get_terminal_size',
    'on_theme_change',
    'set_layout',
    'set_theme',
    'style',

    # Rendering
    'RenderContext',
    'Widget',
    'render',
    'render_fitted',

    # Screens
    'Screen',
    'run_screen',
    'Window',
    'WindowConfig',
    'create_window',
    'Component',
    'ComponentConfig',

    # Dialogs
    'MenuOption',
    'MultiSelectOption',
    'select_menu',
    'confirm',
    'text_input',
    'password_input',
    'multi_select',
    'quick_multi_select',
    'show_spinner',
    'with_spinner',
    'show_help',
    'info',
    'success',
    'warning',
    'error',

    # Pickers
    'pick_file',
    'pick_folder',
]
