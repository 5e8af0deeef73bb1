"""
Core building blocks for quarktui.

This package contains the style engine, the theme registry, terminal and
keyboard handling, frame drawing helpers and the exception hierarchy.
"""
from quarktui.core.drawing import (BOX, BOX_DOUBLE, BOX_SHARP, FrameBuilder,
                                   calculate_centering_padding,
                                   calculate_content_height,
                                   calculate_frame_width,
                                   get_frame_dimensions, get_layout,
                                   get_padding, horizontal_rule, set_layout)
from quarktui.core.exceptions import (DialogError, QuarkTUIError,
                                      TerminalError, ThemeError,
                                      WidgetDefinitionError)
from quarktui.core.keyboard import (KeypressEvent, from_key_press,
                                    get_number_key, is_back_key,
                                    is_cancel_key, is_confirm_key,
                                    is_down_key, is_help_key, is_left_key,
                                    is_printable, is_right_key, is_up_key,
                                    wait_for_keypress)
from quarktui.core.style import (format_bold, format_dim, format_error,
                                 format_info, format_success, format_warning,
                                 pad_center, pad_left, pad_right, raw, repeat,
                                 slice_visible, strip_ansi, style, style_spec,
                                 truncate, visible_length)
from quarktui.core.terminal import (RenderBuffer, TerminalSize,
                                    get_terminal_size, is_input_tty, is_tty,
                                    require_tty)
from quarktui.core.theme import (ANSI, ANSI_BG, BOLD, DEFAULT_THEME, DIM,
                                 RESET, Theme, ThemeColors, available_themes,
                                 create_theme, get_builtin_theme, get_colors,
                                 get_current_theme, on_theme_change,
                                 reset_theme, set_theme)

__all__ = [
    # Exceptions
    'QuarkTUIError',
    'WidgetDefinitionError',
    'ThemeError',
    'DialogError',
    'TerminalError',

    # Theme
    'Theme',
    'ThemeColors',
    'DEFAULT_THEME',
    'ANSI',
    'ANSI_BG',
    'RESET',
    'BOLD',
    'DIM',
    'get_current_theme',
    'set_theme',
    'reset_theme',
    'on_theme_change',
    'get_colors',
    'create_theme',
    'get_builtin_theme',
    'available_themes',

    # Style
    'style',
    'style_spec',
    'raw',
    'strip_ansi',
    'visible_length',
    'repeat',
    'pad_right',
    'pad_left',
    'pad_center',
    'truncate',
    'slice_visible',
    'format_dim',
    'format_bold',
    'format_success',
    'format_error',
    'format_warning',
    'format_info',

    # Terminal
    'RenderBuffer',
    'TerminalSize',
    'get_terminal_size',
    'is_tty',
    'is_input_tty',
    'require_tty',

    # Keyboard
    'KeypressEvent',
    'from_key_press',
    'wait_for_keypress',
    'is_back_key',
    'is_cancel_key',
    'is_confirm_key',
    'is_up_key',
    'is_down_key',
    'is_left_key',
    'is_right_key',
    'is_help_key',
    'get_number_key',
    'is_printable',

    # Drawing
    'BOX',
    'BOX_SHARP',
    'BOX_DOUBLE',
    'FrameBuilder',
    'set_layout',
    'get_layout',
    'get_padding',
    'get_frame_dimensions',
    'calculate_frame_width',
    'calculate_centering_padding',
    'calculate_content_height',
    'horizontal_rule',
]
