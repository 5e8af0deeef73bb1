"""
Pre-built dialogs for quarktui.

Every interactive dialog is a Screen (usable without a terminal by feeding
it key events) plus a blocking convenience function that runs it.
"""
from quarktui.dialogs.confirm import ConfirmDialog, confirm, confirm_yes_no
from quarktui.dialogs.help import (HelpContent, HelpScreen, HelpSection,
                                   KeyBinding, build_help_lines,
                                   create_simple_help, merge_help_content,
                                   show_help)
from quarktui.dialogs.input import (TextInputDialog, TextInputResult,
                                    password_input, text_input)
from quarktui.dialogs.message import (MESSAGE_TYPES, build_message, error,
                                      info, message, show_message,
                                      show_message_and_wait, success, warning)
from quarktui.dialogs.multiselect import (MultiSelectDialog, MultiSelectOption,
                                          MultiSelectResult, multi_select,
                                          quick_multi_select)
from quarktui.dialogs.select import (MenuOption, SelectMenu, SelectResult,
                                     select_menu)
from quarktui.dialogs.shared import DialogFrame, fit_body, format_hints
from quarktui.dialogs.spinner import (SPINNER_ARC, SPINNER_BAR, SPINNER_BOUNCE,
                                      SPINNER_BOX, SPINNER_CIRCLE,
                                      SPINNER_DOTS, SPINNER_LINE,
                                      SpinnerController, SpinnerOptions,
                                      build_spinner, show_spinner,
                                      with_spinner)

__all__ = [
    # Layout
    'DialogFrame',
    'fit_body',
    'format_hints',

    # Select
    'MenuOption',
    'SelectMenu',
    'SelectResult',
    'select_menu',

    # Confirm
    'ConfirmDialog',
    'confirm',
    'confirm_yes_no',

    # Text input
    'TextInputDialog',
    'TextInputResult',
    'text_input',
    'password_input',

    # Messages
    'MESSAGE_TYPES',
    'build_message',
    'show_message',
    'show_message_and_wait',
    'message',
    'info',
    'success',
    'warning',
    'error',

    # Spinner
    'SPINNER_DOTS',
    'SPINNER_LINE',
    'SPINNER_ARC',
    'SPINNER_CIRCLE',
    'SPINNER_BOX',
    'SPINNER_BOUNCE',
    'SPINNER_BAR',
    'SpinnerOptions',
    'SpinnerController',
    'build_spinner',
    'show_spinner',
    'with_spinner',

    # Multi-select
    'MultiSelectOption',
    'MultiSelectResult',
    'MultiSelectDialog',
    'multi_select',
    'quick_multi_select',

    # Help
    'KeyBinding',
    'HelpSection',
    'HelpContent',
    'HelpScreen',
    'build_help_lines',
    'show_help',
    'merge_help_content',
    'create_simple_help',
]
