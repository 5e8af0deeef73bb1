"""
Custom exceptions for quarktui.

Rendering itself never raises: widths are clamped and unknown styles are
ignored. These exceptions cover programmer errors detected while composing
widgets, themes and dialogs, and interactive use without a terminal.
"""


class QuarkTUIError(Exception):
    """Base exception class for all quarktui-specific errors."""
    pass


class WidgetDefinitionError(QuarkTUIError):
    """Exception raised when a widget is composed from invalid parts."""

    def __init__(self, message: str, widget: str = None, index: int = None):
        super().__init__(message)
        self.widget = widget
        self.index = index

    def __str__(self):
        base_msg = super().__str__()
        if self.widget:
            base_msg += f" (Widget: {self.widget})"
        if self.index is not None:
            base_msg += f" (Position: {self.index})"
        return base_msg


class ThemeError(QuarkTUIError):
    """Exception raised when a theme is invalid or unknown."""

    def __init__(self, message: str, theme_id: str = None):
        super().__init__(message)
        self.theme_id = theme_id

    def __str__(self):
        base_msg = super().__str__()
        if self.theme_id:
            base_msg += f" (Theme: {self.theme_id})"
        return base_msg


class DialogError(QuarkTUIError):
    """Exception raised when a dialog is configured inconsistently."""

    def __init__(self, message: str, dialog: str = None):
        super().__init__(message)
        self.dialog = dialog

    def __str__(self):
        base_msg = super().__str__()
        if self.dialog:
            base_msg += f" (Dialog: {self.dialog})"
        return base_msg


class TerminalError(QuarkTUIError):
    """Exception raised when an interactive operation has no terminal to run on."""

    def __init__(self, message: str, stream: str = None):
        super().__init__(message)
        self.stream = stream

    def __str__(self):
        base_msg = super().__str__()
        if self.stream:
            base_msg += f" (Stream: {self.stream})"
        return base_msg
