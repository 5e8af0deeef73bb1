import logging

import pytest

from quarktui.core.drawing import set_layout
from quarktui.core.keyboard import KeypressEvent
from quarktui.core.terminal import TerminalSize
from quarktui.core.theme import reset_theme


@pytest.fixture(autouse=True)
def default_look():
    """Every test starts from the default theme and layout padding."""
    reset_theme()
    set_layout(2, 1)
    yield
    reset_theme()
    set_layout(2, 1)


@pytest.fixture
def size():
    return TerminalSize(80, 24)


@pytest.fixture
def restore_logging():
    """Undo whatever setup_logging does to the global loggers."""
    loggers = [logging.getLogger(), logging.getLogger("quarktui"), logging.getLogger("asyncio")]
    saved = [(logger.handlers[:], logger.level, logger.propagate) for logger in loggers]
    yield
    for logger, (handlers, level, propagate) in zip(loggers, saved):
        for handler in logger.handlers:
            if handler not in handlers:
                handler.close()
        logger.handlers = handlers
        logger.setLevel(level)
        logger.propagate = propagate


def key(name: str, **modifiers) -> KeypressEvent:
    """Named key, e.g. key("up") or key("c", ctrl=True)."""
    return KeypressEvent(name=name, **modifiers)


def press(char: str) -> KeypressEvent:
    return KeypressEvent.from_char(char)
