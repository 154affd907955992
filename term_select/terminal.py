"""Terminal I/O used by the display loop and handed to every callback."""
from __future__ import annotations

import logging
from enum import Enum

from prompt_toolkit import prompt
from prompt_toolkit.key_binding import KeyBindings
from rich.console import Console
from rich.text import Text

logger = logging.getLogger(__name__)


class Key(str, Enum):
    """Keys the display loop reacts to; everything else is OTHER."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ENTER = "enter"
    ESCAPE = "escape"
    OTHER = "other"


def _key_bindings() -> KeyBindings:
    """Bindings that end the prompt as soon as one key is pressed."""
    kb = KeyBindings()

    @kb.add("up")
    def _up(event):
        event.app.exit(result=Key.UP.value)

    @kb.add("down")
    def _down(event):
        event.app.exit(result=Key.DOWN.value)

    @kb.add("left")
    def _left(event):
        event.app.exit(result=Key.LEFT.value)

    @kb.add("right")
    def _right(event):
        event.app.exit(result=Key.RIGHT.value)

    @kb.add("enter")
    def _enter(event):
        event.app.exit(result=Key.ENTER.value)

    @kb.add("escape", eager=True)
    def _escape(event):
        event.app.exit(result=Key.ESCAPE.value)

    @kb.add("c-c")
    def _interrupt(event):
        event.app.exit(exception=KeyboardInterrupt, style="class:aborting")

    @kb.add("<any>")
    def _other(event):
        event.app.exit(result=Key.OTHER.value)

    return kb


def _to_key(result: object) -> Key:
    try:
        return Key(result)
    except ValueError:
        return Key.OTHER


class Terminal:
    """Thin wrapper over a rich Console plus single-key input.

    Every method may raise ``OSError``; the display loop does not catch it.
    """

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def clear_screen(self) -> None:
        self.console.clear()

    def hide_cursor(self) -> None:
        self.console.show_cursor(False)

    def show_cursor(self) -> None:
        self.console.show_cursor(True)

    def write_str(self, text: str | Text) -> None:
        """Write text without a trailing newline. Markup is not interpreted."""
        self.console.print(text, end="", markup=False, highlight=False, soft_wrap=True)

    def write_line(self, text: str | Text = "") -> None:
        self.console.print(text, markup=False, highlight=False, soft_wrap=True)

    def read_line(self, prompt_text: str = "") -> str:
        """Read one line of input (the cursor should be visible for this)."""
        return self.console.input(prompt_text, markup=False)

    def read_key(self) -> Key:
        """Block until a single key is pressed and return it.

        Ctrl-C raises KeyboardInterrupt.
        """
        result = prompt("", key_bindings=_key_bindings(), default="")
        key = _to_key(result)
        logger.debug("key pressed: %s", key.value)
        return key
