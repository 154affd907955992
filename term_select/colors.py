"""Named highlight colors and their rich styles."""
from __future__ import annotations

from enum import Enum

from rich.style import Style


class Color(str, Enum):
    """Terminal colors usable as the selection highlight."""

    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"

    @classmethod
    def parse(cls, value: str | Color) -> Color:
        """Resolve a color name (case-insensitive) or pass a Color through."""
        if isinstance(value, Color):
            return value
        name = str(value or "").strip().lower()
        try:
            return cls(name)
        except ValueError:
            valid = ", ".join(c.value for c in cls)
            raise ValueError(f"unknown color {value!r} (expected one of: {valid})") from None


def highlight_style(color: Color) -> Style:
    """Return the style for a highlighted row.

    Black text on the color background; black itself gets white text.
    """
    if color is Color.BLACK:
        return Style(color="white", bgcolor="black")
    return Style(color="black", bgcolor=color.value)
