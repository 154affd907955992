"""Menu tree data model."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Optional

from .colors import Color

if TYPE_CHECKING:
    from .terminal import Terminal

# (terminal, carried value) -> value handed to the sub-menu, or None
Callback = Callable[["Terminal", Optional[Any]], Optional[Any]]


@dataclass
class MenuItem:
    """One selectable entry: label, callback and an optional child menu."""

    name: str
    callback: Callback
    sub_menu: Optional[Menu] = None


@dataclass
class Menu:
    """Ordered list of items; list order is display and navigation order."""

    items: list[MenuItem] = field(default_factory=list)
    highlight_color: Optional[Color] = None
    select_char: Optional[str] = None

    def __len__(self) -> int:
        return len(self.items)

    def names(self) -> list[str]:
        return [item.name for item in self.items]

    def depth(self) -> int:
        """Number of levels in this tree, counting this menu as 1."""
        children = [item.sub_menu.depth() for item in self.items if item.sub_menu is not None]
        return 1 + max(children, default=0)
