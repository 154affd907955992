"""Fluent construction of menu trees."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional

from .colors import Color
from .errors import MenuBuildError
from .menu import Callback, Menu, MenuItem
from .selector import Selector

if TYPE_CHECKING:
    from .settings import Settings
    from .terminal import Terminal

logger = logging.getLogger(__name__)


@dataclass
class _OpenItem:
    name: str
    callback: Optional[Callback] = None
    sub_menu: Optional[Menu] = None

    def finish(self) -> MenuItem:
        if self.callback is None:
            raise MenuBuildError(f"item '{self.name}' has no action")
        return MenuItem(name=self.name, callback=self.callback, sub_menu=self.sub_menu)


@dataclass
class _MenuContext:
    """One menu under construction and its unfinished item, if any."""

    menu: Menu = field(default_factory=Menu)
    item: Optional[_OpenItem] = None


class AppBuilder:
    """Builds a Menu tree by method chaining.

    Builder state is a stack of open menus: ``sub_menu()`` pushes one,
    ``push_sub_menu()`` pops it and hangs it under the parent's open item.
    Calls made out of order raise MenuBuildError straight away.

    Example:
        (
            AppBuilder()
            .select_color(Color.GREEN)
            .item_name("Tell us your name")
                .action(ask_name)
                .sub_menu()
                    .select_color(Color.RED)
                    .item_name("Print it")
                        .action(print_name)
                .push_sub_menu()
            .push_menu_item()
            .display(Terminal())
        )
    """

    def __init__(self):
        self._stack: list[_MenuContext] = [_MenuContext()]

    @property
    def depth(self) -> int:
        """Number of menus currently open, the root included."""
        return len(self._stack)

    @property
    def _current(self) -> _MenuContext:
        return self._stack[-1]

    def _open_item(self, method: str) -> _OpenItem:
        item = self._current.item
        if item is None:
            raise MenuBuildError(f"{method}() needs an open item; call item_name() first")
        return item

    def select_color(self, color: Color | str) -> AppBuilder:
        """Set the highlight color of the innermost open menu."""
        try:
            self._current.menu.highlight_color = Color.parse(color)
        except ValueError as e:
            raise MenuBuildError(str(e)) from e
        return self

    def select_char(self, select_char: str) -> AppBuilder:
        """Set the marker drawn before the highlighted row of the innermost open menu."""
        self._current.menu.select_char = select_char
        return self

    def item_name(self, name: str) -> AppBuilder:
        if self._current.item is not None:
            raise MenuBuildError(
                f"item '{self._current.item.name}' is still open; "
                "call push_menu_item() before starting another"
            )
        self._current.item = _OpenItem(name=name)
        return self

    def action(self, callback: Callback) -> AppBuilder:
        item = self._open_item("action")
        if item.callback is not None:
            raise MenuBuildError(f"item '{item.name}' already has an action")
        if not callable(callback):
            raise MenuBuildError(f"action for '{item.name}' must be callable, got {type(callback).__name__}")
        item.callback = callback
        return self

    def sub_menu(self) -> AppBuilder:
        item = self._open_item("sub_menu")
        if item.callback is None:
            raise MenuBuildError(f"item '{item.name}' needs an action before its sub_menu()")
        if item.sub_menu is not None:
            raise MenuBuildError(f"item '{item.name}' already has a sub-menu")
        self._stack.append(_MenuContext())
        return self

    def push_sub_menu(self) -> AppBuilder:
        if len(self._stack) == 1:
            raise MenuBuildError("push_sub_menu() without a matching sub_menu()")

        ctx = self._stack.pop()
        if ctx.item is not None:
            # the last item of a sub-menu may be closed by push_sub_menu() itself
            ctx.menu.items.append(ctx.item.finish())
            ctx.item = None
        if not ctx.menu.items:
            raise MenuBuildError("sub-menu has no items")

        parent = self._open_item("push_sub_menu")
        parent.sub_menu = ctx.menu
        logger.debug("attached %d-item sub-menu to '%s'", len(ctx.menu), parent.name)
        return self

    def push_menu_item(self) -> AppBuilder:
        ctx = self._current
        item = self._open_item("push_menu_item")
        ctx.menu.items.append(item.finish())
        ctx.item = None
        return self

    def build(self) -> Menu:
        """Return the root Menu.

        A still-open root item with an action is appended first.
        """
        if len(self._stack) > 1:
            raise MenuBuildError(f"{len(self._stack) - 1} sub_menu() call(s) never closed with push_sub_menu()")

        ctx = self._current
        if ctx.item is not None:
            ctx.menu.items.append(ctx.item.finish())
            ctx.item = None
        return ctx.menu

    def display(
        self,
        terminal: Terminal,
        value: Optional[Any] = None,
        settings: Settings | None = None,
    ) -> Optional[Any]:
        """Build the tree and run the selection loop on ``terminal``.

        Returns whatever the top-level callback that ended the loop returned.
        """
        menu = self.build()
        return Selector(menu, settings=settings).display(terminal, value)
