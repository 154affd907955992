"""Display loop: render a menu, read keys, run callbacks, descend."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

from .components import render_menu
from .errors import EmptyMenuError
from .navigator import Navigator
from .settings import Settings, load_settings
from .state import LevelState
from .terminal import Key

if TYPE_CHECKING:
    from .menu import Menu
    from .terminal import Terminal

logger = logging.getLogger(__name__)


class _QuitMenu(Exception):
    """Raised on Escape to unwind every open level at once."""


class Selector:
    """Runs the interactive selection loop over a Menu tree.

    Each level is its own loop. Enter runs the highlighted item's callback
    with the value carried into that level. A non-None result on an item
    with a sub-menu descends into it with the result as the new carried
    value; anything else ends the level and hands the result to the caller.
    The top level's result is what ``display`` returns.
    """

    def __init__(
        self,
        menu: Menu,
        settings: Settings | None = None,
        nav: Navigator | None = None,
    ):
        """Initialize the selector.

        Args:
            menu: Root of the menu tree
            settings: Rendering defaults; loaded from the environment if omitted
            nav: Navigator tracking descent; a fresh one if omitted
        """
        self.menu = menu
        self.settings = settings or load_settings()
        self.nav = nav or Navigator(self.settings.TERM_SELECT_ROOT_LABEL)
        # Breadcrumb path of every item activated by the last display(), oldest first
        self.history: list[str] = []

    def display(self, terminal: Terminal, value: Optional[Any] = None) -> Optional[Any]:
        """Run the loop until the top-level menu completes.

        Args:
            terminal: Terminal used for drawing and passed to callbacks
            value: Carried value handed to the top-level callbacks

        Returns:
            The result of the top-level callback that ended the loop, or
            None if the user pressed Escape.

        Raises:
            EmptyMenuError: A displayed menu has no items
            Exception: Whatever a callback or terminal operation raised,
                unchanged
        """
        self.history = []
        try:
            try:
                result = self._run_level(terminal, self.menu, value)
            except _QuitMenu:
                logger.debug("escape pressed, leaving menu")
                terminal.clear_screen()
                result = None
        except BaseException:
            # the original error wins over a failing cursor restore
            try:
                terminal.show_cursor()
            except OSError as e:
                logger.warning("could not restore cursor: %s", e)
            raise
        terminal.show_cursor()
        return result

    def _run_level(self, terminal: Terminal, menu: Menu, carried: Optional[Any]) -> Optional[Any]:
        if not menu.items:
            raise EmptyMenuError(f"menu '{self.nav.current()}' has no items to display")

        state = LevelState(count=len(menu))
        while True:
            render_menu(terminal, menu, state.index, self.nav, self.settings)
            key = terminal.read_key()

            if key is Key.DOWN:
                state.move_down()
            elif key is Key.UP:
                state.move_up()
            elif key is Key.ENTER:
                item = menu.items[state.index]
                result = self._activate(terminal, item, carried)

                if result is not None and item.sub_menu is not None:
                    self._descend(terminal, item.name, item.sub_menu, result)
                    continue
                return result
            elif key is Key.LEFT:
                if not self.nav.at_top():
                    logger.debug("back from '%s'", self.nav.current())
                    terminal.clear_screen()
                    return None
            elif key is Key.ESCAPE:
                raise _QuitMenu()

    def _activate(self, terminal: Terminal, item, carried: Optional[Any]) -> Optional[Any]:
        path = f"{self.nav.breadcrumbs()} > {item.name}"
        self.history.append(path)
        logger.debug("activating %s", path)
        try:
            return item.callback(terminal, carried)
        except Exception as e:
            logger.warning("callback for %s failed: %s", path, e)
            raise

    def _descend(self, terminal: Terminal, name: str, sub_menu: Menu, value: Any) -> None:
        self.nav.push(name)
        logger.debug("descending into %s", self.nav.breadcrumbs())
        try:
            self._run_level(terminal, sub_menu, value)
        finally:
            self.nav.pop()
