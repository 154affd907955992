"""term_select: arrow-navigable nested terminal menus.

Build a tree of items with AppBuilder, then display it on a Terminal:
each item runs a callback that may hand a value down to its sub-menu.
"""
from .builder import AppBuilder
from .colors import Color
from .errors import EmptyMenuError, MenuBuildError, MenuError
from .logging import setup_logging
from .menu import Menu, MenuItem
from .navigator import Navigator
from .selector import Selector
from .settings import Settings, load_settings
from .terminal import Key, Terminal

__all__ = [
    "AppBuilder",
    "Color",
    "EmptyMenuError",
    "Key",
    "Menu",
    "MenuBuildError",
    "MenuError",
    "MenuItem",
    "Navigator",
    "Selector",
    "Settings",
    "Terminal",
    "load_settings",
    "setup_logging",
]
