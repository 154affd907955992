"""Exceptions raised by term_select.

Terminal and callback failures are not wrapped: an ``OSError`` raised while
a menu is displayed reaches the caller of ``display`` unchanged.
"""
from __future__ import annotations


class MenuError(Exception):
    """Base class for menu construction and display errors."""


class MenuBuildError(MenuError):
    """Builder methods were chained in an invalid order."""


class EmptyMenuError(MenuError):
    """A menu without items was asked to display."""
