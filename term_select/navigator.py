"""Descent stack for nested menus, used for breadcrumbs."""
from __future__ import annotations


class Navigator:
    """Stack of the menu levels currently open.

    Follows the display loop's recursion:
    - Push on descent: entering a sub-menu pushes the item's name
    - Pop on return: leaving a sub-menu pops it again
    - The root label is always at the bottom and is never popped
    """

    def __init__(self, root_label: str = "Home"):
        """Initialize with only the top level open.

        Args:
            root_label: Breadcrumb label for the top-level menu
        """
        self.root_label = root_label
        self.stack: list[str] = [root_label]

    def push(self, label: str) -> None:
        """Record descent into the sub-menu of the item named ``label``."""
        self.stack.append(label)

    def pop(self) -> str | None:
        """Go back to the parent level.

        Returns:
            The label that was popped, or None if at the top level
        """
        if len(self.stack) > 1:
            return self.stack.pop()
        return None

    def current(self) -> str:
        return self.stack[-1]

    def at_top(self) -> bool:
        return len(self.stack) == 1

    def breadcrumbs(self) -> str:
        """Generate breadcrumb navigation string.

        Returns:
            Breadcrumb path like "Home > Settings > Colors"
        """
        return " > ".join(self.stack)

    def depth(self) -> int:
        """Number of open levels, the top level included."""
        return len(self.stack)
