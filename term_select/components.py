"""Reusable rendering pieces for the display loop and the CLI."""
from __future__ import annotations

from typing import TYPE_CHECKING

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .colors import Color, highlight_style

if TYPE_CHECKING:
    from rich.console import Console

    from .menu import Menu
    from .navigator import Navigator
    from .settings import Settings
    from .terminal import Terminal


HINT_TOP = "↑/↓ move  Enter select  Esc quit"
HINT_NESTED = "↑/↓ move  Enter select  ← back one menu  Esc quit"


# ═══════════════════════════════════════════════════════════════════════════════
# MENU ROWS
# ═══════════════════════════════════════════════════════════════════════════════

def resolve_look(menu: Menu, settings: Settings) -> tuple[Color, str | None]:
    """Menu's own color/select char, falling back to the configured defaults."""
    color = menu.highlight_color or settings.TERM_SELECT_HIGHLIGHT_COLOR
    select_char = menu.select_char if menu.select_char is not None else settings.TERM_SELECT_SELECT_CHAR
    return color, select_char


def build_row(name: str, selected: bool, color: Color, select_char: str | None) -> Text:
    """Build one menu row.

    With a select char, unselected rows are indented by its width so labels
    line up.
    """
    if select_char:
        prefix = f"{select_char} " if selected else " " * (len(select_char) + 1)
    else:
        prefix = ""
    row = Text(f"{prefix}{name}")
    if selected:
        row.stylize(highlight_style(color))
    return row


def render_menu_rows(menu: Menu, index: int, color: Color, select_char: str | None) -> list[Text]:
    return [
        build_row(item.name, i == index, color, select_char)
        for i, item in enumerate(menu.items)
    ]


def render_menu(
    terminal: Terminal,
    menu: Menu,
    index: int,
    nav: Navigator,
    settings: Settings,
) -> None:
    """Clear the screen and draw one menu level with ``index`` highlighted."""
    color, select_char = resolve_look(menu, settings)

    terminal.hide_cursor()
    terminal.clear_screen()

    if settings.TERM_SELECT_SHOW_BREADCRUMBS and not nav.at_top():
        terminal.write_line(Text(nav.breadcrumbs(), style="dim"))
        terminal.write_line()

    for row in render_menu_rows(menu, index, color, select_char):
        terminal.write_line(row)

    if settings.TERM_SELECT_SHOW_HINTS:
        terminal.write_line()
        terminal.write_str(Text(HINT_TOP if nav.at_top() else HINT_NESTED, style="dim"))


# ═══════════════════════════════════════════════════════════════════════════════
# CLI OUTPUT
# ═══════════════════════════════════════════════════════════════════════════════

def render_error(
    console: Console,
    title: str,
    cause: str,
    action: str | None = None,
) -> None:
    """Render a friendly error panel with 3-part structure.

    Args:
        console: Rich Console for output
        title: Error title
        cause: What caused the error
        action: Suggested action to resolve
    """
    content = f"[bold red]✗ {title}[/bold red]\n\n"
    content += f"[yellow]Cause:[/yellow] {cause}\n"

    if action:
        content += f"\n[dim]→ {action}[/dim]"

    console.print(Panel.fit(content, border_style="red", title="Error"))
    console.print()


def render_color_table(console: Console, sample: str = "Selected item") -> None:
    """Show every highlight color as it would look on a selected row."""
    table = Table(title="[bold]Highlight colors[/bold]", show_header=True)
    table.add_column("Name", style="bold")
    table.add_column("Selected row")

    for color in Color:
        table.add_row(color.value, Text(f" {sample} ", style=highlight_style(color)))

    console.print(table)
    console.print()
