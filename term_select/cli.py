from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from .colors import Color
from .components import render_color_table, render_error
from .demos import DEMOS
from .errors import MenuError
from .logging import setup_logging
from .settings import load_settings
from .terminal import Terminal

app = typer.Typer(
    add_completion=False,
    help="term_select: arrow-navigable nested terminal menus",
    rich_markup_mode="rich",
)
console = Console()


@app.command("demo", help="Run one of the bundled demo menus")
def demo(
    name: str = typer.Argument("hello", help=f"Demo to run: {', '.join(DEMOS)}"),
    color: Optional[Color] = typer.Option(None, "--color", "-c", help="Highlight color of the top menu"),
):
    """Run a demo menu; Esc leaves it."""
    builder_fn = DEMOS.get(name)
    if builder_fn is None:
        render_error(console, "Unknown demo", f"'{escape(name)}' is not a bundled demo", f"Pick one of: {', '.join(DEMOS)}")
        raise typer.Exit(code=1)

    settings = load_settings()
    setup_logging(settings)

    top_color = color or settings.TERM_SELECT_HIGHLIGHT_COLOR
    try:
        result = builder_fn(top_color).display(Terminal(console), settings=settings)
    except MenuError as e:
        render_error(console, "Menu error", escape(str(e)))
        raise typer.Exit(code=1)
    except OSError as e:
        render_error(console, "Terminal I/O failed", escape(str(e)), "Run the demo from an interactive terminal")
        raise typer.Exit(code=1)

    console.print()
    if result is not None:
        console.print(f"[dim]Result:[/dim] {escape(str(result))}")


@app.command("colors", help="Show how each highlight color renders")
def colors():
    render_color_table(console)


def main() -> None:
    app()
