"""Demo menus shipped with the CLI (`term-select demo ...`)."""
from __future__ import annotations

from typing import Callable, Optional

from .builder import AppBuilder
from .colors import Color
from .terminal import Terminal


def _show(t: Terminal, text: str) -> None:
    t.clear_screen()
    t.write_str(text)
    t.write_str("\n\nHit enter to continue")
    t.read_line()


# ═══════════════════════════════════════════════════════════════════════════════
# hello: two flat items
# ═══════════════════════════════════════════════════════════════════════════════

def _say(text: str) -> Callable[[Terminal, Optional[str]], Optional[str]]:
    def _callback(t: Terminal, _value: Optional[str]) -> Optional[str]:
        _show(t, text)
        return None
    return _callback


def hello_menu(color: Color = Color.GREEN) -> AppBuilder:
    return (
        AppBuilder()
        .select_color(color)
        .item_name("hello")
            .action(_say("hello"))
            .push_menu_item()
        .item_name("goodbye")
            .action(_say("goodbye"))
            .push_menu_item()
    )


# ═══════════════════════════════════════════════════════════════════════════════
# sub-menu: the first callback's answer is carried into the second level
# ═══════════════════════════════════════════════════════════════════════════════

def _ask_name(t: Terminal, _value: Optional[str]) -> Optional[str]:
    t.clear_screen()
    t.show_cursor()
    name = t.read_line("what's your name: ").strip()
    return name or None


def _greet(t: Terminal, name: Optional[str]) -> Optional[str]:
    if name:
        _show(t, f"Hello {name}")
    return None


def name_menu(color: Color = Color.GREEN) -> AppBuilder:
    return (
        AppBuilder()
        .select_color(color)
        .item_name("Hit enter to tell us your name")
            .action(_ask_name)
            .sub_menu()
                .select_color(Color.RED)
                .item_name("Hit enter to print")
                    .action(_greet)
            .push_sub_menu()
        .push_menu_item()
    )


# ═══════════════════════════════════════════════════════════════════════════════
# cargo: pick a profile, then a command that runs with it
# ═══════════════════════════════════════════════════════════════════════════════

def _profile(name: str) -> Callable[[Terminal, Optional[str]], Optional[str]]:
    def _callback(_t: Terminal, _value: Optional[str]) -> Optional[str]:
        return name
    return _callback


def _command(verb: str) -> Callable[[Terminal, Optional[str]], Optional[str]]:
    def _callback(t: Terminal, profile: Optional[str]) -> Optional[str]:
        flag = " --release" if profile == "release" else ""
        _show(t, f"$ cargo {verb}{flag}")
        return None
    return _callback


def _commands(builder: AppBuilder) -> AppBuilder:
    for verb in ("build", "test", "run"):
        builder.item_name(verb).action(_command(verb)).push_menu_item()
    return builder


def cargo_menu(color: Color = Color.GREEN) -> AppBuilder:
    builder = AppBuilder().select_color(color).select_char("❯")
    for profile in ("debug", "release"):
        builder.item_name(profile).action(_profile(profile)).sub_menu().select_color(Color.CYAN)
        _commands(builder).push_sub_menu().push_menu_item()
    return builder


DEMOS: dict[str, Callable[[Color], AppBuilder]] = {
    "hello": hello_menu,
    "sub-menu": name_menu,
    "cargo": cargo_menu,
}
