from __future__ import annotations

import os
import sys

import pytest


def _ensure_project_root_on_path() -> None:
    # When running via the venv's pytest entrypoint, the CWD is not guaranteed to
    # be on sys.path. Ensure the repository root (containing `term_select/`) is importable.
    project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
    if project_root not in sys.path:
        sys.path.insert(0, project_root)


_ensure_project_root_on_path()

from term_select.settings import Settings  # noqa: E402
from term_select.terminal import Key  # noqa: E402


class ScriptedTerminal:
    """Terminal stand-in that replays keys and records everything drawn."""

    def __init__(self, keys=(), lines=(), fail_on: str | None = None):
        self.keys = list(keys)
        self.lines = list(lines)
        self.fail_on = fail_on
        self.output: list[str] = []
        self.calls: list[str] = []
        self.cursor_visible = True

    def _call(self, name: str) -> None:
        self.calls.append(name)
        if self.fail_on == name:
            raise OSError(f"{name} failed")

    def clear_screen(self) -> None:
        self._call("clear_screen")
        self.output.clear()

    def hide_cursor(self) -> None:
        self._call("hide_cursor")
        self.cursor_visible = False

    def show_cursor(self) -> None:
        self._call("show_cursor")
        self.cursor_visible = True

    def write_str(self, text="") -> None:
        self._call("write_str")
        self.output.append(str(text))

    def write_line(self, text="") -> None:
        self._call("write_line")
        self.output.append(f"{text}\n")

    def read_line(self, prompt_text: str = "") -> str:
        self._call("read_line")
        return self.lines.pop(0)

    def read_key(self) -> Key:
        self._call("read_key")
        if not self.keys:
            raise AssertionError("menu asked for more keys than the test scripted")
        return self.keys.pop(0)

    @property
    def screen(self) -> str:
        return "".join(self.output)


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the developer's environment and .env."""
    return Settings(
        _env_file=None,
        TERM_SELECT_HIGHLIGHT_COLOR="green",
        TERM_SELECT_SELECT_CHAR=None,
        TERM_SELECT_SHOW_HINTS=True,
        TERM_SELECT_SHOW_BREADCRUMBS=True,
        TERM_SELECT_ROOT_LABEL="Home",
        TERM_SELECT_LOG_DIR=None,
    )


@pytest.fixture
def make_terminal():
    def _make(*keys, lines=(), fail_on=None) -> ScriptedTerminal:
        return ScriptedTerminal(keys=keys, lines=lines, fail_on=fail_on)
    return _make
