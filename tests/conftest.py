"""Pytest fixtures for pickmenu tests."""

import pytest

from pickmenu.errors import KeyReadError
from pickmenu.navigation import Key


@pytest.fixture(autouse=True)
def clear_caches(tmp_path, monkeypatch):
    """Isolate config and clear module-level caches around each test."""
    from pickmenu.config import clear_config_cache

    monkeypatch.setenv("PICKMENU_CONFIG_DIR", str(tmp_path / "config"))
    clear_config_cache()

    yield

    clear_config_cache()


class FakeTerminal:
    """Scripted terminal that records every call in order.

    Keys are returned from ``keys`` in order; an exception instance in the
    script is raised instead of returned.
    """

    def __init__(self, keys=()):
        self.keys = list(keys)
        self.calls: list[str] = []
        self.lines: list[str] = []
        self.rendered: list = []
        self.frames: list[list[str]] = []
        self.cursor_visible = True
        self.cleared = False

    def hide_cursor(self) -> None:
        self.calls.append("hide_cursor")
        self.cursor_visible = False

    def show_cursor(self) -> None:
        self.calls.append("show_cursor")
        self.cursor_visible = True

    def clear_screen(self) -> None:
        self.calls.append("clear_screen")
        self.lines = []
        self.rendered = []
        self.cleared = True

    def write_line(self, text) -> None:
        self.calls.append("write_line")
        self.lines.append(str(text))
        self.rendered.append(text)
        self.cleared = False

    def flush(self) -> None:
        self.calls.append("flush")
        self.frames.append(list(self.lines))

    def read_key(self) -> Key:
        self.calls.append("read_key")
        if not self.keys:
            raise KeyReadError("script exhausted")
        key = self.keys.pop(0)
        if isinstance(key, Exception):
            raise key
        return key


@pytest.fixture
def fake_terminal():
    """Factory for scripted terminals."""

    def make(*keys):
        return FakeTerminal(keys)

    return make
