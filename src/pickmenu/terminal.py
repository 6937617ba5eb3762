"""Terminal control surface used by the menu engine."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Protocol

import readchar
from rich.console import Console
from rich.text import Text

from .errors import KeyReadError
from .navigation import Key

ENTER_KEYS = frozenset({"\r", "\n", readchar.key.ENTER})
VIM_KEYS = {"k": Key.UP, "j": Key.DOWN}


class Terminal(Protocol):
    """Protocol for swappable terminal backends."""

    def hide_cursor(self) -> None: ...

    def show_cursor(self) -> None: ...

    def clear_screen(self) -> None: ...

    def write_line(self, text: Text | str) -> None: ...

    def flush(self) -> None: ...

    def read_key(self) -> Key:
        """Block until a key is pressed. Raises KeyReadError on failure."""
        ...


def decode_key(raw: str, vim_keys: bool = False) -> Key:
    """Map a raw readchar key sequence to a menu Key."""
    if raw == readchar.key.UP:
        return Key.UP
    if raw == readchar.key.DOWN:
        return Key.DOWN
    if raw in ENTER_KEYS:
        return Key.ENTER
    # POSIX readkey returns a lone ESC together with the key pressed after it;
    # longer ESC [ / ESC O sequences are other special keys
    if raw.startswith(readchar.key.ESC) and (len(raw) <= 2 or raw[1] not in "[O"):
        return Key.ESCAPE
    if vim_keys and raw in VIM_KEYS:
        return VIM_KEYS[raw]
    return Key.OTHER


class RichTerminal:
    """Rich console output + readchar input."""

    def __init__(self, console: Console | None = None, vim_keys: bool = False):
        self.console = console or Console()
        self.vim_keys = vim_keys

    def hide_cursor(self) -> None:
        self.console.show_cursor(False)

    def show_cursor(self) -> None:
        self.console.show_cursor(True)

    def clear_screen(self) -> None:
        self.console.clear()

    def write_line(self, text: Text | str) -> None:
        self.console.print(text, markup=False, highlight=False, soft_wrap=True)

    def flush(self) -> None:
        self.console.file.flush()

    def read_key(self) -> Key:
        try:
            raw = readchar.readkey()
        except KeyboardInterrupt:
            return Key.ESCAPE  # Ctrl+C cancels like Escape
        except (OSError, EOFError) as e:
            raise KeyReadError(str(e) or type(e).__name__) from e
        return decode_key(raw, vim_keys=self.vim_keys)


@contextmanager
def hidden_cursor(terminal: Terminal) -> Iterator[Terminal]:
    """Hide the cursor for the duration of the block, restore it on any exit."""
    terminal.hide_cursor()
    try:
        yield terminal
    finally:
        terminal.show_cursor()
