"""Keyboard driven single selection menus for the terminal."""

from .config import Config
from .errors import EmptyMenuError, KeyReadError, MenuError
from .menu import Menu
from .models import Action, Option
from .navigation import Active, Cancelled, Confirmed, Key, NavState, step
from .selector import confirm, select
from .styles import MenuStyles
from .terminal import RichTerminal, Terminal, hidden_cursor

__all__ = [
    "Action",
    "Active",
    "Cancelled",
    "Config",
    "Confirmed",
    "EmptyMenuError",
    "Key",
    "KeyReadError",
    "Menu",
    "MenuError",
    "MenuStyles",
    "NavState",
    "Option",
    "RichTerminal",
    "Terminal",
    "confirm",
    "hidden_cursor",
    "select",
    "step",
]
