"""Navigation state machine for single selection menus."""

from dataclasses import dataclass
from enum import Enum

from .errors import EmptyMenuError


class Key(Enum):
    """Keys the menu reacts to. Everything else decodes to OTHER."""

    UP = "up"
    DOWN = "down"
    ENTER = "enter"
    ESCAPE = "escape"
    OTHER = "other"


@dataclass(frozen=True)
class Active:
    """Session still running with the cursor on ``index``."""

    index: int


@dataclass(frozen=True)
class Confirmed:
    """Session ended, the user picked ``index``."""

    index: int


@dataclass(frozen=True)
class Cancelled:
    """Session ended without a selection."""


NavState = Active | Confirmed | Cancelled

INITIAL_STATE = Active(0)


def is_terminal(state: NavState) -> bool:
    return not isinstance(state, Active)


def step(state: NavState, key: Key, count: int) -> NavState:
    """Apply one key press to the navigation state.

    Args:
        state: Current state
        key: Decoded key press
        count: Number of options in the menu

    Returns:
        The next state. Terminal states are returned unchanged.
    """
    if count < 1:
        raise EmptyMenuError()
    if not isinstance(state, Active):
        return state

    last = count - 1
    i = state.index
    if key is Key.UP:  # Up (wrap around)
        return Active(last if i == 0 else i - 1)
    if key is Key.DOWN:  # Down (wrap around)
        return Active(0 if i == last else i + 1)
    if key is Key.ESCAPE:
        return Cancelled()
    if key is Key.ENTER:
        return Confirmed(i)
    return state
