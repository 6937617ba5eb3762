"""Tests for the navigation state machine."""

import pytest

from pickmenu.errors import EmptyMenuError
from pickmenu.navigation import (
    INITIAL_STATE,
    Active,
    Cancelled,
    Confirmed,
    Key,
    is_terminal,
    step,
)


def test_initial_state_is_first_row():
    assert INITIAL_STATE == Active(0)


def test_up_from_first_wraps_to_last():
    assert step(Active(0), Key.UP, 4) == Active(3)


def test_down_from_last_wraps_to_first():
    assert step(Active(3), Key.DOWN, 4) == Active(0)


def test_up_and_down_move_by_one():
    assert step(Active(2), Key.UP, 4) == Active(1)
    assert step(Active(1), Key.DOWN, 4) == Active(2)


@pytest.mark.parametrize("count", [1, 2, 5])
@pytest.mark.parametrize("key", [Key.UP, Key.DOWN])
def test_full_cycle_returns_to_start(count, key):
    for start in range(count):
        state = Active(start)
        for _ in range(count):
            state = step(state, key, count)
        assert state == Active(start)


def test_single_option_down_is_noop():
    assert step(Active(0), Key.DOWN, 1) == Active(0)
    assert step(Active(0), Key.UP, 1) == Active(0)


def test_escape_cancels():
    assert step(Active(2), Key.ESCAPE, 3) == Cancelled()


def test_enter_confirms_current():
    assert step(Active(2), Key.ENTER, 3) == Confirmed(2)


def test_other_key_ignored():
    assert step(Active(1), Key.OTHER, 3) == Active(1)


def test_terminal_states_absorb_keys():
    assert step(Confirmed(1), Key.DOWN, 3) == Confirmed(1)
    assert step(Cancelled(), Key.ENTER, 3) == Cancelled()


def test_is_terminal():
    assert not is_terminal(Active(0))
    assert is_terminal(Confirmed(0))
    assert is_terminal(Cancelled())


def test_zero_options_rejected():
    with pytest.raises(EmptyMenuError):
        step(Active(0), Key.DOWN, 0)
