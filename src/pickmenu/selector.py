"""Plain index selection on top of the menu engine."""

from .menu import Menu
from .models import Option
from .terminal import Terminal


def _noop() -> None:
    pass


def select(options: list[str], title: str = "", terminal: Terminal | None = None) -> int | None:
    """Show selection menu.

    Args:
        options: List of option strings
        title: Optional title shown above menu
        terminal: Terminal backend (defaults to the rich terminal)

    Returns:
        Selected index or None if cancelled
    """
    if not options:
        return None

    menu = Menu([Option(label, _noop) for label in options], terminal=terminal)
    if title:
        menu = menu.with_title(title)
    return menu.choose()


def confirm(message: str, default: bool = False, terminal: Terminal | None = None) -> bool:
    """Show yes/no confirmation.

    The default answer is listed first so the cursor starts on it.

    Args:
        message: Question to ask
        default: Default selection (False = No)
        terminal: Terminal backend (defaults to the rich terminal)

    Returns:
        True for yes, False for no/cancel
    """
    answers = ["Yes", "No"] if default else ["No", "Yes"]
    result = select(answers, title=message, terminal=terminal)
    return result is not None and answers[result] == "Yes"
