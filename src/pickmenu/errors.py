"""Custom exceptions for pickmenu."""


class MenuError(Exception):
    """Base exception for all pickmenu errors.

    Callers can catch every pickmenu-specific failure with a single
    except clause.
    """

    pass


class EmptyMenuError(MenuError, ValueError):
    """Raised when a menu is built without any options."""

    def __init__(self, message: str = "A menu needs at least one option"):
        super().__init__(message)


class KeyReadError(MenuError):
    """The terminal failed to read a key press."""

    pass
