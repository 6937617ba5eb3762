"""Data models for pickmenu."""

from collections.abc import Callable
from dataclasses import dataclass, replace

Action = Callable[[], object]


@dataclass(frozen=True)
class Option:
    """One selectable menu row.

    The action is a zero-argument callable that the menu invokes at most
    once, after the interactive session has ended with a confirmation.
    """

    label: str
    action: Action
    hint: str | None = None

    def with_hint(self, text: str) -> "Option":
        """Return a copy of this option carrying the given hint."""
        return replace(self, hint=text)

    @property
    def hint_text(self) -> str:
        return self.hint if self.hint is not None else ""
