"""Interactive single selection menu."""

import logging
from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape

from .config import Config
from .errors import EmptyMenuError, KeyReadError, MenuError
from .models import Option
from .navigation import INITIAL_STATE, Cancelled, Confirmed, NavState, is_terminal, step
from .styles import MenuStyles, format_option, format_title
from .terminal import RichTerminal, Terminal, hidden_cursor

logger = logging.getLogger("pickmenu.menu")

err_console = Console(stderr=True)


class Menu:
    """Keyboard driven menu over a fixed list of options.

    Example:
        menu = Menu(
            [
                Option("Build", build).with_hint("compile the project"),
                Option("Test", test),
            ]
        ).with_title("Tasks")
        menu.run()  # blocks; runs the chosen action after the screen is cleared

    Arrow keys move the highlight (wrapping at both ends), Enter confirms,
    Escape leaves without running anything. A menu runs once.
    """

    def __init__(
        self,
        options: Sequence[Option],
        title: str | None = None,
        *,
        terminal: Terminal | None = None,
        styles: MenuStyles | None = None,
        config: Config | None = None,
    ):
        if not options:
            raise EmptyMenuError()
        if terminal is None or styles is None:
            cfg = config or Config.load()
            terminal = terminal or RichTerminal(vim_keys=cfg.vim_keys)
            styles = styles or MenuStyles.from_config(cfg)
        self.options: tuple[Option, ...] = tuple(options)
        self.title = title
        self.terminal = terminal
        self.styles = styles
        self._state: NavState = INITIAL_STATE
        self._cursor = 0
        self._used = False
        self._read_error: KeyReadError | None = None

    def with_title(self, text: str) -> "Menu":
        """Return a copy of this menu with a header line."""
        if self._used:
            raise MenuError("Menu has already been shown")
        return Menu(self.options, title=text, terminal=self.terminal, styles=self.styles)

    @property
    def state(self) -> NavState:
        return self._state

    @property
    def selected_index(self) -> int | None:
        """Highlighted (or confirmed) row, None once cancelled."""
        if isinstance(self._state, Cancelled):
            return None
        return self._cursor

    def draw(self) -> None:
        """Redraw the full frame."""
        term = self.terminal
        term.clear_screen()

        if self.title is not None:
            term.write_line(format_title(self.title, self.styles))

        for i, option in enumerate(self.options):
            term.write_line(format_option(option, i == self._cursor, self.styles))

        term.flush()

    def choose(self) -> int | None:
        """Run the interactive session without dispatching an action.

        Returns:
            Confirmed index, or None if cancelled or input failed.
        """
        if self._used:
            raise MenuError("Menu has already been shown")
        self._used = True

        term = self.terminal
        with hidden_cursor(term):
            self.draw()
            self._navigate()
            term.clear_screen()
            term.flush()

        if self._read_error is not None:
            err_console.print(
                f"[red]Error reading key:[/red] {escape(str(self._read_error))}", highlight=False
            )

        if isinstance(self._state, Confirmed):
            logger.debug("Menu confirmed index=%d", self._state.index)
            return self._state.index
        logger.debug("Menu cancelled")
        return None

    def run(self) -> None:
        """Show the menu and run the chosen option's action.

        The action runs after the cursor is restored and the screen is
        cleared. Nothing runs when the user cancels.
        """
        index = self.choose()
        if index is None:
            return
        self.options[index].action()

    def _navigate(self) -> None:
        count = len(self.options)
        while not is_terminal(self._state):
            try:
                key = self.terminal.read_key()
            except KeyReadError as e:
                logger.error("Key read failed, cancelling menu: %s", e)
                self._read_error = e
                self._state = Cancelled()
                return

            self._state = step(self._state, key, count)
            logger.debug("Key %s -> %s", key.name, self._state)

            if not is_terminal(self._state):
                self._cursor = self._state.index
                self.draw()
