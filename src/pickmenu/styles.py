"""Row and title formatting for menu frames."""

from dataclasses import dataclass

from rich.style import Style
from rich.text import Text

from .config import Config
from .models import Option

DEFAULT_LABEL_WIDTH = 25
DEFAULT_MARKER = "-"
TITLE_INDENT = "  "


@dataclass(frozen=True)
class MenuStyles:
    """Presentation attributes, fixed when the menu is built."""

    selected: Style
    normal: Style
    hint: Style
    title: Style
    label_width: int = DEFAULT_LABEL_WIDTH
    marker: str = DEFAULT_MARKER

    @classmethod
    def default(cls) -> "MenuStyles":
        return cls(
            selected=Style(bgcolor="blue"),
            normal=Style.null(),
            hint=Style(color="color(187)"),
            title=Style(bold=True),
        )

    @classmethod
    def from_config(cls, cfg: Config) -> "MenuStyles":
        """Build styles from config values (rich style definitions)."""
        return cls(
            selected=Style.parse(cfg.selected_style),
            normal=Style.parse(cfg.normal_style),
            hint=Style.parse(cfg.hint_style),
            title=Style.parse(cfg.title_style),
            label_width=int(cfg.label_width),
            marker=cfg.marker,
        )


def format_title(title: str, styles: MenuStyles) -> Text:
    """Indented title line."""
    line = Text(TITLE_INDENT)
    line.append(title, style=styles.title)
    return line


def format_option(option: Option, selected: bool, styles: MenuStyles) -> Text:
    """Format one row: marker, padded label, tab, hint.

    Args:
        option: Option to render
        selected: Whether the cursor is on this row
        styles: Menu styles

    Returns:
        Rich Text for the row. The label style covers the padding so the
        highlight spans the whole label column.
    """
    label_style = styles.selected if selected else styles.normal
    line = Text(f"{styles.marker} ")
    line.append(option.label.ljust(styles.label_width), style=label_style)
    line.append("\t")
    line.append(option.hint_text, style=styles.hint)
    return line
