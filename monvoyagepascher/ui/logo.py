"""Banner shown when the interactive shell starts."""

from __future__ import annotations

from rich.align import Align
from rich.text import Text

from monvoyagepascher import __app_name__, __version__
from monvoyagepascher.ui.console import console
from monvoyagepascher.ui.theme import get_theme

LOGO_LINES = [
    "╔╦╗╦  ╦╔═╗╔═╗",
    "║║║╚╗╔╝╠═╝║  ",
    "╩ ╩ ╚╝ ╩  ╚═╝",
]

TAGLINE = "Airports, cities, distances and more from your terminal"


def create_logo_text() -> Text:
    """Create the styled logo text."""
    styles = get_theme().logo_styles
    text = Text()
    for i, line in enumerate(LOGO_LINES):
        text.append(line, style=styles[i % len(styles)])
        text.append("\n")
    return text


def print_logo(show_tagline: bool = True) -> None:
    """Print the logo, name and version."""
    console.print(Align.center(create_logo_text()))
    header = Text()
    header.append(__app_name__, style="primary.bold")
    header.append(f"  v{__version__}", style="muted")
    console.print(Align.center(header))
    if show_tagline:
        console.print(Align.center(Text(TAGLINE, style="muted")))
        tip = Text()
        tip.append("Type ", style="muted")
        tip.append("help", style="command")
        tip.append(" for commands, ", style="muted")
        tip.append("quit", style="command")
        tip.append(" to exit", style="muted")
        console.print(Align.center(tip))
