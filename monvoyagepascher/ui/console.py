"""Rich console instances and helper functions."""

from __future__ import annotations

import json
import logging
from typing import Any

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.text import Text

from monvoyagepascher.ui.theme import get_theme

# Results go to stdout, everything else (errors, spinners, logs) to stderr
console = Console(theme=get_theme().to_rich_theme(), highlight=False)
err_console = Console(theme=get_theme().to_rich_theme(), stderr=True, highlight=False)


def print_error(message: str, title: str = "Error") -> None:
    """Print an error message to stderr."""
    content = Text()
    content.append(message, style="error")

    err_console.print(Panel(
        content,
        title=Text(f"✖ {title}", style="error"),
        title_align="left",
        border_style="error",
        box=box.ROUNDED,
        padding=(0, 2),
    ))


def print_success(message: str) -> None:
    """Print a one-line success message."""
    console.print(f"[success]✔[/success] {message}", highlight=False)


def print_title(title: str) -> None:
    """Print a bold section title surrounded by blank lines."""
    console.print()
    console.print(Text(title, style="highlight"))
    console.print()


def print_json(payload: Any) -> None:
    """Write the payload as indented JSON, byte for byte, without markup or wrapping."""
    console.out(json.dumps(payload, indent=2, ensure_ascii=False), highlight=False)


def configure_logging(verbose: bool = False) -> None:
    """Route log records to stderr through Rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False, rich_tracebacks=True)],
        force=True,
    )
    # httpx logs every request at INFO; keep it quiet unless asked
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.INFO if verbose else logging.WARNING)
