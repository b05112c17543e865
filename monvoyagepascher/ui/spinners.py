"""Spinner shown while a request is in flight."""

from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager

from monvoyagepascher.ui.console import err_console

# Custom spinner styles
SPINNER_STYLES = {
    "default": "dots",
    "loading": "dots12",
    "globe": "earth",
    "pulse": "point",
}


@contextmanager
def create_spinner(message: str, style: str = "default") -> Generator[None, None, None]:
    """Context manager for showing a spinner during an operation.

    The spinner is drawn on stderr and only on a terminal, so piped
    stdout (``--json``) stays clean.
    """
    if not err_console.is_terminal:
        yield
        return

    spinner_type = SPINNER_STYLES.get(style, "dots")
    with err_console.status(
        f"[primary]{message}[/primary]",
        spinner=spinner_type,
        spinner_style="primary",
    ):
        yield
