"""UI components for the Mon Voyage Pas Cher CLI."""

from monvoyagepascher.ui.console import (
    configure_logging,
    console,
    err_console,
    print_error,
    print_json,
    print_success,
    print_title,
)
from monvoyagepascher.ui.spinners import create_spinner
from monvoyagepascher.ui.tables import Column, format_number, print_fields, print_table
from monvoyagepascher.ui.theme import Theme, get_theme

__all__ = [
    # Theme
    "Theme",
    "get_theme",
    # Console
    "console",
    "err_console",
    "configure_logging",
    "print_error",
    "print_success",
    "print_title",
    "print_json",
    # Tables
    "Column",
    "format_number",
    "print_table",
    "print_fields",
    # Spinners
    "create_spinner",
]
