"""Utility classes for the interactive shell."""

from monvoyagepascher.utils.completions import CommandCompleter
from monvoyagepascher.utils.history import CommandHistory

__all__ = ["CommandCompleter", "CommandHistory"]
