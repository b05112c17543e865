"""Shell history, kept next to config.json."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from prompt_toolkit.history import FileHistory, History, InMemoryHistory

logger = logging.getLogger(__name__)


def open_history(history_file: Optional[Path]) -> History:
    """File-backed history, or in-memory when there is no usable file."""
    if history_file is None:
        return InMemoryHistory()
    try:
        history_file.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.warning("Shell history disabled, cannot create %s: %s", history_file.parent, e)
        return InMemoryHistory()
    return FileHistory(str(history_file))


class CommandHistory:
    """Lines entered in the shell, shared with the prompt for up-arrow recall."""

    def __init__(self, history_file: Optional[Path] = None):
        self.history_file = history_file
        self.history = open_history(history_file)
