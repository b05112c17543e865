"""Tab completion for the interactive shell."""

from __future__ import annotations

from collections.abc import Iterable

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from monvoyagepascher.commands.base import BaseCommand, CommandGroup

# Built into the shell rather than the command registry
SHELL_COMMANDS = {
    "clear": "Clear the screen",
    "quit": "Exit the shell",
    "exit": "Exit the shell",
}


class CommandCompleter(Completer):
    """Completes command names, subcommands and ``--options``."""

    def __init__(self, commands: Iterable[BaseCommand]):
        self.commands: dict[str, BaseCommand] = {}
        self.lookup: dict[str, BaseCommand] = {}
        for command in commands:
            self.commands[command.name] = command
            self.lookup[command.name] = command
            for alias in command.aliases:
                self.lookup[alias] = command

    def descriptions(self) -> dict[str, str]:
        names = {name: command.description for name, command in self.commands.items()}
        names.update(SHELL_COMMANDS)
        return names

    def words_for(self, command: BaseCommand, words: list[str]) -> list[str]:
        """Candidates after the command name."""
        if isinstance(command, CommandGroup):
            if len(words) < 2:
                return list(command.subcommands)
            options = command.subcommands.get(words[1], ())
        else:
            options = command.options
        return [f"--{option}" for option in options]

    def get_completions(self, document: Document, complete_event) -> Iterable[Completion]:
        text = document.text_before_cursor
        words = text.split()

        if not words or (len(words) == 1 and not text.endswith(" ")):
            # Completing the command name
            word = words[0].lower() if words else ""
            for name, description in self.descriptions().items():
                if name.startswith(word):
                    yield Completion(
                        name,
                        start_position=-len(word),
                        display=name,
                        display_meta=description,
                    )
            return

        command = self.lookup.get(words[0].lower())
        if command is None:
            return

        if text.endswith(" "):
            current = ""
            context = words
        else:
            current = words[-1]
            context = words[:-1]

        for candidate in self.words_for(command, context):
            if candidate.startswith(current) and candidate not in words:
                yield Completion(candidate, start_position=-len(current), display=candidate)
