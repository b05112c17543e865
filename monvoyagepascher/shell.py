"""Interactive shell - run commands repeatedly without re-invoking the CLI."""

from __future__ import annotations

import shlex

from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import HTML
from prompt_toolkit.styles import Style

from monvoyagepascher.commands.base import BaseCommand
from monvoyagepascher.core.config import CLIConfig
from monvoyagepascher.ui.console import console, print_error
from monvoyagepascher.ui.logo import print_logo
from monvoyagepascher.utils.completions import CommandCompleter
from monvoyagepascher.utils.history import CommandHistory

# Prompt styling
PROMPT_STYLE = Style.from_dict({
    "prompt": "#4FC3F7 bold",
    # Completion menu styling
    "completion-menu": "bg:#16202a #e8e8e8",
    "completion-menu.completion": "bg:#16202a #4fc3f7",
    "completion-menu.completion.current": "bg:#26a69a #ffffff bold",
    "completion-menu.meta.completion": "bg:#16202a #888888",
    "completion-menu.meta.completion.current": "bg:#26a69a #e8e8e8",
})

EXIT_WORDS = {"quit", "exit"}


def parse_line(line: str) -> tuple[str, list[str]]:
    """Split a shell line into command name and arguments, honoring quotes."""
    parts = shlex.split(line)
    if not parts:
        return "", []
    return parts[0].lower().lstrip("/"), parts[1:]


class GeoShell:
    """Interactive REPL over the command registry."""

    def __init__(self, config: CLIConfig, registry: dict[str, BaseCommand]):
        self.config = config
        self.commands = registry

        self.history = CommandHistory(config.history_file)
        self.completer = CommandCompleter(registry.values())

    def create_session(self) -> PromptSession:
        return PromptSession(
            history=self.history.history,
            completer=self.completer,
            style=PROMPT_STYLE,
            complete_while_typing=True,
        )

    def get_prompt(self) -> HTML:
        return HTML("<prompt>✈ ❯</prompt> ")

    def handle(self, line: str) -> bool:
        """Run one line. Returns False when the shell should exit."""
        try:
            cmd_name, args = parse_line(line)
        except ValueError as e:
            print_error(f"Cannot parse input: {e}")
            return True

        if not cmd_name:
            return True
        if cmd_name in EXIT_WORDS:
            console.print("[muted]Goodbye.[/muted]")
            return False
        if cmd_name == "clear":
            console.clear()
            return True

        command = self.commands.get(cmd_name)
        if command is None:
            print_error(f"Unknown command: {cmd_name}")
            console.print("[muted]Type help for available commands[/muted]")
            return True

        try:
            command.execute(args)
        except KeyboardInterrupt:
            console.print("\n[warning]Interrupted[/warning]")
        return True

    def run(self) -> int:
        """Run the REPL until quit or EOF."""
        session = self.create_session()
        print_logo()
        console.print()

        while True:
            try:
                line = session.prompt(self.get_prompt()).strip()
            except KeyboardInterrupt:
                console.print("[muted]Type quit to exit[/muted]")
                continue
            except EOFError:
                console.print("[muted]Goodbye.[/muted]")
                return 0

            if not self.handle(line):
                return 0
            console.print()
