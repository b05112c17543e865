"""Help command - list commands and their usage."""

from __future__ import annotations

from typing import Any, Optional

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from monvoyagepascher.commands.base import BaseCommand
from monvoyagepascher.core.errors import ValidationError
from monvoyagepascher.ui.console import console


class HelpCommand(BaseCommand):
    """Display help information."""

    name = "help"
    description = "Show this help message"
    usage = "help [command]"
    aliases = ["h", "?"]
    options = ()
    max_positionals = 1
    requires_auth = False

    def __init__(self, config, store, transport=None, commands: Optional[list[BaseCommand]] = None):
        super().__init__(config, store, transport)
        self.commands = list(commands or []) + [self]

    def run(self, flags: dict[str, Any], remaining: list[str]) -> bool:
        if remaining:
            return self._show_command_help(remaining[0].lower())
        return self._show_general_help()

    def find(self, name: str) -> Optional[BaseCommand]:
        for command in self.commands:
            if name == command.name or name in command.aliases:
                return command
        return None

    def _show_general_help(self) -> bool:
        table = Table(
            show_header=True,
            header_style="primary",
            border_style="muted",
            padding=(0, 2),
        )
        table.add_column("Command", style="command", width=12)
        table.add_column("Aliases", style="muted", width=12)
        table.add_column("Description", style="text")

        for command in self.commands:
            table.add_row(command.name, ", ".join(command.aliases), command.description)

        console.print(Panel(
            table,
            title="[primary]Available Commands[/primary]",
            border_style="primary",
            padding=(1, 2),
        ))

        console.print()
        tips = Text()
        tips.append("Tips:\n", style="primary")
        tips.append("  • ", style="muted")
        tips.append("Use ", style="text")
        tips.append("help <command>", style="command")
        tips.append(" for detailed usage\n", style="text")
        tips.append("  • ", style="muted")
        tips.append("Add ", style="text")
        tips.append("--json", style="command")
        tips.append(" to any data command for the raw API response", style="text")
        console.print(tips)
        return True

    def _show_command_help(self, name: str) -> bool:
        command = self.find(name)
        if command is None:
            raise ValidationError(f"Unknown command: {name}. Use 'help' to see available commands")

        text = Text()
        text.append(f"{command.name}\n\n", style="primary.bold")
        text.append(f"{command.description}\n\n", style="text")
        text.append("Usage:\n", style="muted")
        text.append(f"  {command.usage}\n", style="command")
        if command.aliases:
            text.append("\nAliases:\n", style="muted")
            text.append(f"  {', '.join(command.aliases)}", style="tertiary")

        console.print(Panel(
            text,
            title=f"[primary]{command.name}[/primary]",
            border_style="primary",
            padding=(1, 2),
        ))
        return True
