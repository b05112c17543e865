"""Ping command - verify API connectivity."""

from __future__ import annotations

from typing import Any

from rich.text import Text

from monvoyagepascher.commands.base import BaseCommand
from monvoyagepascher.core.api_client import APIResponse
from monvoyagepascher.ui.console import console, print_success


class PingCommand(BaseCommand):
    """Health check against the API."""

    name = "ping"
    description = "Health check - verify API connectivity"
    usage = "ping [--json]"
    options = ("json",)
    max_positionals = 0

    def run(self, flags: dict[str, Any], remaining: list[str]) -> bool:
        response = self.request("Pinging API...", lambda api: api.ping())
        return self.output(response, flags, self._render)

    def _render(self, response: APIResponse) -> None:
        print_success("API is responding")
        console.print(Text(f"Message: {response.message or 'pong'}", style="muted"))
        console.print()
