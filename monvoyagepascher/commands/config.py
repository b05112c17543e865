"""Config command - store the API key and default language."""

from __future__ import annotations

from typing import Any

from rich.text import Text

from monvoyagepascher.commands.base import CommandGroup
from monvoyagepascher.core.enums import DEFAULT_LANGUAGE, Language
from monvoyagepascher.core.errors import ValidationError
from monvoyagepascher.core.store import API_KEY, LANGUAGE
from monvoyagepascher.ui.console import console, print_success, print_title


def mask_secret(value: str) -> str:
    """Show only the ends of a secret: 'abcdef...wxyz'."""
    if len(value) <= 10:
        return "*" * len(value)
    return f"{value[:6]}...{value[-4:]}"


class ConfigCommand(CommandGroup):
    """Manage the stored CLI configuration."""

    name = "config"
    description = "Manage CLI configuration (API key, default language)"
    usage = "config set [--api-key KEY] [--language en|fr|de|es] | config show"
    options = ("api-key", "language")
    boolean_flags = frozenset()
    requires_auth = False
    subcommands = {
        "set": ("api-key", "language"),
        "show": (),
    }
    subcommand_positionals = {"set": 0, "show": 0}

    def run_set(self, flags: dict[str, Any], args: list[str]) -> bool:
        api_key = self.option(flags, "api-key")
        language = self.option(flags, "language")

        if not api_key and not language:
            raise ValidationError("No options provided. Use --api-key or --language")

        # Validate everything before writing anything
        if language:
            language = Language.parse(language).value

        if api_key:
            self.store.set(API_KEY, api_key)
            print_success("API key set")
        if language:
            self.store.set(LANGUAGE, language)
            print_success(f"Language set to {language}")
        return True

    def run_show(self, flags: dict[str, Any], args: list[str]) -> bool:
        api_key = self.store.api_key
        language = self.store.language

        print_title("Mon Voyage Pas Cher CLI Configuration")

        line = Text("API Key:   ", style="muted")
        if api_key:
            line.append(mask_secret(api_key), style="success")
        else:
            line.append("not set", style="error")
        console.print(line)

        line = Text("Language:  ", style="muted")
        line.append(language or DEFAULT_LANGUAGE.value, style="accent")
        console.print(line)

        line = Text("File:      ", style="muted")
        line.append(str(self.store.path), style="dim")
        console.print(line)
        console.print()
        return True
