"""Base command class for CLI commands."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, Optional

import httpx

from monvoyagepascher.core.api_client import APIResponse, GeoAPIClient
from monvoyagepascher.core.config import CLIConfig
from monvoyagepascher.core.errors import AuthenticationRequired, GeoAPIError, ValidationError
from monvoyagepascher.core.store import ConfigStore
from monvoyagepascher.ui.console import err_console, print_error, print_json
from monvoyagepascher.ui.spinners import create_spinner

# "-33.86,151.2" is a value, not a short flag
_NEGATIVE_VALUE = re.compile(r"^-\d")

SIGNUP_URL = "https://mon-voyage-pas-cher.com/"


def _is_value(token: str) -> bool:
    return not token.startswith("-") or bool(_NEGATIVE_VALUE.match(token))


class BaseCommand(ABC):
    """Base class for all CLI commands.

    ``execute`` owns the shared flow: flag parsing, the API key check,
    option validation and error reporting. Subclasses implement ``run``.
    """

    name: str = "base"
    description: str = "Base command"
    usage: str = ""
    aliases: list[str] = []
    options: tuple[str, ...] = ("json",)
    boolean_flags: frozenset[str] = frozenset({"json"})
    requires_auth: bool = True
    # Maximum number of positional arguments; None accepts any number
    max_positionals: Optional[int] = None

    def __init__(
        self,
        config: CLIConfig,
        store: ConfigStore,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.config = config
        self.store = store
        self.transport = transport

    def execute(self, args: list[str]) -> bool:
        """
        Execute the command.

        Args:
            args: Command arguments

        Returns:
            True if successful, False otherwise
        """
        flags, remaining = self.parse_flags(args)
        try:
            if self.requires_auth:
                self.require_auth()
            self.check_options(flags, remaining)
            return self.run(flags, remaining)
        except AuthenticationRequired as e:
            print_error(e.message, title=e.title)
            self._print_auth_help()
            return False
        except GeoAPIError as e:
            print_error(e.message, title=e.title)
            return False

    @abstractmethod
    def run(self, flags: dict[str, Any], remaining: list[str]) -> bool:
        """Do the command's work once preconditions hold."""

    def require_auth(self) -> None:
        if not self.store.is_configured():
            raise AuthenticationRequired()

    def _print_auth_help(self) -> None:
        err_console.print()
        err_console.print("Run the following to configure:")
        err_console.print("  [command]monvoyagepascher config set --api-key YOUR_API_KEY[/command]")
        err_console.print()
        err_console.print(f"Get an API key at: [url]{SIGNUP_URL}[/url]")

    def allowed_options(self, remaining: list[str]) -> tuple[str, ...]:
        return self.options

    def positional_limit(self, remaining: list[str]) -> Optional[int]:
        return self.max_positionals

    def check_options(self, flags: dict[str, Any], remaining: list[str]) -> None:
        allowed = set(self.allowed_options(remaining))
        unknown = sorted(set(flags) - allowed)
        if unknown:
            raise ValidationError(f"Unknown option: --{unknown[0]}")

        limit = self.positional_limit(remaining)
        if limit is not None and len(remaining) > limit:
            raise ValidationError(
                f"Unexpected argument: '{remaining[limit]}'. Usage: {self.usage}"
            )

    def parse_flags(self, args: list[str]) -> tuple[dict[str, Any], list[str]]:
        """Parse command-line flags from arguments.

        Boolean flags never consume the following token.
        """
        flags: dict[str, Any] = {}
        remaining = []

        i = 0
        while i < len(args):
            arg = args[i]
            if arg.startswith("--"):
                key = arg[2:]
                if "=" in key:
                    key, value = key.split("=", 1)
                    flags[key] = value
                elif key in self.boolean_flags:
                    flags[key] = True
                elif i + 1 < len(args) and _is_value(args[i + 1]):
                    flags[key] = args[i + 1]
                    i += 1
                else:
                    flags[key] = True
            elif arg.startswith("-") and len(arg) == 2 and not _is_value(arg):
                key = arg[1]
                if key not in self.boolean_flags and i + 1 < len(args) and _is_value(args[i + 1]):
                    flags[key] = args[i + 1]
                    i += 1
                else:
                    flags[key] = True
            else:
                remaining.append(arg)
            i += 1

        return flags, remaining

    def option(self, flags: dict[str, Any], name: str) -> Optional[str]:
        """Value of a valued option, None when not supplied."""
        value = flags.get(name)
        if value is True:
            raise ValidationError(f"Option --{name} requires a value")
        return value

    def build_api(self) -> GeoAPIClient:
        """Client for one invocation, built from the current stored settings."""
        return GeoAPIClient(
            api_key=self.store.api_key,
            default_language=self.store.language,
            base_url=self.config.base_url,
            timeout=self.config.timeout,
            transport=self.transport,
        )

    def request(self, message: str, call: Callable[[GeoAPIClient], APIResponse]) -> APIResponse:
        """Run one API call behind a spinner."""
        with self.build_api() as api, create_spinner(message, style="globe"):
            return call(api)

    def output(
        self,
        response: APIResponse,
        flags: dict[str, Any],
        render: Callable[[APIResponse], None],
    ) -> bool:
        """Print the raw envelope as JSON, or hand it to the renderer."""
        if flags.get("json"):
            print_json(response.raw)
        else:
            render(response)
        return True


class CommandGroup(BaseCommand):
    """A command whose first positional argument selects a subcommand."""

    subcommands: dict[str, tuple[str, ...]] = {}
    # Positionals allowed after the subcommand name; missing means any number
    subcommand_positionals: dict[str, int] = {}

    def allowed_options(self, remaining: list[str]) -> tuple[str, ...]:
        if remaining and remaining[0] in self.subcommands:
            return self.subcommands[remaining[0]]
        return self.options

    def positional_limit(self, remaining: list[str]) -> Optional[int]:
        if remaining and remaining[0] in self.subcommand_positionals:
            return self.subcommand_positionals[remaining[0]] + 1
        return None

    def run(self, flags: dict[str, Any], remaining: list[str]) -> bool:
        if not remaining or remaining[0] not in self.subcommands:
            given = f" '{remaining[0]}'" if remaining else ""
            raise ValidationError(
                f"Unknown {self.name} subcommand{given}. "
                f"Use one of: {', '.join(self.subcommands)}"
            )
        handler = getattr(self, f"run_{remaining[0]}")
        return handler(flags, remaining[1:])
