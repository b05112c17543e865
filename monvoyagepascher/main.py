"""Main CLI entry point."""

from __future__ import annotations

import argparse
import sys
from typing import Optional

import httpx

from monvoyagepascher import __version__
from monvoyagepascher.commands import COMMAND_CLASSES, BaseCommand, HelpCommand
from monvoyagepascher.core.config import CLIConfig
from monvoyagepascher.core.store import ConfigStore
from monvoyagepascher.ui.console import configure_logging, print_error


def build_registry(
    config: CLIConfig,
    store: ConfigStore,
    transport: Optional[httpx.BaseTransport] = None,
) -> dict[str, BaseCommand]:
    """Instantiate every command once and index it by name and aliases."""
    commands = [command_class(config, store, transport) for command_class in COMMAND_CLASSES]
    help_command = HelpCommand(config, store, transport, commands=commands)

    registry: dict[str, BaseCommand] = {}
    for command in help_command.commands:
        registry[command.name] = command
        for alias in command.aliases:
            registry[alias] = command
    return registry


def dispatch(registry: dict[str, BaseCommand], command_name: str, args: list[str]) -> int:
    """Run one command and turn its outcome into an exit code."""
    command = registry.get(command_name.lower())
    if command is None:
        print_error(f"Unknown command: {command_name}. Run 'monvoyagepascher help' for a list")
        return 1
    return 0 if command.execute(args) else 1


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="monvoyagepascher",
        description="Mon Voyage Pas Cher CLI - Travel geography data from your terminal",
        epilog="Run 'monvoyagepascher help' to list commands. Without a command an interactive shell starts.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"monvoyagepascher {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log requests and responses to stderr",
    )
    return parser


def split_argv(argv: list[str]) -> tuple[list[str], list[str]]:
    """Global options come before the command; everything after belongs to it."""
    for index, token in enumerate(argv):
        if not token.startswith("-"):
            return argv[:index], argv[index:]
    return argv, []


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    argv = sys.argv[1:] if argv is None else argv
    global_args, command_args = split_argv(argv)
    args = create_parser().parse_args(global_args)

    config = CLIConfig()
    if args.verbose:
        config.verbose = True
    configure_logging(config.verbose)

    store = ConfigStore(config.config_file)
    registry = build_registry(config, store)

    if command_args:
        return dispatch(registry, command_args[0], command_args[1:])

    if not sys.stdin.isatty():
        return dispatch(registry, "help", [])

    # Imported here so one-shot commands never load prompt_toolkit
    from monvoyagepascher.shell import GeoShell

    return GeoShell(config, registry).run()


if __name__ == "__main__":
    sys.exit(main())
