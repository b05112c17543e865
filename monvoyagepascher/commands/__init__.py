"""CLI Commands for Mon Voyage Pas Cher."""

from monvoyagepascher.commands.airports import AirportsCommand
from monvoyagepascher.commands.base import BaseCommand, CommandGroup
from monvoyagepascher.commands.cities import CitiesCommand
from monvoyagepascher.commands.config import ConfigCommand
from monvoyagepascher.commands.help import HelpCommand
from monvoyagepascher.commands.ping import PingCommand
from monvoyagepascher.commands.regions import ContinentsCommand, CountriesCommand
from monvoyagepascher.commands.services import (
    DistanceCommand,
    ElevationCommand,
    SunCommand,
    TimezoneCommand,
)

# Order is the order shown by `help`
COMMAND_CLASSES: list[type[BaseCommand]] = [
    ConfigCommand,
    AirportsCommand,
    CitiesCommand,
    CountriesCommand,
    ContinentsCommand,
    ElevationCommand,
    DistanceCommand,
    SunCommand,
    TimezoneCommand,
    PingCommand,
]

__all__ = [
    "BaseCommand",
    "CommandGroup",
    "COMMAND_CLASSES",
    "ConfigCommand",
    "AirportsCommand",
    "CitiesCommand",
    "CountriesCommand",
    "ContinentsCommand",
    "ElevationCommand",
    "DistanceCommand",
    "SunCommand",
    "TimezoneCommand",
    "PingCommand",
    "HelpCommand",
]
