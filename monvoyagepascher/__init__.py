"""
Mon Voyage Pas Cher CLI - travel geography data from your terminal.

This CLI wraps the mon-voyage-pas-cher.com API:
- Airports, cities, countries and continents lookups
- Distance, elevation, sun positions and timezone services
- Table output for humans, raw JSON envelopes for scripts
"""

__version__ = "1.0.0"
__app_name__ = "Mon Voyage Pas Cher"
