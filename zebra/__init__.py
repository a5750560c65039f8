"""zebra — CLI łamigłówek typu zebra (ASP / clingo)."""

__version__ = "0.1.0"
