"""civiltime — civil-time and timezone conversion core for time tracking."""

__version__ = "0.3.0"
