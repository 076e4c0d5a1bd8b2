"""A rules engine for simulating games of Magic: The Gathering."""

__version__ = "0.1.0"