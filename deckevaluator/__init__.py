"""Decklist import and mana base analysis for Magic: The Gathering."""

__version__ = "0.1.0"
