"""Ledger Tamagotchi: a persistent virtual pet service."""

__version__ = "0.1.0"
