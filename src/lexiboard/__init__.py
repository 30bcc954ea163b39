"""Authoritative rule engine for a multiplayer word-placement board game."""

__version__ = "0.1.0"
