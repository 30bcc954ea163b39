"""Persistence adapters for game snapshots."""

from lexiboard.repository.json_store import JsonGameRepository

__all__ = ["JsonGameRepository"]
