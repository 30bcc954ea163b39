"""JSON-based repository for game snapshots."""

from __future__ import annotations

import re
from pathlib import Path

from pydantic import TypeAdapter

from lexiboard.domain import models as dm

_SAFE_ID = re.compile(r"^[A-Za-z0-9_.-]+$")


class JsonGameRepository:
    """Persist game snapshots as JSON files on disk."""

    def __init__(self, base_path: Path) -> None:
        self.base_path = base_path
        self.base_path.mkdir(parents=True, exist_ok=True)
        self._adapter: TypeAdapter[dm.GameSnapshot] = TypeAdapter(dm.GameSnapshot)

    def _path_for(self, game_id: str) -> Path:
        if not _SAFE_ID.match(game_id) or game_id in {".", ".."}:
            raise ValueError(f"Unsafe game id for file storage: {game_id!r}")
        return self.base_path / f"game_{game_id}.json"

    def save(self, snapshot: dm.GameSnapshot) -> Path:
        """Serialize a snapshot to disk and return its path."""

        path = self._path_for(snapshot.game_id)
        payload = self._adapter.dump_json(snapshot, indent=2)
        tmp = path.with_suffix(".json.tmp")
        tmp.write_bytes(payload)
        tmp.replace(path)
        return path

    def load(self, game_id: str) -> dm.GameSnapshot:
        """Load a previously saved snapshot or raise ``FileNotFoundError``."""

        path = self._path_for(game_id)
        data = path.read_bytes()
        return self._adapter.validate_json(data)

    def exists(self, game_id: str) -> bool:
        return self._path_for(game_id).exists()

    def list_games(self) -> list[str]:
        """Return all game ids currently persisted in the repository."""

        prefix = "game_"
        suffix = ".json"
        ids: list[str] = []
        for path in self.base_path.glob("game_*.json"):
            name = path.name
            if name.startswith(prefix) and name.endswith(suffix):
                ids.append(name[len(prefix) : -len(suffix)])
        return sorted(ids)

    def delete(self, game_id: str) -> None:
        """Remove a snapshot if it exists."""

        path = self._path_for(game_id)
        if path.exists():
            path.unlink()
