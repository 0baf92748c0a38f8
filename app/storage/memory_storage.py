"""In-memory storage fallback used when no database is configured."""

from __future__ import annotations

import json
import threading
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from app.storage.base import ENTITY_NAMES, row_value, validate_entity

DEMO_SEED_PATH = Path(__file__).resolve().parent / "seed" / "demo_seed.json"


def load_seed_file(path: str | Path) -> dict[str, list[dict[str, Any]]]:
    """Read seed rows from a JSON object of entity type → list of row objects.

    Raises:
        FileNotFoundError: path does not exist.
        ValueError: top level is not an object, or an entity's rows are not a list.
    """
    seed_path = Path(path)
    if not seed_path.exists():
        raise FileNotFoundError(f"Seed file not found: {seed_path}")

    with seed_path.open(encoding="utf-8") as f:
        payload = json.load(f)

    if not isinstance(payload, dict):
        raise ValueError(f"Seed file must hold a JSON object: {seed_path}")
    seed: dict[str, list[dict[str, Any]]] = {}
    for entity, rows in payload.items():
        if not isinstance(rows, list):
            raise ValueError(f"Seed rows for {entity!r} must be a list")
        seed[validate_entity(entity)] = rows
    return seed


class MemoryStorage:
    """Map of entity type to row list, filtered by ``condominium_id`` on read."""

    def __init__(self, seed: Mapping[str, Iterable[Any]] | None = None) -> None:
        self._lock = threading.Lock()
        self._rows: dict[str, list[Any]] = {name: [] for name in ENTITY_NAMES}
        for entity, rows in (seed or {}).items():
            self.extend(entity, rows)

    def add(self, entity: str, row: Any) -> None:
        with self._lock:
            self._rows[validate_entity(entity)].append(row)

    def extend(self, entity: str, rows: Iterable[Any]) -> None:
        with self._lock:
            self._rows[validate_entity(entity)].extend(rows)

    def clear(self) -> None:
        with self._lock:
            for rows in self._rows.values():
                rows.clear()

    def row_count(self) -> int:
        with self._lock:
            return sum(len(rows) for rows in self._rows.values())

    def list_rows(self, entity: str, condominium_id: str | None = None) -> list[Any]:
        with self._lock:
            rows = list(self._rows[validate_entity(entity)])
        if condominium_id is None:
            return rows
        return [r for r in rows if row_value(r, "condominium_id") == condominium_id]
