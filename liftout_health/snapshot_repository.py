"""Repository for culture-profile and tracker snapshots (JSON files).

This is the validation boundary: every record is parsed through its pydantic
model on load, so malformed or out-of-range data never reaches the engine.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
import threading
from typing import TypeVar

from pydantic import BaseModel

from liftout_health.culture_profile import CultureProfile
from liftout_health.integration_tracker import IntegrationTracker


logger = logging.getLogger(__name__)

_Model = TypeVar("_Model", bound=BaseModel)


class SnapshotRepository:
    """Thread-safe store of profiles and trackers, one JSON file per record.

    Layout::

        <root>/profiles/<profile_id>.json
        <root>/trackers/<tracker_id>.json
    """

    def __init__(self, root: str = "data") -> None:
        self._root = Path(root)
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def save_profile(self, profile: CultureProfile) -> Path:
        """Persist *profile* (atomic write)."""
        return self._save("profiles", profile.id, profile)

    def load_profile(self, profile_id: str) -> CultureProfile:
        """Load and validate a profile.

        Raises:
            ValueError: If the file is missing, unreadable or fails validation.
        """
        return self._load("profiles", profile_id, CultureProfile)

    def list_profile_ids(self) -> list[str]:
        return self._list_ids("profiles")

    def save_tracker(self, tracker: IntegrationTracker) -> Path:
        return self._save("trackers", tracker.id, tracker)

    def load_tracker(self, tracker_id: str) -> IntegrationTracker:
        return self._load("trackers", tracker_id, IntegrationTracker)

    def list_tracker_ids(self) -> list[str]:
        return self._list_ids("trackers")

    def delete_tracker(self, tracker_id: str) -> None:
        """Remove a tracker file if it exists."""
        with self._lock:
            path = self._path("trackers", tracker_id)
            if path.exists():
                path.unlink()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _path(self, kind: str, record_id: str) -> Path:
        if not record_id or "/" in record_id or "\\" in record_id or record_id.startswith("."):
            raise ValueError(f"Invalid record id: {record_id!r}")
        return self._root / kind / f"{record_id}.json"

    def _list_ids(self, kind: str) -> list[str]:
        with self._lock:
            folder = self._root / kind
            if not folder.exists():
                return []
            return sorted(p.stem for p in folder.glob("*.json"))

    def _load(self, kind: str, record_id: str, model: type[_Model]) -> _Model:
        with self._lock:
            path = self._path(kind, record_id)
            if not path.exists():
                raise ValueError(f"No {kind[:-1]} stored with id '{record_id}'")
            try:
                with open(path, encoding="utf-8") as fh:
                    data = json.load(fh)
                return model.model_validate(data)
            except Exception as exc:
                raise ValueError(f"Failed to load {kind[:-1]} '{record_id}': {exc}") from exc

    def _save(self, kind: str, record_id: str, record: BaseModel) -> Path:
        with self._lock:
            path = self._path(kind, record_id)
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp = path.with_suffix(".tmp")
            try:
                with open(tmp, "w", encoding="utf-8") as fh:
                    json.dump(record.model_dump(mode="json"), fh, indent=2, ensure_ascii=False)
                tmp.replace(path)
            except Exception as exc:
                if tmp.exists():
                    tmp.unlink()
                raise ValueError(f"Failed to save {kind[:-1]} '{record_id}': {exc}") from exc
            logger.info("Saved %s %s to %s", kind[:-1], record_id, path)
            return path
