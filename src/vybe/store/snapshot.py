"""
Workout snapshot persistence: one JSON document under a well-known path.

The file holds the durability contract of the live workout timer:

    {
        "isRunning": true,
        "startTime": 1735000000000,   # epoch ms or null
        "type": "running",
        "elapsedSeconds": 312,
        "lastUpdated": 1735000312000  # epoch ms
    }

Writes go to a sibling temp file and are renamed into place so a crash mid
write never leaves a truncated snapshot behind.
"""
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional


# ── Exceptions ────────────────────────────────────────────────────────────────

class SnapshotWriteError(RuntimeError):
    """Raised when the snapshot could not be written (disk full, permissions...)."""


class SnapshotReadError(RuntimeError):
    """Raised when a snapshot exists but cannot be read or parsed."""


# ── Store ─────────────────────────────────────────────────────────────────────

class JsonSnapshotStore:
    """
    Reads and writes the workout snapshot file.

    Usage:
        store = JsonSnapshotStore(Path.home() / ".vybe" / "active_workout.json")
        store.save({"isRunning": False, ...})
        data = store.load()   # -> dict, or None if nothing saved yet
    """

    def __init__(self, path: Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def save(self, snapshot: Dict[str, Any]) -> None:
        """
        Persist the snapshot atomically.

        Raises:
            SnapshotWriteError: on any filesystem failure.
        """
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(snapshot))
            os.replace(tmp_path, self._path)
        except OSError as exc:
            raise SnapshotWriteError(
                f"Could not write workout snapshot to {self._path}: {exc}"
            ) from exc

    def load(self) -> Optional[Dict[str, Any]]:
        """
        Load the snapshot.

        Returns:
            The decoded JSON object, or None if no snapshot was ever saved.

        Raises:
            SnapshotReadError: if the file is unreadable or not a JSON object.
        """
        if not self._path.exists():
            return None
        try:
            data = json.loads(self._path.read_text())
        except (OSError, ValueError) as exc:
            raise SnapshotReadError(
                f"Unreadable workout snapshot at {self._path}: {exc}"
            ) from exc
        if not isinstance(data, dict):
            raise SnapshotReadError(
                f"Workout snapshot at {self._path} is not a JSON object"
            )
        return data
