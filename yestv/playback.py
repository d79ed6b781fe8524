from typing import Any, Mapping, Optional

from .storage import JsonStore
from .utils.ids import new_id
from .utils.times import utc_now_iso

LOGS_DOC = "logs.json"

_DEFAULTS = {
    "event": "unknown",
    "source": "",
    "contentId": None,
    "reason": None,
}


class PlaybackLog:
    """Newest-first playback events, capped at ``max_entries``."""

    def __init__(self, store: JsonStore, max_entries: int = 200):
        self.store = store
        self.max_entries = max_entries

    def list_entries(self) -> list:
        logs = self.store.read(LOGS_DOC, [])
        return logs if isinstance(logs, list) else []

    def record(self, payload: Optional[Mapping[str, Any]] = None) -> dict:
        payload = payload or {}
        entry: dict[str, Any] = {"id": new_id()}
        for field, default in _DEFAULTS.items():
            value = payload.get(field)
            entry[field] = default if value is None else value
        entry["timestamp"] = utc_now_iso()
        with self.store.lock(LOGS_DOC):
            logs = self.list_entries()
            logs.insert(0, entry)
            del logs[self.max_entries:]
            self.store.write(LOGS_DOC, logs)
        return entry
