import json
import logging
import os
import threading
from typing import Any

from .errors import StorageError

logger = logging.getLogger("yestv.storage")

_MISSING = object()


class JsonStore:
    """Named JSON documents stored as files under one directory.

    Writes go to ``<name>.tmp`` first and are renamed over the target, so a
    document on disk is always either the old or the new version.
    """

    def __init__(self, root: str):
        self.root = root
        self._locks: dict[str, threading.RLock] = {}
        self._locks_guard = threading.Lock()

    def path(self, name: str) -> str:
        return os.path.join(self.root, name)

    def lock(self, name: str) -> threading.RLock:
        """Lock to hold across a read-modify-write of ``name``."""
        with self._locks_guard:
            lk = self._locks.get(name)
            if lk is None:
                lk = threading.RLock()
                self._locks[name] = lk
            return lk

    def read(self, name: str, fallback: Any = _MISSING) -> Any:
        path = self.path(name)
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError) as exc:
            if fallback is not _MISSING:
                if not isinstance(exc, FileNotFoundError):
                    logger.warning("Using fallback for %s: %s", name, exc)
                return fallback
            raise StorageError(f"Could not read document {name!r}.") from exc

    def write(self, name: str, document: Any) -> None:
        path = self.path(name)
        tmp_path = f"{path}.tmp"
        try:
            payload = json.dumps(document, indent=2, ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            raise StorageError(f"Document {name!r} is not JSON serializable.") from exc
        try:
            os.makedirs(self.root, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, path)
        except OSError as exc:
            try:
                os.remove(tmp_path)
            except OSError:
                pass
            raise StorageError(f"Could not write document {name!r}.") from exc
