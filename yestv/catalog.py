import logging
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from .errors import ValidationError
from .storage import JsonStore

logger = logging.getLogger("yestv.catalog")

CATALOG_DOC = "catalog.json"

MODE_REPLACE = "replace"
MODE_MERGE = "merge"


@dataclass
class MergeStats:
    added: int = 0
    updated: int = 0


def parse_mode(value: Any) -> str:
    """Anything other than the string "merge" (any case) means replace."""
    if isinstance(value, str) and value.lower() == MODE_MERGE:
        return MODE_MERGE
    return MODE_REPLACE


def _id_text(value: Any) -> str:
    """Render an id the way the catalog clients do: 1.0 is 1, True is true."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def catalog_key(item: Any) -> Optional[str]:
    """Dedup identity of a catalog item, or None when it has neither id nor title."""
    if not isinstance(item, dict):
        return None
    item_id = item.get("id")
    if item_id is not None and item_id != "":
        return f"id:{_id_text(item_id)}"
    title = item.get("title")
    if isinstance(title, str) and title.strip():
        return f"title:{title.strip().lower()}"
    return None


def merge_catalog_items(
    existing: Iterable[Any],
    incoming: Iterable[Any],
    mode: str = MODE_REPLACE,
) -> tuple[list[dict], MergeStats]:
    """Upsert ``incoming`` into ``existing`` by catalog key.

    In replace mode the existing items only decide whether an incoming key
    counts as updated or added; they are not part of the result. Slots keep
    the position where their key first appeared.
    """
    replace = mode != MODE_MERGE
    merged: dict[str, dict] = {}
    existing_keys: set[str] = set()
    incoming_keys: set[str] = set()
    auto_index = 0

    def key_for(item: dict) -> str:
        nonlocal auto_index
        key = catalog_key(item)
        if key is None:
            key = f"auto:{auto_index}"
            auto_index += 1
        return key

    for raw in existing:
        if not isinstance(raw, dict):
            continue
        key = key_for(raw)
        existing_keys.add(key)
        if not replace:
            merged[key] = dict(raw)

    for raw in incoming:
        if not isinstance(raw, dict):
            continue
        key = key_for(raw)
        incoming_keys.add(key)
        merged[key] = dict(raw)

    stats = MergeStats()
    for key in incoming_keys:
        if key in existing_keys:
            stats.updated += 1
        else:
            stats.added += 1
    return list(merged.values()), stats


class CatalogService:
    def __init__(self, store: JsonStore):
        self.store = store

    def list_items(self) -> list:
        items = self.store.read(CATALOG_DOC, [])
        if not isinstance(items, list):
            logger.warning("Stored catalog is %s, not a list; treating as empty", type(items).__name__)
            return []
        return items

    def ingest(self, items: Any, mode: Any = None) -> dict:
        if not isinstance(items, list):
            raise ValidationError("Field 'items' must be a list.")
        resolved = parse_mode(mode)
        with self.store.lock(CATALOG_DOC):
            current = self.list_items()
            merged, stats = merge_catalog_items(current, items, resolved)
            self.store.write(CATALOG_DOC, merged)
        logger.info(
            "Catalog %s: received=%d added=%d updated=%d total=%d",
            resolved, len(items), stats.added, stats.updated, len(merged),
        )
        return {
            "ok": True,
            "total": len(merged),
            "received": len(items),
            "added": stats.added,
            "updated": stats.updated,
            "mode": resolved,
        }

    def clear(self) -> dict:
        with self.store.lock(CATALOG_DOC):
            self.store.write(CATALOG_DOC, [])
        logger.info("Catalog cleared")
        return {"ok": True, "total": 0}
