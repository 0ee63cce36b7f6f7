"""
Bounded, optionally file-backed history of decoded payloads.

Only the raw payload is persisted; records are decoded again on load so the
stored file stays valid across changes to the decoded representation.
"""
from __future__ import annotations

import datetime as dt
import json
import logging
import threading
import uuid
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from thaiqr.parsing.payload import decode_payload, ThaiQRData

logger = logging.getLogger(__name__)

MAX_HISTORY_ITEMS = 50


class HistorySource(str, Enum):
    """Where a payload was read from."""
    CAMERA = "camera"
    FILE = "file"
    TEXT = "text"


@dataclass(frozen=True)
class HistoryItem:
    id: str
    data: ThaiQRData
    timestamp: dt.datetime
    source: HistorySource

    def as_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "data": self.data.as_dict(),
            "timestamp": self.timestamp.isoformat(),
            "source": self.source.value,
        }

    def to_record(self) -> dict[str, str]:
        return {
            "id": self.id,
            "raw_data": self.data.raw_data,
            "timestamp": self.timestamp.isoformat(),
            "source": self.source.value,
        }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "HistoryItem":
        return cls(
            id=str(record["id"]),
            data=decode_payload(record["raw_data"]),
            timestamp=dt.datetime.fromisoformat(record["timestamp"]),
            source=HistorySource(record["source"]),
        )


class HistoryStore:
    """
    Keeps the ``max_items`` most recent history items, newest first.

    When ``path`` is given, every change is written to that JSON file and the
    file is read once on construction.
    """

    def __init__(self, path: Optional[str | Path] = None, max_items: int = MAX_HISTORY_ITEMS):
        if max_items < 1:
            raise ValueError("max_items must be at least 1")
        self.path = Path(path) if path else None
        self.max_items = max_items
        self._lock = threading.Lock()
        self._items: list[HistoryItem] = self._load()

    def _load(self) -> list[HistoryItem]:
        if self.path is None or not self.path.exists():
            return []
        try:
            records = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            records = None
            error = str(exc)
        else:
            error = f"expected a list of records, got {type(records).__name__}"
        if not isinstance(records, list):
            # The next change rewrites the file from the (empty) in-memory list.
            logger.warning(
                "history_load_failed",
                extra={"details": {"path": str(self.path), "error": error, "overwrite_on_save": True}},
            )
            return []

        items: list[HistoryItem] = []
        for index, record in enumerate(records):
            try:
                items.append(HistoryItem.from_record(record))
            except (ValueError, KeyError, TypeError) as exc:
                logger.warning(
                    "history_record_skipped",
                    extra={"details": {"path": str(self.path), "index": index, "error": str(exc)}},
                )
        return items[: self.max_items]

    def _save(self) -> None:
        if self.path is None:
            return
        records = [item.to_record() for item in self._items]
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(records, indent=2), encoding="utf-8")
        except OSError as exc:
            logger.warning("history_save_failed", extra={"details": {"path": str(self.path), "error": str(exc)}})

    def add(self, data: ThaiQRData, source: HistorySource | str = HistorySource.TEXT) -> HistoryItem:
        item = HistoryItem(
            id=str(uuid.uuid4()),
            data=data,
            timestamp=dt.datetime.now(dt.UTC),
            source=HistorySource(source),
        )
        with self._lock:
            self._items = [item, *self._items][: self.max_items]
            self._save()
        return item

    def remove(self, item_id: str) -> bool:
        """Delete one item; returns ``False`` if no item has ``item_id``."""
        with self._lock:
            remaining = [item for item in self._items if item.id != item_id]
            if len(remaining) == len(self._items):
                return False
            self._items = remaining
            self._save()
        return True

    def clear(self) -> None:
        with self._lock:
            self._items = []
            if self.path is not None and self.path.exists():
                try:
                    self.path.unlink()
                except OSError as exc:
                    logger.warning("history_clear_failed", extra={"details": {"path": str(self.path), "error": str(exc)}})

    def get(self, item_id: str) -> Optional[HistoryItem]:
        with self._lock:
            for item in self._items:
                if item.id == item_id:
                    return item
        return None

    def items(self) -> list[HistoryItem]:
        with self._lock:
            return list(self._items)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)
