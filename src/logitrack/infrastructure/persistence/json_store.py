"""JSON-file-backed transactional store.

All tables live in one JSON document so that a write touching several
of them (an order plus its association rows) lands in a single atomic
file replace.  A re-entrant lock serialises transactions within the
process.
"""

from __future__ import annotations

import copy
import json
import logging
import os
import tempfile
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

logger = logging.getLogger(__name__)

INVENTORY_ITEMS = "inventory_items"
ORDERS = "orders"
ORDER_ITEMS = "order_items"

_EMPTY_DOCUMENT: dict = {
    "next_ids": {INVENTORY_ITEMS: 1, ORDERS: 1},
    INVENTORY_ITEMS: [],
    ORDERS: [],
    ORDER_ITEMS: [],
}


class JsonStore:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock = threading.RLock()
        self._ensure_file()

    @property
    def file_path(self) -> Path:
        return self._file_path

    @contextmanager
    def transaction(self) -> Iterator[dict]:
        """Yield the mutable document; commit on success, discard on error.

        Nothing reaches disk if the body raises, so a failed write leaves
        every table exactly as it was.  A body that leaves the document
        untouched does not rewrite the file either.
        """
        with self._lock:
            data = self._load()
            original = copy.deepcopy(data)
            yield data
            if data != original:
                self._persist(data)

    def snapshot(self) -> dict:
        """Return a detached copy of the document for read-only use."""
        with self._lock:
            return self._load()

    @staticmethod
    def allocate_id(data: dict, table: str) -> int:
        """Reserve the next ID for *table* inside an open transaction."""
        new_id = data["next_ids"][table]
        data["next_ids"][table] = new_id + 1
        return new_id

    # --- File helpers ---------------------------------------------------------

    def _load(self) -> dict:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist(self, data: dict) -> None:
        fd, tmp_name = tempfile.mkstemp(
            dir=self._file_path.parent, prefix=".", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(json.dumps(data, indent=2) + "\n")
            os.replace(tmp_name, self._file_path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._persist(copy.deepcopy(_EMPTY_DOCUMENT))
            logger.info("Initialised empty store at %s", self._file_path)
