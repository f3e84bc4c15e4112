"""
Flat-file JSON store.

Every collection (users, projects, tasks) lives in its own
``<data_dir>/<name>.json`` file holding a top-level JSON array.  Reads
and writes always cover the whole collection: callers load, mutate the
list in memory and save it back.

There is no locking and no atomic rename; two concurrent writers to the
same collection race and the last save wins.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .errors import CorruptStoreError, StoreError, StoreWriteError

logger = logging.getLogger(__name__)

Record = dict[str, Any]


class JsonFileStore:
    """Load and save named collections of records under ``data_dir``."""

    def __init__(self, data_dir: str | Path) -> None:
        self.data_dir = Path(data_dir)

    def path_for(self, name: str) -> Path:
        """Return the file backing the collection called *name*."""
        return self.data_dir / f"{name}.json"

    def load(self, name: str) -> list[Record]:
        """
        Read the full collection called *name*.

        A missing file, or a file whose content is empty or whitespace,
        is an empty collection.

        Raises:
            CorruptStoreError: If the file holds anything other than a
                JSON array.
            StoreError: If the file exists but cannot be read.
        """
        path = self.path_for(name)
        if not path.exists():
            return []

        try:
            content = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise CorruptStoreError(f"Collection '{name}' at {path} is not UTF-8 text") from exc
        except OSError as exc:
            raise StoreError(f"Unable to read collection '{name}' from {path}") from exc

        if not content.strip():
            return []

        try:
            records = json.loads(content)
        except json.JSONDecodeError as exc:
            raise CorruptStoreError(f"Collection '{name}' at {path} is not valid JSON") from exc

        if not isinstance(records, list):
            raise CorruptStoreError(f"Collection '{name}' at {path} is not a JSON array")
        return records

    def save(self, name: str, records: list[Record]) -> None:
        """
        Overwrite the collection called *name* with *records*.

        The file is written as indented JSON so it stays human-readable.

        Raises:
            StoreWriteError: If the data directory or file cannot be written.
        """
        path = self.path_for(name)
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(records, indent=2, ensure_ascii=False), encoding="utf-8")
        except OSError as exc:
            raise StoreWriteError(f"Unable to write collection '{name}' to {path}") from exc

        logger.debug("Saved %d records to %s", len(records), path)
