"""

admock/core/database.py

"""


import json
import logging
import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, Optional, Union

from fastapi import Request

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when the JSON document cannot be read, parsed or written."""


class JsonDatabase:
    """
    Single JSON document held in memory and written back in full.

    The document is read lazily on first access and cached until ``reset``.
    Every write replaces the whole file.
    """

    def __init__(self, path: Union[str, Path], initial_path: Union[str, Path]):
        self.path = Path(path)
        self.initial_path = Path(initial_path)
        self._document: Optional[Dict[str, Any]] = None

    @property
    def is_loaded(self) -> bool:
        return self._document is not None

    def load(self) -> Dict[str, Any]:
        """Return the cached document, reading it from disk if needed."""
        if self._document is None:
            try:
                raw = self.path.read_text(encoding="utf-8")
            except OSError as e:
                raise StorageError(f"Could not read {self.path}: {e}") from e
            try:
                document = json.loads(raw)
            except json.JSONDecodeError as e:
                raise StorageError(f"Error decoding {self.path}: {e}") from e
            if not isinstance(document, dict):
                raise StorageError(f"{self.path} does not hold a JSON object")
            self._document = document
            logger.info(f"Loaded JSON database from {self.path}")
        return self._document

    def persist(self) -> None:
        """Write the cached document over the file on disk."""
        if self._document is None:
            return
        data = json.dumps(self._document, indent=2, ensure_ascii=False)
        try:
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".db-", suffix=".json")
        except OSError as e:
            raise StorageError(f"Could not write {self.path}: {e}") from e
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(data)
            os.replace(tmp_name, self.path)
        except OSError as e:
            try:
                os.unlink(tmp_name)
            except OSError:
                pass
            raise StorageError(f"Could not write {self.path}: {e}") from e

    @contextmanager
    def mutate(self) -> Iterator[Dict[str, Any]]:
        """Load, hand the document to the caller, then persist it."""
        document = self.load()
        try:
            yield document
            self.persist()
        except BaseException:
            # drop the half-applied change; the next load rereads the file
            self._document = None
            raise

    def reset(self) -> None:
        """Copy the initial document over the live one and drop the cache."""
        try:
            data = self.initial_path.read_bytes()
            self.path.write_bytes(data)
        except OSError as e:
            raise StorageError(f"Could not reset {self.path} from {self.initial_path}: {e}") from e
        self._document = None
        logger.info(f"Reset {self.path} from {self.initial_path}")

    def collection(self, name: str) -> Optional[list]:
        """Return a top-level list from the document, or None."""
        value = self.load().get(name)
        return value if isinstance(value, list) else None


def get_database(request: Request) -> JsonDatabase:
    """Get the database bound to the running application"""
    return request.app.state.db
