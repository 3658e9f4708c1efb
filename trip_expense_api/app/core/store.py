"""
JSON document storage.

All durable state lives in a single JSON document of the form::

    {"tripRequests": [...], "expenses": [...]}

The document is read and rewritten as a whole.  ``DocumentStore``
defines the contract used by the services (``load``, ``save`` and the
``transaction`` context manager); ``JsonFileStore`` backs it with a
file on disk and ``InMemoryStore`` keeps it in memory for tests.

Reads fail soft: a missing file is created with the default document,
and an unreadable or corrupt file is logged and treated as empty.
Write failures are logged and swallowed as well, so callers never see
a storage error distinct from "no data".

``transaction`` holds a process-wide lock around load, mutate and
save.  Two overlapping requests therefore cannot both read the same
snapshot and overwrite each other's change.  The lock does not
protect against a second process writing the same file.
"""

from __future__ import annotations

import copy
import json
import logging
import os
import tempfile
import threading
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

from fastapi import Request

from .config import settings

logger = logging.getLogger(__name__)

TRIP_REQUESTS = "tripRequests"
EXPENSES = "expenses"

Document = Dict[str, List[Dict[str, Any]]]


def default_document() -> Document:
    """Return a fresh, empty document."""
    return {TRIP_REQUESTS: [], EXPENSES: []}


def _normalize(data: Any) -> Document:
    """Coerce loaded JSON into a document with both collections present."""
    if not isinstance(data, dict):
        raise ValueError("Data file does not contain a JSON object")
    for key in (TRIP_REQUESTS, EXPENSES):
        if not isinstance(data.get(key), list):
            data[key] = []
    return data


def generate_id(records: List[Dict[str, Any]]) -> str:
    """Return a new id for ``records``.

    Ids are millisecond timestamps.  When the clock has not advanced
    past the highest numeric id already present, the next integer is
    used instead, so ids issued under the store lock never collide.
    """
    candidate = int(time.time() * 1000)
    highest = max(
        (int(r["id"]) for r in records if str(r.get("id", "")).isdigit()),
        default=0,
    )
    return str(max(candidate, highest + 1))


class DocumentStore:
    """Base class for stores holding the whole document.

    Subclasses implement ``load`` and ``save``; the locking
    ``transaction`` helper is shared.
    """

    # Shared by every store in the process so two store objects pointing
    # at the same file still serialize their writes.
    _lock = threading.RLock()

    def load(self) -> Document:
        raise NotImplementedError

    def save(self, document: Document) -> None:
        raise NotImplementedError

    @contextmanager
    def transaction(self) -> Iterator[Document]:
        """Yield the current document and persist it on normal exit.

        If the body raises, nothing is written and the exception
        propagates to the caller.
        """
        with self._lock:
            document = self.load()
            yield document
            self.save(document)


class JsonFileStore(DocumentStore):
    """Store backed by a pretty-printed JSON file."""

    def __init__(self, path: str | os.PathLike) -> None:
        self.path = Path(path)

    def load(self) -> Document:
        try:
            if not self.path.exists():
                document = default_document()
                self.save(document)
                return document
            with self.path.open("r", encoding="utf-8") as f:
                return _normalize(json.load(f))
        except (OSError, ValueError):
            logger.exception("Failed to read data file %s", self.path)
            return default_document()

    def save(self, document: Document) -> None:
        # Write to a sibling temp file and rename it into place so a
        # crash mid-write cannot leave a truncated document behind.
        tmp_name: Optional[str] = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=str(self.path.parent)
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(document, f, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self.path)
            tmp_name = None
        except (OSError, TypeError, ValueError):
            logger.exception("Failed to write data file %s", self.path)
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.remove(tmp_name)


class InMemoryStore(DocumentStore):
    """Store keeping the document in memory.

    ``load`` and ``save`` copy the document so callers cannot mutate
    stored state without going through ``save``, same as with a file.
    """

    def __init__(self, document: Optional[Document] = None) -> None:
        self._document = _normalize(copy.deepcopy(document)) if document else default_document()

    def load(self) -> Document:
        return copy.deepcopy(self._document)

    def save(self, document: Document) -> None:
        self._document = copy.deepcopy(document)


def get_data_path() -> str:
    """Compute the path to the data file.

    If ``settings.data_file`` is an absolute path, use it directly.
    Otherwise resolve it relative to the project root.
    """
    data_file = settings.data_file
    if os.path.isabs(data_file):
        return data_file
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / data_file).resolve())


def get_store(request: Request) -> DocumentStore:
    """FastAPI dependency returning the store attached to the app."""
    return request.app.state.store
