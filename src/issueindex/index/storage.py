"""In-memory, append-only document store."""

from __future__ import annotations

import threading
from typing import Iterator

from issueindex.errors import DuplicateId, NotFound
from issueindex.models import Document


class DocumentStore:
    """Owns every document of one ingestion run, keyed by id."""

    def __init__(self) -> None:
        self._documents: dict[str, Document] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._documents

    def put(self, doc_id: str, document: Document) -> str:
        """Insert ``document`` under ``doc_id``.

        Raises:
            DuplicateId: ``doc_id`` is already stored. The stored document is kept.
        """
        with self._lock:
            if doc_id in self._documents:
                raise DuplicateId(doc_id, document.source)
            self._documents[doc_id] = document
        return doc_id

    def add(self, document: Document) -> str:
        return self.put(document.id, document)

    def get(self, doc_id: str) -> Document:
        try:
            return self._documents[doc_id]
        except KeyError:
            raise NotFound(doc_id) from None

    def all(self) -> Iterator[Document]:
        """Iterate over a snapshot of the stored documents, in no particular order."""
        with self._lock:
            snapshot = list(self._documents.values())
        return iter(snapshot)
