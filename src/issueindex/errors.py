"""Error types raised by the ingestion pipeline."""

from __future__ import annotations

from pathlib import Path


class IssueIndexError(Exception):
    """Base class for every pipeline failure."""


class IngestionError(IssueIndexError):
    """A source file violated an ingestion contract."""

    def __init__(self, path: Path | str | None, reason: str):
        self.path = Path(path) if path is not None else None
        self.reason = reason
        location = str(self.path) if self.path is not None else "<text>"
        super().__init__(f"{location}: {reason}")


class MalformedDocument(IngestionError):
    """Front-matter block is missing, unterminated or not a flat mapping."""


class InvalidDate(IngestionError):
    """The ``date`` field could not be parsed as a timestamp."""

    def __init__(self, path: Path | str | None, value: str):
        self.value = value
        super().__init__(path, f"invalid date {value!r}")


class DuplicateId(IssueIndexError):
    def __init__(self, doc_id: str, path: Path | None = None):
        self.doc_id = doc_id
        self.path = path
        message = f"duplicate document id {doc_id!r}"
        if path is not None:
            message = f"{path}: {message}"
        super().__init__(message)


class NotFound(IssueIndexError, KeyError):
    def __init__(self, key: str):
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"not found: {self.key!r}"
