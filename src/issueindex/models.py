"""Core issueindex data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, Mapping

KNOWN_FIELDS = ("title", "category", "date", "tags", "author", "layout")


@dataclass(frozen=True, slots=True)
class Document:
    """One parsed content file: typed front matter plus the untouched body."""

    id: str
    title: str
    category: str
    date: datetime
    tags: frozenset[str]
    author: str | None
    layout: str | None
    front_matter: Mapping[str, str] = field(hash=False)
    body: str
    source: Path | None = None

    def __post_init__(self) -> None:
        # Read-only copy; callers may keep mutating the dict they passed in.
        if not isinstance(self.front_matter, MappingProxyType):
            object.__setattr__(self, "front_matter", MappingProxyType(dict(self.front_matter)))

    @property
    def extra(self) -> dict[str, str]:
        """Front-matter keys outside the known schema, passed through as-is."""
        return {k: v for k, v in self.front_matter.items() if k not in KNOWN_FIELDS}

    @property
    def sort_key(self) -> tuple[datetime, str]:
        return (self.date, self.id)


@dataclass(frozen=True, slots=True)
class Issue:
    """Documents published under one category, ordered by date then id."""

    category: str
    documents: tuple[Document, ...]

    def __len__(self) -> int:
        return len(self.documents)

    def __iter__(self) -> Iterator[Document]:
        return iter(self.documents)

    @property
    def first_date(self) -> datetime | None:
        return self.documents[0].date if self.documents else None

    @property
    def last_date(self) -> datetime | None:
        return self.documents[-1].date if self.documents else None


@dataclass(slots=True)
class IndexStats:
    ingested: int = 0
    processed_files: list[Path] = field(default_factory=list)

    def increment(self, path: Path) -> None:
        self.ingested += 1
        self.processed_files.append(path)
