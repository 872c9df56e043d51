"""Grouping of stored documents into ordered issues."""

from __future__ import annotations

import re
from collections import defaultdict
from typing import Iterator

from issueindex.errors import NotFound
from issueindex.index.storage import DocumentStore
from issueindex.models import Document, Issue

_NUMERIC = re.compile(r"\d+")


def category_sort_key(category: str) -> tuple[int, int, str]:
    """Numeric categories first, in numeric order; free text after, lexically."""
    text = category.strip()
    if _NUMERIC.fullmatch(text):
        return (0, int(text), category)
    return (1, 0, category)


def _ordered(documents: list[Document]) -> tuple[Document, ...]:
    return tuple(sorted(documents, key=lambda doc: doc.sort_key))


class IssueIndex:
    """Issues built in one pass over a :class:`DocumentStore`."""

    def __init__(self, issues: tuple[Issue, ...], tag_map: dict[str, tuple[Document, ...]]) -> None:
        self._issues = issues
        self._by_category = {issue.category: issue for issue in issues}
        self._by_tag = tag_map

    @classmethod
    def build(cls, store: DocumentStore) -> IssueIndex:
        groups: dict[str, list[Document]] = defaultdict(list)
        tagged: dict[str, list[Document]] = defaultdict(list)
        for document in store.all():
            groups[document.category].append(document)
            for tag in document.tags:
                tagged[tag].append(document)

        issues = tuple(
            Issue(category=category, documents=_ordered(groups[category]))
            for category in sorted(groups, key=category_sort_key)
        )
        tag_map = {tag: _ordered(docs) for tag, docs in tagged.items()}
        return cls(issues, tag_map)

    @property
    def issues(self) -> tuple[Issue, ...]:
        return self._issues

    def __iter__(self) -> Iterator[Issue]:
        return iter(self._issues)

    def __len__(self) -> int:
        return len(self._issues)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IssueIndex):
            return NotImplemented
        return self._issues == other._issues

    def categories(self) -> list[str]:
        return [issue.category for issue in self._issues]

    def get(self, category: str) -> Issue:
        try:
            return self._by_category[category]
        except KeyError:
            raise NotFound(category) from None

    def tags(self) -> list[str]:
        return sorted(self._by_tag)

    def by_tag(self, tag: str) -> tuple[Document, ...]:
        """Documents carrying ``tag``, ordered by date then id."""
        return self._by_tag.get(tag, ())

    def documents(self) -> Iterator[Document]:
        """All documents in index order: issue by issue."""
        for issue in self._issues:
            yield from issue.documents
