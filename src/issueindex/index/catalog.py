"""Catalog export handed to the site renderer."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from issueindex.index.issues import IssueIndex
from issueindex.models import Document

LOGGER = logging.getLogger(__name__)


def document_record(document: Document, *, include_body: bool = True) -> dict[str, Any]:
    record: dict[str, Any] = {
        "id": document.id,
        "title": document.title,
        "category": document.category,
        "date": document.date.isoformat(),
        "tags": sorted(document.tags),
        "author": document.author,
        "layout": document.layout,
        "extra": document.extra,
        "source": str(document.source) if document.source is not None else None,
    }
    if include_body:
        record["body"] = document.body
    return record


def build_catalog(index: IssueIndex, *, include_body: bool = True) -> dict[str, Any]:
    """Serialise an issue index into a JSON-ready catalog, in index order."""
    documents = [document_record(doc, include_body=include_body) for doc in index.documents()]
    return {
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "issue_count": len(index),
        "document_count": len(documents),
        "issues": [
            {
                "category": issue.category,
                "document_ids": [doc.id for doc in issue.documents],
            }
            for issue in index
        ],
        "documents": documents,
    }


def write_catalog(index: IssueIndex, path: Path, *, include_body: bool = True) -> Path:
    catalog = build_catalog(index, include_body=include_body)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(catalog, indent=2, ensure_ascii=False), encoding="utf-8")
    LOGGER.info("Wrote catalog with %d documents to %s", catalog["document_count"], path)
    return path
