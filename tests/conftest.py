"""Shared fixtures for issueindex tests."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Callable

import pytest

from issueindex.models import Document

REACT_VIEWS = """---
layout: post
title:  "React-Inspired Views"
category: "22"
date: "2015-03-10 8:00:00"
tags: article
author: "<a href=\\"http://twitter.com/adamjernst\\">Adam Ernst</a>"
---

User interfaces can be hard to get right.<sup><a href="#fn1">1</a></sup>
"""


def render_article(
    *,
    title: str = "Untitled",
    category: str = "12",
    date: str = "2014-05-08 11:00:00",
    tags: str = "article",
    body: str = "Body text.\n",
    extra: str = "",
) -> str:
    return (
        "---\n"
        f'title: "{title}"\n'
        f'category: "{category}"\n'
        f'date: "{date}"\n'
        f"tags: {tags}\n"
        f"{extra}"
        "---\n"
        f"{body}"
    )


@pytest.fixture
def write_article(tmp_path: Path) -> Callable[..., Path]:
    """Write an article below ``tmp_path/content`` and return its path."""
    content = tmp_path / "content"

    def _write(relative: str, text: str | None = None, **fields: str) -> Path:
        path = content / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text if text is not None else render_article(**fields), encoding="utf-8")
        return path

    return _write


def make_document(
    doc_id: str,
    *,
    category: str = "12",
    date: datetime = datetime(2014, 5, 8, 11, 0),
    tags: frozenset[str] = frozenset({"article"}),
    title: str = "Title",
    body: str = "Body\n",
) -> Document:
    return Document(
        id=doc_id,
        title=title,
        category=category,
        date=date,
        tags=tags,
        author=None,
        layout=None,
        front_matter={
            "title": title,
            "category": category,
            "date": date.isoformat(),
            "tags": ", ".join(sorted(tags)),
        },
        body=body,
    )
