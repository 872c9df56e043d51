"""Utility helpers for working with content files."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, Sequence

from issueindex.errors import IngestionError

DEFAULT_EXTENSIONS = (".md", ".markdown")


def iter_content_paths(
    inputs: Iterable[Path], extensions: Sequence[str] = DEFAULT_EXTENSIONS
) -> Iterator[tuple[Path, Path]]:
    """Yield ``(path, base)`` pairs for content files, descending into directories.

    ``base`` is the input directory the file was found under, or the file's
    parent when a file was passed directly.
    """
    suffixes = {ext.lower() for ext in extensions}
    for item in inputs:
        if item.is_dir():
            for child in sorted(item.rglob("*")):
                if child.is_file() and child.suffix.lower() in suffixes:
                    yield child, item
        elif item.is_file() and item.suffix.lower() in suffixes:
            yield item, item.parent


def document_id_for(path: Path, root: Path) -> str:
    """Derive a stable document id: relative POSIX path without the suffix.

    Both paths are resolved first, so relative and absolute forms mix freely.

    Raises:
        IngestionError: ``path`` does not sit below ``root``.
    """
    try:
        relative = path.resolve().relative_to(root.resolve())
    except ValueError:
        raise IngestionError(path, f"file is outside the id root {root}") from None
    return relative.with_suffix("").as_posix()
