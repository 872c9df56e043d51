"""Front-matter parsing for Markdown content files.

A content file opens with a ``---`` line, a YAML-style block of flat
``key: value`` pairs and a closing ``---`` line. Everything after the closing
delimiter is the body and is handed on untouched.

The block is read with PyYAML's ``BaseLoader`` so that every scalar stays a
string: ``category: 12`` and ``category: "12"`` both yield ``"12"``.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from pathlib import Path

import yaml

from issueindex.errors import IngestionError, InvalidDate, MalformedDocument
from issueindex.models import Document
from issueindex.utils.files import document_id_for

LOGGER = logging.getLogger(__name__)

DELIMITER = "---"

REQUIRED_FIELDS = ("category", "date")

_DATE_FORMATS = (
    "%Y-%m-%d %H:%M:%S %z",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%d",
)

_TAG_SEPARATOR = re.compile(r"[,\s]+")


def _is_delimiter(line: str) -> bool:
    return line.rstrip(" \t\r\n") == DELIMITER


def _split_lines(text: str) -> list[str]:
    # Only \n ends a line, unlike splitlines().
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def _optional(metadata: dict[str, str], key: str) -> str | None:
    value = metadata.get(key, "")
    return value if value.strip() else None


def _flatten(key: str, value: object, source: Path | None) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return ", ".join(value)
    raise MalformedDocument(source, f"field {key!r} is not a flat value")


def parse_front_matter(text: str, *, source: Path | None = None) -> tuple[dict[str, str], str]:
    """Split ``text`` into its front-matter mapping and the remaining body."""
    lines = _split_lines(text)
    if not lines or not _is_delimiter(lines[0]):
        raise MalformedDocument(source, "missing opening front-matter delimiter")

    for end, line in enumerate(lines[1:], start=1):
        if _is_delimiter(line):
            break
    else:
        raise MalformedDocument(source, "missing closing front-matter delimiter")

    block = "".join(lines[1:end])
    body = "".join(lines[end + 1 :])

    try:
        loaded = yaml.load(block, Loader=yaml.BaseLoader)
    except yaml.YAMLError as exc:
        raise MalformedDocument(source, f"invalid front matter: {exc}") from exc

    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise MalformedDocument(source, "front matter is not a key-value mapping")

    metadata = {str(key): _flatten(str(key), value, source) for key, value in loaded.items()}
    return metadata, body


def split_tags(value: str) -> frozenset[str]:
    """Split a tag string on commas and whitespace."""
    return frozenset(tag for tag in _TAG_SEPARATOR.split(value) if tag)


def parse_date(value: str, *, source: Path | None = None) -> datetime:
    """Parse a loosely formatted timestamp into a naive datetime.

    Aware values are converted to UTC first so every date in a run compares.
    """
    text = value.strip()
    if text[-1:] in ("Z", "z"):
        text = text[:-1] + "+00:00"
    parsed: datetime | None = None
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        for fmt in _DATE_FORMATS:
            try:
                parsed = datetime.strptime(text, fmt)
                break
            except ValueError:
                continue

    if parsed is None:
        raise InvalidDate(source, value)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def parse_document(text: str, doc_id: str, *, source: Path | None = None) -> Document:
    """Parse raw file text into a :class:`Document`."""
    metadata, body = parse_front_matter(text, source=source)

    for name in REQUIRED_FIELDS:
        if not metadata.get(name, "").strip():
            raise MalformedDocument(source, f"missing required field {name!r}")

    document = Document(
        id=doc_id,
        title=metadata.get("title", ""),
        category=metadata["category"].strip(),
        date=parse_date(metadata["date"], source=source),
        tags=split_tags(metadata.get("tags", "")),
        author=_optional(metadata, "author"),
        layout=_optional(metadata, "layout"),
        front_matter=metadata,
        body=body,
        source=source,
    )
    LOGGER.debug("Parsed %s (category %s)", doc_id, document.category)
    return document


def load_document(path: Path, root: Path) -> Document:
    """Read ``path`` and parse it, deriving the id relative to ``root``."""
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise IngestionError(path, f"cannot read file: {exc.strerror or exc}") from exc
    try:
        # utf-8-sig drops a leading BOM so the delimiter sits at the very start.
        text = raw.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise MalformedDocument(path, f"not valid UTF-8: {exc}") from exc
    return parse_document(text, document_id_for(path, root), source=path)
