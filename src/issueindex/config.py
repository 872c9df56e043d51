"""Application configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from issueindex.utils.files import DEFAULT_EXTENSIONS


def _resolve(path: Path, base_dir: Path | None) -> Path:
    if path.is_absolute() or base_dir is None:
        return path
    return base_dir / path


@dataclass(slots=True)
class AppConfig:
    content_dir: Path = Path("content")
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    workers: int = 1
    catalog_path: Path = Path("catalog.json")

    def resolve_content_dir(self, base_dir: Path | None = None) -> Path:
        return _resolve(Path(self.content_dir), base_dir)

    def resolve_catalog_path(self, base_dir: Path | None = None) -> Path:
        return _resolve(Path(self.catalog_path), base_dir)
