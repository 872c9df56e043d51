"""Content ingestion pipeline."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Sequence

from issueindex.index.storage import DocumentStore
from issueindex.ingestion.frontmatter import load_document
from issueindex.models import IndexStats
from issueindex.utils.files import DEFAULT_EXTENSIONS, iter_content_paths

LOGGER = logging.getLogger(__name__)


def find_content(
    paths: Sequence[Path], extensions: Sequence[str] = DEFAULT_EXTENSIONS
) -> list[tuple[Path, Path]]:
    """Find all content files under the given paths."""
    return list(iter_content_paths(paths, extensions))


class Indexer:
    """Parses content files and fills a document store.

    The run is fail-fast: the first malformed file aborts it and the error
    propagates to the caller.
    """

    def __init__(
        self,
        store: DocumentStore,
        *,
        root: Path | None = None,
        extensions: Sequence[str] = DEFAULT_EXTENSIONS,
        workers: int = 1,
    ) -> None:
        self.store = store
        self.root = root
        self.extensions = tuple(extensions)
        self.workers = max(workers, 1)

    def index(self, paths: Sequence[Path]) -> IndexStats:
        """Ingest every content file found under the given paths."""
        files = find_content(paths, self.extensions)
        if not files:
            LOGGER.warning("No content files found")
            return IndexStats()

        stats = IndexStats()
        if self.workers == 1:
            for path, base in files:
                self._index_single(path, base)
                stats.increment(path)
            return stats

        executor = ThreadPoolExecutor(max_workers=self.workers)
        try:
            futures = [
                (path, executor.submit(self._index_single, path, base)) for path, base in files
            ]
            for path, future in futures:
                future.result()
                stats.increment(path)
        finally:
            # Queued files are cancelled on failure; parses already running still complete.
            executor.shutdown(wait=True, cancel_futures=True)
        return stats

    def _index_single(self, path: Path, base: Path) -> str:
        LOGGER.info("Processing: %s", path)
        document = load_document(path, self.root if self.root is not None else base)
        return self.store.add(document)
