"""Tests for file utility functions."""

from __future__ import annotations

from pathlib import Path

import pytest

from issueindex.errors import IngestionError
from issueindex.utils.files import document_id_for, iter_content_paths


class TestIterContentPaths:
    """Test iter_content_paths function."""

    def test_single_file(self, tmp_path: Path) -> None:
        """Should yield a single file with its parent as base."""
        post = tmp_path / "post.md"
        post.write_text("dummy")

        assert list(iter_content_paths([post])) == [(post, tmp_path)]

    def test_directory(self, tmp_path: Path) -> None:
        """Should find content files and skip others."""
        (tmp_path / "a.md").write_text("a")
        (tmp_path / "b.markdown").write_text("b")
        (tmp_path / "c.txt").write_text("c")

        paths = [path for path, _ in iter_content_paths([tmp_path])]

        assert [p.name for p in paths] == ["a.md", "b.markdown"]

    def test_nested_directories_keep_input_base(self, tmp_path: Path) -> None:
        nested = tmp_path / "issue-12"
        nested.mkdir()
        (nested / "editorial.md").write_text("x")

        assert list(iter_content_paths([tmp_path])) == [(nested / "editorial.md", tmp_path)]

    def test_case_insensitive_extension(self, tmp_path: Path) -> None:
        (tmp_path / "README.MD").write_text("x")

        assert len(list(iter_content_paths([tmp_path]))) == 1

    def test_custom_extensions(self, tmp_path: Path) -> None:
        (tmp_path / "a.md").write_text("a")
        (tmp_path / "b.txt").write_text("b")

        paths = [path.name for path, _ in iter_content_paths([tmp_path], (".txt",))]

        assert paths == ["b.txt"]

    def test_nonexistent_file(self, tmp_path: Path) -> None:
        """Should skip nonexistent files."""
        assert list(iter_content_paths([tmp_path / "missing.md"])) == []

    def test_empty_directory(self, tmp_path: Path) -> None:
        assert list(iter_content_paths([tmp_path])) == []


class TestDocumentIdFor:
    """Test id derivation."""

    def test_relative_posix_without_suffix(self) -> None:
        path = Path("/site/content/issue-22/react-inspired-views.md")

        assert document_id_for(path, Path("/site/content")) == "issue-22/react-inspired-views"

    def test_relative_path_absolute_root(self, tmp_path: Path, monkeypatch) -> None:
        """Should keep the directory part when only one side is relative."""
        monkeypatch.chdir(tmp_path)

        path = Path("content/issue-12/editorial.md")

        assert document_id_for(path, tmp_path / "content") == "issue-12/editorial"

    def test_outside_root_rejected(self) -> None:
        """Should name the file instead of flattening it to its stem."""
        with pytest.raises(IngestionError) as excinfo:
            document_id_for(Path("/elsewhere/post.md"), Path("/site"))

        assert excinfo.value.path == Path("/elsewhere/post.md")
