"""Command line interface for issueindex."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from issueindex.config import AppConfig
from issueindex.errors import IssueIndexError
from issueindex.index.catalog import write_catalog
from issueindex.index.indexer import Indexer
from issueindex.index.issues import IssueIndex
from issueindex.index.storage import DocumentStore

console = Console()
app = typer.Typer(help="issueindex - front-matter ingestion and issue indexing")

LOGGER = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _format_date(value: datetime | None) -> str:
    return value.strftime("%Y-%m-%d %H:%M") if value is not None else "-"


def _build(
    inputs: Optional[List[Path]], root: Optional[Path], workers: int
) -> tuple[DocumentStore, IssueIndex]:
    config = AppConfig(workers=workers)
    paths = inputs or [config.resolve_content_dir(Path.cwd())]
    missing = [path for path in paths if not path.exists()]
    if missing:
        raise typer.BadParameter(f"Content path not found: {missing[0]}")

    store = DocumentStore()
    indexer = Indexer(store, root=root, extensions=config.extensions, workers=config.workers)
    try:
        stats = indexer.index(paths)
    except IssueIndexError as exc:
        console.print(f"[red]Ingestion failed:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc
    LOGGER.debug("Ingested %d files", stats.ingested)
    return store, IssueIndex.build(store)


_INPUTS = typer.Argument(
    None, help="Content files or directories (default: ./content).", resolve_path=True
)
_ROOT = typer.Option(
    None, "--root", help="Directory document ids are relative to.", resolve_path=True
)
_WORKERS = typer.Option(AppConfig().workers, "--workers", "-w", help="Parallel parse workers.")
_VERBOSE = typer.Option(False, "--verbose", "-v", help="Verbose logging")


@app.command()
def index(
    inputs: Optional[List[Path]] = _INPUTS,
    root: Optional[Path] = _ROOT,
    workers: int = _WORKERS,
    verbose: bool = _VERBOSE,
) -> None:
    """Ingest content and list the resulting issues."""
    _setup_logging(verbose)
    store, issue_index = _build(inputs, root, workers)
    if not len(store):
        console.print("[yellow]No documents found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Issue")
    table.add_column("Documents", justify="right")
    table.add_column("First")
    table.add_column("Last")
    for issue in issue_index:
        table.add_row(
            escape(issue.category),
            str(len(issue)),
            _format_date(issue.first_date),
            _format_date(issue.last_date),
        )
    console.print(table)
    console.print(f"Documents: {len(store)}, issues: {len(issue_index)}")


@app.command()
def show(
    doc_id: str = typer.Argument(..., help="Document id, e.g. issue-22/react-views"),
    inputs: Optional[List[Path]] = _INPUTS,
    root: Optional[Path] = _ROOT,
    verbose: bool = _VERBOSE,
) -> None:
    """Show the metadata of a single document."""
    _setup_logging(verbose)
    store, _ = _build(inputs, root, 1)
    try:
        document = store.get(doc_id)
    except IssueIndexError as exc:
        console.print(f"[red]Document not found:[/red] {escape(doc_id)}")
        raise typer.Exit(code=1) from exc

    table = Table(show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("id", escape(document.id))
    table.add_row("source", escape(str(document.source)))
    for key, value in document.front_matter.items():
        table.add_row(escape(key), escape(value))
    table.add_row("body", f"{len(document.body)} characters")
    console.print(table)


@app.command()
def tags(
    inputs: Optional[List[Path]] = _INPUTS,
    root: Optional[Path] = _ROOT,
    verbose: bool = _VERBOSE,
) -> None:
    """List tags and how many documents carry each."""
    _setup_logging(verbose)
    _, issue_index = _build(inputs, root, 1)
    names = issue_index.tags()
    if not names:
        console.print("[yellow]No tags found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Tag")
    table.add_column("Documents", justify="right")
    for name in names:
        table.add_row(escape(name), str(len(issue_index.by_tag(name))))
    console.print(table)


@app.command()
def export(
    inputs: Optional[List[Path]] = _INPUTS,
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Catalog JSON path"),
    root: Optional[Path] = _ROOT,
    workers: int = _WORKERS,
    include_body: bool = typer.Option(True, "--body/--no-body", help="Embed document bodies"),
    verbose: bool = _VERBOSE,
) -> None:
    """Write the issue catalog consumed by the site renderer."""
    _setup_logging(verbose)
    config = AppConfig(catalog_path=output if output is not None else AppConfig().catalog_path)
    _, issue_index = _build(inputs, root, workers)
    target = write_catalog(
        issue_index, config.resolve_catalog_path(Path.cwd()), include_body=include_body
    )
    console.print(f"Catalog written to [bold]{escape(str(target))}[/bold]")
