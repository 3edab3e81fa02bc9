"""CLI command implementations"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Annotated, List, Optional

import typer

from docstore.config import Settings, load_config
from docstore.core.loader import load_store
from docstore.crud.memory_repo import DocumentStore
from docstore.crud.models import Document, SearchRequest
from docstore.errors import InvalidArgument


LOG_FORMAT = "%(asctime)s - %(levelname)s: %(message)s"

DataFileOption = Annotated[Optional[str], typer.Option("--data-file", help="YAML/JSON file of documents to load")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _open_store(data_file: Optional[str]) -> DocumentStore:
    """Build a fresh store seeded from the configured data file."""
    settings = _settings(overrides={"data_file": data_file})
    store = DocumentStore()
    try:
        load_store(Path(settings.data_file), store)
    except ValueError as e:
        _fail("Could not load documents", e)
    return store


def _parse_time(value: Optional[str], flag: str) -> Optional[datetime]:
    if value is None:
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        _fail(f"{flag} must be an ISO-8601 timestamp, got {value!r}")


def _dump(docs: list[Document]) -> str:
    return json.dumps([d.model_dump(mode="json") for d in docs], indent=2, ensure_ascii=False)


def main_callback(
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="DEBUG, INFO, WARNING, ERROR or CRITICAL")] = None,
    ):
    """Configure logging before any command runs."""
    settings = _settings(overrides={"log_level": log_level})
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")


def load_cmd(data_file: DataFileOption = None):
    """Load the data file and list each document's id and title."""
    store = _open_store(data_file)
    if not len(store):
        typer.echo("No documents found.")
        raise typer.Exit(1)
    for doc_id in store.ids():
        typer.echo(f"  {doc_id}: {store.find_by_id(doc_id).title}")
    typer.echo(f"Loaded {len(store)} document(s)")


def get_cmd(
    doc_id: Annotated[str, typer.Argument(help="Document id")],
    data_file: DataFileOption = None,
    ):
    """Print one document as JSON."""
    store = _open_store(data_file)
    try:
        doc = store.find_by_id(doc_id)
    except InvalidArgument as e:
        _fail(str(e))
    if doc is None:
        typer.echo(f"No document with id {doc_id}.", err=True)
        raise typer.Exit(1)
    typer.echo(json.dumps(doc.model_dump(mode="json"), indent=2, ensure_ascii=False))


def search_cmd(
    data_file: DataFileOption = None,
    title_prefix: Annotated[Optional[List[str]], typer.Option("--title-prefix", help="Title word prefix (repeatable)")] = None,
    content: Annotated[Optional[List[str]], typer.Option("--content", help="Exact content token (repeatable)")] = None,
    author_id: Annotated[Optional[List[str]], typer.Option("--author-id", help="Author id (repeatable)")] = None,
    created_from: Annotated[Optional[str], typer.Option("--created-from", help="Exclusive lower bound, ISO-8601")] = None,
    created_to: Annotated[Optional[str], typer.Option("--created-to", help="Exclusive upper bound, ISO-8601")] = None,
    ):
    """Print documents matching every given criterion as a JSON list."""
    request = SearchRequest(
        title_prefixes=title_prefix or None,
        contains_contents=content or None,
        author_ids=author_id or None,
        created_from=_parse_time(created_from, "--created-from"),
        created_to=_parse_time(created_to, "--created-to"),
    )
    store = _open_store(data_file)
    typer.echo(_dump(store.search(request)))
