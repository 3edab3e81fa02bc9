"""Seed-file loading: YAML (or JSON) document lists into a DocumentStore"""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from docstore.crud.models import Document
from docstore.crud.repo import DocumentRepo


logger = logging.getLogger(__name__)


def load_documents(path: Path) -> list[Document]:
    """Parse a seed file into Documents.

    Accepts either a top-level ``documents:`` list or a bare list. Raises
    ValueError naming the file when it is missing, unparsable, or malformed.
    """
    path = Path(path)
    if not path.exists():
        raise ValueError(f"Data file not found: {path}")
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path}: {e}") from e

    if raw is None:
        return []
    if isinstance(raw, dict):
        raw = raw.get("documents")
    if not isinstance(raw, list):
        raise ValueError(f"Invalid {path}: expected a list of documents")

    try:
        return [Document.model_validate(entry) for entry in raw]
    except ValidationError as e:
        raise ValueError(f"Invalid document in {path}: {e}") from e


def load_store(path: Path, store: DocumentRepo) -> list[Document]:
    """Save every document from the seed file into store; return the saved documents."""
    saved = [store.save(doc) for doc in load_documents(path)]
    logger.info("Loaded %d document(s) from %s", len(saved), path)
    return saved
