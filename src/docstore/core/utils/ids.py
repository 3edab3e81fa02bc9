"""Identifier generation for newly saved documents"""

from uuid import uuid4


def new_id() -> str:
    """Return a random UUID4 string."""
    return str(uuid4())
