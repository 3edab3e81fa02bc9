"""Value records for authors, documents, and search criteria"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Read a naive datetime as UTC so every timestamp is an absolute instant."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class Author(BaseModel):
    """The author embedded in a document."""
    model_config = ConfigDict(frozen=True)
    id:   Optional[str] = None
    name: Optional[str] = None


class Document(BaseModel):
    """A stored record; id stays None until the store assigns one."""
    model_config = ConfigDict(frozen=True)
    id:      Optional[str] = None
    title:   Optional[str] = None
    content: Optional[str] = None
    author:  Optional[Author] = None
    created: datetime = Field(..., description="Caller-supplied creation time; naive values are UTC")

    @field_validator("created")
    @classmethod
    def created_as_utc(cls, v: datetime) -> datetime:
        return as_utc(v)


class SearchRequest(BaseModel):
    """Search criteria; a None field imposes no constraint."""
    model_config = ConfigDict(frozen=True)
    title_prefixes:    Optional[list[str]] = Field(default=None, description="Any title word starts with one of these")
    contains_contents: Optional[list[str]] = Field(default=None, description="Any content token equals one of these")
    author_ids:        Optional[list[str]] = Field(default=None, description="Author id is one of these")
    created_from:      Optional[datetime] = Field(default=None, description="Exclusive lower bound on created; naive values are UTC")
    created_to:        Optional[datetime] = Field(default=None, description="Exclusive upper bound on created; naive values are UTC")

    @field_validator("created_from", "created_to")
    @classmethod
    def bounds_as_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return as_utc(v)
