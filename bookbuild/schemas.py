"""Pydantic models for the export inputs and the emitted book data."""

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field


# ---- Export inputs ----

class Page(BaseModel):
    """
    One physical page. Also used for cleaned pages (same shape).

    vol and page must be present but are passed through as exported
    (int, str, null, ...).
    """
    text: str
    vol: Any
    page: Any


class RawCorpus(BaseModel):
    pages: List[Page]


class RawHeading(BaseModel):
    """TOC entry as exported; ``page`` is 1-based. ``level`` is copied as-is."""
    title: str
    level: Any
    page: int


class ExportMeta(BaseModel):
    name: str


class ExportIndexes(BaseModel):
    volumes: List[Any]
    headings: List[RawHeading]


class IndexSource(BaseModel):
    meta: ExportMeta
    indexes: ExportIndexes


# ---- Emitted book data ----

class Heading(BaseModel):
    """TOC entry with a 0-based page index into the page sequence."""
    title: str
    level: Any
    page: int = Field(..., ge=0)


class BookIndex(BaseModel):
    """Contents of index.json. Dump with ``by_alias=True`` for the client keys."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    author: str
    volumes: int = Field(..., ge=0)
    total_pages: int = Field(..., alias="totalPages", ge=1)
    chunk_size: int = Field(..., alias="chunkSize", ge=1)
    total_chunks: int = Field(..., alias="totalChunks", ge=1)
    headings: List[Heading] = Field(default_factory=list)
