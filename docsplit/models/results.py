"""Result data models for chunking and the derived publication artifacts."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from docsplit.diagnostics import Diagnostic
from docsplit.models.analysis import Analysis
from docsplit.models.chunk import Chunk
from docsplit.models.markup import MarkupNode
from docsplit.models.navigation import NavigationBundle


class DocumentMetadata(BaseModel):
    """Whole-document statistics."""

    total_word_count: int = 0
    total_character_count: int = 0
    chunk_count: int = 0
    heading_count: int = 0
    table_count: int = 0
    image_count: int = 0
    link_count: int = 0
    estimated_reading_time: int = 0
    structure_depth: int = 0
    generated: datetime = Field(default_factory=datetime.now)


class ChunkedDocument(BaseModel):
    """Chunks plus the artifacts derived while chunking."""

    chunks: list[Chunk] = Field(default_factory=list)
    navigation: NavigationBundle | None = None
    analysis: Analysis
    metadata: DocumentMetadata


class ChunkingOutcome(BaseModel):
    """Chunking result; ``value`` is None when chunking failed."""

    value: ChunkedDocument | None = None
    messages: list[Diagnostic] = Field(default_factory=list)


# ── Table of contents ────────────────────────────────────────────────────────


class TocEntry(BaseModel):
    """A flat, leveled TOC record (chunk title or sub-heading)."""

    id: int
    title: str
    level: int = Field(ge=0)
    href: str
    chunk_id: int
    is_chunk_title: bool


class TocNode(BaseModel):
    """An outline item reconstructed from the flat entry list."""

    entry: TocEntry
    children: list[TocNode] = Field(default_factory=list)


class TocMetadata(BaseModel):
    total_entries: int = 0
    max_depth: int = 0
    generated: datetime = Field(default_factory=datetime.now)


class TableOfContents(BaseModel):
    entries: list[TocEntry] = Field(default_factory=list)
    outline: list[TocNode] = Field(default_factory=list)
    rendered_tree: MarkupNode
    metadata: TocMetadata = Field(default_factory=TocMetadata)


# ── Search index ─────────────────────────────────────────────────────────────


class IndexEntry(BaseModel):
    """One occurrence of a word in a chunk."""

    chunk_id: int
    file_name: str
    title: str
    context: str


class SearchIndex(BaseModel):
    index: dict[str, list[IndexEntry]] = Field(default_factory=dict)
    word_count: int = 0  # distinct indexed words
    generated: datetime = Field(default_factory=datetime.now)


# ── Glossary ─────────────────────────────────────────────────────────────────


class GlossaryEntry(BaseModel):
    term: str
    definition: str
    chunk_id: int
    file_name: str
    source: str  # the full matched sentence


class Glossary(BaseModel):
    entries: dict[str, GlossaryEntry] = Field(default_factory=dict)
    count: int = 0
    generated: datetime = Field(default_factory=datetime.now)


# ── Publication ──────────────────────────────────────────────────────────────


class Publication(BaseModel):
    """A chunked document plus its optional publication components."""

    chunked: ChunkedDocument
    toc: TableOfContents | None = None
    search_index: SearchIndex | None = None
    glossary: Glossary | None = None


class PublicationOutcome(BaseModel):
    value: Publication | None = None
    messages: list[Diagnostic] = Field(default_factory=list)
