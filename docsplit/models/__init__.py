"""Data models for the docsplit toolkit."""

from docsplit.models.analysis import (
    Analysis,
    BookmarkInfo,
    DocumentStructure,
    HeadingInfo,
    ImageInfo,
    LinkInfo,
    TableInfo,
)
from docsplit.models.chunk import Chunk, ChunkLink, ChunkMetadata
from docsplit.models.document import Document, Element, ElementType
from docsplit.models.markup import MarkupNode
from docsplit.models.navigation import NavigationBundle, NavLink, PrevNext
from docsplit.models.results import (
    ChunkedDocument,
    ChunkingOutcome,
    DocumentMetadata,
    Glossary,
    GlossaryEntry,
    IndexEntry,
    Publication,
    PublicationOutcome,
    SearchIndex,
    TableOfContents,
    TocEntry,
    TocNode,
)

__all__ = [
    "Analysis",
    "BookmarkInfo",
    "Chunk",
    "ChunkLink",
    "ChunkMetadata",
    "ChunkedDocument",
    "ChunkingOutcome",
    "Document",
    "DocumentMetadata",
    "DocumentStructure",
    "Element",
    "ElementType",
    "Glossary",
    "GlossaryEntry",
    "HeadingInfo",
    "ImageInfo",
    "IndexEntry",
    "LinkInfo",
    "MarkupNode",
    "NavLink",
    "NavigationBundle",
    "PrevNext",
    "Publication",
    "PublicationOutcome",
    "SearchIndex",
    "TableInfo",
    "TableOfContents",
    "TocEntry",
    "TocNode",
]
