"""Chunk data model."""

from datetime import datetime

from pydantic import BaseModel, Field

from docsplit.models.analysis import HeadingInfo, ImageInfo, LinkInfo, TableInfo
from docsplit.models.document import Element


class ChunkLink(LinkInfo):
    """A hyperlink inside a chunk.

    ``target_chunk``/``target_file`` stay unset until cross-reference
    resolution runs, and remain unset for links into the same chunk.
    """

    target_chunk: int | None = None
    target_file: str | None = None
    resolved_href: str | None = None


class ChunkMetadata(BaseModel):
    """Content-size heuristics for a chunk."""

    word_count: int = 0
    reading_time: int = 0  # minutes, at 200 words per minute
    character_count: int = 0
    heading_count: int = 0
    link_count: int = 0
    image_count: int = 0
    table_count: int = 0
    created: datetime = Field(default_factory=datetime.now)


class Chunk(BaseModel):
    """A contiguous slice of a document's top-level content.

    ``content`` holds references to the document's own top-level elements; across
    all chunks of a result every top-level element appears exactly once.
    """

    id: int
    title: str
    level: int = 1
    content: list[Element] = Field(default_factory=list)
    file_name: str
    headings: list[HeadingInfo] = Field(default_factory=list)
    links: list[ChunkLink] = Field(default_factory=list)
    images: list[ImageInfo] = Field(default_factory=list)
    tables: list[TableInfo] = Field(default_factory=list)
    metadata: ChunkMetadata = Field(default_factory=ChunkMetadata)
    is_intro: bool = False
    heading_element_id: int | None = None  # heading that opened or titled the chunk
