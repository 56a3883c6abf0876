"""Document analysis data models."""

from pydantic import BaseModel, ConfigDict, Field

from docsplit.models.document import Element


class HeadingInfo(BaseModel):
    """A heading paragraph found in the document."""

    model_config = ConfigDict(frozen=True)

    level: int
    text: str
    element_id: int | None = None


class LinkInfo(BaseModel):
    """A hyperlink found in the document."""

    href: str | None = None
    text: str = ""
    element_id: int | None = None


class ImageInfo(BaseModel):
    """An image found in the document."""

    model_config = ConfigDict(frozen=True)

    alt_text: str | None = None
    content_type: str | None = None
    element_id: int | None = None


class TableInfo(BaseModel):
    """A table found in the document."""

    model_config = ConfigDict(frozen=True)

    row_count: int = 0
    element_id: int | None = None


class BookmarkInfo(BaseModel):
    """A named bookmark anchor."""

    model_config = ConfigDict(frozen=True)

    name: str
    element_id: int | None = None


class DocumentStructure(BaseModel):
    """Structural flags derived from the heading inventory."""

    model_config = ConfigDict(frozen=True)

    chapter_count: int = 0
    section_count: int = 0
    has_table_of_contents: bool = False
    has_index: bool = False
    has_glossary: bool = False


class Analysis(BaseModel):
    """Inventory of a document's structure, built once per document.

    ``heading_levels`` is a side-table keyed by ``element_id`` so the chunker
    can map a tree node back to its heading metadata in constant time.
    """

    model_config = ConfigDict(frozen=True)

    headings: list[HeadingInfo] = Field(default_factory=list)
    heading_levels: dict[int, HeadingInfo] = Field(default_factory=dict)
    max_heading_level: int = 0
    tables: list[TableInfo] = Field(default_factory=list)
    images: list[ImageInfo] = Field(default_factory=list)
    links: list[LinkInfo] = Field(default_factory=list)
    bookmarks: list[BookmarkInfo] = Field(default_factory=list)
    structure: DocumentStructure = Field(default_factory=DocumentStructure)

    def heading_for(self, element: Element) -> HeadingInfo | None:
        """Return the heading record for ``element``, or None if it is not a heading."""
        if element.element_id is None:
            return None
        return self.heading_levels.get(element.element_id)
