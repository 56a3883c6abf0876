"""Single-pass structural inventory of a document tree."""

import logging

from docsplit.chunking.text import extract_text, heading_level_of
from docsplit.models.analysis import (
    Analysis,
    BookmarkInfo,
    DocumentStructure,
    HeadingInfo,
    ImageInfo,
    LinkInfo,
    TableInfo,
)
from docsplit.models.document import (
    Element,
    ElementType,
    assign_element_ids,
    has_element_ids,
)

logger = logging.getLogger(__name__)


def link_href(element: Element) -> str | None:
    """Return a hyperlink's target, mapping a bare anchor to ``#anchor``."""
    if element.href:
        return element.href
    if element.anchor:
        return f"#{element.anchor}"
    return None


class DocumentAnalyzer:
    """Inventories headings, tables, images, links and bookmarks.

    Performs one depth-first traversal once element ids are consistent. Nested headings (e.g. inside table
    cells) are recorded too, since the style identifier alone decides whether
    a paragraph is a heading.
    """

    def analyze(self, document: Element) -> Analysis:
        """Analyze a document tree.

        Elements with a missing or duplicated ``element_id`` cause the whole
        tree to be renumbered in pre-order, so the heading side-table always
        matches the tree being chunked.

        Args:
            document: Root of the tree, normally a ``Document``.

        Returns:
            An immutable Analysis. An empty document yields an empty Analysis.
        """
        if not has_element_ids(document):
            logger.debug("Renumbering element ids before analysis")
            assign_element_ids(document)

        headings: list[HeadingInfo] = []
        tables: list[TableInfo] = []
        images: list[ImageInfo] = []
        links: list[LinkInfo] = []
        bookmarks: list[BookmarkInfo] = []

        for element in document.walk():
            if element.type == ElementType.PARAGRAPH:
                level = heading_level_of(element.style_id)
                if level is not None:
                    headings.append(
                        HeadingInfo(
                            level=level,
                            text=extract_text(element),
                            element_id=element.element_id,
                        )
                    )
            elif element.type == ElementType.TABLE:
                tables.append(
                    TableInfo(row_count=len(element.children), element_id=element.element_id)
                )
            elif element.type == ElementType.IMAGE:
                images.append(
                    ImageInfo(
                        alt_text=element.alt_text,
                        content_type=element.content_type,
                        element_id=element.element_id,
                    )
                )
            elif element.type == ElementType.HYPERLINK:
                links.append(
                    LinkInfo(
                        href=link_href(element),
                        text=extract_text(element),
                        element_id=element.element_id,
                    )
                )
            elif element.type == ElementType.BOOKMARK_START and element.name:
                bookmarks.append(
                    BookmarkInfo(name=element.name, element_id=element.element_id)
                )

        heading_levels = {
            h.element_id: h for h in headings if h.element_id is not None
        }

        logger.debug(
            "Analyzed document: %d headings, %d tables, %d images, %d links",
            len(headings),
            len(tables),
            len(images),
            len(links),
        )

        return Analysis(
            headings=headings,
            heading_levels=heading_levels,
            max_heading_level=max((h.level for h in headings), default=0),
            tables=tables,
            images=images,
            links=links,
            bookmarks=bookmarks,
            structure=self._analyze_structure(headings),
        )

    def _analyze_structure(self, headings: list[HeadingInfo]) -> DocumentStructure:
        """Derive chapter/section counts and well-known section flags.

        Args:
            headings: All headings in document order.

        Returns:
            DocumentStructure with counts and flags populated.
        """
        has_toc = has_index = has_glossary = False
        for heading in headings:
            title = heading.text.lower()
            if "contents" in title:  # also covers "table of contents"
                has_toc = True
            elif "index" in title:
                has_index = True
            elif "glossary" in title:
                has_glossary = True

        return DocumentStructure(
            chapter_count=sum(1 for h in headings if h.level == 1),
            section_count=sum(1 for h in headings if h.level == 2),
            has_table_of_contents=has_toc,
            has_index=has_index,
            has_glossary=has_glossary,
        )
