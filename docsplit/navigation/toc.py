"""Table of contents generation."""

import logging

from docsplit.config import TocConfig
from docsplit.models import markup
from docsplit.models.analysis import Analysis
from docsplit.models.chunk import Chunk
from docsplit.models.markup import MarkupNode
from docsplit.models.results import TableOfContents, TocEntry, TocMetadata, TocNode

logger = logging.getLogger(__name__)


def heading_anchor(element_id: int | None) -> str:
    """Fragment identifier the renderer gives a heading element."""
    return f"heading-{element_id}"


def build_nested_list(entries: list[TocEntry], min_level: int) -> list[TocNode]:
    """Rebuild an outline from a flat, depth-annotated pre-order sequence.

    An entry at ``min_level`` becomes an item, and the contiguous run of
    following entries deeper than it becomes its children. The children are
    nested starting at their shallowest level, which is ``min_level + 1`` for
    a well-formed outline; a skipped level (H1 then H3) still nests under the
    preceding item. An entry shallower than ``min_level`` ends the list. An
    entry deeper than ``min_level`` with no item to attach to (a document
    opening with H2 before its first H1) is kept as an item at this depth.

    Args:
        entries: Flat TOC entries in document order.
        min_level: Level of the items at this depth.

    Returns:
        The items at ``min_level`` with their nested children.
    """
    nodes: list[TocNode] = []
    i = 0

    while i < len(entries):
        entry = entries[i]

        if entry.level < min_level:
            break

        j = i + 1
        while j < len(entries) and entries[j].level > entry.level:
            j += 1
        children = entries[i + 1:j]
        nodes.append(
            TocNode(
                entry=entry,
                children=build_nested_list(
                    children, min(child.level for child in children)
                )
                if children
                else [],
            )
        )
        i = j

    return nodes


class TableOfContentsGenerator:
    """Flattens chunks and their sub-headings into entries and an outline.

    Args:
        config: TocConfig with depth, numbering and collapsible settings.
        base_url: Prefix for every generated href.
    """

    def __init__(self, config: TocConfig | None = None, base_url: str = "./") -> None:
        self._config = config or TocConfig()
        self._base_url = base_url

    def generate_toc(
        self, chunks: list[Chunk], analysis: Analysis | None = None
    ) -> TableOfContents:
        """Generate the table of contents for a chunk list.

        Args:
            chunks: Finalized chunks in emission order.
            analysis: Document analysis (unused by the current layout).

        Returns:
            TableOfContents with flat entries, nested outline and node tree.
        """
        entries = self.extract_entries(chunks)

        # The introduction chunk sits at level 0; nest it alongside top-level chapters
        outline_entries = [
            e.model_copy(update={"level": 1}) if e.level < 1 else e for e in entries
        ]
        top_level = min((e.level for e in outline_entries), default=1)
        outline = build_nested_list(outline_entries, top_level)

        logger.debug("Generated TOC with %d entries", len(entries))

        return TableOfContents(
            entries=entries,
            outline=outline,
            rendered_tree=self._render(outline, top_level),
            metadata=TocMetadata(
                total_entries=len(entries),
                max_depth=max((e.level for e in entries), default=0),
            ),
        )

    def extract_entries(self, chunks: list[Chunk]) -> list[TocEntry]:
        """One entry per chunk, followed by every heading in it up to ``max_depth``.

        The heading that opened a chunk is listed again as its first sub-heading,
        pointing at the heading anchor rather than the top of the file.
        """
        entries: list[TocEntry] = []
        entry_id = 1

        for chunk in chunks:
            chunk_href = f"{self._base_url}{chunk.file_name}"
            entries.append(
                TocEntry(
                    id=entry_id,
                    title=chunk.title,
                    level=chunk.level,
                    href=chunk_href,
                    chunk_id=chunk.id,
                    is_chunk_title=True,
                )
            )
            entry_id += 1

            for heading in chunk.headings:
                if heading.level > self._config.max_depth:
                    continue
                entries.append(
                    TocEntry(
                        id=entry_id,
                        title=heading.text,
                        level=heading.level,
                        href=f"{chunk_href}#{heading_anchor(heading.element_id)}",
                        chunk_id=chunk.id,
                        is_chunk_title=False,
                    )
                )
                entry_id += 1

        return entries

    def _render(self, outline: list[TocNode], top_level: int) -> MarkupNode:
        if not outline:
            return markup.text("No table of contents available")

        css_class = "table-of-contents"
        if self._config.collapsible:
            css_class += " collapsible"

        return markup.element(
            "div",
            {"class": css_class},
            [
                markup.element("h2", {}, [markup.text("Table of Contents")]),
                self._render_list(outline, top_level),
            ],
        )

    def _render_list(self, nodes: list[TocNode], level: int) -> MarkupNode:
        items = []
        for node in nodes:
            entry = node.entry
            link_text = f"{entry.id}. {entry.title}" if self._config.numbering else entry.title
            link_class = "toc-link " + ("chunk-title" if entry.is_chunk_title else "sub-heading")
            children = [
                markup.element(
                    "a", {"href": entry.href, "class": link_class}, [markup.text(link_text)]
                )
            ]
            if node.children:
                child_level = min(child.entry.level for child in node.children)
                children.append(self._render_list(node.children, child_level))
            items.append(
                markup.element("li", {"class": f"toc-entry level-{entry.level}"}, children)
            )

        return markup.element("ol", {"class": f"toc-level-{level}"}, items)
