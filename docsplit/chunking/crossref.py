"""Rewires internal hyperlinks across chunk boundaries."""

import logging

from docsplit.config import CrossReferenceMode
from docsplit.models.chunk import Chunk
from docsplit.models.document import Element, ElementType

logger = logging.getLogger(__name__)


def find_bookmarks(element: Element) -> list[str]:
    """Return the names of all bookmarks under ``element`` in document order."""
    return [
        node.name
        for node in element.walk()
        if node.type == ElementType.BOOKMARK_START and node.name
    ]


class CrossReferenceResolver:
    """Resolves ``#anchor`` links to the chunk holding the named bookmark.

    Two lookup modes share one contract:
    - INDEXED: one pass builds ``bookmark name -> chunk``, then O(1) per link.
    - SCAN: each link scans all chunks' content in document order.

    In both modes the first bookmark with a given name in document order wins.
    Links into their own chunk, and links with no matching bookmark, are left
    unresolved.

    Args:
        mode: Lookup mode, INDEXED by default.
    """

    def __init__(self, mode: CrossReferenceMode = CrossReferenceMode.INDEXED) -> None:
        self._mode = mode

    def resolve(self, chunks: list[Chunk]) -> list[Chunk]:
        """Annotate internal links with their target chunk and file.

        Args:
            chunks: Finalized chunks; their links are updated in place.

        Returns:
            The same chunk list.
        """
        by_id = {chunk.id: chunk for chunk in chunks}
        reference_map = (
            self.build_reference_map(chunks)
            if self._mode == CrossReferenceMode.INDEXED
            else None
        )

        resolved = 0
        for chunk in chunks:
            for link in chunk.links:
                if not link.href or not link.href.startswith("#"):
                    continue

                anchor = link.href[1:]
                if reference_map is not None:
                    target_id = reference_map.get(anchor)
                else:
                    target_id = self._scan_for_anchor(chunks, anchor)

                if target_id is None or target_id == chunk.id:
                    continue

                target = by_id[target_id]
                link.target_chunk = target.id
                link.target_file = target.file_name
                link.resolved_href = f"{target.file_name}{link.href}"
                resolved += 1

        logger.debug("Resolved %d cross-chunk references", resolved)
        return chunks

    def build_reference_map(self, chunks: list[Chunk]) -> dict[str, int]:
        """Map each bookmark name to the id of the first chunk containing it."""
        reference_map: dict[str, int] = {}
        for chunk in chunks:
            for element in chunk.content:
                for name in find_bookmarks(element):
                    reference_map.setdefault(name, chunk.id)
        return reference_map

    def _scan_for_anchor(self, chunks: list[Chunk], anchor: str) -> int | None:
        for chunk in chunks:
            for element in chunk.content:
                if anchor in find_bookmarks(element):
                    return chunk.id
        return None
