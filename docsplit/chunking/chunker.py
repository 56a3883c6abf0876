"""Strategy-driven document chunker."""

import logging

from docsplit.chunking.analyzer import DocumentAnalyzer, link_href
from docsplit.chunking.crossref import CrossReferenceResolver
from docsplit.chunking.text import (
    chunk_text,
    count_words,
    extract_text,
    is_heading_paragraph,
    reading_time,
)
from docsplit.config import ChunkingConfig, ChunkingStrategy, NavigationConfig
from docsplit.diagnostics import Diagnostics
from docsplit.models.analysis import Analysis, HeadingInfo, ImageInfo, TableInfo
from docsplit.models.chunk import Chunk, ChunkLink, ChunkMetadata
from docsplit.models.document import Element, ElementType
from docsplit.models.results import ChunkedDocument, ChunkingOutcome, DocumentMetadata
from docsplit.navigation.builder import NavigationBuilder

logger = logging.getLogger(__name__)

# Extra weight per element kind for size-based chunking, on top of text length
TABLE_WEIGHT = 500
IMAGE_WEIGHT = 100
HEADING_WEIGHT = 50

INTRO_TITLE = "Introduction"
FALLBACK_TITLE = "Document"


def estimate_element_size(element: Element) -> int:
    """Estimate the weight of a top-level element for size-based chunking.

    Args:
        element: The element to weigh.

    Returns:
        Plain-text length plus a surcharge for tables, images and headings.
    """
    size = len(extract_text(element))
    if element.type == ElementType.TABLE:
        size += TABLE_WEIGHT
    elif element.type == ElementType.IMAGE:
        size += IMAGE_WEIGHT
    elif is_heading_paragraph(element):
        size += HEADING_WEIGHT
    return size


class DocumentChunker:
    """Partitions a document's top-level children into chunks.

    Strategies:
    1. BY_HEADING_LEVEL: split on level-1 headings; headings up to
       ``max_level`` may retitle the open chunk, deeper ones are content.
    2. BY_CHAPTER: split on level-1 headings; every heading may retitle.
    3. BY_SECTION: BY_HEADING_LEVEL with the depth limit fixed at 2.
    4. BY_SIZE: split whenever the accumulated weight would exceed
       ``chunk_size_limit``.
    5. CUSTOM: not implemented, falls back to BY_HEADING_LEVEL.

    Every strategy preserves the partition law: concatenating all chunks'
    content in order reproduces the document's children exactly once each.

    Args:
        config: ChunkingConfig with strategy, depth, size and file naming settings.
        navigation_config: Options for the navigation bundle built after chunking.
    """

    def __init__(
        self,
        config: ChunkingConfig,
        navigation_config: NavigationConfig | None = None,
    ) -> None:
        self._config = config
        self._navigation_config = navigation_config or NavigationConfig()
        self._analyzer = DocumentAnalyzer()

    async def chunk_document(
        self, document: Element, diagnostics: Diagnostics | None = None
    ) -> ChunkingOutcome:
        """Coroutine facade over :meth:`chunk` for async pipelines.

        Never suspends; the computation is fully synchronous.
        """
        return self.chunk(document, diagnostics)

    def chunk(
        self, document: Element, diagnostics: Diagnostics | None = None
    ) -> ChunkingOutcome:
        """Split a document into chunks and derive navigation.

        Failures never propagate: they are logged and reported as an error
        diagnostic, and the outcome carries no value.

        Args:
            document: The document tree to chunk.
            diagnostics: Optional caller-owned collector to append messages to.

        Returns:
            ChunkingOutcome with the chunked document (or None) and all messages.
        """
        diagnostics = diagnostics if diagnostics is not None else Diagnostics()

        try:
            chunked = self._chunk(document, diagnostics)
        except Exception as exc:
            logger.exception("Document chunking failed")
            diagnostics.error(f"Document chunking failed: {exc}")
            return ChunkingOutcome(value=None, messages=diagnostics.messages)

        return ChunkingOutcome(value=chunked, messages=diagnostics.messages)

    def _chunk(self, document: Element, diagnostics: Diagnostics) -> ChunkedDocument:
        analysis = self._analyzer.analyze(document)
        chunks = self._generate_chunks(document, analysis, diagnostics)

        if self._config.preserve_links:
            CrossReferenceResolver(mode=self._config.crossref_mode).resolve(chunks)

        navigation = None
        if self._config.generate_navigation:
            builder = NavigationBuilder(
                config=self._navigation_config, base_url=self._config.base_url
            )
            navigation = builder.build_navigation(chunks, analysis)

        logger.info(
            "Chunked document into %d chunks using %s",
            len(chunks),
            self._config.strategy.value,
        )

        return ChunkedDocument(
            chunks=chunks,
            navigation=navigation,
            analysis=analysis,
            metadata=self._document_metadata(document, analysis, len(chunks)),
        )

    def _generate_chunks(
        self, document: Element, analysis: Analysis, diagnostics: Diagnostics
    ) -> list[Chunk]:
        """Dispatch to the configured strategy.

        Args:
            document: The document tree.
            analysis: Its analysis.
            diagnostics: Collector for fallback warnings.

        Returns:
            Finalized chunks in emission order.
        """
        strategy = self._config.strategy
        children = document.children

        if strategy == ChunkingStrategy.BY_CHAPTER:
            chunks = self._sweep_headings(children, analysis, max_level=None)
        elif strategy == ChunkingStrategy.BY_SECTION:
            chunks = self._sweep_headings(children, analysis, max_level=2)
        elif strategy == ChunkingStrategy.BY_SIZE:
            if self._config.chunk_size_limit is None:
                logger.warning("Size-based chunking without chunk_size_limit")
                diagnostics.warning("Size-based chunking requires chunk_size_limit option")
                chunks = self._sweep_headings(
                    children, analysis, max_level=self._config.max_level
                )
            else:
                chunks = self._chunk_by_size(
                    children, analysis, self._config.chunk_size_limit
                )
        elif strategy == ChunkingStrategy.CUSTOM:
            logger.warning("Custom chunking requested but not implemented")
            diagnostics.warning(
                "Custom chunking strategy not implemented, falling back to heading-based"
            )
            chunks = self._sweep_headings(
                children, analysis, max_level=self._config.max_level
            )
        else:
            chunks = self._sweep_headings(
                children, analysis, max_level=self._config.max_level
            )

        # Ensure we have at least one chunk
        if not chunks:
            chunks = [self._new_chunk(1, FALLBACK_TITLE, level=1)]
            chunks[0].content.extend(children)

        return [self._finalize_chunk(chunk, analysis) for chunk in chunks]

    def _sweep_headings(
        self,
        children: list[Element],
        analysis: Analysis,
        max_level: int | None,
    ) -> list[Chunk]:
        """Single left-to-right sweep starting a chunk at each level-1 heading.

        Any heading also opens a chunk when none is open yet. Content before
        the first heading goes into one synthesized introduction chunk.

        Args:
            children: Top-level document elements.
            analysis: Heading side-table source.
            max_level: Deepest heading level that may retitle the open chunk;
                None means no limit (chapter mode).

        Returns:
            Unfinalized chunks in document order.
        """
        chunks: list[Chunk] = []
        current: Chunk | None = None
        next_id = 1

        for element in children:
            heading = analysis.heading_for(element)

            if heading is None:
                if current is None:
                    current = self._new_intro_chunk()
                current.content.append(element)
                continue

            if heading.level == 1 or current is None:
                if current is not None:
                    chunks.append(current)
                current = self._new_chunk(
                    next_id, heading.text, heading.level, heading.element_id
                )
                next_id += 1
            elif max_level is None or heading.level <= max_level:
                self._update_title(current, heading)

            current.content.append(element)

        if current is not None:
            chunks.append(current)

        return chunks

    def _chunk_by_size(
        self, children: list[Element], analysis: Analysis, limit: int
    ) -> list[Chunk]:
        """Accumulate elements until the next one would exceed ``limit``.

        A chunk always holds at least one element, so an element heavier than
        the limit gets a chunk of its own.

        Args:
            children: Top-level document elements.
            analysis: Heading side-table source, used for titles.
            limit: Maximum accumulated weight per chunk.

        Returns:
            Unfinalized chunks in document order.
        """
        chunks: list[Chunk] = []
        current: Chunk | None = None
        current_size = 0
        next_id = 1

        for element in children:
            element_size = estimate_element_size(element)

            if current is None or current_size + element_size > limit:
                if current is not None:
                    chunks.append(current)

                heading = analysis.heading_for(element)
                if heading is not None:
                    current = self._new_chunk(
                        next_id, heading.text, 1, heading.element_id
                    )
                else:
                    current = self._new_chunk(next_id, f"Section {next_id}", 1)
                next_id += 1
                current_size = 0

            current.content.append(element)
            current_size += element_size

        if current is not None:
            chunks.append(current)

        return chunks

    def _file_name(self, chunk_id: int) -> str:
        return f"{self._config.file_prefix}{chunk_id}{self._config.file_suffix}"

    def _new_chunk(
        self,
        chunk_id: int,
        title: str,
        level: int,
        heading_element_id: int | None = None,
    ) -> Chunk:
        return Chunk(
            id=chunk_id,
            title=title or f"Section {chunk_id}",
            level=level,
            file_name=self._file_name(chunk_id),
            heading_element_id=heading_element_id,
        )

    def _new_intro_chunk(self) -> Chunk:
        chunk = self._new_chunk(0, INTRO_TITLE, level=0)
        chunk.is_intro = True
        return chunk

    def _update_title(self, chunk: Chunk, heading: HeadingInfo) -> None:
        """Retitle the chunk if the heading outranks its current level."""
        if not chunk.title or heading.level < chunk.level:
            chunk.title = heading.text
            chunk.level = heading.level
            chunk.heading_element_id = heading.element_id

    def _finalize_chunk(self, chunk: Chunk, analysis: Analysis) -> Chunk:
        """Extract sub-element summaries and compute metadata.

        Heading summaries come from the analysis side-table, so a chunk and the
        analysis always agree on a heading's level and text.

        Args:
            chunk: Chunk whose content is complete.
            analysis: Heading side-table source.

        Returns:
            The same chunk, updated in place.
        """
        for top in chunk.content:
            for element in top.walk():
                if element.type == ElementType.PARAGRAPH:
                    heading = analysis.heading_for(element)
                    if heading is not None:
                        chunk.headings.append(heading)
                elif element.type == ElementType.HYPERLINK:
                    chunk.links.append(
                        ChunkLink(
                            href=link_href(element),
                            text=extract_text(element),
                            element_id=element.element_id,
                        )
                    )
                elif element.type == ElementType.IMAGE:
                    chunk.images.append(
                        ImageInfo(
                            alt_text=element.alt_text,
                            content_type=element.content_type,
                            element_id=element.element_id,
                        )
                    )
                elif element.type == ElementType.TABLE:
                    chunk.tables.append(
                        TableInfo(
                            row_count=len(element.children),
                            element_id=element.element_id,
                        )
                    )

        if self._config.include_metadata:
            text = chunk_text(chunk)
            word_count = count_words(text)
            chunk.metadata = ChunkMetadata(
                word_count=word_count,
                reading_time=reading_time(word_count),
                character_count=len(text),
                heading_count=len(chunk.headings),
                link_count=len(chunk.links),
                image_count=len(chunk.images),
                table_count=len(chunk.tables),
                created=chunk.metadata.created,
            )

        return chunk

    def _document_metadata(
        self, document: Element, analysis: Analysis, chunk_count: int
    ) -> DocumentMetadata:
        all_text = " ".join(extract_text(child) for child in document.children).strip()
        word_count = count_words(all_text)
        return DocumentMetadata(
            total_word_count=word_count,
            total_character_count=len(all_text),
            chunk_count=chunk_count,
            heading_count=len(analysis.headings),
            table_count=len(analysis.tables),
            image_count=len(analysis.images),
            link_count=len(analysis.links),
            estimated_reading_time=reading_time(word_count),
            structure_depth=analysis.max_heading_level,
        )
