"""Publication builder: chunking plus TOC, search index and glossary."""

import logging

from docsplit.chunking.chunker import DocumentChunker
from docsplit.config import AppConfig
from docsplit.diagnostics import Diagnostics
from docsplit.models.document import Element
from docsplit.models.results import Publication, PublicationOutcome
from docsplit.navigation.toc import TableOfContentsGenerator
from docsplit.retrieval.glossary import GlossaryExtractor
from docsplit.retrieval.index import IndexGenerator

logger = logging.getLogger(__name__)


class PublicationBuilder:
    """Runs the chunker and the publication components selected in ``output``.

    Rendering chunk bodies and persisting files are left to the host.

    Args:
        config: Full application configuration.
    """

    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config or AppConfig()

    async def build_publication(self, document: Element) -> PublicationOutcome:
        """Coroutine facade over :meth:`build`."""
        return self.build(document)

    def build(self, document: Element) -> PublicationOutcome:
        """Chunk a document and generate its publication components.

        Args:
            document: The document tree.

        Returns:
            PublicationOutcome with the publication, or None if chunking failed.
        """
        diagnostics = Diagnostics()
        chunker = DocumentChunker(self._config.chunking, self._config.navigation)
        outcome = chunker.chunk(document, diagnostics)

        if outcome.value is None:
            diagnostics.error("Document chunking failed")
            return PublicationOutcome(value=None, messages=diagnostics.messages)

        chunked = outcome.value
        publication = Publication(chunked=chunked)
        output = self._config.output

        if output.generate_toc:
            generator = TableOfContentsGenerator(
                self._config.toc, base_url=self._config.chunking.base_url
            )
            publication.toc = generator.generate_toc(chunked.chunks, chunked.analysis)
            diagnostics.info(
                "Table of contents generated with "
                f"{publication.toc.metadata.total_entries} entries"
            )

        if output.generate_index:
            publication.search_index = IndexGenerator(self._config.index).generate_index(
                chunked.chunks
            )
            diagnostics.info(
                f"Search index generated with {publication.search_index.word_count} unique words"
            )

        if output.generate_glossary:
            publication.glossary = GlossaryExtractor(self._config.glossary).extract_glossary(
                chunked.chunks
            )
            diagnostics.info(f"Glossary generated with {publication.glossary.count} terms")

        logger.info(
            "Built publication with %d chunks", len(chunked.chunks)
        )
        return PublicationOutcome(value=publication, messages=diagnostics.messages)
