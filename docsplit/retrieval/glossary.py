"""Pattern-based glossary extraction."""

import logging
import re

from docsplit.chunking.text import chunk_text
from docsplit.config import GlossaryConfig
from docsplit.models.chunk import Chunk
from docsplit.models.results import Glossary, GlossaryEntry

logger = logging.getLogger(__name__)


class GlossaryExtractor:
    """Harvests ``term -> definition`` pairs from sentences like "X is Y.".

    Terms are keyed by their lowercase form. When the same term is matched
    again later (a later pattern, or a later chunk) the later definition
    replaces the earlier one.

    Args:
        config: GlossaryConfig with the definition patterns.
    """

    def __init__(self, config: GlossaryConfig | None = None) -> None:
        self._config = config or GlossaryConfig()
        self._patterns = [
            re.compile(pattern, re.IGNORECASE)
            for pattern in self._config.definition_patterns
        ]

    def extract_glossary(self, chunks: list[Chunk]) -> Glossary:
        """Scan every chunk with every pattern, in order.

        Args:
            chunks: Chunks to scan.

        Returns:
            Glossary with one entry per distinct lowercase term.
        """
        entries: dict[str, GlossaryEntry] = {}

        for chunk in chunks:
            text = chunk_text(chunk)
            for pattern in self._patterns:
                for match in pattern.finditer(text):
                    term, definition = self._parse_definition(match)
                    if not term or not definition:
                        continue
                    entries[term.lower()] = GlossaryEntry(
                        term=term,
                        definition=definition,
                        chunk_id=chunk.id,
                        file_name=chunk.file_name,
                        source=match.group(0),
                    )

        logger.debug("Extracted %d glossary terms", len(entries))
        return Glossary(entries=entries, count=len(entries))

    def _parse_definition(self, match: re.Match[str]) -> tuple[str | None, str | None]:
        if match.re.groups < 2:
            return None, None
        term = (match.group(1) or "").strip()
        definition = (match.group(2) or "").strip()
        return term or None, definition or None
