"""Word-level inverted index over chunk text."""

import logging
import re

from docsplit.chunking.text import chunk_text
from docsplit.config import IndexConfig
from docsplit.models.chunk import Chunk
from docsplit.models.results import IndexEntry, SearchIndex

logger = logging.getLogger(__name__)

# Runs of word characters; everything else separates tokens
WORD_PATTERN = re.compile(r"\w+")
CONTEXT_RADIUS = 50


class IndexGenerator:
    """Builds ``word -> occurrences`` over the visible text of each chunk.

    Every kept token occurrence adds one entry, so a word appearing twice in
    a chunk has two entries for that chunk. All entries for a word within one
    chunk share the context taken around its first occurrence.

    Args:
        config: IndexConfig with the minimum word length and stop words.
    """

    def __init__(self, config: IndexConfig | None = None) -> None:
        self._config = config or IndexConfig()
        self._exclude = set(self._config.exclude_words)

    def generate_index(self, chunks: list[Chunk]) -> SearchIndex:
        """Index every chunk in order.

        Each chunk's text is tokenized once; contexts are computed once per
        distinct word and chunk.

        Args:
            chunks: Chunks to index.

        Returns:
            SearchIndex whose ``word_count`` is the number of distinct words.
        """
        index: dict[str, list[IndexEntry]] = {}

        for chunk in chunks:
            text = chunk_text(chunk)
            contexts: dict[str, str] = {}
            for word, start, end in self._tokens(text):
                if word not in contexts:
                    contexts[word] = context_window(text, start, end)
                index.setdefault(word, []).append(
                    IndexEntry(
                        chunk_id=chunk.id,
                        file_name=chunk.file_name,
                        title=chunk.title,
                        context=contexts[word],
                    )
                )

        logger.debug("Indexed %d distinct words across %d chunks", len(index), len(chunks))
        return SearchIndex(index=index, word_count=len(index))

    def extract_words(self, text: str) -> list[str]:
        """Lowercase tokens with short and stop words dropped, in text order."""
        return [word for word, _, _ in self._tokens(text)]

    def _tokens(self, text: str) -> list[tuple[str, int, int]]:
        tokens = []
        for match in WORD_PATTERN.finditer(text):
            word = match.group().lower()
            if len(word) >= self._config.min_word_length and word not in self._exclude:
                tokens.append((word, match.start(), match.end()))
        return tokens


def context_window(text: str, start: int, end: int) -> str:
    """``text[start:end]`` widened by ``CONTEXT_RADIUS`` on each side, with ellipses."""
    window_start = max(0, start - CONTEXT_RADIUS)
    window_end = min(len(text), end + CONTEXT_RADIUS)
    return f"...{text[window_start:window_end]}..."
