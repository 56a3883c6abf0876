"""Search index and glossary generation."""

from docsplit.retrieval.glossary import GlossaryExtractor
from docsplit.retrieval.index import IndexGenerator

__all__ = ["GlossaryExtractor", "IndexGenerator"]
