"""Document analysis, chunking and cross-reference resolution."""

from docsplit.chunking.analyzer import DocumentAnalyzer
from docsplit.chunking.chunker import DocumentChunker, estimate_element_size
from docsplit.chunking.crossref import CrossReferenceResolver
from docsplit.chunking.text import heading_level_of

__all__ = [
    "CrossReferenceResolver",
    "DocumentAnalyzer",
    "DocumentChunker",
    "estimate_element_size",
    "heading_level_of",
]
