"""Text extraction and heading detection helpers shared by all components."""

import math
import re

from docsplit.models.chunk import Chunk
from docsplit.models.document import Element, ElementType

# Paragraph style identifiers that mark headings, e.g. "Heading2" or "h3"
HEADING_STYLE_PATTERN = re.compile(r"heading\d+|h\d+", re.IGNORECASE)
WORDS_PER_MINUTE = 200


def heading_level_of(style_id: str | None) -> int | None:
    """Return the heading level encoded in a paragraph style identifier.

    Args:
        style_id: The paragraph's style identifier, if any.

    Returns:
        The first decimal run in the identifier, or None when the style does
        not denote a heading.
    """
    if not style_id or not HEADING_STYLE_PATTERN.fullmatch(style_id):
        return None
    match = re.search(r"\d+", style_id)
    return int(match.group()) if match else 1


def is_heading_paragraph(element: Element) -> bool:
    return (
        element.type == ElementType.PARAGRAPH
        and heading_level_of(element.style_id) is not None
    )


def extract_text(element: Element) -> str:
    """Concatenate the values of all text nodes under ``element``, stripped."""
    parts: list[str] = []

    def collect(node: Element) -> None:
        if node.type == ElementType.TEXT:
            parts.append(node.value or "")
        else:
            for child in node.children:
                collect(child)

    collect(element)
    return "".join(parts).strip()


def chunk_text(chunk: Chunk) -> str:
    """Visible text of a chunk: each top-level element's text joined by spaces."""
    return " ".join(extract_text(element) for element in chunk.content).strip()


def count_words(text: str) -> int:
    return len(text.split())


def reading_time(word_count: int) -> int:
    """Whole-minute reading estimate."""
    return math.ceil(word_count / WORDS_PER_MINUTE)
