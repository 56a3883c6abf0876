"""Shared fixtures."""

import pytest

from docsplit.models.document import Document, document
from tests.helpers import body, heading


@pytest.fixture
def sample_document() -> Document:
    """Preface, two chapters, a level-2 section and a trailing level-3 heading."""
    return document(
        [
            body("Preface text before any heading."),
            heading(1, "Chapter 1"),
            body("Chapter one body."),
            heading(2, "Section 1.1"),
            body("Section body."),
            heading(1, "Chapter 2"),
            body("Chapter two body."),
            heading(3, "Deep heading"),
        ]
    )
