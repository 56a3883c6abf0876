"""Tests for table of contents generation."""

import pytest

from docsplit.chunking.chunker import DocumentChunker
from docsplit.config import ChunkingConfig, TocConfig
from docsplit.models.chunk import Chunk
from docsplit.models.document import Document, document
from docsplit.models.results import TocEntry, TocNode
from docsplit.navigation.toc import TableOfContentsGenerator, build_nested_list
from tests.helpers import body, heading


@pytest.fixture
def chunks(sample_document: Document) -> list[Chunk]:
    return DocumentChunker(ChunkingConfig()).chunk(sample_document).value.chunks


def _entry(entry_id: int, title: str, level: int) -> TocEntry:
    return TocEntry(
        id=entry_id,
        title=title,
        level=level,
        href=f"#{entry_id}",
        chunk_id=entry_id,
        is_chunk_title=True,
    )


def _shape(nodes: list[TocNode]) -> list:
    return [(node.entry.title, _shape(node.children)) for node in nodes]


# ── Nesting ──────────────────────────────────────────────────────────────────


class TestBuildNestedList:
    def test_siblings_and_children(self) -> None:
        entries = [_entry(1, "A", 1), _entry(2, "B", 2), _entry(3, "C", 2), _entry(4, "D", 1)]
        assert _shape(build_nested_list(entries, 1)) == [
            ("A", [("B", []), ("C", [])]),
            ("D", []),
        ]

    def test_three_levels(self) -> None:
        entries = [_entry(1, "A", 1), _entry(2, "B", 2), _entry(3, "C", 3), _entry(4, "D", 2)]
        assert _shape(build_nested_list(entries, 1)) == [
            ("A", [("B", [("C", [])]), ("D", [])]),
        ]

    def test_skipped_level_nests_under_previous_item(self) -> None:
        entries = [_entry(1, "A", 1), _entry(2, "B", 3), _entry(3, "C", 1)]
        assert _shape(build_nested_list(entries, 1)) == [("A", [("B", [])]), ("C", [])]

    def test_leading_deeper_entry_kept(self) -> None:
        entries = [_entry(1, "Lead", 2), _entry(2, "A", 1)]
        assert _shape(build_nested_list(entries, 1)) == [("Lead", []), ("A", [])]

    def test_shallower_entry_ends_list(self) -> None:
        entries = [_entry(1, "B", 2), _entry(2, "A", 1), _entry(3, "C", 2)]
        assert _shape(build_nested_list(entries, 2)) == [("B", [])]

    def test_empty(self) -> None:
        assert build_nested_list([], 1) == []


# ── Entry extraction ─────────────────────────────────────────────────────────


class TestTocEntries:
    def test_entries_for_sample_document(
        self, chunks: list[Chunk], sample_document: Document
    ) -> None:
        toc = TableOfContentsGenerator().generate_toc(chunks)
        chapter_id = sample_document.children[1].element_id
        section_id = sample_document.children[3].element_id

        assert [(e.id, e.title, e.level, e.is_chunk_title) for e in toc.entries] == [
            (1, "Introduction", 0, True),
            (2, "Chapter 1", 1, True),
            (3, "Chapter 1", 1, False),
            (4, "Section 1.1", 2, False),
            (5, "Chapter 2", 1, True),
            (6, "Chapter 2", 1, False),
            (7, "Deep heading", 3, False),
        ]
        assert toc.entries[1].href == "./chunk-1.html"
        assert toc.entries[2].href == f"./chunk-1.html#heading-{chapter_id}"
        assert toc.entries[3].href == f"./chunk-1.html#heading-{section_id}"
        assert toc.entries[3].chunk_id == 1

    def test_metadata(self, chunks: list[Chunk]) -> None:
        toc = TableOfContentsGenerator().generate_toc(chunks)
        assert toc.metadata.total_entries == 7
        assert toc.metadata.max_depth == 3

    def test_max_depth_filters_sub_headings(self, chunks: list[Chunk]) -> None:
        toc = TableOfContentsGenerator(TocConfig(max_depth=2)).generate_toc(chunks)
        assert "Deep heading" not in [e.title for e in toc.entries]
        # chunk titles are never filtered
        assert "Introduction" in [e.title for e in toc.entries]

    def test_base_url_prefix(self, chunks: list[Chunk]) -> None:
        toc = TableOfContentsGenerator(base_url="/book/").generate_toc(chunks)
        assert toc.entries[0].href == "/book/chunk-0.html"

    def test_every_chunk_heading_is_listed(self) -> None:
        doc = document([heading(3, "Deep"), body("a"), heading(2, "Shallower")])
        chunks = DocumentChunker(ChunkingConfig()).chunk(doc).value.chunks
        toc = TableOfContentsGenerator().generate_toc(chunks)
        assert [(e.title, e.level, e.is_chunk_title) for e in toc.entries] == [
            ("Shallower", 2, True),
            ("Deep", 3, False),
            ("Shallower", 2, False),
        ]
        assert toc.metadata.total_entries == 1 + len(chunks[0].headings)


# ── Outline and rendering ────────────────────────────────────────────────────


class TestTocOutline:
    def test_outline_for_sample_document(self, chunks: list[Chunk]) -> None:
        toc = TableOfContentsGenerator().generate_toc(chunks)
        assert _shape(toc.outline) == [
            ("Introduction", []),
            ("Chapter 1", []),
            ("Chapter 1", [("Section 1.1", [])]),
            ("Chapter 2", []),
            ("Chapter 2", [("Deep heading", [])]),
        ]

    def test_outline_keeps_every_entry(self, chunks: list[Chunk]) -> None:
        toc = TableOfContentsGenerator().generate_toc(chunks)

        def count(nodes: list[TocNode]) -> int:
            return sum(1 + count(node.children) for node in nodes)

        assert count(toc.outline) == len(toc.entries)

    def test_rendered_tree(self, chunks: list[Chunk]) -> None:
        tree = TableOfContentsGenerator().generate_toc(chunks).rendered_tree

        assert tree.tag == "div"
        assert tree.attributes["class"] == "table-of-contents"
        assert tree.find_all("h2")[0].text_content() == "Table of Contents"
        assert [ol.attributes["class"] for ol in tree.find_all("ol")] == [
            "toc-level-1",
            "toc-level-2",
            "toc-level-3",
        ]
        links = tree.find_all("a")
        assert [a.text_content() for a in links] == [
            "Introduction",
            "Chapter 1",
            "Chapter 1",
            "Section 1.1",
            "Chapter 2",
            "Chapter 2",
            "Deep heading",
        ]
        assert links[2].attributes["class"] == "toc-link sub-heading"
        assert links[1].attributes["class"] == "toc-link chunk-title"

    def test_numbering_and_collapsible(self, chunks: list[Chunk]) -> None:
        config = TocConfig(numbering=True, collapsible=True)
        tree = TableOfContentsGenerator(config).generate_toc(chunks).rendered_tree

        assert tree.attributes["class"] == "table-of-contents collapsible"
        assert tree.find_all("a")[0].text_content() == "1. Introduction"

    def test_empty_chunk_list(self) -> None:
        toc = TableOfContentsGenerator().generate_toc([])
        assert toc.entries == []
        assert toc.outline == []
        assert toc.metadata.max_depth == 0
        assert toc.rendered_tree.text_content() == "No table of contents available"
