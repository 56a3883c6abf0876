"""Tests for the search index generator."""

import pytest

from docsplit.config import IndexConfig
from docsplit.retrieval import index as index_module
from docsplit.retrieval.index import IndexGenerator, context_window
from tests.helpers import make_chunk


@pytest.fixture
def generator() -> IndexGenerator:
    return IndexGenerator()


class TestExtractWords:
    def test_lowercases_and_strips_punctuation(self, generator: IndexGenerator) -> None:
        assert generator.extract_words("Hello, World! It's") == ["hello", "world"]

    def test_drops_stop_words_and_short_words(self, generator: IndexGenerator) -> None:
        assert generator.extract_words("The cat and an ox with the dog") == ["cat", "dog"]

    def test_unicode_letters_are_word_characters(self, generator: IndexGenerator) -> None:
        assert generator.extract_words("Café résumé") == ["café", "résumé"]

    def test_custom_config(self) -> None:
        generator = IndexGenerator(IndexConfig(min_word_length=5, exclude_words=["large"]))
        assert generator.extract_words("small large bigger") == ["small", "bigger"]


class TestGenerateIndex:
    def test_one_entry_per_occurrence(self, generator: IndexGenerator) -> None:
        chunk = make_chunk(
            1, "Programming involves writing code using various programming languages"
        )
        search_index = generator.generate_index([chunk])

        assert len(search_index.index["programming"]) == 2
        assert len(search_index.index["code"]) == 1
        assert search_index.word_count == 7
        assert "the" not in search_index.index
        assert "and" not in search_index.index

    def test_entry_fields(self, generator: IndexGenerator) -> None:
        chunks = [
            make_chunk(1, "Alpha topic", title="First"),
            make_chunk(2, "Another alpha mention", title="Second"),
        ]
        entries = generator.generate_index(chunks).index["alpha"]

        assert [(e.chunk_id, e.file_name, e.title) for e in entries] == [
            (1, "chunk-1.html", "First"),
            (2, "chunk-2.html", "Second"),
        ]
        assert entries[1].context == "...Another alpha mention..."

    def test_excluded_words_absent(self, generator: IndexGenerator) -> None:
        search_index = generator.generate_index([make_chunk(1, "the and or but")])
        assert search_index.index == {}
        assert search_index.word_count == 0

    def test_no_chunks(self, generator: IndexGenerator) -> None:
        assert generator.generate_index([]).word_count == 0

    def test_repeated_word_shares_first_context(self, generator: IndexGenerator) -> None:
        text = "alpha " + "x" * 80 + " alpha beta"
        entries = generator.generate_index([make_chunk(1, text)]).index["alpha"]
        assert len(entries) == 2
        assert entries[0].context == entries[1].context
        assert entries[0].context.startswith("...alpha ")

    def test_context_uses_whole_word_occurrence(self, generator: IndexGenerator) -> None:
        text = "concatenate first, then the cat sat"
        entry = generator.generate_index([make_chunk(1, text)]).index["cat"][0]
        assert entry.context == f"...{text}..."
        # a token embedded in a longer word is not an occurrence
        assert "concatenate" in generator.generate_index([make_chunk(1, text)]).index

    def test_context_computed_once_per_word_and_chunk(
        self, generator: IndexGenerator, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        calls: list[tuple[int, int]] = []
        original = index_module.context_window

        def counting(text: str, start: int, end: int) -> str:
            calls.append((start, end))
            return original(text, start, end)

        monkeypatch.setattr(index_module, "context_window", counting)
        text = " ".join(["spam", "eggs"] * 500)
        generator.generate_index([make_chunk(1, text), make_chunk(2, text)])
        assert len(calls) == 4

    def test_large_chunk_of_distinct_words(self, generator: IndexGenerator) -> None:
        words = [f"word{n:05d}" for n in range(20000)]
        search_index = generator.generate_index([make_chunk(1, " ".join(words))])
        assert search_index.word_count == 20000
        assert search_index.index["word19999"][0].context.endswith("word19999...")


class TestContextWindow:
    def test_window_radius(self) -> None:
        text = "a" * 100 + " needle " + "b" * 100
        context = context_window(text, 101, 107)
        assert text[101:107] == "needle"
        assert len(context) == 3 + 50 + len("needle") + 50 + 3
        assert context.startswith("...") and context.endswith("...")

    def test_clamped_at_text_edges(self) -> None:
        assert context_window("Needle here", 0, 6) == "...Needle here..."
