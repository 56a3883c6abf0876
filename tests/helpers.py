"""Document builders shared by the test modules."""

from docsplit.models.chunk import Chunk
from docsplit.models.document import Element, hyperlink, paragraph, run, text


def heading(level: int, title: str, *extra: Element) -> Element:
    return paragraph([run([text(title)]), *extra], style_id=f"Heading{level}")


def body(content: str, *extra: Element) -> Element:
    return paragraph([run([text(content)]), *extra])


def link(label: str, href: str | None = None, anchor: str | None = None) -> Element:
    return hyperlink([run([text(label)])], href=href, anchor=anchor)


def make_chunk(chunk_id: int, *paragraphs: str, title: str | None = None) -> Chunk:
    return Chunk(
        id=chunk_id,
        title=title or f"Chunk {chunk_id}",
        file_name=f"chunk-{chunk_id}.html",
        content=[body(p) for p in paragraphs],
    )


def flatten_content(chunks: list[Chunk]) -> list[Element]:
    return [element for chunk in chunks for element in chunk.content]
