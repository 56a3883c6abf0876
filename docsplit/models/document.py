"""Document element tree consumed by the chunking engine.

The tree is produced by an external format parser. Every element carries a
stable integer ``element_id`` assigned in pre-order when the ``Document`` is
constructed, so analysis results can be keyed by id instead of by object
identity. Trees built another way, or edited after construction, are
renumbered by the analyzer before use.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterator

from pydantic import BaseModel, Field, model_validator


class ElementType(str, Enum):
    """Element kinds understood by the engine."""

    DOCUMENT = "document"
    PARAGRAPH = "paragraph"
    RUN = "run"
    TEXT = "text"
    TAB = "tab"
    BREAK = "break"
    TABLE = "table"
    TABLE_ROW = "tableRow"
    TABLE_CELL = "tableCell"
    HYPERLINK = "hyperlink"
    IMAGE = "image"
    BOOKMARK_START = "bookmarkStart"


class Element(BaseModel):
    """A node of the document tree.

    Only the fields relevant to ``type`` are populated: ``value`` on text,
    ``style_id``/``style_name`` on paragraphs, ``href``/``anchor`` on
    hyperlinks, ``name`` on bookmarks, ``alt_text``/``content_type`` on images.
    """

    type: ElementType
    children: list[Element] = Field(default_factory=list)
    element_id: int | None = None
    value: str | None = None
    style_id: str | None = None
    style_name: str | None = None
    href: str | None = None
    anchor: str | None = None
    name: str | None = None
    alt_text: str | None = None
    content_type: str | None = None

    def walk(self) -> Iterator[Element]:
        """Yield this element and all descendants in document order."""
        yield self
        for child in self.children:
            yield from child.walk()


class Document(Element):
    """Root of a document tree."""

    type: ElementType = ElementType.DOCUMENT

    @model_validator(mode="after")
    def _assign_element_ids(self) -> Document:
        assign_element_ids(self)
        return self


def assign_element_ids(root: Element) -> None:
    """Number ``root`` and all its descendants in pre-order, starting at 0."""
    for counter, element in enumerate(root.walk()):
        element.element_id = counter


def has_element_ids(root: Element) -> bool:
    """True when every element under ``root`` carries a distinct ``element_id``."""
    seen: set[int] = set()
    for element in root.walk():
        if element.element_id is None or element.element_id in seen:
            return False
        seen.add(element.element_id)
    return True


def document(children: list[Element] | None = None) -> Document:
    return Document(children=children or [])


def paragraph(
    children: list[Element] | None = None,
    style_id: str | None = None,
    style_name: str | None = None,
) -> Element:
    return Element(
        type=ElementType.PARAGRAPH,
        children=children or [],
        style_id=style_id,
        style_name=style_name,
    )


def run(children: list[Element] | None = None) -> Element:
    return Element(type=ElementType.RUN, children=children or [])


def text(value: str) -> Element:
    return Element(type=ElementType.TEXT, value=value)


def tab() -> Element:
    return Element(type=ElementType.TAB)


def line_break() -> Element:
    return Element(type=ElementType.BREAK)


def hyperlink(
    children: list[Element] | None = None,
    href: str | None = None,
    anchor: str | None = None,
) -> Element:
    return Element(
        type=ElementType.HYPERLINK, children=children or [], href=href, anchor=anchor
    )


def image(alt_text: str | None = None, content_type: str | None = None) -> Element:
    return Element(type=ElementType.IMAGE, alt_text=alt_text, content_type=content_type)


def table(rows: list[Element] | None = None) -> Element:
    return Element(type=ElementType.TABLE, children=rows or [])


def table_row(cells: list[Element] | None = None) -> Element:
    return Element(type=ElementType.TABLE_ROW, children=cells or [])


def table_cell(children: list[Element] | None = None) -> Element:
    return Element(type=ElementType.TABLE_CELL, children=children or [])


def bookmark_start(name: str) -> Element:
    return Element(type=ElementType.BOOKMARK_START, name=name)
