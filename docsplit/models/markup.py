"""Lightweight markup node tree.

Navigation artifacts are handed to the host renderer as node trees rather
than markup text; the renderer decides how to serialize them.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class MarkupNode(BaseModel):
    """An element node (``tag`` set) or a text node (``text`` set)."""

    tag: str | None = None
    attributes: dict[str, str] = Field(default_factory=dict)
    children: list[MarkupNode] = Field(default_factory=list)
    text: str | None = None

    def find_all(self, tag: str) -> list[MarkupNode]:
        """Return every descendant node (including self) with the given tag."""
        found = [self] if self.tag == tag else []
        for child in self.children:
            found.extend(child.find_all(tag))
        return found

    def text_content(self) -> str:
        if self.text is not None:
            return self.text
        return "".join(child.text_content() for child in self.children)


def element(
    tag: str,
    attributes: dict[str, str] | None = None,
    children: list[MarkupNode] | None = None,
) -> MarkupNode:
    return MarkupNode(tag=tag, attributes=attributes or {}, children=children or [])


def text(value: str) -> MarkupNode:
    return MarkupNode(text=value)
