"""Navigation bundle data models."""

from pydantic import BaseModel, Field

from docsplit.models.markup import MarkupNode


class NavLink(BaseModel):
    """A link to a neighbouring chunk."""

    title: str
    href: str
    chunk_id: int


class PrevNext(BaseModel):
    previous: NavLink | None = None
    next: NavLink | None = None


class Breadcrumb(BaseModel):
    title: str
    href: str
    is_first: bool = False
    is_last: bool = False
    is_active: bool = False


class SidebarSubItem(BaseModel):
    title: str
    href: str
    level: int


class SidebarItem(BaseModel):
    title: str
    href: str
    chunk_id: int
    level: int
    sub_items: list[SidebarSubItem] = Field(default_factory=list)


class Sidebar(BaseModel):
    items: list[SidebarItem] = Field(default_factory=list)
    rendered_tree: MarkupNode


class JumpOption(BaseModel):
    value: str  # href of the chunk
    text: str
    chunk_id: int


class JumpDropdown(BaseModel):
    options: list[JumpOption] = Field(default_factory=list)
    rendered_tree: MarkupNode


class KeyboardShortcuts(BaseModel):
    """Static key bindings plus a client-side script for the host to embed."""

    bindings: dict[str, str] = Field(default_factory=dict)
    script: str = ""


class NavigationBundle(BaseModel):
    """All navigation artifacts derived from a chunk sequence.

    Maps are keyed by chunk id. Parts disabled in the configuration are None.
    """

    prev_next: dict[int, PrevNext] = Field(default_factory=dict)
    breadcrumbs: dict[int, list[Breadcrumb]] | None = None
    sidebar: Sidebar | None = None
    jump_dropdown: JumpDropdown | None = None
    keyboard_shortcuts: KeyboardShortcuts = Field(default_factory=KeyboardShortcuts)
