"""Navigation artifacts derived from a chunk sequence."""

import logging

from docsplit.config import NavigationConfig
from docsplit.models import markup
from docsplit.models.analysis import Analysis
from docsplit.models.chunk import Chunk
from docsplit.models.markup import MarkupNode
from docsplit.models.navigation import (
    Breadcrumb,
    JumpDropdown,
    JumpOption,
    KeyboardShortcuts,
    NavigationBundle,
    NavLink,
    PrevNext,
    Sidebar,
    SidebarItem,
    SidebarSubItem,
)
from docsplit.navigation.toc import heading_anchor

logger = logging.getLogger(__name__)

KEY_BINDINGS: dict[str, str] = {
    "ArrowLeft": "previous",
    "ArrowRight": "next",
    "Home": "first",
    "End": "last",
    "h": "home",
}

KEYBOARD_SCRIPT_TEMPLATE = """
document.addEventListener('keydown', function(event) {
    if (event.ctrlKey || event.altKey || event.metaKey) return;

    function follow(name) {
        var link = document.querySelector('[data-nav="' + name + '"]');
        if (link) window.location.href = link.href;
    }

    switch(event.key) {
        case 'ArrowLeft':
            follow('previous');
            break;
        case 'ArrowRight':
            follow('next');
            break;
        case 'Home':
            follow('first');
            break;
        case 'End':
            follow('last');
            break;
        case 'h':
            window.location.href = '%(home)s';
            break;
    }
});"""


class NavigationBuilder:
    """Builds previous/next links, breadcrumbs, sidebar, jump list and key bindings.

    Args:
        config: NavigationConfig selecting which parts to build.
        base_url: Prefix for every generated href.
    """

    def __init__(self, config: NavigationConfig | None = None, base_url: str = "./") -> None:
        self._config = config or NavigationConfig()
        self._base_url = base_url

    def build_navigation(
        self, chunks: list[Chunk], analysis: Analysis | None = None
    ) -> NavigationBundle:
        """Derive the navigation bundle.

        Args:
            chunks: Chunks in emission order.
            analysis: Document analysis (unused by the current layout).

        Returns:
            NavigationBundle; parts disabled in the config are None.
        """
        logger.debug("Building navigation for %d chunks", len(chunks))
        return NavigationBundle(
            prev_next=self._build_prev_next(chunks),
            breadcrumbs=self._build_breadcrumbs(chunks)
            if self._config.include_breadcrumbs
            else None,
            sidebar=self._build_sidebar(chunks) if self._config.include_sidebar else None,
            jump_dropdown=self._build_jump_dropdown(chunks)
            if self._config.include_jump_dropdown
            else None,
            keyboard_shortcuts=KeyboardShortcuts(
                bindings=dict(KEY_BINDINGS),
                script=KEYBOARD_SCRIPT_TEMPLATE % {"home": self._home_href()},
            ),
        )

    def _href(self, chunk: Chunk) -> str:
        return f"{self._base_url}{chunk.file_name}"

    def _home_href(self) -> str:
        return f"{self._base_url}{self._config.home_page}"

    def _nav_link(self, chunk: Chunk) -> NavLink:
        return NavLink(title=chunk.title, href=self._href(chunk), chunk_id=chunk.id)

    def _build_prev_next(self, chunks: list[Chunk]) -> dict[int, PrevNext]:
        navigation: dict[int, PrevNext] = {}
        for index, chunk in enumerate(chunks):
            nav = PrevNext()
            if index > 0:
                nav.previous = self._nav_link(chunks[index - 1])
            if index < len(chunks) - 1:
                nav.next = self._nav_link(chunks[index + 1])
            navigation[chunk.id] = nav
        return navigation

    def _build_breadcrumbs(self, chunks: list[Chunk]) -> dict[int, list[Breadcrumb]]:
        """Fixed two-level trail: Home, then the current chunk."""
        return {
            chunk.id: [
                Breadcrumb(title="Home", href=self._home_href(), is_first=True),
                Breadcrumb(
                    title=chunk.title,
                    href=self._href(chunk),
                    is_last=True,
                    is_active=True,
                ),
            ]
            for chunk in chunks
        }

    def _build_sidebar(self, chunks: list[Chunk]) -> Sidebar:
        items = [
            SidebarItem(
                title=chunk.title,
                href=self._href(chunk),
                chunk_id=chunk.id,
                level=chunk.level,
                sub_items=[
                    SidebarSubItem(
                        title=heading.text,
                        href=f"{self._href(chunk)}#{heading_anchor(heading.element_id)}",
                        level=heading.level,
                    )
                    for heading in chunk.headings
                ],
            )
            for chunk in chunks
        ]
        return Sidebar(items=items, rendered_tree=self._render_sidebar(items))

    def _render_sidebar(self, items: list[SidebarItem]) -> MarkupNode:
        list_items = []
        for item in items:
            children = [
                markup.element(
                    "a",
                    {"href": item.href, "class": "sidebar-main-link"},
                    [markup.text(item.title)],
                )
            ]
            if item.sub_items:
                children.append(
                    markup.element(
                        "ul",
                        {"class": "sidebar-sub-list"},
                        [
                            markup.element(
                                "li",
                                {},
                                [
                                    markup.element(
                                        "a",
                                        {"href": sub.href, "class": "sidebar-sub-link"},
                                        [markup.text(sub.title)],
                                    )
                                ],
                            )
                            for sub in item.sub_items
                        ],
                    )
                )
            list_items.append(markup.element("li", {"class": "sidebar-item"}, children))

        return markup.element(
            "nav",
            {"class": "document-sidebar"},
            [markup.element("ul", {"class": "sidebar-main-list"}, list_items)],
        )

    def _build_jump_dropdown(self, chunks: list[Chunk]) -> JumpDropdown:
        options = [
            JumpOption(value=self._href(chunk), text=chunk.title, chunk_id=chunk.id)
            for chunk in chunks
        ]
        select = markup.element(
            "select",
            {"class": "jump-dropdown", "onchange": "window.location.href = this.value"},
            [
                markup.element("option", {"value": option.value}, [markup.text(option.text)])
                for option in options
            ],
        )
        return JumpDropdown(
            options=options,
            rendered_tree=markup.element(
                "div",
                {"class": "jump-navigation"},
                [markup.element("label", {}, [markup.text("Jump to section:")]), select],
            ),
        )
