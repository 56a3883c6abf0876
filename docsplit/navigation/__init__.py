"""Table of contents and navigation artifacts."""

from docsplit.navigation.builder import NavigationBuilder
from docsplit.navigation.toc import TableOfContentsGenerator, build_nested_list

__all__ = ["NavigationBuilder", "TableOfContentsGenerator", "build_nested_list"]
