"""Configuration loader for the docsplit publication toolkit."""

import os
from enum import Enum
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field


class ChunkingStrategy(str, Enum):
    """How a document is partitioned into chunks."""

    BY_HEADING_LEVEL = "by_heading_level"
    BY_CHAPTER = "by_chapter"
    BY_SECTION = "by_section"
    BY_SIZE = "by_size"
    CUSTOM = "custom"


class CrossReferenceMode(str, Enum):
    """Bookmark lookup used when rewiring internal links."""

    INDEXED = "indexed"
    SCAN = "scan"


DEFAULT_EXCLUDE_WORDS: list[str] = [
    "the", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with", "by",
]

DEFAULT_DEFINITION_PATTERNS: list[str] = [
    r"(.+?)\s+is\s+(.+?)\.",
    r"(.+?)\s+means\s+(.+?)\.",
    r"(.+?):\s+(.+?)\.",
]


class AppInfo(BaseModel):
    """Application metadata."""

    name: str = "docsplit"
    version: str = "0.1.0"


class ChunkingConfig(BaseModel):
    """Document chunking configuration."""

    strategy: ChunkingStrategy = ChunkingStrategy.BY_HEADING_LEVEL
    max_level: int = Field(default=6, ge=1, le=6)
    preserve_links: bool = True
    generate_navigation: bool = True
    include_metadata: bool = True
    chunk_size_limit: int | None = Field(default=None, gt=0)
    base_url: str = "./"
    file_prefix: str = "chunk-"
    file_suffix: str = ".html"
    crossref_mode: CrossReferenceMode = CrossReferenceMode.INDEXED


class TocConfig(BaseModel):
    """Table of contents configuration."""

    max_depth: int = Field(default=6, ge=0)
    numbering: bool = False
    collapsible: bool = False


class NavigationConfig(BaseModel):
    """Navigation artifact configuration."""

    include_breadcrumbs: bool = True
    include_sidebar: bool = True
    include_jump_dropdown: bool = True
    home_page: str = "index.html"


class IndexConfig(BaseModel):
    """Search index configuration."""

    min_word_length: int = Field(default=3, ge=1)
    exclude_words: list[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUDE_WORDS))


class GlossaryConfig(BaseModel):
    """Glossary extraction configuration.

    Each pattern must define two groups: the term and its definition.
    Patterns are compiled case-insensitively.
    """

    definition_patterns: list[str] = Field(
        default_factory=lambda: list(DEFAULT_DEFINITION_PATTERNS)
    )


class OutputConfig(BaseModel):
    """Which publication components to generate."""

    generate_toc: bool = True
    generate_index: bool = True
    generate_glossary: bool = False


class AppConfig(BaseModel):
    """Root application configuration."""

    app: AppInfo = Field(default_factory=AppInfo)
    chunking: ChunkingConfig = Field(default_factory=ChunkingConfig)
    toc: TocConfig = Field(default_factory=TocConfig)
    navigation: NavigationConfig = Field(default_factory=NavigationConfig)
    index: IndexConfig = Field(default_factory=IndexConfig)
    glossary: GlossaryConfig = Field(default_factory=GlossaryConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


def load_config(config_path: str | Path = "config.yaml") -> AppConfig:
    """Load configuration from YAML file and environment variables.

    Args:
        config_path: Path to the YAML configuration file.

    Returns:
        Fully populated AppConfig instance.
    """
    load_dotenv()

    yaml_data: dict = {}
    config_file = Path(config_path)
    if config_file.exists():
        with open(config_file) as f:
            yaml_data = yaml.safe_load(f) or {}

    config = AppConfig(**yaml_data)

    # Deployment-specific URL root for generated links
    base_url = os.getenv("DOCSPLIT_BASE_URL")
    if base_url:
        config.chunking.base_url = base_url

    return config
