"""Configuration model."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_DOC_EXTENSIONS = frozenset({".md"})


@dataclass(frozen=True)
class NavOptions:
    """Options for a single navigation build.

    Attributes:
        doc_extensions: File suffixes treated as documentation pages.
        excluded_dirs: Top-level directory names skipped regardless of contents.
    """

    doc_extensions: frozenset[str] = DEFAULT_DOC_EXTENSIONS
    excluded_dirs: frozenset[str] = frozenset()


@dataclass
class Config:
    """Resolved configuration for the command-line tool."""

    docs_dir: Path
    doc_extensions: list[str] = field(default_factory=lambda: [".md"])
    excluded_dirs: list[str] = field(default_factory=list)
    output: Path | None = None
    format: str = "json"

    def nav_options(self) -> NavOptions:
        """Build the builder options described by this config."""
        return NavOptions(
            doc_extensions=frozenset(self.doc_extensions),
            excluded_dirs=frozenset(self.excluded_dirs),
        )
