"""Navigation and sidebar derivation from a documentation tree."""

from __future__ import annotations

import logging
from collections.abc import Collection
from pathlib import Path
from urllib.parse import quote

from docnav.collate import collation_key, sort_names
from docnav.config import NavOptions
from docnav.model import LinkItem, Navigation, NavEntry, Section, SidebarGroup

logger = logging.getLogger(__name__)

INDEX_FILE = "index.md"
# Landing documents in priority order; the first one present wins.
LANDING_FILES = ("README.md", "readme.md", "index.md")
# Reserved for landing pages, never listed as ordinary children (any case).
RESERVED_NAMES = frozenset({"index.md", "readme.md"})

# Characters left unescaped by JavaScript's encodeURI, beyond alphanumerics
_URI_SAFE = ";,/?:@&=+$-_.!~*'()#"


def encode_segment(name: str) -> str:
    """Percent-encode one URL path segment the way ``encodeURI`` does."""
    return quote(name, safe=_URI_SAFE)


def section_path(section: str) -> str:
    """Return the bare ``/<section>/`` link of a section."""
    return f"/{encode_segment(section)}/"


def _entry_names(directory: Path) -> set[str]:
    """Names directly inside a directory, matched case-sensitively.

    Dangling symlinks are left out.
    """
    return {entry.name for entry in directory.iterdir() if entry.exists()}


def list_sections(root_dir: Path, excluded_dirs: Collection[str] = ()) -> list[str]:
    """List the section directories of a documentation root, sorted.

    Args:
        root_dir: Documentation root.
        excluded_dirs: Directory names to skip.

    Returns:
        Names of visible, non-excluded subdirectories in collation order.

    Raises:
        OSError: If the root is missing, not a directory or unreadable.
    """
    names = []
    for entry in root_dir.iterdir():
        if not entry.is_dir():
            continue
        if entry.name.startswith(".") or entry.name in excluded_dirs:
            logger.debug("Skipping directory %s", entry)
            continue
        names.append(entry.name)
    return sort_names(names)


def collect_section_links(
    root_dir: Path,
    section: str,
    doc_extensions: Collection[str] = (".md",),
) -> list[LinkItem]:
    """Collect the child links of a section, sorted by display text.

    Documents become ``/<section>/<file>`` links labelled with their name
    minus the extension. Subdirectories become ``/<section>/<dir>/`` links,
    but only when they hold an ``index.md``. Landing documents are skipped.
    """
    section_dir = root_dir / section
    prefix = section_path(section)
    links: list[LinkItem] = []

    for entry in sorted(section_dir.iterdir(), key=lambda p: p.name):
        if entry.name.lower() in RESERVED_NAMES:
            continue
        if entry.is_dir():
            if INDEX_FILE not in _entry_names(entry):
                logger.debug("Skipping %s: no %s", entry, INDEX_FILE)
                continue
            links.append(
                LinkItem(text=entry.name, link=f"{prefix}{encode_segment(entry.name)}/")
            )
        elif entry.is_file() and entry.suffix in doc_extensions:
            links.append(
                LinkItem(text=entry.stem, link=f"{prefix}{encode_segment(entry.name)}")
            )
        else:
            logger.debug("Skipping %s: not a document", entry)

    links.sort(key=lambda item: collation_key(item.text))
    return links


def read_section(root_dir: Path, section: str, options: NavOptions) -> Section:
    """Read one section: its sorted links and landing documents."""
    names = _entry_names(root_dir / section)
    links = collect_section_links(root_dir, section, options.doc_extensions)
    landing_file = next((name for name in LANDING_FILES if name in names), None)
    return Section(
        name=section,
        links=links,
        landing_file=landing_file,
        has_landing_file=INDEX_FILE in names or "README.md" in names,
    )


def resolve_landing(section: Section) -> tuple[str, list[LinkItem]]:
    """Pick the section header link and the items listed below it.

    A landing document wins; otherwise the first link is promoted to the
    header and dropped from the items. ``section.links`` must already be
    sorted.

    Returns:
        Tuple of (header link, sidebar items).
    """
    if section.landing_file is not None:
        link = f"{section_path(section.name)}{encode_segment(section.landing_file)}"
        return link, list(section.links)
    if section.links:
        return section.links[0].link, list(section.links[1:])
    return section_path(section.name), []


def build_navigation(
    root_dir: Path | str, options: NavOptions | None = None
) -> Navigation:
    """Build the top navigation and sidebar for a documentation root.

    Every visible, non-excluded subdirectory of ``root_dir`` is a section and
    gets one nav entry. Sections with child links or a landing document also
    get a sidebar group keyed by ``/<section>/``.

    Args:
        root_dir: Documentation root directory.
        options: Build options. Defaults to ``NavOptions()``.

    Returns:
        The navigation, rebuilt from the filesystem on every call.

    Raises:
        OSError: On any filesystem error; no partial result is returned.
    """
    root_dir = Path(root_dir)
    options = options or NavOptions()
    navigation = Navigation()

    for name in list_sections(root_dir, options.excluded_dirs):
        section = read_section(root_dir, name, options)
        if not section.in_sidebar:
            logger.debug("Section %s is empty", name)
            navigation.nav.append(NavEntry(text=name, link=section_path(name)))
            continue

        link, items = resolve_landing(section)
        logger.debug("Section %s -> %s (%d items)", name, link, len(items))
        navigation.nav.append(NavEntry(text=name, link=link))
        navigation.sidebar[f"/{name}/"] = [
            SidebarGroup(text=name, link=link, items=items)
        ]

    return navigation
