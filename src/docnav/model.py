"""Navigation data model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypedDict


class LinkItemDict(TypedDict):
    """Dictionary representation of a link item."""

    text: str
    link: str


class SidebarGroupDict(TypedDict):
    """Dictionary representation of a sidebar group."""

    text: str
    link: str
    items: list[LinkItemDict]


class NavigationDict(TypedDict):
    """Dictionary representation of a full navigation build."""

    nav: list[LinkItemDict]
    sidebar: dict[str, list[SidebarGroupDict]]


@dataclass(frozen=True)
class LinkItem:
    """A labelled site-relative link."""

    text: str
    link: str

    def to_dict(self) -> LinkItemDict:
        return {"text": self.text, "link": self.link}


# Top navigation entries have the same shape as sidebar links.
NavEntry = LinkItem


@dataclass
class Section:
    """One top-level directory of the documentation root.

    Attributes:
        name: Directory name, also used as the display label.
        links: Child links, already sorted.
        landing_file: Name of the landing document found, if any.
        has_landing_file: Whether ``index.md`` or ``README.md`` exists.
    """

    name: str
    links: list[LinkItem] = field(default_factory=list)
    landing_file: str | None = None
    has_landing_file: bool = False

    @property
    def in_sidebar(self) -> bool:
        """Whether the section gets its own sidebar group."""
        return bool(self.links) or self.has_landing_file


@dataclass
class SidebarGroup:
    """Section header node of a sidebar, with its child items."""

    text: str
    link: str
    items: list[LinkItem] = field(default_factory=list)

    def to_dict(self) -> SidebarGroupDict:
        return {
            "text": self.text,
            "link": self.link,
            "items": [item.to_dict() for item in self.items],
        }


@dataclass
class Navigation:
    """Result of a navigation build."""

    nav: list[NavEntry] = field(default_factory=list)
    sidebar: dict[str, list[SidebarGroup]] = field(default_factory=dict)

    def to_dict(self) -> NavigationDict:
        """Convert to plain dicts and lists for serialization."""
        return {
            "nav": [entry.to_dict() for entry in self.nav],
            "sidebar": {
                key: [group.to_dict() for group in groups]
                for key, groups in self.sidebar.items()
            },
        }
