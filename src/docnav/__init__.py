"""Navigation and sidebar generation from a documentation tree."""

from docnav.build import build_navigation
from docnav.config import NavOptions
from docnav.model import LinkItem, Navigation, NavEntry, SidebarGroup

__version__ = "0.1.0"

__all__ = [
    "LinkItem",
    "NavEntry",
    "NavOptions",
    "Navigation",
    "SidebarGroup",
    "__version__",
    "build_navigation",
]
