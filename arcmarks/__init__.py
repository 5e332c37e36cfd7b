"""Export Arc Browser sidebar spaces to Netscape bookmark HTML."""

from .models import (
    Bookmark,
    BookmarkFolder,
    SavedTab,
    SidebarItem,
    SpaceIndex,
)
from .errors import (
    ArcDataError,
    InputNotFoundError,
    MalformedShapeError,
    OutputWriteError,
)
from .arc_parser import (
    ArcDataParser,
    TreeBuilder,
    index_spaces,
    locate_container,
)
from .arc_reader import ArcDataReader
from .html_exporter import HTMLExporter
from .exporter import Colors, convert_to_html, export_to_html

__version__ = "1.0.0"

__all__ = [
    # Models
    "Bookmark",
    "BookmarkFolder",
    "SavedTab",
    "SidebarItem",
    "SpaceIndex",
    # Errors
    "ArcDataError",
    "InputNotFoundError",
    "MalformedShapeError",
    "OutputWriteError",
    # Parsing
    "ArcDataParser",
    "TreeBuilder",
    "index_spaces",
    "locate_container",
    # Reading / writing
    "ArcDataReader",
    "HTMLExporter",
    "Colors",
    "convert_to_html",
    "export_to_html",
]
