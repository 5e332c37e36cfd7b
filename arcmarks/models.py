#!/usr/bin/env python3
"""Common data models for Arc sidebar export."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union


@dataclass
class Bookmark:
    """Represents a single bookmark."""
    title: str
    url: str


@dataclass
class BookmarkFolder:
    """Represents a bookmark folder containing other bookmarks or folders."""
    title: str
    children: List[Union["Bookmark", "BookmarkFolder"]] = field(default_factory=list)


BookmarkNode = Union[Bookmark, BookmarkFolder]


@dataclass(frozen=True)
class SavedTab:
    """Tab payload of a sidebar item (``data.tab``)."""
    saved_title: Optional[str] = None
    saved_url: Optional[str] = None


@dataclass(frozen=True)
class SidebarItem:
    """A single entry of the sidebar ``items`` list."""
    id: Any
    parent_id: Any = None
    title: Optional[str] = None
    tab: Optional[SavedTab] = None

    @classmethod
    def from_json(cls, raw: Dict) -> "SidebarItem":
        tab = None
        data = raw.get("data")
        tab_data = data.get("tab") if isinstance(data, dict) else None
        if isinstance(tab_data, dict):
            tab = SavedTab(
                saved_title=tab_data.get("savedTitle"),
                saved_url=tab_data.get("savedURL"),
            )
        return cls(
            id=raw.get("id"),
            parent_id=raw.get("parentID"),
            title=raw.get("title"),
            tab=tab,
        )


# newContainerIDs elements

@dataclass(frozen=True)
class PinnedMarker:
    """Tags the next element as the space's pinned root container."""


@dataclass(frozen=True)
class UnpinnedMarker:
    """Tags the next element as the space's unpinned root container."""


@dataclass(frozen=True)
class ContainerRef:
    """A plain container identity."""
    value: Any


ContainerMarker = Union[PinnedMarker, UnpinnedMarker, ContainerRef]


@dataclass
class SpaceIndex:
    """Root container ids of every space, keyed to the space title."""
    pinned: Dict[Any, str] = field(default_factory=dict)
    unpinned: Dict[Any, str] = field(default_factory=dict)
    space_count: int = 0
