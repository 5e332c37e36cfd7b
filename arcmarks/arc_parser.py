#!/usr/bin/env python3
"""Parse the Arc sidebar document into a bookmark tree."""

import logging
from collections import defaultdict
from typing import Any, Dict, List, Optional, Set, Tuple

from .errors import MalformedShapeError
from .models import (
    Bookmark,
    BookmarkFolder,
    BookmarkNode,
    ContainerMarker,
    ContainerRef,
    PinnedMarker,
    SidebarItem,
    SpaceIndex,
    UnpinnedMarker,
)

TOP_APPS_KEY = "topAppsContainerIDs"


def read_containers(data: Dict) -> List:
    """Return ``sidebar.containers`` from the raw document."""
    sidebar = data.get("sidebar") if isinstance(data, dict) else None
    if not isinstance(sidebar, dict):
        raise MalformedShapeError('Missing "sidebar" object in Arc data')

    containers = sidebar.get("containers")
    if not isinstance(containers, list):
        raise MalformedShapeError('Missing "sidebar.containers" list in Arc data')
    return containers


def locate_container(containers: List) -> Dict:
    """Find the container that holds the top apps and the space list."""
    if not isinstance(containers, list):
        raise MalformedShapeError("Sidebar containers must be a list")

    for container in containers:
        if isinstance(container, dict) and TOP_APPS_KEY in container:
            return container

    raise MalformedShapeError(
        f"No sidebar container with {TOP_APPS_KEY} found "
        f"({len(containers)} containers checked)"
    )


def decode_markers(raw_markers: List) -> List[Optional[ContainerMarker]]:
    """Decode newContainerIDs into marker variants.

    Objects with a ``pinned`` key become PinnedMarker, objects with an
    ``unpinned`` key become UnpinnedMarker, any other object decodes to
    None. Everything else is a ContainerRef.
    """
    decoded: List[Optional[ContainerMarker]] = []
    for marker in raw_markers:
        if isinstance(marker, dict):
            if "pinned" in marker:
                decoded.append(PinnedMarker())
            elif "unpinned" in marker:
                decoded.append(UnpinnedMarker())
            else:
                decoded.append(None)
        else:
            decoded.append(ContainerRef(marker))
    return decoded


def index_spaces(spaces: List) -> SpaceIndex:
    """Map pinned and unpinned root container ids to space titles."""
    logging.info("Parsing spaces...")

    if not isinstance(spaces, list):
        raise MalformedShapeError('Container "spaces" must be a list')

    index = SpaceIndex()
    unnamed_counter = 1

    for space in spaces:
        # Space ids are interleaved with the space objects
        if not isinstance(space, dict):
            logging.debug(f"Skipping non-dict space entry: {space!r}")
            continue

        title = space.get("title")
        if not title:
            title = f"Space {unnamed_counter}"
            unnamed_counter += 1

        raw_markers = space.get("newContainerIDs") or []
        if not isinstance(raw_markers, list):
            raise MalformedShapeError(f'Space "{title}" has a non-list newContainerIDs')

        markers = decode_markers(raw_markers)
        for i, marker in enumerate(markers):
            if not isinstance(marker, (PinnedMarker, UnpinnedMarker)):
                continue
            if i + 1 >= len(markers):
                logging.warning(f'Space "{title}" ends with a dangling container marker')
                continue

            following = markers[i + 1]
            if not isinstance(following, ContainerRef):
                logging.warning(
                    f'Space "{title}" has a container marker at position {i} '
                    f'not followed by a container id'
                )
                continue

            container_id = following.value
            target = index.pinned if isinstance(marker, PinnedMarker) else index.unpinned
            kind = "pinned" if target is index.pinned else "unpinned"
            try:
                target[container_id] = title
            except TypeError as e:
                raise MalformedShapeError(
                    f'Space "{title}" has an unusable {kind} container id: {container_id!r}'
                ) from e
            logging.debug(f"Space '{title}': {kind} container {container_id}")

        index.space_count += 1

    logging.info(f"> Found {index.space_count} spaces.")
    return index


class TreeBuilder:
    """Resolves the flat, parent-linked item list into bookmark folders."""

    def __init__(self, items: List):
        if not isinstance(items, list):
            raise MalformedShapeError('Container "items" must be a list')

        self.item_lookup: Dict[Any, SidebarItem] = {}
        self.children_lookup: Dict[Any, List[SidebarItem]] = defaultdict(list)

        try:
            for raw in items:
                if isinstance(raw, dict):
                    self.item_lookup[raw.get("id")] = SidebarItem.from_json(raw)
            for item in self.item_lookup.values():
                # Parentless records are roots, never children
                if item.parent_id is not None:
                    self.children_lookup[item.parent_id].append(item)
        except TypeError as e:
            raise MalformedShapeError(f"Unusable item identifier: {e}") from e

        logging.debug(f"Indexed {len(self.item_lookup)} sidebar items")

    def children_of(self, parent_id: Any, path: Optional[Set] = None) -> List[BookmarkNode]:
        """Build the ordered children of ``parent_id``.

        Items with tab data become bookmarks, titled items become folders.
        Anything else is dropped together with its descendants.
        """
        if path is None:
            path = {parent_id}

        children: List[BookmarkNode] = []
        for item in self.children_lookup.get(parent_id, []):
            if item.tab is not None:
                children.append(Bookmark(
                    title=item.title or item.tab.saved_title or "",
                    url=item.tab.saved_url or "",
                ))
            elif item.title:
                if item.id in path:
                    raise MalformedShapeError(
                        f"Parent cycle detected at item {item.id!r} ('{item.title}')"
                    )
                path.add(item.id)
                folder_children = self.children_of(item.id, path)
                path.discard(item.id)
                children.append(BookmarkFolder(title=item.title, children=folder_children))
            else:
                logging.debug(f"Dropping untitled item {item.id!r} and its subtree")

        return children

    def build(self, space_index: SpaceIndex) -> List[BookmarkFolder]:
        """Create one top-level folder per pinned space."""
        logging.info("Converting to bookmarks...")

        folders = []
        for container_id, space_name in space_index.pinned.items():
            children = self.children_of(container_id)
            folders.append(BookmarkFolder(title=space_name, children=children))
            logging.debug(f"Space '{space_name}': {count_bookmarks(children)} bookmarks")

        logging.info(f"> Found {count_bookmarks(folders)} bookmarks.")
        return folders


def count_bookmarks(nodes: List[BookmarkNode]) -> int:
    """Recursively count bookmarks in a list of items."""
    count = 0
    for node in nodes:
        if isinstance(node, Bookmark):
            count += 1
        elif isinstance(node, BookmarkFolder):
            count += count_bookmarks(node.children)
    return count


def count_folders(nodes: List[BookmarkNode]) -> int:
    """Recursively count folders, top-level space folders included."""
    count = 0
    for node in nodes:
        if isinstance(node, BookmarkFolder):
            count += 1 + count_folders(node.children)
    return count


class ArcDataParser:
    """Parses Arc browser data structure into bookmarks."""

    def __init__(self, data: Dict):
        self.data = data
        self.space_index: Optional[SpaceIndex] = None

    def parse(self) -> List[BookmarkFolder]:
        """Parse Arc data and return one bookmark folder per pinned space."""
        logging.info("Parsing Arc browser data...")

        container = locate_container(read_containers(self.data))
        for key in ("spaces", "items"):
            if key not in container:
                raise MalformedShapeError(f'Sidebar container has no "{key}" list')

        self.space_index = index_spaces(container["spaces"])
        builder = TreeBuilder(container["items"])
        return builder.build(self.space_index)

    def parse_with_counts(self) -> Tuple[List[BookmarkFolder], int, int]:
        """Parse and also return (bookmarks, folders) totals."""
        folders = self.parse()
        return folders, count_bookmarks(folders), count_folders(folders)
