"""Shared fixtures for arcmarks tests."""

import json
import logging

import pytest

from arcmarks.exporter import CustomFormatter


def make_document(spaces, items, extra_containers=None):
    """Wrap spaces and items in a StorableSidebar.json-shaped document."""
    containers = list(extra_containers or [])
    containers.append({
        "topAppsContainerIDs": [],
        "spaces": spaces,
        "items": items,
    })
    return {"sidebar": {"containers": containers}}


def tab_item(item_id, parent_id, url, title=None, saved_title=None):
    item = {
        "id": item_id,
        "parentID": parent_id,
        "data": {"tab": {"savedURL": url}},
    }
    if title is not None:
        item["title"] = title
    if saved_title is not None:
        item["data"]["tab"]["savedTitle"] = saved_title
    return item


@pytest.fixture
def work_document():
    """Single pinned space with one bookmark."""
    return make_document(
        spaces=[{"title": "Work", "newContainerIDs": [{"pinned": True}, "C1"]}],
        items=[
            {"id": "C1"},
            tab_item("I1", "C1", "https://e.com", title="Example", saved_title="Example"),
        ],
    )


@pytest.fixture
def sidebar_document():
    """Two pinned spaces, one unnamed, with nested folders."""
    return make_document(
        extra_containers=[{"global": {}}],
        spaces=[
            "space-1",
            {
                "id": "space-1",
                "title": "Personal",
                "newContainerIDs": [{"unpinned": {}}, "P-U", {"pinned": {}}, "P-P"],
            },
            "space-2",
            {
                "id": "space-2",
                "newContainerIDs": [{"pinned": {}}, "S2-P", {"unpinned": {}}, "S2-U"],
            },
        ],
        items=[
            "P-P",
            {"id": "P-P", "childrenIds": ["F1", "T1"]},
            {"id": "F1", "parentID": "P-P", "title": "News"},
            "F1",
            tab_item("T2", "F1", "https://news.example.org", saved_title="Daily News"),
            tab_item("T1", "P-P", "https://mail.example.com", title="Mail"),
            tab_item("T3", "S2-P", "https://docs.example.com", saved_title="Docs"),
            tab_item("T4", "P-U", "https://tmp.example.com", title="Unpinned tab"),
        ],
    )


@pytest.fixture
def sidebar_file(tmp_path, sidebar_document):
    path = tmp_path / "StorableSidebar.json"
    path.write_text(json.dumps(sidebar_document), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo setup_logging() so tests don't leak handlers."""
    yield
    logging.disable(logging.NOTSET)
    root = logging.getLogger()
    root.setLevel(logging.WARNING)
    for handler in list(root.handlers):
        if isinstance(handler.formatter, CustomFormatter):
            root.removeHandler(handler)
