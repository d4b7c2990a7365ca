from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. An in-memory hierarchy provider that records every call.
3. Shared provider fixtures used across unit tests.
"""

import os
import sys
from typing import Any, Dict, List, Optional, Sequence, Tuple

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from modelhierarchy.core.provider import HierarchyProvider  # noqa: E402
from modelhierarchy.domain.models import (  # noqa: E402
    EntryRecord,
    FolderRecord,
    HubRecord,
    OccurrenceRecord,
    Page,
    ProjectRecord,
)


# -----------------------------------------------------------------------------
# Fake Provider
# -----------------------------------------------------------------------------
def _chain(pages: Sequence[Page]) -> Dict[Optional[str], Page]:
    """Index pages by the cursor that requests them (None for the first page)."""
    chain: Dict[Optional[str], Page] = {}
    cursor: Optional[str] = None
    for page in pages:
        chain[cursor] = page
        cursor = page.next_cursor
    return chain


class FakeProvider(HierarchyProvider):
    """In-memory provider; every call is appended to `calls`."""

    def __init__(
            self,
            hubs: Optional[List[HubRecord]] = None,
            projects: Optional[Dict[str, List[ProjectRecord]]] = None,
            folder_pages: Optional[Dict[str, List[Page]]] = None,
            project_items: Optional[Dict[str, List[EntryRecord]]] = None,
            folder_contents: Optional[Dict[Tuple[str, str], List[EntryRecord]]] = None,
            project_ids: Optional[Dict[Tuple[str, str], List[str]]] = None,
            version_ids: Optional[Dict[Tuple[str, str], List[str]]] = None,
            occurrence_pages: Optional[Dict[str, List[Page]]] = None,
    ) -> None:
        self.hubs = hubs or []
        self.projects = projects or {}
        self.folder_pages = {k: _chain(v) for k, v in (folder_pages or {}).items()}
        self.project_items = project_items or {}
        self.folder_contents = folder_contents or {}
        self.project_ids = project_ids or {}
        self.version_ids = version_ids or {}
        self.occurrence_pages = {k: _chain(v) for k, v in (occurrence_pages or {}).items()}
        self.calls: List[Tuple[Any, ...]] = []

    def list_hubs(self, token):
        self.calls.append(("list_hubs", token))
        return list(self.hubs)

    def list_projects(self, token, hub_id):
        self.calls.append(("list_projects", token, hub_id))
        return list(self.projects.get(hub_id, []))

    def list_folders_in_project(self, token, project_id, cursor=None, timeout=None):
        self.calls.append(("list_folders_in_project", token, project_id, cursor, timeout))
        return self.folder_pages.get(project_id, {}).get(cursor, Page(records=[]))

    def list_items_in_project(self, token, project_id):
        self.calls.append(("list_items_in_project", token, project_id))
        return list(self.project_items.get(project_id, []))

    def list_folder_contents(self, token, hub_id, folder_id):
        self.calls.append(("list_folder_contents", token, hub_id, folder_id))
        return list(self.folder_contents.get((hub_id, folder_id), []))

    def resolve_project_ids(self, token, hub_name, project_name):
        self.calls.append(("resolve_project_ids", token, hub_name, project_name))
        return list(self.project_ids.get((hub_name, project_name), []))

    def resolve_component_version_ids(self, token, project_id, component_name):
        self.calls.append(("resolve_component_version_ids", token, project_id, component_name))
        return list(self.version_ids.get((project_id, component_name), []))

    def fetch_occurrence_page(self, token, component_version_id, cursor=None, timeout=None):
        self.calls.append(("fetch_occurrence_page", token, component_version_id, cursor, timeout))
        return self.occurrence_pages[component_version_id][cursor]

    def count(self, method: str) -> int:
        return sum(1 for c in self.calls if c[0] == method)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def make_provider():
    """Return the FakeProvider class so tests can build bespoke providers."""
    return FakeProvider


@pytest.fixture
def browse_provider() -> FakeProvider:
    """
    Hub H1 with project P1; P1 holds item I1 and folder F1.
    F1 holds a design item and a nested folder F2.
    """
    return FakeProvider(
        hubs=[HubRecord(id="H1", name="Hub One")],
        projects={"H1": [ProjectRecord(id="P1", name="Project One")]},
        project_items={"P1": [EntryRecord(type_name="DesignItem", id="I1", name="Bracket")]},
        folder_pages={"P1": [Page(records=[FolderRecord(id="F1", name="Designs", object_count=2)])]},
        folder_contents={
            ("H1", "F1"): [
                EntryRecord(type_name="DesignItem", id="I2", name="Gearbox"),
                EntryRecord(type_name="Folder", id="F2", name="Archive"),
            ]
        },
    )


@pytest.fixture
def hierarchy_provider() -> FakeProvider:
    """Project 'Bench' in hub 'Shop' with component 'Vise' spread across two pages."""
    return FakeProvider(
        project_ids={("Shop", "Bench"): ["P9"]},
        version_ids={("P9", "Vise"): ["CV-ROOT"]},
        occurrence_pages={
            "CV-ROOT": [
                Page(
                    records=[
                        OccurrenceRecord(child_id="CV-JAW", child_name="Jaw", parent_id=None),
                        OccurrenceRecord(child_id="CV-PAD", child_name="Pad", parent_id="CV-JAW"),
                    ],
                    next_cursor="c1",
                ),
                Page(
                    records=[
                        OccurrenceRecord(child_id="CV-SCREW", child_name="Screw", parent_id="CV-ROOT"),
                    ],
                    next_cursor=None,
                ),
            ]
        },
    )
