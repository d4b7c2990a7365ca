from __future__ import annotations

"""
Flattened Resource Inventory.

Eagerly walks hubs -> projects -> folders (-> folder contents) and returns
flat records locating every folder or folder entry. Unlike the lazy
expander this materializes the whole hierarchy, so it is meant for
reporting rather than interactive browsing.
"""

import logging
from typing import Iterator, List, Optional, Tuple

from modelhierarchy.core.hierarchy.paginator import Deadline, collect_pages
from modelhierarchy.core.provider import HierarchyProvider
from modelhierarchy.domain.constants import DEFAULT_MAX_PAGES
from modelhierarchy.domain.models import FolderItem, FolderRecord, Page

logger = logging.getLogger(__name__)

FOLDERS_TYPENAME = "folders"


def list_all_folders(
        provider: HierarchyProvider,
        token: str,
        *,
        max_pages: int = DEFAULT_MAX_PAGES,
        deadline: Optional[Deadline] = None,
) -> List[FolderItem]:
    """Return every top-level project folder across all hubs."""
    return [
        FolderItem(
            type_name=FOLDERS_TYPENAME,
            name=folder.name,
            hub_id=hub_id,
            project_id=project_id,
            folder_id=folder.id,
        )
        for hub_id, project_id, folder in _walk_folders(provider, token, max_pages, deadline)
    ]


def list_all_folder_items(
        provider: HierarchyProvider,
        token: str,
        *,
        max_pages: int = DEFAULT_MAX_PAGES,
        deadline: Optional[Deadline] = None,
) -> List[FolderItem]:
    """Return the entries of every top-level project folder across all hubs."""
    out: List[FolderItem] = []
    for hub_id, project_id, folder in _walk_folders(provider, token, max_pages, deadline):
        for entry in provider.list_folder_contents(token, hub_id, folder.id):
            out.append(
                FolderItem(
                    type_name=entry.type_name,
                    name=entry.name,
                    hub_id=hub_id,
                    project_id=project_id,
                    folder_id=folder.id,
                )
            )
    logger.info(f"Inventory collected {len(out)} folder entries.")
    return out


def _walk_folders(
        provider: HierarchyProvider,
        token: str,
        max_pages: int,
        deadline: Optional[Deadline],
) -> Iterator[Tuple[str, str, FolderRecord]]:
    for hub in provider.list_hubs(token):
        for project in provider.list_projects(token, hub.id):
            if deadline is not None:
                deadline.check("walking the folder inventory")

            def fetch(
                    cursor: Optional[str],
                    timeout: Optional[float],
                    project_id: str = project.id,
            ) -> Page[FolderRecord]:
                return provider.list_folders_in_project(token, project_id, cursor, timeout=timeout)

            folders = collect_pages(fetch, max_pages=max_pages, deadline=deadline, label="folders")
            for folder in folders:
                yield hub.id, project.id, folder
