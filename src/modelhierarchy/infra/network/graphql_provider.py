from __future__ import annotations

"""
GraphQL Hierarchy Provider.

Implements the remote hierarchy provider contract on top of the design
data GraphQL endpoints: the data endpoint serves hubs, folders and folder
contents; the manufacturing endpoint serves projects, name resolution and
component occurrences.
"""

import logging
from typing import Any, Dict, List, Optional

from modelhierarchy.core.provider import HierarchyProvider
from modelhierarchy.domain.constants import DATA_API_URL, MFG_API_URL
from modelhierarchy.domain.errors import ProviderProtocolError
from modelhierarchy.domain.models import (
    EntryRecord,
    FolderRecord,
    HubRecord,
    OccurrenceRecord,
    Page,
    ProjectRecord,
)
from modelhierarchy.infra.network import queries
from modelhierarchy.infra.network.graphql_client import GraphQLClient

logger = logging.getLogger(__name__)


class GraphQLHierarchyProvider(HierarchyProvider):
    """
    Remote hierarchy provider backed by GraphQL.

    Attributes:
        client: Transport used for every query.
        data_url: Endpoint for hubs, folders and items.
        mfg_url: Endpoint for projects, resolution and occurrences.
    """

    def __init__(
            self,
            client: Optional[GraphQLClient] = None,
            *,
            data_url: str = DATA_API_URL,
            mfg_url: str = MFG_API_URL,
    ) -> None:
        self.client = client if client is not None else GraphQLClient()
        self.data_url = data_url
        self.mfg_url = mfg_url

    # -------------------------------------------------------------------------
    # BROWSING
    # -------------------------------------------------------------------------

    def list_hubs(self, token: str) -> List[HubRecord]:
        data = self.client.execute(self.data_url, queries.HUBS_QUERY, token)
        return [
            HubRecord(id=_required(r, "id", "hub"), name=r.get("name"))
            for r in _results(data.get("hubs"))
        ]

    def list_projects(self, token: str, hub_id: str) -> List[ProjectRecord]:
        data = self.client.execute(
            self.mfg_url, queries.PROJECTS_QUERY, token, {"hubId": hub_id, "filter": {}}
        )
        return [
            ProjectRecord(id=_required(r, "id", "project"), name=r.get("name") or "")
            for r in _results(data.get("projects"))
        ]

    def list_folders_in_project(
            self,
            token: str,
            project_id: str,
            cursor: Optional[str] = None,
            timeout: Optional[float] = None,
    ) -> Page[FolderRecord]:
        data = self.client.execute(
            self.data_url,
            queries.FOLDERS_BY_PROJECT_QUERY,
            token,
            {"projectId": project_id, "cursor": cursor},
            timeout=timeout,
        )
        block = data.get("foldersByProject")
        records = [
            FolderRecord(
                id=_required(r, "id", "folder"),
                name=r.get("name") or "",
                object_count=int(r.get("objectCount") or 0),
            )
            for r in _results(block)
        ]
        return Page(records=records, next_cursor=_next_cursor(block))

    def list_items_in_project(self, token: str, project_id: str) -> List[EntryRecord]:
        data = self.client.execute(
            self.data_url, queries.ITEMS_BY_PROJECT_QUERY, token, {"projectId": project_id}
        )
        return [_entry(r) for r in _results(data.get("itemsByProject"))]

    def list_folder_contents(self, token: str, hub_id: str, folder_id: str) -> List[EntryRecord]:
        data = self.client.execute(
            self.data_url,
            queries.ITEMS_BY_FOLDER_QUERY,
            token,
            {"hubId": hub_id, "folderId": folder_id},
        )
        return [_entry(r) for r in _results(data.get("itemsByFolder"))]

    # -------------------------------------------------------------------------
    # RESOLUTION AND OCCURRENCES
    # -------------------------------------------------------------------------

    def resolve_project_ids(self, token: str, hub_name: str, project_name: str) -> List[str]:
        data = self.client.execute(
            self.mfg_url,
            queries.PROJECT_ID_QUERY,
            token,
            {"hubName": hub_name, "projectName": project_name},
        )
        ids: List[str] = []
        for hub in _results(data.get("hubs")):
            for project in _results(hub.get("projects")):
                if project.get("id"):
                    ids.append(project["id"])
        return ids

    def resolve_component_version_ids(
            self,
            token: str,
            project_id: str,
            component_name: str,
    ) -> List[str]:
        data = self.client.execute(
            self.mfg_url,
            queries.COMPONENT_VERSION_ID_QUERY,
            token,
            {"projectId": project_id, "componentName": component_name},
        )
        project = data.get("project") or {}
        ids: List[str] = []
        for item in _results(project.get("items")):
            tip = item.get("tipRootComponentVersion") or {}
            if tip.get("id"):
                ids.append(tip["id"])
        return ids

    def fetch_occurrence_page(
            self,
            token: str,
            component_version_id: str,
            cursor: Optional[str] = None,
            timeout: Optional[float] = None,
    ) -> Page[OccurrenceRecord]:
        data = self.client.execute(
            self.mfg_url,
            queries.OCCURRENCES_QUERY,
            token,
            {"componentVersionId": component_version_id, "cursor": cursor},
            timeout=timeout,
        )
        version = data.get("componentVersion") or {}
        block = version.get("allOccurrences")
        if block is None:
            logger.debug(f"No occurrence block returned for '{component_version_id}'.")
            return Page(records=[], next_cursor=None)

        records = []
        for r in _results(block):
            child = r.get("componentVersion") or {}
            parent = r.get("parentComponentVersion") or {}
            records.append(
                OccurrenceRecord(
                    child_id=_required(child, "id", "occurrence"),
                    child_name=child.get("name") or "",
                    parent_id=parent.get("id"),
                )
            )
        return Page(records=records, next_cursor=_next_cursor(block))

# -----------------------------------------------------------------------------
# RESPONSE HELPERS
# -----------------------------------------------------------------------------

def _results(block: Any) -> List[Dict[str, Any]]:
    """Extract the `results` list of a connection block (absent -> empty)."""
    if not block:
        return []
    if not isinstance(block, dict):
        raise ProviderProtocolError(f"Expected a result block, received {type(block).__name__}.")
    results = block.get("results") or []
    if not isinstance(results, list):
        raise ProviderProtocolError("Result block 'results' is not a list.")
    return [r for r in results if isinstance(r, dict)]


def _next_cursor(block: Optional[Dict[str, Any]]) -> Optional[str]:
    pagination = (block or {}).get("pagination") or {}
    return pagination.get("cursor") or None


def _required(record: Dict[str, Any], key: str, what: str) -> str:
    value = record.get(key)
    if not value:
        raise ProviderProtocolError(f"{what.capitalize()} record is missing '{key}'.")
    return str(value)


def _entry(record: Dict[str, Any]) -> EntryRecord:
    return EntryRecord(
        type_name=record.get("__typename") or "",
        id=_required(record, "id", "entry"),
        name=record.get("name") or "",
    )
