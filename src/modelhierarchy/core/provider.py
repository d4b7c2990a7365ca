from __future__ import annotations

"""
Remote Hierarchy Provider Contract.

Abstract interface the aggregation core consumes. Concrete providers own the
wire protocol; the core only relies on the records and pages defined here.
The bearer token is an explicit argument of every call so that no provider
needs per-request mutable state.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from modelhierarchy.domain.models import (
    EntryRecord,
    FolderRecord,
    HubRecord,
    OccurrenceRecord,
    Page,
    ProjectRecord,
)


class HierarchyProvider(ABC):
    """
    Abstract source of hubs, projects, folders, items and occurrences.

    Implementations raise ProviderRequestFailed for any non-success response
    and ProviderProtocolError for responses that do not match the contract.
    """

    @abstractmethod
    def list_hubs(self, token: str) -> List[HubRecord]:
        """Return every hub visible to the token."""

    @abstractmethod
    def list_projects(self, token: str, hub_id: str) -> List[ProjectRecord]:
        """Return the projects of a hub."""

    @abstractmethod
    def list_folders_in_project(
            self,
            token: str,
            project_id: str,
            cursor: Optional[str] = None,
            timeout: Optional[float] = None,
    ) -> Page[FolderRecord]:
        """
        Return one page of top-level folders of a project.

        `timeout` caps the request time in seconds when set.
        """

    @abstractmethod
    def list_items_in_project(self, token: str, project_id: str) -> List[EntryRecord]:
        """Return the items stored directly in a project."""

    @abstractmethod
    def list_folder_contents(self, token: str, hub_id: str, folder_id: str) -> List[EntryRecord]:
        """Return items and sub-folders of a folder, discriminated by type name."""

    @abstractmethod
    def resolve_project_ids(self, token: str, hub_name: str, project_name: str) -> List[str]:
        """Return the ids of the projects matching the names, in provider order."""

    @abstractmethod
    def resolve_component_version_ids(
            self,
            token: str,
            project_id: str,
            component_name: str,
    ) -> List[str]:
        """Return the tip root component version ids of matching design items."""

    @abstractmethod
    def fetch_occurrence_page(
            self,
            token: str,
            component_version_id: str,
            cursor: Optional[str] = None,
            timeout: Optional[float] = None,
    ) -> Page[OccurrenceRecord]:
        """
        Return one page of occurrences below a root component version.

        `timeout` caps the request time in seconds when set.
        """
