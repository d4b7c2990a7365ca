from __future__ import annotations

"""
Lazy Tree Expander.

Answers "what are the children of this node" for the hub / project /
folder / item hierarchy, fetching exactly one level per call. Child ids
embed the context (the owning hub) required to expand them later.
"""

import logging
from typing import List, Optional

from modelhierarchy.core.hierarchy.paginator import Deadline, collect_pages
from modelhierarchy.core.identifiers import (
    decode_node_id,
    folder_node_id,
    hub_node_id,
    item_node_id,
    project_node_id,
)
from modelhierarchy.core.provider import HierarchyProvider
from modelhierarchy.domain.constants import DEFAULT_MAX_PAGES, UNNAMED_HUB_LABEL
from modelhierarchy.domain.errors import UnsupportedExpansion
from modelhierarchy.domain.models import (
    ROOT_NODE_ID,
    EntryRecord,
    FolderRecord,
    NodeKind,
    NodeRef,
    Page,
    TreeNode,
)

logger = logging.getLogger(__name__)


class LazyTreeExpander:
    """
    One-level expansion of the resource hierarchy.

    Every call decodes the requested id, performs the provider call(s) for
    that level and returns freshly built TreeNode entries.
    """

    def __init__(
            self,
            provider: HierarchyProvider,
            token: str,
            *,
            max_pages: int = DEFAULT_MAX_PAGES,
            pagination_timeout: Optional[float] = None,
    ) -> None:
        self.provider = provider
        self.token = token
        self._max_pages = max_pages
        self._pagination_timeout = pagination_timeout

    def expand_node(self, node_id: Optional[str]) -> List[TreeNode]:
        """
        Return the direct children of a node.

        Args:
            node_id: Encoded node id; "#" (or empty) lists the hubs.

        Returns:
            List[TreeNode]: Children in display order.

        Raises:
            MalformedIdentifier: If the id cannot be decoded.
            UnsupportedExpansion: If the node is an item.
            ProviderRequestFailed: On any provider failure.
        """
        ref = decode_node_id(node_id)
        parent = ROOT_NODE_ID if ref.is_root else node_id
        logger.debug(f"Expanding node '{parent}'.")

        if ref.kind is None:
            return self._hubs()
        if ref.kind is NodeKind.HUB:
            return self._projects(ref, parent)
        if ref.kind is NodeKind.PROJECT:
            return self._project_contents(ref, parent)
        if ref.kind is NodeKind.FOLDER:
            return self._folder_contents(ref, parent)

        raise UnsupportedExpansion(parent, ref.kind.value)

    # -------------------------------------------------------------------------
    # LEVEL HANDLERS
    # -------------------------------------------------------------------------

    def _hubs(self) -> List[TreeNode]:
        return [
            TreeNode(
                id=hub_node_id(hub.id),
                parent=ROOT_NODE_ID,
                text=hub.name or UNNAMED_HUB_LABEL,
                type=NodeKind.HUB.value,
                children=True,
            )
            for hub in self.provider.list_hubs(self.token)
        ]

    def _projects(self, ref: NodeRef, parent: str) -> List[TreeNode]:
        hub_id = ref.own_id
        return [
            TreeNode(
                id=project_node_id(hub_id, project.id),
                parent=parent,
                text=project.name,
                type=NodeKind.PROJECT.value,
                children=True,
            )
            for project in self.provider.list_projects(self.token, hub_id)
        ]

    def _project_contents(self, ref: NodeRef, parent: str) -> List[TreeNode]:
        """Items stored directly in the project first, then its top-level folders."""
        hub_id, project_id = ref.hub_id, ref.own_id

        items = self.provider.list_items_in_project(self.token, project_id)
        nodes = [self._item_node(item, parent) for item in items]

        def fetch(cursor: Optional[str], timeout: Optional[float]) -> Page[FolderRecord]:
            return self.provider.list_folders_in_project(self.token, project_id, cursor, timeout=timeout)

        folders = collect_pages(
            fetch,
            max_pages=self._max_pages,
            deadline=Deadline(self._pagination_timeout),
            label="folders",
        )
        nodes.extend(
            TreeNode(
                id=folder_node_id(hub_id, folder.id),
                parent=parent,
                text=folder.name,
                type=NodeKind.FOLDER.value,
                children=True,
            )
            for folder in folders
        )
        return nodes

    def _folder_contents(self, ref: NodeRef, parent: str) -> List[TreeNode]:
        """Items and sub-folders of a folder; sub-folders stay in the same hub."""
        hub_id = ref.hub_id
        nodes: List[TreeNode] = []
        for entry in self.provider.list_folder_contents(self.token, hub_id, ref.own_id):
            if entry.is_folder:
                nodes.append(
                    TreeNode(
                        id=folder_node_id(hub_id, entry.id),
                        parent=parent,
                        text=_entry_label(entry),
                        type=NodeKind.FOLDER.value,
                        children=True,
                    )
                )
            else:
                nodes.append(self._item_node(entry, parent))
        return nodes

    @staticmethod
    def _item_node(entry: EntryRecord, parent: str) -> TreeNode:
        return TreeNode(
            id=item_node_id(entry.id),
            parent=parent,
            text=_entry_label(entry),
            type=NodeKind.ITEM.value,
            children=False,
        )


def _entry_label(entry: EntryRecord) -> str:
    return f"{entry.type_name}: {entry.name}"
