from __future__ import annotations

"""
Hierarchy Domain Data Models.

Defines the records returned by the remote hierarchy provider, the decoded
node references used by the lazy tree browser, and the materialized
component tree built from occurrence records.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")

ROOT_NODE_ID = "#"
FOLDER_TYPENAME = "Folder"

# -----------------------------------------------------------------------------
# NODE IDENTIFICATION
# -----------------------------------------------------------------------------

class NodeKind(str, Enum):
    """Levels of the hub/project/folder/item resource hierarchy."""
    HUB = "hub"
    PROJECT = "project"
    FOLDER = "folder"
    ITEM = "item"


@dataclass(frozen=True)
class NodeRef:
    """
    Decoded form of a composite node identifier.

    Attributes:
        kind: Node kind, or None for the root sentinel.
        own_id: Remote identifier of the node itself.
        hub_id: Owning hub identifier (projects and folders only).
    """
    kind: Optional[NodeKind] = None
    own_id: Optional[str] = None
    hub_id: Optional[str] = None

    @property
    def is_root(self) -> bool:
        return self.kind is None


@dataclass(frozen=True)
class TreeNode:
    """
    One entry of a lazily expanded tree level.

    Attributes:
        id: Encoded node identifier.
        parent: Encoded identifier of the expanded node ("#" for top level).
        text: Display label.
        type: Node kind value.
        children: Whether the node can be expanded further.
    """
    id: str
    parent: str
    text: str
    type: str
    children: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "parent": self.parent,
            "text": self.text,
            "type": self.type,
            "children": self.children,
        }

# -----------------------------------------------------------------------------
# PROVIDER RECORDS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Page(Generic[T]):
    """A single result page and the cursor of the next one (None when last)."""
    records: List[T]
    next_cursor: Optional[str] = None


@dataclass(frozen=True)
class HubRecord:
    id: str
    name: Optional[str]


@dataclass(frozen=True)
class ProjectRecord:
    id: str
    name: str


@dataclass(frozen=True)
class FolderRecord:
    id: str
    name: str
    object_count: int = 0


@dataclass(frozen=True)
class EntryRecord:
    """
    Member of a heterogeneous collection (items and sub-folders).

    Attributes:
        type_name: Provider type discriminator (e.g. "DesignItem", "Folder").
        id: Remote identifier.
        name: Display name.
    """
    type_name: str
    id: str
    name: str

    @property
    def is_folder(self) -> bool:
        return self.type_name == FOLDER_TYPENAME


@dataclass(frozen=True)
class OccurrenceRecord:
    """
    One parent/child edge of the component assembly graph.

    Attributes:
        child_id: Component version id of the occurrence.
        child_name: Component version name of the occurrence.
        parent_id: Parent component version id, None for top-level occurrences.
    """
    child_id: str
    child_name: str
    parent_id: Optional[str] = None


@dataclass(frozen=True)
class FolderItem:
    """Flattened inventory entry locating a folder or item in its hub and project."""
    type_name: str
    name: str
    hub_id: str
    project_id: str
    folder_id: str

# -----------------------------------------------------------------------------
# MATERIALIZED TREES
# -----------------------------------------------------------------------------

@dataclass
class ComponentNode:
    """Node of the materialized component hierarchy."""
    id: str
    name: str
    children: List["ComponentNode"] = field(default_factory=list)


@dataclass
class OutlineNode:
    """Node recovered from indentation text; mirrors the UI tree widget shape."""
    text: str
    children: List["OutlineNode"] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"text": self.text}
        if self.children:
            data["children"] = [c.to_dict() for c in self.children]
        return data


@dataclass(frozen=True)
class HierarchyResult:
    """
    Outcome of a component hierarchy request.

    Attributes:
        component_version_id: Resolved root version id, None when unresolved.
        hierarchy_text: Indentation text form of the tree.
        root: Materialized tree, None when the component was not resolved.
    """
    component_version_id: Optional[str]
    hierarchy_text: str
    root: Optional[ComponentNode] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "componentVersionId": self.component_version_id,
            "hierarchy": self.hierarchy_text,
        }
