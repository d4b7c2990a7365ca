from __future__ import annotations

"""
Hierarchy Domain Error Taxonomy.

Defines the structured exceptions raised by the aggregation core and the
remote provider layer. Every error carries the attributes needed by the
interface layers to log the failure and decide user-facing messaging.
"""

from typing import Optional

# -----------------------------------------------------------------------------
# BASE ERROR
# -----------------------------------------------------------------------------

class HierarchyError(Exception):
    """Root of every error raised by the modelhierarchy package."""


# -----------------------------------------------------------------------------
# RESOLUTION ERRORS
# -----------------------------------------------------------------------------

class NotFound(HierarchyError):
    """A named remote resource could not be resolved."""


class ProjectNotFound(NotFound):
    """
    The named project does not exist under the named hub.

    Attributes:
        hub_name: Hub name used for the lookup.
        project_name: Project name used for the lookup.
    """

    def __init__(self, hub_name: str, project_name: str) -> None:
        self.hub_name = hub_name
        self.project_name = project_name
        super().__init__(f"Project '{project_name}' not found under hub '{hub_name}'.")


# -----------------------------------------------------------------------------
# PROVIDER ERRORS
# -----------------------------------------------------------------------------

class ProviderRequestFailed(HierarchyError):
    """
    Non-success response (or transport failure) from the remote provider.

    Attributes:
        status: HTTP status code, or None when no response was received.
        body: Raw response body or error description.
    """

    def __init__(self, status: Optional[int], body: str) -> None:
        self.status = status
        self.body = body
        label = status if status is not None else "no response"
        super().__init__(f"Provider request failed ({label}): {body}")


class ProviderProtocolError(HierarchyError):
    """The provider violated the contract expected by the aggregation core."""


class HierarchyCycleError(ProviderProtocolError):
    """
    A parent-reference cycle was detected while building or traversing a tree.

    Attributes:
        node_id: Identifier of the node that closed the cycle.
    """

    def __init__(self, node_id: str) -> None:
        self.node_id = node_id
        super().__init__(f"Cycle detected in component hierarchy at node '{node_id}'.")


class OrphanedOccurrence(ProviderProtocolError):
    """
    An occurrence references a parent that never appears in the result set.

    Only raised when the orphan policy is strict; the default policy drops
    such occurrences.
    """

    def __init__(self, child_id: str, parent_id: str) -> None:
        self.child_id = child_id
        self.parent_id = parent_id
        super().__init__(
            f"Occurrence '{child_id}' references unknown parent '{parent_id}'."
        )


class AmbiguousMatch(ProviderProtocolError):
    """A name lookup returned several candidates while first-match is disabled."""

    def __init__(self, what: str, name: str, count: int) -> None:
        self.what = what
        self.name = name
        self.count = count
        super().__init__(f"{count} {what} candidates match '{name}'.")


class DeadlineExceeded(HierarchyError):
    """The caller-supplied deadline expired before the operation completed."""


# -----------------------------------------------------------------------------
# CLIENT ERRORS
# -----------------------------------------------------------------------------

class MalformedIdentifier(HierarchyError):
    """
    A client-supplied node identifier could not be decoded.

    Attributes:
        node_id: The rejected identifier.
        reason: Short description of the decoding failure.
    """

    def __init__(self, node_id: str, reason: str) -> None:
        self.node_id = node_id
        self.reason = reason
        super().__init__(f"Malformed node id '{node_id}': {reason}")


class UnsupportedExpansion(HierarchyError):
    """Expansion was requested for a node kind that has no children."""

    def __init__(self, node_id: str, kind: str) -> None:
        self.node_id = node_id
        self.kind = kind
        super().__init__(f"Node '{node_id}' of kind '{kind}' cannot be expanded.")
