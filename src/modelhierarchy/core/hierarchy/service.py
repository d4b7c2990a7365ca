from __future__ import annotations

"""
Component Hierarchy Service.

Orchestrates a full hierarchy request: resolves the named project and
component, paginates all occurrences of the component's tip version, builds
the tree and renders it.
"""

import logging
from typing import List, Optional

from modelhierarchy.core.hierarchy.builder import build_hierarchy_tree
from modelhierarchy.core.hierarchy.paginator import Deadline, fetch_all_occurrences
from modelhierarchy.core.hierarchy.renderer import render_hierarchy_text
from modelhierarchy.core.provider import HierarchyProvider
from modelhierarchy.domain.constants import (
    DEFAULT_INDENT_WIDTH,
    DEFAULT_MAX_PAGES,
    ROOT_LINE_TEMPLATE,
)
from modelhierarchy.domain.errors import AmbiguousMatch, ProjectNotFound
from modelhierarchy.domain.models import HierarchyResult

logger = logging.getLogger(__name__)


class HierarchyService:
    """
    Produces the component hierarchy of a named design.

    Attributes:
        provider: Remote hierarchy provider.
        token: Bearer token forwarded to every provider call.
    """

    def __init__(
            self,
            provider: HierarchyProvider,
            token: str,
            *,
            max_pages: int = DEFAULT_MAX_PAGES,
            pagination_timeout: Optional[float] = None,
            indent_width: int = DEFAULT_INDENT_WIDTH,
            drop_orphans: bool = True,
            first_match_wins: bool = True,
    ) -> None:
        self.provider = provider
        self.token = token
        self._max_pages = max_pages
        self._pagination_timeout = pagination_timeout
        self._indent_width = indent_width
        self._drop_orphans = drop_orphans
        self._first_match_wins = first_match_wins

    def get_component_hierarchy(
            self,
            hub_name: str,
            project_name: str,
            component_name: str,
    ) -> HierarchyResult:
        """
        Resolve, fetch, build and render the hierarchy of a component.

        An unknown project is an error. An unknown component is not: the
        result then carries no version id and a single root line.

        Raises:
            ProjectNotFound: If the project cannot be resolved under the hub.
            AmbiguousMatch: If several candidates match and first-match is disabled.
            ProviderRequestFailed: On any provider failure.
            ProviderProtocolError: On pagination or tree consistency violations.
        """
        logger.info(f"Resolving hierarchy for '{component_name}' in {hub_name}/{project_name}.")

        project_ids = self.provider.resolve_project_ids(self.token, hub_name, project_name)
        project_id = self._pick(project_ids, "project", project_name)
        if project_id is None:
            raise ProjectNotFound(hub_name, project_name)

        version_ids = self.provider.resolve_component_version_ids(
            self.token, project_id, component_name
        )
        version_id = self._pick(version_ids, "component", component_name)
        if version_id is None:
            logger.warning(f"Component '{component_name}' has no resolvable version.")
            return HierarchyResult(
                component_version_id=None,
                hierarchy_text=ROOT_LINE_TEMPLATE.format(name=component_name) + "\n",
            )

        occurrences = fetch_all_occurrences(
            self.provider,
            self.token,
            version_id,
            max_pages=self._max_pages,
            deadline=Deadline(self._pagination_timeout),
        )
        root = build_hierarchy_tree(
            version_id, component_name, occurrences, drop_orphans=self._drop_orphans
        )
        text = render_hierarchy_text(root, self._indent_width)

        return HierarchyResult(component_version_id=version_id, hierarchy_text=text, root=root)

    def _pick(self, candidates: List[str], what: str, name: str) -> Optional[str]:
        """Apply the first-match policy to a resolution result."""
        if not candidates:
            return None
        if len(candidates) > 1:
            if not self._first_match_wins:
                raise AmbiguousMatch(what, name, len(candidates))
            logger.debug(f"{len(candidates)} {what} candidates match '{name}'; using the first.")
        return candidates[0]
