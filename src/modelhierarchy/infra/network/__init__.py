from __future__ import annotations

"""
Network Communication Infrastructure.

Exposes the GraphQL transport and the provider implementation built on it.
"""

from modelhierarchy.infra.network.common import DEFAULT_TIMEOUT, USER_AGENT, build_headers
from modelhierarchy.infra.network.graphql_client import GraphQLClient
from modelhierarchy.infra.network.graphql_provider import GraphQLHierarchyProvider

__all__ = [
    "GraphQLClient",
    "GraphQLHierarchyProvider",
    "build_headers",
    "DEFAULT_TIMEOUT",
    "USER_AGENT",
]
