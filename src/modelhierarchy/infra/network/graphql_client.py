from __future__ import annotations

"""
GraphQL Transport Client.

Posts GraphQL documents over HTTPS with `requests` and returns the `data`
member of the response. Credentials travel in per-request headers; the
pooled session is never mutated, so one client can serve requests made
with different tokens.
"""

import logging
from typing import Any, Dict, Optional

import requests

from modelhierarchy.domain.errors import ProviderProtocolError, ProviderRequestFailed
from modelhierarchy.infra.network.common import DEFAULT_TIMEOUT, build_headers

logger = logging.getLogger(__name__)


class GraphQLClient:
    """
    Minimal synchronous GraphQL client.

    Attributes:
        timeout: Per-request timeout in seconds.
    """

    def __init__(self, session: Optional[requests.Session] = None, timeout: float = DEFAULT_TIMEOUT):
        self._session = session if session is not None else requests.Session()
        self.timeout = timeout

    def execute(
            self,
            url: str,
            query: str,
            token: str,
            variables: Optional[Dict[str, Any]] = None,
            timeout: Optional[float] = None,
    ) -> Dict[str, Any]:
        """
        Send a GraphQL document and return its `data` payload.

        Args:
            url: GraphQL endpoint.
            query: GraphQL document.
            token: Bearer token for this request only.
            variables: Query variables.
            timeout: Caps the client timeout for this request.

        Returns:
            Dict[str, Any]: The `data` member of the response.

        Raises:
            ProviderRequestFailed: On transport failures, non-2xx statuses or
                GraphQL `errors` payloads.
            ProviderProtocolError: If the body is not a GraphQL JSON response.
        """
        payload = {"query": query, "variables": variables or {}}
        effective_timeout = self.timeout if timeout is None else min(timeout, self.timeout)

        try:
            response = self._session.post(
                url,
                json=payload,
                headers=build_headers(token),
                timeout=effective_timeout,
            )
        except requests.exceptions.Timeout:
            logger.error(f"Network: GraphQL request to {url} timed out after {effective_timeout}s.")
            raise ProviderRequestFailed(None, f"Timed out after {effective_timeout}s") from None
        except requests.exceptions.RequestException as e:
            logger.error(f"Network: Communication error with {url}: {e}")
            raise ProviderRequestFailed(None, str(e)) from e

        if not response.ok:
            logger.error(f"Network: GraphQL request failed with HTTP {response.status_code}.")
            raise ProviderRequestFailed(response.status_code, response.text)

        try:
            body = response.json()
        except ValueError as e:
            raise ProviderProtocolError(f"Response from {url} is not valid JSON: {e}") from e

        if not isinstance(body, dict):
            raise ProviderProtocolError(f"Response from {url} is not a JSON object.")

        errors = body.get("errors")
        if errors:
            messages = "; ".join(_error_message(e) for e in errors)
            logger.error(f"Network: GraphQL errors returned by {url}: {messages}")
            raise ProviderRequestFailed(response.status_code, messages)

        data = body.get("data")
        if not isinstance(data, dict):
            raise ProviderProtocolError(f"Response from {url} carries no data object.")

        logger.debug(f"Network: GraphQL response received from {url} ({len(response.content)} bytes).")
        return data

    def close(self) -> None:
        self._session.close()


def _error_message(error: Any) -> str:
    if isinstance(error, dict):
        return str(error.get("message", error))
    return str(error)
