from __future__ import annotations

"""
Cursor Pagination Engine.

Drives the cursor-following fetch loop against the remote provider and
accumulates every page into a single ordered list. The loop is bounded by
a page cap and, optionally, by a wall-clock deadline so a provider that
never stops handing out cursors cannot keep the caller spinning.
"""

import logging
import time
from typing import Callable, List, Optional, Set, TypeVar

from modelhierarchy.core.provider import HierarchyProvider
from modelhierarchy.domain.constants import DEFAULT_MAX_PAGES
from modelhierarchy.domain.errors import (
    DeadlineExceeded,
    ProviderProtocolError,
    ProviderRequestFailed,
)
from modelhierarchy.domain.models import OccurrenceRecord, Page

logger = logging.getLogger(__name__)

T = TypeVar("T")

# -----------------------------------------------------------------------------
# DEADLINE
# -----------------------------------------------------------------------------

class Deadline:
    """
    Monotonic wall-clock budget shared by the calls of one operation.

    A budget of None or <= 0 never expires.
    """

    def __init__(self, seconds: Optional[float] = None, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._expires_at = clock() + seconds if seconds and seconds > 0 else None

    @property
    def remaining(self) -> Optional[float]:
        if self._expires_at is None:
            return None
        return max(0.0, self._expires_at - self._clock())

    def expired(self) -> bool:
        return self._expires_at is not None and self._clock() >= self._expires_at

    def check(self, what: str) -> None:
        """Raise DeadlineExceeded if the budget is spent."""
        if self.expired():
            raise DeadlineExceeded(f"Deadline exceeded while {what}.")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def collect_pages(
        fetch_page: Callable[[Optional[str], Optional[float]], Page[T]],
        *,
        max_pages: int = DEFAULT_MAX_PAGES,
        deadline: Optional[Deadline] = None,
        label: str = "records",
) -> List[T]:
    """
    Follow continuation cursors until the provider reports the last page.

    Args:
        fetch_page: Callable returning the page for a cursor (None for the first)
            and a request timeout (None when no deadline applies).
        max_pages: Maximum number of pages accepted before giving up.
        deadline: Optional budget checked before every page request; its
            remaining time caps each request.
        label: Human-readable name of the collection, used in logs and errors.

    Returns:
        List[T]: Records of all pages, in page order.

    Raises:
        ProviderProtocolError: If the page cap is exceeded or a cursor repeats.
        DeadlineExceeded: If the deadline expires between or during page requests.
    """
    records: List[T] = []
    seen_cursors: Set[str] = set()
    cursor: Optional[str] = None
    pages = 0

    while True:
        if pages >= max_pages:
            raise ProviderProtocolError(
                f"Pagination of {label} exceeded {max_pages} pages without a final cursor."
            )
        if deadline is not None:
            deadline.check(f"paginating {label}")

        timeout = deadline.remaining if deadline is not None else None
        try:
            page = fetch_page(cursor, timeout)
        except ProviderRequestFailed as e:
            if deadline is not None and deadline.expired():
                raise DeadlineExceeded(f"Deadline exceeded while paginating {label}.") from e
            raise
        pages += 1
        records.extend(page.records)
        logger.debug(f"Fetched page {pages} of {label}: {len(page.records)} record(s).")

        cursor = page.next_cursor
        if not cursor:
            break
        if cursor in seen_cursors:
            raise ProviderProtocolError(
                f"Provider repeated cursor '{cursor}' while paginating {label}."
            )
        seen_cursors.add(cursor)

    logger.info(f"Collected {len(records)} {label} across {pages} page(s).")
    return records


def fetch_all_occurrences(
        provider: HierarchyProvider,
        token: str,
        component_version_id: str,
        *,
        max_pages: int = DEFAULT_MAX_PAGES,
        deadline: Optional[Deadline] = None,
) -> List[OccurrenceRecord]:
    """
    Accumulate every occurrence record below a root component version.

    A provider failure on any page aborts the whole fetch; no partial result
    is returned.
    """
    def fetch(cursor: Optional[str], timeout: Optional[float]) -> Page[OccurrenceRecord]:
        return provider.fetch_occurrence_page(token, component_version_id, cursor, timeout=timeout)

    return collect_pages(fetch, max_pages=max_pages, deadline=deadline, label="occurrences")
