# appresync Client Interfaces
# Abstract resync operation and cache invalidation

from collections.abc import Iterable, Sequence
from typing import Optional, Protocol

from appresync.sync.models import ResyncRequest, ResyncResponse


class TransportError(Exception):
    """The resync request could not be completed."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ResyncOperation(Protocol):
    """
    Remote resync operation.

    Returns the parsed response body, or None when the server returned no
    data. Raises on transport failures.
    """

    async def __call__(
        self,
        request: ResyncRequest,
        *,
        invalidate_tags: Sequence[str] = (),
    ) -> Optional[ResyncResponse]: ...


class CacheInvalidator(Protocol):
    """Drops cached entries by tag."""

    def invalidate(self, tags: Iterable[str]) -> int: ...
