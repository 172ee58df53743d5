# appresync GraphQL Client
# ResyncApp mutation over HTTP

from collections.abc import Sequence
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from appresync.client.base import CacheInvalidator, TransportError
from appresync.sync.models import ResyncRequest, ResyncResponse

RESYNC_APP_MUTATION = """
mutation ResyncApp($appExternalID: String!, $appURL: String, $envID: UUID!) {
  resyncApp(appExternalID: $appExternalID, appURL: $appURL, envID: $envID) {
    app {
      id
    }
    error {
      code
      data
      message
    }
  }
}
"""


class GraphQLResyncClient:
    """
    Resync operation backed by the GraphQL API.

    After every response that reached the server, entries tagged with the
    requested typenames are dropped from the shared cache.
    """

    def __init__(
        self,
        endpoint: str,
        *,
        token: Optional[str] = None,
        timeout: float = 30.0,
        cache: Optional[CacheInvalidator] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize client.

        Args:
            endpoint: GraphQL endpoint URL.
            token: Optional bearer token.
            timeout: Request timeout in seconds.
            cache: Optional cache to invalidate after mutations.
            transport: Optional httpx transport (used by tests).
        """
        self.endpoint = endpoint
        self._token = token
        self._timeout = timeout
        self._cache = cache
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    async def _post(self, payload: dict[str, Any]) -> dict[str, Any]:
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.post(self.endpoint, json=payload, headers=self._headers())
        except httpx.HTTPError as e:
            raise TransportError(f"Request failed: {e}") from e

        if not response.is_success:
            raise TransportError(
                f"Unexpected status {response.status_code} from {self.endpoint}",
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except ValueError as e:
            raise TransportError(f"Invalid JSON response: {e}") from e

        if not isinstance(body, dict):
            raise TransportError("Response body is not an object")
        return body

    async def __call__(
        self,
        request: ResyncRequest,
        *,
        invalidate_tags: Sequence[str] = (),
    ) -> Optional[ResyncResponse]:
        body = await self._post(
            {
                "operationName": "ResyncApp",
                "query": RESYNC_APP_MUTATION,
                "variables": request.to_variables(),
            }
        )

        if self._cache is not None and invalidate_tags:
            self._cache.invalidate(invalidate_tags)

        errors = body.get("errors")
        if errors:
            messages = "; ".join(str(e.get("message", e)) if isinstance(e, dict) else str(e) for e in errors)
            raise TransportError(f"GraphQL error: {messages}")

        data = body.get("data")
        if not data:
            return None

        payload = data.get("resyncApp")
        if payload is None:
            return None

        try:
            return ResyncResponse.model_validate(payload)
        except ValidationError as e:
            raise TransportError(f"Malformed resyncApp payload: {e}") from e
