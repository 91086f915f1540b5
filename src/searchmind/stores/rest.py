"""REST record store for Firebase-style realtime databases.

Collections are read with ``GET {base_url}/{locator}.json``; the database
answers with the JSON value at that location, or ``null`` if empty.
"""

from typing import Any

import httpx

from searchmind.exceptions import FileAccessDeniedError, InternalError
from searchmind.stores.base import RecordStore
from searchmind.utils.logging import get_logger
from searchmind.utils.retry import with_retry

logger = get_logger(__name__)


class RestRecordStore(RecordStore):
    """Record store reading JSON snapshots over HTTP."""

    def __init__(
        self,
        base_url: str,
        auth_token: str | None = None,
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the REST store.

        Args:
            base_url: Database root, e.g. ``https://<db>.firebaseio.com``.
            auth_token: Optional token sent as the ``auth`` query parameter.
            timeout: Request timeout in seconds.
            client: Pre-built client (tests pass one with a mock transport).
        """
        self._base_url = base_url.rstrip("/")
        self._auth_token = auth_token
        self._timeout = timeout
        self._client = client
        self._owns_client = client is None

    def _get_client(self) -> httpx.AsyncClient:
        """Lazily create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    def url_for(self, locator: str) -> str:
        """Build the snapshot URL for a locator."""
        return f"{self._base_url}/{locator.strip('/')}.json"

    @with_retry(
        max_attempts=3,
        min_wait=0.5,
        max_wait=5.0,
        retry_on=(httpx.TransportError,),
    )
    async def _get(self, url: str) -> httpx.Response:
        params = {"auth": self._auth_token} if self._auth_token else None
        return await self._get_client().get(url, params=params)

    async def fetch_collection(self, locator: str) -> Any | None:
        url = self.url_for(locator)
        logger.debug("Fetching collection %s", url)

        try:
            response = await self._get(url)
        except httpx.HTTPError as e:
            raise InternalError(f"Failed to fetch '{locator}': {e}") from e

        if response.status_code in (401, 403):
            raise FileAccessDeniedError(locator)
        if response.status_code == 404:
            return None
        if response.is_error:
            raise InternalError(
                f"Failed to fetch '{locator}': HTTP {response.status_code}"
            )

        try:
            return response.json()
        except ValueError as e:
            raise InternalError(f"Malformed JSON for '{locator}': {e}") from e

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
