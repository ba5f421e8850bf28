"""aoe4guides.com API clients built on httpx.

``OrdaClient`` wraps one ``httpx.AsyncClient`` and ``SyncOrdaClient``
wraps one ``httpx.Client``. The pooled httpx client is created in
``__init__`` and held until ``close()``, so every call on the same
client object reuses connections. httpx pools are safe for concurrent
use, and query encoding and decoding are pure, so one client can serve
many concurrent requests without extra locking.

Every call is a single GET: no retries, no caching. Failures surface as
``TransportError`` (no response) or ``DecodeError`` /
``UnexpectedStatus`` (a response the schema cannot accept).

Usage:
    async with OrdaClient() as client:
        builds = await client.get_builds(Civilization.FRE, SortBy.SCORE)
        build = await client.get_build(builds[0].id)

    with SyncOrdaClient() as client:
        status = client.get_status()
"""

import logging
from typing import Any, Callable, TypeVar
from urllib.parse import quote

import httpx
from typing_extensions import Self

from orda.config import ClientConfig
from orda.decode import decode_build, decode_build_list, decode_status
from orda.exceptions import DecodeError, TransportError, UnexpectedStatus
from orda.models import BuildOrder, Status
from orda.query import Civilization, Query, SortBy

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _segment(value: str, name: str) -> str:
    """Percent-encode an opaque identifier for use as one path segment."""
    if not value:
        raise ValueError(f"{name} must be a non-empty string")
    # dot segments are collapsed by URL normalisation and would change the route
    if value in (".", ".."):
        raise ValueError(f"{name} must not be {value!r}")
    return quote(value, safe="")


class _BaseClient:
    """Route building, response checking and counters shared by both clients."""

    def __init__(self, config: ClientConfig | None = None):
        if config is None:
            config = ClientConfig()

        self._config = config
        self._request_count = 0
        self._success_count = 0
        self._failure_count = 0

    @property
    def config(self) -> ClientConfig:
        return self._config

    def _client_kwargs(self, transport: Any) -> dict[str, Any]:
        kwargs: dict[str, Any] = {
            "base_url": self._config.base_url,
            "timeout": self._config.timeout,
            "headers": {
                "Accept": "application/json",
                "User-Agent": self._config.user_agent,
            },
        }
        if transport is not None:
            kwargs["transport"] = transport
        return kwargs

    @staticmethod
    def _builds_path() -> str:
        return "/builds"

    @staticmethod
    def _build_path(build_id: str) -> str:
        return f"/builds/{_segment(build_id, 'build_id')}"

    @staticmethod
    def _favorites_path(user_id: str) -> str:
        return f"/favorites/{_segment(user_id, 'user_id')}"

    def _url(self, path: str) -> str:
        return f"{self._config.base_url}{path}"

    def _transport_failed(self, url: str, exc: httpx.HTTPError) -> TransportError:
        self._failure_count += 1
        logger.warning("GET %s failed: %s: %s", url, type(exc).__name__, exc)
        return TransportError(f"Failed to fetch {url}: {exc}", url=url)

    def _finish(
        self, url: str, response: httpx.Response, decode: Callable[[bytes], T]
    ) -> T:
        """Check status and decode; attach url/status to any DecodeError."""
        body = response.content
        logger.debug(
            "GET %s -> %d (%d bytes)", url, response.status_code, len(body)
        )
        if not response.is_success:
            self._failure_count += 1
            logger.warning("GET %s returned HTTP %d", url, response.status_code)
            raise UnexpectedStatus(
                f"HTTP {response.status_code} from {url}",
                url=url,
                status_code=response.status_code,
            )
        try:
            result = decode(body)
        except DecodeError as exc:
            self._failure_count += 1
            exc.url = url
            exc.status_code = response.status_code
            logger.warning("GET %s returned an undecodable body: %s", url, exc)
            raise
        self._success_count += 1
        return result

    @property
    def stats(self) -> dict:
        """Return current client statistics."""
        total = self._request_count
        return {
            "requests": total,
            "successes": self._success_count,
            "failures": self._failure_count,
            "success_rate": (self._success_count / total) if total > 0 else 0.0,
        }


class OrdaClient(_BaseClient):
    """Asynchronous client for the aoe4guides.com build order API.

    Args:
        config: Base URL, timeout and User-Agent. Defaults to ClientConfig().
        transport: Optional httpx async transport, e.g. ``httpx.MockTransport``
            in tests or a custom ``httpx.AsyncHTTPTransport`` for proxies.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        super().__init__(config)
        self._http = httpx.AsyncClient(**self._client_kwargs(transport))

    async def _get(
        self, path: str, query: Query | None, decode: Callable[[bytes], T]
    ) -> T:
        url = self._url(path)
        params = query.to_params() if query is not None else {}
        self._request_count += 1
        logger.debug("GET %s params=%s", url, params)
        try:
            response = await self._http.get(path, params=params)
        except httpx.HTTPError as exc:
            raise self._transport_failed(url, exc) from exc
        return self._finish(url, response, decode)

    async def get_status(self) -> Status:
        """Fetch API health (``{"status": "running"}`` today)."""
        return await self._get("/status", None, decode_status)

    async def get_builds(
        self,
        civ: Civilization = Civilization.ANY,
        order_by: SortBy | None = None,
        overlay: bool = False,
    ) -> list[BuildOrder]:
        """Fetch build orders; the server caps the list at 10.

        Args:
            civ: Civilization filter. ``Civilization.ANY`` disables it.
            order_by: Sort criterion, or None for the server's default order.
            overlay: Request the overlay-friendly variant used by stream
                overlays.
        """
        query = Query.from_parts(civ, order_by, overlay)
        return await self._get(self._builds_path(), query, decode_build_list)

    async def get_build(self, build_id: str, overlay: bool = False) -> BuildOrder:
        """Fetch one build order by its server-assigned id."""
        query = Query.from_parts(overlay=overlay)
        return await self._get(self._build_path(build_id), query, decode_build)

    async def get_favorites(
        self,
        user_id: str,
        civ: Civilization = Civilization.ANY,
        order_by: SortBy | None = None,
        overlay: bool = False,
    ) -> list[BuildOrder]:
        """Fetch the build orders a user marked as favorite."""
        query = Query.from_parts(civ, order_by, overlay)
        return await self._get(self._favorites_path(user_id), query, decode_build_list)

    async def close(self) -> None:
        """Close the connection pool. Safe to call more than once."""
        await self._http.aclose()

    @property
    def is_closed(self) -> bool:
        return self._http.is_closed

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()


class SyncOrdaClient(_BaseClient):
    """Blocking counterpart of OrdaClient over ``httpx.Client``."""

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ):
        super().__init__(config)
        self._http = httpx.Client(**self._client_kwargs(transport))

    def _get(self, path: str, query: Query | None, decode: Callable[[bytes], T]) -> T:
        url = self._url(path)
        params = query.to_params() if query is not None else {}
        self._request_count += 1
        logger.debug("GET %s params=%s", url, params)
        try:
            response = self._http.get(path, params=params)
        except httpx.HTTPError as exc:
            raise self._transport_failed(url, exc) from exc
        return self._finish(url, response, decode)

    def get_status(self) -> Status:
        return self._get("/status", None, decode_status)

    def get_builds(
        self,
        civ: Civilization = Civilization.ANY,
        order_by: SortBy | None = None,
        overlay: bool = False,
    ) -> list[BuildOrder]:
        query = Query.from_parts(civ, order_by, overlay)
        return self._get(self._builds_path(), query, decode_build_list)

    def get_build(self, build_id: str, overlay: bool = False) -> BuildOrder:
        query = Query.from_parts(overlay=overlay)
        return self._get(self._build_path(build_id), query, decode_build)

    def get_favorites(
        self,
        user_id: str,
        civ: Civilization = Civilization.ANY,
        order_by: SortBy | None = None,
        overlay: bool = False,
    ) -> list[BuildOrder]:
        query = Query.from_parts(civ, order_by, overlay)
        return self._get(self._favorites_path(user_id), query, decode_build_list)

    def close(self) -> None:
        self._http.close()

    @property
    def is_closed(self) -> bool:
        return self._http.is_closed

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
