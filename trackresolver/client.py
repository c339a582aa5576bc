"""
REST client for a track-resolution node.

Every outbound call runs under a deadline equal to the configured request
timeout. GET helpers hand back the decoded JSON body; POST helpers hand back
only the HTTP status code, which is all the route planner endpoints report.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any

import anyio
import httpx

from trackresolver.http_client import create_node_client
from trackresolver.load_result import LoadResult, SearchProvider, TrackObject, parse_load_result
from trackresolver.settings import ClientSettings

logger = logging.getLogger(__name__)


class TrackResolverError(RuntimeError):
    """Base class for failures raised by the node client."""


class InvalidArgument(TrackResolverError, ValueError):
    """A required argument was empty or not one of the accepted values."""


class RemoteRequestFailed(TrackResolverError):
    """The node answered with a non-2xx status."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Rest request failed with response code: {status_code}")
        self.status_code = status_code


class RequestTimeout(TrackResolverError):
    """The node did not answer within the request timeout."""

    def __init__(self, budget_seconds: float) -> None:
        super().__init__(
            f"Rest request timed out. Took more than {round(budget_seconds)}s to resolve"
        )
        self.budget_seconds = budget_seconds


class InvalidResponse(TrackResolverError):
    """The node answered 2xx but the body was not valid JSON."""


def _require_non_empty(value: str | None, message: str) -> str:
    if not value:
        raise InvalidArgument(message)
    return value


def _search_provider(search: str | SearchProvider) -> SearchProvider:
    try:
        return SearchProvider(search)
    except ValueError as exc:
        raise InvalidArgument("This search type is not supported") from exc


@dataclass(slots=True)
class TrackResolverClient:
    """Async wrapper around one node's REST API."""

    _client: httpx.AsyncClient = field(repr=False)
    _settings: ClientSettings

    @classmethod
    def from_settings(
        cls,
        settings: ClientSettings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "TrackResolverClient":
        """Factory that builds the client from ClientSettings."""
        return cls(create_node_client(settings, transport=transport), settings)

    @classmethod
    def connect(
        cls,
        host: str,
        port: str | int,
        auth_token: str,
        timeout: float | None = None,
    ) -> "TrackResolverClient":
        """Build a client for ``http://{host}:{port}/``; timeout is in seconds."""
        return cls.from_settings(ClientSettings.create(host, port, auth_token, timeout))

    @property
    def url(self) -> str:
        return self._settings.base_url

    @property
    def timeout(self) -> float:
        return self._settings.request_timeout

    async def aclose(self) -> None:
        """Close the underlying HTTP resources."""
        await self._client.aclose()

    async def __aenter__(self) -> "TrackResolverClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def resolve(
        self,
        identifier: str | None,
        search: str | SearchProvider | None = None,
    ) -> LoadResult:
        """
        Resolve an identifier (URL, track id, or search query) into tracks.

        When ``search`` names a provider the identifier is sent as a provider
        search and the raw search response comes back as ``SearchResult``.
        """
        query = _require_non_empty(identifier, "Query cannot be null")
        if search:
            query = _search_provider(search).apply(query)

        logger.debug("Resolving identifier", extra={"identifier": query})
        data = await self._get("/loadtracks", params={"identifier": query})
        return parse_load_result(data)

    async def decode(self, track: str | None) -> TrackObject:
        """Decode a base64 encoded track into its info object."""
        encoded = _require_non_empty(track, "Track cannot be null")
        return await self._get("/decodetrack", params={"track": encoded})

    async def get_route_planner_status(self) -> dict[str, Any]:
        """Return the node's route planner status verbatim."""
        return await self._get("/routeplanner/status")

    async def unmark_failed_address(self, address: str) -> int:
        """Unmark a single failed IP; returns the response status code."""
        logger.debug("Unmarking failed address", extra={"address": address})
        return await self._post("/routeplanner/free/address", {"address": address})

    async def unmark_all_failed_address(self) -> int:
        """Unmark every failed IP; returns the response status code."""
        return await self._post("/routeplanner/free/all")

    async def _get(self, path: str, params: dict[str, str] | None = None) -> Any:
        response = await self._send("GET", path, params=params)
        try:
            return response.json()
        except json.JSONDecodeError as exc:
            logger.error(
                "Node returned invalid JSON",
                extra={"method": "GET", "path": path},
            )
            raise InvalidResponse(f"Node returned invalid JSON during GET {path}.") from exc

    async def _post(self, path: str, body: dict[str, Any] | None = None) -> int:
        kwargs: dict[str, Any] = {}
        if body is not None:
            kwargs["json"] = body
        response = await self._send("POST", path, **kwargs)
        return response.status_code

    async def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """Issue one request under the client's deadline and check its status."""
        logger.debug("Node request", extra={"method": method, "path": path})
        try:
            with anyio.fail_after(self.timeout):
                response = await self._client.request(method, path, **kwargs)
        except (TimeoutError, httpx.TimeoutException) as exc:
            logger.error(
                "Node request timed out",
                extra={"method": method, "path": path, "timeout": self.timeout},
            )
            raise RequestTimeout(self.timeout) from exc
        except httpx.RequestError:
            logger.error(
                "Node request failed",
                extra={"method": method, "path": path},
                exc_info=True,
            )
            raise

        if not response.is_success:
            logger.warning(
                "Node responded with error",
                extra={
                    "method": method,
                    "path": path,
                    "status_code": response.status_code,
                },
            )
            raise RemoteRequestFailed(response.status_code)

        return response
