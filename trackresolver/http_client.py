"""HTTP client factory for talking to a track-resolution node."""

import httpx

from trackresolver.settings import ClientSettings


def create_node_client(
    settings: ClientSettings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """
    Build an AsyncClient bound to the node's base URL.

    The Authorization header is attached here so every request made through the
    client carries it. httpx masks it in ``Headers`` reprs.
    """
    return httpx.AsyncClient(
        base_url=settings.base_url,
        headers={"Authorization": settings.auth_token.get_secret_value()},
        timeout=settings.request_timeout,
        transport=transport,
    )
