"""Shared HTTP plumbing for the remote translation sources."""

from __future__ import annotations

import logging
from typing import Callable, Mapping, Optional

import httpx

from ..errors import NetworkConnectionError, NetworkTimeout

logger = logging.getLogger(__name__)

ClientFactory = Callable[[], httpx.AsyncClient]


def default_client_factory(timeout: float) -> ClientFactory:
    def factory() -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=httpx.Timeout(timeout), follow_redirects=True)

    return factory


async def get(
    client_factory: ClientFactory,
    url: str,
    *,
    params: Optional[Mapping[str, str]] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> httpx.Response:
    """Issue a GET and translate :mod:`httpx` failures into :class:`NetworkError`."""

    try:
        async with client_factory() as client:
            response = await client.get(url, params=params, headers=headers)
    except httpx.TimeoutException as exc:
        raise NetworkTimeout(f"Request to {url} timed out.") from exc
    except (httpx.RequestError, httpx.InvalidURL) as exc:
        raise NetworkConnectionError(f"Request to {url} failed: {exc}") from exc

    if not response.is_success:
        raise NetworkConnectionError(f"{url} answered with HTTP {response.status_code}.")
    logger.debug("HTTP GET finished", extra={"url": url, "status": response.status_code})
    return response


__all__ = ["ClientFactory", "default_client_factory", "get"]
