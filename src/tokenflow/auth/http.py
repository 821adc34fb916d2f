"""httpx integration that attaches bearer tokens to outgoing API calls."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator, Generator, Sequence

import httpx

from .contracts import AccessTokenProvider
from .errors import AccessTokenNotAvailableError
from .models import AccessTokenRequestOptions

logger = logging.getLogger(__name__)

_DEFAULT_PORTS = {"http": 80, "https": 443}


class BearerTokenAuth(httpx.Auth):
    """Authorize requests with a token from an :class:`AccessTokenProvider`.

    A new acquisition attempt is made for every request; caching belongs to the
    provider. When no token is available the request is not sent and
    :class:`AccessTokenNotAvailableError` is raised with the failing outcome.

    Tokens are only attached to requests under one of ``authorized_urls``: same scheme,
    host and port, and a path at or below the base path. Only async clients are supported.

    Example:
        >>> auth = BearerTokenAuth(provider, authorized_urls=["https://api.example/"])
        >>> async with httpx.AsyncClient(auth=auth) as client:
        ...     try:
        ...         response = await client.get("https://api.example/orders")
        ...     except AccessTokenNotAvailableError as exc:
        ...         exc.redirect(navigator)
    """

    def __init__(
        self,
        provider: AccessTokenProvider,
        *,
        authorized_urls: Sequence[str],
        scopes: Sequence[str] | None = None,
    ):
        self.provider = provider
        if not authorized_urls:
            raise ValueError("authorized_urls must name at least one base URL")
        self.authorized_urls = [httpx.URL(base) for base in authorized_urls]
        self.options = AccessTokenRequestOptions(scopes=tuple(scopes)) if scopes else None

    def _should_authorize(self, request: httpx.Request) -> bool:
        if "Authorization" in request.headers:
            return False
        return any(_is_under(request.url, base) for base in self.authorized_urls)

    def sync_auth_flow(
        self, request: httpx.Request
    ) -> Generator[httpx.Request, httpx.Response, None]:
        raise RuntimeError("BearerTokenAuth requires an httpx.AsyncClient")

    async def async_auth_flow(
        self, request: httpx.Request
    ) -> AsyncGenerator[httpx.Request, httpx.Response]:
        if not self._should_authorize(request):
            logger.debug("Sending %s %s without a bearer token", request.method, request.url)
            yield request
            return

        outcome = await self.provider.request_access_token(self.options)
        found, token = outcome.try_get_token()
        if not found or token is None:
            logger.info(
                "No access token for %s %s (status: %s)",
                request.method,
                request.url,
                outcome.status.value,
            )
            raise AccessTokenNotAvailableError(outcome)

        request.headers["Authorization"] = f"Bearer {token.value}"
        yield request


def _effective_port(url: httpx.URL) -> int | None:
    return url.port or _DEFAULT_PORTS.get(url.scheme)


def _is_under(url: httpx.URL, base: httpx.URL) -> bool:
    if (url.scheme, url.host) != (base.scheme, base.host):
        return False
    if _effective_port(url) != _effective_port(base):
        return False
    base_path = base.path if base.path.endswith("/") else base.path + "/"
    return url.path == base_path.rstrip("/") or url.path.startswith(base_path)


__all__ = ["BearerTokenAuth"]
