import httpx
import pytest

from tokenflow.auth.errors import AccessTokenNotAvailableError
from tokenflow.auth.http import BearerTokenAuth
from tokenflow.auth.providers.dummy import DummyAccessTokenProvider
from tokenflow.auth.result import AcquisitionStatus

API = ["https://api.example/"]


def _echo_transport(seen: list[httpx.Request]) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"ok": True})

    return httpx.MockTransport(handler)


@pytest.mark.asyncio
async def test_attaches_bearer_token(provider_config, access_token) -> None:
    seen: list[httpx.Request] = []
    provider = DummyAccessTokenProvider(provider_config, token=access_token)
    auth = BearerTokenAuth(provider, authorized_urls=API)

    async with httpx.AsyncClient(transport=_echo_transport(seen), auth=auth) as client:
        response = await client.get("https://api.example/orders")

    assert response.status_code == 200
    assert seen[0].headers["Authorization"] == "Bearer abc123"


@pytest.mark.asyncio
async def test_raises_when_token_unavailable(provider_config, navigator) -> None:
    # The request is not sent and the outcome travels with the error.
    seen: list[httpx.Request] = []
    auth = BearerTokenAuth(DummyAccessTokenProvider(provider_config), authorized_urls=API)

    async with httpx.AsyncClient(transport=_echo_transport(seen), auth=auth) as client:
        with pytest.raises(AccessTokenNotAvailableError) as excinfo:
            await client.get("https://api.example/orders")

    assert seen == []
    assert excinfo.value.outcome.status is AcquisitionStatus.REQUIRES_REDIRECT
    excinfo.value.redirect(navigator)
    assert len(navigator.visited) == 1


@pytest.mark.asyncio
async def test_failed_outcome_raises(provider_config) -> None:
    provider = DummyAccessTokenProvider(provider_config, fail=True)
    auth = BearerTokenAuth(provider, authorized_urls=API)

    async with httpx.AsyncClient(transport=_echo_transport([]), auth=auth) as client:
        with pytest.raises(AccessTokenNotAvailableError) as excinfo:
            await client.get("https://api.example/orders")

    assert excinfo.value.can_redirect is False


@pytest.mark.asyncio
async def test_unlisted_urls_are_sent_without_token(provider_config) -> None:
    seen: list[httpx.Request] = []
    provider = DummyAccessTokenProvider(provider_config)
    auth = BearerTokenAuth(provider, authorized_urls=["https://api.example/"])

    async with httpx.AsyncClient(transport=_echo_transport(seen), auth=auth) as client:
        await client.get("https://cdn.example/logo.png")

    assert "Authorization" not in seen[0].headers
    assert provider.requests == []


@pytest.mark.asyncio
async def test_existing_authorization_header_is_kept(provider_config, access_token) -> None:
    seen: list[httpx.Request] = []
    provider = DummyAccessTokenProvider(provider_config, token=access_token)
    auth = BearerTokenAuth(provider, authorized_urls=API)

    async with httpx.AsyncClient(transport=_echo_transport(seen), auth=auth) as client:
        await client.get("https://api.example/orders", headers={"Authorization": "Basic x"})

    assert seen[0].headers["Authorization"] == "Basic x"
    assert provider.requests == []


@pytest.mark.asyncio
async def test_requested_scopes_are_forwarded(provider_config, access_token) -> None:
    provider = DummyAccessTokenProvider(provider_config, token=access_token)
    auth = BearerTokenAuth(provider, authorized_urls=API, scopes=["api.write"])

    async with httpx.AsyncClient(transport=_echo_transport([]), auth=auth) as client:
        await client.get("https://api.example/orders")

    assert provider.requests[0] is not None
    assert provider.requests[0].scopes == ("api.write",)


def test_sync_client_is_rejected(provider_config, access_token) -> None:
    provider = DummyAccessTokenProvider(provider_config, token=access_token)
    auth = BearerTokenAuth(provider, authorized_urls=API)

    with httpx.Client(transport=_echo_transport([]), auth=auth) as client:
        with pytest.raises(RuntimeError):
            client.get("https://api.example/orders")


def test_authorized_urls_are_required(provider_config) -> None:
    with pytest.raises(ValueError):
        BearerTokenAuth(DummyAccessTokenProvider(provider_config), authorized_urls=[])


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "url",
    [
        "https://api.example.attacker.net/steal",
        "https://evil.example/https://api.example/",
        "http://api.example/orders",
        "https://api.example:8443/orders",
        "https://api.example/v10/orders",
    ],
)
async def test_token_not_sent_outside_authorized_base(
    provider_config, access_token, url: str
) -> None:
    # Only the exact scheme, host, port and path prefix of the base receive the token.
    seen: list[httpx.Request] = []
    provider = DummyAccessTokenProvider(provider_config, token=access_token)
    auth = BearerTokenAuth(provider, authorized_urls=["https://api.example/v1"])

    async with httpx.AsyncClient(transport=_echo_transport(seen), auth=auth) as client:
        await client.get(url)

    assert "Authorization" not in seen[0].headers
    assert provider.requests == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "url",
    [
        "https://api.example/v1",
        "https://api.example/v1/orders",
        "https://API.example:443/v1/orders?page=2",
    ],
)
async def test_token_sent_under_authorized_base(provider_config, access_token, url: str) -> None:
    seen: list[httpx.Request] = []
    provider = DummyAccessTokenProvider(provider_config, token=access_token)
    auth = BearerTokenAuth(provider, authorized_urls=["https://api.example/v1"])

    async with httpx.AsyncClient(transport=_echo_transport(seen), auth=auth) as client:
        await client.get(url)

    assert seen[0].headers["Authorization"] == "Bearer abc123"


@pytest.mark.asyncio
async def test_host_sharing_prefix_gets_no_token(provider_config, access_token) -> None:
    # A base without trailing slash must not match a longer host name.
    seen: list[httpx.Request] = []
    provider = DummyAccessTokenProvider(provider_config, token=access_token)
    auth = BearerTokenAuth(provider, authorized_urls=["https://api.example"])

    async with httpx.AsyncClient(transport=_echo_transport(seen), auth=auth) as client:
        await client.get("https://api.example.attacker.net/steal")
        await client.get("https://api.example/orders")

    assert "Authorization" not in seen[0].headers
    assert seen[1].headers["Authorization"] == "Bearer abc123"
