"""Pydantic models for the auth module.

These types cover the bearer credential handed to callers, the per-request options a
caller can pass to a token provider, and the configuration used to build redirect
targets.

## Security-relevant fields

- ``AccessToken.value``: the bearer credential itself. It is excluded from ``repr`` so
  it does not end up in logs or tracebacks.
- ``AccessTokenProviderConfigModel.base_url`` and the login path: decide where the
  browser is sent when a token cannot be provisioned.
"""

from collections.abc import Iterable
from datetime import datetime, timezone
from urllib.parse import quote, urljoin

from pydantic import ConfigDict, Field

from tokenflow.models import SdkBaseModel


class AccessToken(SdkBaseModel):
    """Bearer credential returned by a successful acquisition attempt."""

    value: str = Field(repr=False)
    expires: datetime | None = None
    granted_scopes: tuple[str, ...] = ()

    def is_expired(self, now: datetime | None = None) -> bool:
        """Return True once ``now`` has reached the expiry time.

        Tokens without an expiry never expire. Naive datetimes are read as UTC.
        """
        if self.expires is None:
            return False
        current = _as_utc(now or datetime.now(timezone.utc))
        return current >= _as_utc(self.expires)

    def has_scopes(self, scopes: Iterable[str]) -> bool:
        """Return True when every scope in ``scopes`` was granted."""
        return set(scopes).issubset(self.granted_scopes)


class AccessTokenRequestOptions(SdkBaseModel):
    """Options a caller may pass when asking a provider for a token.

    ``scopes`` overrides the provider's default scopes. ``return_url`` is where the
    application should come back to after an interactive redirect.
    """

    scopes: tuple[str, ...] | None = None
    return_url: str | None = None


class AuthenticationPathsConfigModel(SdkBaseModel):
    """Application routes used during interactive authentication."""

    # Override frozen=True since this is a config object
    model_config = ConfigDict(extra="forbid", frozen=False)

    log_in_path: str = "authentication/login"
    return_url_parameter: str = "returnUrl"


class AccessTokenProviderConfigModel(SdkBaseModel):
    """Configuration shared by token providers."""

    # Override frozen=True since this is a config object
    model_config = ConfigDict(extra="forbid", frozen=False)

    base_url: str
    default_scopes: list[str] = Field(default_factory=list)
    paths: AuthenticationPathsConfigModel = Field(default_factory=AuthenticationPathsConfigModel)


def build_login_redirect_url(
    config: AccessTokenProviderConfigModel, return_url: str | None = None
) -> str:
    """Build the absolute login URL for a redirect-capable outcome.

    Args:
        config: Provider configuration holding the application base URL and paths.
        return_url: Where to land after login. Defaults to the application base URL.

    Returns:
        The login URL with the return URL percent-encoded in the configured parameter.

    Example:
        >>> config = AccessTokenProviderConfigModel(base_url="https://app.example/")
        >>> build_login_redirect_url(config, "https://app.example/orders")
        'https://app.example/authentication/login?returnUrl=https%3A%2F%2Fapp.example%2Forders'
    """
    base_url = config.base_url if config.base_url.endswith("/") else config.base_url + "/"
    login_url = urljoin(base_url, config.paths.log_in_path.lstrip("/"))
    target = return_url or config.base_url
    return f"{login_url}?{config.paths.return_url_parameter}={quote(target, safe='')}"


def _as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment
