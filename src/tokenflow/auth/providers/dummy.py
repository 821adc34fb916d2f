"""Deterministic dummy token provider for flow testing (no network calls)."""

from __future__ import annotations

import logging

from ..models import (
    AccessToken,
    AccessTokenProviderConfigModel,
    AccessTokenRequestOptions,
    build_login_redirect_url,
)
from ..result import AcquisitionOutcome

logger = logging.getLogger(__name__)


class DummyAccessTokenProvider:
    """In-process access token provider used for tests and demos.

    Resolves every request from the token it was given:

    - ``fail=True`` always yields a failed outcome
    - no token, an expired token, or a token lacking the requested scopes yields a
      redirect to the login page (``REQUIRES_LOGIN`` when ``interactive_login`` is set)
    - otherwise the token is returned
    """

    def __init__(
        self,
        config: AccessTokenProviderConfigModel,
        *,
        token: AccessToken | None = None,
        interactive_login: bool = False,
        fail: bool = False,
    ):
        self.config = config
        self.token = token
        self.interactive_login = interactive_login
        self.fail = fail
        self.requests: list[AccessTokenRequestOptions | None] = []

    async def request_access_token(
        self, options: AccessTokenRequestOptions | None = None
    ) -> AcquisitionOutcome:
        self.requests.append(options)
        if self.fail:
            logger.debug("Dummy provider configured to fail")
            return AcquisitionOutcome.failed()

        scopes = self.config.default_scopes
        if options and options.scopes is not None:
            scopes = options.scopes

        token = self.token
        if token is not None and not token.is_expired() and token.has_scopes(scopes):
            return AcquisitionOutcome.success(token)

        return_url = options.return_url if options else None
        redirect_url = build_login_redirect_url(self.config, return_url)
        logger.debug("No usable token for scopes %s", scopes)
        if self.interactive_login:
            return AcquisitionOutcome.requires_login(redirect_url)
        return AcquisitionOutcome.requires_redirect(redirect_url)
