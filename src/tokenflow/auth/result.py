"""Result of a single access token acquisition attempt.

An :class:`AcquisitionOutcome` is produced by a token provider once per attempt and
resolves to exactly one :class:`AcquisitionStatus`. Callers never read the token
directly; they go through :meth:`AcquisitionOutcome.try_get_token`, which only hands it
out when the attempt succeeded.

Example:
    >>> outcome = await provider.request_access_token()
    >>> found, token = outcome.try_get_token_or_redirect(WebBrowserNavigator())
    >>> if not found:
    ...     return  # the browser is on its way to the identity provider
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any, NamedTuple

from pydantic import PrivateAttr, ValidationInfo, model_validator

from tokenflow.models import SdkBaseModel

from .models import AccessToken
from .navigation import Navigator

logger = logging.getLogger(__name__)


class AcquisitionStatus(Enum):
    """How an acquisition attempt resolved."""

    SUCCESS = "success"
    REQUIRES_REDIRECT = "requires_redirect"
    REQUIRES_LOGIN = "requires_login"
    FAILED = "failed"


REDIRECT_CAPABLE_STATUSES = frozenset(
    {AcquisitionStatus.REQUIRES_REDIRECT, AcquisitionStatus.REQUIRES_LOGIN}
)


class TokenLookup(NamedTuple):
    """Answer to ``try_get_token``; unpacks as ``found, token``."""

    found: bool
    token: AccessToken | None


_NOT_FOUND = TokenLookup(False, None)


class AcquisitionOutcome(SdkBaseModel):
    """Immutable snapshot of one token acquisition attempt.

    The token travels in the validation context rather than as a field, so it is
    never part of ``model_dump`` and can only be read through ``try_get_token``.
    """

    status: AcquisitionStatus
    redirect_url: str | None = None

    _token: AccessToken | None = PrivateAttr(default=None)

    def __init__(
        self,
        *,
        status: AcquisitionStatus,
        token: AccessToken | None = None,
        redirect_url: str | None = None,
    ):
        self.__pydantic_validator__.validate_python(
            {"status": status, "redirect_url": redirect_url},
            self_instance=self,
            context={"token": token},
        )

    @model_validator(mode="after")
    def _check_fields_match_status(self, info: ValidationInfo) -> AcquisitionOutcome:
        token = (info.context or {}).get("token")
        has_redirect = self.redirect_url is not None

        if self.status is AcquisitionStatus.SUCCESS:
            if token is None:
                raise ValueError("a successful outcome requires a token")
            if has_redirect:
                raise ValueError("a successful outcome cannot carry a redirect_url")
        elif token is not None:
            raise ValueError(f"a {self.status.value} outcome cannot carry a token")
        elif self.status is AcquisitionStatus.FAILED and has_redirect:
            raise ValueError("a failed outcome cannot carry a redirect_url")

        self._token = token
        return self

    def model_copy(
        self, *, update: Mapping[str, Any] | None = None, deep: bool = False
    ) -> AcquisitionOutcome:
        """Copy the outcome, re-checking the status invariants for any update."""
        fields: dict[str, Any] = {
            "status": self.status,
            "token": self._token,
            "redirect_url": self.redirect_url,
        }
        fields.update(update or {})
        return type(self)(**fields)

    @classmethod
    def success(cls, token: AccessToken) -> AcquisitionOutcome:
        return cls(status=AcquisitionStatus.SUCCESS, token=token)

    @classmethod
    def requires_redirect(cls, redirect_url: str | None) -> AcquisitionOutcome:
        return cls(status=AcquisitionStatus.REQUIRES_REDIRECT, redirect_url=redirect_url)

    @classmethod
    def requires_login(cls, redirect_url: str | None) -> AcquisitionOutcome:
        return cls(status=AcquisitionStatus.REQUIRES_LOGIN, redirect_url=redirect_url)

    @classmethod
    def failed(cls) -> AcquisitionOutcome:
        return cls(status=AcquisitionStatus.FAILED)

    @property
    def is_redirect_capable(self) -> bool:
        """True when the remedy for this outcome is a browser redirect."""
        return self.status in REDIRECT_CAPABLE_STATUSES

    def try_get_token(self) -> TokenLookup:
        """Return ``(True, token)`` if the attempt succeeded, else ``(False, None)``.

        Has no side effects and may be called any number of times.
        """
        if self.status is AcquisitionStatus.SUCCESS and self._token is not None:
            return TokenLookup(True, self._token)
        return _NOT_FOUND

    def try_get_token_or_redirect(
        self, navigator: Navigator, *, redirect: bool = True
    ) -> TokenLookup:
        """Like :meth:`try_get_token`, optionally redirecting when no token is available.

        With ``redirect=True`` and a redirect-capable status, ``navigator`` is sent to
        ``redirect_url`` exactly once. A ``FAILED`` outcome never navigates; the caller
        has to report that failure itself. Navigation ends the useful life of the
        current page, so callers should stop work once this returns ``found=False``.

        Args:
            navigator: Capability used to perform the redirect.
            redirect: Whether to navigate when no token is available.

        Returns:
            The same answer :meth:`try_get_token` gives.
        """
        lookup = self.try_get_token()
        if lookup.found or not redirect or not self.is_redirect_capable:
            return lookup

        if not self.redirect_url:
            logger.warning(
                "Outcome with status %s has no redirect_url; skipping navigation",
                self.status.value,
            )
            return lookup

        logger.debug("Redirecting for status %s to %s", self.status.value, self.redirect_url)
        navigator.navigate_to(self.redirect_url)
        return lookup


__all__ = [
    "AcquisitionOutcome",
    "AcquisitionStatus",
    "REDIRECT_CAPABLE_STATUSES",
    "TokenLookup",
]
