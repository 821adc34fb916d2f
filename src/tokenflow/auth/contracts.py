"""Contracts for the producers of acquisition outcomes."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .models import AccessTokenRequestOptions
from .result import AcquisitionOutcome


@runtime_checkable
class AccessTokenProvider(Protocol):
    """Interface all access token providers must implement.

    A provider performs whatever exchange with the identity provider it needs and
    resolves every request to a fresh :class:`AcquisitionOutcome`.
    """

    async def request_access_token(
        self, options: AccessTokenRequestOptions | None = None
    ) -> AcquisitionOutcome:
        """Try to provision an access token for the default or requested scopes."""


__all__ = ["AccessTokenProvider"]
