"""Errors raised when an outgoing call cannot be authorized."""

from __future__ import annotations

from .navigation import Navigator
from .result import AcquisitionOutcome, TokenLookup


class AccessTokenNotAvailableError(Exception):
    """Raised when a request needs a token and the provider could not supply one.

    The outcome that caused the failure is kept so the handler can decide how to
    recover, usually by calling :meth:`redirect`.
    """

    def __init__(self, outcome: AcquisitionOutcome, message: str | None = None):
        super().__init__(
            message or f"Unable to provision an access token (status: {outcome.status.value})"
        )
        self.outcome = outcome

    @property
    def can_redirect(self) -> bool:
        return self.outcome.is_redirect_capable and bool(self.outcome.redirect_url)

    def redirect(self, navigator: Navigator) -> TokenLookup:
        """Send ``navigator`` to the outcome's redirect target, if it has one."""
        return self.outcome.try_get_token_or_redirect(navigator)


__all__ = ["AccessTokenNotAvailableError"]
