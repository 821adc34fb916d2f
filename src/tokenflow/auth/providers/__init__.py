"""Access token provider implementations."""

from .dummy import DummyAccessTokenProvider

__all__ = ["DummyAccessTokenProvider"]
