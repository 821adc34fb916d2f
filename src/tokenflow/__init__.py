"""Tokenflow - client-side access token acquisition results."""

__version__ = "0.1.0"
