"""
Global pytest configuration and fixtures.
"""

from datetime import datetime, timedelta, timezone

import pytest

from tokenflow.auth.models import AccessToken, AccessTokenProviderConfigModel


class RecordingNavigator:
    """Navigator fake that remembers every URL it was sent to."""

    def __init__(self) -> None:
        self.visited: list[str] = []

    def navigate_to(self, url: str) -> None:
        self.visited.append(url)


@pytest.fixture
def navigator() -> RecordingNavigator:
    return RecordingNavigator()


@pytest.fixture
def access_token() -> AccessToken:
    return AccessToken(
        value="abc123",
        expires=datetime.now(timezone.utc) + timedelta(hours=1),
        granted_scopes=["api.read", "api.write"],
    )


@pytest.fixture
def provider_config() -> AccessTokenProviderConfigModel:
    return AccessTokenProviderConfigModel(
        base_url="https://app.example/",
        default_scopes=["api.read"],
    )
