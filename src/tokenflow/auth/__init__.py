"""Tokenflow authentication - access token acquisition results and their consumers.

## Key Components

- `AcquisitionOutcome`: Immutable result of one token acquisition attempt
- `AccessTokenProvider`: Protocol for the components that produce outcomes
- `Navigator`: Capability used to redirect to the identity provider
- `BearerTokenAuth`: httpx auth that attaches tokens to outgoing requests

## Quick Example

```python
from tokenflow.auth import AcquisitionOutcome, WebBrowserNavigator

outcome = await provider.request_access_token()
found, token = outcome.try_get_token_or_redirect(WebBrowserNavigator())
if found:
    headers = {"Authorization": f"Bearer {token.value}"}
```
"""

from .contracts import AccessTokenProvider
from .errors import AccessTokenNotAvailableError
from .http import BearerTokenAuth
from .models import (
    AccessToken,
    AccessTokenProviderConfigModel,
    AccessTokenRequestOptions,
    AuthenticationPathsConfigModel,
    build_login_redirect_url,
)
from .navigation import Navigator, NullNavigator, WebBrowserNavigator
from .result import (
    REDIRECT_CAPABLE_STATUSES,
    AcquisitionOutcome,
    AcquisitionStatus,
    TokenLookup,
)

__all__ = [
    # Types
    "AccessToken",
    "AccessTokenRequestOptions",
    "AccessTokenProviderConfigModel",
    "AuthenticationPathsConfigModel",
    # Results
    "AcquisitionOutcome",
    "AcquisitionStatus",
    "REDIRECT_CAPABLE_STATUSES",
    "TokenLookup",
    # Contracts
    "AccessTokenProvider",
    "Navigator",
    # Integrations
    "AccessTokenNotAvailableError",
    "BearerTokenAuth",
    "NullNavigator",
    "WebBrowserNavigator",
    "build_login_redirect_url",
]
