"""oauthhub - one OAuth2/OIDC client surface for many Identity Providers.

This package provides:
- Provider adapters for Google, GitHub, Facebook, Kakao, Naver and X, each
  encoding that provider's endpoints and flow deviations
- A registry resolving provider names to adapters
- `OAuthService`, which dispatches every operation to the right adapter
- Helpers for state, nonce and PKCE generation

## Quick Example

```python
from oauthhub import OAuthService, generate_pkce, generate_state

service = OAuthService()
service.register_provider("x", {"client_id": "...", "client_secret": "...", "redirect_uri": "..."})

pkce = generate_pkce()
url = service.generate_auth_url(
    "x",
    {
        "state": generate_state(),
        "code_challenge": pkce.code_challenge,
        "code_challenge_method": pkce.code_challenge_method,
    },
)

# ...later, in the callback handler
tokens = await service.handle_callback(
    "x", {"code": code, "state": state, "code_verifier": pkce.code_verifier}
)
```

Token storage, sessions and state verification stay with the caller.
"""

from .config import OAuthConfigModel, ProviderConfigModel, load_config
from .errors import (
    ConfigurationError,
    InvalidCallbackError,
    InvalidOptionsError,
    OAuthError,
    ProviderCallbackError,
    ProviderNotRegisteredError,
    TokenResponseError,
    TransportError,
    UnknownProviderError,
)
from .models import (
    AuthUrlOptions,
    OAuthCallbackParams,
    OAuthTokenResponse,
    PKCEPair,
    ProviderCredentials,
    TokenRefreshOptions,
    TokenRevokeOptions,
    UserInfoResponse,
)
from .providers import (
    PROVIDER_REGISTRY,
    BaseOAuthProvider,
    FacebookProvider,
    GitHubProvider,
    GoogleProvider,
    KakaoProvider,
    NaverProvider,
    XProvider,
    create_provider,
    has_provider,
    list_available_providers,
)
from .service import OAuthService
from .state import generate_nonce, generate_pkce, generate_state
from .transport import HttpClient
from .url_utils import build_query_string, build_url, replace_template, replace_template_in_object
from .version import PACKAGE_VERSION as __version__

__all__ = [
    # Service
    "OAuthService",
    # Providers
    "BaseOAuthProvider",
    "FacebookProvider",
    "GitHubProvider",
    "GoogleProvider",
    "KakaoProvider",
    "NaverProvider",
    "XProvider",
    "PROVIDER_REGISTRY",
    "create_provider",
    "has_provider",
    "list_available_providers",
    # Models
    "AuthUrlOptions",
    "OAuthCallbackParams",
    "OAuthTokenResponse",
    "PKCEPair",
    "ProviderCredentials",
    "TokenRefreshOptions",
    "TokenRevokeOptions",
    "UserInfoResponse",
    # Config
    "OAuthConfigModel",
    "ProviderConfigModel",
    "load_config",
    # Errors
    "ConfigurationError",
    "InvalidCallbackError",
    "InvalidOptionsError",
    "OAuthError",
    "ProviderCallbackError",
    "ProviderNotRegisteredError",
    "TokenResponseError",
    "TransportError",
    "UnknownProviderError",
    # Utilities
    "HttpClient",
    "build_query_string",
    "build_url",
    "generate_nonce",
    "generate_pkce",
    "generate_state",
    "replace_template",
    "replace_template_in_object",
    "__version__",
]
