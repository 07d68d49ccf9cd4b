"""OAuth provider adapters.

One adapter per Identity Provider, all implementing `BaseOAuthProvider`.
Adapters are resolved by name through the registry.
"""

from .base import BaseOAuthProvider
from .facebook import FacebookProvider
from .github import GitHubProvider
from .google import GoogleProvider
from .kakao import KakaoProvider
from .naver import NaverProvider
from .registry import PROVIDER_REGISTRY, create_provider, has_provider, list_available_providers
from .x import XProvider

__all__ = [
    "BaseOAuthProvider",
    "FacebookProvider",
    "GitHubProvider",
    "GoogleProvider",
    "KakaoProvider",
    "NaverProvider",
    "PROVIDER_REGISTRY",
    "XProvider",
    "create_provider",
    "has_provider",
    "list_available_providers",
]
