"""Provider registry.

A read-only table mapping lowercase provider identifiers to adapter classes.
Supporting a new provider means writing one adapter and adding one entry
here; the lookup logic does not change.
"""

from __future__ import annotations

import logging
from types import MappingProxyType

from ..errors import UnknownProviderError
from ..models import ProviderCredentials
from ..transport import HttpClient
from .base import BaseOAuthProvider
from .facebook import FacebookProvider
from .github import GitHubProvider
from .google import GoogleProvider
from .kakao import KakaoProvider
from .naver import NaverProvider
from .x import XProvider

logger = logging.getLogger(__name__)

PROVIDER_REGISTRY: MappingProxyType[str, type[BaseOAuthProvider]] = MappingProxyType(
    {
        provider.name: provider
        for provider in (
            GoogleProvider,
            KakaoProvider,
            NaverProvider,
            GitHubProvider,
            FacebookProvider,
            XProvider,
        )
    }
)


def create_provider(
    name: str,
    credentials: ProviderCredentials,
    http_client: HttpClient | None = None,
) -> BaseOAuthProvider:
    """Construct the adapter registered under `name`.

    Raises:
        UnknownProviderError: No adapter exists for `name`.
        ConfigurationError: The adapter rejected the credentials.
    """
    provider_class = PROVIDER_REGISTRY.get(name)
    if provider_class is None:
        raise UnknownProviderError(name, list_available_providers())
    logger.debug(f"Creating {name} provider")
    return provider_class(credentials, http_client=http_client)


def list_available_providers() -> list[str]:
    return list(PROVIDER_REGISTRY)


def has_provider(name: str) -> bool:
    return name in PROVIDER_REGISTRY


__all__ = ["PROVIDER_REGISTRY", "create_provider", "has_provider", "list_available_providers"]
