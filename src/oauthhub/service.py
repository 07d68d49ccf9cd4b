"""OAuthService - single entry point for multi-provider OAuth.

The service holds one adapter per registered provider name and dispatches
every operation to it, so callers (route handlers, jobs, CLIs) never branch on
provider identity.

Example usage:
    from oauthhub import OAuthService

    service = OAuthService()
    service.register_provider(
        "google",
        {
            "client_id": os.environ["GOOGLE_CLIENT_ID"],
            "client_secret": os.environ["GOOGLE_CLIENT_SECRET"],
            "redirect_uri": "https://app.example.com/auth/google/callback",
        },
    )

    url = service.generate_auth_url("google", {"state": state})
    tokens = await service.handle_callback("google", request.query_params)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from .config.models import OAuthConfigModel, ProviderConfigModel
from .errors import ProviderNotRegisteredError
from .models import (
    AuthUrlOptions,
    OAuthCallbackParams,
    OAuthTokenResponse,
    ProviderCredentials,
    TokenRefreshOptions,
    TokenRevokeOptions,
    UserInfoResponse,
)
from .providers.base import BaseOAuthProvider
from .providers.registry import create_provider, list_available_providers
from .transport import HttpClient

logger = logging.getLogger(__name__)


class OAuthService:
    """Registry of live provider adapters plus a uniform call surface.

    Registering a name again replaces the previous adapter. Lookups of names
    that were never registered fail with `ProviderNotRegisteredError`; there
    is no default provider.

    Args:
        http_client: Transport handed to every adapter this service creates.
            Each adapter gets a default `HttpClient` when omitted.
    """

    def __init__(self, http_client: HttpClient | None = None):
        self._http_client = http_client
        self._providers: dict[str, BaseOAuthProvider] = {}

    @classmethod
    def from_config(
        cls, config: OAuthConfigModel, http_client: HttpClient | None = None
    ) -> OAuthService:
        """Create a service and register every provider in `config`.

        The transport timeout comes from `config.http` unless `http_client`
        is given.
        """
        service = cls(http_client or HttpClient(timeout=config.http.timeout))
        service.register_providers(config.providers)
        return service

    def register_provider(self, name: str, credentials: ProviderCredentials) -> None:
        """Create and store the adapter for `name`.

        Raises:
            UnknownProviderError: `name` is not a known provider.
            ConfigurationError: A required credential is missing.
        """
        provider = create_provider(name, credentials, http_client=self._http_client)
        if name in self._providers:
            logger.info(f"Replacing OAuth provider: {name}")
        self._providers[name] = provider
        logger.info(f"Registered OAuth provider: {name}")

    def register_providers(
        self, configs: Iterable[ProviderConfigModel | Mapping[str, Any]]
    ) -> None:
        """Register `{name, credentials}` pairs in order; stops at the first failure."""
        for config in configs:
            if not isinstance(config, ProviderConfigModel):
                config = ProviderConfigModel.model_validate(config)
            self.register_provider(config.name, config.credentials)

    def get_provider(self, name: str) -> BaseOAuthProvider:
        provider = self._providers.get(name)
        if provider is None:
            raise ProviderNotRegisteredError(
                name, self.list_registered_providers(), list_available_providers()
            )
        return provider

    def list_registered_providers(self) -> list[str]:
        return list(self._providers)

    get_registered_providers = list_registered_providers

    def generate_auth_url(
        self, name: str, options: AuthUrlOptions | Mapping[str, Any] | None = None
    ) -> str:
        return self.get_provider(name).generate_auth_url(options)

    async def handle_callback(
        self, name: str, params: OAuthCallbackParams | Mapping[str, Any]
    ) -> OAuthTokenResponse:
        return await self.get_provider(name).handle_callback(params)

    async def refresh_token(
        self, name: str, options: TokenRefreshOptions | Mapping[str, Any]
    ) -> OAuthTokenResponse:
        return await self.get_provider(name).refresh_token(options)

    async def revoke_token(self, name: str, options: TokenRevokeOptions | Mapping[str, Any]) -> None:
        await self.get_provider(name).revoke_token(options)

    async def get_user_info(self, name: str, access_token: str) -> UserInfoResponse:
        return await self.get_provider(name).get_user_info(access_token)


__all__ = ["OAuthService"]
