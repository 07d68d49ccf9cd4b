"""Abstract OAuth provider contract.

A provider adapter is a thin client for one Identity Provider. It handles:
- Building authorization URLs (pure, no I/O)
- Exchanging authorization codes for tokens
- Refreshing tokens (where the provider supports it)
- Revoking tokens
- Fetching user information

Adapters do NOT handle:
- State/CSRF verification (callers own it)
- Token storage or sessions (callers own them)

Example:
    class MyProvider(BaseOAuthProvider):
        name = "my"
        required_credentials = ("client_id", "client_secret", "redirect_uri")

        def generate_auth_url(self, options=None) -> str:
            return self.build_url("https://idp.example.com/authorize", {...})
        ...
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, ClassVar

from pydantic import ValidationError

from ..errors import (
    ConfigurationError,
    InvalidCallbackError,
    ProviderCallbackError,
    TokenResponseError,
)
from ..models import (
    AuthUrlOptions,
    OAuthCallbackParams,
    OAuthTokenResponse,
    ProviderCredentials,
    TokenRefreshOptions,
    TokenRevokeOptions,
    UserInfoResponse,
    coerce_callback_params,
)
from ..transport import HttpClient
from ..url_utils import build_url

logger = logging.getLogger(__name__)

DEFAULT_REQUIRED_CREDENTIALS: tuple[str, ...] = ("client_id", "client_secret", "redirect_uri")


class BaseOAuthProvider(ABC):
    """Shared behavior of all provider adapters.

    Construction validates that every field in `required_credential_fields()`
    is present and non-empty, then keeps a read-only copy of the credentials.

    Attributes:
        name: Provider identifier, constant per adapter type.
        required_credentials: Credential keys this provider mandates.
        credentials: Read-only view of the credentials.
        http_client: Transport used for every remote call.
    """

    name: ClassVar[str]
    required_credentials: ClassVar[tuple[str, ...]] = DEFAULT_REQUIRED_CREDENTIALS

    def __init__(self, credentials: ProviderCredentials, http_client: HttpClient | None = None):
        self.credentials: Mapping[str, str] = MappingProxyType(dict(credentials))
        self.http_client = http_client or HttpClient()
        self._validate_credentials()
        logger.debug(f"{type(self).__name__} initialized")

    def required_credential_fields(self) -> list[str]:
        return list(self.required_credentials)

    def _validate_credentials(self) -> None:
        for field in self.required_credential_fields():
            if not self.credentials.get(field):
                raise ConfigurationError.missing_credential(self.name, field)

    # ── credential shortcuts ─────────────────────────────────────────────────
    @property
    def client_id(self) -> str:
        return self.credentials["client_id"]

    @property
    def client_secret(self) -> str | None:
        return self.credentials.get("client_secret")

    @property
    def redirect_uri(self) -> str | None:
        return self.credentials.get("redirect_uri")

    @property
    def basic_auth(self) -> tuple[str, str]:
        return (self.client_id, self.client_secret or "")

    # ── contract ─────────────────────────────────────────────────────────────
    @abstractmethod
    def generate_auth_url(self, options: AuthUrlOptions | Mapping[str, Any] | None = None) -> str:
        """Build the provider's authorization URL. Never performs I/O."""

    async def handle_callback(
        self, params: OAuthCallbackParams | Mapping[str, Any] | None
    ) -> OAuthTokenResponse:
        """Validate the provider's redirect and exchange its code for tokens.

        Raises:
            ProviderCallbackError: The redirect carried an `error` parameter.
            InvalidCallbackError: The redirect carried no authorization code, or
                malformed parameters.
        """
        try:
            callback = coerce_callback_params(params)
        except ValidationError as exc:
            raise InvalidCallbackError(self.name, f"Invalid callback parameters: {exc}") from exc
        if callback.error:
            logger.warning(
                "Provider returned an error on callback",
                extra={"provider": self.name, "provider_error": callback.error},
            )
            raise ProviderCallbackError(self.name, callback.error, callback.error_description)
        if not callback.code:
            raise InvalidCallbackError(self.name)
        return await self.exchange_code_for_token(
            callback.code, callback.state, code_verifier=callback.code_verifier
        )

    @abstractmethod
    async def exchange_code_for_token(
        self, code: str, state: str | None = None, *, code_verifier: str | None = None
    ) -> OAuthTokenResponse:
        """Exchange an authorization code at the provider's token endpoint."""

    @abstractmethod
    async def refresh_token(
        self, options: TokenRefreshOptions | Mapping[str, Any]
    ) -> OAuthTokenResponse:
        """Obtain a fresh access token."""

    @abstractmethod
    async def revoke_token(self, options: TokenRevokeOptions | Mapping[str, Any]) -> None:
        """Revoke a token or log the user out at the provider."""

    @abstractmethod
    async def get_user_info(self, access_token: str) -> UserInfoResponse:
        """Fetch the user's profile; the provider's payload is returned verbatim."""

    # ── helpers ──────────────────────────────────────────────────────────────
    def build_url(self, base_url: str, params: Mapping[str, Any]) -> str:
        return build_url(base_url, params)

    @staticmethod
    def bearer(access_token: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {access_token}"}

    def parse_token_response(self, payload: Any, *, context: str) -> OAuthTokenResponse:
        """Validate a token endpoint payload.

        Some providers answer 200 with an OAuth error body (GitHub) or a
        non-JSON body; both raise `TokenResponseError`.
        """
        if not isinstance(payload, dict):
            logger.warning(
                "Token endpoint returned non-object payload",
                extra={"provider": self.name, "context": context},
            )
            raise TokenResponseError(
                self.name, "invalid_response", "Token response was not a JSON object", body=payload
            )

        error = payload.get("error")
        if error:
            logger.warning(
                "Token endpoint returned OAuth error",
                extra={"provider": self.name, "context": context, "provider_error": error},
            )
            raise TokenResponseError(
                self.name, str(error), payload.get("error_description"), body=payload
            )

        if not payload.get("access_token"):
            raise TokenResponseError(
                self.name, "invalid_grant", "No access_token in response", body=payload
            )
        try:
            return OAuthTokenResponse.model_validate(payload)
        except ValidationError as exc:
            raise TokenResponseError(
                self.name, "invalid_response", "Invalid token response payload", body=payload
            ) from exc

    def __repr__(self) -> str:
        return f"{type(self).__name__}(client_id={self.client_id!r})"


__all__ = ["BaseOAuthProvider", "DEFAULT_REQUIRED_CREDENTIALS"]
