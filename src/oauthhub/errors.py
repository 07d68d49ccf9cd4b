"""Error taxonomy for oauthhub.

Every error raised by the library derives from `OAuthError`, and each one
carries the detail a caller needs to build its own response (provider name,
missing field, HTTP status, provider error code). The library never retries
and never falls back to another provider; errors surface to the immediate
caller.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


class OAuthError(Exception):
    """Base class for all oauthhub errors."""


class ConfigurationError(OAuthError):
    """A provider was configured without a required credential, or a config file is invalid."""

    def __init__(self, message: str, *, provider: str | None = None, field: str | None = None):
        super().__init__(message)
        self.provider = provider
        self.field = field

    @classmethod
    def missing_credential(cls, provider: str, field: str) -> ConfigurationError:
        return cls(
            f"Missing required credential: {field} for provider {provider}",
            provider=provider,
            field=field,
        )


class UnknownProviderError(OAuthError):
    """No adapter exists for the requested provider name."""

    def __init__(self, name: str, available: Sequence[str]):
        self.name = name
        self.available = list(available)
        super().__init__(
            f"Unknown provider: {name}. Available providers: {', '.join(self.available)}"
        )


class ProviderNotRegisteredError(OAuthError):
    """The provider exists but was never registered with the service."""

    def __init__(self, name: str, registered: Sequence[str], available: Sequence[str]):
        self.name = name
        self.registered = list(registered)
        self.available = list(available)
        super().__init__(
            f"Provider '{name}' is not registered. "
            f"Registered: {', '.join(self.registered) or 'none'}. "
            f"Available: {', '.join(self.available)}"
        )


class ProviderCallbackError(OAuthError):
    """The provider redirected back with an `error` parameter."""

    def __init__(self, provider: str, error: str, error_description: str | None = None):
        self.provider = provider
        self.error = error
        self.error_description = error_description
        super().__init__(f"OAuth error from {provider}: {error} - {error_description or ''}")


class InvalidCallbackError(OAuthError):
    """The callback carried neither an error nor an authorization code."""

    def __init__(self, provider: str, message: str = "Missing authorization code in callback"):
        self.provider = provider
        super().__init__(message)


class InvalidOptionsError(OAuthError):
    """Refresh or revoke options are missing a field or carry an invalid value."""


class TransportError(OAuthError):
    """A remote call failed: status >= 400, a network failure, or a timeout.

    Attributes:
        status_code: HTTP status of the response, None when no response arrived.
        body: Parsed (or raw text) response body, if any.
        method: HTTP method of the failed request.
        url: Request URL without query string.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        body: Any = None,
        method: str | None = None,
        url: str | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.method = method
        self.url = url


class TokenResponseError(TransportError):
    """A token endpoint answered successfully but without a usable token.

    `status_code` is always None: the response itself was not an HTTP error.
    """

    def __init__(
        self,
        provider: str,
        error: str,
        error_description: str | None = None,
        *,
        body: Any = None,
    ):
        self.provider = provider
        self.error = error
        self.error_description = error_description
        message = f"{provider} token request failed: {error}"
        if error_description:
            message = f"{message} - {error_description}"
        super().__init__(message, body=body)


__all__ = [
    "ConfigurationError",
    "InvalidCallbackError",
    "InvalidOptionsError",
    "OAuthError",
    "ProviderCallbackError",
    "ProviderNotRegisteredError",
    "TokenResponseError",
    "TransportError",
    "UnknownProviderError",
]
