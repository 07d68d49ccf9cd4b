"""Pydantic models for the oauthhub data model.

Token responses and callback parameters are modeled loosely: providers add
their own fields (Kakao's `refresh_token_expires_in`, Naver's `result`...), and
those must reach the caller untouched. Library-owned option bags are strict
and immutable.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal, TypedDict

from pydantic import BaseModel, ConfigDict, ValidationError

from .errors import InvalidOptionsError

ProviderCredentials = Mapping[str, str]
UserInfoResponse = dict[str, Any]


class OAuthBaseModel(BaseModel):
    """Base model for oauthhub models.

    - extra="forbid": Rejects any fields not defined in the model
    - frozen=True: Makes instances immutable
    """

    model_config = ConfigDict(extra="forbid", frozen=True)


class OAuthTokenResponse(BaseModel):
    """Token endpoint response; provider-specific extra fields are kept verbatim."""

    model_config = ConfigDict(extra="allow", frozen=True)

    access_token: str
    token_type: str | None = None
    expires_in: int | None = None
    refresh_token: str | None = None
    refresh_token_expires_in: int | None = None
    scope: str | None = None
    id_token: str | None = None


class OAuthCallbackParams(BaseModel):
    """Query parameters of the provider's redirect back to the application."""

    model_config = ConfigDict(extra="allow", frozen=True)

    code: str | None = None
    state: str | None = None
    error: str | None = None
    error_description: str | None = None
    # Kept by the caller from the authorization step; forwarded for PKCE
    code_verifier: str | None = None


class TokenRefreshOptions(OAuthBaseModel):
    refresh_token: str


class TokenRevokeOptions(OAuthBaseModel):
    # Provider-specific fields may ride along
    model_config = ConfigDict(extra="allow", frozen=True)

    token: str
    token_type_hint: Literal["access_token", "refresh_token"] | None = None
    target_id: str | None = None


class PKCEPair(OAuthBaseModel):
    """PKCE verifier and its S256 challenge."""

    code_verifier: str
    code_challenge: str
    code_challenge_method: Literal["S256"] = "S256"


class AuthUrlOptions(TypedDict, total=False):
    """Options for building an authorization URL.

    Providers read only the keys they understand; unknown keys are ignored.
    """

    scope: str | list[str]
    state: str
    code_challenge: str
    code_challenge_method: str
    access_type: str
    prompt: str
    login_hint: str
    include_granted_scopes: bool
    enable_granular_consent: bool
    allow_signup: bool
    service_terms: str
    nonce: str


def coerce_callback_params(
    params: OAuthCallbackParams | Mapping[str, Any] | None,
) -> OAuthCallbackParams:
    if isinstance(params, OAuthCallbackParams):
        return params
    return OAuthCallbackParams.model_validate(dict(params or {}))


def coerce_refresh_options(
    options: TokenRefreshOptions | Mapping[str, Any],
) -> TokenRefreshOptions:
    if isinstance(options, TokenRefreshOptions):
        return options
    try:
        return TokenRefreshOptions.model_validate(dict(options))
    except ValidationError as exc:
        raise InvalidOptionsError(f"Invalid refresh options: {exc}") from exc


def coerce_revoke_options(options: TokenRevokeOptions | Mapping[str, Any]) -> TokenRevokeOptions:
    if isinstance(options, TokenRevokeOptions):
        return options
    try:
        return TokenRevokeOptions.model_validate(dict(options))
    except ValidationError as exc:
        raise InvalidOptionsError(f"Invalid revoke options: {exc}") from exc


__all__ = [
    "AuthUrlOptions",
    "OAuthBaseModel",
    "OAuthCallbackParams",
    "OAuthTokenResponse",
    "PKCEPair",
    "ProviderCredentials",
    "TokenRefreshOptions",
    "TokenRevokeOptions",
    "UserInfoResponse",
    "coerce_callback_params",
    "coerce_refresh_options",
    "coerce_revoke_options",
]
