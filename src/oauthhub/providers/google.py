"""Google OAuth provider adapter."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..models import (
    AuthUrlOptions,
    OAuthTokenResponse,
    TokenRefreshOptions,
    TokenRevokeOptions,
    UserInfoResponse,
    coerce_refresh_options,
    coerce_revoke_options,
)
from ..transport import FORM_CONTENT_TYPE
from .base import BaseOAuthProvider

logger = logging.getLogger(__name__)

# Google OAuth endpoints
GOOGLE_AUTH_URL = "https://accounts.google.com/o/oauth2/v2/auth"
GOOGLE_TOKEN_URL = "https://oauth2.googleapis.com/token"
GOOGLE_REVOKE_URL = "https://oauth2.googleapis.com/revoke"
GOOGLE_USERINFO_URL = "https://www.googleapis.com/oauth2/v2/userinfo"

DEFAULT_SCOPE = "email profile"


class GoogleProvider(BaseOAuthProvider):
    """Google OAuth 2.0 adapter.

    Requests offline access by default so the first exchange yields a
    refresh token.
    """

    name = "google"

    def generate_auth_url(self, options: AuthUrlOptions | Mapping[str, Any] | None = None) -> str:
        options = options or {}
        params: dict[str, Any] = {
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "response_type": "code",
            "scope": options.get("scope") or DEFAULT_SCOPE,
            "access_type": options.get("access_type") or "offline",
        }

        if options.get("state"):
            params["state"] = options["state"]
        if options.get("include_granted_scopes") is not None:
            params["include_granted_scopes"] = options["include_granted_scopes"]
        if options.get("enable_granular_consent") is not None:
            params["enable_granular_consent"] = options["enable_granular_consent"]
        if options.get("login_hint"):
            params["login_hint"] = options["login_hint"]
        if options.get("prompt"):
            params["prompt"] = options["prompt"]

        return self.build_url(GOOGLE_AUTH_URL, params)

    async def exchange_code_for_token(
        self, code: str, state: str | None = None, *, code_verifier: str | None = None
    ) -> OAuthTokenResponse:
        data = {
            "code": code,
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "redirect_uri": self.redirect_uri,
            "grant_type": "authorization_code",
        }

        payload = await self.http_client.post(
            GOOGLE_TOKEN_URL, data, headers={"Content-Type": FORM_CONTENT_TYPE}
        )
        return self.parse_token_response(payload, context="exchange_code")

    async def refresh_token(
        self, options: TokenRefreshOptions | Mapping[str, Any]
    ) -> OAuthTokenResponse:
        refresh = coerce_refresh_options(options)
        data = {
            "grant_type": "refresh_token",
            "client_id": self.client_id,
            "refresh_token": refresh.refresh_token,
        }
        if self.client_secret:
            data["client_secret"] = self.client_secret

        payload = await self.http_client.post(
            GOOGLE_TOKEN_URL,
            data,
            headers={"Content-Type": f"{FORM_CONTENT_TYPE};charset=utf-8"},
        )
        return self.parse_token_response(payload, context="refresh_token")

    async def revoke_token(self, options: TokenRevokeOptions | Mapping[str, Any]) -> None:
        revoke = coerce_revoke_options(options)
        await self.http_client.post(
            GOOGLE_REVOKE_URL,
            {"token": revoke.token},
            headers={"Content-Type": FORM_CONTENT_TYPE},
        )
        logger.debug("Google token revoked")

    async def get_user_info(self, access_token: str) -> UserInfoResponse:
        return await self.http_client.get(GOOGLE_USERINFO_URL, headers=self.bearer(access_token))
