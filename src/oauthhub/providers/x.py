"""X (formerly Twitter) OAuth 2.0 provider adapter.

X authenticates confidential clients with HTTP Basic credentials on every
token call and expects PKCE on the authorization request.
"""

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

X_AUTH_URL = "https://x.com/i/oauth2/authorize"
X_TOKEN_URL = "https://api.x.com/2/oauth2/token"
X_REVOKE_URL = "https://api.x.com/2/oauth2/revoke"
X_USERINFO_URL = "https://api.x.com/2/users/me"

DEFAULT_SCOPE = "tweet.read users.read"

_FORM = {"Content-Type": FORM_CONTENT_TYPE}


class XProvider(BaseOAuthProvider):
    name = "x"

    def generate_auth_url(self, options: AuthUrlOptions | Mapping[str, Any] | None = None) -> str:
        options = options or {}
        params: dict[str, Any] = {
            "response_type": "code",
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "scope": options.get("scope") or DEFAULT_SCOPE,
        }

        if options.get("state"):
            params["state"] = options["state"]
        if options.get("code_challenge"):
            params["code_challenge"] = options["code_challenge"]
        if options.get("code_challenge_method"):
            params["code_challenge_method"] = options["code_challenge_method"]

        return self.build_url(X_AUTH_URL, params)

    async def exchange_code_for_token(
        self, code: str, state: str | None = None, *, code_verifier: str | None = None
    ) -> OAuthTokenResponse:
        data = {
            "grant_type": "authorization_code",
            "code": code,
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
        }
        if code_verifier:
            data["code_verifier"] = code_verifier

        payload = await self.http_client.post(
            X_TOKEN_URL, data, headers=_FORM, auth=self.basic_auth
        )
        return self.parse_token_response(payload, context="exchange_code")

    async def refresh_token(
        self, options: TokenRefreshOptions | Mapping[str, Any]
    ) -> OAuthTokenResponse:
        refresh = coerce_refresh_options(options)
        data = {
            "grant_type": "refresh_token",
            "refresh_token": refresh.refresh_token,
            "client_id": self.client_id,
        }

        payload = await self.http_client.post(
            X_TOKEN_URL, data, headers=_FORM, auth=self.basic_auth
        )
        return self.parse_token_response(payload, context="refresh_token")

    async def revoke_token(self, options: TokenRevokeOptions | Mapping[str, Any]) -> None:
        revoke = coerce_revoke_options(options)
        await self.http_client.post(
            X_REVOKE_URL,
            {
                "token": revoke.token,
                "client_id": self.client_id,
                "token_type_hint": revoke.token_type_hint or "access_token",
            },
            headers=_FORM,
            auth=self.basic_auth,
        )
        logger.debug("X token revoked")

    async def get_user_info(self, access_token: str) -> UserInfoResponse:
        return await self.http_client.get(X_USERINFO_URL, headers=self.bearer(access_token))
