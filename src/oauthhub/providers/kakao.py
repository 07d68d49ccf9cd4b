"""Kakao OAuth provider adapter.

Kakao has no revoke endpoint; revocation is a logout call against the
user API, optionally targeting a user id (admin-key flows).
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

KAKAO_AUTH_URL = "https://kauth.kakao.com/oauth/authorize"
KAKAO_TOKEN_URL = "https://kauth.kakao.com/oauth/token"
KAKAO_LOGOUT_URL = "https://kapi.kakao.com/v1/user/logout"
KAKAO_USERINFO_URL = "https://kapi.kakao.com/v2/user/me"

_FORM_UTF8 = {"Content-Type": f"{FORM_CONTENT_TYPE};charset=utf-8"}

_OPTIONAL_AUTH_PARAMS = ("scope", "state", "prompt", "login_hint", "service_terms", "nonce")


class KakaoProvider(BaseOAuthProvider):
    name = "kakao"

    def generate_auth_url(self, options: AuthUrlOptions | Mapping[str, Any] | None = None) -> str:
        options = options or {}
        params: dict[str, Any] = {
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "response_type": "code",
        }
        for key in _OPTIONAL_AUTH_PARAMS:
            if options.get(key):
                params[key] = options[key]

        return self.build_url(KAKAO_AUTH_URL, params)

    async def exchange_code_for_token(
        self, code: str, state: str | None = None, *, code_verifier: str | None = None
    ) -> OAuthTokenResponse:
        data = {
            "grant_type": "authorization_code",
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "code": code,
        }
        # Client secret is optional in the Kakao developer console
        if self.client_secret:
            data["client_secret"] = self.client_secret

        payload = await self.http_client.post(KAKAO_TOKEN_URL, data, headers=_FORM_UTF8)
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

        payload = await self.http_client.post(KAKAO_TOKEN_URL, data, headers=_FORM_UTF8)
        return self.parse_token_response(payload, context="refresh_token")

    async def revoke_token(self, options: TokenRevokeOptions | Mapping[str, Any]) -> None:
        revoke = coerce_revoke_options(options)
        await self.http_client.post(
            KAKAO_LOGOUT_URL,
            {"target_id_type": "user_id", "target_id": revoke.target_id or ""},
            headers={**_FORM_UTF8, **self.bearer(revoke.token)},
        )
        logger.debug("Kakao user logged out")

    async def get_user_info(self, access_token: str) -> UserInfoResponse:
        return await self.http_client.get(KAKAO_USERINFO_URL, headers=self.bearer(access_token))
