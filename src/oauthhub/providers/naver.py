"""Naver OAuth provider adapter.

Naver routes exchange, refresh and deletion through one token endpoint,
distinguished only by `grant_type`.
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

NAVER_AUTH_URL = "https://nid.naver.com/oauth2.0/authorize"
NAVER_TOKEN_URL = "https://nid.naver.com/oauth2.0/token"
NAVER_USERINFO_URL = "https://openapi.naver.com/v1/nid/me"

_FORM_UTF8 = {"Content-Type": f"{FORM_CONTENT_TYPE};charset=utf-8"}


class NaverProvider(BaseOAuthProvider):
    name = "naver"

    def generate_auth_url(self, options: AuthUrlOptions | Mapping[str, Any] | None = None) -> str:
        options = options or {}
        params: dict[str, Any] = {
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "response_type": "code",
        }
        if options.get("state"):
            params["state"] = options["state"]

        return self.build_url(NAVER_AUTH_URL, params)

    async def exchange_code_for_token(
        self, code: str, state: str | None = None, *, code_verifier: str | None = None
    ) -> OAuthTokenResponse:
        data = {
            "grant_type": "authorization_code",
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "code": code,
        }
        if state:
            data["state"] = state

        payload = await self.http_client.post(NAVER_TOKEN_URL, data, headers=_FORM_UTF8)
        return self.parse_token_response(payload, context="exchange_code")

    async def refresh_token(
        self, options: TokenRefreshOptions | Mapping[str, Any]
    ) -> OAuthTokenResponse:
        refresh = coerce_refresh_options(options)
        data = {
            "grant_type": "refresh_token",
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "refresh_token": refresh.refresh_token,
        }

        payload = await self.http_client.post(NAVER_TOKEN_URL, data, headers=_FORM_UTF8)
        return self.parse_token_response(payload, context="refresh_token")

    async def revoke_token(self, options: TokenRevokeOptions | Mapping[str, Any]) -> None:
        revoke = coerce_revoke_options(options)
        await self.http_client.post(
            NAVER_TOKEN_URL,
            {
                "grant_type": "delete",
                "client_id": self.client_id,
                "client_secret": self.client_secret,
                "access_token": revoke.token,
            },
            headers=_FORM_UTF8,
        )
        logger.debug("Naver token deleted")

    async def get_user_info(self, access_token: str) -> UserInfoResponse:
        return await self.http_client.get(NAVER_USERINFO_URL, headers=self.bearer(access_token))
