"""GitHub OAuth provider adapter."""

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
from .base import BaseOAuthProvider

logger = logging.getLogger(__name__)

GITHUB_AUTH_URL = "https://github.com/login/oauth/authorize"
GITHUB_TOKEN_URL = "https://github.com/login/oauth/access_token"
GITHUB_API_URL = "https://api.github.com"

GITHUB_API_ACCEPT = "application/vnd.github+json"


class GitHubProvider(BaseOAuthProvider):
    """GitHub OAuth App adapter.

    The token endpoint answers form-encoded text unless asked for JSON, and
    reports failures as 200 responses with an `error` field.
    """

    name = "github"

    def generate_auth_url(self, options: AuthUrlOptions | Mapping[str, Any] | None = None) -> str:
        options = options or {}
        params: dict[str, Any] = {
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
        }

        if options.get("scope"):
            params["scope"] = options["scope"]
        if options.get("state"):
            params["state"] = options["state"]
        if options.get("allow_signup") is not None:
            params["allow_signup"] = options["allow_signup"]

        return self.build_url(GITHUB_AUTH_URL, params)

    async def exchange_code_for_token(
        self, code: str, state: str | None = None, *, code_verifier: str | None = None
    ) -> OAuthTokenResponse:
        data = {
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "code": code,
            "redirect_uri": self.redirect_uri,
        }

        payload = await self.http_client.post(
            GITHUB_TOKEN_URL, data, headers={"Accept": "application/json"}
        )
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

        payload = await self.http_client.post(
            GITHUB_TOKEN_URL, data, headers={"Accept": "application/json"}
        )
        return self.parse_token_response(payload, context="refresh_token")

    async def revoke_token(self, options: TokenRevokeOptions | Mapping[str, Any]) -> None:
        revoke = coerce_revoke_options(options)
        # GitHub token revocation requires Basic auth with client credentials.
        await self.http_client.delete(
            f"{GITHUB_API_URL}/applications/{self.client_id}/token",
            headers={"Accept": GITHUB_API_ACCEPT},
            data={"access_token": revoke.token},
            auth=self.basic_auth,
        )
        logger.debug("GitHub token revoked")

    async def get_user_info(self, access_token: str) -> UserInfoResponse:
        return await self.http_client.get(
            f"{GITHUB_API_URL}/user",
            headers={**self.bearer(access_token), "Accept": GITHUB_API_ACCEPT},
        )
