"""Facebook (Meta) OAuth provider adapter.

Facebook has no refresh tokens. The authorization code yields a short-lived
token which is immediately traded for a long-lived (60-day) one through the
`fb_exchange_token` grant; "refreshing" repeats that grant with the current
long-lived token.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, ClassVar

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
from ..url_utils import replace_template
from .base import DEFAULT_REQUIRED_CREDENTIALS, BaseOAuthProvider

logger = logging.getLogger(__name__)

FACEBOOK_GRAPH_URL = "https://graph.facebook.com/{{api_version}}"
DEFAULT_API_VERSION = "v18.0"
DEFAULT_SCOPE = "public_profile,email"
USER_FIELDS = "id,name,email,first_name,last_name,picture"


class FacebookProvider(BaseOAuthProvider):
    name = "facebook"
    required_credentials: ClassVar[tuple[str, ...]] = (*DEFAULT_REQUIRED_CREDENTIALS, "api_version")

    @property
    def api_version(self) -> str:
        return self.credentials.get("api_version") or DEFAULT_API_VERSION

    @property
    def graph_url(self) -> str:
        return replace_template(FACEBOOK_GRAPH_URL, {"api_version": self.api_version})

    def generate_auth_url(self, options: AuthUrlOptions | Mapping[str, Any] | None = None) -> str:
        options = options or {}
        params: dict[str, Any] = {
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "response_type": "code",
            "scope": options.get("scope") or DEFAULT_SCOPE,
        }
        if options.get("state"):
            params["state"] = options["state"]

        return self.build_url(f"{self.graph_url}/dialog/oauth", params)

    async def exchange_code_for_token(
        self, code: str, state: str | None = None, *, code_verifier: str | None = None
    ) -> OAuthTokenResponse:
        short_lived = await self.http_client.get(
            f"{self.graph_url}/oauth/access_token",
            params={
                "client_id": self.client_id,
                "redirect_uri": self.redirect_uri,
                "client_secret": self.client_secret,
                "code": code,
            },
        )
        short_token = self.parse_token_response(short_lived, context="exchange_code")
        logger.debug("Facebook short-lived token obtained, exchanging for long-lived token")
        return await self._exchange_long_lived(short_token.access_token, context="exchange_code")

    async def refresh_token(
        self, options: TokenRefreshOptions | Mapping[str, Any]
    ) -> OAuthTokenResponse:
        refresh = coerce_refresh_options(options)
        # The long-lived access token itself plays the role of the refresh token
        return await self._exchange_long_lived(refresh.refresh_token, context="refresh_token")

    async def revoke_token(self, options: TokenRevokeOptions | Mapping[str, Any]) -> None:
        revoke = coerce_revoke_options(options)
        await self.http_client.delete(
            f"{self.graph_url}/me/permissions", headers=self.bearer(revoke.token)
        )
        logger.debug("Facebook permissions revoked")

    async def get_user_info(self, access_token: str) -> UserInfoResponse:
        return await self.http_client.get(
            f"{self.graph_url}/me",
            params={"fields": USER_FIELDS, "access_token": access_token},
            headers={"Content-Type": f"{FORM_CONTENT_TYPE};charset=utf-8"},
        )

    async def _exchange_long_lived(self, token: str, *, context: str) -> OAuthTokenResponse:
        payload = await self.http_client.get(
            f"{self.graph_url}/oauth/access_token",
            params={
                "grant_type": "fb_exchange_token",
                "client_id": self.client_id,
                "client_secret": self.client_secret,
                "fb_exchange_token": token,
            },
        )
        return self.parse_token_response(payload, context=context)
