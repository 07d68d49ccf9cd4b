"""Contract tests for provider adapters.

These tests assert the invariants that must hold for every adapter, without
duplicating the same assertions in every provider-specific file.
Provider-specific behavior remains tested in the per-provider modules.
"""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlsplit

import httpx
import pytest

from oauthhub.errors import (
    ConfigurationError,
    InvalidCallbackError,
    InvalidOptionsError,
    ProviderCallbackError,
    TokenResponseError,
    TransportError,
)
from oauthhub.models import OAuthTokenResponse
from oauthhub.providers import (
    BaseOAuthProvider,
    FacebookProvider,
    GitHubProvider,
    GoogleProvider,
    KakaoProvider,
    NaverProvider,
    XProvider,
)
from provider_testkit import CREDENTIALS, FACEBOOK_CREDENTIALS, RecordingTransport


@dataclass(frozen=True)
class _ProviderCase:
    name: str
    provider_class: type[BaseOAuthProvider]
    credentials: dict[str, str]
    auth_host: str
    required: tuple[str, ...]


_BASE_REQUIRED = ("client_id", "client_secret", "redirect_uri")

CASES = [
    _ProviderCase("google", GoogleProvider, CREDENTIALS, "accounts.google.com", _BASE_REQUIRED),
    _ProviderCase("kakao", KakaoProvider, CREDENTIALS, "kauth.kakao.com", _BASE_REQUIRED),
    _ProviderCase("naver", NaverProvider, CREDENTIALS, "nid.naver.com", _BASE_REQUIRED),
    _ProviderCase("github", GitHubProvider, CREDENTIALS, "github.com", _BASE_REQUIRED),
    _ProviderCase(
        "facebook",
        FacebookProvider,
        FACEBOOK_CREDENTIALS,
        "graph.facebook.com",
        (*_BASE_REQUIRED, "api_version"),
    ),
    _ProviderCase("x", XProvider, CREDENTIALS, "x.com", _BASE_REQUIRED),
]

_MISSING_FIELD_CASES = [(case, field) for case in CASES for field in case.required]


def _ids(case: _ProviderCase) -> str:
    return case.name


@pytest.mark.parametrize("case", CASES, ids=_ids)
def test_name_and_required_fields(case: _ProviderCase) -> None:
    provider = case.provider_class(case.credentials)
    assert provider.name == case.name
    assert provider.required_credential_fields() == list(case.required)


@pytest.mark.parametrize(
    ("case", "field"),
    _MISSING_FIELD_CASES,
    ids=[f"{case.name}-{field}" for case, field in _MISSING_FIELD_CASES],
)
def test_missing_required_credential_raises(case: _ProviderCase, field: str) -> None:
    credentials = {k: v for k, v in case.credentials.items() if k != field}

    with pytest.raises(ConfigurationError) as exc_info:
        case.provider_class(credentials)

    assert exc_info.value.field == field
    assert exc_info.value.provider == case.name
    assert field in str(exc_info.value)
    assert case.name in str(exc_info.value)


@pytest.mark.parametrize("case", CASES, ids=_ids)
def test_empty_required_credential_raises(case: _ProviderCase) -> None:
    with pytest.raises(ConfigurationError):
        case.provider_class({**case.credentials, "client_id": ""})


@pytest.mark.parametrize("case", CASES, ids=_ids)
def test_credentials_are_copied_and_read_only(case: _ProviderCase) -> None:
    credentials = dict(case.credentials)
    provider = case.provider_class(credentials)
    credentials["client_id"] = "changed"

    assert provider.credentials["client_id"] == "cid"
    with pytest.raises(TypeError):
        provider.credentials["client_id"] = "x"  # type: ignore[index]


@pytest.mark.parametrize("case", CASES, ids=_ids)
def test_generate_auth_url_is_pure_and_deterministic(case: _ProviderCase) -> None:
    transport = RecordingTransport()
    provider = case.provider_class(case.credentials, http_client=transport.client())
    options = {"state": "abc", "scope": "email"}

    first = provider.generate_auth_url(options)
    second = provider.generate_auth_url(dict(options))

    assert first == second
    assert urlsplit(first).hostname == case.auth_host
    assert "client_id=cid" in first
    assert "state=abc" in first
    assert transport.requests == []


@pytest.mark.parametrize("case", CASES, ids=_ids)
def test_generate_auth_url_without_options(case: _ProviderCase) -> None:
    provider = case.provider_class(case.credentials)
    url = provider.generate_auth_url()
    assert url.startswith("https://")
    assert "redirect_uri=http%3A%2F%2Flocalhost%2Fcallback" in url


@pytest.mark.asyncio
@pytest.mark.parametrize("case", CASES, ids=_ids)
async def test_callback_error_raises_without_network(case: _ProviderCase) -> None:
    transport = RecordingTransport()
    provider = case.provider_class(case.credentials, http_client=transport.client())

    with pytest.raises(ProviderCallbackError) as exc_info:
        await provider.handle_callback(
            {"error": "access_denied", "error_description": "User denied"}
        )

    assert exc_info.value.error == "access_denied"
    assert exc_info.value.error_description == "User denied"
    assert exc_info.value.provider == case.name
    assert transport.requests == []


@pytest.mark.asyncio
@pytest.mark.parametrize("case", CASES, ids=_ids)
async def test_callback_error_wins_over_code(case: _ProviderCase) -> None:
    transport = RecordingTransport()
    provider = case.provider_class(case.credentials, http_client=transport.client())

    with pytest.raises(ProviderCallbackError):
        await provider.handle_callback({"error": "server_error", "code": "c"})
    assert transport.requests == []


@pytest.mark.asyncio
@pytest.mark.parametrize("case", CASES, ids=_ids)
async def test_callback_without_code_raises_without_network(case: _ProviderCase) -> None:
    transport = RecordingTransport()
    provider = case.provider_class(case.credentials, http_client=transport.client())

    with pytest.raises(InvalidCallbackError, match="Missing authorization code"):
        await provider.handle_callback({})
    with pytest.raises(InvalidCallbackError):
        await provider.handle_callback({"state": "abc"})
    assert transport.requests == []


@pytest.mark.asyncio
@pytest.mark.parametrize("case", CASES, ids=_ids)
async def test_callback_with_code_returns_token_response(case: _ProviderCase) -> None:
    transport = RecordingTransport(
        default=httpx.Response(200, json={"access_token": "at", "token_type": "bearer", "extra": 1})
    )
    provider = case.provider_class(case.credentials, http_client=transport.client())

    tokens = await provider.handle_callback({"code": "the-code", "state": "abc"})

    assert isinstance(tokens, OAuthTokenResponse)
    assert tokens.access_token == "at"
    assert tokens.model_dump()["extra"] == 1
    assert transport.requests


@pytest.mark.asyncio
@pytest.mark.parametrize("case", CASES, ids=_ids)
async def test_token_endpoint_error_status_raises_transport_error(case: _ProviderCase) -> None:
    transport = RecordingTransport(
        default=httpx.Response(400, json={"error": "invalid_grant"})
    )
    provider = case.provider_class(case.credentials, http_client=transport.client())

    with pytest.raises(TransportError) as exc_info:
        await provider.handle_callback({"code": "bad"})
    assert exc_info.value.status_code == 400


@pytest.mark.asyncio
@pytest.mark.parametrize("case", CASES, ids=_ids)
async def test_token_body_without_access_token_raises(case: _ProviderCase) -> None:
    transport = RecordingTransport(default=httpx.Response(200, json={"token_type": "bearer"}))
    provider = case.provider_class(case.credentials, http_client=transport.client())

    with pytest.raises(TokenResponseError):
        await provider.refresh_token({"refresh_token": "rt"})


@pytest.mark.asyncio
@pytest.mark.parametrize("case", CASES, ids=_ids)
async def test_revoke_error_propagates_as_transport_error(case: _ProviderCase) -> None:
    transport = RecordingTransport(default=httpx.Response(401, json={"message": "nope"}))
    provider = case.provider_class(case.credentials, http_client=transport.client())

    with pytest.raises(TransportError) as exc_info:
        await provider.revoke_token({"token": "tok"})
    assert exc_info.value.status_code == 401


@pytest.mark.asyncio
@pytest.mark.parametrize("case", CASES, ids=_ids)
async def test_user_info_passes_payload_through(case: _ProviderCase) -> None:
    profile = {"id": "42", "nested": {"k": ["v"]}}
    transport = RecordingTransport(default=httpx.Response(200, json=profile))
    provider = case.provider_class(case.credentials, http_client=transport.client())

    assert await provider.get_user_info("at") == profile
    assert len(transport.requests) == 1
    assert transport.last.method == "GET"


@pytest.mark.asyncio
@pytest.mark.parametrize("case", CASES, ids=_ids)
async def test_malformed_callback_params_raise_invalid_callback(case: _ProviderCase) -> None:
    transport = RecordingTransport()
    provider = case.provider_class(case.credentials, http_client=transport.client())

    # Multi-value query dicts hand over lists
    with pytest.raises(InvalidCallbackError, match="Invalid callback parameters") as exc_info:
        await provider.handle_callback({"code": ["a", "b"], "state": "s"})

    assert exc_info.value.provider == case.name
    assert transport.requests == []


@pytest.mark.asyncio
@pytest.mark.parametrize("case", CASES, ids=_ids)
async def test_invalid_refresh_and_revoke_options(case: _ProviderCase) -> None:
    transport = RecordingTransport()
    provider = case.provider_class(case.credentials, http_client=transport.client())

    with pytest.raises(InvalidOptionsError, match="refresh_token"):
        await provider.refresh_token({})
    with pytest.raises(InvalidOptionsError, match="token_type_hint"):
        await provider.revoke_token({"token": "t", "token_type_hint": "id_token"})
    with pytest.raises(InvalidOptionsError):
        await provider.revoke_token({})
    assert transport.requests == []
