"""Tests for OAuthService registration and dispatch."""

from urllib.parse import parse_qs, urlsplit

import httpx
import pytest

from oauthhub import OAuthService
from oauthhub.config import config_from_dict
from oauthhub.errors import (
    ConfigurationError,
    InvalidOptionsError,
    OAuthError,
    ProviderNotRegisteredError,
    UnknownProviderError,
)
from oauthhub.models import OAuthTokenResponse
from oauthhub.providers import GoogleProvider, KakaoProvider, list_available_providers
from provider_testkit import CREDENTIALS, RecordingTransport, form_body


@pytest.fixture
def service(transport: RecordingTransport) -> OAuthService:
    return OAuthService(http_client=transport.client())


def test_new_service_has_no_providers() -> None:
    assert OAuthService().list_registered_providers() == []


def test_register_providers(service: OAuthService) -> None:
    service.register_provider("google", CREDENTIALS)
    service.register_provider("kakao", CREDENTIALS)

    assert service.list_registered_providers() == ["google", "kakao"]
    assert service.get_registered_providers() == ["google", "kakao"]
    assert isinstance(service.get_provider("google"), GoogleProvider)
    assert service.get_provider("kakao").name == "kakao"


def test_register_again_replaces(service: OAuthService) -> None:
    service.register_provider("google", CREDENTIALS)
    first = service.get_provider("google")

    service.register_provider("google", {**CREDENTIALS, "client_id": "other"})

    assert service.list_registered_providers() == ["google"]
    assert service.get_provider("google") is not first
    assert service.get_provider("google").client_id == "other"


def test_register_unknown_provider(service: OAuthService) -> None:
    with pytest.raises(UnknownProviderError):
        service.register_provider("myspace", CREDENTIALS)

    assert service.list_registered_providers() == []
    assert "myspace" not in list_available_providers()


def test_register_missing_credential(service: OAuthService) -> None:
    with pytest.raises(ConfigurationError, match="client_secret"):
        service.register_provider("naver", {"client_id": "cid", "redirect_uri": "http://x"})

    assert service.list_registered_providers() == []


def test_get_unregistered_provider(service: OAuthService) -> None:
    service.register_provider("google", CREDENTIALS)

    with pytest.raises(ProviderNotRegisteredError) as exc_info:
        service.get_provider("github")

    message = str(exc_info.value)
    assert "'github' is not registered" in message
    assert "google" in message


def test_generate_auth_url_dispatches(service: OAuthService) -> None:
    service.register_provider("google", CREDENTIALS)

    url = service.generate_auth_url("google", {"scope": "email", "state": "s"})

    assert url.startswith("https://accounts.google.com/o/oauth2/v2/auth?")
    params = parse_qs(urlsplit(url).query)
    assert params["scope"] == ["email"]
    assert params["state"] == ["s"]


def test_generate_auth_url_unregistered(service: OAuthService) -> None:
    with pytest.raises(ProviderNotRegisteredError):
        service.generate_auth_url("google")


@pytest.mark.asyncio
async def test_handle_callback_dispatches(
    service: OAuthService, transport: RecordingTransport, token_payload: dict
) -> None:
    service.register_provider("kakao", CREDENTIALS)
    transport.add("POST", "kauth.kakao.com/oauth/token", httpx.Response(200, json=token_payload))

    tokens = await service.handle_callback("kakao", {"code": "c", "state": "s"})

    assert isinstance(tokens, OAuthTokenResponse)
    assert tokens.access_token == "at"
    assert form_body(transport.last)["code"] == "c"


@pytest.mark.asyncio
async def test_refresh_revoke_and_user_info_dispatch(
    service: OAuthService, transport: RecordingTransport
) -> None:
    service.register_provider("google", CREDENTIALS)
    transport.add("POST", "/token", httpx.Response(200, json={"access_token": "new"}))
    transport.add("POST", "/revoke", httpx.Response(200))
    transport.add("GET", "/userinfo", httpx.Response(200, json={"id": "1"}))

    tokens = await service.refresh_token("google", {"refresh_token": "rt"})
    assert tokens.access_token == "new"

    assert await service.revoke_token("google", {"token": "new"}) is None
    assert await service.get_user_info("google", "new") == {"id": "1"}
    assert [r.method for r in transport.requests] == ["POST", "POST", "GET"]


@pytest.mark.asyncio
async def test_async_operations_unregistered(service: OAuthService) -> None:
    with pytest.raises(ProviderNotRegisteredError):
        await service.handle_callback("naver", {"code": "c"})
    with pytest.raises(ProviderNotRegisteredError):
        await service.refresh_token("naver", {"refresh_token": "rt"})
    with pytest.raises(ProviderNotRegisteredError):
        await service.revoke_token("naver", {"token": "t"})
    with pytest.raises(ProviderNotRegisteredError):
        await service.get_user_info("naver", "t")


def test_register_providers_from_mappings(service: OAuthService) -> None:
    service.register_providers(
        [
            {"name": "google", "credentials": CREDENTIALS},
            {"name": " Kakao ", "credentials": CREDENTIALS},
        ]
    )
    assert service.list_registered_providers() == ["google", "kakao"]
    assert isinstance(service.get_provider("kakao"), KakaoProvider)


def test_from_config() -> None:
    config = config_from_dict(
        {
            "http": {"timeout": 3},
            "providers": [
                {"name": "github", "credentials": CREDENTIALS},
                {"name": "x", "credentials": CREDENTIALS},
            ],
        }
    )

    service = OAuthService.from_config(config)

    assert service.list_registered_providers() == ["github", "x"]
    assert service.get_provider("github").http_client.timeout == 3


def test_from_config_keeps_given_client(transport: RecordingTransport) -> None:
    client = transport.client()
    config = config_from_dict({"providers": [{"name": "naver", "credentials": CREDENTIALS}]})

    service = OAuthService.from_config(config, http_client=client)

    assert service.get_provider("naver").http_client is client


@pytest.mark.asyncio
async def test_invalid_options_stay_in_error_taxonomy(
    service: OAuthService, transport: RecordingTransport
) -> None:
    service.register_provider("google", CREDENTIALS)

    with pytest.raises(InvalidOptionsError) as exc_info:
        await service.refresh_token("google", {})

    assert isinstance(exc_info.value, OAuthError)
    assert exc_info.value.__cause__ is not None
    assert transport.requests == []
