"""Commands that talk to a provider: code exchange, refresh, revoke, user info."""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any

import click

from ..errors import OAuthError
from ..service import OAuthService
from .utils import configure_logging, load_service, output_error, output_result


def _common_options(func: Callable[..., None]) -> Callable[..., None]:
    func = click.option("--debug", is_flag=True, help="Show detailed debug information")(func)
    func = click.option("--json-output", is_flag=True, help="Output in JSON format")(func)
    func = click.option(
        "--config", "config_path", type=click.Path(), help="Path to oauthhub.yml"
    )(func)
    return func


def _run(
    config_path: str | None,
    json_output: bool,
    debug: bool,
    call: Callable[[OAuthService], Awaitable[Any]],
) -> None:
    configure_logging(debug)
    try:
        service = load_service(config_path)
        result = asyncio.run(call(service))
    except OAuthError as e:
        output_error(e, json_output, debug)
        return
    if hasattr(result, "model_dump"):
        result = result.model_dump(exclude_none=True)
    output_result(result if result is not None else "ok", json_output)


@click.command(name="exchange")
@click.argument("provider")
@click.argument("code")
@click.option("--state", help="State returned with the callback")
@click.option("--code-verifier", help="PKCE verifier from the authorization step")
@_common_options
def exchange(
    provider: str,
    code: str,
    state: str | None,
    code_verifier: str | None,
    config_path: str | None,
    json_output: bool,
    debug: bool,
) -> None:
    """Exchange an authorization code for tokens."""
    params = {"code": code, "state": state, "code_verifier": code_verifier}
    _run(config_path, json_output, debug, lambda s: s.handle_callback(provider, params))


@click.command(name="refresh")
@click.argument("provider")
@click.argument("refresh_token")
@_common_options
def refresh(
    provider: str, refresh_token: str, config_path: str | None, json_output: bool, debug: bool
) -> None:
    """Obtain a new access token from a refresh token."""
    _run(
        config_path,
        json_output,
        debug,
        lambda s: s.refresh_token(provider, {"refresh_token": refresh_token}),
    )


@click.command(name="revoke")
@click.argument("provider")
@click.argument("token")
@click.option("--hint", type=click.Choice(["access_token", "refresh_token"]), help="Token type")
@click.option("--target-id", help="User id to log out (Kakao)")
@_common_options
def revoke(
    provider: str,
    token: str,
    hint: str | None,
    target_id: str | None,
    config_path: str | None,
    json_output: bool,
    debug: bool,
) -> None:
    """Revoke a token at the provider."""
    options = {"token": token, "token_type_hint": hint, "target_id": target_id}
    _run(config_path, json_output, debug, lambda s: s.revoke_token(provider, options))


@click.command(name="userinfo")
@click.argument("provider")
@click.argument("access_token")
@_common_options
def userinfo(
    provider: str, access_token: str, config_path: str | None, json_output: bool, debug: bool
) -> None:
    """Fetch the user's profile with an access token."""
    _run(config_path, json_output, debug, lambda s: s.get_user_info(provider, access_token))
