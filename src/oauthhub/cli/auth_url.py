import click

from ..errors import OAuthError
from ..state import generate_pkce, generate_state
from .utils import configure_logging, load_service, output_error, output_result


def _parse_options(raw_options: tuple[str, ...]) -> dict[str, str]:
    options: dict[str, str] = {}
    for item in raw_options:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"Expected key=value, got: {item}", param_hint="--option")
        options[key] = value
    return options


@click.command(name="auth-url")
@click.argument("provider")
@click.option("--scope", multiple=True, help="Scope to request (repeatable)")
@click.option("--state", help="State value (a random one is generated if omitted)")
@click.option("--pkce", is_flag=True, help="Generate a PKCE pair and add the challenge")
@click.option("--option", "extra", multiple=True, help="Extra provider option as key=value")
@click.option("--config", "config_path", type=click.Path(), help="Path to oauthhub.yml")
@click.option("--json-output", is_flag=True, help="Output in JSON format")
@click.option("--debug", is_flag=True, help="Show detailed debug information")
def auth_url(
    provider: str,
    scope: tuple[str, ...],
    state: str | None,
    pkce: bool,
    extra: tuple[str, ...],
    config_path: str | None,
    json_output: bool,
    debug: bool,
) -> None:
    """Print the authorization URL for a configured provider.

    \b
    Examples:
        oauthhub auth-url google --scope email --scope profile
        oauthhub auth-url x --pkce
        oauthhub auth-url google --option prompt=consent
    """
    configure_logging(debug)

    options: dict[str, object] = dict(_parse_options(extra))
    if scope:
        options["scope"] = list(scope)
    options["state"] = state or generate_state()

    pair = generate_pkce() if pkce else None
    if pair is not None:
        options["code_challenge"] = pair.code_challenge
        options["code_challenge_method"] = pair.code_challenge_method

    try:
        service = load_service(config_path)
        url = service.generate_auth_url(provider, options)
    except OAuthError as e:
        output_error(e, json_output, debug)
        return

    if json_output:
        result = {"url": url, "state": options["state"]}
        if pair is not None:
            result["code_verifier"] = pair.code_verifier
        output_result(result, json_output=True)
    else:
        output_result(url)
        click.echo(f"state: {options['state']}", err=True)
        if pair is not None:
            click.echo(f"code_verifier: {pair.code_verifier}", err=True)
