import click

from ..errors import OAuthError
from ..providers.registry import list_available_providers
from .utils import configure_logging, load_service, output_error, output_result


@click.command(name="providers")
@click.option("--config", "config_path", type=click.Path(), help="Path to oauthhub.yml")
@click.option("--json-output", is_flag=True, help="Output in JSON format")
@click.option("--debug", is_flag=True, help="Show detailed debug information")
def list_providers(config_path: str | None, json_output: bool, debug: bool) -> None:
    """List available providers and the ones configured.

    \b
    Examples:
        oauthhub providers
        oauthhub providers --config ./oauthhub.yml --json-output
    """
    configure_logging(debug)

    try:
        service = load_service(config_path)
        registered = set(service.list_registered_providers())
        if json_output:
            output_result(
                [
                    {"name": name, "configured": name in registered}
                    for name in list_available_providers()
                ],
                json_output=True,
            )
        else:
            output_result(
                [
                    f"{name}{' (configured)' if name in registered else ''}"
                    for name in list_available_providers()
                ]
            )
    except OAuthError as e:
        output_error(e, json_output, debug)
