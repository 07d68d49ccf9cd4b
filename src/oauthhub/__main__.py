import click

from .cli.auth_url import auth_url
from .cli.providers import list_providers
from .cli.tokens import exchange, refresh, revoke, userinfo
from .version import get_package_info

PACKAGE_NAME, PACKAGE_VERSION = get_package_info()


@click.group(invoke_without_command=True)
@click.version_option(PACKAGE_VERSION, prog_name=PACKAGE_NAME)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """oauthhub CLI"""
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(list_providers)
cli.add_command(auth_url)
cli.add_command(exchange)
cli.add_command(refresh)
cli.add_command(revoke)
cli.add_command(userinfo)

if __name__ == "__main__":
    cli()
