"""Defines the top-level authapi CLI."""

import logging

import click
import colorlogging

from authapi.commands.passwordless import cli as passwordless_cli
from authapi.commands.user import cli as user_cli


@click.group()
@click.option("--base-url", type=str, default=None, help="Account URL; defaults to the configured one.")
@click.option("--client-id", type=str, default=None, help="Client ID; defaults to the configured one.")
@click.pass_context
def cli(ctx: click.Context, base_url: str | None, client_id: str | None) -> None:
    """Command line interface for the authentication API."""
    colorlogging.configure()

    logging.getLogger("httpx").setLevel(logging.WARNING)

    ctx.obj = {"base_url": base_url, "client_id": client_id}


cli.add_command(user_cli, "user")
cli.add_command(passwordless_cli, "passwordless")

if __name__ == "__main__":
    # python -m authapi.cli
    cli()
