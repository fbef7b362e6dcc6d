"""Defines the CLI for looking up and impersonating users."""

import click
from tabulate import tabulate

from authapi.clients.client import AuthenticationClient
from authapi.utils.cli import coro


@click.group()
def cli() -> None:
    """Look up and impersonate users."""
    pass


@cli.command()
@click.argument("access_token")
@click.pass_obj
@coro
async def info(obj: dict, access_token: str) -> None:
    """Show the profile linked to an access token."""
    async with AuthenticationClient(**obj) as client:
        profile = await client.get_profile(access_token)
    rows = [[key, value] for key, value in profile.model_dump(exclude_none=True).items()]
    click.echo(tabulate(rows, headers=["Key", "Value"], tablefmt="simple"))


@cli.command()
@click.argument("user_id")
@click.option("--impersonator-id", type=str, required=True, help="ID of the user doing the impersonation.")
@click.option("--protocol", type=str, default="oauth2", show_default=True)
@click.option("--client-id", type=str, default=None, help="Client the link is issued for.")
@click.pass_obj
@coro
async def impersonate(obj: dict, user_id: str, impersonator_id: str, protocol: str, client_id: str | None) -> None:
    """Get a one-time link to log in as USER_ID."""
    settings = {"impersonator_id": impersonator_id, "protocol": protocol}
    if client_id is not None:
        settings["client_id"] = client_id
    async with AuthenticationClient(**obj) as client:
        link = await client.impersonate(user_id, settings)
    click.echo(click.style(link, fg="green"))
