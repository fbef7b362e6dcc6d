"""Defines the CLI for passwordless sign-in."""

import click
from tabulate import tabulate

from authapi.clients.client import AuthenticationClient
from authapi.utils.cli import coro


@click.group()
def cli() -> None:
    """Start and complete passwordless sign-in."""
    pass


@cli.command()
@click.argument("phone_number")
@click.pass_obj
@coro
async def sms(obj: dict, phone_number: str) -> None:
    """Text a verification code to PHONE_NUMBER."""
    async with AuthenticationClient(**obj) as client:
        response = await client.request_sms_code({"phone_number": phone_number})
    click.echo(f"Sent code to {click.style(response.phone_number or phone_number, fg='green')}")


@cli.command()
@click.argument("email")
@click.option("--send", type=click.Choice(["link", "code"]), default="link", show_default=True)
@click.pass_obj
@coro
async def email(obj: dict, email: str, send: str) -> None:
    """Email a sign-in link or code to EMAIL."""
    async with AuthenticationClient(**obj) as client:
        response = await client.passwordless.send_email({"email": email, "send": send})
    click.echo(f"Sent {send} to {click.style(response.email or email, fg='green')}")


@cli.command()
@click.argument("phone_number")
@click.argument("code")
@click.pass_obj
@coro
async def verify(obj: dict, phone_number: str, code: str) -> None:
    """Sign in with PHONE_NUMBER and the CODE texted to it."""
    async with AuthenticationClient(**obj) as client:
        tokens = await client.verify_sms_code({"username": phone_number, "password": code})
    rows = [[key, value] for key, value in tokens.model_dump(exclude_none=True).items()]
    click.echo(tabulate(rows, headers=["Key", "Value"], tablefmt="simple"))
