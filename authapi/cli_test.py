"""Tests for the command line interface."""

import functools

import pytest
from click.testing import CliRunner

from authapi.cli import cli
from authapi.clients.client import AuthenticationClient
from authapi.commands import passwordless, user
from conftest import BASE_URL, RecordingTransport


@pytest.fixture(autouse=True)
def patch_client(monkeypatch: pytest.MonkeyPatch, transport: RecordingTransport) -> None:
    factory = functools.partial(AuthenticationClient, transport=transport)
    monkeypatch.setattr(user, "AuthenticationClient", factory)
    monkeypatch.setattr(passwordless, "AuthenticationClient", factory)


def invoke(*args: str) -> str:
    result = CliRunner().invoke(cli, ["--base-url", BASE_URL, "--client-id", "cli-client", *args])
    assert result.exit_code == 0, result.output
    return result.output


def test_user_info(transport: RecordingTransport) -> None:
    transport.respond("GET", "/userinfo", json={"sub": "auth0|123", "email": "a@b.com"})
    output = invoke("user", "info", "token-abc")
    assert "auth0|123" in output
    assert "a@b.com" in output
    assert transport.requests[0].headers["Authorization"] == "Bearer token-abc"


def test_user_impersonate(transport: RecordingTransport) -> None:
    transport.respond("POST", "/users/auth0|123/impersonate", text="https://link.example.com")
    output = invoke("user", "impersonate", "auth0|123", "--impersonator-id", "auth0|admin")
    assert "https://link.example.com" in output
    assert transport.bodies() == [{"client_id": "cli-client", "impersonator_id": "auth0|admin", "protocol": "oauth2"}]


def test_passwordless_sms(transport: RecordingTransport) -> None:
    transport.respond("POST", "/passwordless/start", json={"phone_number": "+15551234567"})
    output = invoke("passwordless", "sms", "+15551234567")
    assert "+15551234567" in output
    assert transport.bodies()[0]["connection"] == "sms"


def test_passwordless_email_code(transport: RecordingTransport) -> None:
    invoke("passwordless", "email", "a@b.com", "--send", "code")
    assert transport.bodies() == [{"client_id": "cli-client", "email": "a@b.com", "send": "code", "connection": "email"}]


def test_passwordless_verify(transport: RecordingTransport) -> None:
    transport.respond("POST", "/oauth/ro", json={"access_token": "at", "token_type": "bearer"})
    output = invoke("passwordless", "verify", "+15551234567", "123456")
    assert "access_token" in output
    assert transport.bodies()[0]["grant_type"] == "password"


def test_user_impersonate_client_id(transport: RecordingTransport) -> None:
    invoke("user", "impersonate", "auth0|123", "--impersonator-id", "auth0|admin", "--client-id", "support-app")
    assert transport.bodies()[0]["client_id"] == "support-app"
