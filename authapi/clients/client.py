"""Defines a unified client for the authentication API."""

from types import TracebackType
from typing import Any, Mapping, Self, Type

import httpx

from authapi.clients.oauth import OAuthAuthenticator
from authapi.clients.passwordless import PasswordlessAuthenticator
from authapi.clients.users import UsersManager
from authapi.conf import get_base_url, get_client_id, get_timeout
from authapi.utils.completion import Callback
from authapi.utils.fields import merge_fields, require_mapping


class AuthenticationClient:
    """Groups the managers for one tenant behind a single set of settings.

    Any of ``base_url``, ``client_id`` and ``timeout`` left as None is read
    from the settings file.
    """

    def __init__(
        self,
        base_url: str | None = None,
        client_id: str | None = None,
        *,
        headers: Mapping[str, str] | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = get_base_url() if base_url is None else base_url
        self.client_id = get_client_id() if client_id is None else client_id
        timeout = get_timeout() if timeout is None else timeout

        options: dict[str, Any] = {
            "headers": headers,
            "client_id": self.client_id,
            "timeout": timeout,
            "transport": transport,
        }
        self.oauth = OAuthAuthenticator(self.base_url, **options)
        self.users = UsersManager(self.base_url, **options)
        self.passwordless = PasswordlessAuthenticator(self.base_url, self.oauth, **options)

    def get_profile(self, access_token: str, callback: Callback | None = None) -> Any:
        return self.users.get_info(access_token, callback)

    def impersonate(self, user_id: str, settings: Mapping[str, Any], callback: Callback | None = None) -> Any:
        return self.users.impersonate(user_id, settings, callback)

    def request_sms_code(self, data: Mapping[str, Any], callback: Callback | None = None) -> Any:
        return self.passwordless.send_sms(data, callback)

    def request_magic_link(self, data: Mapping[str, Any], callback: Callback | None = None) -> Any:
        """Sends an email with a sign-in link; any ``send`` value is ignored."""
        data = merge_fields({}, require_mapping(data, "Missing user data object"), {"send": "link"})
        return self.passwordless.send_email(data, callback)

    def request_email_code(self, data: Mapping[str, Any], callback: Callback | None = None) -> Any:
        """Sends an email with a sign-in code; any ``send`` value is ignored."""
        data = merge_fields({}, require_mapping(data, "Missing user data object"), {"send": "code"})
        return self.passwordless.send_email(data, callback)

    def verify_sms_code(self, data: Mapping[str, Any], callback: Callback | None = None) -> Any:
        return self.passwordless.sign_in(data, callback)

    async def close(self) -> None:
        await self.users.close()
        await self.passwordless.close()
        await self.oauth.close()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: Type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.close()
