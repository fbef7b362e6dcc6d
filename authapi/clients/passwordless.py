"""Defines the client for the passwordless sign-in endpoints."""

from typing import Any, Coroutine, Mapping, Protocol

import httpx

from authapi.clients.base import BaseClient
from authapi.clients.oauth import OAuthAuthenticator
from authapi.conf import DEFAULT_TIMEOUT_SECONDS
from authapi.models import PasswordlessStartResponse
from authapi.utils.completion import Callback, deliver
from authapi.utils.fields import merge_fields, require_mapping, require_string

PASSWORDLESS_START = "/passwordless/start"


class SignIn(Protocol):
    def sign_in(self, user_data: Mapping[str, Any], callback: Callback | None = None) -> Any: ...


class PasswordlessAuthenticator(BaseClient):
    """Starts and completes passwordless flows over SMS and email.

    Args:
        base_url: The tenant's account URL.
        oauth: Exchanges the verification code for tokens. Defaults to an
            ``OAuthAuthenticator`` for the same account URL.
        client_id: Default client ID, sent unless the caller overrides it.
    """

    def __init__(
        self,
        base_url: str,
        oauth: SignIn | None = None,
        *,
        headers: Mapping[str, str] | None = None,
        client_id: str | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(base_url, headers=headers, client_id=client_id, timeout=timeout, transport=transport)
        self._owns_oauth = oauth is None
        if oauth is None:
            oauth = OAuthAuthenticator(
                base_url,
                headers=headers,
                client_id=client_id,
                timeout=timeout,
                transport=transport,
            )
        self.oauth = oauth

    def sign_in(self, user_data: Mapping[str, Any], callback: Callback | None = None) -> Any:
        """Signs in with a phone number and the code sent to it.

        The connection is always ``sms`` and the grant type always
        ``password``, whatever the caller passes for them.

        Args:
            user_data: Must contain ``username`` (the phone number) and
                ``password`` (the verification code).
            callback: Passed through to the OAuth collaborator.

        Returns:
            Whatever the OAuth collaborator's ``sign_in`` returns.
        """
        require_mapping(user_data, "Missing user data object")
        data = merge_fields(
            {"client_id": self.client_id},
            user_data,
            {"connection": "sms", "grant_type": "password"},
        )
        require_string(data.get("username"), "username field (phone number) is required")
        require_string(data.get("password"), "password field (verification code) is required")
        return self.oauth.sign_in(data, callback)

    def send_email(
        self,
        user_data: Mapping[str, Any],
        callback: Callback | None = None,
    ) -> Coroutine[Any, Any, PasswordlessStartResponse] | None:
        """Starts a passwordless flow by sending an email.

        With ``send="link"`` the email holds a link that logs the user in;
        ``authParams`` can append or override parameters on that link. With
        ``send="code"`` it holds a code to sign in with, using the email as
        the username.
        """
        require_mapping(user_data, "Missing user data object")
        data = merge_fields({"client_id": self.client_id}, user_data, {"connection": "email"})
        require_string(data.get("email"), "email field is required")
        require_string(data.get("send"), "send field is required")
        return deliver(self._start(data), callback)

    def send_sms(
        self,
        user_data: Mapping[str, Any],
        callback: Callback | None = None,
    ) -> Coroutine[Any, Any, PasswordlessStartResponse] | None:
        """Starts a passwordless flow by texting a code to ``phone_number``."""
        require_mapping(user_data, "Missing user data object")
        data = merge_fields({"client_id": self.client_id}, user_data, {"connection": "sms"})
        require_string(data.get("phone_number"), "phone_number field is required")
        return deliver(self._start(data), callback)

    async def _start(self, data: dict[str, Any]) -> PasswordlessStartResponse:
        response = await self._request("POST", PASSWORDLESS_START, data=data)
        return PasswordlessStartResponse.model_validate(response)

    async def close(self) -> None:
        await super().close()
        if self._owns_oauth and isinstance(self.oauth, BaseClient):
            await self.oauth.close()
