"""Defines the client for the resource owner sign-in endpoint."""

from typing import Any, Coroutine, Mapping

from authapi.clients.base import BaseClient
from authapi.models import TokenResponse
from authapi.utils.completion import Callback, deliver
from authapi.utils.fields import merge_fields, require_mapping, require_string


class OAuthAuthenticator(BaseClient):
    def sign_in(
        self,
        user_data: Mapping[str, Any],
        callback: Callback | None = None,
    ) -> Coroutine[Any, Any, TokenResponse] | None:
        """Exchanges user credentials for tokens.

        Args:
            user_data: Must contain ``connection``, ``username`` and
                ``password``. ``grant_type`` defaults to ``password``.
            callback: Called with ``(error, tokens)`` instead of returning an
                awaitable.

        Returns:
            An awaitable resolving to the tokens, or None if a callback was
            given.
        """
        require_mapping(user_data, "Missing user data object")
        data = merge_fields({"client_id": self.client_id, "grant_type": "password"}, user_data)
        require_string(data.get("connection"), "connection field is required")
        require_string(data.get("username"), "username field is required")
        require_string(data.get("password"), "password field is required")
        return deliver(self._sign_in(data), callback)

    async def _sign_in(self, data: dict[str, Any]) -> TokenResponse:
        response = await self._request("POST", "/oauth/ro", data=data)
        return TokenResponse.model_validate(response)
