"""Defines the client for the user profile and impersonation endpoints."""

from typing import Any, Coroutine, Mapping

import httpx

from authapi.clients.base import BaseClient
from authapi.errors import ArgumentError
from authapi.models import UserProfile
from authapi.utils.completion import Callback, deliver
from authapi.utils.fields import is_blank, merge_fields, require_mapping, require_string


class UsersManager(BaseClient):
    """Gets user information and impersonates users.

    Args:
        base_url: The tenant's account URL.
        headers: Default request headers.
        client_id: Default client ID, sent unless the caller overrides it.
    """

    def get_info(
        self,
        access_token: str,
        callback: Callback | None = None,
    ) -> Coroutine[Any, Any, UserProfile] | None:
        """Given an access token, gets the user profile linked to it.

        Args:
            access_token: The user's access token, obtained during login.
            callback: Called with ``(error, profile)`` instead of returning
                an awaitable.

        Returns:
            An awaitable resolving to the profile, or None if a callback
            was given.

        Raises:
            ArgumentError: If the access token is missing or blank.
        """
        if access_token is None:
            raise ArgumentError("An access token is required")
        if is_blank(access_token):
            raise ArgumentError("Invalid access token")

        headers = httpx.Headers(self.headers)
        headers["Authorization"] = f"Bearer {access_token}"
        return deliver(self._get_info(headers), callback)

    async def _get_info(self, headers: httpx.Headers) -> UserProfile:
        data = await self._request("GET", "/userinfo", headers=headers)
        return UserProfile.model_validate(data)

    def impersonate(
        self,
        user_id: str,
        settings: Mapping[str, Any],
        callback: Callback | None = None,
    ) -> Coroutine[Any, Any, str] | None:
        """Gets a link that can be used once to log in as the given user.

        Args:
            user_id: ID of the user to impersonate.
            settings: Must contain ``impersonator_id`` and ``protocol``, and
                may contain ``additionalParameters`` and ``client_id``.
            callback: Called with ``(error, link)`` instead of returning an
                awaitable.

        Returns:
            An awaitable resolving to the impersonation link, or None if a
            callback was given.

        Raises:
            ArgumentError: If the user ID or a required setting is missing.
        """
        if user_id is None:
            raise ArgumentError("You must specify a user ID")
        if is_blank(user_id):
            raise ArgumentError("The user ID is not valid")
        require_mapping(settings, "Missing impersonation settings object")
        require_string(settings.get("impersonator_id"), "impersonator_id field is required")
        require_string(settings.get("protocol"), "protocol field is required")

        data = merge_fields({"client_id": self.client_id}, settings)
        return deliver(self._request("POST", f"/users/{user_id}/impersonate", data=data), callback)
