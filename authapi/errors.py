"""Defines the exceptions raised by the authentication API client."""


class AuthAPIError(Exception):
    """Base class for errors raised by this package."""


class ArgumentError(AuthAPIError, ValueError):
    """Raised before any request is made when an argument is invalid."""
