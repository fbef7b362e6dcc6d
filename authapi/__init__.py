"""Defines the common interface for the authentication API client."""

__version__ = "0.1.0"

from authapi.clients.client import AuthenticationClient
from authapi.errors import ArgumentError, AuthAPIError
