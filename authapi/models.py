"""Defines the response models returned by the authentication API."""

from pydantic import BaseModel, ConfigDict, Field


class UserProfile(BaseModel):
    model_config = ConfigDict(extra="allow")

    sub: str | None = None
    user_id: str | None = None
    email: str | None = None
    email_verified: bool | None = None
    name: str | None = None
    nickname: str | None = None
    picture: str | None = None


class TokenResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    access_token: str | None = None
    id_token: str | None = None
    token_type: str | None = None
    expires_in: int | None = None
    refresh_token: str | None = None


class PasswordlessStartResponse(BaseModel):
    """Describes the user a passwordless code or link was sent to."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str | None = Field(default=None, alias="_id")
    email: str | None = None
    phone_number: str | None = None
    email_verified: bool | None = None
    phone_number_verified: bool | None = None
