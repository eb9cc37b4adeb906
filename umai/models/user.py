"""
Demo user models.

Decoded from the user service envelope:

    {"data": {"id", "email", "first_name", "last_name", "avatar"},
     "support": {"url", "text"}}

Decode either fully succeeds or fails; no partially populated model exists.
Decoding is strict: wire keys only and no type coercion (a string id fails).
"""

from pydantic import BaseModel, ConfigDict, Field


class UserRecord(BaseModel):
    """A remote user. Email and names are passed through unvalidated."""

    model_config = ConfigDict(frozen=True, strict=True)

    id: int
    email: str
    first_name: str
    last_name: str
    avatar_url: str = Field(validation_alias="avatar")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class Support(BaseModel):
    """Opaque support metadata attached to every user response."""

    model_config = ConfigDict(frozen=True, strict=True)

    url: str
    text: str


class UserResponse(BaseModel):
    """Envelope wrapping a user record and its support metadata."""

    model_config = ConfigDict(frozen=True, strict=True)

    data: UserRecord
    support: Support

    @property
    def user(self) -> UserRecord:
        return self.data


class ErrorMessage(BaseModel):
    """Diagnostic body of a non-2xx response."""

    model_config = ConfigDict(strict=True)

    error: str
