"""
Pydantic models for user payloads.

``CreateUserRequest`` is the body of ``POST /users``; the identifier is
not part of it because the endpoint assigns one.  ``UserResponse`` is
what every read endpoint returns, built with ``to_user_response``.
"""

from uuid import UUID

from pydantic import BaseModel, Field

from users_api.app.models.user import User


class CreateUserRequest(BaseModel):
    """Schema for creating a user."""

    full_name: str = Field(..., json_schema_extra={"example": "Nick Chapsas"})


class UserResponse(BaseModel):
    """Schema for reading a user from the API."""

    id: UUID
    full_name: str

    model_config = {
        "from_attributes": True,
    }


def to_user_response(user: User) -> UserResponse:
    return UserResponse(id=user.id, full_name=user.full_name)
