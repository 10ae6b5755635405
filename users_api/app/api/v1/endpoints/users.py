"""
User endpoints for API v1.

Handlers translate HTTP requests into ``UserService`` calls and map the
results to status codes: a missing user is a 404, a rejected creation
is a 400.  Store failures are not handled here; they propagate to the
application‑level handler registered in ``main``.
"""

import uuid
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from users_api.app.api.dependencies import get_user_service
from users_api.app.models.user import User
from users_api.app.schemas.user import CreateUserRequest, UserResponse, to_user_response
from users_api.app.services.user_service import UserService


router = APIRouter()


@router.get("/", response_model=List[UserResponse])
async def list_users(user_service: UserService = Depends(get_user_service)) -> List[UserResponse]:
    """Получить список всех пользователей."""
    users = await user_service.get_all()
    return [to_user_response(user) for user in users]


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: UUID,
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    user = await user_service.get_by_id(user_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return to_user_response(user)


@router.post("/", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    body: CreateUserRequest,
    request: Request,
    response: Response,
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Create a user from ``body`` under a freshly generated id.

    Responds with the created user and a ``Location`` header pointing at
    ``GET /users/{id}``.  A ``False`` from the service (for example a
    duplicate id) becomes a 400.
    """
    user = User(id=uuid.uuid4(), full_name=body.full_name)
    created = await user_service.create(user)
    if not created:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User could not be created")
    response.headers["Location"] = str(request.url_for("get_user", user_id=str(user.id)))
    return to_user_response(user)


@router.delete("/{user_id}", status_code=status.HTTP_200_OK)
async def delete_user(
    user_id: UUID,
    user_service: UserService = Depends(get_user_service),
) -> Response:
    deleted = await user_service.delete_by_id(user_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return Response(status_code=status.HTTP_200_OK)
