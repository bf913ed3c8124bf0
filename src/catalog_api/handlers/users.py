"""
Module: users.py
Description: User registration handler.

Implements POST /api/users/register. Open to anonymous callers.

Dependencies: FastAPI
Author: Catalog API Team
"""

from fastapi import APIRouter, Depends
from fastapi import status as status_codes

from catalog_api.auth.registration import register_user
from catalog_api.config.settings import Settings
from catalog_api.dependencies import get_settings, get_user_store
from catalog_api.models.request import RegisterUserRequest
from catalog_api.models.response import ErrorResponse, RegisterUserResponse
from catalog_api.storage.base import UserStore

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post(
    "/register",
    status_code=status_codes.HTTP_201_CREATED,
    response_model=RegisterUserResponse,
    responses={400: {"model": ErrorResponse}}
)
async def register(
    request: RegisterUserRequest,
    user_store: UserStore = Depends(get_user_store),
    settings: Settings = Depends(get_settings)
) -> RegisterUserResponse:
    """
    Register a user and return their API key.

    Example:
        POST /api/users/register
        {"username": "alice", "password": "pw1"}

        Response (201 Created):
        {"message": "User registered successfully.", "api-key": "api-key-..."}

        Response (400 Bad Request - duplicate):
        {"message": "User already exists"}
    """
    api_key = await register_user(
        user_store,
        username=request.username,
        password=request.password,
        settings=settings
    )
    return RegisterUserResponse(message="User registered successfully.", api_key=api_key)
