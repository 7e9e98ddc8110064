"""User management endpoints (placeholders). Listing and deleting users is admin only."""

from fastapi import APIRouter, Depends

from app.api.deps import require_admin, require_auth
from app.schemas.resources import PlaceholderResponse

router = APIRouter(dependencies=[Depends(require_auth)])


@router.get("", response_model=PlaceholderResponse, dependencies=[Depends(require_admin)])
def list_users() -> PlaceholderResponse:
    return PlaceholderResponse(message="Get all users - Admin only")


@router.get("/{user_id}", response_model=PlaceholderResponse)
def get_user(user_id: str) -> PlaceholderResponse:
    return PlaceholderResponse(message=f"Get user {user_id}")


@router.put("/{user_id}", response_model=PlaceholderResponse)
def update_user(user_id: str) -> PlaceholderResponse:
    return PlaceholderResponse(message=f"Update user {user_id}")


@router.delete("/{user_id}", response_model=PlaceholderResponse, dependencies=[Depends(require_admin)])
def delete_user(user_id: str) -> PlaceholderResponse:
    return PlaceholderResponse(message=f"Delete user {user_id}")
