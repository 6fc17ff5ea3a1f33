from fastapi import APIRouter, Depends
from sqlmodel import Session
from hanzi.core.database import get_session
from hanzi.schemas.user import UpsertUserRequest, UserResponse, DeleteUserResponse
from hanzi.services.user_service import get_user, upsert_user, delete_user

router = APIRouter(prefix="/users", tags=["users"])


@router.put("", response_model=UserResponse)
async def upsert_user_endpoint(
    user_data: UpsertUserRequest,
    session: Session = Depends(get_session)
):
    """Create or update a user record (called by the auth layer after sign-in)."""
    user = upsert_user(session, user_data)
    return UserResponse.model_validate(user)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user_endpoint(
    user_id: int,
    session: Session = Depends(get_session)
):
    """Get a user by ID."""
    return UserResponse.model_validate(get_user(session, user_id))


@router.delete("/{user_id}", response_model=DeleteUserResponse)
async def delete_user_endpoint(
    user_id: int,
    session: Session = Depends(get_session)
):
    """
    Delete a user with all of its settings and progress.

    Args:
        user_id: The user ID to delete
        session: Database session

    Returns:
        Success status and deletion counts
    """
    result = delete_user(session, user_id)
    return DeleteUserResponse(
        success=True,
        message="User deleted successfully",
        settings_deleted=result["settings_deleted"],
        progress_deleted=result["progress_deleted"]
    )
