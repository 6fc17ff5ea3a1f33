from pydantic import BaseModel, EmailStr, Field
from typing import Optional
from datetime import datetime


class UpsertUserRequest(BaseModel):
    """User record as supplied by the auth layer."""
    id: Optional[int] = Field(None, description="Existing user ID; omit to create a new user")
    username: str = Field(..., min_length=1, max_length=100, description="Username")
    email: Optional[EmailStr] = Field(None, description="Email address")
    first_name: Optional[str] = Field(None, max_length=200)
    last_name: Optional[str] = Field(None, max_length=200)
    profile_image_url: Optional[str] = None


class UserResponse(BaseModel):
    """User response schema."""
    id: int
    username: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class DeleteUserResponse(BaseModel):
    """Result of deleting a user and everything it owns."""
    success: bool
    message: str
    settings_deleted: int
    progress_deleted: int
