"""
Pydantic schemas for User entity.
"""
from pydantic import EmailStr, field_validator
from datetime import datetime
from hikingbuddy.schemas.base import CamelModel


class UserBase(CamelModel):
    """Base user schema."""
    username: str
    email: EmailStr


class UserCreate(UserBase):
    """Schema for user registration."""
    password: str
    
    @field_validator("username")
    @classmethod
    def username_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Username is required")
        return v


class UserPublic(UserBase):
    """User fields returned alongside an auth token."""
    id: int
    total_points: int = 0


class UserResponse(UserPublic):
    """Schema for user profile response."""
    is_active: bool
    created_at: datetime


class UserLogin(CamelModel):
    """Schema for user login by email or username."""
    identifier: str
    password: str


class AuthResponse(CamelModel):
    """Schema for register/login response."""
    message: str
    token: str
    user: UserPublic


class PasswordResetRequest(CamelModel):
    """Schema for requesting a password reset link."""
    email: EmailStr


class PasswordResetConfirm(CamelModel):
    """Schema for setting a new password with a reset token."""
    password: str


class ResetTokenStatus(CamelModel):
    """Schema for reset token verification."""
    message: str
    username: str


class MessageResponse(CamelModel):
    """Generic message response."""
    message: str
