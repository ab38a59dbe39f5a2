"""Pydantic schemas for authentication endpoints."""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field


class SignUpRequest(BaseModel):
    """Request body for account registration."""

    username: str = Field(..., min_length=3, max_length=50, description="Unique username")
    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(..., min_length=8, description="User's password")


class SignInRequest(BaseModel):
    """Request body for sign-in."""

    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(..., min_length=1, description="User's password")


class VerifyEmailRequest(BaseModel):
    """Request body for email verification."""

    token: str = Field(..., min_length=1, description="Verification token from the email link")


class EmailRequest(BaseModel):
    """Request body naming an account by email (resend, forgot password)."""

    email: EmailStr = Field(..., description="Account email address")


class ResetPasswordRequest(BaseModel):
    """Request body for completing a password reset."""

    token: str = Field(..., min_length=1, description="Reset token from the email link")
    new_password: str = Field(..., min_length=8, description="New password")


class UserResponse(BaseModel):
    """Public user information. Never includes the password hash."""

    id: str = Field(..., description="User ID")
    username: str = Field(..., description="Unique username")
    email: str = Field(..., description="User's email address")
    bio: str | None = Field(None, description="Profile text")
    image: str | None = Field(None, description="Avatar URL")
    email_verified: bool = Field(..., description="Whether the email address is verified")
    created_at: datetime = Field(..., description="When the user was created")

    model_config = {"from_attributes": True}


class SignInResponse(BaseModel):
    """Payload of a successful sign-in."""

    token: str = Field(..., description="Bearer token, valid for one hour")
    user: UserResponse = Field(..., description="Signed-in user")
