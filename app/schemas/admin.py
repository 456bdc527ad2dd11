# app/schemas/admin.py

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class AdminResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    is_verified: bool
    created_at: datetime
    updated_at: datetime


class AdminLoginRequest(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class AdminTokenResponse(BaseModel):
    success: bool = True
    token: str
    username: str


class ChangePasswordRequest(BaseModel):
    current_password: str = Field(..., min_length=1)
    new_password: str = Field(
        ..., min_length=8, description="New password, at least 8 characters"
    )


class MessageResponse(BaseModel):
    success: bool = True
    message: str
