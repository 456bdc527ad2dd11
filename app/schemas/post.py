# app/schemas/post.py
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.utils.moderation import split_flagged_words
from app.utils.sanitizer import MAX_CONTENT_LENGTH, sanitize_content

# ==================== Submission Schemas ====================


class PostCreate(BaseModel):
    content: str = Field(
        ...,
        max_length=MAX_CONTENT_LENGTH,
        description=f"Post text, at most {MAX_CONTENT_LENGTH} characters",
    )

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Content is required")
        if not sanitize_content(value):
            raise ValueError("Content is empty after removing markup")
        return value


class PostSubmitResponse(BaseModel):
    success: bool = True
    message: str
    status: Literal["pending", "rejected"]
    post_id: Optional[int] = None


# ==================== Public Listing Schemas ====================


class PublicPostResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    content: str
    timestamp: datetime


class PublicPostListResponse(BaseModel):
    success: bool = True
    posts: List[PublicPostResponse]
    total: int
    limit: int
    offset: int


# ==================== Admin Schemas ====================


class AdminPostResponse(BaseModel):
    """Post as seen on the moderation dashboard"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    content: str
    timestamp: datetime
    approval_status: str
    flagged_words: Optional[List[str]] = None
    created_at: datetime
    updated_at: datetime

    @field_validator("flagged_words", mode="before")
    @classmethod
    def split_words(cls, value):
        if isinstance(value, str):
            return split_flagged_words(value)
        return value


class AdminPostListResponse(BaseModel):
    success: bool = True
    posts: List[AdminPostResponse]
    total: int
    limit: int
    offset: int


class ModeratePostRequest(BaseModel):
    action: Literal["approve", "reject"]
    reason: Optional[str] = Field(None, max_length=500)


class ModeratePostResponse(BaseModel):
    success: bool = True
    message: str
    post_id: int
    status: str


class DeletePostRequest(BaseModel):
    reason: Optional[str] = Field(None, max_length=500)


class DeletePostResponse(BaseModel):
    success: bool = True
    message: str
    post_id: int
