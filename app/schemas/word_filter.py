# app/schemas/word_filter.py
from datetime import datetime
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.utils.moderation import FLAGGED_WORDS_SEPARATOR


class WordFilterCreate(BaseModel):
    word: str = Field(..., max_length=100)
    severity: Literal["low", "medium", "high"]

    @field_validator("word")
    @classmethod
    def normalize_word(cls, value: str) -> str:
        value = value.strip().lower()
        if not value:
            raise ValueError("Word is required")
        if FLAGGED_WORDS_SEPARATOR.strip() in value:
            raise ValueError("Word must not contain a comma")
        return value


class WordFilterResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    word: str
    severity: str
    created_at: datetime


class WordFilterListResponse(BaseModel):
    success: bool = True
    filters: List[WordFilterResponse]


class WordFilterCreateResponse(BaseModel):
    success: bool = True
    message: str
    filter_id: int


class WordFilterDeleteResponse(BaseModel):
    success: bool = True
    message: str
    filter_id: int
