# app/schemas/moderation.py
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class ModerationLogResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    post_id: int
    action: str
    admin_username: str
    reason: Optional[str] = None
    timestamp: datetime


class ModerationStats(BaseModel):
    pending: int
    approved: int
    rejected: int
    total: int
    recent_actions: List[ModerationLogResponse]


class ModerationStatsResponse(BaseModel):
    success: bool = True
    stats: ModerationStats
