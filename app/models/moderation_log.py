# app/models/moderation_log.py
from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.sql import func

from app.core.database import Base


class ModerationLog(Base):
    __tablename__ = "moderation_log"

    id = Column(Integer, primary_key=True, index=True)

    # Not a foreign key: entries outlive the post they describe
    post_id = Column(Integer, nullable=False, index=True)

    # approve, reject, delete
    action = Column(String(20), nullable=False)
    admin_username = Column(String(100), nullable=False)
    reason = Column(Text, nullable=True)

    timestamp = Column(
        DateTime(timezone=True), server_default=func.now(), nullable=False, index=True
    )

    def __repr__(self):
        return f"<ModerationLog(id={self.id}, post_id={self.post_id}, action='{self.action}')>"
