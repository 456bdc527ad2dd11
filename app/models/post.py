# app/models/post.py
from sqlalchemy import CheckConstraint, Column, DateTime, Integer, String, Text
from sqlalchemy.sql import func

from app.core.database import Base


class Post(Base):
    __tablename__ = "posts"
    __table_args__ = (
        CheckConstraint(
            "approval_status IN ('pending', 'approved', 'rejected')",
            name="ck_posts_approval_status",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)

    # Sanitized content
    content = Column(Text, nullable=False)

    # Submission instant, never updated
    timestamp = Column(
        DateTime(timezone=True), server_default=func.now(), nullable=False, index=True
    )

    # Moderation Status: pending, approved, rejected
    approval_status = Column(
        String(20), default="pending", nullable=False, index=True
    )

    # Comma-joined filter words matched at submission time
    flagged_words = Column(Text, nullable=True)

    # Timestamps
    created_at = Column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    def __repr__(self):
        return f"<Post(id={self.id}, status='{self.approval_status}')>"
