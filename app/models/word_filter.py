# app/models/word_filter.py
from sqlalchemy import CheckConstraint, Column, DateTime, Integer, String
from sqlalchemy.sql import func

from app.core.database import Base


class WordFilter(Base):
    __tablename__ = "word_filters"
    __table_args__ = (
        CheckConstraint(
            "severity IN ('low', 'medium', 'high')",
            name="ck_word_filters_severity",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    # Stored lowercase and trimmed, so the unique constraint is case-insensitive
    word = Column(String(100), unique=True, nullable=False)
    severity = Column(String(10), default="medium", nullable=False)
    created_at = Column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    def __repr__(self):
        return f"<WordFilter(id={self.id}, word='{self.word}', severity='{self.severity}')>"
