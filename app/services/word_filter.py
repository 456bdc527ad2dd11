# app/services/word_filter.py
import logging
from typing import List, Tuple

from fastapi import HTTPException, status
from sqlalchemy import case
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.decorator import db_exception
from app.models.word_filter import WordFilter
from app.schemas.word_filter import WordFilterCreate
from app.utils.word_filter import SEVERITY_RANK

logger = logging.getLogger(__name__)

DEFAULT_FILTERS = [
    # High severity - immediate rejection
    ("damn", "high"),
    ("hell", "high"),
    ("hate", "high"),
    ("kill", "high"),
    ("die", "high"),
    ("suicide", "high"),
    # Medium severity - flag for review
    ("death", "medium"),
    # Low severity - flag for review
    ("angry", "low"),
    ("mad", "low"),
    ("upset", "low"),
]


class WordFilterService:
    def __init__(self, db: Session):
        self.db = db

    def load_snapshot(self) -> List[Tuple[str, str]]:
        """Current filters as (word, severity) pairs, for the matcher."""
        rows = self.db.query(WordFilter.word, WordFilter.severity).all()
        return [(word, severity) for word, severity in rows]

    @db_exception
    def list_filters(self) -> List[WordFilter]:
        """All filters, severity rank descending then word ascending"""
        rank = case(SEVERITY_RANK, value=WordFilter.severity, else_=0)
        return (
            self.db.query(WordFilter)
            .order_by(rank.desc(), WordFilter.word.asc())
            .all()
        )

    def add_filter(self, filter_in: WordFilterCreate) -> WordFilter:
        """
        Add a filter word. The unique constraint on ``word`` decides between
        concurrent inserts of the same word; the loser gets a 409.
        """
        word_filter = WordFilter(word=filter_in.word, severity=filter_in.severity)
        self.db.add(word_filter)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="This word already exists in the filter list",
            )
        self.db.refresh(word_filter)

        logger.info(
            f"Word filter added: '{word_filter.word}' ({word_filter.severity})"
        )
        return word_filter

    @db_exception
    def delete_filter(self, filter_id: int) -> bool:
        word_filter = (
            self.db.query(WordFilter).filter(WordFilter.id == filter_id).first()
        )
        if not word_filter:
            return False

        self.db.delete(word_filter)
        self.db.commit()

        logger.info(f"Word filter deleted: '{word_filter.word}' (id={filter_id})")
        return True

    def seed_defaults(self) -> int:
        """Insert the default filters that are not present yet."""
        existing = {word for (word,) in self.db.query(WordFilter.word).all()}
        created = 0
        for word, severity in DEFAULT_FILTERS:
            if word in existing:
                continue
            self.db.add(WordFilter(word=word, severity=severity))
            created += 1
        self.db.commit()
        return created
