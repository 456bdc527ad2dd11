# app/services/post.py
import logging
from typing import List, Optional, Tuple

from fastapi import HTTPException, status
from sqlalchemy import func
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.decorator import db_exception
from app.models.admin import Admin
from app.models.moderation_log import ModerationLog
from app.models.post import Post
from app.schemas.post import PostCreate, PostSubmitResponse
from app.services.word_filter import WordFilterService
from app.utils.moderation import (
    ACTION_DELETE,
    APPROVAL_STATUSES,
    APPROVED,
    REJECTED,
    InvalidTransition,
    decide_initial_status,
    resolve_transition,
)
from app.utils.sanitizer import sanitize_content
from app.utils.word_filter import check_content

logger = logging.getLogger(__name__)

PENDING_MESSAGE = (
    "Your submission has been sent for moderation. "
    "It will appear in the community feed once approved."
)
REJECTED_MESSAGE = (
    "Your submission has been received but contains content "
    "that violates community guidelines."
)
DEFAULT_DELETE_REASON = "Deleted by admin"
RECENT_ACTIONS_LIMIT = 10


def clamp_limit(limit: Optional[int]) -> int:
    if not limit or limit < 1:
        return settings.default_page_size
    return min(limit, settings.max_page_size)


class PostService:
    def __init__(self, db: Session):
        self.db = db

    # ==================== Submission ====================

    @db_exception
    def submit_post(self, post_in: PostCreate) -> PostSubmitResponse:
        """
        Run a submission through the moderation pipeline and persist it.

        Posts that hit a high-severity filter are stored as rejected for the
        audit trail, but the submitter only gets a generic message.
        """
        sanitized = sanitize_content(post_in.content)

        filters = WordFilterService(self.db).load_snapshot()
        result = check_content(sanitized, filters)
        approval_status, flagged_words = decide_initial_status(result)

        post = Post(
            content=sanitized,
            approval_status=approval_status,
            flagged_words=flagged_words,
        )
        self.db.add(post)
        self.db.commit()
        self.db.refresh(post)

        if approval_status == REJECTED:
            logger.info(
                f"Post {post.id} auto-rejected (severity={result.highest_severity})"
            )
            return PostSubmitResponse(
                message=REJECTED_MESSAGE, status=REJECTED
            )

        if flagged_words:
            logger.info(f"Post {post.id} flagged for review: {flagged_words}")

        return PostSubmitResponse(
            message=PENDING_MESSAGE, status=approval_status, post_id=post.id
        )

    # ==================== Listing ====================

    @db_exception
    def get_approved_posts(
        self, limit: int = 50, offset: int = 0
    ) -> Tuple[List[Post], int]:
        """Approved posts, newest submission first"""
        query = self.db.query(Post).filter(Post.approval_status == APPROVED)
        total = query.count()
        posts = (
            query.order_by(Post.timestamp.desc(), Post.id.desc())
            .offset(offset)
            .limit(limit)
            .all()
        )
        return posts, total

    @db_exception
    def get_posts_by_status(
        self, approval_status: str, limit: int = 50, offset: int = 0
    ) -> Tuple[List[Post], int]:
        """Posts in one moderation state for the admin dashboard"""
        query = self.db.query(Post).filter(Post.approval_status == approval_status)
        total = query.count()
        posts = (
            query.order_by(Post.created_at.desc(), Post.id.desc())
            .offset(offset)
            .limit(limit)
            .all()
        )
        return posts, total

    # ==================== Moderation ====================

    def _get_post_for_update(self, post_id: int) -> Post:
        post = (
            self.db.query(Post).filter(Post.id == post_id).with_for_update().first()
        )
        if not post:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Post not found",
            )
        return post

    @db_exception
    def moderate_post(
        self, post_id: int, action: str, admin: Admin, reason: Optional[str] = None
    ) -> Post:
        """
        Approve or reject a post. The status change and its ledger entry are
        committed together.
        """
        post = self._get_post_for_update(post_id)

        try:
            new_status = resolve_transition(
                post.approval_status, action, settings.allow_remoderation
            )
        except InvalidTransition as e:
            self.db.rollback()
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
        except ValueError as e:
            self.db.rollback()
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

        post.approval_status = new_status
        self.db.add(
            ModerationLog(
                post_id=post.id,
                action=action,
                admin_username=admin.username,
                reason=reason,
            )
        )
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(post)

        logger.info(f"Post {post.id} {new_status} by {admin.username}")
        return post

    @db_exception
    def delete_post(
        self, post_id: int, admin: Admin, reason: Optional[str] = None
    ) -> None:
        """
        Delete a post. The ledger entry and the row removal share one
        transaction, so neither is visible without the other.
        """
        post = self._get_post_for_update(post_id)

        self.db.add(
            ModerationLog(
                post_id=post.id,
                action=ACTION_DELETE,
                admin_username=admin.username,
                reason=reason or DEFAULT_DELETE_REASON,
            )
        )
        self.db.delete(post)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        logger.info(f"Post {post_id} deleted by {admin.username}")

    # ==================== Statistics ====================

    @db_exception
    def get_stats(self) -> dict:
        counts = dict(
            self.db.query(Post.approval_status, func.count(Post.id))
            .group_by(Post.approval_status)
            .all()
        )
        stats = {name: counts.get(name, 0) for name in APPROVAL_STATUSES}
        stats["total"] = sum(counts.values())
        stats["recent_actions"] = (
            self.db.query(ModerationLog)
            .order_by(ModerationLog.timestamp.desc(), ModerationLog.id.desc())
            .limit(RECENT_ACTIONS_LIMIT)
            .all()
        )
        return stats
