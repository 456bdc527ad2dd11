# app/routers/public.py
from fastapi import APIRouter, Depends, Query, Request, Response
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import get_db
from app.core.limiter import limiter, submission_limit
from app.schemas.post import PostCreate, PostSubmitResponse, PublicPostListResponse
from app.services.post import PostService, clamp_limit
from app.utils.moderation import REJECTED

router = APIRouter(
    prefix="/api",
    tags=["Posts"],
)


@router.post(
    "/posts",
    response_model=PostSubmitResponse,
    status_code=201,
    summary="Submit an anonymous post",
)
@limiter.limit(submission_limit)
def submit_post(
    request: Request,
    response: Response,
    post_in: PostCreate,
    db: Session = Depends(get_db),
):
    """
    Submit a post for moderation.

    Clean and lightly flagged posts are queued as pending (201). Posts that
    violate the guidelines are rejected with a generic message (200).
    """
    result = PostService(db).submit_post(post_in)
    if result.status == REJECTED:
        response.status_code = 200
    return result


@router.get(
    "/posts",
    response_model=PublicPostListResponse,
    summary="List approved posts",
)
def list_approved_posts(
    limit: int = Query(settings.default_page_size, description="Items per page"),
    offset: int = Query(0, ge=0),
    db: Session = Depends(get_db),
):
    limit = clamp_limit(limit)
    posts, total = PostService(db).get_approved_posts(limit, offset)
    return {
        "posts": posts,
        "total": total,
        "limit": limit,
        "offset": offset,
    }
