from typing import Literal, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import get_db
from app.core.dependencies import get_bearer_token, get_current_admin
from app.models.admin import Admin
from app.schemas.admin import (
    AdminLoginRequest,
    AdminResponse,
    AdminTokenResponse,
    ChangePasswordRequest,
    MessageResponse,
)
from app.schemas.moderation import ModerationStatsResponse
from app.schemas.post import (
    AdminPostListResponse,
    DeletePostRequest,
    DeletePostResponse,
    ModeratePostRequest,
    ModeratePostResponse,
)
from app.schemas.word_filter import (
    WordFilterCreate,
    WordFilterCreateResponse,
    WordFilterDeleteResponse,
    WordFilterListResponse,
)
from app.services.admin import AdminServices
from app.services.post import PostService, clamp_limit
from app.services.word_filter import WordFilterService

router = APIRouter(
    prefix="/api/admin",
    tags=["Admin"],
    responses={404: {"description": "Not found"}},
)

admin_service = AdminServices()


# ==================== Authentication ====================


@router.post("/login", response_model=AdminTokenResponse)
def admin_login(request: AdminLoginRequest, db: Session = Depends(get_db)):
    """
    Admin login with username and password.

    Returns a Bearer token for the moderation endpoints.
    """
    return admin_service.login(request, db)


@router.post("/refresh-token", response_model=AdminTokenResponse)
def refresh_token(
    token: str = Depends(get_bearer_token),
    db: Session = Depends(get_db),
):
    """Exchange a still-valid admin token for a new one"""
    return admin_service.refresh_token(token, db)


@router.put("/change-password", response_model=MessageResponse)
def change_password(
    request: ChangePasswordRequest,
    db: Session = Depends(get_db),
    current_admin: Admin = Depends(get_current_admin),
):
    return admin_service.change_password(current_admin, request, db)


@router.get("/me", response_model=AdminResponse)
def get_current_admin_profile(
    current_admin: Admin = Depends(get_current_admin),
):
    return AdminResponse.model_validate(current_admin)


# ==================== Post Moderation ====================


@router.get(
    "/posts",
    response_model=AdminPostListResponse,
    description="List posts in a moderation state (default: pending)",
)
def list_posts(
    approval_status: Literal["pending", "approved", "rejected"] = Query(
        "pending", alias="status"
    ),
    limit: int = Query(settings.default_page_size, description="Items per page"),
    offset: int = Query(0, ge=0),
    db: Session = Depends(get_db),
    current_admin: Admin = Depends(get_current_admin),
):
    limit = clamp_limit(limit)
    posts, total = PostService(db).get_posts_by_status(approval_status, limit, offset)
    return {
        "posts": posts,
        "total": total,
        "limit": limit,
        "offset": offset,
    }


@router.put(
    "/posts/{post_id}",
    response_model=ModeratePostResponse,
    description="Approve or reject a post",
)
def moderate_post(
    post_id: int,
    request: ModeratePostRequest,
    db: Session = Depends(get_db),
    current_admin: Admin = Depends(get_current_admin),
):
    post = PostService(db).moderate_post(
        post_id, request.action, current_admin, request.reason
    )
    return ModeratePostResponse(
        message=f"Post {request.action}d successfully",
        post_id=post.id,
        status=post.approval_status,
    )


@router.delete(
    "/posts/{post_id}",
    response_model=DeletePostResponse,
    description="Delete a post, recording the reason in the moderation log",
)
def delete_post(
    post_id: int,
    request: Optional[DeletePostRequest] = Body(None),
    db: Session = Depends(get_db),
    current_admin: Admin = Depends(get_current_admin),
):
    reason = request.reason if request else None
    PostService(db).delete_post(post_id, current_admin, reason)
    return DeletePostResponse(message="Post deleted successfully", post_id=post_id)


@router.get("/stats", response_model=ModerationStatsResponse)
def get_stats(
    db: Session = Depends(get_db),
    current_admin: Admin = Depends(get_current_admin),
):
    return {"stats": PostService(db).get_stats()}


# ==================== Word Filters ====================


@router.get("/filters", response_model=WordFilterListResponse)
def list_filters(
    db: Session = Depends(get_db),
    current_admin: Admin = Depends(get_current_admin),
):
    return {"filters": WordFilterService(db).list_filters()}


@router.post("/filters", response_model=WordFilterCreateResponse, status_code=201)
def add_filter(
    filter_in: WordFilterCreate,
    db: Session = Depends(get_db),
    current_admin: Admin = Depends(get_current_admin),
):
    """
    Add a filter word. Words are stored lowercase and trimmed; to change the
    severity of an existing word, delete it and add it again.
    """
    word_filter = WordFilterService(db).add_filter(filter_in)
    return WordFilterCreateResponse(
        message="Filter added successfully", filter_id=word_filter.id
    )


@router.delete("/filters/{filter_id}", response_model=WordFilterDeleteResponse)
def delete_filter(
    filter_id: int,
    db: Session = Depends(get_db),
    current_admin: Admin = Depends(get_current_admin),
):
    if not WordFilterService(db).delete_filter(filter_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Filter not found"
        )
    return WordFilterDeleteResponse(
        message="Filter deleted successfully", filter_id=filter_id
    )
