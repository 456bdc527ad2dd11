import logging
from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.core.decorator import db_exception
from app.core.hasher import PasswordHelper
from app.core.security import jwt_manager
from app.models.admin import Admin
from app.schemas.admin import (
    AdminLoginRequest,
    AdminTokenResponse,
    ChangePasswordRequest,
    MessageResponse,
)

logger = logging.getLogger(__name__)


class AdminServices:

    def __init__(self):
        self.password_helper = PasswordHelper()

    def get_admin_by_username(self, username: str, db: Session) -> Optional[Admin]:
        return db.query(Admin).filter(Admin.username == username).first()

    @db_exception
    def login(self, request: AdminLoginRequest, db: Session) -> AdminTokenResponse:
        admin = self.get_admin_by_username(request.username, db)

        if not admin or not self.password_helper.check_password(
            request.password, admin.password
        ):
            logger.warning(f"Failed admin login attempt for: {request.username}")
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid credentials",
            )

        if not admin.is_verified:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Admin account is not verified",
            )

        logger.info(f"Admin logged in: {admin.username}")
        return AdminTokenResponse(
            token=jwt_manager.create_admin_token(admin),
            username=admin.username,
        )

    @db_exception
    def refresh_token(self, token: str, db: Session) -> AdminTokenResponse:
        """Issue a fresh token for a still-valid admin token."""
        try:
            payload = jwt_manager.verify_token(token, "access")
        except HTTPException:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail={"error": "Invalid or expired token", "token_expired": True},
                headers={"WWW-Authenticate": "Bearer"},
            )

        admin = self.get_admin_by_username(payload.get("username", ""), db)
        if not admin or payload.get("role") != "admin":
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail={"error": "User not found", "token_expired": True},
                headers={"WWW-Authenticate": "Bearer"},
            )

        return AdminTokenResponse(
            token=jwt_manager.create_admin_token(admin),
            username=admin.username,
        )

    @db_exception
    def change_password(
        self, admin: Admin, request: ChangePasswordRequest, db: Session
    ) -> MessageResponse:
        if not self.password_helper.check_password(
            request.current_password, admin.password
        ):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Current password is incorrect",
            )

        admin.password = self.password_helper.hash_password(request.new_password)
        db.commit()

        logger.info(f"Password changed for admin: {admin.username}")
        return MessageResponse(message="Password changed successfully")
