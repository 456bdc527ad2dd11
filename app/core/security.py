# core/security.py
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from fastapi import HTTPException, status
from jose import JWTError, jwt

from app.core.config import settings
from app.models.admin import Admin

logger = logging.getLogger(__name__)


class JWTManager:
    """JWT token management for admin authentication"""

    def __init__(self):
        self.secret_key = settings.jwt_secret
        self.algorithm = settings.jwt_algorithm
        self.admin_token_expire = timedelta(hours=settings.jwt_admin_expiration)
        self.issuer = settings.jwt_issuer

    def create_admin_token(
        self,
        admin: Admin,
        custom_expiration: Optional[timedelta] = None,
    ) -> str:
        """
        Create JWT access token for an admin

        Args:
            admin: Admin model instance
            custom_expiration: Override default expiration

        Returns:
            JWT access token string
        """
        try:
            current_time = datetime.now(timezone.utc)
            expire = current_time + (custom_expiration or self.admin_token_expire)

            payload = {
                "sub": admin.username,
                "admin_id": admin.id,
                "username": admin.username,
                "role": "admin",
                "exp": int(expire.timestamp()),
                "iat": int(current_time.timestamp()),
                "iss": self.issuer,
                "type": "access",
            }

            token = jwt.encode(payload, self.secret_key, algorithm=self.algorithm)
            logger.info(f"Access token created for admin: {admin.username}")

            return token

        except JWTError as e:
            logger.error(f"Failed to create access token: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to create access token",
            )

    def verify_token(self, token: str, token_type: str = "access") -> Dict[str, Any]:
        """
        Verify and decode JWT token
        """
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                issuer=self.issuer,
                options={"verify_exp": True},
            )
        except JWTError as e:
            logger.warning(f"JWT verification failed: {e}")
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid or expired token",
                headers={"WWW-Authenticate": "Bearer"},
            )

        # Verify token type (check 'type' field, not 'role')
        if payload.get("type") != token_type:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=f"Invalid token type. Expected {token_type}",
                headers={"WWW-Authenticate": "Bearer"},
            )

        return payload


# Global instance
jwt_manager = JWTManager()
