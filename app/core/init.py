"""
Application initialization module
Handles initial setup tasks like creating the default admin and filter list
"""

import logging

from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.hasher import PasswordHelper
from app.models.admin import Admin
from app.services.word_filter import WordFilterService

logger = logging.getLogger(__name__)


def init_default_admin(db: Session) -> None:
    """
    Create the default admin if no admin exists yet.

    Credentials come from settings (ADMIN_DEFAULT_USERNAME /
    ADMIN_DEFAULT_PASSWORD).
    """
    try:
        existing_admin = db.query(Admin).first()

        if existing_admin:
            logger.info(
                f"✅ Admin user already exists (ID: {existing_admin.id}, Username: {existing_admin.username})"
            )
            return

        admin = Admin(
            username=settings.admin_default_username,
            password=PasswordHelper.hash_password(settings.admin_default_password),
            is_verified=True,
        )

        db.add(admin)
        db.commit()
        db.refresh(admin)

        logger.info("=" * 60)
        logger.info("🎉 DEFAULT ADMIN CREATED")
        logger.info("=" * 60)
        logger.info(f"Username: {admin.username}")
        logger.warning("⚠️  IMPORTANT: Change the default password immediately!")
        logger.info("=" * 60)

    except Exception as e:
        logger.error(f"❌ Failed to initialize default admin: {e}")
        db.rollback()
        raise


def init_default_filters(db: Session) -> None:
    """Insert the default word filters that are missing."""
    try:
        created = WordFilterService(db).seed_defaults()
        if created:
            logger.info(f"✅ Seeded {created} default word filters")
    except Exception as e:
        logger.error(f"❌ Failed to seed word filters: {e}")
        db.rollback()
        raise


def initialize_application(db: Session) -> None:
    """
    Run all application initialization tasks.

    Args:
        db: Database session
    """
    logger.info("🚀 Starting application initialization...")

    init_default_admin(db)

    if settings.seed_default_filters:
        init_default_filters(db)

    logger.info("✅ Application initialization completed!")
