import logging
from functools import wraps

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

logger = logging.getLogger(__name__)


class DBException(Exception):
    def __init__(self, message: str, status_code: int = 400):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


def db_exception(func):
    """Translate SQLAlchemy failures raised by a service method into DBException.

    The session is left to the caller (``get_db`` rolls it back).
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except IntegrityError:
            # usually a duplicate entry
            raise DBException("Duplicate entry: already exists", 409)
        except SQLAlchemyError:
            logger.error(f"Database failure in {func.__qualname__}", exc_info=True)
            raise DBException("Database error occurred", 500)

    return wrapper
