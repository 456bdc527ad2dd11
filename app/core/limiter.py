# app/core/limiter.py
from fastapi import Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from app.core.config import settings

RATE_LIMIT_MESSAGE = "Too many requests from this IP, please try again later."

# Keyed by client IP. Storage is redis:// in deployments, memory:// otherwise.
limiter = Limiter(
    key_func=get_remote_address,
    storage_uri=settings.redis_url,
    default_limits=[settings.redis_rate_limit],
    enabled=settings.rate_limit_enabled,
)

# Anonymous submissions get a tighter budget than the rest of the API.
submission_limit = settings.submission_rate_limit


async def custom_rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    return JSONResponse(
        status_code=429,
        content={
            "error": f"Rate limit exceeded: {exc.detail}",
            "message": RATE_LIMIT_MESSAGE,
        },
    )
