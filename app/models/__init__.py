"""
Models package initialization
Import all models so Base.metadata knows every table
"""

from .admin import Admin
from .moderation_log import ModerationLog
from .post import Post
from .word_filter import WordFilter

# Make models available at package level
__all__ = [
    "Admin",
    "ModerationLog",
    "Post",
    "WordFilter",
]
