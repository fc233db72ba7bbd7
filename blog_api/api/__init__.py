"""
API Router Module Initialization
"""

from blog_api.api.deps import get_db, get_post_repo
from blog_api.api.posts import router as posts_router

__all__ = [
    "get_db",
    "get_post_repo",
    "posts_router",
]
