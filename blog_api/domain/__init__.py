"""
Domain Model Module Initialization
"""

from blog_api.domain.post import (
    AuthorName,
    Post,
    PostCreate,
    PostUpdate,
    PostResponse,
)

__all__ = [
    "AuthorName",
    "Post",
    "PostCreate",
    "PostUpdate",
    "PostResponse",
]
