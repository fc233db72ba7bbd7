"""
Service Layer Module Initialization
"""

from blog_api.services.post_service import PostService

__all__ = [
    "PostService",
]
