"""
Data Access Layer Module Initialization
"""

from blog_api.repositories.post_repo import PostRepository

__all__ = [
    "PostRepository",
]
