"""
SQLAlchemy Repository Implementation Module Initialization
"""

from blog_api.repositories.sqlalchemy.post_repo import SQLAlchemyPostRepository

__all__ = [
    "SQLAlchemyPostRepository",
]
