"""
Database Module Initialization
"""

from blog_api.db.session import get_db, init_db, close_db, AsyncSessionLocal
from blog_api.db.models import Base, Post

__all__ = [
    "get_db",
    "init_db",
    "close_db",
    "AsyncSessionLocal",
    "Base",
    "Post",
]
