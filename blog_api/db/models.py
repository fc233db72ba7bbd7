"""
SQLAlchemy ORM Model Definitions

Defines the database table structures for the system:
- posts: Blog Posts Table
"""

from datetime import datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from blog_api.common.time import utc_now_naive
from blog_api.common.utils import generate_post_id


class Base(DeclarativeBase):
    """SQLAlchemy ORM Base Class"""
    pass


class Post(Base):
    """
    Blog Posts Table

    Author name is kept as two columns; the combined display string is built at the API boundary.
    """
    __tablename__ = "posts"

    # Primary Key ID, assigned on insert
    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=generate_post_id)
    # Title
    title: Mapped[str] = mapped_column(Text, nullable=False)
    # Body text
    content: Mapped[str] = mapped_column(Text, nullable=False)
    # Author first name
    author_first_name: Mapped[str] = mapped_column(String(200), nullable=False)
    # Author last name
    author_last_name: Mapped[str] = mapped_column(String(200), nullable=False)
    # Creation Time (UTC, naive)
    created: Mapped[datetime] = mapped_column(
        DateTime, default=utc_now_naive, nullable=False, index=True
    )
