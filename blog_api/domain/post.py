"""
Post Domain Model

Defines Post related Data Transfer Objects (DTOs).
Request bodies use camelCase author keys (firstName/lastName); responses render
the author as a single display string.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class AuthorName(BaseModel):
    """Structured author name as accepted on input and stored"""

    first_name: str = Field(..., min_length=1, alias="firstName", description="First Name")
    last_name: str = Field(..., min_length=1, alias="lastName", description="Last Name")

    model_config = ConfigDict(populate_by_name=True)

    @property
    def display_name(self) -> str:
        """Combined display string used in responses"""
        return f"{self.first_name} {self.last_name}"


class PostCreate(BaseModel):
    """Create Post Request Model"""

    title: str = Field(..., min_length=1, description="Title")
    content: str = Field(..., min_length=1, description="Content")
    author: AuthorName = Field(..., description="Author")


class PostUpdate(BaseModel):
    """
    Update Post Request Model

    Omitted fields keep their stored value. ``id`` is optional and, when present,
    must match the id in the path. ``author`` is replaced as a whole.
    """

    id: Optional[str] = Field(None, description="Post ID (must match path)")
    title: Optional[str] = Field(None, min_length=1)
    content: Optional[str] = Field(None, min_length=1)
    author: Optional[AuthorName] = None

    @model_validator(mode="after")
    def reject_explicit_nulls(self) -> "PostUpdate":
        for name in ("title", "content", "author"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"'{name}' may be omitted but not null")
        return self


class Post(BaseModel):
    """Post Complete Model"""

    id: str = Field(..., description="Post ID")
    title: str = Field(..., description="Title")
    content: str = Field(..., description="Content")
    author: AuthorName = Field(..., description="Author")
    created: datetime = Field(..., description="Creation Time")

    model_config = ConfigDict(from_attributes=True)


class PostResponse(BaseModel):
    """Post Response Model (author rendered as display string)"""

    id: str = Field(..., description="Post ID")
    title: str = Field(..., description="Title")
    content: str = Field(..., description="Content")
    author: str = Field(..., description="Author display name")
    created: datetime = Field(..., description="Creation Time")
