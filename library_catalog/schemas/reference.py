"""
Library Catalog — Author and Genre Response Schemas
=====================================================

Authors and genres are reference data: the API only lists them.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AuthorResponse(BaseModel):
    """Returned by GET /authors as array items."""
    model_config = ConfigDict(from_attributes=True)

    authorid: int = Field(description="Unique author identifier")
    name: str = Field(description="Author name (unique)")


class GenreResponse(BaseModel):
    """Returned by GET /genres as array items."""
    model_config = ConfigDict(from_attributes=True)

    genreid: int = Field(description="Unique genre identifier")
    name: str = Field(description="Genre name (unique)")
    description: Optional[str] = Field(default=None, description="Short genre description")
