"""
Library Catalog — Book Request/Response Schemas
=================================================

What:  Pydantic models for the /books routes.
How:   FastAPI validates request bodies against `BookPayload` and serializes
       responses through the response models (by alias, so the JSON keys
       match the stored column names, e.g. `publishedDate`).

Validation split:
    Types and integer ranges are checked here (pages must be a non-negative
    integer that fits an SQLite INTEGER, title a string...).
    Presence is checked by BookService so that a missing field yields the
    single 400 message "All fields are required" instead of per-field errors.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from library_catalog.database import SQLITE_MAX_INTEGER


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class BookPayload(BaseModel):
    """
    Body of POST /books and PUT /books/{id}.

    Every field is optional at the schema level; BookService requires all
    five to be present and truthy.
    """
    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = Field(default=None, description="Book title")
    authorid: Optional[int] = Field(
        default=None, ge=0, le=SQLITE_MAX_INTEGER, description="Existing author identifier"
    )
    genreid: Optional[int] = Field(
        default=None, ge=0, le=SQLITE_MAX_INTEGER, description="Existing genre identifier"
    )
    pages: Optional[int] = Field(
        default=None, ge=0, le=SQLITE_MAX_INTEGER, description="Page count"
    )
    published_date: Optional[str] = Field(
        default=None,
        alias="publishedDate",
        description="Publication date (ISO 8601, YYYY-MM-DD)",
    )

    def missing_fields(self) -> list:
        """Names (as sent on the wire) of fields that are absent or falsy."""
        values = {
            "title": self.title,
            "authorid": self.authorid,
            "genreid": self.genreid,
            "pages": self.pages,
            "publishedDate": self.published_date,
        }
        return [name for name, value in values.items() if not value]


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class BookDetail(BaseModel):
    """
    What:  A book with its author and genre resolved to names.
    Who:   Returned by GET /books/{id}.
    """
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    bookid: int = Field(description="Unique book identifier")
    title: str = Field(description="Book title")
    author: str = Field(description="Author name")
    genre: str = Field(description="Genre name")
    pages: Optional[int] = Field(default=None, description="Page count")
    published_date: Optional[str] = Field(
        default=None, alias="publishedDate", description="Publication date (ISO 8601)"
    )


class BookListItem(BookDetail):
    """
    What:  List representation; also carries the raw foreign keys.
    Who:   Returned by GET /books as array items.
    """
    authorid: int = Field(description="Author identifier")
    genreid: int = Field(description="Genre identifier")


class BookCreatedResponse(BaseModel):
    """Returned by POST /books with HTTP 201."""
    bookid: int = Field(description="Identifier generated for the new book")


class MessageResponse(BaseModel):
    """Plain success message for update and delete."""
    message: str = Field(description="Human-readable success message")
