"""
Library Catalog — Book SQLAlchemy Model
=========================================

What:  ORM model representing the `books` table.
Who:   Created, updated and deleted through the /books routes.

Table Design:
    - authorid / genreid: nullable in the schema, but the request handlers
      always require both. With `PRAGMA foreign_keys = ON` they must
      reference existing rows.
    - publishedDate: ISO date string (YYYY-MM-DD) stored as TEXT. The column
      keeps its camelCase name; the Python attribute is `published_date`.

Visibility:
    Read queries inner-join authors and genres, so a book whose foreign keys
    do not resolve exists in storage but never appears in GET responses.
"""

from typing import Optional

from sqlalchemy import ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from library_catalog.database import Base


class Book(Base):
    """A catalog entry linking one author and one genre."""

    __tablename__ = "books"
    __table_args__ = {"sqlite_autoincrement": True}

    bookid: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    authorid: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("authors.authorid"), nullable=True
    )
    genreid: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("genres.genreid"), nullable=True
    )
    pages: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    published_date: Mapped[Optional[str]] = mapped_column(
        "publishedDate", Text, nullable=True
    )

    def __repr__(self) -> str:
        return f"<Book(bookid={self.bookid}, title='{self.title}')>"
