"""
Library Catalog — Author SQLAlchemy Model
===========================================

What:  ORM model representing the `authors` table.
Who:   Read by GET /authors, joined by the book queries, filled by seeding.

Lifecycle:
    Authors are only created by the schema initializer and are never
    deleted by the service.
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from library_catalog.database import Base


class Author(Base):
    """A book author; `name` is unique so duplicate seed inserts are no-ops."""

    __tablename__ = "authors"
    __table_args__ = {"sqlite_autoincrement": True}

    authorid: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(Text, unique=True, nullable=False)

    def __repr__(self) -> str:
        return f"<Author(authorid={self.authorid}, name='{self.name}')>"
