"""
Library Catalog — Genre SQLAlchemy Model
==========================================

What:  ORM model representing the `genres` table.
Who:   Read by GET /genres, joined by the book queries, filled by seeding.
"""

from typing import Optional

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from library_catalog.database import Base


class Genre(Base):
    """A literary genre with an optional free-text description."""

    __tablename__ = "genres"
    __table_args__ = {"sqlite_autoincrement": True}

    genreid: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Genre(genreid={self.genreid}, name='{self.name}')>"
