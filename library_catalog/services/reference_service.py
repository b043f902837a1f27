"""
Library Catalog — Reference Data Service
==========================================

What:  Read-only listing of authors and genres.
Who:   Called by GET /authors and GET /genres.
"""

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from library_catalog.exceptions import DatabaseError
from library_catalog.models import Author, Genre
from library_catalog.schemas.reference import AuthorResponse, GenreResponse

logger = logging.getLogger(__name__)


class ReferenceService:
    """Lists the reference tables in primary-key order."""

    async def list_authors(self, db: AsyncSession) -> List[AuthorResponse]:
        try:
            result = await db.execute(select(Author).order_by(Author.authorid))
            authors = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing authors: %s", str(e))
            raise DatabaseError.from_exception(e)
        return [AuthorResponse.model_validate(author) for author in authors]

    async def list_genres(self, db: AsyncSession) -> List[GenreResponse]:
        try:
            result = await db.execute(select(Genre).order_by(Genre.genreid))
            genres = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing genres: %s", str(e))
            raise DatabaseError.from_exception(e)
        return [GenreResponse.model_validate(genre) for genre in genres]


reference_service = ReferenceService()
