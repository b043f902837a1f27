"""
Library Catalog — Schema Initializer
======================================

What:  Creates the catalog tables and seeds reference data on startup.
How:   One `engine.begin()` block runs `metadata.create_all`, then inserts
       authors, genres and (if the books table is empty) the sample books.
Who:   Called from the application lifespan and by the test fixtures.
When:  Once per process start, before the server accepts traffic.

Idempotence:
    - authors / genres: INSERT ... ON CONFLICT DO NOTHING on the unique name
    - books: only inserted when `SELECT count(*) FROM books` is 0

Failure policy:
    Schema creation and the inserts run inside one `engine.begin()` block, so
    a failure rolls back every insert of the run. The failure is logged and
    swallowed here: the service still starts, possibly with an empty catalog.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from sqlalchemy import func, select
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection

from library_catalog.database import Database
from library_catalog.models import Author, Book, Genre

logger = logging.getLogger(__name__)


SEED_AUTHORS: List[str] = [
    "J.K. Rowling",
    "George Orwell",
    "J.R.R. Tolkien",
    "Harper Lee",
]

SEED_GENRES: List[Dict[str, str]] = [
    {
        "name": "Fantasy",
        "description": "A genre of speculative fiction involving magic and mythical creatures",
    },
    {
        "name": "Dystopian",
        "description": "A genre of speculative fiction set in a futuristic society with oppression and control",
    },
    {
        "name": "Fiction",
        "description": "A genre of narrative fiction based on real-life experiences",
    },
]

SEED_BOOKS: List[Dict[str, object]] = [
    {
        "title": "1984",
        "author": "George Orwell",
        "genre": "Dystopian",
        "pages": 328,
        "published_date": "1949-06-08",
    },
    {
        "title": "Harry Potter and the Sorcerer's Stone",
        "author": "J.K. Rowling",
        "genre": "Fantasy",
        "pages": 309,
        "published_date": "1997-06-26",
    },
    {
        "title": "The Hobbit",
        "author": "J.R.R. Tolkien",
        "genre": "Fantasy",
        "pages": 310,
        "published_date": "1937-09-21",
    },
    {
        "title": "To Kill a Mockingbird",
        "author": "Harper Lee",
        "genre": "Fiction",
        "pages": 324,
        "published_date": "1960-07-11",
    },
]


@dataclass
class SeedSummary:
    """Rows inserted by one initializer run (zeros on an already-seeded database)."""
    authors: int = 0
    genres: int = 0
    books: int = 0
    succeeded: bool = True


class SeedService:
    """Builds the schema and loads the fixed reference data."""

    async def initialize(self, database: Database) -> SeedSummary:
        """
        Ensure tables exist, then seed authors, genres and books.

        Returns:
            SeedSummary; `succeeded` is False when setup failed and was rolled back.
        """
        summary = SeedSummary()
        try:
            async with database.engine.begin() as conn:
                await database.create_tables(conn)
                summary.authors = await self._seed_authors(conn)
                summary.genres = await self._seed_genres(conn)
                summary.books = await self._seed_books(conn)
        except SQLAlchemyError as e:
            logger.error("Error setting up the database: %s", str(e), exc_info=True)
            return SeedSummary(succeeded=False)

        logger.info(
            "Database ready: inserted %d authors, %d genres, %d books",
            summary.authors,
            summary.genres,
            summary.books,
        )
        return summary

    async def _seed_authors(self, conn: AsyncConnection) -> int:
        inserted = 0
        for name in SEED_AUTHORS:
            stmt = sqlite_insert(Author).values(name=name).on_conflict_do_nothing(
                index_elements=["name"]
            )
            result = await conn.execute(stmt)
            inserted += max(result.rowcount, 0)
        return inserted

    async def _seed_genres(self, conn: AsyncConnection) -> int:
        inserted = 0
        for genre in SEED_GENRES:
            stmt = sqlite_insert(Genre).values(**genre).on_conflict_do_nothing(
                index_elements=["name"]
            )
            result = await conn.execute(stmt)
            inserted += max(result.rowcount, 0)
        return inserted

    async def _seed_books(self, conn: AsyncConnection) -> int:
        existing = (await conn.execute(select(func.count()).select_from(Book))).scalar_one()
        if existing:
            logger.debug("Books table already holds %d rows; skipping book seed", existing)
            return 0

        inserted = 0
        for book in SEED_BOOKS:
            authorid = await self._lookup_id(conn, Author.authorid, Author.name, book["author"])
            genreid = await self._lookup_id(conn, Genre.genreid, Genre.name, book["genre"])
            if authorid is None or genreid is None:
                logger.warning("Skipping seed book %r: author or genre missing", book["title"])
                continue

            await conn.execute(
                Book.__table__.insert().values(
                    title=book["title"],
                    authorid=authorid,
                    genreid=genreid,
                    pages=book["pages"],
                    publishedDate=book["published_date"],
                )
            )
            inserted += 1
        return inserted

    @staticmethod
    async def _lookup_id(conn: AsyncConnection, id_column, name_column, name) -> Optional[int]:
        result = await conn.execute(select(id_column).where(name_column == name))
        return result.scalar_one_or_none()


seed_service = SeedService()
