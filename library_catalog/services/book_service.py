"""
Library Catalog — Book Service (Validation + Data Access)
===========================================================

What:  All reads and writes against the `books` table.
How:   SQLAlchemy expressions bound to an AsyncSession; every user-supplied
       value travels as a bound parameter.
Who:   Called by the /books route handlers.

Statements:
    list_books   SELECT DISTINCT ... JOIN authors JOIN genres ... LIMIT :limit OFFSET :offset
    get_book     SELECT ... JOIN authors JOIN genres WHERE bookid = :id
    create_book  INSERT INTO books (...) VALUES (...)
    update_book  UPDATE books SET ... WHERE bookid = :id
    delete_book  DELETE FROM books WHERE bookid = :id

Error Handling Strategy:
    - Missing fields / bad paging  → ValidationError (400), raised before any SQL
    - No matching row              → NotFoundError (404), also for ids no
                                     SQLite INTEGER can hold
    - Any SQLAlchemyError          → DatabaseError (500) carrying the driver message
"""

import logging
from typing import List

from sqlalchemy import Select, delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from library_catalog.database import SQLITE_MAX_INTEGER
from library_catalog.exceptions import DatabaseError, NotFoundError, ValidationError
from library_catalog.models import Author, Book, Genre
from library_catalog.schemas.book import (
    BookDetail,
    BookListItem,
    BookPayload,
)

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


def _joined_books_query(include_ids: bool) -> Select:
    """Books inner-joined to their author and genre; unresolved rows drop out."""
    columns = [
        Book.bookid,
        Book.title,
        Author.name.label("author"),
        Genre.name.label("genre"),
        Book.pages,
        Book.published_date.label("published_date"),
    ]
    if include_ids:
        columns += [Book.authorid, Book.genreid]

    return (
        select(*columns)
        .join(Author, Book.authorid == Author.authorid)
        .join(Genre, Book.genreid == Genre.genreid)
    )


def _ensure_storable_id(book_id: int) -> None:
    """An id outside SQLite's INTEGER range cannot name a stored book."""
    if not -SQLITE_MAX_INTEGER - 1 <= book_id <= SQLITE_MAX_INTEGER:
        raise NotFoundError(resource="Book", resource_id=book_id)

class BookService:
    """
    Stateless book operations; the session is passed in on every call.
    """

    @staticmethod
    def validate_payload(payload: BookPayload) -> None:
        """Raises ValidationError unless all five book fields are present and truthy."""
        missing = payload.missing_fields()
        if missing:
            raise ValidationError(
                message="All fields are required",
                context={"missing": missing},
            )

    @staticmethod
    def page_offset(page: int, limit: int, max_limit: int) -> int:
        """
        Computes `(page - 1) * limit` after checking both are positive.

        Raises:
            ValidationError: page < 1, limit < 1, limit > max_limit, or an
                offset past the largest SQLite integer
        """
        if page < 1:
            raise ValidationError(message="page must be a positive integer", field="page")
        if limit < 1:
            raise ValidationError(message="limit must be a positive integer", field="limit")
        if limit > max_limit:
            raise ValidationError(
                message=f"limit must not exceed {max_limit}", field="limit"
            )
        offset = (page - 1) * limit
        if offset > SQLITE_MAX_INTEGER:
            raise ValidationError(message="page is out of range", field="page")
        return offset

    async def list_books(
        self,
        db: AsyncSession,
        max_limit: int,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_LIMIT,
    ) -> List[BookListItem]:
        """
        One page of books with author and genre names resolved.

        Ordered by bookid so consecutive pages never overlap.
        """
        offset = self.page_offset(page, limit, max_limit)
        query = (
            _joined_books_query(include_ids=True)
            .distinct()
            .order_by(Book.bookid)
            .limit(limit)
            .offset(offset)
        )
        try:
            result = await db.execute(query)
            rows = result.mappings().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing books: %s", str(e), exc_info=True)
            raise DatabaseError.from_exception(e, page=page, limit=limit)

        return [BookListItem.model_validate(dict(row)) for row in rows]

    async def get_book(self, db: AsyncSession, book_id: int) -> BookDetail:
        """
        Raises:
            NotFoundError: no book with this id, or its author/genre is missing
            DatabaseError: query execution failed
        """
        _ensure_storable_id(book_id)
        query = _joined_books_query(include_ids=False).where(Book.bookid == book_id)
        try:
            result = await db.execute(query)
            row = result.mappings().first()
        except SQLAlchemyError as e:
            logger.error("Database error fetching book %s: %s", book_id, str(e))
            raise DatabaseError.from_exception(e, book_id=book_id)

        if row is None:
            raise NotFoundError(resource="Book", resource_id=book_id)
        return BookDetail.model_validate(dict(row))

    async def create_book(self, db: AsyncSession, payload: BookPayload) -> int:
        """
        Inserts a book and returns its generated bookid.

        A foreign key that references no author/genre fails at flush time
        ("FOREIGN KEY constraint failed") and becomes a DatabaseError.
        """
        self.validate_payload(payload)

        book = Book(
            title=payload.title,
            authorid=payload.authorid,
            genreid=payload.genreid,
            pages=payload.pages,
            published_date=payload.published_date,
        )
        try:
            db.add(book)
            await db.flush()
            await db.commit()
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error("Database error creating book %r: %s", payload.title, str(e))
            raise DatabaseError.from_exception(e, title=payload.title)

        logger.info("Book %d created: %r", book.bookid, book.title)
        return book.bookid

    async def update_book(self, db: AsyncSession, book_id: int, payload: BookPayload) -> None:
        """
        Overwrites all five fields of an existing book.

        Raises:
            ValidationError: a field is missing (nothing is written)
            NotFoundError: no row has this bookid
            DatabaseError: statement failed (e.g. foreign key violation)
        """
        self.validate_payload(payload)
        _ensure_storable_id(book_id)

        stmt = (
            update(Book)
            .where(Book.bookid == book_id)
            .values(
                title=payload.title,
                authorid=payload.authorid,
                genreid=payload.genreid,
                pages=payload.pages,
                published_date=payload.published_date,
            )
            .execution_options(synchronize_session=False)
        )
        try:
            result = await db.execute(stmt)
            changed = result.rowcount
            await db.commit()
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error("Database error updating book %s: %s", book_id, str(e))
            raise DatabaseError.from_exception(e, book_id=book_id)

        if changed == 0:
            raise NotFoundError(resource="Book", resource_id=book_id)
        logger.info("Book %d updated", book_id)

    async def delete_book(self, db: AsyncSession, book_id: int) -> None:
        """
        Raises:
            NotFoundError: no row has this bookid
            DatabaseError: statement failed
        """
        _ensure_storable_id(book_id)
        stmt = (
            delete(Book)
            .where(Book.bookid == book_id)
            .execution_options(synchronize_session=False)
        )
        try:
            result = await db.execute(stmt)
            changed = result.rowcount
            await db.commit()
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error("Database error deleting book %s: %s", book_id, str(e))
            raise DatabaseError.from_exception(e, book_id=book_id)

        if changed == 0:
            raise NotFoundError(resource="Book", resource_id=book_id)
        logger.info("Book %d deleted", book_id)


# ── Singleton Instance ────────────────────────────────────────────────────
book_service = BookService()
