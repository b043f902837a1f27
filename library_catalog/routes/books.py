"""
Library Catalog — Book Route Handlers
=======================================

What:  CRUD endpoints for /books.
How:   Parses path/query/body, delegates to BookService, shapes the response.

Status codes:
    200  list, detail, update, delete
    201  create
    400  missing fields, bad paging, unparsable body or non-integer id
    404  unknown book id
    500  storage error (driver message in the body)
"""

from typing import List

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from library_catalog.database import get_db_session
from library_catalog.schemas.book import (
    BookCreatedResponse,
    BookDetail,
    BookListItem,
    BookPayload,
    MessageResponse,
)
from library_catalog.schemas.common import ErrorResponse
from library_catalog.services.book_service import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    book_service,
)

router = APIRouter(prefix="/books", tags=["Books"])

_ERRORS = {
    400: {"description": "Invalid input", "model": ErrorResponse},
    500: {"description": "Storage error", "model": ErrorResponse},
}
_NOT_FOUND = {404: {"description": "Book not found", "model": ErrorResponse}}


@router.get(
    "",
    response_model=List[BookListItem],
    responses=_ERRORS,
    summary="List books with limit/offset pagination",
)
async def list_books(
    request: Request,
    page: int = Query(default=DEFAULT_PAGE, description="1-based page number"),
    limit: int = Query(default=DEFAULT_LIMIT, description="Books per page"),
    db: AsyncSession = Depends(get_db_session),
) -> List[BookListItem]:
    """
    Example:
        GET /books?page=2&limit=1  → the second book, by bookid
    """
    return await book_service.list_books(
        db=db,
        page=page,
        limit=limit,
        max_limit=request.app.state.settings.max_page_size,
    )


@router.get(
    "/{book_id}",
    response_model=BookDetail,
    responses={**_ERRORS, **_NOT_FOUND},
    summary="Get a single book by ID",
)
async def get_book(
    book_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> BookDetail:
    return await book_service.get_book(db=db, book_id=book_id)


@router.post(
    "",
    status_code=201,
    response_model=BookCreatedResponse,
    responses=_ERRORS,
    summary="Create a book",
)
async def create_book(
    payload: BookPayload,
    db: AsyncSession = Depends(get_db_session),
) -> BookCreatedResponse:
    """
    Body: {"title", "authorid", "genreid", "pages", "publishedDate"}, all required.
    """
    bookid = await book_service.create_book(db=db, payload=payload)
    return BookCreatedResponse(bookid=bookid)


@router.put(
    "/{book_id}",
    response_model=MessageResponse,
    responses={**_ERRORS, **_NOT_FOUND},
    summary="Update every field of a book",
)
async def update_book(
    book_id: int,
    payload: BookPayload,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    await book_service.update_book(db=db, book_id=book_id, payload=payload)
    return MessageResponse(message="Book updated successfully")


@router.delete(
    "/{book_id}",
    response_model=MessageResponse,
    responses={**_ERRORS, **_NOT_FOUND},
    summary="Delete a book",
)
async def delete_book(
    book_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    await book_service.delete_book(db=db, book_id=book_id)
    return MessageResponse(message="Book deleted successfully")
