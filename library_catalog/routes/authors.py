"""
Library Catalog — Author Route Handler
========================================
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from library_catalog.database import get_db_session
from library_catalog.schemas.common import ErrorResponse
from library_catalog.schemas.reference import AuthorResponse
from library_catalog.services.reference_service import reference_service

router = APIRouter(prefix="/authors", tags=["Authors"])


@router.get(
    "",
    response_model=List[AuthorResponse],
    responses={500: {"description": "Storage error", "model": ErrorResponse}},
    summary="List all authors",
)
async def list_authors(db: AsyncSession = Depends(get_db_session)) -> List[AuthorResponse]:
    return await reference_service.list_authors(db)
