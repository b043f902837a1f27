"""
Library Catalog — Genre Route Handler
=======================================
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from library_catalog.database import get_db_session
from library_catalog.schemas.common import ErrorResponse
from library_catalog.schemas.reference import GenreResponse
from library_catalog.services.reference_service import reference_service

router = APIRouter(prefix="/genres", tags=["Genres"])


@router.get(
    "",
    response_model=List[GenreResponse],
    responses={500: {"description": "Storage error", "model": ErrorResponse}},
    summary="List all genres",
)
async def list_genres(db: AsyncSession = Depends(get_db_session)) -> List[GenreResponse]:
    return await reference_service.list_genres(db)
