"""
Public catalog endpoint.
"""

from fastapi import APIRouter

from app.api.deps import CatalogServiceDep
from app.models.schemas import PublicSessionListResponse, format_public_session


router = APIRouter()


@router.get("", response_model=PublicSessionListResponse)
async def list_public_sessions(catalog: CatalogServiceDep):
    """
    List published sessions from every user, newest first.

    No authentication required.
    """
    records = await catalog.list_published()
    return PublicSessionListResponse(
        sessions=[format_public_session(record) for record in records]
    )
