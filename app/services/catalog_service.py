"""
Public catalog of published sessions.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import InternalError
from app.db.models import SessionModel
from app.db.repositories import SessionRepository

logger = logging.getLogger(__name__)


class CatalogService:
    """Read-only view over published sessions for anonymous visitors."""

    def __init__(self, session: AsyncSession):
        self.repository = SessionRepository(session)

    async def list_published(self) -> list[SessionModel]:
        """Published sessions from all owners, newest first."""
        try:
            return await self.repository.list_published()
        except SQLAlchemyError as e:
            logger.exception("Failed to list published sessions")
            raise InternalError(f"Listing published sessions failed: {e}") from e
