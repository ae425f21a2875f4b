"""
Session persistence.

Every query that touches a single session filters on owner and id together.
The only unscoped read is the published listing used by the public catalog.
"""

from datetime import datetime, timezone
from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models import SessionModel, SessionStatus


class SessionRepository:
    """Owner-scoped access to session rows."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_owned(self, owner_id: str) -> list[SessionModel]:
        """All sessions for an owner, most recently updated first."""
        result = await self.session.execute(
            select(SessionModel)
            .where(SessionModel.user_id == owner_id)
            .order_by(SessionModel.updated_at.desc(), SessionModel.id.desc())
        )
        return list(result.scalars().all())

    async def get_owned(self, owner_id: str, session_id: str) -> Optional[SessionModel]:
        """Get one session if and only if it belongs to the owner."""
        result = await self.session.execute(
            select(SessionModel).where(
                SessionModel.id == session_id,
                SessionModel.user_id == owner_id,
            )
        )
        return result.scalar_one_or_none()

    async def create(
        self,
        owner_id: str,
        title: str,
        tags: Sequence[str],
        json_file_url: Optional[str],
        status: SessionStatus,
    ) -> SessionModel:
        """Insert a new session for the owner."""
        now = datetime.now(timezone.utc)
        record = SessionModel(
            user_id=owner_id,
            title=title,
            tags=list(tags),
            json_file_url=json_file_url,
            status=status.value,
            created_at=now,
            updated_at=now,
        )
        self.session.add(record)
        await self.session.flush()
        return record

    async def update_owned(
        self,
        owner_id: str,
        session_id: str,
        title: str,
        tags: Sequence[str],
        json_file_url: Optional[str],
        status: SessionStatus,
    ) -> Optional[SessionModel]:
        """
        Replace the editable fields of an owned session.

        Returns:
            The updated session, or None if the owner has no such session
        """
        record = await self.get_owned(owner_id, session_id)
        if not record:
            return None

        record.title = title
        record.tags = list(tags)
        record.json_file_url = json_file_url
        record.status = status.value
        record.updated_at = datetime.now(timezone.utc)
        await self.session.flush()
        return record

    async def delete_owned(self, owner_id: str, session_id: str) -> bool:
        """Permanently remove an owned session. False if nothing matched."""
        record = await self.get_owned(owner_id, session_id)
        if not record:
            return False

        await self.session.delete(record)
        await self.session.flush()
        return True

    async def list_published(self) -> list[SessionModel]:
        """Published sessions from every owner, newest created first."""
        result = await self.session.execute(
            select(SessionModel)
            .where(SessionModel.status == SessionStatus.PUBLISHED.value)
            .order_by(SessionModel.created_at.desc(), SessionModel.id.desc())
        )
        return list(result.scalars().all())
