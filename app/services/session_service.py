"""
Session lifecycle service: draft, publish and delete owned sessions.

State machine per session:

    (none) --save_draft(CreateDraft)--> draft
    draft | published --save_draft(UpdateDraft)--> draft
    draft | published --publish--> published
    draft | published --delete--> (none)

Every operation is scoped to the verified owner. A session owned by someone
else is reported exactly like a session that does not exist.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence, Union

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import InternalError, NotFoundError
from app.core.validation import (
    normalize_json_file_url,
    normalize_tags,
    normalize_title,
    require_session_id,
)
from app.db.models import SessionModel, SessionStatus, UserModel
from app.db.repositories import SessionRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionFields:
    """Complete replacement document for the editable fields of a session."""

    title: str
    tags: list[str] = field(default_factory=list)
    json_file_url: Optional[str] = None

    @classmethod
    def from_input(
        cls,
        title: Optional[str],
        tags: Union[str, Sequence[str], None] = None,
        json_file_url: Optional[str] = None,
    ) -> "SessionFields":
        """Normalize raw client input; raises ValidationError on bad fields."""
        return cls(
            title=normalize_title(title),
            tags=normalize_tags(tags),
            json_file_url=normalize_json_file_url(json_file_url),
        )


@dataclass(frozen=True)
class CreateDraft:
    """Save a brand new session as a draft."""

    fields: SessionFields


@dataclass(frozen=True)
class UpdateDraft:
    """Overwrite an existing owned session and move it to draft."""

    session_id: str
    fields: SessionFields


DraftCommand = Union[CreateDraft, UpdateDraft]


def draft_command(session_id: Optional[str], fields: SessionFields) -> DraftCommand:
    """
    Build the save-draft variant from an optional id.

    A missing or empty id means create; anything else must be a valid id.
    """
    if not session_id:
        return CreateDraft(fields=fields)
    return UpdateDraft(session_id=require_session_id(session_id), fields=fields)


class SessionService:
    """Service for the owner-facing session lifecycle."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.repository = SessionRepository(session)

    async def list_sessions(self, owner: UserModel) -> list[SessionModel]:
        """List all of the owner's sessions, drafts and published alike."""
        try:
            return await self.repository.list_owned(owner.id)
        except SQLAlchemyError as e:
            logger.exception(f"Failed to list sessions for user {owner.id}")
            raise InternalError(f"Listing sessions failed: {e}") from e

    async def get_session(self, owner: UserModel, session_id: Optional[str]) -> SessionModel:
        """
        Get one of the owner's sessions.

        Raises:
            InvalidIdError: If the id has the wrong shape (no lookup is made)
            NotFoundError: If the owner has no session with that id
        """
        session_id = require_session_id(session_id)

        try:
            record = await self.repository.get_owned(owner.id, session_id)
        except SQLAlchemyError as e:
            logger.exception(f"Failed to fetch session {session_id}")
            raise InternalError(f"Fetching session failed: {e}") from e

        if not record:
            raise NotFoundError(f"Session {session_id} not found for user {owner.id}")
        return record

    async def save_draft(self, owner: UserModel, command: DraftCommand) -> SessionModel:
        """
        Create or overwrite a session as a draft.

        Safe to repeat with the same payload: only updated_at moves.

        Raises:
            NotFoundError: If an UpdateDraft names a session the owner does not have
        """
        fields = command.fields
        try:
            if isinstance(command, UpdateDraft):
                record = await self.repository.update_owned(
                    owner.id,
                    command.session_id,
                    title=fields.title,
                    tags=fields.tags,
                    json_file_url=fields.json_file_url,
                    status=SessionStatus.DRAFT,
                )
            else:
                record = await self.repository.create(
                    owner.id,
                    title=fields.title,
                    tags=fields.tags,
                    json_file_url=fields.json_file_url,
                    status=SessionStatus.DRAFT,
                )
                logger.info(f"Created draft session {record.id} for user {owner.id}")
        except SQLAlchemyError as e:
            logger.exception(f"Failed to save draft for user {owner.id}")
            raise InternalError(f"Saving draft failed: {e}") from e

        if not record:
            raise NotFoundError(
                f"Session {command.session_id} not found for user {owner.id}"
            )
        return record

    async def publish(
        self,
        owner: UserModel,
        session_id: Optional[str],
        fields: SessionFields,
    ) -> SessionModel:
        """
        Update an owned session and mark it published. Never creates.

        Raises:
            InvalidIdError: If the id is missing or has the wrong shape
            NotFoundError: If the owner has no session with that id
        """
        session_id = require_session_id(session_id)

        try:
            record = await self.repository.update_owned(
                owner.id,
                session_id,
                title=fields.title,
                tags=fields.tags,
                json_file_url=fields.json_file_url,
                status=SessionStatus.PUBLISHED,
            )
        except SQLAlchemyError as e:
            logger.exception(f"Failed to publish session {session_id}")
            raise InternalError(f"Publishing session failed: {e}") from e

        if not record:
            raise NotFoundError(f"Session {session_id} not found for user {owner.id}")

        logger.info(f"Published session {session_id} for user {owner.id}")
        return record

    async def delete_session(self, owner: UserModel, session_id: Optional[str]) -> None:
        """
        Permanently delete one of the owner's sessions.

        Raises:
            InvalidIdError: If the id has the wrong shape
            NotFoundError: If the owner has no session with that id
        """
        session_id = require_session_id(session_id)

        try:
            deleted = await self.repository.delete_owned(owner.id, session_id)
        except SQLAlchemyError as e:
            logger.exception(f"Failed to delete session {session_id}")
            raise InternalError(f"Deleting session failed: {e}") from e

        if not deleted:
            raise NotFoundError(
                f"Session {session_id} not found for user {owner.id}",
                user_message="Session not found or not authorized",
            )

        logger.info(f"Deleted session {session_id} for user {owner.id}")
