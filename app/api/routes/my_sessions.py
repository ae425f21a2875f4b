"""
Owner session endpoints: list, fetch, save draft, publish, delete.

Every route here sits behind the cookie auth gate declared on the router.
"""

from fastapi import APIRouter, Depends

from app.api.deps import CurrentUserDep, SessionServiceDep, get_current_user
from app.models.schemas import (
    MessageResponse,
    SessionDetailResponse,
    SessionDraftRequest,
    SessionEnvelope,
    SessionListResponse,
    SessionPublishRequest,
    format_session,
)
from app.services.session_service import SessionFields, draft_command


router = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("", response_model=SessionListResponse)
async def list_my_sessions(current_user: CurrentUserDep, sessions: SessionServiceDep):
    """List the user's drafts and published sessions, most recently updated first."""
    records = await sessions.list_sessions(current_user)
    return SessionListResponse(sessions=[format_session(record) for record in records])


@router.post("/save-draft", response_model=SessionEnvelope)
async def save_draft(
    request: SessionDraftRequest,
    current_user: CurrentUserDep,
    sessions: SessionServiceDep,
):
    """
    Create or overwrite a draft.

    Without an id a new draft is created. With an id the owned session is
    overwritten and set back to draft, even if it was published. Backs both
    manual saves and client auto-save.
    """
    fields = SessionFields.from_input(request.title, request.tags, request.json_file_url)
    record = await sessions.save_draft(current_user, draft_command(request.id, fields))
    return SessionEnvelope(message="Draft saved successfully", session=format_session(record))


@router.post("/publish", response_model=SessionEnvelope)
async def publish_session(
    request: SessionPublishRequest,
    current_user: CurrentUserDep,
    sessions: SessionServiceDep,
):
    """Update an existing session and publish it. Requires an id."""
    fields = SessionFields.from_input(request.title, request.tags, request.json_file_url)
    record = await sessions.publish(current_user, request.id, fields)
    return SessionEnvelope(
        message="Session published successfully",
        session=format_session(record),
    )


@router.get("/{session_id}", response_model=SessionDetailResponse)
async def get_my_session(
    session_id: str,
    current_user: CurrentUserDep,
    sessions: SessionServiceDep,
):
    """Fetch one of the user's sessions."""
    record = await sessions.get_session(current_user, session_id)
    return SessionDetailResponse(session=format_session(record))


@router.delete("/{session_id}", response_model=MessageResponse)
async def delete_my_session(
    session_id: str,
    current_user: CurrentUserDep,
    sessions: SessionServiceDep,
):
    """Permanently delete one of the user's sessions."""
    await sessions.delete_session(current_user, session_id)
    return MessageResponse(message="Session deleted successfully")
