"""
Conversations API Router

Conversation CRUD, project context updates, the streaming message
endpoint and the combined project preview.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.responses import HTMLResponse, StreamingResponse
from sqlmodel import Session

from codeai.agents.main_agent import CodeChatAgent, create_code_chat_agent
from codeai.agents.skills.preview_assembly import assemble_preview
from codeai.agents.subagents.cohere_ai_subagent import CohereAISubagent, get_cloud_backend
from codeai.db.config import get_session, get_session_factory
from codeai.schemas.conversation import (
    ConversationCreate,
    ConversationResponse,
    ConversationWithMessages,
    MessageCreate,
    MessageResponse,
    ProjectContextUpdate,
)
from codeai.services.conversation_service import ConversationService
from codeai.services.project_file_service import ProjectFileService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Conversations"])

SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
}


def get_conversation_service(session: Session = Depends(get_session)) -> ConversationService:
    """Dependency for getting ConversationService instance."""
    return ConversationService(session)


def get_chat_agent(
    session_factory=Depends(get_session_factory),
    cloud_backend: CohereAISubagent = Depends(get_cloud_backend),
) -> CodeChatAgent:
    """Dependency for getting the chat agent."""
    return create_code_chat_agent(session_factory, cloud_backend)


def _require_conversation(service: ConversationService, conversation_id: int):
    conversation = service.get_conversation(conversation_id)
    if not conversation:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Conversation not found"
        )
    return conversation


@router.get("/conversations", response_model=List[ConversationResponse])
async def list_conversations(service: ConversationService = Depends(get_conversation_service)):
    """List all conversations, newest first."""
    try:
        return service.list_conversations()
    except Exception as e:
        logger.error(f"Error fetching conversations: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch conversations"
        )


@router.get("/conversations/{conversation_id}", response_model=ConversationWithMessages)
async def get_conversation(
    conversation_id: int,
    service: ConversationService = Depends(get_conversation_service),
):
    """Get a conversation with its messages in order."""
    try:
        conversation = _require_conversation(service, conversation_id)
        messages = service.get_messages(conversation_id)
        data = ConversationResponse.model_validate(conversation).model_dump()
        return ConversationWithMessages(
            **data,
            messages=[MessageResponse.model_validate(m) for m in messages],
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching conversation: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch conversation"
        )


@router.post(
    "/conversations",
    response_model=ConversationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_conversation(
    payload: Optional[ConversationCreate] = None,
    service: ConversationService = Depends(get_conversation_service),
):
    """Create a conversation; the title defaults to "New Chat"."""
    try:
        conversation = service.create_conversation(payload.title if payload else None)
        logger.info(f"Created conversation {conversation.id}")
        return conversation
    except Exception as e:
        logger.error(f"Error creating conversation: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create conversation"
        )


@router.delete("/conversations/{conversation_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_conversation(
    conversation_id: int,
    service: ConversationService = Depends(get_conversation_service),
):
    """Delete a conversation with its messages and files."""
    try:
        service.delete_conversation(conversation_id)
    except Exception as e:
        logger.error(f"Error deleting conversation: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete conversation"
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/conversations/{conversation_id}/context", response_model=ConversationResponse)
async def update_project_context(
    conversation_id: int,
    payload: ProjectContextUpdate,
    service: ConversationService = Depends(get_conversation_service),
):
    """Merge a partial project context into the conversation."""
    try:
        conversation = service.merge_project_context(
            conversation_id,
            payload.model_dump(exclude_none=True),
        )
        if not conversation:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Conversation not found"
            )
        return conversation
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error updating project context: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update project context"
        )


@router.post("/conversations/{conversation_id}/messages")
async def send_message(
    conversation_id: int,
    payload: MessageCreate,
    agent: CodeChatAgent = Depends(get_chat_agent),
):
    """
    Send a user message and stream the reply as server-sent events.

    The user message is persisted before the stream opens. Each event is a
    `data: <json>` frame; see CodeChatAgent for the event sequences.
    """
    try:
        recorded = agent.record_user_message(conversation_id, payload.content)
    except Exception as e:
        logger.error(f"Error saving message: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to send message"
        )
    if not recorded:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Conversation not found"
        )

    logger.info(f"Message received for conversation {conversation_id}: {payload.content[:50]}...")

    def event_stream():
        for event in agent.stream_reply(conversation_id, payload.content):
            yield event.to_sse()

    return StreamingResponse(event_stream(), media_type="text/event-stream", headers=SSE_HEADERS)


@router.get("/conversations/{conversation_id}/preview", response_class=HTMLResponse)
async def preview_project(
    conversation_id: int,
    service: ConversationService = Depends(get_conversation_service),
    session: Session = Depends(get_session),
):
    """Combined HTML preview of the conversation's project files."""
    _require_conversation(service, conversation_id)
    document = assemble_preview(ProjectFileService(session).list_files(conversation_id))
    if document is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No HTML file to preview"
        )
    return HTMLResponse(content=document)
