"""Project files router."""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlmodel import Session

from codeai.db.config import get_session
from codeai.schemas.project_file import (
    BulkFileCreate,
    ProjectFileCreate,
    ProjectFileResponse,
    ProjectFileUpdate,
)
from codeai.services.conversation_service import ConversationService
from codeai.services.project_file_service import ProjectFileService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Files"])


def get_file_service(session: Session = Depends(get_session)) -> ProjectFileService:
    """Dependency for getting ProjectFileService instance."""
    return ProjectFileService(session)


def require_conversation(conversation_id: int, session: Session = Depends(get_session)) -> int:
    """Dependency that 404s for unknown conversations."""
    if not ConversationService(session).get_conversation(conversation_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Conversation not found"
        )
    return conversation_id


@router.get("/conversations/{conversation_id}/files", response_model=List[ProjectFileResponse])
async def list_files(
    conversation_id: int = Depends(require_conversation),
    service: ProjectFileService = Depends(get_file_service),
):
    """List a conversation's project files."""
    try:
        return service.list_files(conversation_id)
    except Exception as e:
        logger.error(f"Error fetching files: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch files"
        )


@router.post(
    "/conversations/{conversation_id}/files",
    response_model=ProjectFileResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_file(
    payload: ProjectFileCreate,
    conversation_id: int = Depends(require_conversation),
    service: ProjectFileService = Depends(get_file_service),
):
    """Create a file, or overwrite the file already at this path."""
    try:
        return service.upsert_file(conversation_id, payload.path, payload.content, payload.language)
    except Exception as e:
        logger.error(f"Error saving file: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to save file"
        )


@router.post(
    "/conversations/{conversation_id}/files/bulk",
    response_model=List[ProjectFileResponse],
    status_code=status.HTTP_201_CREATED,
)
async def bulk_save_files(
    payload: BulkFileCreate,
    conversation_id: int = Depends(require_conversation),
    service: ProjectFileService = Depends(get_file_service),
):
    """Upsert many files; incomplete entries are skipped."""
    try:
        saved = service.bulk_upsert(conversation_id, payload.files)
        logger.info(f"Bulk saved {len(saved)} of {len(payload.files)} files for conversation {conversation_id}")
        return saved
    except Exception as e:
        logger.error(f"Error saving files: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to save files"
        )


@router.put("/files/{file_id}", response_model=ProjectFileResponse)
async def update_file(
    file_id: int,
    payload: ProjectFileUpdate,
    service: ProjectFileService = Depends(get_file_service),
):
    """Replace a file's content."""
    try:
        project_file = service.update_content(file_id, payload.content)
        if not project_file:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="File not found"
            )
        return project_file
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error updating file: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update file"
        )


@router.delete("/files/{file_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_file(
    file_id: int,
    service: ProjectFileService = Depends(get_file_service),
):
    """Delete a file."""
    try:
        service.delete_file(file_id)
    except Exception as e:
        logger.error(f"Error deleting file: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete file"
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
