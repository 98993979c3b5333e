"""Project file schemas."""
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from codeai.schemas.conversation import CamelModel


class ProjectFileCreate(CamelModel):
    """Schema for creating or overwriting a file by path."""
    path: str = Field(..., min_length=1, max_length=500)
    content: str
    language: str = Field(..., min_length=1, max_length=50)


class ProjectFileUpdate(CamelModel):
    """Schema for replacing a file's content."""
    content: str


class BulkFileEntry(CamelModel):
    """Bulk entry; entries missing path, content or language are skipped."""
    path: Optional[str] = None
    content: Optional[str] = None
    language: Optional[str] = None


class BulkFileCreate(CamelModel):
    """Schema for upserting many files at once."""
    files: List[BulkFileEntry]


class ProjectFileResponse(CamelModel):
    """Schema for project file API responses."""
    id: int
    conversation_id: int
    path: str
    content: str
    language: str
    created_at: datetime
    updated_at: datetime
