"""Conversation, message and project-context schemas."""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from codeai.config import MAX_MESSAGE_LENGTH, MAX_TITLE_LENGTH


class CamelModel(BaseModel):
    """Base schema: camelCase on the wire, snake_case in Python, either accepted on input."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ConversationCreate(CamelModel):
    """Schema for creating a conversation."""
    title: Optional[str] = Field(None, min_length=1, max_length=MAX_TITLE_LENGTH)


class MessageCreate(CamelModel):
    """Schema for sending a user message."""
    content: str = Field(..., min_length=1, max_length=MAX_MESSAGE_LENGTH)


class ProjectContextUpdate(CamelModel):
    """Partial project context; omitted or null fields are left unchanged."""
    project_name: Optional[str] = None
    project_description: Optional[str] = None
    tech_stack: Optional[List[str]] = None
    features_built: Optional[List[str]] = None
    project_summary: Optional[str] = None
    last_code_generated: Optional[str] = None


class MessageResponse(CamelModel):
    """Schema for message API responses."""
    id: int
    conversation_id: int
    role: str
    content: str
    created_at: datetime


class ConversationResponse(CamelModel):
    """Schema for conversation API responses (no messages)."""
    id: int
    title: str
    created_at: datetime
    project_name: Optional[str] = None
    project_description: Optional[str] = None
    tech_stack: List[str] = []
    features_built: List[str] = []
    project_summary: Optional[str] = None
    last_code_generated: Optional[str] = None

    @field_validator("tech_stack", "features_built", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        return value or []


class ConversationWithMessages(ConversationResponse):
    """Conversation plus its ordered messages."""
    messages: List[MessageResponse] = []


class HealthResponse(BaseModel):
    """Health check payload."""
    status: str
    aiMode: str
    message: str
