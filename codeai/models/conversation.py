"""
Conversation Model

Stores conversation metadata and the accumulated project context
("project memory") inferred from the chat so far. Each conversation
owns its messages and project files.
"""

from datetime import datetime
from typing import List, Optional, TYPE_CHECKING
from sqlmodel import SQLModel, Field, Relationship, Column
from sqlalchemy import JSON, Text

if TYPE_CHECKING:
    from .message import Message
    from .project_file import ProjectFile


class Conversation(SQLModel, table=True):
    """
    Conversation with persisted project context.

    Relationships:
    - Has many Messages
    - Has many ProjectFiles

    tech_stack and features_built are ordered sets stored as JSON arrays.
    They are only ever replaced with supersets (see ConversationService).
    """
    __tablename__ = "conversations"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=200)
    created_at: datetime = Field(default_factory=datetime.utcnow, index=True)

    # Project context for persistent memory
    project_name: Optional[str] = Field(default=None)
    project_description: Optional[str] = Field(default=None, sa_column=Column(Text))
    tech_stack: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    features_built: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    project_summary: Optional[str] = Field(default=None, sa_column=Column(Text))
    last_code_generated: Optional[str] = Field(default=None, sa_column=Column(Text))

    messages: List["Message"] = Relationship(
        back_populates="conversation",
        sa_relationship_kwargs={"cascade": "all, delete-orphan", "lazy": "select"}
    )
    files: List["ProjectFile"] = Relationship(
        back_populates="conversation",
        sa_relationship_kwargs={"cascade": "all, delete-orphan", "lazy": "select"}
    )
