"""Project file model: a named code blob extracted from assistant responses."""
from datetime import datetime
from typing import Optional, TYPE_CHECKING
from sqlmodel import SQLModel, Field, Relationship, Column
from sqlalchemy import ForeignKey, Integer, String, Text, UniqueConstraint

if TYPE_CHECKING:
    from .conversation import Conversation


class ProjectFile(SQLModel, table=True):
    """A file in a conversation's project, unique by path within the conversation."""
    __tablename__ = "project_files"
    __table_args__ = (
        UniqueConstraint("conversation_id", "path", name="uq_project_files_conversation_path"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    conversation_id: int = Field(
        sa_column=Column(
            Integer,
            ForeignKey("conversations.id", ondelete="CASCADE"),
            index=True,
            nullable=False,
        )
    )
    path: str = Field(sa_column=Column(String(500), nullable=False))  # slash-segmented, e.g. "src/app.js"
    content: str = Field(sa_column=Column(Text, nullable=False))
    language: str = Field(sa_column=Column(String(50), nullable=False))
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    conversation: Optional["Conversation"] = Relationship(back_populates="files")
