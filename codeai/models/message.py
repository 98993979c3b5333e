"""
Message Model

Stores individual chat messages (user or assistant) within conversations.
Messages are immutable once created.
"""

from datetime import datetime
from enum import Enum
from typing import Optional, TYPE_CHECKING
from sqlmodel import SQLModel, Field, Relationship, Column
from sqlalchemy import ForeignKey, Integer, String, Text

if TYPE_CHECKING:
    from .conversation import Conversation


class MessageRole(str, Enum):
    """Message sender role"""
    USER = "user"
    ASSISTANT = "assistant"


class Message(SQLModel, table=True):
    """
    Individual chat message (user or assistant).

    Ordered within a conversation by (created_at, id); the autoincrement
    id keeps the order strict when two messages share a timestamp.
    """
    __tablename__ = "messages"

    id: Optional[int] = Field(default=None, primary_key=True)
    conversation_id: int = Field(
        sa_column=Column(
            Integer,
            ForeignKey("conversations.id", ondelete="CASCADE"),
            index=True,
            nullable=False,
        )
    )
    role: str = Field(sa_column=Column(String(16), nullable=False))  # Store enum value as string
    content: str = Field(sa_column=Column(Text, nullable=False))
    created_at: datetime = Field(default_factory=datetime.utcnow, index=True)

    conversation: Optional["Conversation"] = Relationship(
        back_populates="messages",
        sa_relationship_kwargs={"lazy": "select"}
    )
