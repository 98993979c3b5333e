"""
Conversation Service

CRUD operations for conversations and messages, plus the read-merge-write
of a conversation's project context.
"""

import threading
from collections import defaultdict
from datetime import datetime
from typing import Any, List, Mapping, Optional

from sqlmodel import Session, select

from codeai.config import DEFAULT_CONVERSATION_TITLE
from codeai.models.conversation import Conversation
from codeai.models.message import Message, MessageRole

LIST_FIELDS = ("tech_stack", "features_built")
CONTEXT_FIELDS = (
    "project_name",
    "project_description",
    "tech_stack",
    "features_built",
    "project_summary",
    "last_code_generated",
)

# One writer per conversation for context merges
_context_locks = defaultdict(threading.RLock)
_context_locks_guard = threading.Lock()


def context_lock(conversation_id: int):
    with _context_locks_guard:
        return _context_locks[conversation_id]


def _union(existing: Optional[List[str]], incoming: List[str]) -> List[str]:
    merged = list(existing or [])
    for item in incoming:
        if item not in merged:
            merged.append(item)
    return merged


class ConversationService:
    """Service for managing conversations and messages"""

    def __init__(self, db: Session):
        self.db = db

    def create_conversation(self, title: Optional[str] = None) -> Conversation:
        """Create new conversation"""
        conversation = Conversation(
            title=title or DEFAULT_CONVERSATION_TITLE,
            created_at=datetime.utcnow(),
        )
        self.db.add(conversation)
        self.db.commit()
        self.db.refresh(conversation)
        return conversation

    def get_conversation(self, conversation_id: int) -> Optional[Conversation]:
        return self.db.get(Conversation, conversation_id)

    def list_conversations(self) -> List[Conversation]:
        """All conversations, newest first"""
        statement = select(Conversation).order_by(
            Conversation.created_at.desc(), Conversation.id.desc()
        )
        return list(self.db.exec(statement).all())

    def delete_conversation(self, conversation_id: int) -> bool:
        """Delete a conversation with its messages and files"""
        conversation = self.db.get(Conversation, conversation_id)
        if not conversation:
            return False
        self.db.delete(conversation)
        self.db.commit()
        with _context_locks_guard:
            _context_locks.pop(conversation_id, None)
        return True

    def add_message(
        self,
        conversation_id: int,
        role: MessageRole,
        content: str
    ) -> Message:
        """Add message to conversation"""
        message = Message(
            conversation_id=conversation_id,
            role=role.value,  # Use enum value (lowercase string)
            content=content,
            created_at=datetime.utcnow()
        )
        self.db.add(message)
        self.db.commit()
        self.db.refresh(message)
        return message

    def get_messages(self, conversation_id: int) -> List[Message]:
        """Messages for a conversation in insertion order"""
        statement = select(Message).where(
            Message.conversation_id == conversation_id
        ).order_by(Message.id)

        return list(self.db.exec(statement).all())

    def merge_project_context(
        self,
        conversation_id: int,
        patch: Mapping[str, Any],
    ) -> Optional[Conversation]:
        """
        Merge a partial context into the conversation.

        Scalar fields are overwritten when the patch value is not None.
        tech_stack and features_built are unioned in first-seen order, so
        they never shrink. Returns None if the conversation does not exist.
        """
        with context_lock(conversation_id):
            conversation = self.db.get(Conversation, conversation_id)
            if not conversation:
                return None

            # Re-read in case another session changed it since it was loaded
            self.db.refresh(conversation)

            for field_name in CONTEXT_FIELDS:
                value = patch.get(field_name)
                if value is None:
                    continue
                if field_name in LIST_FIELDS:
                    value = _union(getattr(conversation, field_name), value)
                setattr(conversation, field_name, value)

            self.db.add(conversation)
            self.db.commit()
            self.db.refresh(conversation)
            return conversation

    def conversation_text(self, conversation_id: int) -> str:
        """All message contents joined, oldest first"""
        return "\n".join(m.content for m in self.get_messages(conversation_id))
