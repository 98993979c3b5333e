"""SQLModel table definitions."""
from .conversation import Conversation
from .message import Message, MessageRole
from .project_file import ProjectFile

__all__ = ["Conversation", "Message", "MessageRole", "ProjectFile"]
