"""
Main Orchestrator Agent

Coordinates the cloud subagent and the local skills to answer a user
message as a stream of events, then persists the outcome: the assistant
message, any project files it contains and the updated project context.

Event sequences on the wire are one of:
    chunk* done      reply streamed and persisted
    fallback         no cloud backend; the client generates locally
    chunk* error     cloud failed after chunks were sent
"""

import json
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

from sqlmodel import Session

from codeai.agents.skills.context_extraction import extract_project_context
from codeai.agents.skills.response_parsing import extract_files_from_response
from codeai.agents.skills.template_selection import format_local_response
from codeai.agents.subagents.cohere_ai_subagent import CloudGenerationError, CohereAISubagent
from codeai.models.message import MessageRole
from codeai.services.conversation_service import ConversationService, context_lock
from codeai.services.project_file_service import ProjectFileService
from codeai.utils.logger import get_logger

logger = get_logger(__name__)

EVENT_TYPES = ("chunk", "fallback", "done", "error")

# Size of the pieces a locally generated reply is streamed in
LOCAL_CHUNK_SIZE = 64

INTERRUPTED_MESSAGE = "The response was interrupted. Please try again."


@dataclass
class StreamEvent:
    """One event of a reply stream."""
    type: str
    content: Optional[str] = None
    user_message: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def chunk(cls, content: str) -> "StreamEvent":
        return cls(type="chunk", content=content)

    @classmethod
    def fallback(cls, user_message: str) -> "StreamEvent":
        return cls(type="fallback", user_message=user_message)

    @classmethod
    def done(cls) -> "StreamEvent":
        return cls(type="done")

    @classmethod
    def failed(cls, error: str) -> "StreamEvent":
        return cls(type="error", error=error)

    @property
    def is_terminal(self) -> bool:
        return self.type != "chunk"

    def to_payload(self) -> Dict[str, Any]:
        """
        JSON payload. Carries the type tag plus the untagged field
        (content / useLocalEngine / done / error) older clients look for.
        """
        if self.type == "chunk":
            return {"type": "chunk", "content": self.content}
        if self.type == "fallback":
            return {"type": "fallback", "useLocalEngine": True, "userMessage": self.user_message}
        if self.type == "done":
            return {"type": "done", "done": True}
        return {"type": "error", "error": self.error}

    def to_sse(self) -> str:
        return f"data: {json.dumps(self.to_payload())}\n\n"

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> Optional["StreamEvent"]:
        """Parse a tagged or untagged payload; None if it is neither."""
        if not isinstance(payload, dict):
            return None

        event_type = payload.get("type")
        if event_type not in EVENT_TYPES:
            if payload.get("useLocalEngine"):
                event_type = "fallback"
            elif payload.get("done"):
                event_type = "done"
            elif "error" in payload:
                event_type = "error"
            elif "content" in payload:
                event_type = "chunk"
            else:
                return None

        if event_type == "chunk":
            return cls.chunk(str(payload.get("content") or ""))
        if event_type == "fallback":
            return cls.fallback(str(payload.get("userMessage") or ""))
        if event_type == "done":
            return cls.done()
        return cls.failed(str(payload.get("error") or "Unknown error"))


def split_text(text: str, size: int) -> Iterator[str]:
    for start in range(0, len(text), size):
        yield text[start:start + size]


class CodeChatAgent:
    """
    Main orchestrator agent for code chat

    Responsibilities:
    - Choose the generation backend (cloud or client-side local engine)
    - Degrade to the local template engine when the cloud fails early
    - Persist the assistant reply, project files and project context
    """

    def __init__(self, session_factory: Callable[[], Session], cloud_backend: CohereAISubagent):
        """
        Args:
            session_factory: Opens fresh sessions; streams outlive request sessions
            cloud_backend: Cohere subagent (or a stand-in with the same interface)
        """
        self.session_factory = session_factory
        self.cloud = cloud_backend

    def record_user_message(self, conversation_id: int, content: str) -> bool:
        """Persist the user message; False if the conversation does not exist."""
        with self.session_factory() as db:
            service = ConversationService(db)
            if service.get_conversation(conversation_id) is None:
                return False
            service.add_message(conversation_id, MessageRole.USER, content)
        return True

    def _history(self, conversation_id: int) -> List[Tuple[str, str]]:
        """Earlier messages as (role, content), excluding the latest user message."""
        with self.session_factory() as db:
            messages = ConversationService(db).get_messages(conversation_id)
        if messages and messages[-1].role == MessageRole.USER.value:
            messages = messages[:-1]
        return [(m.role, m.content) for m in messages]

    def stream_reply(self, conversation_id: int, user_message: str) -> Iterator[StreamEvent]:
        """
        Produce the reply to a user message that is already persisted.

        Yields StreamEvents; the last one is always terminal.
        """
        if not self.cloud.enabled:
            logger.info("Cloud backend disabled, delegating to local engine", conversation_id=conversation_id)
            yield StreamEvent.fallback(user_message)
            return

        logger.info("Streaming cloud reply", conversation_id=conversation_id)
        parts: List[str] = []
        failed = False
        try:
            history = self._history(conversation_id)
            for text in self.cloud.stream_chat(user_message, history):
                parts.append(text)
                yield StreamEvent.chunk(text)
        except CloudGenerationError as e:
            failed = True
            logger.warning("Cloud stream failed", conversation_id=conversation_id, chunks=len(parts), error=str(e))
        except Exception as e:
            failed = True
            logger.exception("Unexpected error while streaming", conversation_id=conversation_id, chunks=len(parts), error=str(e))

        if failed and parts:
            yield StreamEvent.failed(INTERRUPTED_MESSAGE)
            return
        if failed:
            logger.info("Using local engine after cloud failure", conversation_id=conversation_id)

        if not parts:
            local_reply = format_local_response(user_message)
            for piece in split_text(local_reply, LOCAL_CHUNK_SIZE):
                parts.append(piece)
                yield StreamEvent.chunk(piece)

        full_response = "".join(parts)
        try:
            self.finalize(conversation_id, full_response)
        except Exception as e:
            logger.exception("Failed to persist assistant reply", conversation_id=conversation_id, error=str(e))
            yield StreamEvent.failed("Failed to save the response")
            return

        yield StreamEvent.done()

    def finalize(self, conversation_id: int, full_response: str) -> None:
        """Persist the reply, upsert its project files and merge project context."""
        with self.session_factory() as db:
            ConversationService(db).add_message(conversation_id, MessageRole.ASSISTANT, full_response)

            files = extract_files_from_response(full_response)
            if files:
                ProjectFileService(db).bulk_upsert(conversation_id, files)
                logger.info("Saved project files", conversation_id=conversation_id, count=len(files))

            self.apply_extracted_context(db, conversation_id, full_response)

        logger.info("Reply persisted", conversation_id=conversation_id, length=len(full_response))

    def apply_extracted_context(self, db: Session, conversation_id: int, latest_response: str):
        """Extract and merge project context while holding the conversation's lock."""
        service = ConversationService(db)
        with context_lock(conversation_id):
            conversation = service.get_conversation(conversation_id)
            if conversation is None:
                return None
            db.refresh(conversation)

            patch = extract_project_context(
                service.conversation_text(conversation_id),
                latest_response,
                conversation,
            )
            if patch.is_empty():
                return conversation
            return service.merge_project_context(conversation_id, patch.to_dict())


def create_code_chat_agent(session_factory: Callable[[], Session], cloud_backend: CohereAISubagent) -> CodeChatAgent:
    """Factory function to create a CodeChatAgent"""
    return CodeChatAgent(session_factory, cloud_backend)
