"""Client-side conversation cache."""
import itertools
from datetime import datetime
from typing import Any, Dict, List, Optional

# Cache-only messages get negative ids so they never clash with server ids
_local_ids = itertools.count(-1, -1)


class ConversationCache:
    """
    Conversations as returned by the API (camelCase dicts), plus messages
    added locally and the reply currently being streamed.

    Local-engine replies live only here; the server stores just the user
    message in local mode.
    """

    def __init__(self):
        self._conversations: Dict[int, Dict[str, Any]] = {}
        self._summaries: List[Dict[str, Any]] = []
        self._streaming: Dict[int, str] = {}

    def set_conversation_list(self, conversations: List[Dict[str, Any]]) -> None:
        self._summaries = list(conversations)

    def conversation_list(self) -> List[Dict[str, Any]]:
        return list(self._summaries)

    def set_conversation(self, conversation: Dict[str, Any]) -> None:
        conversation = dict(conversation)
        conversation["messages"] = list(conversation.get("messages") or [])
        self._conversations[conversation["id"]] = conversation

    def get(self, conversation_id: int) -> Optional[Dict[str, Any]]:
        return self._conversations.get(conversation_id)

    def update_context(self, conversation_id: int, conversation: Dict[str, Any]) -> None:
        """Take context fields from a server response, keeping cached messages."""
        cached = self._conversations.get(conversation_id)
        if cached is None:
            return
        cached.update({k: v for k, v in conversation.items() if k != "messages"})

    def append_message(self, conversation_id: int, role: str, content: str) -> Optional[Dict[str, Any]]:
        cached = self._conversations.get(conversation_id)
        if cached is None:
            return None
        message = {
            "id": next(_local_ids),
            "conversationId": conversation_id,
            "role": role,
            "content": content,
            "createdAt": datetime.utcnow().isoformat(),
        }
        cached["messages"].append(message)
        return message

    def messages(self, conversation_id: int) -> List[Dict[str, Any]]:
        cached = self._conversations.get(conversation_id)
        return list(cached["messages"]) if cached else []

    def set_streaming(self, conversation_id: int, content: Optional[str]) -> None:
        """Set or clear the in-progress assistant reply."""
        if content is None:
            self._streaming.pop(conversation_id, None)
        else:
            self._streaming[conversation_id] = content

    def streaming(self, conversation_id: int) -> Optional[str]:
        return self._streaming.get(conversation_id)

    def display_messages(self, conversation_id: int) -> List[Dict[str, Any]]:
        """Messages to render; the in-progress reply, if any, comes last."""
        messages = self.messages(conversation_id)
        content = self._streaming.get(conversation_id)
        if content is not None:
            messages.append({
                "id": None,
                "conversationId": conversation_id,
                "role": "assistant",
                "content": content,
                "streaming": True,
            })
        return messages

    def invalidate(self, conversation_id: Optional[int] = None) -> None:
        """Drop one conversation, or everything when no id is given."""
        if conversation_id is None:
            self._conversations.clear()
            self._streaming.clear()
            self._summaries = []
            return
        self._conversations.pop(conversation_id, None)
        self._streaming.pop(conversation_id, None)
        self._summaries = [c for c in self._summaries if c.get("id") != conversation_id]
