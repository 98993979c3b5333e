"""
Chat Client

Async HTTP client for the CodeAI API. Sending a message reads the SSE reply
stream; when the server delegates to the local engine, or the stream
fails, the reply is generated locally and revealed with simulated
streaming, then the project context and files are saved back.
"""

import logging
from typing import Any, Callable, Dict, Iterable, List, Optional

import httpx
from pydantic.alias_generators import to_camel

from codeai.agents.skills.context_extraction import extract_project_context
from codeai.agents.skills.response_parsing import extract_files_from_response
from codeai.agents.skills.template_selection import format_local_response
from codeai.client.cache import ConversationCache
from codeai.client.sse import aiter_sse_events
from codeai.client.streaming import CancelToken, simulate_stream
from codeai.config import API_URL

logger = logging.getLogger(__name__)

NEW_CONVERSATION_TITLE_LENGTH = 50


class StreamInterrupted(Exception):
    """The reply stream reported an error or ended without finishing."""


class ChatClient:
    """Client for conversations, files and streamed replies."""

    def __init__(
        self,
        base_url: str = API_URL,
        http_client: Optional[httpx.AsyncClient] = None,
        cache: Optional[ConversationCache] = None,
        chunk_size: int = 5,
        interval: float = 0.005,
    ):
        self.http = http_client or httpx.AsyncClient(base_url=base_url, timeout=httpx.Timeout(30.0, read=None))
        self.cache = cache or ConversationCache()
        self.chunk_size = chunk_size
        self.interval = interval
        self.ai_mode: Optional[str] = None

    async def __aenter__(self) -> "ChatClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.http.aclose()

    async def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        response = await self.http.request(method, url, **kwargs)
        response.raise_for_status()
        return response

    # Conversations

    async def health(self) -> Dict[str, Any]:
        data = (await self._request("GET", "/health")).json()
        self.ai_mode = data.get("aiMode")
        return data

    async def list_conversations(self) -> List[Dict[str, Any]]:
        conversations = (await self._request("GET", "/conversations")).json()
        self.cache.set_conversation_list(conversations)
        return conversations

    async def get_conversation(self, conversation_id: int) -> Dict[str, Any]:
        conversation = (await self._request("GET", f"/conversations/{conversation_id}")).json()
        self.cache.set_conversation(conversation)
        return conversation

    async def create_conversation(self, title: Optional[str] = None) -> Dict[str, Any]:
        body = {"title": title} if title else {}
        conversation = (await self._request("POST", "/conversations", json=body)).json()
        self.cache.set_conversation({**conversation, "messages": []})
        return conversation

    async def delete_conversation(self, conversation_id: int) -> None:
        await self._request("DELETE", f"/conversations/{conversation_id}")
        self.cache.invalidate(conversation_id)

    async def update_context(self, conversation_id: int, context: Dict[str, Any]) -> Dict[str, Any]:
        body = {to_camel(key): value for key, value in context.items() if value is not None}
        conversation = (await self._request("PUT", f"/conversations/{conversation_id}/context", json=body)).json()
        self.cache.update_context(conversation_id, conversation)
        return conversation

    # Files

    async def list_files(self, conversation_id: int) -> List[Dict[str, Any]]:
        return (await self._request("GET", f"/conversations/{conversation_id}/files")).json()

    async def save_file(self, conversation_id: int, path: str, content: str, language: str) -> Dict[str, Any]:
        body = {"path": path, "content": content, "language": language}
        return (await self._request("POST", f"/conversations/{conversation_id}/files", json=body)).json()

    async def save_files(self, conversation_id: int, files: Iterable[Any]) -> List[Dict[str, Any]]:
        """Bulk upsert; accepts ParsedFiles or dicts with path/content/language."""
        entries = []
        for f in files:
            if isinstance(f, dict):
                entries.append({k: f.get(k) for k in ("path", "content", "language")})
            else:
                entries.append({"path": f.path, "content": f.content, "language": f.language})
        response = await self._request("POST", f"/conversations/{conversation_id}/files/bulk", json={"files": entries})
        return response.json()

    async def update_file(self, file_id: int, content: str) -> Dict[str, Any]:
        return (await self._request("PUT", f"/files/{file_id}", json={"content": content})).json()

    async def delete_file(self, file_id: int) -> None:
        await self._request("DELETE", f"/files/{file_id}")

    async def preview(self, conversation_id: int) -> Optional[str]:
        """Combined HTML preview, or None when the project has no HTML file."""
        response = await self.http.get(f"/conversations/{conversation_id}/preview")
        if response.status_code == 404:
            return None
        response.raise_for_status()
        return response.text

    # Messages

    async def start_conversation(
        self,
        content: str,
        on_update: Optional[Callable[[str], None]] = None,
        cancel_token: Optional[CancelToken] = None,
    ) -> Dict[str, Any]:
        """Create a conversation titled after the first message and send it."""
        conversation = await self.create_conversation(content[:NEW_CONVERSATION_TITLE_LENGTH])
        await self.send_message(conversation["id"], content, on_update, cancel_token)
        return self.cache.get(conversation["id"]) or conversation

    async def send_message(
        self,
        conversation_id: int,
        content: str,
        on_update: Optional[Callable[[str], None]] = None,
        cancel_token: Optional[CancelToken] = None,
    ) -> str:
        """
        Send a message and return the full assistant reply.

        on_update receives the visible reply text as it grows. Transport
        errors, error events and truncated streams all fall back to the
        local engine, so this only raises if the request itself cannot be
        built.
        """
        if self.cache.get(conversation_id) is None:
            # Local replies extract against the stored context and history
            try:
                await self.get_conversation(conversation_id)
            except httpx.HTTPError as e:
                logger.warning(f"Could not load conversation {conversation_id}: {str(e)}")
                self.cache.set_conversation({"id": conversation_id, "messages": []})
        self.cache.append_message(conversation_id, "user", content)

        def update(text: str) -> None:
            self.cache.set_streaming(conversation_id, text)
            if on_update:
                on_update(text)

        full_content = ""
        try:
            async with self.http.stream(
                "POST",
                f"/conversations/{conversation_id}/messages",
                json={"content": content},
            ) as response:
                response.raise_for_status()
                async for event in aiter_sse_events(response.aiter_lines()):
                    if event.type == "fallback":
                        self.ai_mode = "local"
                        return await self._reply_locally(
                            conversation_id, event.user_message or content, update, cancel_token
                        )
                    if event.type == "chunk":
                        full_content += event.content or ""
                        update(full_content)
                    elif event.type == "done":
                        self.cache.set_streaming(conversation_id, None)
                        await self._reload(conversation_id, full_content)
                        return full_content
                    elif event.type == "error":
                        raise StreamInterrupted(event.error)
            raise StreamInterrupted("Stream ended before the reply finished")
        except (httpx.HTTPError, StreamInterrupted) as e:
            logger.warning(f"Streaming failed for conversation {conversation_id}, using local engine: {str(e)}")
            self.ai_mode = "local"
            return await self._reply_locally(conversation_id, content, update, cancel_token, simulate=False)

    async def _reload(self, conversation_id: int, reply: str) -> None:
        """Refresh from the server after a persisted reply; keep the reply cached if that fails."""
        try:
            await self.get_conversation(conversation_id)
        except httpx.HTTPError as e:
            logger.warning(f"Could not reload conversation {conversation_id}: {str(e)}")
            self.cache.append_message(conversation_id, "assistant", reply)

    async def _reply_locally(
        self,
        conversation_id: int,
        user_message: str,
        update: Callable[[str], None],
        cancel_token: Optional[CancelToken],
        simulate: bool = True,
    ) -> str:
        reply = format_local_response(user_message)
        if simulate:
            await simulate_stream(reply, update, self.chunk_size, self.interval, cancel_token)
        else:
            update(reply)

        self.cache.set_streaming(conversation_id, None)
        self.cache.append_message(conversation_id, "assistant", reply)
        await self._remember(conversation_id, reply)
        return reply

    async def _remember(self, conversation_id: int, reply: str) -> None:
        """Save context and project files for a locally generated reply."""
        conversation = self.cache.get(conversation_id) or {}
        all_content = "\n".join(m["content"] for m in self.cache.messages(conversation_id))
        patch = extract_project_context(all_content, reply, conversation)
        files = extract_files_from_response(reply)
        try:
            if not patch.is_empty():
                await self.update_context(conversation_id, patch.to_dict())
            if files:
                await self.save_files(conversation_id, files)
        except httpx.HTTPError as e:
            logger.warning(f"Could not save project memory for conversation {conversation_id}: {str(e)}")
