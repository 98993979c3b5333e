"""
Python client for the CodeAI chat API.

Mirrors the web UI's behavior: reads the reply stream, falls back to the
local template engine, caches conversations and saves project files.
"""

from codeai.client.cache import ConversationCache
from codeai.client.chat_client import ChatClient
from codeai.client.sse import iter_sse_events
from codeai.client.streaming import CancelToken, simulate_stream

__all__ = ["CancelToken", "ChatClient", "ConversationCache", "iter_sse_events", "simulate_stream"]
