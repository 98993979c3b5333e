"""
Cohere AI Subagent

Streams code-generation replies from Cohere's chat models. When no API key
is configured the subagent is disabled and the local template engine
answers instead; that is a normal mode, not an error.
"""

import logging
from typing import Iterator, List, Optional, Sequence, Tuple

import cohere

from codeai.config import (
    COHERE_API_KEY,
    COHERE_MAX_TOKENS,
    COHERE_MODEL,
    COHERE_TEMPERATURE,
)

logger = logging.getLogger(__name__)

SYSTEM_PREAMBLE = """You are CodeAI, a frontend architect who builds polished, interactive web experiences.

## Project memory
This conversation is one project. Remember its name, purpose, audience and the features already built.
Keep branding, colors and typography consistent across every answer.

## Output
- Start with a one or two sentence acknowledgment.
- Then give ONE complete, self-contained HTML file in a ```html block with all CSS in <style> and all JS in <script>.
- For multi-file projects, prefix each file with a line of the form: --- FILE: path/to/file.ext ---
- Finish with a short note on the interactive features and one or two ideas for what to add next.

## Quality bar
- Every button and card has a hover state; entrance animations on load; smooth 0.3s transitions.
- Colors live in CSS variables.
- Terminal-style UIs use a typing animation with a blinking cursor.
- Status indicators pulse.

Keep explanations short and let the code speak."""

HISTORY_ROLES = {"user": "USER", "assistant": "CHATBOT"}


class CloudGenerationError(Exception):
    """Raised when the cloud backend fails to produce a reply."""


class CohereAISubagent:
    """
    Subagent wrapping the Cohere chat API.

    Responsibilities:
    - Translate conversation history into Cohere's chat format
    - Stream text deltas back to the message pipeline
    - Report failures as CloudGenerationError so callers can fall back
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = COHERE_MODEL,
        temperature: float = COHERE_TEMPERATURE,
        max_tokens: int = COHERE_MAX_TOKENS,
    ):
        """Initialize Cohere client with API key from environment"""
        self.api_key = api_key if api_key is not None else COHERE_API_KEY
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens

        if self.api_key:
            self.client = cohere.Client(api_key=self.api_key)
            self.enabled = True
            logger.info(f"Cohere AI subagent initialized with model: {self.model}")
        else:
            self.client = None
            self.enabled = False
            logger.warning("Cohere AI subagent disabled - COHERE_API_KEY not set, using local template engine")

    @property
    def ai_mode(self) -> str:
        return "cloud" if self.enabled else "local"

    def build_chat_history(self, history: Sequence[Tuple[str, str]]) -> List[dict]:
        """Convert (role, content) pairs into Cohere chat_history entries."""
        return [
            {"role": HISTORY_ROLES.get(role, "USER"), "message": content}
            for role, content in history
            if content
        ]

    def stream_chat(self, message: str, history: Sequence[Tuple[str, str]] = ()) -> Iterator[str]:
        """
        Stream reply text for the latest user message.

        Args:
            message: Latest user message
            history: Earlier (role, content) pairs, oldest first

        Yields:
            Non-empty text deltas in order
        """
        if not self.enabled:
            raise CloudGenerationError("Cohere backend is not configured")

        try:
            stream = self.client.chat_stream(
                model=self.model,
                message=message,
                chat_history=self.build_chat_history(history),
                preamble=SYSTEM_PREAMBLE,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
            for event in stream:
                if getattr(event, "event_type", None) == "text-generation" and event.text:
                    yield event.text
        except Exception as e:
            logger.error(f"Error in Cohere AI streaming: {str(e)}")

            # Check if it's a model deprecation error
            error_str = str(e).lower()
            if "model" in error_str and ("removed" in error_str or "deprecated" in error_str):
                logger.warning(f"Cohere model {self.model} is deprecated. Please update your configuration.")

            raise CloudGenerationError(str(e)) from e


# Global instance
cohere_ai_subagent = CohereAISubagent()


def get_cloud_backend() -> CohereAISubagent:
    """Dependency returning the active cloud backend."""
    return cohere_ai_subagent
