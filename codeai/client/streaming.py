"""
Simulated streaming of a reply that is already fully available.

Local replies are revealed a few characters at a time so they read like a
streamed cloud reply.
"""

import asyncio
from typing import Callable, Optional


class CancelToken:
    """Cooperative cancellation flag."""

    def __init__(self):
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled


async def simulate_stream(
    text: str,
    on_update: Callable[[str], None],
    chunk_size: int = 5,
    interval: float = 0.005,
    cancel_token: Optional[CancelToken] = None,
) -> bool:
    """
    Reveal text in growing prefixes, chunk_size characters per step.

    on_update receives the whole visible prefix each step. Returns False if
    cancelled before the full text was shown, True otherwise.
    """
    if chunk_size < 1:
        raise ValueError("chunk_size must be positive")

    for end in range(chunk_size, len(text) + chunk_size, chunk_size):
        if cancel_token is not None and cancel_token.cancelled:
            return False
        await asyncio.sleep(interval)
        on_update(text[:end])
    return True
