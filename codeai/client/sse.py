"""Server-sent event parsing for reply streams."""
import json
import logging
from typing import AsyncIterable, AsyncIterator, Iterable, Iterator, Optional

from codeai.agents.main_agent import StreamEvent

logger = logging.getLogger(__name__)

DATA_PREFIX = "data: "


def parse_sse_line(line: str) -> Optional[StreamEvent]:
    """A StreamEvent for a `data: ` line; None for anything else."""
    if not line.startswith(DATA_PREFIX):
        return None
    try:
        payload = json.loads(line[len(DATA_PREFIX):])
    except json.JSONDecodeError:
        logger.debug(f"Skipping malformed event line: {line[:80]}")
        return None
    return StreamEvent.from_payload(payload)


def iter_sse_events(lines: Iterable[str]) -> Iterator[StreamEvent]:
    for line in lines:
        event = parse_sse_line(line)
        if event is not None:
            yield event


async def aiter_sse_events(lines: AsyncIterable[str]) -> AsyncIterator[StreamEvent]:
    async for line in lines:
        event = parse_sse_line(line)
        if event is not None:
            yield event
