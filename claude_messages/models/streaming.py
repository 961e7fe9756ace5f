"""Stream chunk models for the SSE format.

These models define the Server-Sent Events emitted by a streaming
Messages API response. Each chunk is tagged by its ``type`` field, which
also appears as the SSE ``event:`` name.

Only complete lines or event blocks are parsed here; reading the HTTP
stream and buffering partial frames is left to the caller's client.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from enum import StrEnum
from typing import Annotated, Literal

from pydantic import Field, TypeAdapter

from ..core.exceptions import DecodeError, StreamEventMismatchError
from .base import WireData, WireModel, decode
from .common import StopReason
from .content import TextContentBlock, TextDeltaContentBlock
from .errors import ErrorDetail
from .responses import MessagesResponseBody


class StreamChunkType(StrEnum):
    """Event types of a streaming response."""

    MESSAGE_START = "message_start"
    CONTENT_BLOCK_START = "content_block_start"
    PING = "ping"
    CONTENT_BLOCK_DELTA = "content_block_delta"
    CONTENT_BLOCK_STOP = "content_block_stop"
    MESSAGE_DELTA = "message_delta"
    MESSAGE_STOP = "message_stop"
    ERROR = "error"


class _Chunk(WireModel):
    type: str

    @property
    def chunk_type(self) -> StreamChunkType:
        return StreamChunkType(self.type)


class MessageStartChunk(_Chunk):
    """Sent first, with an empty message whose ``stop_reason`` is null."""

    type: Literal["message_start"] = "message_start"
    message: MessagesResponseBody


class ContentBlockStartChunk(_Chunk):
    """Sent at the start of a content block."""

    type: Literal["content_block_start"] = "content_block_start"
    index: int = Field(ge=0, strict=True)
    content_block: TextContentBlock


class PingChunk(_Chunk):
    """Keepalive ping."""

    type: Literal["ping"] = "ping"


class ContentBlockDeltaChunk(_Chunk):
    """Carries the next piece of text for the block at ``index``."""

    type: Literal["content_block_delta"] = "content_block_delta"
    index: int = Field(ge=0, strict=True)
    delta: TextDeltaContentBlock


class ContentBlockStopChunk(_Chunk):
    """Sent at the end of a content block."""

    type: Literal["content_block_stop"] = "content_block_stop"
    index: int = Field(ge=0, strict=True)


class StreamStop(WireModel):
    """Top-level message changes reported by ``message_delta``."""

    stop_reason: StopReason | None = None
    stop_sequence: str | None = None


class DeltaUsage(WireModel):
    """Cumulative output token count reported by ``message_delta``."""

    output_tokens: int = Field(ge=0, strict=True)


class MessageDeltaChunk(_Chunk):
    """Sent with the stop reason and final usage."""

    type: Literal["message_delta"] = "message_delta"
    delta: StreamStop
    usage: DeltaUsage


class MessageStopChunk(_Chunk):
    """Sent last."""

    type: Literal["message_stop"] = "message_stop"


class ErrorChunk(_Chunk):
    """Error reported in the middle of a stream, e.g. ``overloaded_error``."""

    type: Literal["error"] = "error"
    error: ErrorDetail


StreamChunk = Annotated[
    MessageStartChunk
    | ContentBlockStartChunk
    | PingChunk
    | ContentBlockDeltaChunk
    | ContentBlockStopChunk
    | MessageDeltaChunk
    | MessageStopChunk
    | ErrorChunk,
    Field(discriminator="type"),
]

_stream_chunk_adapter: TypeAdapter[StreamChunk] = TypeAdapter(StreamChunk)

_EVENT_SEPARATOR = re.compile(r"\r?\n\r?\n")


def parse_stream_chunk(data: WireData) -> StreamChunk:
    """Decode one stream chunk, selecting the variant by its ``type``.

    Raises:
        DecodeError: On an unknown ``type`` or a malformed payload.
    """
    return decode(_stream_chunk_adapter, data, "StreamChunk")


def _split_field(line: str) -> tuple[str, str]:
    name, _, value = line.rstrip("\r\n").partition(":")
    if value.startswith(" "):
        value = value[1:]
    return name, value


def parse_sse_line(line: str) -> StreamChunk | None:
    """Decode a single ``data:`` line.

    Returns:
        The chunk, or None for ``event:`` lines, comments and blank lines.
    """
    name, value = _split_field(line)
    if name != "data":
        return None
    return parse_stream_chunk(value)


def _read_event(block: str) -> tuple[str | None, list[str]]:
    event: str | None = None
    data: list[str] = []
    for line in block.splitlines():
        if not line or line.startswith(":"):
            continue
        name, value = _split_field(line)
        if name == "event":
            event = value
        elif name == "data":
            data.append(value)
    return event, data


def _decode_event(event: str | None, data: list[str]) -> StreamChunk:
    chunk = parse_stream_chunk("\n".join(data))
    if event is not None and event != chunk.type:
        raise StreamEventMismatchError(
            f"SSE event {event!r} carries a {chunk.type!r} payload",
            target="StreamChunk",
        )
    return chunk


def parse_sse_event(text: str) -> StreamChunk:
    """Decode one complete SSE event block (``event:`` and ``data:`` lines).

    Raises:
        DecodeError: If the block has no ``data:`` line or the payload is invalid.
        StreamEventMismatchError: If the ``event:`` name disagrees with the payload.
    """
    event, data = _read_event(text)
    if not data:
        raise DecodeError("SSE event has no data line", target="StreamChunk")
    return _decode_event(event, data)


def iter_sse_events(text: str) -> Iterator[StreamChunk]:
    """Yield the chunks of a complete SSE dump, skipping blocks without data."""
    for block in _EVENT_SEPARATOR.split(text):
        event, data = _read_event(block)
        if data:
            yield _decode_event(event, data)


def to_sse_event(chunk: StreamChunk) -> dict[str, str]:
    """Build the ``{"event", "data"}`` pair used by SSE response writers."""
    return {"event": chunk.type, "data": chunk.to_json()}


def format_sse(chunk: StreamChunk) -> str:
    """Render a chunk as SSE wire text."""
    event = to_sse_event(chunk)
    return f"event: {event['event']}\ndata: {event['data']}\n\n"
