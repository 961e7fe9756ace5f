"""Pydantic models matching the Messages API schema.

This module re-exports all models for convenient imports:
    from claude_messages.models import MessagesRequestBody, MessagesResponseBody
"""

from .base import WireModel

from .common import (
    ClaudeModel,
    Role,
    StopReason,
    Usage,
)

from .content import (
    Content,
    ContentBlock,
    ContentType,
    ImageContentBlock,
    ImageContentSource,
    ImageMediaType,
    ImageSourceType,
    TextContentBlock,
    TextDeltaContentBlock,
    flatten_into_image_source,
    flatten_into_text,
    parse_content,
    parse_content_block,
)

from .errors import (
    ErrorDetail,
    ErrorResponse,
    ErrorType,
)

from .requests import (
    Message,
    MessagesRequestBody,
    Metadata,
)

from .responses import (
    MessageObjectType,
    MessagesResponseBody,
)

from .streaming import (
    ContentBlockDeltaChunk,
    ContentBlockStartChunk,
    ContentBlockStopChunk,
    DeltaUsage,
    ErrorChunk,
    MessageDeltaChunk,
    MessageStartChunk,
    MessageStopChunk,
    PingChunk,
    StreamChunk,
    StreamChunkType,
    StreamStop,
    format_sse,
    iter_sse_events,
    parse_sse_event,
    parse_sse_line,
    parse_stream_chunk,
    to_sse_event,
)

__all__ = [
    # Base
    "WireModel",
    # Common
    "ClaudeModel",
    "Role",
    "StopReason",
    "Usage",
    # Content
    "Content",
    "ContentBlock",
    "ContentType",
    "ImageContentBlock",
    "ImageContentSource",
    "ImageMediaType",
    "ImageSourceType",
    "TextContentBlock",
    "TextDeltaContentBlock",
    "flatten_into_image_source",
    "flatten_into_text",
    "parse_content",
    "parse_content_block",
    # Errors
    "ErrorDetail",
    "ErrorResponse",
    "ErrorType",
    # Requests
    "Message",
    "MessagesRequestBody",
    "Metadata",
    # Responses
    "MessageObjectType",
    "MessagesResponseBody",
    # Streaming
    "ContentBlockDeltaChunk",
    "ContentBlockStartChunk",
    "ContentBlockStopChunk",
    "DeltaUsage",
    "ErrorChunk",
    "MessageDeltaChunk",
    "MessageStartChunk",
    "MessageStopChunk",
    "PingChunk",
    "StreamChunk",
    "StreamChunkType",
    "StreamStop",
    "format_sse",
    "iter_sse_events",
    "parse_sse_event",
    "parse_sse_line",
    "parse_stream_chunk",
    "to_sse_event",
]
