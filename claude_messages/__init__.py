"""claude_messages - typed data model for the Anthropic Messages API.

Request/response bodies, content blocks and streaming chunks as pydantic
models that encode to and decode from the API's wire JSON.

Subpackages:
- models: Pydantic data models (requests, responses, content, streaming, errors)
- core: Shared infrastructure (config, structured logging, exceptions)
"""

__version__ = "0.1.0"

# Re-export commonly used items for convenience
from .core import (
    ClaudeMessagesError,
    DecodeError,
    MessagesApiError,
)

from .models import (
    ClaudeModel,
    ContentBlock,
    ErrorResponse,
    Message,
    MessagesRequestBody,
    MessagesResponseBody,
    Role,
    StopReason,
    StreamChunk,
    parse_content_block,
    parse_stream_chunk,
)

__all__ = [
    "__version__",
    # Exceptions
    "ClaudeMessagesError",
    "DecodeError",
    "MessagesApiError",
    # Models
    "ClaudeModel",
    "ContentBlock",
    "ErrorResponse",
    "Message",
    "MessagesRequestBody",
    "MessagesResponseBody",
    "Role",
    "StopReason",
    "StreamChunk",
    "parse_content_block",
    "parse_stream_chunk",
]
