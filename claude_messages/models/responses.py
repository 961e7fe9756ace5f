"""Response models matching the Messages API schema."""

from __future__ import annotations

from enum import StrEnum

from .base import WireModel
from .common import ClaudeModel, Role, StopReason, Usage
from .content import Content, flatten_into_text
from .requests import Message


class MessageObjectType(StrEnum):
    """Object type of a Messages API response; always ``message``."""

    MESSAGE = "message"


class MessagesResponseBody(WireModel):
    """Response body for POST /v1/messages.

    In non-streaming mode ``stop_reason`` is always set. In streaming mode it
    is null in the ``message_start`` chunk and reported later through
    ``message_delta``. ``stop_sequence`` is set only when one of the custom
    stop sequences was generated.
    """

    id: str
    type: MessageObjectType = MessageObjectType.MESSAGE
    role: Role = Role.ASSISTANT
    content: Content
    model: ClaudeModel
    stop_reason: StopReason | None = None
    stop_sequence: str | None = None
    usage: Usage

    def text(self) -> str:
        """Flattened text of the generated content."""
        return flatten_into_text(self.content)

    def create_message(self) -> Message:
        """Turn this response into a message to continue the conversation."""
        return Message(role=self.role, content=self.content)
