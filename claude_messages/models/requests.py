"""Request models matching the Messages API schema.

Optional parameters left as ``None`` are omitted from the encoded body.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field, model_validator

from .base import WireModel
from .common import ClaudeModel, Role
from .content import Content, flatten_into_text


class Message(WireModel):
    """A message in the conversation."""

    role: Role
    content: Content

    @classmethod
    def user(cls, content: Content) -> Message:
        return cls(role=Role.USER, content=content)

    @classmethod
    def assistant(cls, content: Content) -> Message:
        return cls(role=Role.ASSISTANT, content=content)

    def text(self) -> str:
        """Flattened text of this message's content."""
        return flatten_into_text(self.content)


class Metadata(WireModel):
    """Request metadata.

    ``user_id`` should be an opaque identifier such as a UUID or hash,
    never a name, email address or phone number.
    """

    user_id: str


class MessagesRequestBody(WireModel):
    """Request body for POST /v1/messages."""

    omit_none: ClassVar[bool] = True

    model: ClaudeModel = Field(default_factory=ClaudeModel.default)
    messages: list[Message]
    system: str | None = None
    max_tokens: int = Field(default=4096, ge=1, strict=True)
    metadata: Metadata | None = None
    stop_sequences: list[str] | None = None
    stream: bool | None = Field(default=None, strict=True)
    temperature: float | None = Field(default=None, ge=0.0, le=1.0, strict=True)
    top_p: float | None = Field(default=None, ge=0.0, le=1.0, strict=True)
    top_k: int | None = Field(default=None, ge=0, strict=True)

    @model_validator(mode="after")
    def check_max_tokens(self) -> MessagesRequestBody:
        limit = self.model.max_output_tokens
        if self.max_tokens > limit:
            raise ValueError(
                f"max_tokens {self.max_tokens} exceeds the {limit} token limit of {self.model}"
            )
        return self
