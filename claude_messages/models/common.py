"""Enumerations and small structs shared by requests, responses and streams."""

from __future__ import annotations

from enum import StrEnum

from pydantic import Field

from .base import WireModel


class Role(StrEnum):
    """Conversational role of a message."""

    USER = "user"
    ASSISTANT = "assistant"


class StopReason(StrEnum):
    """Why the model stopped generating.

    - END_TURN: the model reached a natural stopping point
    - MAX_TOKENS: the requested ``max_tokens`` or the model's maximum was hit
    - STOP_SEQUENCE: one of the custom stop sequences was generated
    """

    END_TURN = "end_turn"
    MAX_TOKENS = "max_tokens"
    STOP_SEQUENCE = "stop_sequence"


class ClaudeModel(StrEnum):
    """Model identifiers accepted by the Messages API."""

    CLAUDE_3_5_SONNET_20240620 = "claude-3-5-sonnet-20240620"
    CLAUDE_3_OPUS_20240229 = "claude-3-opus-20240229"
    CLAUDE_3_SONNET_20240229 = "claude-3-sonnet-20240229"
    CLAUDE_3_HAIKU_20240307 = "claude-3-haiku-20240307"
    CLAUDE_2_1 = "claude-2.1"
    CLAUDE_2_0 = "claude-2.0"
    CLAUDE_INSTANT_1_2 = "claude-instant-1.2"

    @classmethod
    def default(cls) -> ClaudeModel:
        return cls.CLAUDE_3_SONNET_20240229

    @property
    def max_output_tokens(self) -> int:
        """Upper bound for ``max_tokens`` when requesting this model."""
        if self is ClaudeModel.CLAUDE_3_5_SONNET_20240620:
            return 8192
        return 4096


class Usage(WireModel):
    """Billing and rate-limit usage.

    Token counts will not match the visible content one-to-one;
    ``output_tokens`` is non-zero even for an empty response.
    """

    input_tokens: int = Field(ge=0, strict=True)
    output_tokens: int = Field(ge=0, strict=True)
