"""Tests for claude_messages models and configuration."""

import json

import pytest
from pydantic import ValidationError

from claude_messages.core import Settings
from claude_messages.models import (
    ClaudeModel,
    Message,
    MessagesRequestBody,
    MessagesResponseBody,
    StopReason,
    TextContentBlock,
    Usage,
)


class TestModels:
    """Test Pydantic models match the Messages API schema."""

    def test_simple_message_request(self):
        """Test basic message request construction."""
        request = MessagesRequestBody(
            model=ClaudeModel.CLAUDE_3_OPUS_20240229,
            max_tokens=1024,
            messages=[Message.user("Hello!")],
        )
        assert request.model == "claude-3-opus-20240229"
        assert request.max_tokens == 1024
        assert len(request.messages) == 1
        assert request.messages[0].role == "user"
        assert request.messages[0].content == "Hello!"

    def test_message_with_content_blocks(self):
        """Test message with content block array."""
        request = MessagesRequestBody(
            messages=[
                Message.user(
                    [
                        TextContentBlock(text="Part 1"),
                        TextContentBlock(text="Part 2"),
                    ]
                )
            ]
        )
        assert len(request.messages[0].content) == 2

    def test_message_with_system_prompt(self):
        """Test request with system prompt."""
        request = MessagesRequestBody(
            system="You are a helpful assistant",
            messages=[Message.user("Hi")],
        )
        assert request.system == "You are a helpful assistant"

    def test_request_defaults(self):
        """Test default model and max_tokens."""
        request = MessagesRequestBody(messages=[Message.user("Hi")])
        assert request.model is ClaudeModel.CLAUDE_3_SONNET_20240229
        assert request.max_tokens == 4096
        assert request.stream is None

    def test_request_rejects_out_of_range_temperature(self):
        """Test temperature bounds."""
        with pytest.raises(ValidationError):
            MessagesRequestBody(messages=[Message.user("Hi")], temperature=1.5)

    def test_response_structure(self):
        """Test response model structure."""
        response = MessagesResponseBody(
            id="msg_test123",
            content=[TextContentBlock(text="Hello!")],
            model=ClaudeModel.CLAUDE_3_HAIKU_20240307,
            stop_reason=StopReason.END_TURN,
            usage=Usage(input_tokens=10, output_tokens=5),
        )
        assert response.id == "msg_test123"
        assert response.type == "message"
        assert response.role == "assistant"
        assert len(response.content) == 1
        assert response.content[0].text == "Hello!"
        assert response.stop_reason == "end_turn"
        assert response.usage.input_tokens == 10
        assert response.usage.output_tokens == 5

    def test_response_round_trip(self, simple_response):
        """Test decode then encode reproduces the wire JSON."""
        response = MessagesResponseBody.from_dict(simple_response)
        assert json.loads(response.to_json()) == simple_response
        assert MessagesResponseBody.from_json(response.to_json()) == response


class TestConfig:
    """Test configuration loading."""

    def test_default_settings(self):
        """Test default configuration values."""
        settings = Settings()
        assert settings.indent == 2
        assert settings.log_level == "info"
        assert settings.logging.json_format is False
