"""Sample request data for testing."""


# Simple text request
SIMPLE_MESSAGE_REQUEST = {
    "model": "claude-3-opus-20240229",
    "messages": [{"role": "user", "content": "Hello, Claude!"}],
    "max_tokens": 1024,
}

# Every optional parameter set
FULL_REQUEST = {
    "model": "claude-3-5-sonnet-20240620",
    "messages": [{"role": "user", "content": "Tell me a story"}],
    "system": "You are a helpful assistant.",
    "max_tokens": 8192,
    "metadata": {"user_id": "13803d75-b4b5-4c3e-b2a2-6f21399b021b"},
    "stop_sequences": ["\n\nHuman:"],
    "stream": True,
    "temperature": 0.5,
    "top_p": 0.9,
    "top_k": 40,
}

# Multi-turn conversation
CONVERSATION_REQUEST = {
    "model": "claude-3-haiku-20240307",
    "messages": [
        {"role": "user", "content": "Hello!"},
        {"role": "assistant", "content": "Hi there! How can I help you?"},
        {"role": "user", "content": "What's 2+2?"},
    ],
    "max_tokens": 256,
}

# Request with content blocks (multimodal)
CONTENT_BLOCKS_REQUEST = {
    "model": "claude-3-sonnet-20240229",
    "messages": [
        {
            "role": "user",
            "content": [
                {
                    "type": "image",
                    "source": {
                        "type": "base64",
                        "media_type": "image/png",
                        "data": "iVBORw0KGgo=",
                    },
                },
                {"type": "text", "text": "What's in this image?"},
            ],
        }
    ],
    "max_tokens": 1024,
}
