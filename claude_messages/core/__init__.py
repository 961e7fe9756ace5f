"""Core infrastructure for claude_messages.

This package contains shared infrastructure components:
- config: Settings and configuration
- structured_logging: structlog setup
- exceptions: Error hierarchy
"""

from .config import (
    DisplayConfig,
    LoggingConfig,
    Settings,
    get_settings,
    reload_settings,
    settings,
)
from .exceptions import (
    ClaudeMessagesError,
    ContentFlatteningError,
    DecodeError,
    MessagesApiError,
    StreamEventMismatchError,
)
from .structured_logging import (
    bind_context,
    clear_context,
    configure_structured_logging,
    get_logger,
)

__all__ = [
    # Config
    "Settings",
    "DisplayConfig",
    "LoggingConfig",
    "settings",
    "get_settings",
    "reload_settings",
    # Exceptions
    "ClaudeMessagesError",
    "DecodeError",
    "StreamEventMismatchError",
    "ContentFlatteningError",
    "MessagesApiError",
    # Logging
    "configure_structured_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
