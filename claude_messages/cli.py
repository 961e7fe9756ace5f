"""Command-line inspector for Messages API payloads.

Decodes a request, response, error, content block, stream chunk or a whole
SSE dump and prints it back in the pretty-printed rendering.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

from . import __version__
from .core import (
    DecodeError,
    bind_context,
    clear_context,
    configure_structured_logging,
    get_logger,
    reload_settings,
    settings,
)
from .models import (
    ErrorResponse,
    MessagesRequestBody,
    MessagesResponseBody,
    WireModel,
    iter_sse_events,
    parse_content_block,
    parse_stream_chunk,
)

DECODERS: dict[str, Callable[[str], Any]] = {
    "request": MessagesRequestBody.from_json,
    "response": MessagesResponseBody.from_json,
    "error": ErrorResponse.from_json,
    "content": parse_content_block,
    "chunk": parse_stream_chunk,
}

KINDS = [*DECODERS, "stream"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="claude-messages",
        description="Decode and pretty-print Anthropic Messages API payloads",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  claude-messages response reply.json        # Validate and pretty-print a response
  claude-messages request --compact body.json
  curl -N ... | claude-messages stream       # Decode every chunk of an SSE dump

Environment variables:
  CLAUDE_MESSAGES_DISPLAY__INDENT       Indent of pretty output (default: 2)
  CLAUDE_MESSAGES_LOGGING__LEVEL        debug, info, warning or error (default: info)
  CLAUDE_MESSAGES_LOGGING__JSON_FORMAT  Emit JSON logs (default: false)
        """,
    )

    parser.add_argument("kind", choices=KINDS, help="What the input contains")
    parser.add_argument(
        "file",
        nargs="?",
        type=argparse.FileType("rb"),
        default=None,
        help="Input file (default: stdin)",
    )
    parser.add_argument(
        "--compact",
        action="store_true",
        help="Print compact JSON instead of the pretty rendering",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="TOML settings file (default: ./claude_messages.toml)",
    )
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        default=None,
        help="Override the configured log level",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Emit JSON-formatted logs on stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"claude-messages {__version__}",
    )
    return parser


def decode_input(kind: str, data: str | bytes) -> list[WireModel]:
    """Decode ``data`` as ``kind``; a stream yields one value per event."""
    if isinstance(data, bytes):
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DecodeError(
                f"input is not valid UTF-8 at byte {exc.start}", target=kind
            ) from exc
    else:
        text = data

    if kind == "stream":
        return list(iter_sse_events(text))
    return [DECODERS[kind](text)]


def main(argv: list[str] | None = None) -> int:
    """Run the inspector. Returns the process exit status."""
    args = build_parser().parse_args(argv)

    config = reload_settings(args.config) if args.config else settings()
    configure_structured_logging(
        log_level=args.log_level or config.log_level,
        json_format=args.json_logs or config.logging.json_format,
    )
    logger = get_logger(__name__)

    if args.file is None:
        source = "<stdin>"
        data = sys.stdin.buffer.read()
    else:
        source = args.file.name
        with args.file:
            data = args.file.read()

    bind_context(kind=args.kind, source=source)
    try:
        values = decode_input(args.kind, data)
    except DecodeError as exc:
        logger.warning("decode_failed", target=exc.target, error=exc.message)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    finally:
        clear_context()

    for value in values:
        print(value.to_json() if args.compact else str(value))

    logger.info("decoded", kind=args.kind, count=len(values))
    return 0
