"""Shared base class and decoding helpers for wire models.

Every struct in the Messages API schema derives from ``WireModel`` which
adds JSON encode/decode helpers and a pretty-printed ``str()`` rendering.
"""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping
from typing import Any, ClassVar, Self, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic_settings import SettingsError

from ..core.config import DisplayConfig, settings
from ..core.exceptions import DecodeError

logger = logging.getLogger(__name__)

T = TypeVar("T")

WireData = str | bytes | bytearray | Mapping[str, Any]


def decode_error(exc: ValidationError, target: str) -> DecodeError:
    """Build a one-line ``DecodeError`` from a pydantic ``ValidationError``."""
    errors = exc.errors(include_url=False)
    first = errors[0] if errors else {"loc": (), "msg": str(exc)}
    location = ".".join(str(part) for part in first["loc"])
    message = f"invalid {target}"
    if location:
        message += f" at {location}"
    message += f": {first['msg']}"
    if len(errors) > 1:
        message += f" (+{len(errors) - 1} more)"

    logger.debug("decode_failed target=%s error=%s", target, message)
    return DecodeError(message, target=target, errors=errors)


def _display_indent() -> int:
    """Configured pretty-print indent, or the default if settings cannot load."""
    try:
        return settings().display.indent
    except (tomllib.TOMLDecodeError, ValidationError, SettingsError, OSError) as exc:
        logger.warning("Ignoring unreadable settings for display: %s", exc)
        return DisplayConfig().indent


def decode(adapter: TypeAdapter[T], data: Any, target: str) -> T:
    """Decode JSON text, bytes or an already-parsed value via ``adapter``.

    Raises:
        DecodeError: If the data does not match the target shape.
    """
    try:
        if isinstance(data, (str, bytes, bytearray)):
            return adapter.validate_json(data)
        return adapter.validate_python(data)
    except ValidationError as exc:
        raise decode_error(exc, target) from exc


class WireModel(BaseModel):
    """Base for all Messages API structs.

    ``omit_none`` controls whether ``None`` fields are dropped from the
    encoded JSON (request parameters) or written as ``null`` (responses).
    """

    omit_none: ClassVar[bool] = False

    def to_dict(self) -> dict[str, Any]:
        """Encode into a JSON-compatible dict."""
        return self.model_dump(mode="json", exclude_none=self.omit_none)

    def to_json(self, indent: int | None = None) -> str:
        """Encode into JSON text, compact unless ``indent`` is given."""
        return self.model_dump_json(indent=indent, exclude_none=self.omit_none)

    @classmethod
    def from_json(cls, data: str | bytes | bytearray) -> Self:
        """Decode from JSON text.

        Raises:
            DecodeError: If the JSON does not match this type.
        """
        try:
            return cls.model_validate_json(data)
        except ValidationError as exc:
            raise decode_error(exc, cls.__name__) from exc

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        """Decode from an already-parsed JSON object.

        Raises:
            DecodeError: If the object does not match this type.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise decode_error(exc, cls.__name__) from exc

    def __str__(self) -> str:
        return self.to_json(indent=_display_indent())
