"""Content block models for messages.

Content is either a single string or a list of blocks, each tagged by its
``type`` field.
"""

from __future__ import annotations

import base64 as b64
from enum import StrEnum
from pathlib import PurePath
from typing import Annotated, Literal

from pydantic import Field, TypeAdapter

from ..core.exceptions import ContentFlatteningError
from .base import WireData, WireModel, decode


class ContentType(StrEnum):
    """Discriminator values of content blocks."""

    TEXT = "text"
    IMAGE = "image"
    TEXT_DELTA = "text_delta"


class ImageSourceType(StrEnum):
    """Encoding of an image source."""

    BASE64 = "base64"


class ImageMediaType(StrEnum):
    """Image formats supported by vision requests."""

    JPEG = "image/jpeg"
    PNG = "image/png"
    GIF = "image/gif"
    WEBP = "image/webp"

    @classmethod
    def from_extension(cls, extension: str) -> ImageMediaType:
        """Resolve a file extension such as ``"png"`` or ``".JPG"``.

        Raises:
            ValueError: If the extension is not a supported image format.
        """
        key = extension.lower().lstrip(".")
        try:
            return _EXTENSIONS[key]
        except KeyError:
            raise ValueError(f"unsupported image extension: {extension!r}") from None

    @classmethod
    def from_path(cls, path: str | PurePath) -> ImageMediaType:
        return cls.from_extension(PurePath(path).suffix)


_EXTENSIONS = {
    "jpg": ImageMediaType.JPEG,
    "jpeg": ImageMediaType.JPEG,
    "png": ImageMediaType.PNG,
    "gif": ImageMediaType.GIF,
    "webp": ImageMediaType.WEBP,
}


class ImageContentSource(WireModel):
    """Base64-encoded image data."""

    type: ImageSourceType = ImageSourceType.BASE64
    media_type: ImageMediaType
    data: str

    @classmethod
    def base64(cls, media_type: ImageMediaType, data: str) -> ImageContentSource:
        """Create a source from already base64-encoded data."""
        return cls(media_type=media_type, data=data)

    @classmethod
    def from_bytes(cls, media_type: ImageMediaType, raw: bytes) -> ImageContentSource:
        """Create a source by base64-encoding raw image bytes."""
        return cls(media_type=media_type, data=b64.b64encode(raw).decode("ascii"))


class TextContentBlock(WireModel):
    """Text content block."""

    type: Literal["text"] = "text"
    text: str

    @property
    def content_type(self) -> ContentType:
        return ContentType.TEXT


class ImageContentBlock(WireModel):
    """Image content block."""

    type: Literal["image"] = "image"
    source: ImageContentSource

    @property
    def content_type(self) -> ContentType:
        return ContentType.IMAGE


class TextDeltaContentBlock(WireModel):
    """Incremental text, as carried by ``content_block_delta`` chunks."""

    type: Literal["text_delta"] = "text_delta"
    text: str

    @property
    def content_type(self) -> ContentType:
        return ContentType.TEXT_DELTA


ContentBlock = Annotated[
    TextContentBlock | ImageContentBlock | TextDeltaContentBlock,
    Field(discriminator="type"),
]

# A single string or a list of blocks; untagged on the wire
Content = str | list[ContentBlock]

_content_block_adapter: TypeAdapter[ContentBlock] = TypeAdapter(ContentBlock)
_content_adapter: TypeAdapter[Content] = TypeAdapter(Content)


def parse_content_block(data: WireData) -> ContentBlock:
    """Decode one content block, selecting the variant by its ``type``.

    Raises:
        DecodeError: On an unknown ``type`` or a malformed payload.
    """
    return decode(_content_block_adapter, data, "ContentBlock")


def parse_content(data: str | bytes | bytearray | list[object]) -> Content:
    """Decode message content from JSON text or a parsed value.

    JSON text must be the encoded value, so a plain string is ``'"hi"'``.
    """
    return decode(_content_adapter, data, "Content")


def flatten_into_text(content: Content) -> str:
    """Return the text of ``content``.

    For block lists this is the text of the first text or text-delta block.

    Raises:
        ContentFlatteningError: If there is no text block.
    """
    if isinstance(content, str):
        return content
    for block in content:
        if isinstance(block, (TextContentBlock, TextDeltaContentBlock)):
            return block.text
    raise ContentFlatteningError("content has no text block")


def flatten_into_image_source(content: Content) -> ImageContentSource:
    """Return the source of the first image block in ``content``.

    Raises:
        ContentFlatteningError: If there is no image block.
    """
    if not isinstance(content, str):
        for block in content:
            if isinstance(block, ImageContentBlock):
                return block.source
    raise ContentFlatteningError("content has no image block")
