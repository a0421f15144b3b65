"""
Content encoders used when storing file content as blobs.
"""

import base64
from dataclasses import dataclass
from typing import Protocol, Union


@dataclass
class EncodedContent:
    content: str
    encoding: str


class ContentEncoder(Protocol):
    """Turns file content into the transport encoding accepted by the blob API."""

    def encode(self, content: Union[bytes, str]) -> EncodedContent:
        ...


class Base64Encoder:
    """Default encoder. Text is encoded as UTF-8 before base64."""

    def encode(self, content: Union[bytes, str]) -> EncodedContent:
        if isinstance(content, str):
            content = content.encode("utf-8")
        return EncodedContent(
            content=base64.b64encode(content).decode("ascii"),
            encoding="base64",
        )


class Utf8Encoder:
    """Sends text as-is. Only valid for content that is UTF-8 text."""

    def encode(self, content: Union[bytes, str]) -> EncodedContent:
        if isinstance(content, bytes):
            content = content.decode("utf-8")
        return EncodedContent(content=content, encoding="utf-8")
