from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import BinaryIO

from .errors import EncodingError
from .parts import FilePart, Part, TextPart
from .utils import (
    DEFAULT_CONTENT_TYPE,
    check_boundary,
    check_content_type,
    check_header_param,
    choose_boundary,
    format_content_type,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MultipartBody:
    """Serialized multipart/form-data payload and its Content-Type value."""

    content_type: str
    body: bytes
    boundary: str


def _check_part(part: Part) -> Part:
    if isinstance(part, TextPart):
        check_header_param("Field name", part.name)
    elif isinstance(part, FilePart):
        check_header_param("Field name", part.name)
        if part.filename is not None:
            check_header_param("Filename", part.filename)
        if part.content_type is not None:
            check_content_type(part.content_type)
    else:
        raise EncodingError(f"Unsupported multipart part: {part!r}")
    return part


def _encode_field(name: str, value: str) -> bytes:
    return (
        f'Content-Disposition: form-data; name="{name}"\r\n\r\n{value}\r\n'.encode()
    )


def _encode_file(
    name: str, filename: str | None, content: bytes, content_type: str | None
) -> bytes:
    # File parts always carry a Content-Type.
    ct = content_type or DEFAULT_CONTENT_TYPE
    disposition = f'Content-Disposition: form-data; name="{name}"'
    if filename is not None:
        disposition += f'; filename="{filename}"'
    headers = f"{disposition}\r\nContent-Type: {ct}\r\n\r\n".encode()
    return headers + content + b"\r\n"


def encode_multipart(
    parts: Iterable[Part],
    boundary: str | None = None,
    boundary_factory: Callable[[], str] = choose_boundary,
) -> MultipartBody:
    """
    Build a multipart/form-data body from `parts`, keeping their order.

    Args:
        parts: TextPart / FilePart values.
        boundary: Explicit boundary token. Validated against RFC 2046.
        boundary_factory: Called for a boundary when none is given.

    Returns:
        MultipartBody with the payload and its Content-Type header value.

    The boundary is random, not checked against the content; a collision
    with a part's bytes would corrupt the framing.
    """
    boundary = check_boundary(boundary if boundary is not None else boundary_factory())
    delimiter = f"--{boundary}\r\n".encode("ascii")
    body_chunks: list[bytes] = []
    count = 0
    for part in parts:
        _check_part(part)
        body_chunks.append(delimiter)
        if isinstance(part, TextPart):
            body_chunks.append(_encode_field(part.name, part.value))
        else:
            body_chunks.append(
                _encode_file(part.name, part.filename, part.content, part.content_type)
            )
        count += 1
    body_chunks.append(f"--{boundary}--\r\n".encode("ascii"))
    body = b"".join(body_chunks)
    logger.debug("Encoded %d multipart part(s) into %d bytes", count, len(body))
    return MultipartBody(
        content_type=format_content_type(boundary),
        body=body,
        boundary=boundary,
    )


class MultipartBuilder:
    """
    Accumulates parts and encodes them into one multipart body.

    Every add_* method returns the builder so calls can be chained:

        content_type, data = (
            MultipartBuilder()
            .add_file("test", "1.txt")
            .add_text("name", "value")
            .finish()
        )
    """

    def __init__(
        self,
        boundary: str | None = None,
        boundary_factory: Callable[[], str] = choose_boundary,
    ) -> None:
        self.boundary = check_boundary(
            boundary if boundary is not None else boundary_factory()
        )
        self._parts: list[Part] = []

    @property
    def parts(self) -> tuple[Part, ...]:
        return tuple(self._parts)

    def add_part(self, part: Part) -> MultipartBuilder:
        self._parts.append(_check_part(part))
        return self

    def add_text(self, name: str, text: str) -> MultipartBuilder:
        return self.add_part(TextPart(name, text))

    def add_file(
        self,
        name: str,
        path: str | os.PathLike[str],
        content_type: str | None = None,
    ) -> MultipartBuilder:
        check_header_param("Field name", name)
        if content_type is not None:
            check_content_type(content_type)
        return self.add_part(FilePart.from_path(name, path, content_type))

    def add_stream(
        self,
        stream: BinaryIO,
        name: str,
        filename: str | None = None,
        content_type: str | None = None,
    ) -> MultipartBuilder:
        """Read a binary file-like object to its end and add it as a file part."""
        check_header_param("Field name", name)
        if filename is not None:
            check_header_param("Filename", filename)
        if content_type is not None:
            check_content_type(content_type)
        return self.add_part(
            FilePart(name, filename, stream.read(), content_type or DEFAULT_CONTENT_TYPE)
        )

    def build(self) -> MultipartBody:
        return encode_multipart(self._parts, boundary=self.boundary)

    def finish(self) -> tuple[str, bytes]:
        """Return (content_type, body) ready for an HTTP request."""
        encoded = self.build()
        return encoded.content_type, encoded.body

    def __len__(self) -> int:
        return len(self._parts)

    def __repr__(self) -> str:
        return f"<MultipartBuilder [{len(self._parts)} parts] boundary={self.boundary!r}>"
