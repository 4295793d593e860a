from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Union

from .utils import filename_from_path, guess_content_type


@dataclass(frozen=True)
class TextPart:
    """A plain form field."""

    name: str
    value: str


@dataclass(frozen=True)
class FilePart:
    """
    A file field. `content_type` of None is sent as application/octet-stream
    and a `filename` of None leaves the filename parameter out.
    """

    name: str
    filename: str | None
    content: bytes
    content_type: str | None = None

    @classmethod
    def from_path(
        cls,
        name: str,
        path: str | os.PathLike[str],
        content_type: str | None = None,
    ) -> FilePart:
        """
        Read `path` into a file part.

        The filename is the last path component and the content type is
        guessed from the extension unless given. OSError from opening or
        reading the file propagates unchanged.
        """
        with open(path, "rb") as fh:
            content = fh.read()
        return cls(
            name=name,
            filename=filename_from_path(path),
            content=content,
            content_type=content_type or guess_content_type(path),
        )


Part = Union[TextPart, FilePart]
