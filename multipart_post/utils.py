from __future__ import annotations

import mimetypes
import os
import random
import re

from .errors import EncodingError

BOUNDARY_LEN = 29
BOUNDARY_PREFIX = "-" * 27
DEFAULT_CONTENT_TYPE = "application/octet-stream"

# RFC 2046 bchars; a boundary may not end with a space.
_BOUNDARY_RE = re.compile(r"[0-9A-Za-z'()+_,\-./:=? ]{0,69}[0-9A-Za-z'()+_,\-./:=?]")
# RFC 2045 token characters; other boundaries must be quoted in the header.
_TOKEN_RE = re.compile(r"[0-9A-Za-z!#$%&'*+\-.^_`{|}~]+")


def choose_boundary() -> str:
    digits = "".join(random.choice("0123456789") for _ in range(BOUNDARY_LEN))
    return f"{BOUNDARY_PREFIX}{digits}"


def check_boundary(boundary: str) -> str:
    if not _BOUNDARY_RE.fullmatch(boundary):
        raise EncodingError(f"Invalid multipart boundary: {boundary!r}")
    return boundary


def format_content_type(boundary: str) -> str:
    if _TOKEN_RE.fullmatch(boundary):
        return f"multipart/form-data; boundary={boundary}"
    return f'multipart/form-data; boundary="{boundary}"'


def check_header_param(kind: str, value: str) -> str:
    """
    Reject values that would break Content-Disposition framing.
    Quotes, backslashes, CR, LF and null bytes are not escaped, so they are refused.
    """
    for ch in ('"', "\\", "\r", "\n", "\x00"):
        if ch in value:
            raise EncodingError(f"{kind} contains forbidden character {ch!r}: {value!r}")
    return value


def check_content_type(content_type: str) -> str:
    for ch in ("\r", "\n", "\x00"):
        if ch in content_type:
            raise EncodingError(f"Content type contains forbidden character {ch!r}")
    return content_type


def filename_from_path(path: str | os.PathLike[str]) -> str:
    return os.path.basename(os.fspath(path))


def guess_content_type(path: str | os.PathLike[str]) -> str:
    ctype, _ = mimetypes.guess_type(os.fspath(path))
    return ctype or DEFAULT_CONTENT_TYPE
