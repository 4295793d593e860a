from __future__ import annotations

import logging
import os
from collections.abc import Iterable

import requests

from .multipart import encode_multipart
from .parts import FilePart, Part
from .utils import filename_from_path

logger = logging.getLogger(__name__)


def attach_multipart(
    request: requests.Request,
    parts: Iterable[Part],
    boundary: str | None = None,
) -> requests.Request:
    """
    Encode `parts` and set them as the body of `request`.

    Any Content-Type header already on the request is replaced. The same
    request object is returned.
    """
    encoded = encode_multipart(parts, boundary=boundary)
    headers = {
        k: v for k, v in (request.headers or {}).items() if k.lower() != "content-type"
    }
    headers["Content-Type"] = encoded.content_type
    request.headers = headers
    request.data = encoded.body
    # Body is pre-built; files/json must not be re-encoded.
    request.files = []
    request.json = None
    return request


class MultipartRequest:
    """
    A pending request that is sent with a multipart/form-data body.

    Args:
        method: HTTP method (POST, PUT, ...)
        url: Request URL
        session: requests.Session to send with. A temporary one is opened
            and closed per call when omitted.
        headers: Extra request headers
        timeout: Passed to Session.send
        **request_kwargs: Forwarded to requests.Request (params, auth, cookies...)

    Example:
        resp = post("https://example.com/upload").send_multipart_file("name", "1.txt")
    """

    def __init__(
        self,
        method: str,
        url: str,
        session: requests.Session | None = None,
        headers: dict[str, str] | None = None,
        timeout: float | tuple[float, float] | None = None,
        **request_kwargs,
    ) -> None:
        self.method = method.upper()
        self.url = url
        self.session = session
        self.headers = dict(headers or {})
        self.timeout = timeout
        self.request_kwargs = request_kwargs

    def build(self, parts: Iterable[Part]) -> requests.Request:
        req = requests.Request(
            self.method, self.url, headers=dict(self.headers), **self.request_kwargs
        )
        return attach_multipart(req, parts)

    def _send(self, session: requests.Session, req: requests.Request) -> requests.Response:
        prepared = session.prepare_request(req)
        logger.debug(
            "Sending multipart %s %s (%d bytes)",
            self.method,
            self.url,
            len(prepared.body or b""),
        )
        return session.send(prepared, timeout=self.timeout)

    def send_multipart(self, parts: Iterable[Part]) -> requests.Response:
        # Body is fully built before anything is sent.
        req = self.build(parts)
        if self.session is not None:
            return self._send(self.session, req)
        with requests.Session() as session:
            return self._send(session, req)

    def send_multipart_file(
        self, name: str, path: str | os.PathLike[str]
    ) -> requests.Response:
        return self.send_multipart([FilePart.from_path(name, path)])

    def send_multipart_files(
        self, paths: Iterable[str | os.PathLike[str]]
    ) -> requests.Response:
        """Send several files, each under a field named after the file itself."""
        parts = [FilePart.from_path(filename_from_path(p), p) for p in paths]
        return self.send_multipart(parts)

    def __repr__(self) -> str:
        return f"<MultipartRequest [{self.method}] {self.url}>"


def request(method: str, url: str, **kwargs) -> MultipartRequest:
    return MultipartRequest(method, url, **kwargs)


def post(url: str, **kwargs) -> MultipartRequest:
    return MultipartRequest("POST", url, **kwargs)


def put(url: str, **kwargs) -> MultipartRequest:
    return MultipartRequest("PUT", url, **kwargs)
