"""Pytest configuration and fixtures."""

import email
from email import policy

import pytest
import requests


@pytest.fixture
def fixed_boundary():
    """A deterministic boundary factory."""
    return lambda: "test-boundary-0123456789"


@pytest.fixture
def text_file(tmp_path):
    """Create 1.txt containing 'hello'."""
    path = tmp_path / "1.txt"
    path.write_bytes(b"hello")
    return path


@pytest.fixture
def decode_multipart():
    """
    Parse a multipart body with the standard library email parser.
    Returns a list of (name, filename, content_type|None, payload bytes).
    """

    def _decode(content_type: str, body: bytes):
        raw = f"Content-Type: {content_type}\r\n\r\n".encode("ascii") + body
        msg = email.message_from_bytes(raw, policy=policy.HTTP)
        assert msg.is_multipart()
        out = []
        for part in msg.iter_parts():
            out.append(
                (
                    part.get_param("name", header="content-disposition"),
                    part.get_filename(),
                    part.get("content-type"),
                    part.get_payload(decode=True),
                )
            )
        return out

    return _decode


@pytest.fixture
def mock_session(mocker):
    """A requests.Session whose send() never touches the network."""
    session = requests.Session()
    response = requests.Response()
    response.status_code = 200
    response._content = b'{"ok": true}'
    mocker.patch.object(session, "send", return_value=response)
    return session
