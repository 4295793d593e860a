"""Tests for multipart_post.parts module."""

import dataclasses
import os

import pytest
from multipart_post.parts import FilePart, TextPart


class TestTextPart:
    """Tests for TextPart."""

    def test_fields(self):
        """Test TextPart stores name and value."""
        part = TextPart("name", "Alice")
        assert part.name == "name"
        assert part.value == "Alice"

    def test_immutable(self):
        """Test TextPart cannot be modified."""
        part = TextPart("name", "Alice")
        with pytest.raises(dataclasses.FrozenInstanceError):
            part.value = "Bob"

    def test_equality(self):
        """Test parts compare by value."""
        assert TextPart("a", "1") == TextPart("a", "1")
        assert TextPart("a", "1") != TextPart("a", "2")


class TestFilePart:
    """Tests for FilePart."""

    def test_default_content_type_is_none(self):
        """Test content_type defaults to None."""
        part = FilePart("f", "a.bin", b"\x00")
        assert part.content_type is None

    def test_immutable(self):
        """Test FilePart cannot be modified."""
        part = FilePart("f", "a.bin", b"\x00")
        with pytest.raises(dataclasses.FrozenInstanceError):
            part.content = b"other"

    def test_from_path(self, text_file):
        """Test from_path reads bytes and derives filename and type."""
        part = FilePart.from_path("name", text_file)
        assert part == FilePart("name", "1.txt", b"hello", "text/plain")

    def test_from_path_str(self, text_file):
        """Test from_path accepts a string path."""
        part = FilePart.from_path("name", str(text_file))
        assert part.filename == "1.txt"
        assert part.content == b"hello"

    def test_from_path_explicit_content_type(self, text_file):
        """Test explicit content type wins over the guess."""
        part = FilePart.from_path("name", text_file, content_type="text/markdown")
        assert part.content_type == "text/markdown"

    def test_from_path_unknown_extension(self, tmp_path):
        """Test unknown extensions fall back to octet-stream."""
        path = tmp_path / "blob"
        path.write_bytes(bytes(range(256)))
        part = FilePart.from_path("blob", path)
        assert part.content_type == "application/octet-stream"
        assert part.content == bytes(range(256))

    def test_from_path_missing_file(self, tmp_path):
        """Test a missing file raises FileNotFoundError unchanged."""
        with pytest.raises(FileNotFoundError):
            FilePart.from_path("f", tmp_path / "missing.txt")

    def test_from_path_directory(self, tmp_path):
        """Test a directory path raises an OSError."""
        with pytest.raises(OSError):
            FilePart.from_path("f", tmp_path)

    @pytest.mark.skipif(
        os.name == "nt" or (hasattr(os, "geteuid") and os.geteuid() == 0),
        reason="permission bits are not enforced",
    )
    def test_from_path_permission_denied(self, tmp_path):
        """Test an unreadable file raises PermissionError."""
        path = tmp_path / "secret.txt"
        path.write_bytes(b"x")
        path.chmod(0)
        try:
            with pytest.raises(PermissionError):
                FilePart.from_path("f", path)
        finally:
            path.chmod(0o600)
