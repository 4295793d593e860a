class MultipartError(Exception):
    """Base error for multipart-post."""


class EncodingError(MultipartError, ValueError):
    """Raised when a part cannot be framed inside a multipart body."""
