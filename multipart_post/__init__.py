from multipart_post.errors import EncodingError, MultipartError
from multipart_post.multipart import MultipartBody, MultipartBuilder, encode_multipart
from multipart_post.parts import FilePart, Part, TextPart
from multipart_post.request import (
    MultipartRequest,
    attach_multipart,
    post,
    put,
    request,
)
from multipart_post.utils import choose_boundary

__all__ = [
    "EncodingError",
    "MultipartError",
    "MultipartBody",
    "MultipartBuilder",
    "encode_multipart",
    "FilePart",
    "Part",
    "TextPart",
    "MultipartRequest",
    "attach_multipart",
    "post",
    "put",
    "request",
    "choose_boundary",
]
