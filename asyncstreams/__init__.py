VERSION = "0.1.0"

from asyncstreams.stream import AsyncStream, not_implemented  # noqa: E402
from asyncstreams.backends import (  # noqa: E402
    FileMode, FileStream, SocketStream, StringStream,
    new_file_stream, new_socket_stream, new_string_stream)

__all__ = ["VERSION", "AsyncStream", "not_implemented",
           "FileMode", "FileStream", "SocketStream", "StringStream",
           "new_file_stream", "new_socket_stream", "new_string_stream"]
