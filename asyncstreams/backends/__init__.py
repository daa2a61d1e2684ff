from asyncstreams.backends.file import FileMode, FileStream, new_file_stream
from asyncstreams.backends.socket import SocketStream, new_socket_stream
from asyncstreams.backends.string import StringStream, new_string_stream

__all__ = ["FileMode", "FileStream", "new_file_stream",
           "SocketStream", "new_socket_stream",
           "StringStream", "new_string_stream"]
