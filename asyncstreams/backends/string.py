from typing import Optional, Union

import asyncstreams.err as err

from asyncstreams.logging import logger
from asyncstreams.stream import AsyncStream, BytesLike
from asyncstreams.util import to_bytes


class StringStream(AsyncStream):
    """
    In-memory stream over a growable byte buffer with a single read/write
    cursor.
    """

    def __init__(self, initial: Union[str, BytesLike] = b"",
                 chunk_size: Optional[int] = None,
                 encoding: Optional[str] = None,
                 byte_order: Optional[str] = None):
        super().__init__(chunk_size, encoding, byte_order)
        self._data: bytearray = bytearray(to_bytes(initial, self.encoding))
        self._position: int = 0

    def _check_open(self, operation: str):
        if self.closed:
            error_msg = "{} on a closed string stream".format(operation)
            logger.error(error_msg)
            raise err.ClosedStreamError(error_msg)

    async def close(self):
        self.closed = True

    def at_end(self) -> bool:
        return self.closed or self._position >= len(self._data)

    def get_position(self) -> int:
        return self._position

    def set_position(self, pos: int):
        self._position = max(0, min(pos, len(self._data)))

    async def read_raw(self, size: int) -> bytes:
        self._check_open("read")
        result = bytes(self._data[self._position:self._position+size])
        self._position += len(result)
        return result

    async def write_raw(self, data: bytes):
        self._check_open("write")
        end = self._position + len(data)
        if end > len(self._data):
            self._data.extend(bytes(end - len(self._data)))
        self._data[self._position:end] = data
        self._position = end

    async def flush(self):
        pass

    def get_value(self) -> bytes:
        return bytes(self._data)


def new_string_stream(initial: Union[str, BytesLike] = b"",
                      **kwargs) -> AsyncStream:
    return StringStream(initial, **kwargs)
