import logging
import socket

from typing import Optional, Union

import tornado.iostream as torio

from asyncstreams.logging import logger
from asyncstreams.stream import AsyncStream, not_implemented
from asyncstreams.util import dump_bytes


class SocketStream(AsyncStream):
    """
    Connection-backed stream.  There is no position; the stream ends when
    the peer closes the connection.
    """

    def __init__(self, stream: torio.IOStream,
                 chunk_size: Optional[int] = None,
                 encoding: Optional[str] = None,
                 byte_order: Optional[str] = None):
        super().__init__(chunk_size, encoding, byte_order)
        self._stream: torio.IOStream = stream

    async def close(self):
        self._stream.close()
        self.closed = True
        logger.debug("socket stream closed")

    def at_end(self) -> bool:
        return self.closed

    def get_position(self) -> int:
        return not_implemented("getPosition")

    def set_position(self, pos: int):
        not_implemented("setPosition")

    async def read_raw(self, size: int) -> bytes:
        try:
            result = await self._stream.read_bytes(size, partial=True)
        except torio.StreamClosedError:
            result = b""
        if not result:
            logger.debug("socket stream closed by peer")
            self.closed = True
        elif logger.isEnabledFor(logging.DEBUG):
            logger.debug("recv %s", dump_bytes(result))
        return result

    async def write_raw(self, data: bytes):
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("send %s", dump_bytes(data))
        await self._stream.write(data)

    async def flush(self):
        pass


def new_socket_stream(conn: Union[torio.IOStream, socket.socket],
                      **kwargs) -> AsyncStream:
    if isinstance(conn, socket.socket):
        conn = torio.IOStream(conn)
    return SocketStream(conn, **kwargs)
