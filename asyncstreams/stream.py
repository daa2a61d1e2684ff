import abc

from typing import Any, AsyncIterator, NoReturn, Optional, Union

import asyncstreams.codec as codec
import asyncstreams.err as err

from asyncstreams.config import StreamConfig, check_stream_values
from asyncstreams.logging import logger
from asyncstreams.util import TEXT_ERRORS, to_bytes

CR = "\r"
LF = "\n"
NUL = "\0"
LINE_TERMINATOR = b"\r\n"

BytesLike = Union[bytes, bytearray, memoryview]


def not_implemented(name: str) -> NoReturn:
    error_msg = "{} operation is not implemented".format(name)
    logger.error(error_msg)
    raise err.CapabilityNotImplemented(error_msg)


class AsyncStream(metaclass=abc.ABCMeta):
    """
    Base of every stream backend.

    A backend binds the seven capabilities below (``close``, ``at_end``,
    ``get_position``, ``set_position``, ``read_raw``, ``write_raw`` and
    ``flush``); everything else is derived from them here and must not be
    re-implemented by backends.  A capability the medium cannot support is
    bound to :func:`not_implemented` so that calling it fails loudly.

    Streams perform no locking.  Operations on one instance must be
    serialized by the caller.
    """

    def __init__(self, chunk_size: Optional[int] = None,
                 encoding: Optional[str] = None,
                 byte_order: Optional[str] = None):
        conf = StreamConfig.get_instance()
        self.chunk_size: int = (conf.chunk_size if chunk_size is None
                                else chunk_size)
        self.encoding: str = encoding or conf.encoding
        self.byte_order: str = byte_order or conf.byte_order
        check_stream_values(self.chunk_size, self.encoding, self.byte_order)
        self.closed: bool = False

    # capabilities

    @abc.abstractmethod
    async def close(self):
        pass

    @abc.abstractmethod
    def at_end(self) -> bool:
        pass

    @abc.abstractmethod
    def get_position(self) -> int:
        pass

    @abc.abstractmethod
    def set_position(self, pos: int):
        pass

    @abc.abstractmethod
    async def read_raw(self, size: int) -> bytes:
        pass

    @abc.abstractmethod
    async def write_raw(self, data: bytes):
        pass

    @abc.abstractmethod
    async def flush(self):
        pass

    def is_closed(self) -> bool:
        return self.closed

    # scoped release

    async def __aenter__(self) -> 'AsyncStream':
        return self

    async def __aexit__(self, exc_type, exc, tb):
        if not self.is_closed():
            await self.close()

    # bytes

    async def read(self, size: int) -> bytes:
        return await self.read_raw(size)

    async def write(self, data: Union[str, BytesLike]):
        await self.write_raw(to_bytes(data, self.encoding))

    async def read_all(self) -> bytes:
        result = b""
        while not self.at_end():
            result += await self.read_raw(self.chunk_size)
        return result

    async def read_buffer(self, buf: Any, size: int) -> int:
        """
        Fill the first ``size`` bytes of a writable buffer.

        Raw reads are repeated until ``size`` bytes arrived or a raw read
        comes back empty, so the returned count is smaller than ``size``
        only at end of stream.
        """
        view = memoryview(buf).cast("B")
        if size > len(view):
            raise ValueError("buffer of {} bytes cannot hold {}".format(
                len(view), size))
        got = 0
        while got < size:
            data = await self.read_raw(size - got)
            if not data:
                break
            view[got:got+len(data)] = data
            got += len(data)
        return got

    async def write_buffer(self, buf: Any, size: int):
        view = memoryview(buf).cast("B")
        if size > len(view):
            raise ValueError("buffer of {} bytes holds less than {}".format(
                len(view), size))
        await self.write_raw(view[:size].tobytes())

    # characters and lines

    async def read_char(self) -> str:
        data = await self.read_raw(1)
        if not data:
            return NUL
        return data.decode("latin-1")

    async def write_char(self, ch: Union[str, BytesLike]):
        if isinstance(ch, str):
            data = ch.encode("latin-1")
        else:
            data = bytes(ch)
        if len(data) != 1:
            raise ValueError("expected a single byte, got {!r}".format(ch))
        await self.write_raw(data)

    async def read_line(self) -> str:
        result = bytearray()
        while True:
            c = await self.read_char()
            if c == CR:
                await self.read_char()
                break
            elif c == LF or c == NUL:
                break
            else:
                result.append(ord(c))
        return result.decode(self.encoding, TEXT_ERRORS)

    async def write_line(self, data: Union[str, BytesLike]):
        await self.write_raw(to_bytes(data, self.encoding) + LINE_TERMINATOR)

    async def iter_lines(self) -> AsyncIterator[str]:
        while not self.at_end():
            yield await self.read_line()

    # fixed-width values

    async def read_value(self, kind: Any) -> Any:
        size = codec.sizeof(kind, self.byte_order)
        buf = bytearray(size)
        got = await self.read_buffer(buf, size)
        if got != size:
            raise err.EndOfStreamError(codec.get_kind(kind).value, size, got)
        return codec.decode(kind, buf, self.byte_order)

    async def write_value(self, kind: Any, value: Any):
        buf = codec.encode(kind, value, self.byte_order)
        await self.write_buffer(buf, len(buf))

    async def read_int8(self) -> int:
        return await self.read_value(codec.Kind.INT8)

    async def read_int16(self) -> int:
        return await self.read_value(codec.Kind.INT16)

    async def read_int32(self) -> int:
        return await self.read_value(codec.Kind.INT32)

    async def read_int64(self) -> int:
        return await self.read_value(codec.Kind.INT64)

    async def read_uint8(self) -> int:
        return await self.read_value(codec.Kind.UINT8)

    async def read_uint16(self) -> int:
        return await self.read_value(codec.Kind.UINT16)

    async def read_uint32(self) -> int:
        return await self.read_value(codec.Kind.UINT32)

    async def read_uint64(self) -> int:
        return await self.read_value(codec.Kind.UINT64)

    async def read_int(self) -> int:
        return await self.read_value(codec.Kind.INT)

    async def read_uint(self) -> int:
        return await self.read_value(codec.Kind.UINT)

    async def read_float32(self) -> float:
        return await self.read_value(codec.Kind.FLOAT32)

    async def read_float64(self) -> float:
        return await self.read_value(codec.Kind.FLOAT64)

    async def read_float(self) -> float:
        return await self.read_value(codec.Kind.FLOAT)

    async def read_bool(self) -> bool:
        return await self.read_value(codec.Kind.BOOL)

    async def read_byte(self) -> int:
        return await self.read_value(codec.Kind.BYTE)

    async def write_int8(self, value: int):
        await self.write_value(codec.Kind.INT8, value)

    async def write_int16(self, value: int):
        await self.write_value(codec.Kind.INT16, value)

    async def write_int32(self, value: int):
        await self.write_value(codec.Kind.INT32, value)

    async def write_int64(self, value: int):
        await self.write_value(codec.Kind.INT64, value)

    async def write_uint8(self, value: int):
        await self.write_value(codec.Kind.UINT8, value)

    async def write_uint16(self, value: int):
        await self.write_value(codec.Kind.UINT16, value)

    async def write_uint32(self, value: int):
        await self.write_value(codec.Kind.UINT32, value)

    async def write_uint64(self, value: int):
        await self.write_value(codec.Kind.UINT64, value)

    async def write_int(self, value: int):
        await self.write_value(codec.Kind.INT, value)

    async def write_uint(self, value: int):
        await self.write_value(codec.Kind.UINT, value)

    async def write_float32(self, value: float):
        await self.write_value(codec.Kind.FLOAT32, value)

    async def write_float64(self, value: float):
        await self.write_value(codec.Kind.FLOAT64, value)

    async def write_float(self, value: float):
        await self.write_value(codec.Kind.FLOAT, value)

    async def write_bool(self, value: bool):
        await self.write_value(codec.Kind.BOOL, value)

    async def write_byte(self, value: int):
        await self.write_value(codec.Kind.BYTE, value)
