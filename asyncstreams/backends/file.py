import enum
import io
import os

from typing import IO, Optional, Union

from tornado.ioloop import IOLoop

import asyncstreams.err as err

from asyncstreams.logging import logger
from asyncstreams.stream import AsyncStream


@enum.unique
class FileMode(enum.Enum):
    READ = "rb"
    WRITE = "wb"
    READ_WRITE = "w+b"
    READ_WRITE_EXISTING = "r+b"
    APPEND = "ab"


class FileStream(AsyncStream):
    """
    Disk-backed stream.  Blocking file calls run on the IOLoop's default
    executor so that other tasks keep making progress.

    The end-of-stream flag is raised by an empty read and lowered only by a
    later read that returns data; ``set_position`` leaves it untouched.
    """

    def __init__(self, handle: IO[bytes],
                 chunk_size: Optional[int] = None,
                 encoding: Optional[str] = None,
                 byte_order: Optional[str] = None):
        super().__init__(chunk_size, encoding, byte_order)
        if isinstance(handle, io.TextIOBase):
            raise err.Error("file stream needs a binary file handle")
        self._file: IO[bytes] = handle
        self._eof: bool = False

    async def _run(self, func, *args):
        return await IOLoop.current().run_in_executor(None, func, *args)

    async def close(self):
        await self._run(self._file.close)
        self.closed = True
        logger.debug("file stream %s closed",
                     getattr(self._file, "name", "<handle>"))

    def at_end(self) -> bool:
        return self.closed or self._eof

    def get_position(self) -> int:
        return self._file.tell()

    def set_position(self, pos: int):
        self._file.seek(pos)

    async def read_raw(self, size: int) -> bytes:
        result = await self._run(self._file.read, size)
        self._eof = len(result) == 0
        return result

    async def write_raw(self, data: bytes):
        await self._run(self._file.write, data)

    async def flush(self):
        pass


def new_file_stream(file: Union[str, os.PathLike, IO[bytes]],
                    mode: FileMode = FileMode.READ,
                    **kwargs) -> AsyncStream:
    if isinstance(file, (str, os.PathLike)):
        handle = open(file, FileMode(mode).value)
        logger.debug("file stream %s opened with mode %s", file,
                     FileMode(mode).name)
    else:
        handle = file
    return FileStream(handle, **kwargs)
