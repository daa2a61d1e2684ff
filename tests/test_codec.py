"""Tests for fixed-width typed reads and writes."""

import math
import struct

import pytest

import asyncstreams.codec as codec
import asyncstreams.err as err

from asyncstreams import new_string_stream

VALUES = [
    ("int8", -128),
    ("int8", 127),
    ("int16", -32768),
    ("int32", -2 ** 31),
    ("int64", -2 ** 63),
    ("uint8", 255),
    ("uint16", 65535),
    ("uint32", 2 ** 32 - 1),
    ("uint64", 2 ** 64 - 1),
    ("int", -123456789),
    ("uint", 123456789),
    ("float32", 1.5),
    ("float64", math.pi),
    ("float", -math.e),
    ("bool", True),
    ("bool", False),
    ("byte", 0xAB),
]


class TestTypedCodec:
    """Test typed values through a string stream."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("kind,value", VALUES)
    async def test_named_methods(self, kind, value):
        s = new_string_stream()
        await getattr(s, "write_" + kind)(value)
        assert len(s.get_value()) == codec.sizeof(kind)

        s.set_position(0)
        assert await getattr(s, "read_" + kind)() == value
        assert s.at_end()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("byte_order", ["<", ">", "!"])
    async def test_explicit_byte_order(self, byte_order):
        s = new_string_stream(byte_order=byte_order)
        for kind, value in VALUES:
            await s.write_value(kind, value)

        s.set_position(0)
        for kind, value in VALUES:
            assert await s.read_value(kind) == value

    @pytest.mark.asyncio
    async def test_native_layout(self):
        s = new_string_stream()
        await s.write_uint32(0x01020304)
        assert s.get_value() == struct.pack("@I", 0x01020304)

    @pytest.mark.asyncio
    async def test_little_and_big_endian_layout(self):
        little = new_string_stream(byte_order="<")
        big = new_string_stream(byte_order=">")
        await little.write_uint16(0x0102)
        await big.write_uint16(0x0102)
        assert little.get_value() == b"\x02\x01"
        assert big.get_value() == b"\x01\x02"

    def test_native_width_int_is_fixed_with_explicit_order(self):
        assert codec.sizeof("int", "<") == 8
        assert codec.sizeof("uint", ">") == 8
        assert codec.sizeof("int") == struct.calcsize("@n")

    @pytest.mark.asyncio
    async def test_short_read_is_end_of_stream(self):
        s = new_string_stream(b"\x01\x02")
        with pytest.raises(err.EndOfStreamError) as e:
            await s.read_int32()
        assert e.value.expected == 4
        assert e.value.actual == 2
        assert not isinstance(e.value, AssertionError)

    @pytest.mark.asyncio
    async def test_read_on_empty_stream(self):
        s = new_string_stream()
        with pytest.raises(err.EndOfStreamError):
            await s.read_bool()

    @pytest.mark.asyncio
    async def test_unknown_kind(self):
        s = new_string_stream()
        with pytest.raises(err.Error):
            await s.write_value("int128", 1)


class TestBuffers:
    """Test the buffer adaptation used by the codec."""

    @pytest.mark.asyncio
    async def test_read_buffer_exact_count(self):
        s = new_string_stream(b"abcdef")
        buf = bytearray(8)
        assert await s.read_buffer(buf, 4) == 4
        assert buf == b"abcd\x00\x00\x00\x00"
        assert await s.read_buffer(buf, 4) == 2
        assert buf[:2] == b"ef"

    @pytest.mark.asyncio
    async def test_write_buffer_exact_count(self):
        s = new_string_stream()
        await s.write_buffer(memoryview(b"abcdef"), 3)
        assert s.get_value() == b"abc"

    @pytest.mark.asyncio
    async def test_buffer_too_small(self):
        s = new_string_stream(b"abcdef")
        with pytest.raises(ValueError):
            await s.read_buffer(bytearray(2), 4)
        with pytest.raises(ValueError):
            await s.write_buffer(b"ab", 4)
