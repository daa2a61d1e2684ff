from typing import Union

# undecodable bytes survive a decode/encode round trip as lone surrogates
TEXT_ERRORS = "surrogateescape"


def to_bytes(data: Union[str, bytes, bytearray, memoryview],
             encoding: str) -> bytes:
    if isinstance(data, str):
        return data.encode(encoding, TEXT_ERRORS)
    return bytes(data)


def dump_bytes(data: bytes, limit: int = 256) -> str:
    def printable(b):
        if 32 <= b < 127:
            return chr(b)
        return '.'
    result = "length: %s\n" % len(data)
    dump_data = [data[i:i+16] for i in range(0, min(len(data), limit), 16)]
    for d in dump_data:
        result += (' '.join("{:02X}".format(x) for x in d) +
                   '   ' * (16 - len(d)) + ' ' * 2 +
                   ''.join(printable(x) for x in d))
        result += '\n'
    if len(data) > limit:
        result += '... (%d more bytes)\n' % (len(data) - limit)
    return result
