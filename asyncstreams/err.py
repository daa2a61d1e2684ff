class AsyncStreamError(Exception):
    pass


class Error(AsyncStreamError):
    pass


class EndOfStreamError(Error):
    """
    A fixed-width value could not be decoded because the stream ended first.
    """

    def __init__(self, kind: str, expected: int, actual: int):
        super().__init__(
            "end of stream while reading {}: expected {} bytes, got {}".format(
                kind, expected, actual))
        self.kind = kind
        self.expected = expected
        self.actual = actual


class ConfigError(Error):
    pass


class CapabilityNotImplemented(AsyncStreamError, AssertionError):
    pass


class ClosedStreamError(AsyncStreamError, AssertionError):
    pass
