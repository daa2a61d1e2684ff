from typing import List, Any, Optional, MutableMapping

import toml

import asyncstreams.err as err

DEFAULT_CHUNK_SIZE = 4096
DEFAULT_ENCODING = "utf-8"
DEFAULT_BYTE_ORDER = "@"

BYTE_ORDERS = ("@", "=", "<", ">", "!")


class StreamConfig(object):
    """
    单例，默认值在没有加载配置文件时使用
    """

    _instance: Optional['StreamConfig'] = None

    def __init__(self,
                 chunk_size: int = DEFAULT_CHUNK_SIZE,
                 encoding: str = DEFAULT_ENCODING,
                 byte_order: str = DEFAULT_BYTE_ORDER):
        self.chunk_size: int = int(chunk_size)
        self.encoding: str = str(encoding)
        self.byte_order: str = str(byte_order)

    @classmethod
    def new(cls,
            chunk_size: int = DEFAULT_CHUNK_SIZE,
            encoding: str = DEFAULT_ENCODING,
            byte_order: str = DEFAULT_BYTE_ORDER) -> 'StreamConfig':
        check_stream_values(chunk_size, encoding, byte_order)
        c = cls(chunk_size, encoding, byte_order)
        cls._instance = c
        return c

    @classmethod
    def get_instance(cls) -> 'StreamConfig':
        if not cls._instance:
            return cls()
        return cls._instance

    @classmethod
    def reset(cls):
        cls._instance = None


def check_stream_values(chunk_size: int, encoding: str, byte_order: str):
    if not isinstance(chunk_size, int) or chunk_size <= 0:
        raise err.ConfigError(
                "chunk_size must be positive, got {!r}".format(chunk_size))
    if byte_order not in BYTE_ORDERS:
        raise err.ConfigError(
                "unknown byte_order {!r}".format(byte_order))
    try:
        "".encode(encoding)
    except LookupError:
        raise err.ConfigError("unknown encoding {!r}".format(encoding))


class LoggingHandlerConfig(object):
    def __init__(self, class_name: str, args: List[Any]):
        self.class_name: str = class_name
        self.args: List[Any] = args


class LoggingConfig(object):
    """
    单例，不能被修改
    """

    _instance: Optional['LoggingConfig'] = None

    def __init__(self, level: str, format: str, datefmt: str,
                 handler: LoggingHandlerConfig):
        self.level = level
        self.format = format
        self.datefmt = datefmt
        self.handler = handler

    @classmethod
    def new(cls, level: str, format: str, datefmt: str,
            handler: LoggingHandlerConfig) -> 'LoggingConfig':
        if cls._instance:
            return cls._instance
        c = cls(level, format, datefmt, handler)
        cls._instance = c
        return cls._instance

    @classmethod
    def get_instance(cls) -> 'LoggingConfig':
        if not cls._instance:
            raise err.ConfigError("Not yet initialized")
        return cls._instance

    @classmethod
    def is_initialized(cls) -> bool:
        return cls._instance is not None

    @classmethod
    def reset(cls):
        cls._instance = None


def parser_config(file: str):
    with open(file, "r") as f:
        config = toml.load(f)
    load_config(config)


def load_config(config: MutableMapping[str, Any]):
    if "base" not in config:
        raise err.ConfigError("config file is error: missing [base].")
    base = config["base"]

    stream = base.get("stream", {})
    StreamConfig.new(stream.get("chunk_size", DEFAULT_CHUNK_SIZE),
                     stream.get("encoding", DEFAULT_ENCODING),
                     stream.get("byte_order", DEFAULT_BYTE_ORDER))

    if "logging" not in base:
        return
    _check_keys(base["logging"], ["level", "format", "datefmt", "handler"],
                "base.logging")
    _check_keys(base["logging"]["handler"], ["class", "args"],
                "base.logging.handler")

    logging_handler = LoggingHandlerConfig(
            base["logging"]["handler"]["class"],
            base["logging"]["handler"]["args"])
    LoggingConfig.new(
            base["logging"]["level"],
            base["logging"]["format"],
            base["logging"]["datefmt"],
            logging_handler)


def _check_keys(section: MutableMapping[str, Any], keys: List[str],
                name: str):
    for i in keys:
        if i not in section:
            raise err.ConfigError(
                    "config file is error: missing {}.{}".format(name, i))
