import importlib
import logging

from asyncstreams.config import LoggingConfig

DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger("asyncstreams")


def _load_handler_class(class_name: str):
    module_name, _, attr = class_name.rpartition(".")
    if not module_name:
        module_name = "logging"
    return getattr(importlib.import_module(module_name), attr)


def init_logging(debug: bool = False):
    if LoggingConfig.is_initialized():
        conf = LoggingConfig.get_instance()
        handler_class = _load_handler_class(conf.handler.class_name)
        handler = handler_class(*conf.handler.args)
        handler.setFormatter(logging.Formatter(conf.format, conf.datefmt))
        level = conf.level
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT,
                                               DEFAULT_DATEFMT))
        level = "INFO"

    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else level)
    return logger
