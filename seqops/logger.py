# Imports

import threading
import os
import sys
import logging
from typing import Optional

_lock = threading.Lock()
_loggerhandlers = {}

DEFAULT_NAME = "seqops"
DEFAULT_LEVEL = logging.WARNING


class LogFormatter(logging.Formatter):
    """
    Formatter filling the color_on / color_off fields of the line template, left empty when
    color is disabled so the same template works for both.
    """
    COLORS = {
        logging.CRITICAL: "\033[38;5;196m",
        logging.ERROR: "\033[38;5;9m",
        logging.WARNING: "\033[38;5;11m",
        logging.INFO: "\033[38;5;111m",
        logging.DEBUG: "\033[1;30m",
    }
    RESET = "\033[0m"

    def __init__(self, color, *args, **kwargs):
        super(LogFormatter, self).__init__(*args, **kwargs)
        self.color = color

    def format(self, record, *args, **kwargs):
        code = self.COLORS.get(record.levelno) if self.color else None
        record.color_on = code or ""
        record.color_off = self.RESET if code else ""
        return super(LogFormatter, self).format(record, *args, **kwargs)


def parse_level(value, default=DEFAULT_LEVEL):
    """
    Resolve a level given as a name ("debug") or a number ("10"). Anything else gives default,
    a bad environment variable must never stop the package from importing.

    >>> parse_level("debug")
    10
    >>> parse_level("15")
    15
    >>> parse_level("verbose")
    30
    """
    if value is None:
        return default
    if isinstance(value, int):
        return value
    value = str(value).strip()
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    if isinstance(level, int):
        return level
    return default


class SeqOpsLogger:
    def __init__(self, config):
        self.config = config
        self.logger = self.setup_logging()

    def setup_logging(self):
        # only ever our own named logger, the root logger belongs to the application
        logger = logging.getLogger(self.config['name'])
        level = parse_level(self.config["console_log_level"])
        if logger.level == logging.NOTSET:
            logger.setLevel(level)

        if self.config["console_log_output"] == "stdout":
            console_log_output = sys.stdout
        else:
            console_log_output = sys.stderr

        console_handler = logging.StreamHandler(console_log_output)
        console_handler.setLevel(level)
        console_formatter = LogFormatter(fmt=self.config["log_line_template"], color=self.config["console_log_color"])
        console_handler.setFormatter(console_formatter)
        if (logger.hasHandlers()):
            logger.handlers.clear()
        logger.addHandler(console_handler)
        logger.propagate = False
        return logger

    def err(self, *args, **kwargs):
        kwargs.setdefault("stacklevel", 2)
        return self.logger.error(*args, **kwargs)

    def d(self, *args, **kwargs):
        kwargs.setdefault("stacklevel", 2)
        return self.logger.debug(*args, **kwargs)

    def get_logger(self):
        return self.logger


def _env_flag(key, default):
    val = os.environ.get(key)
    if val is None:
        return default
    return val.strip().lower() not in ('0', 'false', 'no', 'off', '')


def _logger_config(name):
    return {
        'name': name,
        'console_log_output': os.environ.get('SEQOPS_LOG_OUTPUT', "stderr").strip().lower(),
        'console_log_level': os.environ.get('SEQOPS_LOG_LEVEL', "warning"),
        'console_log_color': _env_flag('SEQOPS_LOG_COLOR', True),
        'log_line_template': f"%(color_on)s[{name}] %(funcName)-5s%(color_off)s: %(message)s"
    }


def _setup_library_root_logger(name):
    return SeqOpsLogger(_logger_config(name))


def _configure_library_root_logger(name=DEFAULT_NAME) -> None:
    global _loggerhandlers
    with _lock:
        if name in _loggerhandlers:
            return
        _loggerhandlers[name] = _setup_library_root_logger(name)


def get_logger(name: Optional[str] = DEFAULT_NAME) -> SeqOpsLogger:
    if name is None:
        name = DEFAULT_NAME
    _configure_library_root_logger(name)
    return _loggerhandlers[name]
