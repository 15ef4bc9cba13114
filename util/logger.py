# util/logger.py
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from config.settings import Settings, settings as default_settings

_INIT_FLAG = "_bucketview_inited"
_TEXT_FMT = "%(asctime)s %(levelname)s %(name)s - %(message)s"
_DATE_FMT = "%Y-%m-%dT%H:%M:%S%z"


class ColoredFormatter(logging.Formatter):
    """Colours the level name; used only on the console handler."""

    COLORS = {
        "DEBUG": "\033[37m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[41m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        # Work on a copy so the file handler still sees the plain level name.
        record = logging.makeLogRecord(record.__dict__)
        lvl = record.levelname
        record.levelname = f"{self.COLORS.get(lvl, self.RESET)}{lvl}{self.RESET}"
        return super().format(record)


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(ColoredFormatter(_TEXT_FMT, datefmt=_DATE_FMT))
    return handler


def _file_handler(config: Settings, level: int) -> logging.Handler:
    os.makedirs(config.LOG_DIR, exist_ok=True)
    handler = RotatingFileHandler(
        os.path.join(config.LOG_DIR, config.LOG_FILE_NAME),
        maxBytes=config.LOG_MAX_BYTES,
        backupCount=config.LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_TEXT_FMT, datefmt=_DATE_FMT))
    return handler


def init_logger(config: Settings = default_settings) -> logging.Logger:
    """
    Configure the root logger once per process: coloured stdout always,
    a size-rotated file under LOG_DIR when LOG_TO_FILE is set. Later calls
    return the app logger untouched.
    """
    root = logging.getLogger()
    if not getattr(root, _INIT_FLAG, False):
        level = getattr(logging, (config.LOG_LEVEL or "INFO").upper(), logging.INFO)
        root.setLevel(level)
        for h in list(root.handlers):
            root.removeHandler(h)

        root.addHandler(_console_handler(level))
        if config.LOG_TO_FILE:
            root.addHandler(_file_handler(config, level))
        setattr(root, _INIT_FLAG, True)

    logger = logging.getLogger(config.LOGGER_NAME)
    logger.debug("logger.ready level=%s file=%s", config.LOG_LEVEL, config.LOG_TO_FILE)
    return logger
