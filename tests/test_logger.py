"""Unit tests for the logging bootstrap."""

from __future__ import annotations

import logging

from config.settings import settings
from util import logger as app_logger


def test_init_logger_file_output_has_plain_level_names(tmp_path) -> None:
    """File logs keep the bare level name while the console gets colour."""
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    had_flag = getattr(root, app_logger._INIT_FLAG, False)
    if had_flag:
        delattr(root, app_logger._INIT_FLAG)
    config = settings.model_copy(
        update={"LOG_TO_FILE": True, "LOG_DIR": str(tmp_path), "LOG_LEVEL": "INFO"}
    )
    try:
        app_logger.init_logger(config)
        logging.getLogger("tests.logger").warning("extract.failed path=%s", "x")
        for h in root.handlers:
            h.flush()

        text = (tmp_path / config.LOG_FILE_NAME).read_text(encoding="utf-8")
        assert " WARNING tests.logger - extract.failed path=x" in text
        assert "\033[" not in text
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            if h not in saved_handlers:
                h.close()
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)
        setattr(root, app_logger._INIT_FLAG, had_flag)
