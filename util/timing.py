# util/timing.py
import time
from contextlib import contextmanager
from typing import Iterator, Dict, Any
import logging


@contextmanager
def timed(logger: logging.Logger, name: str, **kv: Dict[str, Any]) -> Iterator[None]:
    """
    Usage:
      with timed(logger, "extract.scan", path=path):
          ...
    Emits one line on exit: "<name>.done ms=<int> key=val ..." at INFO,
    or "<name>.failed ms=<int> ..." at WARNING when the block raised.
    """
    t0 = time.perf_counter()
    failed = False
    try:
        yield
    except BaseException:
        failed = True
        raise
    finally:
        dt_ms = int((time.perf_counter() - t0) * 1000)
        suffix = "".join(f" {k}={v}" for k, v in kv.items())
        if failed:
            logger.warning("%s.failed ms=%d%s", name, dt_ms, suffix)
        else:
            logger.info("%s.done ms=%d%s", name, dt_ms, suffix)
