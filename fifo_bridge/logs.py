import logging
import sys
from contextlib import suppress
from typing import Optional

from loguru import logger as log

from . import config

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | {name} | {message}"

# Loguru's own stderr handler, installed at import.
_LOGURU_DEFAULT_SINK = 0
_stderr_sink: Optional[int] = None


class InterceptHandler(logging.Handler):
    """Forwards stdlib records to Loguru under their stdlib logger name."""

    def emit(self, record):
        try:
            level = log.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Point Loguru at the frame that called into logging.
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        log.patch(lambda r: r.update(name=record.name)).opt(
            depth=depth, exception=record.exc_info
        ).log(level, record.getMessage())


def setup_logging(level: Optional[str] = None) -> int:
    """Enables fifo_bridge logging on stderr and routes stdlib logging through Loguru.

    `level` defaults to FIFO_BRIDGE_LOG_LEVEL (INFO when unset). Only Loguru's
    default handler and a sink from an earlier call are replaced; sinks the
    application added itself stay. Returns the id of the new stderr sink.
    """
    global _stderr_sink
    level = (level or config.log_level()).upper()
    for sink_id in (_LOGURU_DEFAULT_SINK, _stderr_sink):
        if sink_id is not None:
            with suppress(ValueError):
                log.remove(sink_id)
    _stderr_sink = log.add(sys.stderr, level=level, format=LOG_FORMAT)
    log.enable("fifo_bridge")
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    return _stderr_sink
