import logging
import os
import sys

from pythonjsonlogger import jsonlogger

_LOG_FORMAT = (
    "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"
)


def setup_logging(level: str | None = None):
    """
    Configures structured JSON logging for the screening services.

    Every record carries timestamp, level, logger name, message and the
    trace_id/span_id injected by ddtrace. The root logger and the Uvicorn
    loggers share a single stdout handler so API access logs and pipeline
    logs come out in the same format.

    Args:
        level: Log level name. Defaults to the LOG_LEVEL environment
            variable, or INFO when unset.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()

    formatter = jsonlogger.JsonFormatter(_LOG_FORMAT)
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level_name)
    root_logger.handlers = []
    root_logger.addHandler(stream_handler)

    for logger_name in ["uvicorn", "uvicorn.access", "uvicorn.error"]:
        u_logger = logging.getLogger(logger_name)
        u_logger.setLevel(level_name)
        u_logger.handlers = []
        u_logger.addHandler(stream_handler)
        u_logger.propagate = False

    return root_logger
