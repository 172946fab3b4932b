"""Logging setup for Filament MCP server.

stdout carries the MCP stdio transport, so records only ever go to a
log file (and stderr for warnings when the file is disabled).
"""

import logging
from logging.handlers import RotatingFileHandler

from filament_mcp.config import LogConfig

LOGGER_NAME = "filament-mcp"

_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"


def configure_logging(config: LogConfig) -> logging.Logger:
    """Build the `filament-mcp` logger from an explicit config.

    Handlers installed by a previous call are replaced, so calling this
    again with a different config takes effect immediately.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(getattr(logging, config.level, logging.INFO))
    logger.propagate = False
    formatter = logging.Formatter(_FORMAT)

    if config.enabled:
        config.file_path.parent.mkdir(parents=True, exist_ok=True)
        # The file is rolled over once it reaches max_bytes
        file_handler = RotatingFileHandler(
            config.file_path,
            maxBytes=config.max_bytes,
            backupCount=1,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    else:
        stderr_handler = logging.StreamHandler()
        stderr_handler.setLevel(logging.WARNING)
        stderr_handler.setFormatter(formatter)
        logger.addHandler(stderr_handler)

    return logger
