"""Loguru setup for the SearchScape server and CLI.

Every sink writes to stderr or a file. With the stdio MCP transport, stdout
carries protocol frames only.

Example:
    from searchscape.logging import setup_logging

    setup_logging(level="DEBUG", json_output=True)

"""

import sys
from typing import Any

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<magenta>{extra[service]}</magenta> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def setup_logging(
    level: str = "INFO",
    json_output: bool = False,
    log_file: str | None = None,
    service: str = "searchscape",
) -> Any:
    """Replace loguru's sinks with the SearchScape ones.

    Args:
        level: Minimum level for every sink.
        json_output: Serialize records as JSON lines, on stderr and in the log file.
        log_file: Optional path of a rotating log file.
        service: Name bound to every record as ``extra["service"]``. It shows up
            in the console column and in each JSON record.

    Returns:
        The loguru logger.

    """
    logger.remove()
    logger.configure(extra={"service": service})

    # serialize=True ignores the format string apart from "text".
    sink_format = "{message}" if json_output else CONSOLE_FORMAT
    logger.add(
        sys.stderr,
        format=sink_format,
        level=level,
        serialize=json_output,
        colorize=not json_output,
    )

    if log_file:
        logger.add(
            log_file,
            format=sink_format,
            level=level,
            serialize=json_output,
            rotation="10 MB",
            retention="7 days",
            compression="gz",
        )

    return logger
