# Standard library imports
import logging
import sys
from typing import Union


_NOISY_LOGGERS = ("pymongo", "motor", "uvicorn.access", "httpx")


def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    """
    Configure the root logger for the application.

    Call this once, before the first request is served. Existing root handlers
    are replaced so repeated calls (e.g. app reloads) do not duplicate output.

    Args:
        level: Logging level name ("DEBUG", "INFO", ...) or numeric level
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)

    for handler in list(root.handlers):
        root.removeHandler(handler)

    formatter = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    # Driver and server chatter only matters when something is wrong
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
