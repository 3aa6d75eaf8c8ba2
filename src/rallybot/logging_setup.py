import logging
import sys
from logging.handlers import RotatingFileHandler

import colorlog

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    console = colorlog.StreamHandler(stream=sys.stdout)
    console.setFormatter(
        colorlog.ColoredFormatter(
            "%(log_color)s" + LOG_FORMAT,
            log_colors={
                "DEBUG": "cyan",
                "INFO": "white",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "bold_red",
            },
        )
    )
    handlers: list[logging.Handler] = [console]

    if log_file:
        file_handler = RotatingFileHandler(log_file, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handlers.append(file_handler)

    root = logging.getLogger()
    for existing_handler in list(root.handlers):
        root.removeHandler(existing_handler)
        existing_handler.close()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    for handler in handlers:
        root.addHandler(handler)

    # Scorer output is the useful part of DEBUG; keep the libraries quieter.
    if root.level <= logging.DEBUG:
        for noisy in ("discord", "asyncpg"):
            logging.getLogger(noisy).setLevel(logging.INFO)
