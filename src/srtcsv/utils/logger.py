import logging
from typing import Optional

_FMT = "[%(levelname)s] %(message)s"
_FILE_FMT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: str = "srtcsv") -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers or "." in name:
        # child loggers propagate to the configured "srtcsv" root
        return logger
    logger.setLevel(logging.INFO)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FMT))
    logger.addHandler(handler)
    return logger


def configure_logging(
    *,
    logger_name: str = "srtcsv",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
    log_path: Optional[str] = None,
) -> logging.Logger:
    """
    Process-level logging baseline.

    - console handler -> stderr (stdout is reserved for records)
    - optional file handler -> log_path
    Calling it again replaces the handlers instead of stacking them.
    """
    logger = logging.getLogger(logger_name)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    console = logging.StreamHandler()
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(_FMT))
    logger.addHandler(console)

    level = console_level
    if log_path:
        fh = logging.FileHandler(log_path, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FILE_FMT))
        logger.addHandler(fh)
        level = min(level, file_level)

    logger.setLevel(level)
    logger.propagate = False
    return logger


def parse_level(value: str) -> int:
    level = logging.getLevelName((value or "").strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"unknown log level: {value!r}")
    return level
